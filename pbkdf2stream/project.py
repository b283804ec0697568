__all__ = [ "project" ]

project = {
    "name"         : "PBKDF2Stream",
    "description"  : "A Python implementation of PBKDF2 with a resumable, stream-like key reader.",
    "url"          : "https://github.com/pbkdf2stream/python-pbkdf2stream",
    "year"         : "2026",
    "author"       : "The PBKDF2Stream Authors",
    "author_email" : "maintainers@pbkdf2stream.dev",
    "categories"   : [
        "Topic :: Security :: Cryptography"
    ]
}
