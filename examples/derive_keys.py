import argparse
import json
import logging
import os

from pbkdf2stream import DerivedKey, PBKDF2Reader, derive, derive_key
from pbkdf2stream.recommended import algorithms


def main() -> None:
    """
    Derive a key from a passphrase, store it with its parameters and read the same key stream in chunks.
    """

    parser = argparse.ArgumentParser(description="Derive keys from a passphrase using PBKDF2.")
    parser.add_argument("passphrase", help="the passphrase to derive keys from")
    parser.add_argument("-l", "--length", dest="length", type=int, default=32,
                        help="the number of key bytes to derive")
    parser.add_argument("-n", "--iterations", dest="iterations", type=int, default=100000,
                        help="the number of PRF invocations per block")
    parser.add_argument("-p", "--prf", dest="prf", default="HMAC_SHA2_256",
                        choices=sorted(algorithms.NAME_TO_OID.keys()),
                        help="the pseudorandom function to use")
    parser.add_argument("-s", "--salt", dest="salt", default=None,
                        help="the salt, as hex; a random salt is generated if omitted")
    parser.add_argument("-v", "--verbose", dest="verbose", action="store_true",
                        help="enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    salt = os.urandom(16) if args.salt is None else bytes.fromhex(args.salt)

    derived_key = derive_key(args.passphrase, salt, args.length, iterations=args.iterations, prf=args.prf)
    serialized = json.dumps(derived_key.json)

    print(f"Key: {derived_key.key.hex()}")
    print(f"Record: {serialized}")

    # The stored record is enough to derive the key again, given the passphrase
    restored = DerivedKey.from_json(json.loads(serialized))
    assert derive(
        args.passphrase,
        restored.parameters.salt,
        restored.parameters.length,
        iterations=restored.parameters.iterations,
        prf=restored.parameters.prf
    ) == derived_key.key

    # Reading the stream in uneven chunks yields the same bytes
    with PBKDF2Reader(args.passphrase, salt, iterations=args.iterations, prf=args.prf) as reader:
        chunks = []
        while reader.position < args.length:
            chunks.append(reader.read(min(7, args.length - reader.position)))

    assert b"".join(chunks) == derived_key.key
    print(f"Read the same key in {len(chunks)} chunks.")


if __name__ == "__main__":
    main()
