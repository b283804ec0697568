__all__ = [  # pylint: disable=unused-variable
    "DerivedKeyTooLongException",
    "InvalidEncodingException",
    "InvalidInputException",
    "OutOfRangeException",
    "PBKDF2Exception",
    "StreamClosedException",
    "UnknownPRFException"
]


class PBKDF2Exception(Exception):
    """
    Base class of all exceptions raised by this package. Exceptions raised by a pseudorandom function are
    propagated unmodified and do not derive from this class.
    """


class InvalidInputException(PBKDF2Exception, ValueError):
    """
    Raised if a length, an iteration count, a block index or a number to encode is not an integer, or is zero
    or negative where a positive value is required.
    """


class OutOfRangeException(InvalidInputException):
    """
    Raised if an iteration count lies outside of the range ``[1, 2^32 - 1]``.
    """


class InvalidEncodingException(PBKDF2Exception, ValueError):
    """
    Raised if a passphrase or salt is neither raw bytes nor text that can be encoded as UTF-8.
    """


class UnknownPRFException(PBKDF2Exception, LookupError):
    """
    Raised if a pseudorandom function argument is neither callable nor a registered friendly name or OID.
    """


class DerivedKeyTooLongException(PBKDF2Exception, ValueError):
    """
    Raised if producing the requested number of bytes would require a block index beyond ``2^32 - 1``.
    """


class StreamClosedException(PBKDF2Exception):
    """
    Raised by :meth:`~pbkdf2stream.reader.PBKDF2Reader.read` after the reader was closed.
    """
