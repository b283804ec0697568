from .exceptions import InvalidEncodingException, InvalidInputException
from .types import StringOrBytes


__all__ = [  # pylint: disable=unused-variable
    "text_to_bytes",
    "uint_to_big_endian_bytes",
    "zeroize"
]


def text_to_bytes(value: StringOrBytes) -> bytes:
    """
    Args:
        value: Raw bytes or text.

    Returns:
        The value itself if it is of type :class:`bytes`, a copy as :class:`bytes` for other binary buffers and
        the UTF-8 encoding for text.

    Raises:
        InvalidEncodingException: if the value is text that can not be encoded as UTF-8 (e.g. because it
            contains lone surrogates), or neither text nor binary.
    """

    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        try:
            return value.encode("UTF-8")
        except UnicodeEncodeError as e:
            raise InvalidEncodingException("The text is not a valid UTF-8 string.") from e

    raise InvalidEncodingException(
        f"Expected a valid UTF-8 string or raw bytes, got an instance of {type(value).__name__}."
    )


def uint_to_big_endian_bytes(num: int, min_length: int = 4) -> bytes:
    """
    Encode an unsigned integer in big-endian byte order, using as few bytes as possible but at least
    ``min_length``. Used to encode the block index appended to the salt.

    Args:
        num: The number to encode.
        min_length: The minimum number of bytes in the result.

    Returns:
        The encoded number, left-padded with zero bytes.

    Raises:
        InvalidInputException: if the number or the minimum length is not a non-negative integer.
    """

    for name, value in (("number", num), ("minimum length", min_length)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInputException(f"The {name} to encode must be an integer, got {value!r}.")
        if value < 0:
            raise InvalidInputException(f"The {name} to encode must not be negative, got {value}.")

    return num.to_bytes(max(min_length, (num.bit_length() + 7) // 8, 1), "big")


def zeroize(buffer: bytearray) -> None:
    """
    Overwrite a buffer holding key material with zeros and empty it.

    Args:
        buffer: The buffer to clear.
    """

    buffer[:] = bytes(len(buffer))
    del buffer[:]
