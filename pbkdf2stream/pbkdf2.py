# This import from future (theoretically) enables sphinx_autodoc_typehints to handle type aliases better
from __future__ import annotations  # pylint: disable=unused-variable

from inspect import isabstract
import logging
from typing import Any, NamedTuple, Type, Union
from typing_extensions import TypeAlias

from .derived_key import DerivedKey
from .encoding import text_to_bytes, uint_to_big_endian_bytes, zeroize
from .exceptions import (
    DerivedKeyTooLongException,
    InvalidInputException,
    OutOfRangeException,
    UnknownPRFException
)
from .prf import PRF
from .recommended import HMAC_SHA2_256, algorithms
from .types import PBKDF2Parameters, PRFCallable, ResolvedPRF, StringOrBytes


__all__ = [  # pylint: disable=unused-variable
    "DEFAULT_ITERATIONS",
    "DEFAULT_PRF",
    "MAX_BLOCK_INDEX",
    "MAX_ITERATIONS",
    "PRFLike",
    "Prepared",
    "check_block_count",
    "check_iterations",
    "check_length",
    "derive",
    "derive_key",
    "f",
    "prepare",
    "resolve_prf"
]


_log = logging.getLogger(__name__)

PRFLike: TypeAlias = Union[Type[PRF], PRFCallable, str]

DEFAULT_ITERATIONS = 1000
DEFAULT_PRF: Type[PRF] = HMAC_SHA2_256

MAX_ITERATIONS = 2 ** 32 - 1
MAX_BLOCK_INDEX = 2 ** 32 - 1


class Prepared(NamedTuple):
    """
    Normalized and validated derivation parameters, shared by :func:`derive`, :func:`derive_key` and
    :class:`~pbkdf2stream.reader.PBKDF2Reader`.
    """

    passphrase: bytes
    salt: bytes
    iterations: int
    prf: ResolvedPRF


def resolve_prf(prf: PRFLike) -> ResolvedPRF:
    """
    Args:
        prf: A :class:`~pbkdf2stream.prf.PRF` subclass, a callable taking key and message and returning bytes,
            or the friendly name or OID of a registered algorithm.

    Returns:
        The PRF in callable form, together with its OID if it is a registered algorithm.

    Raises:
        UnknownPRFException: if the argument is an abstract PRF class, an unregistered identifier or not
            callable at all.
    """

    if isinstance(prf, str):
        impl = algorithms.get_prf(prf)
        return ResolvedPRF(impl.calculate, algorithms.identifier_of(impl))

    if isinstance(prf, type) and issubclass(prf, PRF):
        if isabstract(prf):
            raise UnknownPRFException(f"The PRF class {prf.__name__} is abstract and can not be used.")

        return ResolvedPRF(prf.calculate, algorithms.identifier_of(prf))

    if callable(prf):
        return ResolvedPRF(prf, algorithms.identifier_of(prf))

    raise UnknownPRFException(
        "The pseudorandom function must be a callable or the friendly name or OID of a registered algorithm,"
        f" got an instance of {type(prf).__name__}."
    )


def _check_integer(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputException(f"The {name} must be an integer, got {value!r}.")

    return value


def check_length(length: Any) -> int:
    """
    Args:
        length: A requested number of bytes.

    Returns:
        The length, if it is a positive integer.

    Raises:
        InvalidInputException: otherwise.
    """

    if _check_integer(length, "length") < 1:
        raise InvalidInputException(f"The length must be at least 1, got {length}.")

    return length


def check_iterations(iterations: Any) -> int:
    """
    Args:
        iterations: An iteration count.

    Returns:
        The iteration count, if it is an integer within ``[1, 2^32 - 1]``.

    Raises:
        InvalidInputException: if the iteration count is not an integer.
        OutOfRangeException: if the iteration count is out of range.
    """

    if not 1 <= _check_integer(iterations, "iteration count") <= MAX_ITERATIONS:
        raise OutOfRangeException(
            f"The iteration count must be at least 1 and can not exceed 2^32-1 (0xFFFFFFFF), got {iterations}."
        )

    return iterations


def check_block_count(first_index: int, length: int, block_size: int) -> None:
    """
    Make sure that ``length`` bytes can be produced from blocks starting at ``first_index``, without exceeding
    the maximum block index.

    Args:
        first_index: The index of the first block to produce.
        length: The number of bytes to produce.
        block_size: The output size of the PRF.

    Raises:
        InvalidInputException: if the PRF produced empty output.
        DerivedKeyTooLongException: if the maximum block index would be exceeded.
    """

    if block_size < 1:
        raise InvalidInputException("The pseudorandom function must not return empty output.")

    blocks = -(-length // block_size)
    if first_index - 1 + blocks > MAX_BLOCK_INDEX:
        raise DerivedKeyTooLongException(
            f"Derived key too long: producing {length} more bytes would require block indexes beyond 2^32-1."
        )


def prepare(passphrase: StringOrBytes, salt: StringOrBytes, iterations: int, prf: PRFLike) -> Prepared:
    """
    Normalize and validate the parameters of a derivation.

    Args:
        passphrase: The passphrase, as raw bytes or text.
        salt: The salt, as raw bytes or text.
        iterations: The iteration count.
        prf: The pseudorandom function, see :func:`resolve_prf`.

    Returns:
        The parameters in the form consumed by :func:`f`.

    Raises:
        InvalidEncodingException: if passphrase or salt are invalid.
        InvalidInputException: if the iteration count is not an integer.
        OutOfRangeException: if the iteration count is out of range.
        UnknownPRFException: if the PRF can not be resolved.
    """

    return Prepared(
        passphrase=text_to_bytes(passphrase),
        salt=text_to_bytes(salt),
        iterations=check_iterations(iterations),
        prf=resolve_prf(prf)
    )


def f(passphrase: bytes, salt: bytes, iterations: int, prf: PRFCallable, index: int) -> bytes:
    """
    The block function of PBKDF2. The first PRF invocation takes the salt followed by the block index encoded
    as a 32 bit big-endian integer, each following invocation takes the output of the previous one. The
    outputs of all ``iterations`` invocations are XORed together.

    Args:
        passphrase: The passphrase, used as the PRF key.
        salt: The salt.
        iterations: The number of PRF invocations.
        prf: The pseudorandom function.
        index: The index of the block, starting at 1.

    Returns:
        The block, as many bytes as the PRF outputs.

    Raises:
        InvalidInputException: if the index is not an integer.
        DerivedKeyTooLongException: if the index is outside of ``[1, 2^32 - 1]``.

    https://www.rfc-editor.org/rfc/rfc8018#section-5.2
    """

    if not 1 <= _check_integer(index, "block index") <= MAX_BLOCK_INDEX:
        raise DerivedKeyTooLongException(
            f"Derived key too long: the block index must be within [1, 2^32-1], got {index}."
        )

    u = prf(passphrase, salt + uint_to_big_endian_bytes(index))
    if iterations == 1:
        return u

    result = int.from_bytes(u, "big")
    for _ in range(iterations - 1):
        u = prf(passphrase, u)
        result ^= int.from_bytes(u, "big")

    return result.to_bytes(len(u), "big")


def _derive(prepared: Prepared, length: int) -> bytes:
    _log.debug(
        "Deriving %d bytes using %d iterations of %s.",
        length,
        prepared.iterations,
        prepared.prf.identifier or "a custom PRF"
    )

    accumulator = bytearray()
    index = 1

    try:
        while len(accumulator) < length:
            block = f(prepared.passphrase, prepared.salt, prepared.iterations, prepared.prf.calculate, index)
            if index == 1:
                check_block_count(1, length, len(block))

            accumulator += block
            index += 1

        return bytes(accumulator[:length])
    finally:
        zeroize(accumulator)


def derive(
    passphrase: StringOrBytes,
    salt: StringOrBytes,
    length: int,
    iterations: int = DEFAULT_ITERATIONS,
    prf: PRFLike = DEFAULT_PRF
) -> bytes:
    """
    Derive a key from a passphrase and a salt using PBKDF2.

    Args:
        passphrase: The passphrase, as raw bytes or UTF-8 text.
        salt: The salt, as raw bytes or UTF-8 text.
        length: The number of key bytes to derive.
        iterations: The number of PRF invocations per block.
        prf: The pseudorandom function, see :func:`resolve_prf`. Defaults to HMAC-SHA-256.

    Returns:
        ``length`` key bytes.

    Raises:
        InvalidEncodingException: if passphrase or salt are invalid.
        InvalidInputException: if length or iteration count are not positive integers.
        OutOfRangeException: if the iteration count exceeds 2^32-1.
        UnknownPRFException: if the PRF can not be resolved.
        DerivedKeyTooLongException: if the length exceeds (2^32-1) times the PRF output size.
    """

    length = check_length(length)
    prepared = prepare(passphrase, salt, iterations, prf)

    return _derive(prepared, length)


def derive_key(
    passphrase: StringOrBytes,
    salt: StringOrBytes,
    length: int,
    iterations: int = DEFAULT_ITERATIONS,
    prf: PRFLike = DEFAULT_PRF
) -> DerivedKey:
    """
    Like :func:`derive`, but returns the key together with the parameters it was derived with.

    Returns:
        The derived key, including salt, length, iteration count and the OID of the PRF. The OID is ``None``
        if a custom PRF was used.
    """

    length = check_length(length)
    prepared = prepare(passphrase, salt, iterations, prf)

    return DerivedKey.create(_derive(prepared, length), PBKDF2Parameters(
        salt=prepared.salt,
        length=length,
        iterations=prepared.iterations,
        prf=prepared.prf.identifier
    ))
