# This import from future (theoretically) enables sphinx_autodoc_typehints to handle type aliases better
from __future__ import annotations  # pylint: disable=unused-variable

import logging
from types import TracebackType
from typing import Optional, Type, TypeVar

from .encoding import zeroize
from .exceptions import StreamClosedException
from .pbkdf2 import (
    DEFAULT_ITERATIONS,
    DEFAULT_PRF,
    PRFLike,
    Prepared,
    check_block_count,
    check_length,
    f,
    prepare
)
from .types import PBKDF2Parameters, StringOrBytes


__all__ = [  # pylint: disable=unused-variable
    "PBKDF2Reader",
    "ReaderState"
]


_log = logging.getLogger(__name__)

PBKDF2ReaderTypeT = TypeVar("PBKDF2ReaderTypeT", bound="PBKDF2Reader")


class ReaderState:
    """
    The mutable state of a :class:`PBKDF2Reader`, owned by exactly one reader. ``parameters`` is ``None`` once
    the reader is closed.
    """

    def __init__(self, parameters: Prepared) -> None:
        self.parameters: Optional[Prepared] = parameters
        self.next_index = 1
        self.leftover = bytearray()
        self.block_size: Optional[int] = None
        self.position = 0

    @property
    def closed(self) -> bool:
        """
        Returns:
            Whether the state was released.
        """

        return self.parameters is None

    def release(self) -> None:
        """
        Drop passphrase, salt and PRF and clear the leftover bytes.
        """

        self.parameters = None
        zeroize(self.leftover)


class PBKDF2Reader:
    """
    Reads the PBKDF2 key stream of a passphrase and a salt incrementally, as if reading from a file. Key bytes
    are produced one block at a time; bytes of the last block that were not requested yet are kept for the
    next call to :meth:`read`. Any sequence of reads returns the same bytes as a single call to
    :func:`~pbkdf2stream.pbkdf2.derive` for the total length.

    A reader is not safe for concurrent use from multiple threads without external synchronization.
    """

    def __init__(
        self,
        passphrase: StringOrBytes,
        salt: StringOrBytes,
        iterations: int = DEFAULT_ITERATIONS,
        prf: PRFLike = DEFAULT_PRF
    ) -> None:
        """
        Args:
            passphrase: The passphrase, as raw bytes or UTF-8 text.
            salt: The salt, as raw bytes or UTF-8 text.
            iterations: The number of PRF invocations per block.
            prf: The pseudorandom function, see :func:`~pbkdf2stream.pbkdf2.resolve_prf`. Defaults to
                HMAC-SHA-256.

        Raises:
            InvalidEncodingException: if passphrase or salt are invalid.
            InvalidInputException: if the iteration count is not an integer.
            OutOfRangeException: if the iteration count is out of range.
            UnknownPRFException: if the PRF can not be resolved.
        """

        prepared = prepare(passphrase, salt, iterations, prf)

        self.__state = ReaderState(prepared)

        _log.debug(
            "Opened a key stream using %d iterations of %s.",
            prepared.iterations,
            prepared.prf.identifier or "a custom PRF"
        )

    def __enter__(self: PBKDF2ReaderTypeT) -> PBKDF2ReaderTypeT:
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType]
    ) -> None:
        self.close()

    def read(self, length: int) -> bytes:
        """
        Read the next bytes of the key stream.

        Args:
            length: The number of bytes to read.

        Returns:
            ``length`` key bytes, continuing where the previous read left off.

        Raises:
            StreamClosedException: if the reader was closed.
            InvalidInputException: if the length is not a positive integer.
            DerivedKeyTooLongException: if the key stream would have to exceed the maximum block index.

        Note:
            If an exception is raised, the state of the reader is not modified.
        """

        state = self.__state
        parameters = state.parameters
        if parameters is None:
            raise StreamClosedException("The key stream is closed, no more bytes can be read.")

        length = check_length(length)

        # The state is only modified once all blocks have been produced
        buffer = bytearray(state.leftover)
        index = state.next_index
        block_size = state.block_size

        try:
            if block_size is not None:
                check_block_count(index, length - len(buffer), block_size)

            while len(buffer) < length:
                block = f(
                    parameters.passphrase,
                    parameters.salt,
                    parameters.iterations,
                    parameters.prf.calculate,
                    index
                )
                if block_size is None:
                    block_size = len(block)
                    check_block_count(index, length - len(buffer), block_size)

                buffer += block
                index += 1

            result = bytes(buffer[:length])
            leftover = buffer[length:]
        finally:
            zeroize(buffer)

        zeroize(state.leftover)
        state.leftover = leftover
        state.next_index = index
        state.block_size = block_size
        state.position += length

        return result

    def close(self) -> None:
        """
        Close the key stream. Passphrase, salt and PRF are dropped and the leftover key bytes are cleared.
        Closing a closed reader does nothing.
        """

        if not self.__state.closed:
            self.__state.release()
            _log.debug("Closed a key stream after %d bytes.", self.__state.position)

    @property
    def closed(self) -> bool:
        """
        Returns:
            Whether this reader was closed.
        """

        return self.__state.closed

    @property
    def position(self) -> int:
        """
        Returns:
            The number of key bytes read so far.
        """

        return self.__state.position

    @property
    def parameters(self) -> PBKDF2Parameters:
        """
        Returns:
            The parameters of this reader, with the length set to the number of key bytes read so far. Once at
            least one byte was read, the key bytes read so far equal the result of
            :func:`~pbkdf2stream.pbkdf2.derive_key` with these parameters. Before the first read, the length is
            0, which :func:`~pbkdf2stream.pbkdf2.derive_key` rejects.

        Raises:
            StreamClosedException: if the reader was closed.
        """

        parameters = self.__state.parameters
        if parameters is None:
            raise StreamClosedException("The key stream is closed, its parameters were released.")

        return PBKDF2Parameters(
            salt=parameters.salt,
            length=self.__state.position,
            iterations=parameters.iterations,
            prf=parameters.prf.identifier
        )
