from abc import ABC, abstractmethod


__all__ = [  # pylint: disable=unused-variable
    "PRF"
]


class PRF(ABC):
    """
    A pseudorandom function (PRF) takes a key and a message and deterministically returns output of a fixed
    length, indistinguishable from random as long as the key is unknown. PBKDF2 keys the PRF with the
    passphrase. The usual choice is an HMAC over a hash function, see
    :mod:`pbkdf2stream.recommended.prf_hmac`.

    Subclasses are passed around as types, i.e. ``Type[PRF]``. Wherever a PRF is accepted, a plain callable
    taking key and message and returning bytes is accepted too.

    https://www.rfc-editor.org/rfc/rfc8018#appendix-B.1
    """

    @staticmethod
    @abstractmethod
    def calculate(key: bytes, message: bytes) -> bytes:
        """
        Args:
            key: The PRF key.
            message: The input message.

        Returns:
            The PRF output, :meth:`get_output_size` bytes.
        """

    @staticmethod
    @abstractmethod
    def get_output_size() -> int:
        """
        Returns:
            The byte size of the output of :meth:`calculate`, the block size of PBKDF2 using this PRF.
        """
