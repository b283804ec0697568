from abc import ABC, abstractmethod
import enum
from typing_extensions import assert_never


__all__ = [  # pylint: disable=unused-variable
    "CryptoProvider",
    "HashFunction"
]


@enum.unique
class HashFunction(enum.Enum):
    """
    Enumeration of the hash functions that can parameterize the HMAC-based pseudorandom functions in
    :mod:`pbkdf2stream.recommended.prf_hmac`: SHA-1, the SHA-2 family and the SHA-3 family.
    """

    SHA_1: str = "SHA_1"
    SHA_224: str = "SHA_224"
    SHA_256: str = "SHA_256"
    SHA_384: str = "SHA_384"
    SHA_512: str = "SHA_512"
    SHA3_224: str = "SHA3_224"
    SHA3_256: str = "SHA3_256"
    SHA3_384: str = "SHA3_384"
    SHA3_512: str = "SHA3_512"

    @property
    def hash_size(self) -> int:
        """
        Returns:
            The byte size of the hashes produced by this hash function.
        """

        if self is HashFunction.SHA_1:
            return 20
        if self is HashFunction.SHA_224 or self is HashFunction.SHA3_224:
            return 28
        if self is HashFunction.SHA_256 or self is HashFunction.SHA3_256:
            return 32
        if self is HashFunction.SHA_384 or self is HashFunction.SHA3_384:
            return 48
        if self is HashFunction.SHA_512 or self is HashFunction.SHA3_512:
            return 64

        return assert_never(self)


class CryptoProvider(ABC):
    """
    Abstraction of the cryptographic operations needed by this package to allow for different backend
    implementations.
    """

    @staticmethod
    @abstractmethod
    def hmac_calculate(key: bytes, hash_function: HashFunction, data: bytes) -> bytes:
        """
        Args:
            key: The authentication key.
            hash_function: The hash function to parameterize the HMAC with.
            data: The data to authenticate.

        Returns:
            The authentication tag.
        """
