from abc import abstractmethod

from .crypto_provider import HashFunction
from .crypto_provider_cryptography import CryptoProviderImpl
from .. import prf


__all__ = [  # pylint: disable=unused-variable
    "HMAC_SHA1",
    "HMAC_SHA2_224",
    "HMAC_SHA2_256",
    "HMAC_SHA2_384",
    "HMAC_SHA2_512",
    "HMAC_SHA3_224",
    "HMAC_SHA3_256",
    "HMAC_SHA3_384",
    "HMAC_SHA3_512",
    "PRF"
]


class PRF(prf.PRF):
    """
    This PRF implementation is HMAC (FIPS 198-1, RFC 2104) parameterized with a hash function. The PRF key is
    used as the HMAC key and the message as HMAC input. The output size equals the digest size of the hash
    function.

    https://www.rfc-editor.org/rfc/rfc8018#appendix-B.1.1
    """

    @staticmethod
    @abstractmethod
    def _get_hash_function() -> HashFunction:
        pass

    @classmethod
    def calculate(cls, key: bytes, message: bytes) -> bytes:
        return CryptoProviderImpl.hmac_calculate(key, cls._get_hash_function(), message)

    @classmethod
    def get_output_size(cls) -> int:
        return cls._get_hash_function().hash_size


# The class names double as the friendly names of the algorithm registry.
# pylint: disable=invalid-name


class HMAC_SHA1(PRF):
    """
    HMAC-SHA-1, the PRF of the RFC 6070 test vectors.
    """

    @staticmethod
    def _get_hash_function() -> HashFunction:
        return HashFunction.SHA_1


class HMAC_SHA2_224(PRF):  # pylint: disable=missing-class-docstring
    @staticmethod
    def _get_hash_function() -> HashFunction:
        return HashFunction.SHA_224


class HMAC_SHA2_256(PRF):
    """
    HMAC-SHA-256, the default PRF of this package.
    """

    @staticmethod
    def _get_hash_function() -> HashFunction:
        return HashFunction.SHA_256


class HMAC_SHA2_384(PRF):  # pylint: disable=missing-class-docstring
    @staticmethod
    def _get_hash_function() -> HashFunction:
        return HashFunction.SHA_384


class HMAC_SHA2_512(PRF):  # pylint: disable=missing-class-docstring
    @staticmethod
    def _get_hash_function() -> HashFunction:
        return HashFunction.SHA_512


class HMAC_SHA3_224(PRF):  # pylint: disable=missing-class-docstring
    @staticmethod
    def _get_hash_function() -> HashFunction:
        return HashFunction.SHA3_224


class HMAC_SHA3_256(PRF):  # pylint: disable=missing-class-docstring
    @staticmethod
    def _get_hash_function() -> HashFunction:
        return HashFunction.SHA3_256


class HMAC_SHA3_384(PRF):  # pylint: disable=missing-class-docstring
    @staticmethod
    def _get_hash_function() -> HashFunction:
        return HashFunction.SHA3_384


class HMAC_SHA3_512(PRF):  # pylint: disable=missing-class-docstring
    @staticmethod
    def _get_hash_function() -> HashFunction:
        return HashFunction.SHA3_512
