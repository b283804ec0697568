from .crypto_provider import HashFunction
from .prf_hmac import (
    HMAC_SHA1,
    HMAC_SHA2_224,
    HMAC_SHA2_256,
    HMAC_SHA2_384,
    HMAC_SHA2_512,
    HMAC_SHA3_224,
    HMAC_SHA3_256,
    HMAC_SHA3_384,
    HMAC_SHA3_512
)


# Fun:
# https://github.com/PyCQA/pylint/issues/6006
# https://github.com/python/mypy/issues/10198
__all__ = [  # pylint: disable=unused-variable
    # .crypto_provider
    "HashFunction",

    # .prf_hmac
    "HMAC_SHA1",
    "HMAC_SHA2_224",
    "HMAC_SHA2_256",
    "HMAC_SHA2_384",
    "HMAC_SHA2_512",
    "HMAC_SHA3_224",
    "HMAC_SHA3_256",
    "HMAC_SHA3_384",
    "HMAC_SHA3_512"
]
