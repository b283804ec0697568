from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple, Type

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
from ..exceptions import UnknownPRFException
from ..prf import PRF


__all__ = [  # pylint: disable=unused-variable
    "NAME_TO_OID",
    "OID_TO_NAME",
    "PRFS",
    "get_prf",
    "identifier_of",
    "name_to_oid",
    "oid_to_name"
]


# Friendly name, OID, implementation
_ALGORITHMS: Tuple[Tuple[str, str, Type[PRF]], ...] = (
    ("HMAC_SHA1",     "1.3.6.1.5.5.8.1.2",       HMAC_SHA1),

    ("HMAC_SHA2_224", "1.2.840.113549.2.8",      HMAC_SHA2_224),
    ("HMAC_SHA2_256", "1.2.840.113549.2.9",      HMAC_SHA2_256),
    ("HMAC_SHA2_384", "1.2.840.113549.2.10",     HMAC_SHA2_384),
    ("HMAC_SHA2_512", "1.2.840.113549.2.11",     HMAC_SHA2_512),

    ("HMAC_SHA3_224", "2.16.840.1.101.3.4.2.13", HMAC_SHA3_224),
    ("HMAC_SHA3_256", "2.16.840.1.101.3.4.2.14", HMAC_SHA3_256),
    ("HMAC_SHA3_384", "2.16.840.1.101.3.4.2.15", HMAC_SHA3_384),
    ("HMAC_SHA3_512", "2.16.840.1.101.3.4.2.16", HMAC_SHA3_512)
)

NAME_TO_OID: Mapping[str, str] = MappingProxyType({ name: oid for name, oid, _ in _ALGORITHMS })
OID_TO_NAME: Mapping[str, str] = MappingProxyType({ oid: name for name, oid, _ in _ALGORITHMS })
PRFS: Mapping[str, Type[PRF]] = MappingProxyType({ name: impl for name, _, impl in _ALGORITHMS })


def name_to_oid(name: str) -> str:
    """
    Args:
        name: The friendly name of a registered algorithm, e.g. ``"HMAC_SHA2_256"``.

    Returns:
        The OID of the algorithm, e.g. ``"1.2.840.113549.2.9"``.

    Raises:
        UnknownPRFException: if no algorithm is registered under that name.
    """

    try:
        return NAME_TO_OID[name]
    except KeyError:
        raise UnknownPRFException(f"Unknown pseudorandom function name: {name!r}.") from None


def oid_to_name(oid: str) -> str:
    """
    Args:
        oid: The OID of a registered algorithm.

    Returns:
        The friendly name of the algorithm.

    Raises:
        UnknownPRFException: if no algorithm is registered under that OID.
    """

    try:
        return OID_TO_NAME[oid]
    except KeyError:
        raise UnknownPRFException(f"Unknown pseudorandom function OID: {oid!r}.") from None


def get_prf(identifier: str) -> Type[PRF]:
    """
    Args:
        identifier: The friendly name or the OID of a registered algorithm.

    Returns:
        The implementation of the algorithm.

    Raises:
        UnknownPRFException: if the identifier is neither a registered friendly name nor a registered OID.
    """

    name = OID_TO_NAME.get(identifier, identifier)

    try:
        return PRFS[name]
    except KeyError:
        raise UnknownPRFException(
            f"The pseudorandom function must be a callable or the friendly name or OID of a registered"
            f" algorithm, got {identifier!r}."
        ) from None


def identifier_of(prf: Any) -> Optional[str]:
    """
    Args:
        prf: A :class:`~pbkdf2stream.prf.PRF` subclass or a callable.

    Returns:
        The OID of the registered algorithm, if the argument is a registered implementation or its
        ``calculate`` method. ``None`` otherwise.
    """

    for _, oid, impl in _ALGORITHMS:
        if prf is impl or prf == impl.calculate:
            return oid

    return None
