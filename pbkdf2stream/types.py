from __future__ import annotations

from typing import Callable, List, Mapping, NamedTuple, Optional, Union
from typing_extensions import TypeAlias


__all__ = [
    "JSONObject",
    "JSONType",
    "PBKDF2Parameters",
    "PRFCallable",
    "ResolvedPRF",
    "StringOrBytes"
]


################
# Type Aliases #
################

JSONType: TypeAlias = Union[Mapping[str, "JSONType"], List["JSONType"], str, int, float, bool, None]
JSONObject: TypeAlias = Mapping[str, "JSONType"]

PRFCallable: TypeAlias = Callable[[bytes, bytes], bytes]
StringOrBytes: TypeAlias = Union[str, bytes, bytearray, memoryview]


############################
# Structures (NamedTuples) #
############################

class ResolvedPRF(NamedTuple):
    """
    A pseudorandom function in callable form, together with the OID identifying it, if it is a registered
    algorithm.
    """

    calculate: PRFCallable
    identifier: Optional[str]


class PBKDF2Parameters(NamedTuple):
    """
    The parameters a key was derived with, everything but the passphrase. The ``prf`` field holds the OID of
    the pseudorandom function, or ``None`` if a custom callable was used.
    """

    salt: bytes
    length: int
    iterations: int
    prf: Optional[str]
