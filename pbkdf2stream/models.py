from typing import Any, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator

from .exceptions import UnknownPRFException
from .recommended import algorithms


__all__ = [  # pylint: disable=unused-variable
    "DerivedKeyModel",
    "PBKDF2ParametersModel"
]


def _json_bytes_decoder(val: Any) -> bytes:
    """
    Decode bytes from a string according to the JSON specification. See
    https://github.com/samuelcolvin/pydantic/issues/3756 for details.

    Args:
        val: The value to type check and decode.

    Returns:
        The value decoded to bytes. If the value is bytes already, it is returned unmodified.

    Raises:
        ValueError: if the value is not correctly encoded.
    """

    if isinstance(val, bytes):
        return val
    if isinstance(val, str):
        return bytes(map(ord, val))
    raise ValueError("bytes fields must be encoded as bytes or str.")


def _json_bytes_encoder(val: bytes) -> str:
    """
    Encode bytes as a string according to the JSON specification. See
    https://github.com/samuelcolvin/pydantic/issues/3756 for details.

    Args:
        val: The bytes to encode.

    Returns:
        The encoded bytes.
    """

    return "".join(map(chr, val))


class PBKDF2ParametersModel(BaseModel):
    """
    The model representing the parameters of a derivation, as described by
    :class:`~pbkdf2stream.types.PBKDF2Parameters`.
    """

    version: str = "1.0.0"
    salt: bytes
    length: int = Field(ge=1)
    iterations: int = Field(ge=1, le=2 ** 32 - 1)
    prf: Optional[str] = None

    @field_validator("prf")
    @classmethod
    def check_prf(cls, val: Optional[str]) -> Optional[str]:
        """
        Accept ``None`` for a custom PRF, or the OID of a registered algorithm.
        """

        if val is not None:
            try:
                algorithms.oid_to_name(val)
            except UnknownPRFException as e:
                raise ValueError(str(e)) from e

        return val

    # Workaround for correct serialization of bytes, see :func:`_json_bytes_decoder` above for details.
    @field_validator("salt", mode="before")
    @classmethod
    def decode_bytes(cls, val: Any) -> bytes:  # pylint: disable=missing-function-docstring
        return _json_bytes_decoder(val)

    @field_serializer("salt", when_used="json")
    def encode_bytes(self, val: bytes) -> str:  # pylint: disable=missing-function-docstring
        return _json_bytes_encoder(val)


class DerivedKeyModel(BaseModel):
    """
    The model representing a :class:`~pbkdf2stream.derived_key.DerivedKey`, i.e. the key bytes together with
    the parameters they were derived with.
    """

    version: str = "1.0.0"
    key: bytes
    parameters: PBKDF2ParametersModel

    # Workaround for correct serialization of bytes, see :func:`_json_bytes_decoder` above for details.
    @field_validator("key", mode="before")
    @classmethod
    def decode_bytes(cls, val: Any) -> bytes:  # pylint: disable=missing-function-docstring
        return _json_bytes_decoder(val)

    @field_serializer("key", when_used="json")
    def encode_bytes(self, val: bytes) -> str:  # pylint: disable=missing-function-docstring
        return _json_bytes_encoder(val)
