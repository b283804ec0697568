# This import from future (theoretically) enables sphinx_autodoc_typehints to handle type aliases better
from __future__ import annotations  # pylint: disable=unused-variable

import json
from typing import Type, TypeVar, cast

from pydantic import ValidationError

from .exceptions import InvalidInputException
from .migrations import parse_derived_key_model
from .models import DerivedKeyModel, PBKDF2ParametersModel
from .types import JSONObject, PBKDF2Parameters


__all__ = [  # pylint: disable=unused-variable
    "DerivedKey"
]


DerivedKeyTypeT = TypeVar("DerivedKeyTypeT", bound="DerivedKey")


class DerivedKey:
    """
    A self-describing derivation result: the key bytes together with salt, length, iteration count and the
    OID of the pseudorandom function they were derived with. Everything but the passphrase is stored, thus
    storing the serialized form allows to derive the same key again given the passphrase.
    """

    def __init__(self) -> None:
        # Just the type definitions here
        self.__key: bytes
        self.__parameters: PBKDF2Parameters

    @classmethod
    def create(cls: Type[DerivedKeyTypeT], key: bytes, parameters: PBKDF2Parameters) -> DerivedKeyTypeT:
        """
        Args:
            key: The derived key bytes.
            parameters: The parameters the key was derived with.

        Returns:
            A configured instance of :class:`DerivedKey`.

        Raises:
            InvalidInputException: if the parameters are invalid, i.e. the length is not positive, the
                iteration count is outside of ``[1, 2^32 - 1]`` or the PRF is neither ``None`` nor the OID of a
                registered algorithm, or if the length does not match the key.
        """

        try:
            PBKDF2ParametersModel(
                salt=parameters.salt,
                length=parameters.length,
                iterations=parameters.iterations,
                prf=parameters.prf
            )
        except ValidationError as e:
            raise InvalidInputException(f"Invalid derivation parameters: {e}") from e

        if len(key) != parameters.length:
            raise InvalidInputException(
                f"The key consists of {len(key)} bytes, but the parameters describe a key of"
                f" {parameters.length} bytes."
            )

        self = cls()
        self.__key = key
        self.__parameters = parameters

        return self

    @property
    def model(self) -> DerivedKeyModel:
        """
        Returns:
            This :class:`DerivedKey` as a pydantic model.
        """

        return DerivedKeyModel(
            key=self.__key,
            parameters=PBKDF2ParametersModel(
                salt=self.__parameters.salt,
                length=self.__parameters.length,
                iterations=self.__parameters.iterations,
                prf=self.__parameters.prf
            )
        )

    @property
    def json(self) -> JSONObject:
        """
        Returns:
            This :class:`DerivedKey` as a JSON-serializable Python object.
        """

        return cast(JSONObject, json.loads(self.model.model_dump_json()))

    @classmethod
    def from_model(cls: Type[DerivedKeyTypeT], model: DerivedKeyModel) -> DerivedKeyTypeT:
        """
        Args:
            model: The pydantic model holding a :class:`DerivedKey`, as produced by :attr:`model`.

        Returns:
            The restored instance of :class:`DerivedKey`.

        Warning:
            Migrations are not provided via the :attr:`model`/:meth:`from_model` API. Use
            :attr:`json`/:meth:`from_json` instead.
        """

        return cls.create(model.key, PBKDF2Parameters(
            salt=model.parameters.salt,
            length=model.parameters.length,
            iterations=model.parameters.iterations,
            prf=model.parameters.prf
        ))

    @classmethod
    def from_json(cls: Type[DerivedKeyTypeT], serialized: JSONObject) -> DerivedKeyTypeT:
        """
        Args:
            serialized: A JSON-serializable Python object holding a :class:`DerivedKey`, as produced by
                :attr:`json`.

        Returns:
            The restored instance of :class:`DerivedKey`.
        """

        return cls.from_model(parse_derived_key_model(serialized))

    @property
    def key(self) -> bytes:
        """
        Returns:
            The derived key bytes.
        """

        return self.__key

    @property
    def parameters(self) -> PBKDF2Parameters:
        """
        Returns:
            The parameters the key was derived with.
        """

        return self.__parameters

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DerivedKey):
            return NotImplemented

        return self.__key == other.key and self.__parameters == other.parameters

    def __hash__(self) -> int:
        return hash((self.__key, self.__parameters))

    def __repr__(self) -> str:
        # Key bytes are never included
        return (
            f"DerivedKey(length={self.__parameters.length}, iterations={self.__parameters.iterations},"
            f" prf={self.__parameters.prf!r})"
        )
