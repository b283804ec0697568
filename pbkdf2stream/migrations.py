# This import from future (theoretically) enables sphinx_autodoc_typehints to handle type aliases better
from __future__ import annotations  # pylint: disable=unused-variable

from typing import cast

from pydantic import BaseModel, ValidationError

from .exceptions import PBKDF2Exception
from .models import DerivedKeyModel
from .types import JSONObject


__all__ = [  # pylint: disable=unused-variable
    "InconsistentSerializationException",
    "parse_derived_key_model"
]


class InconsistentSerializationException(PBKDF2Exception):
    """
    Raised by :func:`parse_derived_key_model` in case the serialized data carries a version this package
    does not know how to parse, or does not describe a valid derived key.
    """


def parse_derived_key_model(serialized: JSONObject) -> DerivedKeyModel:
    """
    Parse a serialized :class:`~pbkdf2stream.derived_key.DerivedKey` instance, as returned by
    :attr:`~pbkdf2stream.derived_key.DerivedKey.json`, into the most recent pydantic model available for the
    class. Perform migrations in case the pydantic models were updated.

    Args:
        serialized: The serialized instance.

    Returns:
        The model, which can be used to restore the instance using
        :meth:`~pbkdf2stream.derived_key.DerivedKey.from_model`.

    Raises:
        InconsistentSerializationException: if the version of the serialized data is unknown, or the data
            violates the constraints of the model.
    """

    # Each model has a Python string "version" in its root. Use that to find the model that the data was
    # serialized from.
    version = cast(str, serialized.get("version"))
    try:
        model_class = {
            "1.0.0": DerivedKeyModel
        }[version]
    except KeyError:
        raise InconsistentSerializationException(
            f"Unknown serialization format version: {version!r}."
        ) from None

    try:
        model: BaseModel = model_class.model_validate(serialized)
    except ValidationError as e:
        raise InconsistentSerializationException(f"Invalid serialized derived key: {e}") from e

    # Once all migrations have been applied, the model should be an instance of the most recent model
    assert isinstance(model, DerivedKeyModel)

    return model
