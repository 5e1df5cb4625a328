"""Shared pydantic configuration for models that cross the API/JSON boundary."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ExchangeModel(BaseModel):
    """Immutable model serialized with camelCase keys (``boundingBox``, ...).

    Snake-case field names are still accepted on input so Python callers
    can construct models with keyword arguments.
    """
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        # NaN/Infinity are written as constants so from_json reads them back
        ser_json_inf_nan="constants",
    )
