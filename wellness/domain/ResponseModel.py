"""Base class and decoding helpers for remote service response bodies.

Every field of every response entity is optional: a partially populated body
decodes into a model with empty defaults. Only a body of the wrong top-level
JSON type, or a field whose type cannot be coerced, is a DecodeFailure.
"""
from typing import Any, List, Type, TypeVar, Union, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from wellness.utilities.errors import DecodeFailure

M = TypeVar("M", bound="ResponseModel")

# display-only values: ints stay ints, floats stay floats, text such as "4.5/5" is kept as sent
Scalar = Optional[Union[int, float, str]]

_STRING_LIST = TypeAdapter(List[str])


class ResponseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


def none_as_empty_list(value: Any):
    return [] if value is None else value


def none_as_empty_dict(value: Any):
    return {} if value is None else value


def decode(model: Type[M], data: Any) -> M:
    """Decode one JSON object into ``model``."""
    if not isinstance(data, dict):
        raise DecodeFailure(f"Expected an object for {model.__name__}, got {type(data).__name__}")
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DecodeFailure(f"Malformed {model.__name__}: {e.error_count()} invalid field(s)") from e


def decode_list(model: Type[M], data: Any) -> List[M]:
    """Decode a JSON array of objects into a list of ``model``."""
    if not isinstance(data, list):
        raise DecodeFailure(f"Expected a list of {model.__name__}, got {type(data).__name__}")
    return [decode(model, item) for item in data]


def decode_strings(data: Any) -> List[str]:
    if not isinstance(data, list):
        raise DecodeFailure(f"Expected a list of strings, got {type(data).__name__}")
    try:
        return _STRING_LIST.validate_python(data)
    except ValidationError as e:
        raise DecodeFailure("Malformed string list") from e


__all__ = [
    "Scalar", "ResponseModel", "none_as_empty_list", "none_as_empty_dict",
    "decode", "decode_list", "decode_strings",
]
