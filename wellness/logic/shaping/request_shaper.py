"""Request shaping: raw form values -> immutable request payload.

Rules per field type:
  - string / enum: passed through unchanged
  - number: parsed; blank + optional -> key omitted, blank + required -> sent as-is,
    unparseable -> NaN, sent as null (the remote service is the error authority)
  - integer: like number, truncated to int
  - csv: split on ',', trimmed, empties dropped, order kept; blank -> []

shape() never raises.
"""
from __future__ import annotations
import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List


class FieldType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    ENUM = "enum"
    CSV = "csvList"


@dataclass(frozen=True)
class FieldSpec:
    type: FieldType = FieldType.STRING
    optional: bool = False


# field name -> FieldSpec
Schema = Mapping[str, FieldSpec]


class RequestPayload(Mapping):
    """Read-only snapshot of a shaped form.

    Sequences are stored as tuples so nothing here aliases the form's storage;
    ``as_json`` hands out a fresh dict on every call.
    """

    def __init__(self, data: Mapping[str, Any]):
        self._data: Dict[str, Any] = {
            k: tuple(v) if isinstance(v, (list, tuple)) else v for k, v in data.items()
        }

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def as_json(self) -> Dict[str, Any]:
        """JSON-ready copy. NaN and infinities go out as null."""
        return {k: _json_value(v) for k, v in self._data.items()}

    def __repr__(self) -> str:
        return f"RequestPayload({self._data!r})"


def _json_value(value: Any) -> Any:
    if isinstance(value, tuple):
        return list(value)
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def split_csv(raw: Any) -> List[str]:
    """'a, b ,,c' -> ['a', 'b', 'c']; '' -> []."""
    if raw is None:
        return []
    return [part.strip() for part in str(raw).split(",") if part.strip()]


def _is_blank(raw: Any) -> bool:
    return raw is None or (isinstance(raw, str) and not raw.strip())


def parse_number(raw: Any) -> float | int:
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        try:
            value = float(str(raw).strip())
        except ValueError:
            return math.nan
    if math.isfinite(value) and value.is_integer():
        return int(value)
    return value


def parse_integer(raw: Any) -> float | int:
    value = parse_number(raw)
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    return value


def shape(form: Mapping[str, Any], schema: Schema) -> RequestPayload:
    """Build the request payload for ``form`` according to ``schema``.

    Fields missing from the schema are not sent.
    """
    out: Dict[str, Any] = {}
    for name, spec in schema.items():
        raw = form.get(name)
        if spec.type is FieldType.CSV:
            out[name] = split_csv(raw)
        elif spec.type in (FieldType.NUMBER, FieldType.INTEGER):
            if _is_blank(raw):
                if spec.optional:
                    continue
                out[name] = raw
            elif spec.type is FieldType.INTEGER:
                out[name] = parse_integer(raw)
            else:
                out[name] = parse_number(raw)
        else:
            out[name] = raw
    return RequestPayload(out)


__all__ = ["FieldType", "FieldSpec", "Schema", "RequestPayload", "split_csv", "parse_number", "parse_integer", "shape"]
