"""Pantry read model: server-owned item list plus the suggestions derived from it."""
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from pydantic import Field, field_validator

from wellness.domain.ResponseModel import ResponseModel, Scalar, none_as_empty_list
from wellness.utilities.errors import RemoteCallError


class PantryItem(ResponseModel):
    name: Optional[str] = None
    quantity: Scalar = None

    @property
    def label(self) -> str:
        name = self.name or ""
        return f"{name} ({self.quantity})" if self.quantity else name


class Detection(ResponseModel):
    """Items recognized on a receipt or a pantry photo."""
    detected: List[str] = Field(default_factory=list)

    @field_validator('detected', mode='before')
    @classmethod
    def validate_detected(cls, v):
        return none_as_empty_list(v)

    def message(self) -> str:
        return "Detected: " + ", ".join(self.detected)


@dataclass(frozen=True)
class PantrySnapshot:
    """Last committed (list, suggestions) pair.

    ``error`` is set when the latest refresh failed; items and suggestions then
    still hold the previous successful refresh.
    """
    items: Tuple[PantryItem, ...] = ()
    suggestions: Tuple[str, ...] = ()
    loaded: bool = False
    error: Optional[RemoteCallError] = None

    @classmethod
    def fresh(cls, items: List[PantryItem], suggestions: List[str]) -> "PantrySnapshot":
        return cls(items=tuple(items), suggestions=tuple(suggestions), loaded=True)

    def with_error(self, error: RemoteCallError) -> "PantrySnapshot":
        return replace(self, error=error)


__all__ = ["PantryItem", "Detection", "PantrySnapshot"]
