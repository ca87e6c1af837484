"""FormState: per-module field values bound to the module's input controls."""
from typing import Any, Callable, Dict, Mapping, Optional

# (field, value) -> None; called after every set/reset
Listener = Callable[[str, Any], None]


class FormState:
    def __init__(self, defaults: Mapping[str, Any], on_change: Optional[Listener] = None):
        self._defaults: Dict[str, Any] = dict(defaults)
        self._values: Dict[str, Any] = dict(defaults)
        self._on_change = on_change

    def get(self, field: str) -> Any:
        return self._values[field]

    def set(self, field: str, value: Any):
        '''
        Replaces the snapshot with a copy holding the new value; every other field is kept.
        No validation here, shaping decides what the value means.
        '''
        if field not in self._values:
            raise KeyError(f"Unknown field '{field}'")
        self._values = {**self._values, field: value}
        if self._on_change is not None:
            self._on_change(field, value)

    def reset(self, field: str):
        self.set(field, self._defaults[field])

    def fields(self):
        return tuple(self._values)

    def snapshot(self) -> Dict[str, Any]:
        return dict(self._values)

    def __contains__(self, field: str) -> bool:
        return field in self._values

    def __repr__(self) -> str:
        return f"FormState({self._values!r})"
