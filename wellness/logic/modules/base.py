"""Shared plumbing for dashboard feature modules.

A module owns its FormState, one ModuleController per action button and a
view() that projects its current results into a view model. Modules never
read each other's state.
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, List, Mapping, Tuple, Union

from wellness.domain.AsyncResult import AsyncResult
from wellness.domain.FormState import FormState
from wellness.events.Event_Bus import EventBus
from wellness.events.event_helpers import publish_form_changed, publish_notice
from wellness.infra.Service_Client import ServiceClient
from wellness.logic.controller import ModuleController


def as_options(choices: Iterable[Union[str, Tuple[str, str]]]) -> List[Tuple[str, str]]:
    """Normalize select choices to (value, label) pairs."""
    return [c if isinstance(c, tuple) else (c, c) for c in choices]


class FeatureModule:
    name: str = ""
    title: str = ""
    defaults: Mapping[str, Any] = {}

    def __init__(self, client: ServiceClient, bus: EventBus):
        self.client = client
        self.bus = bus
        self.form = FormState(self.defaults, on_change=self._form_changed)
        self._controllers: Dict[str, ModuleController[Any]] = {}

    def _form_changed(self, field: str, value: Any):
        publish_form_changed(self.bus, self.name, field, value)

    def controller(self, action: str) -> ModuleController[Any]:
        if action not in self._controllers:
            self._controllers[action] = ModuleController(self.name, action, self.bus)
        return self._controllers[action]

    def notify(self, message: str, level: str = "info"):
        publish_notice(self.bus, self.name, message, level=level)

    def notify_failure(self, text: str, result: AsyncResult[Any]):
        label = result.reason.label if result.reason is not None else "error"
        self.notify(f"{text} ({label})", level="error")

    def choices(self) -> Dict[str, Any]:
        """Select options per enum field, for the templates."""
        return {}

    def actions(self) -> Dict[str, Dict[str, Any]]:
        """Current result of every action button invoked so far."""
        return {action: c.state.to_dict() for action, c in self._controllers.items()}

    def view(self) -> Any:
        raise NotImplementedError

    def context(self) -> Dict[str, Any]:
        """Everything the template needs to draw this module."""
        return {
            "name": self.name,
            "title": self.title,
            "form": self.form.snapshot(),
            "choices": self.choices(),
            "view": self.view(),
        }


__all__ = ["FeatureModule", "as_options"]
