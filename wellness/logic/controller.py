"""Async module controller: one remote call per user action.

State machine per action button:

    NotStarted --invoke--> Loading --success--> Succeeded(data)
                                   --failure--> Failed(reason)
    Succeeded | Failed --invoke--> Loading

Overlapping invocations are neither de-duplicated nor cancelled; each one
writes its own outcome when it settles, so whichever settles last is what the
module shows.
"""
from __future__ import annotations
import logging
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

from wellness.domain.AsyncResult import AsyncResult
from wellness.events.Event_Bus import EventBus
from wellness.events.event_helpers import publish_state_changed
from wellness.utilities.errors import RemoteCallError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ModuleController(Generic[T]):
    def __init__(self, module: str, action: str, bus: Optional[EventBus] = None):
        self.module = module
        self.action = action
        self._bus = bus
        self._state: AsyncResult[T] = AsyncResult.not_started()
        self._in_flight = 0

    @property
    def state(self) -> AsyncResult[T]:
        return self._state

    @property
    def in_flight(self) -> int:
        return self._in_flight

    def _transition(self, state: AsyncResult[T]):
        self._state = state
        if self._bus is not None:
            publish_state_changed(self._bus, self.module, self.action, state)

    async def invoke(self, action: Callable[[], Any], call: Callable[[Any], Awaitable[T]]) -> AsyncResult[T]:
        """Build the request with ``action`` and await ``call`` on it.

        Returns this invocation's outcome; ``state`` may differ if another
        invocation settles later. Never raises for remote failures.
        """
        self._in_flight += 1
        self._transition(AsyncResult.loading())
        logger.debug("%s.%s invoked (%d in flight)", self.module, self.action, self._in_flight)
        try:
            try:
                payload = action()
            except Exception as e:
                logger.exception("%s.%s could not build its request", self.module, self.action)
                result: AsyncResult[T] = AsyncResult.failed(RemoteCallError(f"Invalid request: {e}"))
            else:
                try:
                    data = await call(payload)
                except RemoteCallError as e:
                    logger.warning("%s.%s failed [%s]: %s", self.module, self.action, e.label, e)
                    result = AsyncResult.failed(e)
                except Exception as e:
                    logger.exception("%s.%s failed unexpectedly", self.module, self.action)
                    result = AsyncResult.failed(RemoteCallError(str(e) or e.__class__.__name__))
                else:
                    result = AsyncResult.succeeded(data)
        finally:
            self._in_flight -= 1
        self._transition(result)
        return result


__all__ = ["ModuleController"]
