"""Web-facing observer for user notices.

Subscribes to an EventBus for ``notice`` events (the acknowledgments a browser
build would show with ``alert()``: "Preferences saved", "Detected: ...", error
messages) and keeps them in an in-memory ring buffer the page polls.

Design:
  * Each notice gets an auto-increment integer id (cursor) so clients can
    request only newer notices (since=<last_id_seen>).
  * A max size cap prevents unbounded memory growth.
  * One NoticeBoard per dashboard session; nothing is shared between sessions.
"""
from __future__ import annotations
from typing import List, Dict, Any, Optional
from datetime import datetime, timezone

from .Event_Bus import EventBus, NOTICE


class NoticeBoard:
    def __init__(self, max_notices: int = 100):
        self.max_notices = max_notices
        self._notices: List[Dict[str, Any]] = []
        self._next_id = 1
        self._bus: Optional[EventBus] = None

    def _record(self, event_name: str, payload: Any):  # signature expected by EventBus
        if not isinstance(payload, dict):
            return
        self._notices.append({
            'id': self._next_id,
            'module': payload.get('module', ''),
            'level': payload.get('level', 'info'),
            'message': payload.get('message', ''),
            'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        })
        self._next_id += 1
        # Trim buffer
        if len(self._notices) > self.max_notices:
            del self._notices[: len(self._notices) - self.max_notices]

    def attach(self, bus: EventBus) -> "NoticeBoard":
        """Idempotent: subscribe to the bus once."""
        if self._bus is bus:
            return self
        bus.subscribe(NOTICE, self._record)
        self._bus = bus
        return self

    def detach(self):
        """Stop recording; buffered notices stay readable."""
        if self._bus is not None:
            self._bus.unsubscribe(NOTICE, self._record)
            self._bus = None

    def latest(self) -> Optional[Dict[str, Any]]:
        return self._notices[-1] if self._notices else None

    def get_notices(self, since: int | None = None) -> Dict[str, Any]:
        """Return notices newer than 'since' (exclusive).

        If since is None, returns everything still buffered.
        Response includes next_cursor (largest id) so the client can poll with since=next_cursor.
        """
        if since is None:
            data = list(self._notices)
        else:
            data = [n for n in self._notices if n['id'] > since]
        next_cursor = self._notices[-1]['id'] if self._notices else since or 0
        return {'notices': data, 'next_cursor': next_cursor}


__all__ = ['NoticeBoard']
