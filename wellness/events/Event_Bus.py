"""Simple Event Bus / Observer implementation for dashboard modules.

Event names used so far:
  module.form_changed  -> payload {"module": str, "field": str, "value": Any}
  module.state_changed -> payload {"module": str, "action": str, "state": AsyncResult}
  pantry.refreshed     -> payload {"items": int, "suggestions": int}
  pantry.refresh_failed -> payload {"reason": RemoteCallError}
  notice               -> payload {"module": str, "level": "info"|"error", "message": str}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
FORM_CHANGED = "module.form_changed"
STATE_CHANGED = "module.state_changed"
PANTRY_REFRESHED = "pantry.refreshed"
PANTRY_REFRESH_FAILED = "pantry.refresh_failed"
NOTICE = "notice"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any = None):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)


__all__ = [
	'EventBus',
	'FORM_CHANGED', 'STATE_CHANGED', 'PANTRY_REFRESHED', 'PANTRY_REFRESH_FAILED', 'NOTICE'
]
