"""Event helper utilities.

Thin publishing helpers so modules do not build event payloads by hand.

Quick import:
    from wellness.events.event_helpers import (
        publish_form_changed, publish_state_changed, publish_notice,
        publish_pantry_refreshed, publish_pantry_refresh_failed
    )
"""
from __future__ import annotations
from typing import Any
from .Event_Bus import (
    EventBus,
    FORM_CHANGED, STATE_CHANGED, PANTRY_REFRESHED, PANTRY_REFRESH_FAILED, NOTICE
)

__all__ = [
    'publish_form_changed', 'publish_state_changed', 'publish_notice',
    'publish_pantry_refreshed', 'publish_pantry_refresh_failed'
]


def publish_form_changed(bus: EventBus, module: str, field: str, value: Any):
    """Publish a module.form_changed event."""
    bus.publish(FORM_CHANGED, {
        'module': module,
        'field': field,
        'value': value
    })


def publish_state_changed(bus: EventBus, module: str, action: str, state: Any):
    """Publish a module.state_changed event (one per AsyncResult transition)."""
    bus.publish(STATE_CHANGED, {
        'module': module,
        'action': action,
        'state': state
    })


def publish_notice(bus: EventBus, module: str, message: str, level: str = 'info'):
    """Publish a user-visible acknowledgment.

    Payload structure:
        { 'module': <str>, 'level': 'info' | 'error', 'message': <str> }
    """
    bus.publish(NOTICE, {
        'module': module,
        'level': level,
        'message': message
    })


def publish_pantry_refreshed(bus: EventBus, items: int, suggestions: int):
    bus.publish(PANTRY_REFRESHED, {'items': items, 'suggestions': suggestions})


def publish_pantry_refresh_failed(bus: EventBus, reason: Any):
    bus.publish(PANTRY_REFRESH_FAILED, {'reason': reason})
