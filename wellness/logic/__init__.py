"""Client orchestration layer.

Subpackages:
- shaping: form values -> request payloads
- reporting: results -> view models
- pantry: pantry write/refresh synchronization
- modules: the dashboard feature modules

controller.py holds the per-action request lifecycle, dashboard.py the session
that ties the modules together.
"""
__all__ = ["shaping", "reporting", "pantry", "modules"]
