"""Gate render modes."""

from .modes import HideMode, DisableMode, GateMode

__all__ = ["HideMode", "DisableMode", "GateMode"]
