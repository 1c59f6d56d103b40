"""Declarative gate components (``Can`` / ``Cannot``)."""

from .entities import HideMode, DisableMode, GateMode
from .services import (
    Can,
    Cannot,
    check_permission,
    tooltip_message,
    disabled_wrapper,
    PermissionGate,
    gate_context,
    install_gates,
)

__all__ = [
    "HideMode",
    "DisableMode",
    "GateMode",
    "Can",
    "Cannot",
    "check_permission",
    "tooltip_message",
    "disabled_wrapper",
    "PermissionGate",
    "gate_context",
    "install_gates",
]
