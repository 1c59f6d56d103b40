"""Gate components and their Jinja2 integration."""

from .gate import Can, Cannot, check_permission, tooltip_message, disabled_wrapper
from .jinja import PermissionGate, gate_context, install_gates

__all__ = [
    "Can",
    "Cannot",
    "check_permission",
    "tooltip_message",
    "disabled_wrapper",
    "PermissionGate",
    "gate_context",
    "install_gates",
]
