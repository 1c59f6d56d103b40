"""
Jinja2 integration for the gate components.

Usage in a template::

    {% call gate.can("assets:write", mode="disable") %}
      <button type="submit">Save</button>
    {% endcall %}

    {% call gate.cannot("reports:write") %}
      <p>Ask an admin to create reports.</p>
    {% endcall %}

    {% if can("scans:execute") %}...{% endif %}
"""

from typing import Any, Callable, Dict, Optional

from jinja2 import Environment
from markupsafe import Markup

from ...permissions.entities.protocols import AccessDecisionProtocol
from ..entities.modes import DisableMode, GateMode, HideMode
from .gate import Can, Cannot, PermissionSpec


def _build_mode(mode: str, fallback: Any, tooltip: Optional[str]) -> GateMode:
    if mode == "disable":
        if fallback is not None:
            raise ValueError("fallback cannot be used with mode='disable'")
        return DisableMode(tooltip=tooltip)
    if mode == "hide":
        if tooltip is not None:
            raise ValueError("tooltip requires mode='disable'")
        return HideMode(fallback=fallback)
    raise ValueError(f"Unknown gate mode: {mode!r}")


class PermissionGate:
    """Template-facing gate bound to one set of access decisions."""

    def __init__(self, access: AccessDecisionProtocol):
        self.access = access

    def can(
        self,
        permission: PermissionSpec,
        content: Any = None,
        require_all: bool = False,
        mode: str = "hide",
        fallback: Any = None,
        tooltip: Optional[str] = None,
        caller: Optional[Callable[[], str]] = None,
    ) -> Markup:
        if caller is not None:
            content = Markup(caller())
        gate = Can(
            self.access,
            permission,
            content,
            require_all=require_all,
            mode=_build_mode(mode, fallback, tooltip),
        )
        return gate.render()

    def cannot(
        self,
        permission: PermissionSpec,
        content: Any = None,
        require_all: bool = False,
        fallback: Any = None,
        caller: Optional[Callable[[], str]] = None,
    ) -> Markup:
        if caller is not None:
            content = Markup(caller())
        return Cannot(self.access, permission, content, require_all=require_all, fallback=fallback).render()


def gate_context(access: AccessDecisionProtocol) -> Dict[str, Any]:
    """Template variables for one request: ``gate`` plus check helpers."""
    return {
        "gate": PermissionGate(access),
        "can": access.can,
        "cannot": access.cannot,
        "can_any": access.can_any,
        "can_all": access.can_all,
    }


def install_gates(env: Environment, access: AccessDecisionProtocol) -> Environment:
    """Register gate globals on an environment.

    Globals are shared by every render of the environment; for per-request
    decisions pass ``gate_context(access)`` to ``render`` instead.
    """
    env.globals.update(gate_context(access))
    return env
