"""
Declarative gate components.

``Can`` and ``Cannot`` render, hide or disable an HTML fragment based on an
access decision. Both follow the ``__html__`` protocol, so they can be placed
directly in a Jinja2 template or concatenated with ``markupsafe.Markup``.

Content follows markupsafe rules: plain strings are escaped, ``Markup`` and
other ``__html__`` objects are inserted as they are.
"""

from typing import Any, Optional, Sequence, Union

from markupsafe import Markup, escape

from ....config.constants import GateText
from ...permissions.entities.catalog import get_permission_label
from ...permissions.entities.protocols import AccessDecisionProtocol
from ...permissions.entities.roles import Role
from ..entities.modes import DisableMode, GateMode, HideMode

PermissionSpec = Union[str, Sequence[str]]

_WRAPPER_STYLE = "opacity:0.5;cursor:not-allowed"
_FIELDSET_STYLE = "pointer-events:none;border:0;margin:0;padding:0;min-width:0"
_BLOCK_EVENT = "event.preventDefault();event.stopPropagation();return false;"


def check_permission(access: AccessDecisionProtocol, permission: PermissionSpec, require_all: bool = False) -> bool:
    """Single identifier: ``can``. List: ``can_all`` or ``can_any``."""
    if isinstance(permission, str):
        return access.can(permission)
    permissions = list(permission)
    return access.can_all(*permissions) if require_all else access.can_any(*permissions)


def tooltip_message(permission: PermissionSpec, require_all: bool = False) -> str:
    """Explain the missing requirement using permission labels."""
    if isinstance(permission, str):
        return GateText.SINGLE_REQUIRED.format(label=get_permission_label(permission))
    labels = ", ".join(get_permission_label(p) for p in permission)
    if require_all:
        return GateText.ALL_REQUIRED.format(labels=labels)
    return GateText.ANY_REQUIRED.format(labels=labels)


def render_content(content: Any) -> Markup:
    if content is None:
        return Markup("")
    return escape(content)


def disabled_wrapper(content: Any, tooltip: str) -> Markup:
    """Wrap content in an inert, dimmed overlay with a tooltip.

    The wrapper swallows click and mousedown, the fieldset disables nested
    form controls natively and ``inert`` removes them from focus and
    hit-testing. The content itself is not rewritten.
    """
    return Markup(
        '<div class="permission-gate permission-gate--disabled" role="button" aria-disabled="true" '
        'tabindex="-1" title="{tooltip}" style="{wrapper_style}" '
        'onclick="{block}" onmousedown="{block}">'
        '<fieldset disabled inert style="{fieldset_style}">{content}</fieldset>'
        '<span role="tooltip" class="permission-gate__tooltip">{tooltip}</span>'
        '</div>'
    ).format(
        tooltip=tooltip,
        wrapper_style=_WRAPPER_STYLE,
        fieldset_style=_FIELDSET_STYLE,
        block=_BLOCK_EVENT,
        content=render_content(content),
    )


def _bypasses_loading(access: AccessDecisionProtocol) -> bool:
    return access.is_any_role(Role.OWNER, Role.ADMIN)


class Can:
    """Render ``content`` only when the permission check passes.

    While permissions are loading, content is withheld (hide mode) or shown
    disabled with a loading tooltip (disable mode). Owners and admins skip
    the loading state and are checked against the provisional permissions.
    """

    def __init__(
        self,
        access: AccessDecisionProtocol,
        permission: PermissionSpec,
        content: Any,
        *,
        require_all: bool = False,
        mode: GateMode = HideMode(),
    ):
        if not isinstance(mode, (HideMode, DisableMode)):
            raise TypeError(f"mode must be HideMode or DisableMode, got {type(mode).__name__}")
        self.access = access
        self.permission = permission
        self.content = content
        self.require_all = require_all
        self.mode = mode

    @property
    def granted(self) -> bool:
        return check_permission(self.access, self.permission, self.require_all)

    def render(self) -> Markup:
        if self.access.is_loading and not _bypasses_loading(self.access):
            if isinstance(self.mode, DisableMode):
                return disabled_wrapper(self.content, GateText.LOADING_TOOLTIP)
            return render_content(self.mode.fallback)

        if self.granted:
            return render_content(self.content)

        if isinstance(self.mode, DisableMode):
            tooltip = self.mode.tooltip or tooltip_message(self.permission, self.require_all)
            return disabled_wrapper(self.content, tooltip)
        return render_content(self.mode.fallback)

    def __html__(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return str(self.render())

    def __repr__(self) -> str:
        return f"Can(permission={self.permission!r}, require_all={self.require_all}, mode={self.mode!r})"


class Cannot:
    """Render ``content`` when the permission check fails, else ``fallback``.

    The strict inverse of the permission check: no loading state and no
    disable mode.
    """

    def __init__(
        self,
        access: AccessDecisionProtocol,
        permission: PermissionSpec,
        content: Any,
        *,
        require_all: bool = False,
        fallback: Optional[Any] = None,
    ):
        self.access = access
        self.permission = permission
        self.content = content
        self.require_all = require_all
        self.fallback = fallback

    def render(self) -> Markup:
        if check_permission(self.access, self.permission, self.require_all):
            return render_content(self.fallback)
        return render_content(self.content)

    def __html__(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return str(self.render())

    def __repr__(self) -> str:
        return f"Cannot(permission={self.permission!r}, require_all={self.require_all})"
