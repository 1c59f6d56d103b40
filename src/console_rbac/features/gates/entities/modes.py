"""Gate render modes.

A gate either hides denied content (optionally rendering a fallback) or
renders it disabled with an explanatory tooltip. The two modes carry
different options, so each is its own type.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class HideMode:
    """Render ``fallback`` (or nothing) when access is denied."""

    fallback: Optional[Any] = None


@dataclass(frozen=True)
class DisableMode:
    """Render the content disabled, with ``tooltip`` or a generated message."""

    tooltip: Optional[str] = None


GateMode = Union[HideMode, DisableMode]
