"""
Orientation policy.

Each chart orientation decides which arrow icons the chart uses and how
much extra margin the canvas needs for the "previous generation" and
child-menu arrows.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .types import Orientation

ARROW_SIZE = 22
"""Size of the next/previous generation arrows, in pixels."""

ICON_ARROW_START = "fas fa-arrow-start wt-icon-arrow-start"
ICON_ARROW_END = "fas fa-arrow-end wt-icon-arrow-end"
ICON_ARROW_UP = "fas fa-arrow-up wt-icon-arrow-up"
ICON_ARROW_DOWN = "fas fa-arrow-down wt-icon-arrow-down"


@dataclass(frozen=True)
class OrientationPolicy:
    """
    Arrow icons and extra canvas margins for one orientation.

    Attributes:
        prev_gen_icon: CSS classes of the arrow leading to older generations
        menu_icon: CSS classes of the arrow opening the root's family menu
        extra_offset_x: Extra canvas width in pixels
        extra_offset_y: Extra canvas height in pixels
    """

    prev_gen_icon: str
    menu_icon: str
    extra_offset_x: int = 0
    extra_offset_y: int = 0


def _sideways(chart_has_ancestors: bool, root_has_spouse_family: bool) -> OrientationPolicy:
    # Older generations to the side: arrows sit after the last column.
    return OrientationPolicy(
        prev_gen_icon=ICON_ARROW_END,
        menu_icon=ICON_ARROW_START,
        extra_offset_x=ARROW_SIZE if chart_has_ancestors else 0,
    )


def _oldest_at_top(chart_has_ancestors: bool, root_has_spouse_family: bool) -> OrientationPolicy:
    return OrientationPolicy(
        prev_gen_icon=ICON_ARROW_UP,
        menu_icon=ICON_ARROW_DOWN,
        extra_offset_y=ARROW_SIZE if root_has_spouse_family else 0,
    )


def _oldest_at_bottom(
    chart_has_ancestors: bool, root_has_spouse_family: bool
) -> OrientationPolicy:
    return OrientationPolicy(
        prev_gen_icon=ICON_ARROW_DOWN,
        menu_icon=ICON_ARROW_UP,
        extra_offset_y=ARROW_SIZE if chart_has_ancestors else 0,
    )


_RESOLVERS: dict[Orientation, Callable[[bool, bool], OrientationPolicy]] = {
    Orientation.PORTRAIT: _sideways,
    Orientation.LANDSCAPE: _sideways,
    Orientation.OLDEST_AT_TOP: _oldest_at_top,
    Orientation.OLDEST_AT_BOTTOM: _oldest_at_bottom,
}


def resolve_orientation(
    mode: Orientation,
    chart_has_ancestors: bool,
    root_has_spouse_family: bool,
) -> OrientationPolicy:
    """
    Resolve the arrow icons and extra margins for an orientation.

    Args:
        mode: Chart orientation
        chart_has_ancestors: True if ancestors exist beyond the chart bound
        root_has_spouse_family: True if the root has a spouse family

    Returns:
        OrientationPolicy for the mode
    """
    return _RESOLVERS[Orientation(mode)](chart_has_ancestors, root_has_spouse_family)


__all__ = [
    "ARROW_SIZE",
    "ICON_ARROW_START",
    "ICON_ARROW_END",
    "ICON_ARROW_UP",
    "ICON_ARROW_DOWN",
    "OrientationPolicy",
    "resolve_orientation",
]
