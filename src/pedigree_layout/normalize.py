"""Shift a positioned chart to the origin and size its canvas."""

from __future__ import annotations

from typing import Sequence

from .types import AncestorSlot, BoxDimensions


def normalize(
    slots: Sequence[AncestorSlot],
    box: BoxDimensions,
    spacing_x: float,
    spacing_y: float,
    extra_offset_x: int = 0,
    extra_offset_y: int = 0,
) -> tuple[int, int]:
    """
    Move all slots so the smallest x and y offsets are zero.

    Args:
        slots: Positioned slots, modified in place
        box: Box dimensions
        spacing_x: Horizontal gap between boxes
        spacing_y: Vertical gap between boxes
        extra_offset_x: Extra width reserved for arrows
        extra_offset_y: Extra height reserved for arrows

    Returns:
        Canvas (width, height)
    """
    if not slots:
        return 0, 0

    min_x = min(slot.x for slot in slots)
    min_y = min(slot.y for slot in slots)

    for slot in slots:
        slot.x -= min_x
        slot.y -= min_y

    max_x = max(slot.x for slot in slots)
    max_y = max(slot.y for slot in slots)

    width = max_x + spacing_x + box.width + extra_offset_x
    height = max_y + spacing_y + box.height + extra_offset_y
    return width, height


__all__ = ["normalize"]
