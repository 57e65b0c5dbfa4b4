"""
Pedigree box offset calculation.

Positions every slot of the ancestor arena. The arena is walked from the
last slot to the root while a running counter, ``curgen``, tracks the
generation being placed. ``curgen`` counts from the oldest generation on
the chart: the oldest generation is 1 and the root is ``generations``.

Within a generation each box gets a band whose size doubles with every
step towards the root, and is centered in it, so every child sits between
its two parents. Portrait charts are additionally compacted: the boxes
overlap diagonally, so each box is pulled towards its neighbours by a
parity-dependent amount accumulated along its line of descent.
"""

from __future__ import annotations

from typing import Sequence

from .orientation import ARROW_SIZE
from .tree import parent_index
from .types import AncestorSlot, BoxDimensions, Orientation
from .validation import InvalidArgumentError, validate_generations

LANDSCAPE_OLDEST_MARGIN = 10
"""Extra x offset of the oldest generation in landscape charts."""


def generation_offset(curgen: int, orientation: Orientation) -> int:
    """
    Band size multiplier of a generation.

    Portrait and landscape use ``2^(curgen - orientation)``, so the portrait
    bands are twice as tall as the landscape ones; the rotated charts use
    ``2^(curgen - 1)``.
    """
    if orientation < Orientation.OLDEST_AT_TOP:
        return 2 ** (curgen - orientation)
    return 2 ** (curgen - 1)


def box_spacing(box: BoxDimensions, spacing_y: float, orientation: Orientation) -> float:
    """Distance between neighbouring boxes of the oldest generation."""
    if orientation < Orientation.OLDEST_AT_TOP:
        return box.height + spacing_y
    return box.width + spacing_y


def band_offset(boxpos: int, boxspacing: float, genoffset: int) -> float:
    """Offset of a box centered in its band, along the sibling axis."""
    return (
        (boxpos * (boxspacing * genoffset))
        + ((boxspacing / 2) * genoffset)
        + (boxspacing * genoffset)
    )


def drift_correction(gen: int) -> int:
    """Sum of ``2^j - 1`` for ``j`` in ``1 .. gen - 3`` (0 up to gen 3)."""
    return sum(2**j - 1 for j in range(1, gen - 2))


def _nudge(offset: float, index: int, amount: float) -> float:
    # Even slots move up, odd slots move down.
    if index % 2 == 0:
        return offset - amount
    return offset + amount


def compact_portrait(
    yoffset: float,
    index: int,
    curgen: int,
    generations: int,
    boxspacing: float,
) -> float:
    """
    Apply the portrait compaction to one box's y offset.

    Args:
        yoffset: Uncompacted y offset
        index: Arena position of the box
        curgen: Generation counted from the oldest (oldest = 1)
        generations: Number of generations on the chart
        boxspacing: Box height plus vertical spacing

    Returns:
        Compacted y offset, recentred for the whole chart
    """
    half = boxspacing / 2

    if curgen < generations:
        yoffset = _nudge(yoffset, index, half * (curgen - 1))

        parent = parent_index(index)
        pgen = curgen
        while parent > 0:
            yoffset = _nudge(yoffset, parent, half * pgen)
            pgen += 1
            if pgen > 3:
                yoffset = _nudge(yoffset, parent, half * drift_correction(pgen))
            parent = parent_index(parent)

        if curgen > 3:
            yoffset = _nudge(yoffset, index, half * drift_correction(curgen))

    yoffset -= half * 2 ** (generations - 2) - half
    return yoffset


def compute_offsets(
    slots: Sequence[AncestorSlot],
    generations: int,
    orientation: Orientation,
    box: BoxDimensions,
    spacing_x: float,
    spacing_y: float,
    root_has_spouse_family: bool = False,
) -> None:
    """
    Compute raw box offsets, in place.

    Offsets are not normalized: they may be negative and the chart does not
    start at the origin. See ``normalize``.

    Args:
        slots: Full ancestor arena (``2^generations - 1`` slots)
        generations: Number of generations on the chart
        orientation: Chart orientation
        box: Box dimensions
        spacing_x: Horizontal gap between boxes
        spacing_y: Vertical gap between boxes
        root_has_spouse_family: True if the root has a spouse family, which
            reserves room for the child-menu arrow

    Raises:
        InvalidGenerationsError: If generations is outside [2, 8]
        InvalidArgumentError: If the arena size does not match generations
    """
    generations = validate_generations(generations)
    treesize = len(slots)
    if treesize != 2**generations - 1:
        raise InvalidArgumentError(
            f"Expected {2**generations - 1} slots for {generations} generations, got {treesize}"
        )

    orientation = Orientation(orientation)
    boxspacing = box_spacing(box, spacing_y, orientation)
    curgen = 1

    for i in range(treesize - 1, -1, -1):
        if i < treesize // 2**curgen:
            curgen += 1

        boxpos = i - 2 ** (generations - curgen)
        genoffset = generation_offset(curgen, orientation)
        yoffset = band_offset(boxpos, boxspacing, genoffset)

        if orientation == Orientation.PORTRAIT:
            xoffset = (generations - curgen) * ((box.width + spacing_x) / 1.8)
            if i == 0 and root_has_spouse_family:
                xoffset -= ARROW_SIZE
            yoffset = compact_portrait(yoffset, i, curgen, generations, boxspacing)
        elif orientation == Orientation.LANDSCAPE:
            xoffset = (generations - curgen) * (box.width + spacing_x)
            if curgen == 1:
                xoffset += LANDSCAPE_OLDEST_MARGIN
        elif orientation == Orientation.OLDEST_AT_TOP:
            # Rotated chart: the sibling axis becomes x.
            xoffset = yoffset
            yoffset = curgen * (box.height + (spacing_y * 4))
        else:
            xoffset = yoffset
            yoffset = (generations - curgen) * (box.height + (spacing_y * 2))
            if i != 0 and root_has_spouse_family:
                yoffset += ARROW_SIZE

        slots[i].x = int(xoffset)
        slots[i].y = int(yoffset)


__all__ = [
    "LANDSCAPE_OLDEST_MARGIN",
    "generation_offset",
    "box_spacing",
    "band_offset",
    "drift_correction",
    "compact_portrait",
    "compute_offsets",
]
