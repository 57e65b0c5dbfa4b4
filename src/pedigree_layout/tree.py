"""
Index arithmetic for the Sosa-ordered ancestor arena.

The chart keeps its ancestors in a flat list where slot ``i`` holds
Sosa-Stradonitz number ``i + 1``: the root is slot 0, the father of slot
``i`` is slot ``2i + 1`` and the mother is slot ``2i + 2``. These helpers
replace explicit tree nodes.
"""

from __future__ import annotations


def tree_size(generations: int) -> int:
    """Number of slots in a chart of ``generations`` generations."""
    return (1 << generations) - 1


def sosa_number(index: int) -> int:
    """Sosa number stored at arena position ``index``."""
    return index + 1


def parent_index(index: int) -> int:
    """
    Arena position of the tree parent of ``index``.

    The tree parent is one generation closer to the root, so genealogically
    it is the child of the individual at ``index``. The root returns -1.
    """
    if index <= 0:
        return -1
    return (index - 1) // 2


def child_indices(index: int) -> tuple[int, int]:
    """Arena positions of the (father, mother) of the individual at ``index``."""
    return 2 * index + 1, 2 * index + 2


def is_father_slot(index: int) -> bool:
    """True for slots holding a father (even Sosa number)."""
    return index > 0 and sosa_number(index) % 2 == 0


def generation_of(index: int) -> int:
    """Generation of arena position ``index`` (root = 1)."""
    return sosa_number(index).bit_length()


def generation_slice(generation: int) -> slice:
    """Slice of the arena covering one generation (root = 1)."""
    return slice((1 << (generation - 1)) - 1, (1 << generation) - 1)


def previous_generation_index(index: int, treesize: int) -> int:
    """
    Slot a "previous generation" arrow on ``index`` re-roots the chart on.

    Arrows on the father's half of the oldest generation lead to the
    root's father (slot 1); the mother's half leads to slot 2.
    """
    if index > treesize // 2 + treesize // 4:
        return 2
    return 1


__all__ = [
    "tree_size",
    "sosa_number",
    "parent_index",
    "child_indices",
    "is_father_slot",
    "generation_of",
    "generation_slice",
    "previous_generation_index",
]
