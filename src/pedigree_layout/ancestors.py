"""
Ancestor collection.

Builds the Sosa-ordered ancestor arena for a root individual. Individuals
are opaque: they are read through the accessor functions below, which
accept attributes holding either values or zero-argument callables.
"""

from __future__ import annotations

from typing import Any, Optional

from .tree import child_indices, generation_slice, tree_size
from .types import AncestorSlot
from .validation import validate_generations


def _read(individual: Any, attr: str, default: Any = None) -> Any:
    """Read an attribute that may be a plain value or a method."""
    value = getattr(individual, attr, default)
    if callable(value):
        return value()
    return value


def father_of(individual: Any) -> Optional[Any]:
    """Get the father of an individual, or None when unknown."""
    return _read(individual, "father")


def mother_of(individual: Any) -> Optional[Any]:
    """Get the mother of an individual, or None when unknown."""
    return _read(individual, "mother")


def has_parents(individual: Any) -> bool:
    """Check if an individual has a recorded parent family."""
    if hasattr(individual, "has_parents"):
        return bool(_read(individual, "has_parents"))
    return father_of(individual) is not None or mother_of(individual) is not None


def has_spouse_family(individual: Any) -> bool:
    """Check if an individual has at least one spouse family."""
    if individual is None:
        return False
    return bool(_read(individual, "has_spouse_family", False))


def collect_ancestors(root: Any, generations: int) -> tuple[list[AncestorSlot], bool]:
    """
    Collect the ancestors of ``root`` into a full-size arena.

    Every one of the ``2^generations - 1`` slots is allocated; unknown
    ancestors (and the whole line above them) keep ``individual=None``.

    Args:
        root: Root individual (may be None for a blank chart)
        generations: Number of generations, root included

    Returns:
        (slots, has_ancestors_beyond_chart) where the flag is True if any
        individual in the oldest generation has recorded parents

    Raises:
        InvalidGenerationsError: If generations is outside [2, 8]
    """
    generations = validate_generations(generations)
    treesize = tree_size(generations)
    slots =[AncestorSlot(index=i) for i in range(treesize)]
    slots[0].individual = root

    for i in range(treesize // 2):
        individual = slots[i].individual
        if individual is None:
            continue
        father_idx, mother_idx = child_indices(i)
        slots[father_idx].individual = father_of(individual)
        slots[mother_idx].individual = mother_of(individual)

    beyond = any(
        slot.individual is not None and has_parents(slot.individual)
        for slot in slots[generation_slice(generations)]
    )

    return slots, beyond


__all__ = [
    "father_of",
    "mother_of",
    "has_parents",
    "has_spouse_family",
    "collect_ancestors",
]
