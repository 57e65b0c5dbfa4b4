"""
Common types for pedigree chart layout.

This module provides the fundamental types used across the layout engine:
- Orientation: Chart layout direction (order is significant)
- BoxDimensions: Pixel size of one individual's box
- AncestorSlot: One Sosa-numbered cell of the ancestor arena
- ChartGeometry: Positioned slots plus canvas size
- Person: Minimal individual record
- EventType: Layout lifecycle events
- Event: Event payload for callbacks
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Callable, Optional, TypedDict

from .tree import generation_of, generation_slice

if TYPE_CHECKING:
    from .orientation import OrientationPolicy


class Orientation(IntEnum):
    """
    Chart orientation codes.

    Do not reorder: the generation offset calculation uses the numeric
    value, and ``orientation < OLDEST_AT_TOP`` selects the layouts whose
    generations run along the x axis.
    """

    PORTRAIT = 0
    LANDSCAPE = 1
    OLDEST_AT_TOP = 2
    OLDEST_AT_BOTTOM = 3

    def is_vertical_canvas(self) -> bool:
        """Check if generations are spread along x and siblings along y."""
        return self < Orientation.OLDEST_AT_TOP


class EventType(IntEnum):
    """
    Layout lifecycle events.

    - start: Layout computation has begun
    - end: Layout has been computed
    """

    start = 0
    end = 1


class Event(TypedDict, total=False):
    """Event payload passed to event listeners."""

    type: EventType
    generations: int
    orientation: Orientation
    geometry: Optional[ChartGeometry]


@dataclass(frozen=True)
class BoxDimensions:
    """Pixel size of one individual's box, as supplied by a theme."""

    width: int
    height: int


@dataclass
class AncestorSlot:
    """
    One cell of the ancestor arena.

    Attributes:
        individual: The ancestor in this position, or None when unknown
        x: Left edge of the box, in pixels
        y: Top edge of the box, in pixels
        index: Position in the arena (Sosa number minus one)
    """

    individual: Optional[Any] = None
    x: int = 0
    y: int = 0
    index: int = 0

    @property
    def sosa(self) -> int:
        """Sosa-Stradonitz number of this slot."""
        return self.index + 1

    @property
    def generation(self) -> int:
        """Generation of this slot (root = 1)."""
        return generation_of(self.index)

    @property
    def is_empty(self) -> bool:
        """True when the ancestor is unknown."""
        return self.individual is None

    def __repr__(self) -> str:
        label = getattr(self.individual, "xref", None) if self.individual is not None else None
        return f"AncestorSlot(sosa={self.sosa}, x={self.x}, y={self.y}, individual={label!r})"


@dataclass
class ChartGeometry:
    """
    Result of a pedigree layout.

    Attributes:
        nodes: All slots in Sosa order, positioned relative to the origin
        width: Canvas width in pixels
        height: Canvas height in pixels
        has_ancestors_beyond_chart: True if the oldest generation shown has
            individuals with recorded parents
        generations: Number of generations laid out
        orientation: Orientation used
        box: Box dimensions used
        policy: Resolved arrow icons and extra margins
    """

    nodes: list[AncestorSlot]
    width: int
    height: int
    has_ancestors_beyond_chart: bool = False
    generations: int = 0
    orientation: Orientation = Orientation.LANDSCAPE
    box: BoxDimensions = field(default_factory=lambda: BoxDimensions(250, 80))
    policy: Optional[OrientationPolicy] = None

    @property
    def treesize(self) -> int:
        """Number of slots."""
        return len(self.nodes)

    @property
    def root(self) -> AncestorSlot:
        """Slot of the root individual."""
        return self.nodes[0]

    def slots_in_generation(self, generation: int) -> list[AncestorSlot]:
        """Get the slots of one generation (root = 1), in Sosa order."""
        return self.nodes[generation_slice(generation)]

    def coordinates(self) -> list[tuple[int, int]]:
        """Get (x, y) for every slot in Sosa order."""
        return [(slot.x, slot.y) for slot in self.nodes]


class Person:
    """
    Minimal individual record.

    Any object exposing ``father``, ``mother`` and optionally
    ``has_parents`` / ``has_spouse_family`` (as values or zero-argument
    callables) can be laid out; this class is a convenient concrete one.

    Attributes:
        xref: Record identifier
        name: Display name
        father: Father, or None when unknown
        mother: Mother, or None when unknown
        has_spouse_family: True if the person has at least one spouse family
    """

    def __init__(
        self,
        xref: Optional[str] = None,
        name: Optional[str] = None,
        *,
        father: Optional[Person] = None,
        mother: Optional[Person] = None,
        has_spouse_family: bool = False,
        has_parents: Optional[bool] = None,
        **kwargs: Any,
    ) -> None:
        self.xref = xref
        self.name = name if name is not None else xref
        self.father = father
        self.mother = mother
        self.has_spouse_family = has_spouse_family
        # An explicit flag covers parent families whose members are private
        # or otherwise not loaded.
        self._has_parents = has_parents

        for key, value in kwargs.items():
            if not hasattr(self, key):
                setattr(self, key, value)

    @property
    def has_parents(self) -> bool:
        """True if the person has a recorded parent family."""
        if self._has_parents is not None:
            return self._has_parents
        return self.father is not None or self.mother is not None

    def __repr__(self) -> str:
        return f"Person(xref={self.xref!r}, name={self.name!r})"


EventCallback = Callable[[Optional[Event]], None]


__all__ = [
    "Orientation",
    "EventType",
    "Event",
    "EventCallback",
    "BoxDimensions",
    "AncestorSlot",
    "ChartGeometry",
    "Person",
]
