"""
Pedigree chart layout.

Lays out the ancestors of a root individual as a binary tree of boxes in
one of four orientations:

- PORTRAIT: generations left to right, compacted vertically
- LANDSCAPE: generations left to right
- OLDEST_AT_TOP: generations bottom to top
- OLDEST_AT_BOTTOM: generations top to bottom

The computation runs in four steps: collect the ancestors in Sosa order,
resolve the orientation policy, compute raw offsets, and normalize.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Sequence, Union

if TYPE_CHECKING:
    from typing_extensions import Self

from .ancestors import collect_ancestors, has_parents, has_spouse_family
from .base import DEFAULT_BOX, DEFAULT_SPACING_X, DEFAULT_SPACING_Y, BaseChartLayout
from .normalize import normalize
from .offsets import compute_offsets
from .orientation import OrientationPolicy, resolve_orientation
from .tree import previous_generation_index, tree_size
from .types import (
    BoxDimensions,
    ChartGeometry,
    Event,
    EventCallback,
    EventType,
    Orientation,
)
from .validation import (
    MAX_GENERATIONS,
    InvalidArgumentError,
    LayoutNotComputedError,
    validate_generations,
    validate_orientation,
)

DEFAULT_GENERATIONS = 4
DEFAULT_ORIENTATION = Orientation.LANDSCAPE


class PedigreeLayout(BaseChartLayout):
    """
    Pedigree chart layout engine.

    Positions one box per ancestor slot. All ``2^generations - 1`` slots
    are positioned, including those of unknown ancestors, so the chart
    always has the same shape for a given generation count.

    Example:
        layout = PedigreeLayout(
            root=person,
            generations=4,
            orientation=Orientation.PORTRAIT,
            box=BoxDimensions(200, 60),
        )
        layout.run()

        for slot in layout.geometry.nodes:
            print(f"Sosa {slot.sosa}: ({slot.x}, {slot.y})")
    """

    def __init__(
        self,
        *,
        root: Any = None,
        generations: int = DEFAULT_GENERATIONS,
        orientation: Union[Orientation, int] = DEFAULT_ORIENTATION,
        box: Union[BoxDimensions, Sequence[int]] = DEFAULT_BOX,
        spacing_x: float = DEFAULT_SPACING_X,
        spacing_y: float = DEFAULT_SPACING_Y,
        max_generations: int = MAX_GENERATIONS,
        strict: bool = True,
        on_start: Optional[EventCallback] = None,
        on_end: Optional[EventCallback] = None,
    ) -> None:
        """
        Initialize pedigree layout.

        Args:
            root: Root individual
            generations: Number of generations to show, root included
            orientation: Orientation enum member or code 0-3
            box: Box dimensions, as BoxDimensions or (width, height)
            spacing_x: Horizontal gap between boxes
            spacing_y: Vertical gap between boxes
            max_generations: Largest generation count accepted (at most 8)
            strict: If True, out-of-range generations or orientation raise
                InvalidArgumentError. If False, they are clamped with a warning.
            on_start: Callback for start event
            on_end: Callback for end event

        Raises:
            InvalidGenerationsError: If strict and generations is out of range
            InvalidOrientationError: If strict and orientation is out of range
        """
        super().__init__(
            box=box,
            spacing_x=spacing_x,
            spacing_y=spacing_y,
            on_start=on_start,
            on_end=on_end,
        )

        self._strict: bool = bool(strict)
        self._max_generations: int = max_generations
        self._root: Any = root
        self.generations = generations
        self.orientation = orientation

        # Internal state
        self._geometry: Optional[ChartGeometry] = None

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def root(self) -> Any:
        """Get root individual."""
        return self._root

    @root.setter
    def root(self, value: Any) -> None:
        """Set root individual."""
        self._root = value

    @property
    def generations(self) -> int:
        """Get number of generations."""
        return self._generations

    @generations.setter
    def generations(self, value: int) -> None:
        """Set number of generations, validated against max_generations."""
        self._generations = validate_generations(value, self._max_generations, self._strict)

    @property
    def orientation(self) -> Orientation:
        """Get chart orientation."""
        return self._orientation

    @orientation.setter
    def orientation(self, value: Union[Orientation, int]) -> None:
        """Set chart orientation."""
        self._orientation = validate_orientation(value, self._strict)

    @property
    def strict(self) -> bool:
        """True if out-of-range parameters raise instead of being clamped."""
        return self._strict

    @property
    def max_generations(self) -> int:
        """Get largest accepted generation count."""
        return self._max_generations

    @property
    def treesize(self) -> int:
        """Number of slots in the chart."""
        return tree_size(self._generations)

    @property
    def geometry(self) -> ChartGeometry:
        """
        Get the computed chart.

        Raises:
            LayoutNotComputedError: If run() has not been called.
        """
        if self._geometry is None:
            raise LayoutNotComputedError("Call run() before reading the geometry")
        return self._geometry

    @property
    def policy(self) -> OrientationPolicy:
        """Get the resolved orientation policy."""
        policy = self.geometry.policy
        assert policy is not None
        return policy

    # -------------------------------------------------------------------------
    # Layout Computation
    # -------------------------------------------------------------------------

    def validate(self) -> Self:
        """
        Re-check generations and orientation.

        Both are validated when set; this guards against subclasses or
        callers writing the private attributes directly.
        """
        self._generations = validate_generations(
            self._generations, self._max_generations, self._strict
        )
        self._orientation = validate_orientation(self._orientation, self._strict)
        return self

    def _make_event(self, event_type: EventType) -> Event:
        event: Event = {
            "type": event_type,
            "generations": self._generations,
            "orientation": self._orientation,
        }
        if event_type == EventType.end:
            event["geometry"] = self._geometry
        return event

    def _compute(self, **kwargs: Any) -> None:
        """Collect ancestors, position them and size the canvas."""
        slots, beyond = collect_ancestors(self._root, self._generations)
        root_spouse = has_spouse_family(self._root)

        policy = resolve_orientation(self._orientation, beyond, root_spouse)

        compute_offsets(
            slots,
            self._generations,
            self._orientation,
            self._box,
            self._spacing_x,
            self._spacing_y,
            root_has_spouse_family=root_spouse,
        )
        width, height = normalize(
            slots,
            self._box,
            self._spacing_x,
            self._spacing_y,
            policy.extra_offset_x,
            policy.extra_offset_y,
        )

        self._geometry = ChartGeometry(
            nodes=slots,
            width=width,
            height=height,
            has_ancestors_beyond_chart=beyond,
            generations=self._generations,
            orientation=self._orientation,
            box=self._box,
            policy=policy,
        )

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def previous_generation(self, index: int) -> Optional[Any]:
        """
        Individual to re-root the chart on from the arrow beside slot ``index``.

        Only slots whose individual has recorded parents get an arrow, and
        only when the chart has ancestors beyond its bound. The arrow leads to
        the root's father or mother, depending on the half of the chart the
        slot is in.

        Args:
            index: Arena position of the slot

        Returns:
            The root's father or mother, or None when the slot has no arrow

        Raises:
            InvalidArgumentError: If index is not a slot of the chart
        """
        geometry = self.geometry
        if not 0 <= index < geometry.treesize:
            raise InvalidArgumentError(
                f"index must be in [0, {geometry.treesize - 1}], got {index}"
            )
        if not geometry.has_ancestors_beyond_chart:
            return None

        individual = geometry.nodes[index].individual
        if individual is None or not has_parents(individual):
            return None

        return geometry.nodes[previous_generation_index(index, geometry.treesize)].individual


def layout_pedigree(
    root: Any,
    generations: int = DEFAULT_GENERATIONS,
    orientation: Union[Orientation, int] = DEFAULT_ORIENTATION,
    *,
    box: Union[BoxDimensions, Sequence[int]] = DEFAULT_BOX,
    spacing_x: float = DEFAULT_SPACING_X,
    spacing_y: float = DEFAULT_SPACING_Y,
    strict: bool = True,
) -> ChartGeometry:
    """
    Lay out a pedigree chart in one call.

    Args:
        root: Root individual
        generations: Number of generations to show, root included
        orientation: Orientation enum member or code 0-3
        box: Box dimensions
        spacing_x: Horizontal gap between boxes
        spacing_y: Vertical gap between boxes
        strict: If False, clamp out-of-range parameters instead of raising

    Returns:
        The positioned chart
    """
    layout = PedigreeLayout(
        root=root,
        generations=generations,
        orientation=orientation,
        box=box,
        spacing_x=spacing_x,
        spacing_y=spacing_y,
        strict=strict,
    )
    return layout.run().geometry


__all__ = [
    "DEFAULT_GENERATIONS",
    "DEFAULT_ORIENTATION",
    "PedigreeLayout",
    "layout_pedigree",
]
