"""
Base class for chart layouts.

Provides the common interface and shared functionality for chart layouts:
an event system, the theme constants (box size and spacing) with
validation, and the single-pass run lifecycle.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional, Sequence, Union

if TYPE_CHECKING:
    from typing_extensions import Self

from .types import BoxDimensions, Event, EventCallback, EventType
from .validation import validate_box_dimensions, validate_spacing

DEFAULT_BOX = BoxDimensions(250, 80)
DEFAULT_SPACING_X = 5
DEFAULT_SPACING_Y = 10


class BaseChartLayout(ABC):
    """
    Abstract base class for chart layouts.

    Provides shared infrastructure:
    - Event system (start/end events)
    - Box dimensions and spacing via validated properties
    - Run lifecycle

    Example:
        layout = SomeChartLayout(
            box=BoxDimensions(200, 60),
            spacing_x=5,
            spacing_y=10,
        )
        layout.run()
    """

    def __init__(
        self,
        *,
        box: Union[BoxDimensions, Sequence[int]] = DEFAULT_BOX,
        spacing_x: float = DEFAULT_SPACING_X,
        spacing_y: float = DEFAULT_SPACING_Y,
        on_start: Optional[EventCallback] = None,
        on_end: Optional[EventCallback] = None,
    ) -> None:
        """
        Initialize layout with theme constants.

        Args:
            box: Box dimensions, as BoxDimensions or (width, height)
            spacing_x: Horizontal gap between boxes
            spacing_y: Vertical gap between boxes
            on_start: Callback for start event
            on_end: Callback for end event
        """
        self._box: BoxDimensions = DEFAULT_BOX
        self._spacing_x: float = DEFAULT_SPACING_X
        self._spacing_y: float = DEFAULT_SPACING_Y
        self._events: dict[EventType, EventCallback] = {}

        # Set via properties (triggers validation)
        self.box = box
        self.spacing_x = spacing_x
        self.spacing_y = spacing_y

        if on_start:
            self._events[EventType.start] = on_start
        if on_end:
            self._events[EventType.end] = on_end

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def box(self) -> BoxDimensions:
        """Get box dimensions."""
        return self._box

    @box.setter
    def box(self, value: Union[BoxDimensions, Sequence[int]]) -> None:
        """
        Set box dimensions.

        Raises:
            InvalidBoxDimensionsError: If width or height is not positive.
        """
        self._box = validate_box_dimensions(value)

    @property
    def spacing_x(self) -> float:
        """Get horizontal gap between boxes."""
        return self._spacing_x

    @spacing_x.setter
    def spacing_x(self, value: float) -> None:
        """Set horizontal gap between boxes."""
        self._spacing_x = validate_spacing(value, "x")

    @property
    def spacing_y(self) -> float:
        """Get vertical gap between boxes."""
        return self._spacing_y

    @spacing_y.setter
    def spacing_y(self, value: float) -> None:
        """Set vertical gap between boxes."""
        self._spacing_y = validate_spacing(value, "y")

    # -------------------------------------------------------------------------
    # Event System
    # -------------------------------------------------------------------------

    def on(self, event: Union[EventType, str], callback: EventCallback) -> Self:
        """
        Subscribe to a layout event.

        Args:
            event: Event type (EventType enum or string name)
            callback: Function to call when event fires

        Returns:
            self (for chaining)
        """
        if isinstance(event, str):
            event = EventType[event]
        self._events[event] = callback
        return self

    def trigger(self, event: Event) -> None:
        """
        Trigger an event, calling the registered callback.

        Args:
            event: Event payload with type and optional data
        """
        event_type = event.get("type")
        if event_type is not None and event_type in self._events:
            self._events[event_type](event)

    def _make_event(self, event_type: EventType) -> Event:
        """Build the payload for an event. Subclasses add their state."""
        return {"type": event_type}

    # -------------------------------------------------------------------------
    # Lifecycle Methods
    # -------------------------------------------------------------------------

    def validate(self) -> Self:
        """
        Validate current configuration.

        Called automatically by run() but can be called early for fail-fast
        behavior.

        Returns:
            self (for chaining)
        """
        return self

    def run(self, **kwargs: Any) -> Self:
        """
        Run the layout.

        Validates, fires the start event, computes the layout and fires the
        end event.

        Args:
            **kwargs: Additional arguments passed to _compute()

        Returns:
            self (for chaining)
        """
        self.validate()
        self.trigger(self._make_event(EventType.start))

        # Subclasses implement _compute()
        self._compute(**kwargs)

        self.trigger(self._make_event(EventType.end))
        return self

    @abstractmethod
    def _compute(self, **kwargs: Any) -> None:
        """
        Compute the layout.

        Subclasses must implement this to perform the actual computation.
        """
        pass


__all__ = [
    "DEFAULT_BOX",
    "DEFAULT_SPACING_X",
    "DEFAULT_SPACING_Y",
    "BaseChartLayout",
]
