"""
Input validation utilities for pedigree chart layout.

Provides centralized validation functions for the generation count,
orientation and theme constants. Raises descriptive exceptions on invalid
input, or clamps with a warning when strict checking is turned off.
"""

from __future__ import annotations

import warnings
from numbers import Real
from typing import Any, Sequence

from .types import BoxDimensions, Orientation

MIN_GENERATIONS = 2
"""Smallest chart: the root and its parents."""

MAX_GENERATIONS = 8
"""With more than 8 generations the chart runs out of usable pixels."""


class ValidationError(ValueError):
    """Base exception for layout validation errors."""

    pass


class InvalidArgumentError(ValidationError):
    """Raised when a request parameter is outside its allowed range."""

    pass


class InvalidGenerationsError(InvalidArgumentError):
    """Raised when the generation count is outside [2, 8]."""

    pass


class InvalidOrientationError(InvalidArgumentError):
    """Raised when the orientation code is not 0-3."""

    pass


class InvalidBoxDimensionsError(ValidationError):
    """Raised when box dimensions are not positive."""

    pass


class InvalidSpacingError(ValidationError):
    """Raised when box spacing is negative."""

    pass


class LayoutNotComputedError(RuntimeError):
    """Raised when a geometry is requested before the layout has run."""

    pass


class GenerationsClampedWarning(UserWarning):
    """Warning issued when an out-of-range generation count is clamped."""

    pass


class OrientationClampedWarning(UserWarning):
    """Warning issued when an out-of-range orientation code is clamped."""

    pass


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_generations(
    generations: int,
    max_generations: int = MAX_GENERATIONS,
    strict: bool = True,
) -> int:
    """
    Validate the number of generations to display.

    Args:
        generations: Requested generation count
        max_generations: Upper bound, itself capped at MAX_GENERATIONS
        strict: If True, raises on out-of-range values. If False, clamps
            to the allowed range and warns.

    Returns:
        Validated generation count

    Raises:
        InvalidGenerationsError: If strict=True and generations is out of range,
            or if generations / max_generations is not an integer
    """
    if isinstance(generations, bool) or not isinstance(generations, int):
        raise InvalidGenerationsError(f"generations must be an integer, got {generations!r}")
    if isinstance(max_generations, bool) or not isinstance(max_generations, int):
        raise InvalidGenerationsError(
            f"max_generations must be an integer, got {max_generations!r}"
        )
    if not MIN_GENERATIONS <= max_generations <= MAX_GENERATIONS:
        raise InvalidGenerationsError(
            f"max_generations must be in [{MIN_GENERATIONS}, {MAX_GENERATIONS}], "
            f"got {max_generations}"
        )

    if MIN_GENERATIONS <= generations <= max_generations:
        return generations

    if strict:
        raise InvalidGenerationsError(
            f"generations must be in [{MIN_GENERATIONS}, {max_generations}], got {generations}"
        )

    clamped = max(MIN_GENERATIONS, min(max_generations, generations))
    warnings.warn(
        f"generations {generations} is outside [{MIN_GENERATIONS}, {max_generations}]; "
        f"using {clamped}.",
        GenerationsClampedWarning,
        stacklevel=3,
    )
    return clamped


def validate_orientation(orientation: Any, strict: bool = True) -> Orientation:
    """
    Validate an orientation code.

    Args:
        orientation: Orientation enum member or integer code 0-3
        strict: If True, raises on unknown codes. If False, clamps to [0, 3]
            and warns.

    Returns:
        Validated Orientation

    Raises:
        InvalidOrientationError: If the code is not an integer, or is out of
            range with strict=True
    """
    if isinstance(orientation, Orientation):
        return orientation
    if isinstance(orientation, bool) or not isinstance(orientation, int):
        raise InvalidOrientationError(
            f"orientation must be an Orientation or an integer code, got {orientation!r}"
        )

    low, high = min(Orientation), max(Orientation)
    if low <= orientation <= high:
        return Orientation(orientation)

    if strict:
        raise InvalidOrientationError(
            f"orientation must be in [{int(low)}, {int(high)}], got {orientation}"
        )

    clamped = Orientation(max(int(low), min(int(high), orientation)))
    warnings.warn(
        f"orientation {orientation} is outside [{int(low)}, {int(high)}]; using {clamped.name}.",
        OrientationClampedWarning,
        stacklevel=3,
    )
    return clamped


def validate_box_dimensions(box: Any) -> BoxDimensions:
    """
    Validate box dimensions.

    Args:
        box: BoxDimensions, or a (width, height) sequence

    Returns:
        Validated BoxDimensions

    Raises:
        InvalidBoxDimensionsError: If dimensions are missing, not numbers or
            not positive
    """
    if not isinstance(box, BoxDimensions):
        if not isinstance(box, Sequence) or isinstance(box, str):
            raise InvalidBoxDimensionsError(
                f"Box dimensions must be a [width, height] sequence, got {box!r}"
            )
        if len(box) < 2:
            raise InvalidBoxDimensionsError(
                f"Box dimensions must have 2 elements [width, height], got {len(box)}"
            )
        box = BoxDimensions(box[0], box[1])

    for name, value in (("width", box.width), ("height", box.height)):
        if not _is_number(value):
            raise InvalidBoxDimensionsError(f"Box {name} must be a number, got {value!r}")

    if box.width <= 0:
        raise InvalidBoxDimensionsError(f"Box width must be positive, got {box.width}")
    if box.height <= 0:
        raise InvalidBoxDimensionsError(f"Box height must be positive, got {box.height}")

    return box


def validate_spacing(spacing: float, axis: str = "x") -> float:
    """
    Validate the gap between boxes along one axis.

    Args:
        spacing: Spacing in pixels
        axis: Axis name, used in the error message

    Returns:
        Validated spacing

    Raises:
        InvalidSpacingError: If spacing is not a number or is negative
    """
    if not _is_number(spacing):
        raise InvalidSpacingError(f"spacing_{axis} must be a number, got {spacing!r}")
    if spacing < 0:
        raise InvalidSpacingError(f"spacing_{axis} must be >= 0, got {spacing}")
    return spacing


__all__ = [
    "MIN_GENERATIONS",
    "MAX_GENERATIONS",
    "ValidationError",
    "InvalidArgumentError",
    "InvalidGenerationsError",
    "InvalidOrientationError",
    "InvalidBoxDimensionsError",
    "InvalidSpacingError",
    "LayoutNotComputedError",
    "GenerationsClampedWarning",
    "OrientationClampedWarning",
    "validate_generations",
    "validate_orientation",
    "validate_box_dimensions",
    "validate_spacing",
]
