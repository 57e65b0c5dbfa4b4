"""Tests for input validation module."""

import pytest

from pedigree_layout import BoxDimensions, Orientation
from pedigree_layout.validation import (
    GenerationsClampedWarning,
    InvalidArgumentError,
    InvalidBoxDimensionsError,
    InvalidGenerationsError,
    InvalidOrientationError,
    InvalidSpacingError,
    OrientationClampedWarning,
    ValidationError,
    validate_box_dimensions,
    validate_generations,
    validate_orientation,
    validate_spacing,
)


class TestGenerationsValidation:
    """Tests for generation count validation."""

    @pytest.mark.parametrize("generations", range(2, 9))
    def test_valid_generations(self, generations):
        """In-range counts are returned unchanged."""
        assert validate_generations(generations) == generations

    def test_too_many_raises(self):
        """More than 8 generations raises in strict mode."""
        with pytest.raises(InvalidGenerationsError, match="got 9"):
            validate_generations(9)

    def test_too_few_raises(self):
        """Fewer than 2 generations raises in strict mode."""
        with pytest.raises(InvalidGenerationsError, match="got 1"):
            validate_generations(1)

    def test_non_strict_clamps(self):
        """Non-strict mode clamps and warns."""
        with pytest.warns(GenerationsClampedWarning, match="using 8"):
            assert validate_generations(15, strict=False) == 8
        with pytest.warns(GenerationsClampedWarning, match="using 2"):
            assert validate_generations(-4, strict=False) == 2

    def test_custom_maximum(self):
        """Maximum below 8 is honoured."""
        assert validate_generations(4, max_generations=4) == 4
        with pytest.raises(InvalidGenerationsError):
            validate_generations(5, max_generations=4)

    def test_maximum_out_of_range_raises(self):
        """Maximum must itself lie in [2, 8]."""
        with pytest.raises(InvalidGenerationsError, match="max_generations"):
            validate_generations(4, max_generations=9)

    @pytest.mark.parametrize("value", [3.5, "4", None, True])
    def test_non_integer_raises(self, value):
        """Only integers are accepted, even when not strict."""
        with pytest.raises(InvalidGenerationsError, match="integer"):
            validate_generations(value, strict=False)

    def test_exception_hierarchy(self):
        """Generation errors are argument and validation errors."""
        assert issubclass(InvalidGenerationsError, InvalidArgumentError)
        assert issubclass(InvalidArgumentError, ValidationError)
        assert issubclass(ValidationError, ValueError)


class TestOrientationValidation:
    """Tests for orientation validation."""

    def test_enum_passthrough(self):
        """Enum members are returned as is."""
        assert validate_orientation(Orientation.PORTRAIT) is Orientation.PORTRAIT

    @pytest.mark.parametrize("code", range(4))
    def test_integer_codes(self, code):
        """Codes 0-3 map to Orientation members."""
        assert validate_orientation(code) is Orientation(code)

    def test_out_of_range_raises(self):
        """Codes outside [0, 3] raise in strict mode."""
        with pytest.raises(InvalidOrientationError, match="got 4"):
            validate_orientation(4)

    def test_non_strict_clamps(self):
        """Non-strict mode clamps and warns."""
        with pytest.warns(OrientationClampedWarning):
            assert validate_orientation(9, strict=False) is Orientation.OLDEST_AT_BOTTOM
        with pytest.warns(OrientationClampedWarning):
            assert validate_orientation(-1, strict=False) is Orientation.PORTRAIT

    @pytest.mark.parametrize("value", ["portrait", 1.0, None, False])
    def test_non_integer_raises(self, value):
        """Strings, floats and booleans are rejected."""
        with pytest.raises(InvalidOrientationError):
            validate_orientation(value, strict=False)


class TestBoxDimensionsValidation:
    """Tests for box dimension validation."""

    def test_valid_box(self):
        """BoxDimensions is returned unchanged."""
        box = BoxDimensions(250, 80)
        assert validate_box_dimensions(box) is box

    def test_sequence_converted(self):
        """(width, height) sequences are accepted."""
        assert validate_box_dimensions([200, 60]) == BoxDimensions(200, 60)

    def test_zero_width_raises(self):
        """Zero width raises InvalidBoxDimensionsError."""
        with pytest.raises(InvalidBoxDimensionsError, match="width must be positive"):
            validate_box_dimensions((0, 60))

    def test_negative_height_raises(self):
        """Negative height raises InvalidBoxDimensionsError."""
        with pytest.raises(InvalidBoxDimensionsError, match="height must be positive"):
            validate_box_dimensions(BoxDimensions(100, -1))

    def test_single_element_raises(self):
        """Single element raises InvalidBoxDimensionsError."""
        with pytest.raises(InvalidBoxDimensionsError, match="must have 2 elements"):
            validate_box_dimensions([100])

    @pytest.mark.parametrize("box", [None, 100, "ab"])
    def test_not_a_sequence_raises(self, box):
        """Values that are not (width, height) pairs raise InvalidBoxDimensionsError."""
        with pytest.raises(InvalidBoxDimensionsError, match="sequence"):
            validate_box_dimensions(box)

    def test_non_numeric_dimension_raises(self):
        """Non-numeric width raises InvalidBoxDimensionsError."""
        with pytest.raises(InvalidBoxDimensionsError, match="width must be a number"):
            validate_box_dimensions(("wide", 60))


class TestSpacingValidation:
    """Tests for spacing validation."""

    def test_valid_spacing(self):
        """Zero and positive spacing are accepted."""
        assert validate_spacing(0) == 0
        assert validate_spacing(10, "y") == 10

    def test_negative_spacing_raises(self):
        """Negative spacing raises with the axis name."""
        with pytest.raises(InvalidSpacingError, match="spacing_y"):
            validate_spacing(-5, "y")

    @pytest.mark.parametrize("value", [None, "10", [10]])
    def test_non_numeric_spacing_raises(self, value):
        """Non-numeric spacing raises InvalidSpacingError."""
        with pytest.raises(InvalidSpacingError, match="spacing_x must be a number"):
            validate_spacing(value)
