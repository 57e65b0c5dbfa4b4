"""
pedigree-layout: Pedigree chart geometry in Python.

This package computes box positions for genealogical pedigree charts:
the ancestors of a root individual, numbered Sosa-Stradonitz style, laid
out as a binary tree in one of four orientations.

Main entry points:
- PedigreeLayout: Configurable layout engine with events
- layout_pedigree: One-call functional API
- export.to_svg: SVG drawing of a computed chart
"""

__version__ = "0.1.0"

# Ancestor collection
from .ancestors import (
    collect_ancestors,
    father_of,
    has_parents,
    has_spouse_family,
    mother_of,
)

# Base class for chart layouts
from .base import BaseChartLayout

# Metrics for chart checks
from .metrics import (
    bounding_box,
    box_overlaps,
    box_rectangles,
    fits_canvas,
    generation_extents,
    layout_quality_summary,
)
from .normalize import normalize

# Offset calculation
from .offsets import (
    band_offset,
    box_spacing,
    compact_portrait,
    compute_offsets,
    drift_correction,
    generation_offset,
)

# Orientation policy
from .orientation import ARROW_SIZE, OrientationPolicy, resolve_orientation

# Pedigree layout
from .pedigree import PedigreeLayout, layout_pedigree

# Arena index arithmetic
from .tree import (
    child_indices,
    generation_of,
    generation_slice,
    is_father_slot,
    parent_index,
    previous_generation_index,
    sosa_number,
    tree_size,
)
from .types import (
    AncestorSlot,
    BoxDimensions,
    ChartGeometry,
    Event,
    EventType,
    Orientation,
    Person,
)

# Validation utilities
from .validation import (
    MAX_GENERATIONS,
    MIN_GENERATIONS,
    GenerationsClampedWarning,
    InvalidArgumentError,
    InvalidBoxDimensionsError,
    InvalidGenerationsError,
    InvalidOrientationError,
    InvalidSpacingError,
    LayoutNotComputedError,
    OrientationClampedWarning,
    ValidationError,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Orientation",
    "BoxDimensions",
    "AncestorSlot",
    "ChartGeometry",
    "Person",
    "EventType",
    "Event",
    # Layouts
    "BaseChartLayout",
    "PedigreeLayout",
    "layout_pedigree",
    # Steps
    "collect_ancestors",
    "father_of",
    "mother_of",
    "has_parents",
    "has_spouse_family",
    "ARROW_SIZE",
    "OrientationPolicy",
    "resolve_orientation",
    "generation_offset",
    "box_spacing",
    "band_offset",
    "drift_correction",
    "compact_portrait",
    "compute_offsets",
    "normalize",
    # Arena indexing
    "tree_size",
    "sosa_number",
    "parent_index",
    "child_indices",
    "is_father_slot",
    "generation_of",
    "generation_slice",
    "previous_generation_index",
    # Metrics
    "box_rectangles",
    "bounding_box",
    "box_overlaps",
    "generation_extents",
    "fits_canvas",
    "layout_quality_summary",
    # Validation
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
]
