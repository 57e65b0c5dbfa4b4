"""
Chart geometry metrics.

Provides quantitative checks of a computed chart:
- Box rectangles and bounding box
- Box overlaps: Number of pairs of boxes that intersect
- Generation extents: Span of each generation along both axes

All metrics work with a ChartGeometry from any orientation.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from .tree import generation_slice
from .types import ChartGeometry


def box_rectangles(geometry: ChartGeometry) -> np.ndarray:
    """
    Get the rectangle of every box.

    Args:
        geometry: Computed chart

    Returns:
        Array of shape (n, 4) holding (left, top, right, bottom) per slot
    """
    if not geometry.nodes:
        return np.zeros((0, 4))
    coords = np.array(geometry.coordinates(), dtype=float)
    size = np.array([geometry.box.width, geometry.box.height], dtype=float)
    return np.hstack([coords, coords + size])


def bounding_box(geometry: ChartGeometry) -> tuple[float, float, float, float]:
    """
    Get the box covering all boxes of the chart.

    Returns:
        (left, top, right, bottom); all zero for an empty chart
    """
    rects = box_rectangles(geometry)
    if len(rects) == 0:
        return 0.0, 0.0, 0.0, 0.0
    return (
        float(rects[:, 0].min()),
        float(rects[:, 1].min()),
        float(rects[:, 2].max()),
        float(rects[:, 3].max()),
    )


def box_overlaps(geometry: ChartGeometry) -> int:
    """
    Count pairs of boxes whose interiors intersect.

    Boxes that only touch along an edge do not overlap.

    Time Complexity: O(n^2), n <= 255
    """
    rects = box_rectangles(geometry)
    n = len(rects)
    if n < 2:
        return 0

    left, top, right, bottom = rects.T
    overlap_x = (left[:, None] < right[None, :]) & (left[None, :] < right[:, None])
    overlap_y = (top[:, None] < bottom[None, :]) & (top[None, :] < bottom[:, None])
    pairs = np.triu(overlap_x & overlap_y, k=1)
    return int(pairs.sum())


def generation_extents(geometry: ChartGeometry) -> dict[int, tuple[float, float, float, float]]:
    """
    Get the span of each generation's boxes.

    Returns:
        Mapping of generation (root = 1) to (left, top, right, bottom)
    """
    rects = box_rectangles(geometry)
    extents: dict[int, tuple[float, float, float, float]] = {}
    for generation in range(1, geometry.generations + 1):
        block = rects[generation_slice(generation)]
        if len(block) == 0:
            break
        extents[generation] = (
            float(block[:, 0].min()),
            float(block[:, 1].min()),
            float(block[:, 2].max()),
            float(block[:, 3].max()),
        )
    return extents


def fits_canvas(geometry: ChartGeometry) -> bool:
    """Check that every box lies inside the canvas."""
    left, top, right, bottom = bounding_box(geometry)
    return left >= 0 and top >= 0 and right <= geometry.width and bottom <= geometry.height


def layout_quality_summary(geometry: ChartGeometry) -> dict[str, Any]:
    """
    Compute a summary of chart metrics.

    Returns:
        Dictionary with node count, known ancestors, canvas size, box
        overlaps, canvas fill ratio and whether all boxes fit the canvas
    """
    n = len(geometry.nodes)
    known = sum(1 for slot in geometry.nodes if slot.individual is not None)
    canvas_area = float(geometry.width * geometry.height)
    box_area = float(n * geometry.box.width * geometry.box.height)

    return {
        "node_count": n,
        "known_ancestors": known,
        "width": geometry.width,
        "height": geometry.height,
        "box_overlaps": box_overlaps(geometry),
        "fill_ratio": box_area / canvas_area if canvas_area > 0 else 0.0,
        "fits_canvas": fits_canvas(geometry),
    }


__all__ = [
    "box_rectangles",
    "bounding_box",
    "box_overlaps",
    "generation_extents",
    "fits_canvas",
    "layout_quality_summary",
]
