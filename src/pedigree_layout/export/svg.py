"""
SVG export for pedigree charts.

Generates an SVG drawing of a computed chart: one rectangle per slot,
elbow connectors from each individual to their parents, and name labels.
"""

from __future__ import annotations

from typing import Any, Optional
from xml.sax.saxutils import escape

from ..tree import parent_index
from ..types import AncestorSlot, ChartGeometry


def to_svg(
    geometry: ChartGeometry,
    *,
    box_color: str = "#eef3fb",
    box_stroke: str = "#2c5aa0",
    box_stroke_width: float = 1.0,
    empty_color: str = "#f7f7f7",
    empty_stroke: str = "#bbbbbb",
    line_color: str = "#666666",
    line_width: float = 1.5,
    show_labels: bool = True,
    show_empty: bool = True,
    label_color: str = "#000000",
    font_size: float = 12.0,
    font_family: str = "sans-serif",
    background: Optional[str] = None,
) -> str:
    """
    Export a pedigree chart to SVG format.

    The SVG canvas has the chart's computed width and height.

    Args:
        geometry: Chart computed by PedigreeLayout
        box_color: Fill color for known individuals
        box_stroke: Stroke color for known individuals
        box_stroke_width: Stroke width for boxes
        empty_color: Fill color for unknown ancestors
        empty_stroke: Stroke color for unknown ancestors
        line_color: Color for connectors
        line_width: Width for connectors
        show_labels: Whether to show names
        show_empty: Whether to draw boxes of unknown ancestors
        label_color: Color for labels
        font_size: Font size for labels
        font_family: Font family for labels
        background: Background color (None for transparent)

    Returns:
        SVG string representation of the chart
    """
    width = geometry.width
    height = geometry.height

    svg_parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">'
    ]

    if background:
        svg_parts.append(f'  <rect width="100%" height="100%" fill="{escape(background)}"/>')

    visible = [slot for slot in geometry.nodes if show_empty or slot.individual is not None]
    visible_indices = {slot.index for slot in visible}

    # Connectors first so boxes cover their ends
    svg_parts.append('  <g class="connectors">')
    for slot in visible:
        child_idx = parent_index(slot.index)
        if child_idx < 0 or child_idx not in visible_indices:
            continue
        svg_parts.append(
            _render_connector(geometry, geometry.nodes[child_idx], slot, line_color, line_width)
        )
    svg_parts.append("  </g>")

    svg_parts.append('  <g class="boxes">')
    for slot in visible:
        if slot.individual is None:
            svg_parts.append(
                _render_box(geometry, slot, empty_color, empty_stroke, box_stroke_width, "empty")
            )
        else:
            svg_parts.append(
                _render_box(geometry, slot, box_color, box_stroke, box_stroke_width, "individual")
            )
    svg_parts.append("  </g>")

    if show_labels:
        svg_parts.append('  <g class="labels">')
        for slot in visible:
            if slot.individual is not None:
                svg_parts.append(
                    _render_label(geometry, slot, label_color, font_size, font_family)
                )
        svg_parts.append("  </g>")

    svg_parts.append("</svg>")

    return "\n".join(svg_parts)


def _label_of(individual: Any) -> str:
    """Get display text for an individual."""
    for attr in ("name", "xref"):
        value = getattr(individual, attr, None)
        if value is not None:
            return str(value)
    return ""


def _render_box(
    geometry: ChartGeometry,
    slot: AncestorSlot,
    fill: str,
    stroke: str,
    stroke_width: float,
    css_class: str,
) -> str:
    """Render one slot's box."""
    return (
        f'    <rect class="{css_class}" data-sosa="{slot.sosa}" '
        f'x="{slot.x}" y="{slot.y}" '
        f'width="{geometry.box.width}" height="{geometry.box.height}" '
        f'fill="{escape(fill)}" stroke="{escape(stroke)}" '
        f'stroke-width="{stroke_width}" rx="4"/>'
    )


def _render_label(
    geometry: ChartGeometry,
    slot: AncestorSlot,
    color: str,
    font_size: float,
    font_family: str,
) -> str:
    """Render an individual's name centered in its box."""
    x = slot.x + geometry.box.width / 2
    y = slot.y + geometry.box.height / 2
    return (
        f'    <text x="{x:.1f}" y="{y:.1f}" '
        f'fill="{escape(color)}" font-size="{font_size}" '
        f'font-family="{escape(font_family)}" '
        f'text-anchor="middle" dominant-baseline="central">'
        f"{escape(_label_of(slot.individual))}</text>"
    )


def _render_connector(
    geometry: ChartGeometry,
    child: AncestorSlot,
    ancestor: AncestorSlot,
    color: str,
    width: float,
) -> str:
    """Render an elbow line from a child's box to one parent's box."""
    w = geometry.box.width
    h = geometry.box.height

    if geometry.orientation.is_vertical_canvas():
        # Generations along x: leave the child's side facing the parent
        y1 = child.y + h / 2
        y2 = ancestor.y + h / 2
        if ancestor.x >= child.x:
            x1, x2 = child.x + w, ancestor.x
        else:
            x1, x2 = child.x, ancestor.x + w
        mid = (x1 + x2) / 2
        points = [(x1, y1), (mid, y1), (mid, y2), (x2, y2)]
    else:
        x1 = child.x + w / 2
        x2 = ancestor.x + w / 2
        if ancestor.y >= child.y:
            y1, y2 = child.y + h, ancestor.y
        else:
            y1, y2 = child.y, ancestor.y + h
        mid = (y1 + y2) / 2
        points = [(x1, y1), (x1, mid), (x2, mid), (x2, y2)]

    path_data = " ".join(f"{px:.1f},{py:.1f}" for px, py in points)
    return (
        f'    <polyline points="{path_data}" '
        f'fill="none" stroke="{escape(color)}" stroke-width="{width}"/>'
    )


__all__ = ["to_svg"]
