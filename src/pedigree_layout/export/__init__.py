"""
Export functionality for pedigree charts.

Example usage:
    from pedigree_layout import Person, layout_pedigree
    from pedigree_layout.export import to_svg

    geometry = layout_pedigree(person, generations=4)

    svg_content = to_svg(geometry)
    with open("pedigree.svg", "w") as f:
        f.write(svg_content)
"""

from .svg import to_svg

__all__ = [
    "to_svg",
]
