#!/usr/bin/env python3
"""
Visualization script for pedigree chart layouts.

Generates images of every chart orientation into ./build/

Usage:
    python scripts/visualize.py
"""

from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from pedigree_layout import Orientation, Person, layout_pedigree
from pedigree_layout.export import to_svg
from pedigree_layout.tree import parent_index

# Output directory
BUILD_DIR = Path(__file__).parent.parent / "build"


def ensure_build_dir():
    """Create build directory if it doesn't exist."""
    BUILD_DIR.mkdir(exist_ok=True)


def create_sample_family(depth=5):
    """Create a root individual with ancestors known for ``depth`` generations."""

    def ancestors(sosa, generation):
        if generation > depth:
            return None
        # Leave one branch unknown to show blank boxes
        if sosa == 13:
            return None
        return Person(
            f"I{sosa}",
            f"Sosa {sosa}",
            father=ancestors(2 * sosa, generation + 1),
            mother=ancestors(2 * sosa + 1, generation + 1),
        )

    root = ancestors(1, 1)
    root.has_spouse_family = True
    return root


def visualize(geometry, title="Pedigree", ax=None):
    """Draw a computed chart on an axis."""
    w = geometry.box.width
    h = geometry.box.height

    # Draw connectors between box centers
    for slot in geometry.nodes[1:]:
        child = geometry.nodes[parent_index(slot.index)]
        ax.plot(
            [child.x + w / 2, slot.x + w / 2],
            [child.y + h / 2, slot.y + h / 2],
            "gray",
            alpha=0.5,
            linewidth=1,
            zorder=1,
        )

    # Draw boxes
    for slot in geometry.nodes:
        color = "steelblue" if slot.individual is not None else "lightgray"
        ax.add_patch(
            Rectangle((slot.x, slot.y), w, h, facecolor=color, edgecolor="white", zorder=5)
        )
        ax.annotate(
            str(slot.sosa),
            (slot.x + w / 2, slot.y + h / 2),
            ha="center",
            va="center",
            fontsize=6,
            color="white",
            zorder=6,
        )

    ax.set_xlim(0, geometry.width)
    ax.set_ylim(geometry.height, 0)
    ax.set_title(title, fontsize=12, fontweight="bold")
    ax.set_aspect("equal")
    ax.axis("off")


def save_comparison(root, generations, filename, title):
    """Generate and save one image with every orientation."""
    fig, axes = plt.subplots(2, 2, figsize=(14, 14))

    for ax, orientation in zip(axes.flatten(), Orientation):
        geometry = layout_pedigree(
            root, generations, orientation, box=(120, 40), spacing_x=10, spacing_y=10
        )
        visualize(geometry, orientation.name.replace("_", " ").title(), ax=ax)

    fig.suptitle(title, fontsize=14, fontweight="bold")
    plt.tight_layout()

    filepath = BUILD_DIR / filename
    fig.savefig(filepath, dpi=150, bbox_inches="tight", facecolor="white")
    plt.close(fig)
    print(f"  Saved: {filepath}")


def save_svg(root, generations, orientation, filename):
    """Export one chart as SVG."""
    geometry = layout_pedigree(root, generations, orientation, box=(120, 40))
    filepath = BUILD_DIR / filename
    filepath.write_text(to_svg(geometry, background="white"))
    print(f"  Saved: {filepath}")


def main():
    ensure_build_dir()
    root = create_sample_family()

    print("Generating pedigree charts...")
    for generations in (3, 4, 5):
        save_comparison(
            root,
            generations,
            f"pedigree_{generations}_generations.png",
            f"Pedigree charts, {generations} generations",
        )
    for orientation in Orientation:
        save_svg(root, 4, orientation, f"pedigree_{orientation.name.lower()}.svg")
    print("Done.")


if __name__ == "__main__":
    main()
