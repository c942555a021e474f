"""Radial layout of a dependency tree with build-state highlighting.

Every crate becomes a circle placed around its parent; every dependency
becomes a line between circle outlines.
"""

from .color import HIGHLIGHT_COLOR, HighlightState, base_color, blend, highlight_color
from .radial import (
    DrawCrate,
    DrawLine,
    bounding_box,
    draw_tree,
    get_satellites,
    layout_tree,
    sky_for,
)
from .render import render_html, render_svg, write_svg

__all__ = [
    "HIGHLIGHT_COLOR",
    "HighlightState",
    "base_color",
    "blend",
    "highlight_color",
    "DrawCrate",
    "DrawLine",
    "bounding_box",
    "draw_tree",
    "get_satellites",
    "layout_tree",
    "sky_for",
    "render_html",
    "render_svg",
    "write_svg",
]
