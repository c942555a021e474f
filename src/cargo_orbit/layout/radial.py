"""Recursive radial layout of a dependency tree."""

import math
from dataclasses import dataclass

from ..tree import DependencyTree, NodeView
from .color import EDGE_COLOR, Color, HighlightState, base_color, highlight_color

Point = tuple[float, float]

# Children with at least this many children of their own get pushed outward
# and a wider sky for their fan-out
WIDE_FANOUT = 5
NARROW_SKY = math.pi / 2
WIDE_SKY = math.pi * 1.5

CHILD_RADIUS_RATIO = 0.7
WIDE_PUSH = 1.5


@dataclass(frozen=True)
class DrawCrate:
    """A circle to draw for one crate."""

    center: Point
    radius: float
    color: Color
    name: str
    node: NodeView


@dataclass(frozen=True)
class DrawLine:
    """A line segment joining a crate to one of its dependencies."""

    p1: Point
    p2: Point
    color: Color


def sky_for(child_count: int) -> float:
    """Angular budget for laying out a node with child_count children."""
    return NARROW_SKY if child_count < WIDE_FANOUT else WIDE_SKY


def alternating_offsets(amount: int) -> list[int]:
    """Signed step offsets 0, +1, -1, +2, -2, ... for amount satellites."""
    return [math.ceil(idx / 2) * (1 if idx % 2 else -1) for idx in range(amount)]


def get_satellites(
    center: Point,
    root_radius: float,
    in_radius: float,
    amount: int,
    phase: float,
    sky: float,
) -> tuple[float, list[tuple[Point, float]]]:
    """Place amount satellites on a circle of in_radius around center.

    Satellites spread over the arc sky, centered on phase, alternating sides
    outward from the middle.

    Args:
        center: Center of the parent circle.
        root_radius: Radius of the parent circle.
        in_radius: Distance from center to each satellite.
        amount: Number of satellites.
        phase: Angle of the middle satellite.
        sky: Total angle available to the satellites.

    Returns:
        Radius for the satellite circles, and the (point, angle) of each
        satellite.
    """
    if amount == 0:
        return root_radius * CHILD_RADIUS_RATIO, []

    diff_angle = sky / amount
    if diff_angle > math.pi:
        radius = root_radius * CHILD_RADIUS_RATIO
    else:
        # Half the chord between neighbours so same-sized circles don't overlap
        radius = min(
            in_radius * math.sqrt(2) * math.sqrt(1 - math.cos(diff_angle)) / 2,
            root_radius * CHILD_RADIUS_RATIO,
        )

    satellites: list[tuple[Point, float]] = []
    for offset in alternating_offsets(amount):
        angle = phase + offset * diff_angle
        point = (
            center[0] + math.cos(angle) * in_radius,
            center[1] + math.sin(angle) * in_radius,
        )
        satellites.append((point, angle))
    return radius, satellites


def draw_tree(
    center: Point,
    node: NodeView,
    radius: float,
    phase: float,
    sky: float,
    phase_accum: float,
    color: Color,
    highlight: HighlightState,
) -> tuple[list[DrawCrate], list[DrawLine]]:
    """Lay out node and everything below it.

    Args:
        center: Center of this node's circle.
        node: Node to lay out.
        radius: Radius of this node's circle.
        phase: Angle of the edge leading into this node.
        sky: Angle available to this node's children.
        phase_accum: Global rotation added to every fan-out.
        color: Base fill color of this node.
        highlight: Active/completed crates and animation progress.

    Returns:
        Circles in pre-order (node before its children) and one line per edge.
    """
    crate_draws = [
        DrawCrate(
            center=center,
            radius=radius,
            color=highlight_color(node.name, color, highlight),
            name=node.name,
            node=node,
        )
    ]
    line_draws: list[DrawLine] = []

    new_radius, sats = get_satellites(
        center, radius, radius * 2.0, node.child_count(), phase + phase_accum, sky
    )

    for (point, point_phase), child in zip(sats, node.children()):
        grandchildren = child.child_count()
        if grandchildren < WIDE_FANOUT:
            child_center = point
        else:
            child_center = (
                point[0] + new_radius * math.cos(point_phase) * WIDE_PUSH,
                point[1] + new_radius * math.sin(point_phase) * WIDE_PUSH,
            )

        child_crates, child_lines = draw_tree(
            child_center,
            child,
            new_radius,
            point_phase,
            sky_for(grandchildren),
            phase_accum,
            base_color(child.name),
            highlight,
        )

        # Touch both circle outlines rather than the centers
        line_draws.append(
            DrawLine(
                p1=(
                    center[0] + math.cos(point_phase) * radius,
                    center[1] + math.sin(point_phase) * radius,
                ),
                p2=(
                    child_center[0] - math.cos(point_phase) * new_radius,
                    child_center[1] - math.sin(point_phase) * new_radius,
                ),
                color=EDGE_COLOR,
            )
        )
        crate_draws.extend(child_crates)
        line_draws.extend(child_lines)

    return crate_draws, line_draws


def layout_tree(
    tree: DependencyTree,
    highlight: HighlightState | None = None,
    center: Point = (0.0, 0.0),
    radius: float = 40.0,
    phase: float = 0.0,
    phase_accum: float = 0.0,
) -> tuple[list[DrawCrate], list[DrawLine]]:
    """Lay out a whole tree starting from its root."""
    root = tree.root()
    return draw_tree(
        center,
        root,
        radius,
        phase,
        sky_for(root.child_count()),
        phase_accum,
        base_color(root.name),
        highlight or HighlightState(),
    )


def bounding_box(crates: list[DrawCrate]) -> tuple[float, float, float, float]:
    """Return (min_x, min_y, max_x, max_y) enclosing every circle."""
    if not crates:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        min(c.center[0] - c.radius for c in crates),
        min(c.center[1] - c.radius for c in crates),
        max(c.center[0] + c.radius for c in crates),
        max(c.center[1] + c.radius for c in crates),
    )
