"""Node fill colors and build-state highlighting."""

import math
import zlib
from dataclasses import dataclass, field

Color = tuple[int, int, int]

# Fill for crates that are being built (blend target) or already built
HIGHLIGHT_COLOR: Color = (0x98, 0xFB, 0x98)
EDGE_COLOR: Color = (255, 255, 255)

# Pending crates get one of these, picked from the crate name
PALETTE: tuple[Color, ...] = (
    (0x87, 0xCE, 0xEB),  # sky blue
    (0xFF, 0xB6, 0xC1),  # light pink
    (0xFF, 0xDA, 0xB9),  # peach
    (0xE6, 0xE6, 0xFA),  # lavender
    (0xF0, 0xE6, 0x8C),  # khaki
    (0xAF, 0xEE, 0xEE),  # pale turquoise
    (0xD8, 0xBF, 0xD8),  # thistle
    (0xF5, 0xDE, 0xB3),  # wheat
)


@dataclass
class HighlightState:
    """Build state for one layout pass."""

    active: set[str] = field(default_factory=set)
    completed: set[str] = field(default_factory=set)
    transition: float = 0.0  # 0..1 progress of the active-crate animation


def base_color(name: str) -> Color:
    """Pick a palette color from the crate name, ignoring its version."""
    crate = name.rsplit(" ", 1)[0]
    return PALETTE[zlib.crc32(crate.encode()) % len(PALETTE)]


def _blend_channel(start: int, end: int, transition: float) -> int:
    step = math.floor(abs(end - start) * transition)
    value = start + step if end >= start else start - step
    return max(0, min(255, value))


def blend(color: Color, target: Color, transition: float) -> Color:
    """Move color toward target by the given fraction, channel by channel.

    The distance covered on each channel is rounded down, so transition 0
    returns color and transition 1 returns target.
    """
    return (
        _blend_channel(color[0], target[0], transition),
        _blend_channel(color[1], target[1], transition),
        _blend_channel(color[2], target[2], transition),
    )


def highlight_color(name: str, color: Color, highlight: HighlightState) -> Color:
    """Fill color for a crate given the current build state."""
    if name in highlight.active:
        return blend(color, HIGHLIGHT_COLOR, highlight.transition)
    if name in highlight.completed:
        return HIGHLIGHT_COLOR
    return color


def to_hex(color: Color) -> str:
    return "#{:02x}{:02x}{:02x}".format(*color)
