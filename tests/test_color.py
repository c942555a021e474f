"""Tests for color.py module."""

import pytest

from cargo_orbit.layout.color import (
    HIGHLIGHT_COLOR,
    PALETTE,
    HighlightState,
    base_color,
    blend,
    highlight_color,
    to_hex,
)

BASES = [(0, 0, 0), (255, 255, 255), (255, 0, 128), (0x98, 0xFB, 0x98), (12, 250, 200)]


class TestBlend:
    """Tests for blend function."""

    @pytest.mark.parametrize("color", BASES)
    def test_transition_zero_is_base(self, color):
        """Nothing moves at transition 0."""
        assert blend(color, HIGHLIGHT_COLOR, 0.0) == color

    @pytest.mark.parametrize("color", BASES)
    def test_transition_one_is_target(self, color):
        """Everything arrives at transition 1."""
        assert blend(color, HIGHLIGHT_COLOR, 1.0) == HIGHLIGHT_COLOR

    def test_halfway_from_below(self):
        """Channels below the target move up by the rounded-down half span."""
        assert blend((0, 0, 0), HIGHLIGHT_COLOR, 0.5) == (76, 125, 76)

    def test_halfway_from_above(self):
        """Channels above the target move down."""
        assert blend((255, 255, 255), HIGHLIGHT_COLOR, 0.5) == (204, 253, 204)

    def test_stays_in_range(self):
        """Out-of-range transitions are clamped to valid channel values."""
        r, g, b = blend((250, 250, 250), (255, 255, 255), 3.0)
        assert (r, g, b) == (255, 255, 255)


class TestHighlightColor:
    """Tests for highlight_color function."""

    def test_pending(self):
        """Crates in neither set keep their base color."""
        state = HighlightState()
        assert highlight_color("foo 1.0.0", (1, 2, 3), state) == (1, 2, 3)

    def test_completed(self):
        """Completed crates use the highlight color exactly."""
        state = HighlightState(completed={"foo 1.0.0"})
        assert highlight_color("foo 1.0.0", (1, 2, 3), state) == HIGHLIGHT_COLOR

    def test_active_blends(self):
        """Active crates follow the transition."""
        state = HighlightState(active={"foo 1.0.0"}, transition=0.0)
        assert highlight_color("foo 1.0.0", (1, 2, 3), state) == (1, 2, 3)

        state = HighlightState(active={"foo 1.0.0"}, transition=0.5)
        assert highlight_color("foo 1.0.0", (0, 0, 0), state) == (76, 125, 76)

    def test_active_takes_precedence(self):
        """A crate in both sets is treated as active."""
        state = HighlightState(
            active={"foo 1.0.0"}, completed={"foo 1.0.0"}, transition=0.0
        )
        assert highlight_color("foo 1.0.0", (1, 2, 3), state) == (1, 2, 3)


class TestBaseColor:
    """Tests for base_color function."""

    def test_from_palette(self):
        """Base colors come from the palette."""
        assert base_color("serde 1.0.190") in PALETTE

    def test_ignores_version(self):
        """Different versions of a crate share a color."""
        assert base_color("syn 1.0.109") == base_color("syn 2.0.39")

    def test_stable(self):
        """The same name always gives the same color."""
        assert base_color("tokio 1.33.0") == base_color("tokio 1.33.0")


def test_to_hex():
    """Colors format as lowercase hex."""
    assert to_hex(HIGHLIGHT_COLOR) == "#98fb98"
