"""Tests for stop normalization."""

import pytest

from cssgradient.errors import GeometryError
from cssgradient.geometry import normalize_stops
from cssgradient.model.color import RGBA, PaintColor
from cssgradient.model.gradient import ColorHint, ColorStop
from cssgradient.model.value import Length

RED = RGBA(255, 0, 0)
BLUE = RGBA(0, 0, 255)


def positions(stops, ray=1.0):
    return [stop.position for stop in normalize_stops(stops, ray)]


class TestEvenSpacing:
    def test_two_stops(self):
        assert positions([ColorStop(RED), ColorStop(BLUE)]) == [0.0, 1.0]

    def test_three_stops(self):
        assert positions([ColorStop(RED), ColorStop(BLUE), ColorStop(RED)]) == [0.0, 0.5, 1.0]

    def test_single_stop(self):
        assert positions([ColorStop(RED)]) == [0.0]

    def test_hints_are_dropped(self):
        stops = [ColorStop(RED), ColorHint(Length(30.0, "%")), ColorStop(BLUE)]
        assert positions(stops) == [0.0, 1.0]


class TestExplicitPositions:
    def test_percentages(self):
        stops = [ColorStop(RED, Length(25.0, "%")), ColorStop(BLUE, Length(75.0, "%"))]
        assert positions(stops) == [0.25, 0.75]

    def test_absolute_lengths_use_ray_length(self):
        stops = [ColorStop(RED, Length(50.0, "px")), ColorStop(BLUE, Length(150.0, "px"))]
        assert positions(stops, ray=200.0) == [0.25, 0.75]

    def test_mixed_explicit_and_implicit(self):
        stops = [ColorStop(RED), ColorStop(BLUE, Length(20.0, "%")), ColorStop(RED)]
        assert positions(stops) == [0.0, 0.2, 1.0]

    def test_zero_ray_length(self):
        with pytest.raises(GeometryError):
            normalize_stops([ColorStop(RED, Length(10.0, "px"))], 0.0)


class TestMonotonicClamp:
    def test_smaller_position_is_pinned_up(self):
        stops = [ColorStop(RED, Length(50.0, "%")), ColorStop(BLUE, Length(0.0, "px"))]
        assert positions(stops) == [0.5, 0.5]

    def test_implicit_position_is_pinned_up(self):
        stops = [ColorStop(RED, Length(80.0, "%")), ColorStop(BLUE), ColorStop(RED)]
        assert positions(stops) == [0.8, 0.8, 1.0]

    def test_clamped_to_one(self):
        assert positions([ColorStop(RED, Length(150.0, "%"))]) == [1.0]

    def test_negative_clamped_to_zero(self):
        assert positions([ColorStop(RED, Length(-20.0, "%"))]) == [0.0]

    def test_non_decreasing_and_bounded(self):
        raw = [30, -10, 120, 60, 90]
        stops = [ColorStop(RED, Length(float(v), "%")) for v in raw]
        result = positions(stops)
        assert result == sorted(result)
        assert all(0.0 <= p <= 1.0 for p in result)


class TestColors:
    def test_paint_colors_are_fractions(self):
        [stop] = normalize_stops([ColorStop(RGBA(255, 0, 0, 0.5))], 1.0)
        assert stop.color == PaintColor(1.0, 0.0, 0.0, 0.5)
