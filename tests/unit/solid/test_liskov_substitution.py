"""Tests for the Liskov substitution demonstration."""

import math

import pytest

from patternbook.solid.liskov_substitution import (
    Circle,
    ConsistentCircle,
    Ellipse,
    RoundCircle,
    run,
    stretch,
)


class TestEllipseHierarchy:
    def test_ellipse_area(self):
        assert stretch(Ellipse(), 5, 4) == pytest.approx(20 * math.pi)

    def test_circle_breaks_substitution(self):
        circle = Circle()
        area = stretch(circle, 5, 4)

        # 5*4*pi, not the 5*5*pi a circle of radius 5 would have
        assert area == pytest.approx(20 * math.pi)
        assert circle.major_axis != circle.minor_axis

    def test_consistent_circle_keeps_axes_equal(self):
        circle = ConsistentCircle()
        stretch(circle, 5, 4)

        assert circle.major_axis == circle.minor_axis == 4
        assert circle.area() == pytest.approx(16 * math.pi)

    def test_round_circle(self):
        circle = RoundCircle()
        circle.set_radius(5)
        assert circle.area() == pytest.approx(25 * math.pi)


def test_demo_output(capsys):
    run()

    out = capsys.readouterr().out
    assert f"Circle after axes 5 and 4: {20 * math.pi:.2f}" in out
    assert f"RoundCircle with radius 5: {25 * math.pi:.2f}" in out
