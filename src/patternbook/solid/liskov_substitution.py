"""
Liskov Substitution Principle.

Code written against a parent class must keep working when handed a child.
``Circle`` keeps its axes equal only through one setter, so code that sets
both axes of what it believes is an ellipse gets a circle with the wrong
area. ``ConsistentCircle`` mirrors both setters; ``RoundCircle`` sidesteps the
hierarchy entirely.
"""
import math

from patternbook.application.decorators import demo


class Ellipse:
    def __init__(self):
        self.major_axis = 0.0
        self.minor_axis = 0.0

    def set_major_axis(self, major_axis: float) -> None:
        self.major_axis = major_axis

    def set_minor_axis(self, minor_axis: float) -> None:
        self.minor_axis = minor_axis

    def area(self) -> float:
        return self.major_axis * self.minor_axis * math.pi


class Circle(Ellipse):
    """Breaks substitution: setting the minor axis afterwards desynchronises the axes."""

    def set_major_axis(self, major_axis: float) -> None:
        super().set_major_axis(major_axis)
        self.minor_axis = major_axis


class ConsistentCircle(Ellipse):
    def set_major_axis(self, major_axis: float) -> None:
        super().set_major_axis(major_axis)
        self.minor_axis = major_axis

    def set_minor_axis(self, minor_axis: float) -> None:
        super().set_minor_axis(minor_axis)
        self.major_axis = minor_axis


class RoundCircle:
    """A circle outside the ellipse hierarchy."""

    def __init__(self, radius: float = 0.0):
        self.radius = radius

    def set_radius(self, radius: float) -> None:
        self.radius = radius

    def area(self) -> float:
        return self.radius * self.radius * math.pi


def stretch(ellipse: Ellipse, major_axis: float, minor_axis: float) -> float:
    """Client code written for ellipses."""
    ellipse.set_major_axis(major_axis)
    ellipse.set_minor_axis(minor_axis)
    return ellipse.area()


@demo("liskov", category="solid", summary="A circle that cannot stand in for an ellipse")
def run() -> None:
    area = stretch(Circle(), 5, 4)
    print(f"Circle after axes 5 and 4: {area:.2f} (5*4*pi, a circle should give 5*5*pi = {25 * math.pi:.2f})")

    area = stretch(ConsistentCircle(), 5, 4)
    print(f"ConsistentCircle after axes 5 and 4: {area:.2f} (both axes follow the last setter)")

    circle = RoundCircle()
    circle.set_radius(5)
    print(f"RoundCircle with radius 5: {circle.area():.2f}")
