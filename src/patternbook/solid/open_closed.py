"""
Open/Closed Principle.

A software entity should be open for extension but closed for modification.

Shapes: the legacy calculators switch on concrete types, so every new shape
means editing them. Once each ``Shape`` computes its own area,
``CombinedAreaCalculator`` never changes again.

Products: ``ProductFilter`` grows one method per criterion. Splitting the
work into a filter and a ``Specification`` (a predicate object that composes
with ``&``) lets new criteria be added without touching the filter.
"""
import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, Iterable, Iterator, List, Sequence, TypeVar

from pydantic import Field

from patternbook.application.decorators import demo
from patternbook.domain.base.entity import AbstractEntity, Entity

T = TypeVar("T")


class LegacyRectangle:
    def __init__(self, width: float = 0.0, height: float = 0.0):
        self.width = width
        self.height = height


class LegacyCircle:
    def __init__(self, radius: float = 0.0):
        self.radius = radius


class CombinedAreaCalculatorV0:
    """Only knows rectangles; anything else is silently ignored."""

    def area(self, shapes: Iterable[object]) -> float:
        area = 0.0
        for shape in shapes:
            if isinstance(shape, LegacyRectangle):
                area += shape.width * shape.height
        return area


class CombinedAreaCalculatorChanged:
    """The same calculator after it had to be edited for circles."""

    def area(self, shapes: Iterable[object]) -> float:
        area = 0.0
        for shape in shapes:
            if isinstance(shape, LegacyRectangle):
                area += shape.width * shape.height
            if isinstance(shape, LegacyCircle):
                area += (shape.radius * shape.radius) * math.pi
        return area


class Shape(AbstractEntity):
    @abstractmethod
    def area(self) -> float:
        """Area of this shape."""


class Rectangle(Shape):
    width: float = Field(0.0, ge=0)
    height: float = Field(0.0, ge=0)

    def area(self) -> float:
        return self.width * self.height


class Circle(Shape):
    radius: float = Field(0.0, ge=0)

    def area(self) -> float:
        return self.radius * self.radius * math.pi


class Triangle(Shape):
    height: float = Field(0.0, ge=0)
    width: float = Field(0.0, ge=0)

    def area(self) -> float:
        return self.height * self.width * 0.5


class CombinedAreaCalculator:
    def area(self, shapes: Iterable[Shape]) -> float:
        return sum(shape.area() for shape in shapes)


class Color(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class Size(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    YUGE = "yuge"


class Product(Entity):
    name: str
    color: Color
    size: Size


class ProductFilter:
    """Before: one method per criterion, and one more for every combination."""

    def filter_by_color_list(self, products: Iterable[Product], color: Color) -> List[Product]:
        result = []
        for p in products:
            if p.color == color:
                result.append(p)
        return result

    def filter_by_color(self, products: Iterable[Product], color: Color) -> Iterator[Product]:
        for p in products:
            if p.color == color:
                yield p

    def filter_by_size(self, products: Iterable[Product], size: Size) -> Iterator[Product]:
        for p in products:
            if p.size == size:
                yield p

    def filter_by_size_and_color(self, products: Iterable[Product], size: Size,
                                 color: Color) -> Iterator[Product]:
        for p in products:
            if p.size == size and p.color == color:
                yield p


class Specification(ABC, Generic[T]):
    """A predicate over items of type T. Combine with ``&``."""

    @abstractmethod
    def is_satisfied(self, item: T) -> bool:
        pass

    def __and__(self, other: "Specification[T]") -> "AndSpecification[T]":
        return AndSpecification(self, other)


class AndSpecification(Specification[T]):
    def __init__(self, first: Specification[T], second: Specification[T]):
        self.first = first
        self.second = second

    def is_satisfied(self, item: T) -> bool:
        return self.first.is_satisfied(item) and self.second.is_satisfied(item)


class Filter(ABC, Generic[T]):
    @abstractmethod
    def filter(self, items: Iterable[T], spec: Specification[T]) -> Iterator[T]:
        """Yield the items that satisfy spec, in input order."""


class ColorSpecification(Specification[Product]):
    def __init__(self, color: Color):
        self.color = color

    def is_satisfied(self, item: Product) -> bool:
        return item.color == self.color


class SizeSpecification(Specification[Product]):
    def __init__(self, size: Size):
        self.size = size

    def is_satisfied(self, item: Product) -> bool:
        return item.size == self.size


class BetterFilter(Filter[Product]):
    def filter(self, items: Iterable[Product], spec: Specification[Product]) -> Iterator[Product]:
        for item in items:
            if spec.is_satisfied(item):
                yield item


def color_and_size(color: Color, size: Size) -> AndSpecification[Product]:
    return AndSpecification(ColorSpecification(color), SizeSpecification(size))


@demo("open-closed-shapes", category="solid", summary="Shapes compute their own area")
def run_shapes() -> None:
    legacy = [LegacyRectangle(2, 3), LegacyCircle(1)]
    print(f"Rectangles-only calculator: {CombinedAreaCalculatorV0().area(legacy):.2f}")
    print(f"Edited calculator: {CombinedAreaCalculatorChanged().area(legacy):.2f}")

    shapes: Sequence[Shape] = [
        Rectangle(width=2, height=3),
        Circle(radius=1),
        Triangle(height=4, width=5),
    ]
    for shape in shapes:
        print(f" - {type(shape).__name__}: {shape.area():.2f}")
    print(f"Combined area: {CombinedAreaCalculator().area(shapes):.2f}")


@demo("open-closed-products", category="solid", summary="Filter products with composable specifications")
def run_products() -> None:
    apple = Product(name="Apple", color=Color.GREEN, size=Size.SMALL)
    tree = Product(name="Tree", color=Color.GREEN, size=Size.LARGE)
    house = Product(name="House", color=Color.BLUE, size=Size.LARGE)

    products = [apple, tree, house]

    pf = ProductFilter()
    print("Green products (old):")
    for p in pf.filter_by_color(products, Color.GREEN):
        print(f" - {p.name} is green")

    bf = BetterFilter()
    print("Green products (new):")
    for p in bf.filter(products, ColorSpecification(Color.GREEN)):
        print(f" - {p.name} is green")

    print("Large green products:")
    large_green = ColorSpecification(Color.GREEN) & SizeSpecification(Size.LARGE)
    for p in bf.filter(products, large_green):
        print(f" - {p.name} is large and green")
