"""
Template Method.

``Bread.make`` fixes the order of the steps (mix, bake, slice); subclasses
fill in the steps. ``slice`` has a default that subclasses may keep.
"""
from abc import ABC, abstractmethod

from patternbook.application.decorators import demo


class Bread(ABC):
    @abstractmethod
    def mix_ingredients(self) -> None:
        pass

    @abstractmethod
    def bake(self) -> None:
        pass

    def slice(self) -> None:
        print(f"Slicing the {type(self).__name__} bread!")

    def make(self) -> None:
        """The template method."""
        self.mix_ingredients()
        self.bake()
        self.slice()


class TwelveGrain(Bread):
    def mix_ingredients(self) -> None:
        print("Gathering Ingredients for 12-Grain Bread.")

    def bake(self) -> None:
        print("Baking the 12-Grain Bread. (25 minutes)")


class Sourdough(Bread):
    def mix_ingredients(self) -> None:
        print("Gathering Ingredients for Sourdough Bread.")

    def bake(self) -> None:
        print("Baking the Sourdough Bread. (20 minutes)")


class WholeWheat(Bread):
    def mix_ingredients(self) -> None:
        print("Gathering Ingredients for Whole Wheat Bread.")

    def bake(self) -> None:
        print("Baking the Whole Wheat Bread. (15 minutes)")


@demo("template-method", category="patterns", summary="A fixed baking recipe with pluggable steps")
def run() -> None:
    for bread in (Sourdough(), TwelveGrain(), WholeWheat()):
        bread.make()
