"""
Factory Method.

The base ``Sandwich`` decides *when* its ingredients are created (during
construction) but leaves *which* ingredients to the subclass through the
``create_ingredients`` factory method.
"""
from abc import ABC, abstractmethod
from typing import List

from patternbook.application.decorators import demo


class Ingredient(ABC):
    pass


class Bread(Ingredient):
    pass


class Turkey(Ingredient):
    pass


class Lettuce(Ingredient):
    pass


class Mayonnaise(Ingredient):
    pass


class Sandwich(ABC):
    def __init__(self):
        self._ingredients: List[Ingredient] = []
        self.create_ingredients()

    @abstractmethod
    def create_ingredients(self) -> None:
        """Factory method: append this sandwich's ingredients."""

    @property
    def ingredients(self) -> List[Ingredient]:
        return self._ingredients


class TurkeySandwich(Sandwich):
    def create_ingredients(self) -> None:
        self.ingredients.extend([
            Bread(),
            Mayonnaise(),
            Lettuce(),
            Turkey(),
            Turkey(),
            Bread(),
        ])


class Veggie(Sandwich):
    def create_ingredients(self) -> None:
        self.ingredients.extend([Bread(), Lettuce(), Mayonnaise(), Bread()])


@demo("factory-method", category="patterns", summary="Subclasses decide which ingredients get created")
def run() -> None:
    sandwiches: List[Sandwich] = [TurkeySandwich(), Veggie()]

    for sandwich in sandwiches:
        print("\nSandwich: " + type(sandwich).__name__ + " ")
        for ingredient in sandwich.ingredients:
            print("Ingredient: " + type(ingredient).__name__)
