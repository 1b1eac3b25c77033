"""
Abstract Factory.

Interfaces are defined for creating families of related objects without
naming their concrete classes. A client holds a ``RecipeFactory`` and gets a
matching sandwich and dessert; which family it gets depends only on which
factory it was handed.
"""
from abc import ABC, abstractmethod
from typing import Dict, Type

from patternbook.application.decorators import demo
from patternbook.domain.base.exceptions import UnsupportedOptionError


class Sandwich(ABC):
    """Abstract product."""


class Dessert(ABC):
    """Abstract product."""


class BLT(Sandwich):
    pass


class GrilledCheese(Sandwich):
    pass


class CremeBrulee(Dessert):
    pass


class IceCreamSundae(Dessert):
    pass


class RecipeFactory(ABC):
    """Creates one sandwich and one dessert from the same family."""

    @abstractmethod
    def create_sandwich(self) -> Sandwich:
        """Create the family's sandwich."""

    @abstractmethod
    def create_dessert(self) -> Dessert:
        """Create the family's dessert."""


class AdultCuisineFactory(RecipeFactory):
    def create_sandwich(self) -> Sandwich:
        return BLT()

    def create_dessert(self) -> Dessert:
        return CremeBrulee()


class KidCuisineFactory(RecipeFactory):
    def create_sandwich(self) -> Sandwich:
        return GrilledCheese()

    def create_dessert(self) -> Dessert:
        return IceCreamSundae()


RECIPE_FACTORIES: Dict[str, Type[RecipeFactory]] = {
    "A": AdultCuisineFactory,
    "C": KidCuisineFactory,
}


def recipe_factory_for(code: str) -> RecipeFactory:
    """
    Pick a concrete factory from a one-letter menu code.

    Raises:
        UnsupportedOptionError: If the code names no cuisine
    """
    try:
        return RECIPE_FACTORIES[code]()
    except KeyError:
        raise UnsupportedOptionError("cuisine code", code, sorted(RECIPE_FACTORIES)) from None


def serve(code: str) -> None:
    factory = recipe_factory_for(code)
    sandwich = factory.create_sandwich()
    dessert = factory.create_dessert()

    print("\nSandwich: " + type(sandwich).__name__)
    print("Dessert: " + type(dessert).__name__)


@demo("abstract-factory", category="patterns", summary="Families of related objects from one factory")
def run() -> None:
    serve("A")
    serve("C")
