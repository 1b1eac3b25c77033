"""
Decorator.

Adds responsibilities to a single object without touching its class.
``Available`` wraps any dish and adds stock keeping and an order list; the
wrapped dish keeps displaying itself exactly as before.
"""
from abc import ABC, abstractmethod
from typing import List, Tuple

from patternbook.application.decorators import demo
from patternbook.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class RestaurantDish(ABC):
    @abstractmethod
    def display(self) -> None:
        """Print the dish."""


class FreshSalad(RestaurantDish):
    def __init__(self, greens: str, cheese: str, dressing: str):
        self._greens = greens
        self._cheese = cheese
        self._dressing = dressing

    def display(self) -> None:
        print("\nFresh Salad:")
        print(f" Greens: {self._greens}")
        print(f" Cheese: {self._cheese}")
        print(f" Dressing: {self._dressing}")


class Pasta(RestaurantDish):
    def __init__(self, pasta_type: str, sauce: str):
        self._pasta_type = pasta_type
        self._sauce = sauce

    def display(self) -> None:
        print("\nClassic Pasta:")
        print(f" Pasta: {self._pasta_type}")
        print(f" Sauce: {self._sauce}")


class DishDecorator(RestaurantDish):
    """Base decorator: forwards to the wrapped dish."""

    def __init__(self, dish: RestaurantDish):
        self._dish = dish

    @property
    def dish(self) -> RestaurantDish:
        return self._dish

    def display(self) -> None:
        self._dish.display()


class Available(DishDecorator):
    """Tracks how many more of the dish can be made and who ordered it."""

    def __init__(self, dish: RestaurantDish, num_available: int):
        super().__init__(dish)
        self.num_available = num_available
        self._customers: List[str] = []

    @property
    def customers(self) -> Tuple[str, ...]:
        return tuple(self._customers)

    def order_item(self, name: str) -> bool:
        """Record an order. Returns False when the ingredients have run out."""
        if self.num_available > 0:
            self._customers.append(name)
            self.num_available -= 1
            return True

        logger.debug("Order rejected", customer=name, dish=type(self._dish).__name__)
        print(f"\nNot enough ingredients for {name}'s order!")
        return False

    def display(self) -> None:
        super().display()
        for customer in self._customers:
            print("Ordered by " + customer)


@demo("decorator", category="patterns", summary="Add stock keeping to individual dishes")
def run() -> None:
    caesar_salad = FreshSalad(
        "Crisp romaine lettuce", "Freshly-grated Parmesan cheese", "House-made Caesar dressing"
    )
    caesar_salad.display()

    fettuccine_alfredo = Pasta("Fresh-made daily pasta", "Creamy garlic alfredo sauce")
    fettuccine_alfredo.display()

    print("\nMaking these dishes available.")

    caesar_available = Available(caesar_salad, 3)
    alfredo_available = Available(fettuccine_alfredo, 4)

    for name in ("John", "Sally", "Manush"):
        caesar_available.order_item(name)

    # Only four alfredos can be made; Dennis misses out
    for name in ("Sally", "Francis", "Venkat", "Diana", "Dennis"):
        alfredo_available.order_item(name)

    caesar_available.display()
    alfredo_available.display()
