"""
Factory Method with a factory table.

Each operating mode has its own creator class. ``AirConditioner`` keeps a
table from action to creator, so adding a mode means adding a creator and a
table entry rather than another branch. ``ReflectiveAirConditioner`` builds
the same table by naming convention: ``Actions.COOLING`` -> ``CoolingFactory``.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict

from patternbook.application.decorators import demo
from patternbook.domain.base.exceptions import UnsupportedOptionError


class AirConditionerMode(ABC):
    """Product interface."""

    @abstractmethod
    def operate(self) -> None:
        """Run the air conditioner in this mode."""


class Cooling(AirConditionerMode):
    def __init__(self, temperature: float):
        self._temperature = temperature

    @property
    def temperature(self) -> float:
        return self._temperature

    def operate(self) -> None:
        print(f"Cooling the room to the required temperature of {self._temperature:g} degrees")


class Warming(AirConditionerMode):
    def __init__(self, temperature: float):
        self._temperature = temperature

    @property
    def temperature(self) -> float:
        return self._temperature

    def operate(self) -> None:
        print(f"Warming the room to the required temperature of {self._temperature:g} degrees.")


class AirConditionerFactory(ABC):
    """Creator interface."""

    @abstractmethod
    def create(self, temperature: float) -> AirConditionerMode:
        """Create the mode for the requested temperature."""


class CoolingFactory(AirConditionerFactory):
    def create(self, temperature: float) -> AirConditionerMode:
        return Cooling(temperature)


class WarmingFactory(AirConditionerFactory):
    def create(self, temperature: float) -> AirConditionerMode:
        return Warming(temperature)


class Actions(Enum):
    COOLING = "cooling"
    WARMING = "warming"


class AirConditioner:
    """Looks the creator up in an explicit table."""

    def __init__(self):
        self._factories: Dict[Actions, AirConditionerFactory] = {
            Actions.COOLING: CoolingFactory(),
            Actions.WARMING: WarmingFactory(),
        }

    @classmethod
    def initialize_factories(cls) -> "AirConditioner":
        return cls()

    def execute_creation(self, action: Actions, temperature: float) -> AirConditionerMode:
        try:
            factory = self._factories[action]
        except KeyError:
            raise UnsupportedOptionError("air conditioner action", action) from None
        return factory.create(temperature)


class ReflectiveAirConditioner(AirConditioner):
    """Builds the creator table from the ``Actions`` members by class name."""

    def __init__(self):
        self._factories = {}
        for action in Actions:
            factory_name = f"{action.name.capitalize()}Factory"
            factory_cls = globals().get(factory_name)
            if factory_cls is None:
                raise UnsupportedOptionError("air conditioner action", action)
            self._factories[action] = factory_cls()


@demo("air-conditioner", category="patterns", summary="Factory method selected from a table of creators")
def run() -> None:
    cooling = AirConditioner().execute_creation(Actions.COOLING, 22.5)
    cooling.operate()

    warming = AirConditioner().execute_creation(Actions.WARMING, 28)
    warming.operate()

    AirConditioner \
        .initialize_factories() \
        .execute_creation(Actions.COOLING, 23) \
        .operate()
