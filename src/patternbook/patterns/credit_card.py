"""
Factory Method with parameterised creators.

Each card factory is configured with a credit limit and an annual charge and
knows which card class to build. The client only picks the factory.
"""
from abc import ABC, abstractmethod
from typing import Callable, Dict, Tuple

from pydantic import Field

from patternbook.application.decorators import demo
from patternbook.domain.base.entity import Entity
from patternbook.domain.base.exceptions import UnsupportedOptionError


class CreditCard(Entity):
    """A credit card offer. The card type is fixed per subclass."""

    card_type: str = Field(frozen=True)
    credit_limit: int = Field(ge=0)
    annual_charge: int = Field(ge=0)


class MoneyBackCreditCard(CreditCard):
    card_type: str = Field("MoneyBack", frozen=True)


class TitaniumCreditCard(CreditCard):
    card_type: str = Field("Titanium", frozen=True)


class PlatinumCreditCard(CreditCard):
    card_type: str = Field("Platinum", frozen=True)


class CardFactory(ABC):
    def __init__(self, credit_limit: int, annual_charge: int):
        self._credit_limit = credit_limit
        self._annual_charge = annual_charge

    @abstractmethod
    def get_credit_card(self) -> CreditCard:
        """Build a card with this factory's limit and charge."""


class MoneyBackFactory(CardFactory):
    def get_credit_card(self) -> CreditCard:
        return MoneyBackCreditCard(credit_limit=self._credit_limit, annual_charge=self._annual_charge)


class TitaniumFactory(CardFactory):
    def get_credit_card(self) -> CreditCard:
        return TitaniumCreditCard(credit_limit=self._credit_limit, annual_charge=self._annual_charge)


class PlatinumFactory(CardFactory):
    def get_credit_card(self) -> CreditCard:
        return PlatinumCreditCard(credit_limit=self._credit_limit, annual_charge=self._annual_charge)


# name -> (factory, credit limit, annual charge)
CARD_OFFERS: Dict[str, Tuple[Callable[[int, int], CardFactory], int, int]] = {
    "moneyback": (MoneyBackFactory, 50000, 0),
    "titanium": (TitaniumFactory, 100000, 500),
    "platinum": (PlatinumFactory, 500000, 1000),
}


def card_factory_for(name: str) -> CardFactory:
    """
    Create the factory for a named card offer (case-insensitive).

    Raises:
        UnsupportedOptionError: If no offer has that name
    """
    try:
        factory_cls, credit_limit, annual_charge = CARD_OFFERS[name.lower()]
    except KeyError:
        raise UnsupportedOptionError("card type", name, sorted(CARD_OFFERS)) from None
    return factory_cls(credit_limit, annual_charge)


def describe(card: CreditCard) -> str:
    return (f"Card Type: {card.card_type}\n"
            f"Credit Limit: {card.credit_limit}\n"
            f"Annual Charge: {card.annual_charge}")


@demo("credit-card", category="patterns", summary="Configured factories producing credit cards")
def run() -> None:
    factory = card_factory_for("moneyback")
    print(describe(factory.get_credit_card()))
