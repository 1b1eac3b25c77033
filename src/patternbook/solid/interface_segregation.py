"""
Interface Segregation Principle.

No client should be forced to depend on members it does not use. The fat
``Product`` interface makes a baseball cap carry an inseam; the segregated
``ProductBase``, ``Pants`` and ``Hat`` interfaces let each class declare only
what applies to it.
"""
from abc import ABC
from typing import List, Type

from pydantic import BaseModel, Field

from patternbook.application.decorators import demo
from patternbook.domain.base.entity import Entity


class Product(Entity, ABC):
    """Fat interface: every product must carry pants measurements."""

    id: int = 0
    weight: float = Field(0.0, ge=0)
    stock: int = Field(0, ge=0)
    inseam: int = 0
    waist_size: int = 0


class Jeans(Product):
    pass


class BaseballCap(Product):
    hat_size: int = 0


class ProductBase(Entity, ABC):
    id: int = 0
    weight: float = Field(0.0, ge=0)
    stock: int = Field(0, ge=0)


class Pants(Entity, ABC):
    inseam: int = 0
    waist_size: int = 0


class Hat(Entity, ABC):
    hat_size: int = 0


class SegregatedJeans(ProductBase, Pants):
    pass


class SegregatedBaseballCap(ProductBase, Hat):
    pass


def field_names(model: Type[BaseModel]) -> List[str]:
    return list(model.model_fields)


@demo("interface-segregation", category="solid", summary="Small focused interfaces instead of one fat one")
def run() -> None:
    for model in (Jeans, BaseballCap, SegregatedJeans, SegregatedBaseballCap):
        print(f"{model.__name__}: {', '.join(field_names(model))}")
