"""
DRY: every piece of knowledge should have a single, authoritative
representation. Two classes carrying the same ``name`` field and the same
``__str__`` collapse into one ``NamedEntity`` base.
"""
from patternbook.application.decorators import demo
from patternbook.domain.base.entity import Entity


class ProductNotDry(Entity):
    name: str = ""

    def __str__(self) -> str:
        return self.name


class CustomerNotDry(Entity):
    name: str = ""

    def __str__(self) -> str:
        return self.name


class NamedEntity(Entity):
    name: str = ""

    def __str__(self) -> str:
        return self.name


class ProductDry(NamedEntity):
    pass


class CustomerDry(NamedEntity):
    pass


@demo("dry", category="solid", summary="One NamedEntity instead of duplicated name handling")
def run() -> None:
    for entity in (ProductNotDry(name="Widget"), CustomerNotDry(name="Alice"),
                   ProductDry(name="Widget"), CustomerDry(name="Alice")):
        print(f"{type(entity).__name__}: {entity}")
