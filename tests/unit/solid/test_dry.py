"""Tests for the DRY demonstration."""

import pytest

from patternbook.solid.dry import CustomerDry, CustomerNotDry, NamedEntity, ProductDry, ProductNotDry, run


@pytest.mark.parametrize("cls", [ProductNotDry, CustomerNotDry, ProductDry, CustomerDry])
def test_str_is_name(cls):
    assert str(cls(name="Widget")) == "Widget"


def test_dry_classes_share_one_base():
    assert issubclass(ProductDry, NamedEntity)
    assert issubclass(CustomerDry, NamedEntity)
    assert not issubclass(ProductNotDry, NamedEntity)


def test_demo_output(capsys):
    run()

    assert capsys.readouterr().out.splitlines() == [
        "ProductNotDry: Widget",
        "CustomerNotDry: Alice",
        "ProductDry: Widget",
        "CustomerDry: Alice",
    ]
