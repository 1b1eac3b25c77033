"""Tests for the decorator demonstration."""

from unittest.mock import Mock

from patternbook.patterns.decorator import Available, DishDecorator, Pasta, RestaurantDish, run


class TestAvailable:
    def setup_method(self):
        self.dish = Pasta("Penne", "Arrabbiata")

    def test_orders_recorded_while_stock_lasts(self):
        available = Available(self.dish, 2)

        assert available.order_item("Ann") is True
        assert available.order_item("Bob") is True

        assert available.customers == ("Ann", "Bob")
        assert available.num_available == 0

    def test_order_rejected_when_out_of_stock(self, capsys):
        available = Available(self.dish, 1)
        available.order_item("Ann")

        assert available.order_item("Bob") is False
        assert available.customers == ("Ann",)
        assert available.num_available == 0
        assert "Not enough ingredients for Bob's order!" in capsys.readouterr().out

    def test_display_delegates_then_lists_customers(self):
        dish = Mock(spec=RestaurantDish)
        available = Available(dish, 1)
        available.order_item("Ann")

        available.display()

        dish.display.assert_called_once_with()

    def test_decorators_stack(self, capsys):
        wrapped = DishDecorator(Available(self.dish, 1))
        wrapped.dish.order_item("Ann")

        wrapped.display()

        out = capsys.readouterr().out
        assert out.index("Pasta: Penne") < out.index("Ordered by Ann")


def test_demo_rejects_only_the_fifth_alfredo_order(capsys):
    run()

    out = capsys.readouterr().out
    assert out.count("Not enough ingredients") == 1
    assert "Not enough ingredients for Dennis's order!" in out
    for name in ("John", "Sally", "Manush", "Francis", "Venkat", "Diana"):
        assert f"Ordered by {name}" in out
    assert "Ordered by Dennis" not in out
