"""Tests for coffee decorator chains."""
import pytest

from pattern_demos.domain.interfaces.coffee import ICoffee
from pattern_demos.infrastructure.decorators.coffee_decorators import (
    SimpleCoffee,
    MilkDecorator,
    SugarDecorator,
    WhippedCreamDecorator,
    VanillaDecorator
)


INCREMENTS = {
    MilkDecorator: 0.50,
    SugarDecorator: 0.25,
    WhippedCreamDecorator: 0.75,
    VanillaDecorator: 0.60,
}


def test_simple_coffee():
    coffee = SimpleCoffee()
    assert coffee.get_description() == "Simple Coffee"
    assert coffee.get_cost() == pytest.approx(2.00)


@pytest.mark.parametrize("decorator,label", [
    (MilkDecorator, "Milk"),
    (SugarDecorator, "Sugar"),
    (WhippedCreamDecorator, "Whipped Cream"),
    (VanillaDecorator, "Vanilla"),
])
def test_single_layer(decorator, label):
    coffee = decorator(SimpleCoffee())

    assert isinstance(coffee, ICoffee)
    assert coffee.get_description() == f"Simple Coffee, {label}"
    assert coffee.get_cost() == pytest.approx(2.00 + INCREMENTS[decorator])


def test_two_layers():
    coffee = SugarDecorator(MilkDecorator(SimpleCoffee()))

    assert coffee.get_description() == "Simple Coffee, Milk, Sugar"
    assert coffee.get_cost() == pytest.approx(2.75)


def test_four_layers():
    coffee = VanillaDecorator(
        WhippedCreamDecorator(
            SugarDecorator(
                MilkDecorator(
                    SimpleCoffee()))))

    assert coffee.get_description() == "Simple Coffee, Milk, Sugar, Whipped Cream, Vanilla"
    assert coffee.get_cost() == pytest.approx(4.10)


def test_cost_does_not_depend_on_nesting_order():
    forward = VanillaDecorator(WhippedCreamDecorator(SugarDecorator(MilkDecorator(SimpleCoffee()))))
    backward = MilkDecorator(SugarDecorator(WhippedCreamDecorator(VanillaDecorator(SimpleCoffee()))))

    assert forward.get_cost() == pytest.approx(backward.get_cost())
    assert backward.get_description() == "Simple Coffee, Vanilla, Whipped Cream, Sugar, Milk"


def test_same_layer_can_repeat():
    coffee = MilkDecorator(MilkDecorator(SimpleCoffee()))

    assert coffee.get_description() == "Simple Coffee, Milk, Milk"
    assert coffee.get_cost() == pytest.approx(3.00)


def test_decorator_keeps_its_delegate():
    inner = MilkDecorator(SimpleCoffee())
    outer = SugarDecorator(inner)
    assert outer.decorated_coffee is inner


def test_decorator_accepts_any_coffee():
    class HouseBlend(ICoffee):
        def get_description(self):
            return "House Blend"

        def get_cost(self):
            return 3.00

    coffee = VanillaDecorator(HouseBlend())

    assert coffee.get_description() == "House Blend, Vanilla"
    assert coffee.get_cost() == pytest.approx(3.60)
