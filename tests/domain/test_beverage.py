"""Tests for the beverage recipe template."""
import pytest

from pattern_demos.domain.entities.beverage import Beverage, Tea, BrewedCoffee


class RecordingBeverage(Beverage):
    def __init__(self):
        self.calls = 0

    def add_ingredient(self):
        self.calls += 1
        print("Adding a secret ingredient")


def test_cannot_instantiate_abstract_beverage():
    with pytest.raises(TypeError):
        Beverage()


def test_prepare_runs_steps_in_fixed_order(capsys):
    beverage = RecordingBeverage()

    beverage.prepare()

    assert beverage.calls == 1
    assert capsys.readouterr().out.splitlines() == [
        "Boiling water",
        "Adding a secret ingredient",
        "Serving the beverage",
    ]


@pytest.mark.parametrize("beverage_class,ingredient_line", [
    (Tea, "Steeping the tea bag"),
    (BrewedCoffee, "Dripping water through ground coffee"),
])
def test_concrete_beverages_only_vary_the_ingredient(capsys, beverage_class, ingredient_line):
    beverage_class().prepare()

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Boiling water", ingredient_line, "Serving the beverage"]
