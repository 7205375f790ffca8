"""Factories."""

from pattern_demos.infrastructure.factories.coffee_factory import CoffeeFactory, TOPPINGS

__all__ = ["CoffeeFactory", "TOPPINGS"]
