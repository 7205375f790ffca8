"""Decorators layering extras on top of a coffee."""

from pattern_demos.infrastructure.decorators.coffee_decorators import (
    SimpleCoffee,
    CoffeeDecorator,
    MilkDecorator,
    SugarDecorator,
    WhippedCreamDecorator,
    VanillaDecorator,
)

__all__ = [
    "SimpleCoffee",
    "CoffeeDecorator",
    "MilkDecorator",
    "SugarDecorator",
    "WhippedCreamDecorator",
    "VanillaDecorator",
]
