"""Decorator pattern demo."""
from pattern_demos.domain.interfaces.coffee import ICoffee
from pattern_demos.domain.interfaces.demo import IDemo
from pattern_demos.infrastructure.decorators.coffee_decorators import (
    SimpleCoffee,
    MilkDecorator,
    SugarDecorator,
    WhippedCreamDecorator,
    VanillaDecorator
)
from pattern_demos.infrastructure.factories.coffee_factory import CoffeeFactory


def _print_coffee(coffee: ICoffee) -> None:
    print(f"{coffee.get_description()} = ${coffee.get_cost():.2f}")


class DecoratorDemo(IDemo):
    """Wraps a simple coffee in more and more layers and prints each result."""
    
    def get_name(self) -> str:
        return "decorator"
    
    def get_description(self) -> str:
        return "Decorator: add milk, sugar, whipped cream and vanilla to a coffee layer by layer"
    
    def run(self) -> None:
        _print_coffee(SimpleCoffee())
        
        _print_coffee(MilkDecorator(SimpleCoffee()))
        
        _print_coffee(SugarDecorator(MilkDecorator(SimpleCoffee())))
        
        fancy_coffee = VanillaDecorator(
            WhippedCreamDecorator(
                SugarDecorator(
                    MilkDecorator(
                        SimpleCoffee()))))
        _print_coffee(fancy_coffee)
        
        # Same chain, built from names
        _print_coffee(CoffeeFactory.create_coffee(["milk", "sugar", "whipped_cream", "vanilla"]))
