"""Factory building decorated coffees from topping names (Factory Pattern)."""
import logging
from typing import Dict, Iterable, Optional, Type

from pattern_demos.domain.interfaces.coffee import ICoffee
from pattern_demos.infrastructure.decorators.coffee_decorators import (
    SimpleCoffee,
    CoffeeDecorator,
    MilkDecorator,
    SugarDecorator,
    WhippedCreamDecorator,
    VanillaDecorator
)


logger = logging.getLogger(__name__)

TOPPINGS: Dict[str, Type[CoffeeDecorator]] = {
    "milk": MilkDecorator,
    "sugar": SugarDecorator,
    "whipped_cream": WhippedCreamDecorator,
    "vanilla": VanillaDecorator,
}


class CoffeeFactory:
    """
    Factory for decorator chains.
    
    Centralizes the mapping from topping names to decorator types so the
    chain order can be given as plain data.
    """
    
    @staticmethod
    def create_coffee(toppings: Iterable[str] = (), base: Optional[ICoffee] = None) -> ICoffee:
        """
        Build a coffee by wrapping the base once per topping.
        
        The first topping is the innermost layer, the last one the outermost,
        so labels appear in the description in the order given.
        
        Args:
            toppings: Topping names ("milk", "sugar", "whipped_cream", "vanilla")
            base: Coffee to start from, defaults to SimpleCoffee
            
        Returns:
            ICoffee instance
            
        Raises:
            ValueError: If a topping name is not supported
        """
        coffee = base if base is not None else SimpleCoffee()
        
        for topping in toppings:
            decorator = TOPPINGS.get(topping.lower())
            if decorator is None:
                raise ValueError(f"Unsupported topping: {topping}")
            coffee = decorator(coffee)
        
        logger.debug(f"Built coffee: {coffee.get_description()}")
        return coffee
