"""Coffee and its add-on layers (Decorator Pattern).

A decorator takes exactly one existing coffee when it is created and keeps
it as its only delegate. Layers cannot be added or removed afterwards; the
order of the chain is whatever nesting order the caller used.
"""
from pattern_demos.domain.interfaces.coffee import ICoffee


class SimpleCoffee(ICoffee):
    """Concrete component every chain starts from."""
    
    DESCRIPTION = "Simple Coffee"
    COST = 2.00
    
    def get_description(self) -> str:
        return self.DESCRIPTION
    
    def get_cost(self) -> float:
        return self.COST


class CoffeeDecorator(ICoffee):
    """
    Base decorator.
    
    Subclasses set LABEL and COST; the description gets the label appended
    after the delegate's description, and the cost gets the increment added
    to the delegate's cost.
    """
    
    LABEL = ""
    COST = 0.0
    
    def __init__(self, coffee: ICoffee):
        """
        Initialize decorator.
        
        Args:
            coffee: Coffee to wrap, becomes this layer's sole delegate
        """
        self._decorated_coffee = coffee
    
    @property
    def decorated_coffee(self) -> ICoffee:
        return self._decorated_coffee
    
    def get_description(self) -> str:
        return f"{self._decorated_coffee.get_description()}, {self.LABEL}"
    
    def get_cost(self) -> float:
        return self._decorated_coffee.get_cost() + self.COST


class MilkDecorator(CoffeeDecorator):
    LABEL = "Milk"
    COST = 0.50


class SugarDecorator(CoffeeDecorator):
    LABEL = "Sugar"
    COST = 0.25


class WhippedCreamDecorator(CoffeeDecorator):
    LABEL = "Whipped Cream"
    COST = 0.75


class VanillaDecorator(CoffeeDecorator):
    LABEL = "Vanilla"
    COST = 0.60
