"""Beverage recipes (Template Method Pattern)."""
from abc import ABC, abstractmethod


class Beverage(ABC):
    """
    Base recipe shared by every hot beverage.
    
    prepare() fixes the order of the steps; subclasses only decide which
    ingredient goes in and must not override prepare() itself.
    """
    
    def prepare(self) -> None:
        """Template method: boil water, add the ingredient, serve."""
        self._boil_water()
        self.add_ingredient()
        self._serve()
    
    def _boil_water(self) -> None:
        print("Boiling water")
    
    @abstractmethod
    def add_ingredient(self) -> None:
        """Add the ingredient that makes this beverage what it is."""
        pass
    
    def _serve(self) -> None:
        print("Serving the beverage")


class Tea(Beverage):
    """Tea recipe."""
    
    def add_ingredient(self) -> None:
        print("Steeping the tea bag")


class BrewedCoffee(Beverage):
    """Filter coffee recipe."""
    
    def add_ingredient(self) -> None:
        print("Dripping water through ground coffee")
