"""Interface for coffee components (Decorator Pattern)."""
from abc import ABC, abstractmethod


class ICoffee(ABC):
    """
    Component interface for the Decorator Pattern.
    
    Both the base coffee and every decorator layer implement it, so a
    decorated coffee can be used wherever a plain one is expected.
    """
    
    @abstractmethod
    def get_description(self) -> str:
        """
        Get the human readable description of the coffee.
        
        Returns:
            Description including every layer's label
        """
        pass
    
    @abstractmethod
    def get_cost(self) -> float:
        """
        Get the total cost of the coffee.
        
        Returns:
            Base cost plus every layer's increment
        """
        pass
