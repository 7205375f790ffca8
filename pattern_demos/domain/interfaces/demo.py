"""Interface for runnable pattern demonstrations.

Each design pattern ships one demo that wires its classes together with
hardcoded sample data and prints the result, so demos can be listed and
run through the same registry.
"""
from abc import ABC, abstractmethod


class IDemo(ABC):
    """
    Interface for pattern demonstrations.
    
    Implementations are registered with the demo manager and run by name.
    """
    
    @abstractmethod
    def get_name(self) -> str:
        """
        Get the name this demo is registered under.
        
        Returns:
            Demo name (e.g., "adapter", "decorator")
        """
        pass
    
    @abstractmethod
    def get_description(self) -> str:
        """
        Get a one line description of the demonstrated pattern.
        
        Returns:
            Description text
        """
        pass
    
    @abstractmethod
    def run(self) -> None:
        """Run the demonstration, printing its output to the console."""
        pass
