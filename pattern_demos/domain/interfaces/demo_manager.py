"""Interface for the demo manager (Registry Pattern)."""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from pattern_demos.domain.interfaces.demo import IDemo


class IDemoManager(ABC):
    """
    Interface for managing registered demos.
    
    Keeps demos in registration order and runs them by name.
    """
    
    @abstractmethod
    def register_demo(self, demo: IDemo) -> None:
        """
        Register a demo.
        
        Args:
            demo: Demo instance
            
        Raises:
            ValueError: If demo is invalid
        """
        pass
    
    @abstractmethod
    def get_demo(self, name: str) -> Optional[IDemo]:
        """
        Get a registered demo by name.
        
        Args:
            name: Demo name
            
        Returns:
            Demo if found, None otherwise
        """
        pass
    
    @abstractmethod
    def get_all_demos(self) -> Dict[str, IDemo]:
        """Get all registered demos keyed by name, in registration order."""
        pass
    
    @abstractmethod
    def run_demo(self, name: str) -> None:
        """
        Run a single demo by name.
        
        Raises:
            ValueError: If no demo is registered under that name
        """
        pass
    
    @abstractmethod
    def run_demos(self, names: Optional[List[str]] = None) -> None:
        """Run the named demos in the given order, or every demo when omitted."""
        pass
