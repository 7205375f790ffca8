"""Demo manager implementation (Registry Pattern).

Keeps every registered demo and runs them by name.
"""
import logging
from typing import Dict, List, Optional

from pattern_demos.domain.interfaces.demo import IDemo
from pattern_demos.domain.interfaces.demo_manager import IDemoManager
from pattern_demos.infrastructure.monitoring import track_demo_run


class DemoManager(IDemoManager):
    """
    Implementation of demo manager following Registry Pattern.
    
    Demos are kept in registration order. Registering a second demo under
    an existing name replaces the first one in place.
    """
    
    def __init__(self):
        """Initialize demo manager with empty registry."""
        self._demos: Dict[str, IDemo] = {}
        self._logger = logging.getLogger(__name__)
    
    def register_demo(self, demo: IDemo) -> None:
        """
        Register a demo under its own name.
        
        Args:
            demo: Demo instance
            
        Raises:
            ValueError: If demo is invalid
        """
        if not isinstance(demo, IDemo):
            raise ValueError("Demo must implement IDemo")
        
        name = demo.get_name()
        
        if not name:
            raise ValueError("Demo must return a valid name")
        
        if name in self._demos:
            self._logger.warning(
                f"Demo '{name}' already exists. Overwriting with {demo.__class__.__name__}"
            )
        
        self._demos[name] = demo
        self._logger.debug(f"Registered demo '{name}'")
    
    def get_demo(self, name: str) -> Optional[IDemo]:
        return self._demos.get(name)
    
    def get_all_demos(self) -> Dict[str, IDemo]:
        return self._demos.copy()
    
    def run_demo(self, name: str) -> None:
        """
        Run a single demo by name.
        
        Args:
            name: Demo name
            
        Raises:
            ValueError: If no demo is registered under that name
        """
        demo = self._demos.get(name)
        if demo is None:
            available = ", ".join(self._demos) or "none"
            raise ValueError(f"Unknown demo: {name} (available: {available})")
        
        self._logger.info(f"Running demo '{name}'")
        try:
            demo.run()
        except Exception as e:
            self._logger.error(f"Demo '{name}' failed: {e}", exc_info=True)
            track_demo_run(name, success=False)
            raise
        track_demo_run(name, success=True)
    
    def run_demos(self, names: Optional[List[str]] = None) -> None:
        """
        Run several demos, one after the other.
        
        Every name is checked before anything runs, so an unknown name
        never leaves a partial run behind.
        
        Args:
            names: Demo names in the order to run them; all demos when omitted
            
        Raises:
            ValueError: If any name is not registered
        """
        selected = list(names) if names else list(self._demos)
        
        unknown = [name for name in selected if name not in self._demos]
        if unknown:
            available = ", ".join(self._demos) or "none"
            raise ValueError(f"Unknown demo(s): {', '.join(unknown)} (available: {available})")
        
        for name in selected:
            self.run_demo(name)
