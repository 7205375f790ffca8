"""Service container for dependency injection (IoC Container Pattern)."""
import logging
from typing import Optional

from pattern_demos.domain.interfaces.demo_manager import IDemoManager
from pattern_demos.infrastructure.managers.demo_manager import DemoManager
from pattern_demos.infrastructure.factories.demos_factory import DemosFactory


class ServiceContainer:
    """
    Service container implementing Dependency Injection pattern.
    
    Follows Singleton pattern and Dependency Inversion Principle.
    """
    
    _instance: Optional['ServiceContainer'] = None
    _demo_manager: Optional[IDemoManager] = None
    _demos_initialized: bool = False
    
    def __new__(cls):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance
    
    def __init__(self):
        """Initialize service container."""
        self._logger = logging.getLogger(__name__)
    
    def get_demo_manager(self) -> IDemoManager:
        """Get or create demo manager instance."""
        if ServiceContainer._demo_manager is None:
            try:
                ServiceContainer._demo_manager = DemoManager()
                self._logger.info("DemoManager created")
                
                self._initialize_demos()
            except Exception as e:
                self._logger.error(f"Failed to create DemoManager: {e}")
                ServiceContainer._demo_manager = None
                raise
        return ServiceContainer._demo_manager
    
    def _initialize_demos(self) -> None:
        """Register every pattern demo."""
        if ServiceContainer._demos_initialized:
            return
        
        DemosFactory.initialize_demos(ServiceContainer._demo_manager)
        ServiceContainer._demos_initialized = True
    
    @classmethod
    def reset(cls) -> None:
        """Reset all service instances (useful for testing)."""
        cls._instance = None
        cls._demo_manager = None
        cls._demos_initialized = False
