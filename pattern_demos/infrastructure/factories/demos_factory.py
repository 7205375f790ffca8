"""Factory for registering the pattern demos (Factory Pattern)."""
import logging

from pattern_demos.domain.interfaces.demo_manager import IDemoManager
from pattern_demos.application.demos import (
    AdapterDemo,
    BuilderDemo,
    CompositeDemo,
    DecoratorDemo,
    TemplateMethodDemo,
    ObserverDemo,
    PrototypeDemo,
    ProxyDemo,
    StrategyDemo
)


logger = logging.getLogger(__name__)


class DemosFactory:
    """
    Factory for creating and registering every demo.
    
    Registration order is the order demos run in when none are named.
    """
    
    @staticmethod
    def initialize_demos(demo_manager: IDemoManager) -> None:
        """
        Create all demos and register them with the manager.
        
        Args:
            demo_manager: Demo manager to register demos with
        """
        logger.info("Initializing pattern demos...")
        
        demos = [
            AdapterDemo(),
            BuilderDemo(),
            CompositeDemo(),
            DecoratorDemo(),
            TemplateMethodDemo(),
            ObserverDemo(),
            PrototypeDemo(),
            ProxyDemo(),
            StrategyDemo(),
        ]
        
        for demo in demos:
            demo_manager.register_demo(demo)
        
        logger.info(f"Pattern demos initialized ({len(demos)} demos)")
