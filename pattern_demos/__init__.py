"""Pattern demos application factory and logging setup."""
import logging
import sys
from typing import Optional

from pattern_demos.config.settings import Config, get_config
from pattern_demos.domain.interfaces.demo_manager import IDemoManager
from pattern_demos.infrastructure.service_container import ServiceContainer


def create_app(config_class: Optional[type[Config]] = None, log_level: Optional[int] = None) -> IDemoManager:
    """
    Configure logging and build the demo manager with every demo registered.
    
    Args:
        config_class: Optional configuration class (for testing)
        log_level: Optional logging level overriding the configuration
        
    Returns:
        Demo manager ready to list and run demos
    """
    _logger = logging.getLogger(__name__)
    
    config = config_class or get_config()
    
    configure_logging(log_level if log_level is not None else config.get_log_level())
    
    try:
        config.validate()
    except ValueError as e:
        _logger.warning(f"Configuration validation warning: {e}")
    
    try:
        demo_manager = ServiceContainer().get_demo_manager()
    except Exception as e:
        _logger.critical(f"Failed to initialize demos: {e}", exc_info=True)
        raise
    
    _logger.debug(f"Registered demos: {list(demo_manager.get_all_demos())}")
    return demo_manager


def configure_logging(level: int = logging.INFO) -> None:
    """
    Configure application logging.
    
    Everything goes to stdout, next to the demo output.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
        force=True  # Override any existing configuration
    )
