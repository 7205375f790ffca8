"""Application configuration with environment-based settings."""
import os
import logging
from typing import List, Optional
from dotenv import load_dotenv


class Config:
    """Base configuration class following Single Responsibility Principle."""

    # Load environment variables
    load_dotenv()

    # Logging
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # Monitoring
    ENABLE_METRICS: bool = os.getenv("ENABLE_METRICS", "true").lower() == "true"

    # Application
    DEMO_ENV: str = os.getenv("DEMO_ENV", "development").lower()
    DEMO_NAMES: Optional[str] = os.getenv("DEMO_NAMES")  # comma separated default selection

    @classmethod
    def get_log_level(cls) -> int:
        """Resolve the configured log level name to a logging constant."""
        if cls.DEBUG:
            return logging.DEBUG
        level = logging.getLevelName(cls.LOG_LEVEL)
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def get_default_demo_names(cls) -> List[str]:
        """Demo names selected through DEMO_NAMES, empty when unset."""
        if not cls.DEMO_NAMES:
            return []
        return [name.strip() for name in cls.DEMO_NAMES.split(",") if name.strip()]

    @classmethod
    def validate(cls) -> None:
        """Validate configuration values."""
        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            raise ValueError(f"Invalid LOG_LEVEL: {cls.LOG_LEVEL}")


class DevelopmentConfig(Config):
    """Development configuration."""
    TESTING = False


class ProductionConfig(Config):
    """Production configuration."""
    TESTING = False
    DEBUG = False
    LOG_LEVEL = "WARNING"


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = False
    ENABLE_METRICS = True


def get_config() -> type[Config]:
    """Factory method to get configuration based on environment."""
    env = os.getenv("DEMO_ENV", "development").lower()

    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
    }

    return config_map.get(env, DevelopmentConfig)
