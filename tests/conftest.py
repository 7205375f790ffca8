import pytest

from pattern_demos.config.settings import Config
from pattern_demos.infrastructure.service_container import ServiceContainer
from pattern_demos.infrastructure.managers.demo_manager import DemoManager
from pattern_demos.infrastructure.factories.demos_factory import DemosFactory


@pytest.fixture(autouse=True)
def reset_service_container():
    """Give every test a fresh container."""
    ServiceContainer.reset()
    yield
    ServiceContainer.reset()


@pytest.fixture
def metrics_enabled(monkeypatch):
    monkeypatch.setattr(Config, "ENABLE_METRICS", True)


@pytest.fixture
def demo_manager():
    """Demo manager with every demo registered."""
    manager = DemoManager()
    DemosFactory.initialize_demos(manager)
    return manager
