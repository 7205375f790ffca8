"""Tests for the service container."""
from pattern_demos.infrastructure.service_container import ServiceContainer


EXPECTED_DEMOS = [
    "adapter",
    "builder",
    "composite",
    "decorator",
    "template_method",
    "observer",
    "prototype",
    "proxy",
    "strategy",
]


def test_container_is_singleton():
    assert ServiceContainer() is ServiceContainer()


def test_demo_manager_has_every_demo_registered():
    manager = ServiceContainer().get_demo_manager()
    assert list(manager.get_all_demos()) == EXPECTED_DEMOS


def test_demo_manager_is_reused():
    container = ServiceContainer()
    assert container.get_demo_manager() is container.get_demo_manager()


def test_reset_creates_new_manager():
    first = ServiceContainer().get_demo_manager()

    ServiceContainer.reset()

    assert ServiceContainer().get_demo_manager() is not first
