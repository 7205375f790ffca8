"""Managers."""

from pattern_demos.infrastructure.managers.demo_manager import DemoManager

__all__ = ["DemoManager"]
