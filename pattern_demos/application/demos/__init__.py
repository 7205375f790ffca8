"""Runnable pattern demonstrations, one per design pattern."""

from pattern_demos.application.demos.adapter_demo import AdapterDemo
from pattern_demos.application.demos.builder_demo import BuilderDemo
from pattern_demos.application.demos.composite_demo import CompositeDemo
from pattern_demos.application.demos.decorator_demo import DecoratorDemo
from pattern_demos.application.demos.template_method_demo import TemplateMethodDemo
from pattern_demos.application.demos.observer_demo import ObserverDemo
from pattern_demos.application.demos.prototype_demo import PrototypeDemo
from pattern_demos.application.demos.proxy_demo import ProxyDemo
from pattern_demos.application.demos.strategy_demo import StrategyDemo

__all__ = [
    "AdapterDemo",
    "BuilderDemo",
    "CompositeDemo",
    "DecoratorDemo",
    "TemplateMethodDemo",
    "ObserverDemo",
    "PrototypeDemo",
    "ProxyDemo",
    "StrategyDemo",
]
