"""The examples shipped with the catalog, in their run order."""

from __future__ import annotations

from pattern_catalog.patterns.adapter import AdapterExample
from pattern_catalog.patterns.builder import BuilderExample
from pattern_catalog.patterns.chain import ChainOfResponsibilityExample
from pattern_catalog.patterns.command import CommandExample
from pattern_catalog.patterns.decorator import DecoratorExample
from pattern_catalog.patterns.facade import FacadeExample
from pattern_catalog.patterns.factory_method import FactoryMethodExample
from pattern_catalog.patterns.flyweight import FlyweightExample
from pattern_catalog.patterns.memento import MementoExample, UndoStackExample
from pattern_catalog.patterns.observer import ObserverExample
from pattern_catalog.patterns.prototype import PagePrototypeExample, PrototypeExample
from pattern_catalog.patterns.singleton import SingletonExample
from pattern_catalog.patterns.strategy import StrategyExample
from pattern_catalog.patterns.template_method import (
    PermissionTemplateExample,
    TemplateMethodExample,
)

from .base import BaseExample
from .registry import ExampleRegistry

DEFAULT_EXAMPLES: tuple[type[BaseExample], ...] = (
    SingletonExample,
    FactoryMethodExample,
    ObserverExample,
    BuilderExample,
    PrototypeExample,
    PagePrototypeExample,
    AdapterExample,
    DecoratorExample,
    CommandExample,
    StrategyExample,
    ChainOfResponsibilityExample,
    FacadeExample,
    FlyweightExample,
    MementoExample,
    UndoStackExample,
    TemplateMethodExample,
    PermissionTemplateExample,
)


def build_registry() -> ExampleRegistry:
    """Instantiate and register every shipped example."""
    registry = ExampleRegistry()
    for cls in DEFAULT_EXAMPLES:
        registry.register(cls())
    return registry
