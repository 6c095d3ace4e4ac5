"""
fluentkit: fluent set/unset/add methods for framework components.

Attach ``FluentComponentBehavior`` to a ``Component``, or mix the ``Fluent``
trait into a SQLAlchemy model, and every permitted property gets chainable
``set<Property>(value)``, ``unset<Property>()`` and ``add<Property>(item)``
methods.
"""

from .Base import (
    Behavior,
    Component,
    ComponentException,
    InvalidConfigError,
    InvalidOperationError,
    ReadOnlyPropertyError,
    UnknownMethodError,
    UnknownPropertyError
)
from .Behaviors import FluentComponentBehavior, FluentBehaviorConfig
from .Contracts import OwnerInterface
from .Traits import Fluent

__all__ = [
    "Behavior",
    "Component",
    "ComponentException",
    "InvalidConfigError",
    "InvalidOperationError",
    "ReadOnlyPropertyError",
    "UnknownMethodError",
    "UnknownPropertyError",
    "FluentComponentBehavior",
    "FluentBehaviorConfig",
    "OwnerInterface",
    "Fluent"
]
