from .Behavior import Behavior, create_behavior
from .Component import Component
from .Exceptions import (
    ComponentException,
    InvalidConfigError,
    InvalidOperationError,
    ReadOnlyPropertyError,
    UnknownMethodError,
    UnknownPropertyError
)

__all__ = [
    "Behavior",
    "create_behavior",
    "Component",
    "ComponentException",
    "InvalidConfigError",
    "InvalidOperationError",
    "ReadOnlyPropertyError",
    "UnknownMethodError",
    "UnknownPropertyError"
]
