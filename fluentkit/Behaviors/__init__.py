from .FluentBehaviorConfig import FluentBehaviorConfig
from .FluentComponentBehavior import FluentComponentBehavior
from .MethodResolver import ACTIONS, FluentAction, resolve_action, resolve_property

__all__ = [
    "FluentBehaviorConfig",
    "FluentComponentBehavior",
    "ACTIONS",
    "FluentAction",
    "resolve_action",
    "resolve_property"
]
