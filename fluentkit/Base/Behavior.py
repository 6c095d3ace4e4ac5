from __future__ import annotations

import logging
from typing import Any, Callable, List, Mapping, Optional, Type, Union, TYPE_CHECKING

from .Exceptions import InvalidConfigError, UnknownPropertyError
from .Properties import can_write, is_public

if TYPE_CHECKING:
    from fluentkit.Contracts.OwnerInterface import OwnerInterface


class Behavior:
    """
    Base class for behaviors.

    A behavior is attached to a component at runtime and lends it extra
    methods: every public method a subclass declares becomes callable on the
    owner, e.g. ``component.touch()`` for a behavior defining ``touch``.
    The base API (``attach``, ``detach``, ``has_method``, ...) is not lent.

    Configuration is passed as keyword arguments and assigned to the
    properties the subclass declares:

        class Timestamp(Behavior):
            attribute: str = 'updated_at'

        Timestamp(attribute='touched_at')
    """

    def __init__(self, **config: Any) -> None:
        self.owner: Optional[OwnerInterface] = None
        self.logger = logging.getLogger(f"fluent.{self.__class__.__name__}")
        self.configure(config)

    def configure(self, config: Mapping[str, Any]) -> None:
        """
        Assign configuration values to declared properties.

        @param config: Property name to value mapping
        @raises UnknownPropertyError: For keys the behavior does not declare
        """
        for key, value in config.items():
            if key in ('owner', 'logger') or not can_write(self, key):
                raise UnknownPropertyError(self.__class__.__name__, key)
            setattr(self, key, value)

    def attach(self, owner: OwnerInterface) -> None:
        """
        Attach the behavior to a component.

        @param owner: The component receiving the behavior's methods
        """
        self.owner = owner
        self.logger.debug(f"Attached to {owner.__class__.__name__}")

    def detach(self) -> None:
        """Detach the behavior from its owner."""
        if self.owner is not None:
            self.logger.debug(f"Detached from {self.owner.__class__.__name__}")
        self.owner = None

    def has_method(self, name: str) -> bool:
        """Determine if the behavior lends a method called ``name`` to its owner."""
        if not is_public(name) or hasattr(Behavior, name):
            return False
        return callable(getattr(self, name, None))

    def method(self, name: str) -> Callable[..., Any]:
        """Get the bound callable lent to the owner under ``name``."""
        return getattr(self, name)

    def method_names(self) -> List[str]:
        """List the names of the methods lent to the owner."""
        return [name for name in dir(type(self)) if self.has_method(name)]


BehaviorDefinition = Union[Behavior, Type[Behavior], Mapping[str, Any]]


def create_behavior(definition: BehaviorDefinition) -> Behavior:
    """
    Build a behavior from its definition.

    @param definition: A behavior instance, a Behavior subclass, or a mapping
        with a ``class`` key and the configuration for it
    @return: Behavior instance
    @raises InvalidConfigError: When the definition cannot be turned into a behavior
    """
    if isinstance(definition, Behavior):
        return definition

    if isinstance(definition, type) and issubclass(definition, Behavior):
        return definition()

    if isinstance(definition, Mapping):
        config = dict(definition)
        behavior_class = config.pop('class', None)
        if not (isinstance(behavior_class, type) and issubclass(behavior_class, Behavior)):
            raise InvalidConfigError(
                f"Behavior definition requires a 'class' key naming a Behavior subclass, got {behavior_class!r}"
            )
        return behavior_class(**config)

    raise InvalidConfigError(f"Invalid behavior definition: {definition!r}")
