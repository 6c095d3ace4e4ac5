from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from .Behavior import Behavior, BehaviorDefinition, create_behavior
from .Exceptions import ReadOnlyPropertyError, UnknownMethodError, UnknownPropertyError
from .Properties import can_read, can_write, is_public

BehaviorMap = Union[Mapping[str, BehaviorDefinition], Sequence[BehaviorDefinition]]


class Component:
    """
    Base class for components that can own behaviors.

    Properties are the public attributes a component declares: annotated or
    class-level data attributes, instance attributes and ``property`` objects.
    Methods lent by attached behaviors are resolved through ``__getattr__``.

    Usage:
        class Post(Component):
            title: Optional[str] = None
            tags: List[str] = []

            def behaviors(self) -> BehaviorMap:
                return {'fluent': FluentComponentBehavior}

        post = Post(title='Hello').setTitle('Hello, world').addTags('news')
    """

    def __init__(self, **config: Any) -> None:
        self._behaviors: Optional[Dict[Union[str, int], Behavior]] = None

        for name, value in config.items():
            self.set_attribute(name, value)

        self.init()

    def init(self) -> None:
        """Initialize the component after configuration was applied."""
        pass

    def behaviors(self) -> BehaviorMap:
        """
        Declare the behaviors this component carries.

        @return: Mapping of behavior name to definition, or a list of
            definitions attached anonymously (named by their position)
        """
        return {}

    # Properties

    def get_component_name(self) -> str:
        """Name used for the component in error messages."""
        return self.__class__.__name__

    def has_property(self, name: str) -> bool:
        """Determine if the component defines a property."""
        return self.can_get_property(name) or self.can_set_property(name)

    def can_get_property(self, name: str) -> bool:
        """Determine if the property exists and can be read."""
        return can_read(self, name)

    def can_set_property(self, name: str) -> bool:
        """Determine if the property exists and can be written."""
        return can_write(self, name)

    def get_attribute(self, name: str) -> Any:
        """
        Read a property value.

        @param name: Property name
        @return: Property value
        @raises UnknownPropertyError: When the property is not readable
        """
        if not self.can_get_property(name):
            raise UnknownPropertyError(self.get_component_name(), name, "Getting")
        return getattr(self, name)

    def set_attribute(self, name: str, value: Any) -> None:
        """
        Write a property value.

        @param name: Property name
        @param value: New value
        @raises ReadOnlyPropertyError: When the property can only be read
        @raises UnknownPropertyError: When the property does not exist
        """
        if self.can_set_property(name):
            setattr(self, name, value)
            return

        if self.can_get_property(name):
            raise ReadOnlyPropertyError(self.get_component_name(), name)
        raise UnknownPropertyError(self.get_component_name(), name)

    def unset_attribute(self, name: str) -> None:
        """
        Clear a property to ``None``. Clearing an unknown property does nothing.

        @param name: Property name
        @raises ReadOnlyPropertyError: When the property can only be read
        """
        if self.can_set_property(name):
            setattr(self, name, None)
        elif self.can_get_property(name):
            raise ReadOnlyPropertyError(self.get_component_name(), name, "Unsetting")

    # Behaviors

    def ensure_behaviors(self) -> None:
        """Attach the behaviors declared by ``behaviors()`` if not done yet."""
        if self._behaviors is not None:
            return

        self._behaviors = {}
        declared = self.behaviors()
        items = declared.items() if isinstance(declared, Mapping) else enumerate(declared)
        for name, definition in items:
            self._attach_behavior_internal(name, definition)

    def attach_behavior(self, name: Union[str, int], behavior: BehaviorDefinition) -> Behavior:
        """
        Attach a behavior, replacing any behavior of the same name.

        @param name: Behavior name
        @param behavior: Behavior instance or definition
        @return: The attached behavior
        """
        self.ensure_behaviors()
        return self._attach_behavior_internal(name, behavior)

    def attach_behaviors(self, behaviors: BehaviorMap) -> None:
        """Attach several behaviors at once."""
        items = behaviors.items() if isinstance(behaviors, Mapping) else enumerate(behaviors)
        for name, definition in items:
            self.attach_behavior(name, definition)

    def detach_behavior(self, name: Union[str, int]) -> Optional[Behavior]:
        """
        Detach a behavior.

        @param name: Behavior name
        @return: The detached behavior, or None when no such behavior is attached
        """
        self.ensure_behaviors()
        assert self._behaviors is not None

        behavior = self._behaviors.pop(name, None)
        if behavior is not None:
            behavior.detach()
        return behavior

    def detach_behaviors(self) -> None:
        """Detach every behavior."""
        self.ensure_behaviors()
        assert self._behaviors is not None

        for name in list(self._behaviors.keys()):
            self.detach_behavior(name)

    def get_behavior(self, name: Union[str, int]) -> Optional[Behavior]:
        """Get an attached behavior by name."""
        self.ensure_behaviors()
        assert self._behaviors is not None
        return self._behaviors.get(name)

    def get_behaviors(self) -> Dict[Union[str, int], Behavior]:
        """Get all attached behaviors."""
        self.ensure_behaviors()
        assert self._behaviors is not None
        return dict(self._behaviors)

    def _attach_behavior_internal(self, name: Union[str, int], definition: BehaviorDefinition) -> Behavior:
        assert self._behaviors is not None

        behavior = create_behavior(definition)
        if name in self._behaviors:
            self._behaviors[name].detach()

        behavior.attach(self)
        self._behaviors[name] = behavior
        return behavior

    # Methods

    def has_method(self, name: str, check_behaviors: bool = True) -> bool:
        """
        Determine if the component, or one of its behaviors, provides a method.

        @param name: Method name
        @param check_behaviors: Whether behaviors' methods count
        @return: True if the method can be called on the component
        """
        if is_public(name) and callable(getattr(type(self), name, None)):
            return True

        if check_behaviors:
            self.ensure_behaviors()
            assert self._behaviors is not None
            return any(behavior.has_method(name) for behavior in self._behaviors.values())

        return False

    def __getattr__(self, name: str) -> Any:
        """Resolve methods lent by attached behaviors."""
        if name.startswith('_'):
            raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}'")

        self.ensure_behaviors()
        for behavior in self._behaviors.values():  # type: ignore[union-attr]
            if behavior.has_method(name):
                method: Callable[..., Any] = behavior.method(name)
                return method

        raise UnknownMethodError(self.get_component_name(), name)

    def __dir__(self) -> List[str]:
        names = set(super().__dir__())
        for behavior in self.get_behaviors().values():
            names.update(behavior.method_names())
        return sorted(names)
