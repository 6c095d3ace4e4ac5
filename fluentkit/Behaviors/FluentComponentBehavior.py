from __future__ import annotations

import functools
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union, TYPE_CHECKING

from pydantic import ValidationError

from fluentkit.Base.Behavior import Behavior
from fluentkit.Base.Exceptions import (
    ComponentException,
    InvalidConfigError,
    InvalidOperationError,
    ReadOnlyPropertyError,
    UnknownMethodError,
    UnknownPropertyError,
)
from fluentkit.Support.Config import config
from .FluentBehaviorConfig import FluentBehaviorConfig
from .MethodResolver import ACTIONS, FluentAction, fluent_method_name, resolve_action, resolve_property

if TYPE_CHECKING:
    from fluentkit.Contracts.OwnerInterface import OwnerInterface

AttributeDeclaration = Union[Mapping[Union[int, str], str], Sequence[Any], None]


class FluentComponentBehavior(Behavior):
    """
    Behavior implementing fluent interface methods for its owner.

    Fluent methods, available for every permitted property:

    - ``set<Property>(value)``: sets the property value
    - ``unset<Property>()``: clears the property
    - ``add<Property>(item)``: appends an item to a list property

    Each may be spelled camelCase (``setTitle``) or snake_case (``set_title``)
    and returns the owner, so calls chain:

        post.setTitle('Hello').addTags('news').unsetSummary()

    The universal methods ``set_property``, ``unset_property`` and
    ``add_item_to`` are lent to the owner as well.

    ``attributes`` restricts fluent methods to the listed properties and may
    alias them:

        FluentComponentBehavior(attributes={'new': 'is_new_record', 0: 'id'})
        FluentComponentBehavior(attributes=['id', {'new': 'is_new_record'}])

    Here ``set_new(False)`` writes ``is_new_record``, ``set_id(5)`` writes
    ``id``, and ``set_is_new_record`` is not available because the property
    has an alias. An empty declaration makes every owner property available.
    """

    def __init__(
        self,
        attributes: AttributeDeclaration = None,
        init_arrays_if_empty: Optional[bool] = None,
        component_name: Optional[str] = None,
        **properties: Any
    ) -> None:
        """
        Initialize the behavior.

        @param attributes: Attribute declaration, empty for all properties
        @param init_arrays_if_empty: Whether add<Property> turns an empty,
            non-list property into a list; defaults to ``fluent.init_arrays_if_empty``
        @param component_name: Owner name used in error messages; defaults to
            the owner's class name
        @param properties: Further properties declared by subclasses
        @raises InvalidConfigError: When the configuration does not validate
        @raises UnknownPropertyError: For configuration keys the behavior does not declare
        """
        super().__init__(**properties)

        if init_arrays_if_empty is None:
            init_arrays_if_empty = bool(config.get('fluent.init_arrays_if_empty', True))

        try:
            self.options = FluentBehaviorConfig(
                attributes=attributes,
                init_arrays_if_empty=init_arrays_if_empty,
                component_name=component_name
            )
        except ValidationError as e:
            raise InvalidConfigError(f"Invalid fluent behavior configuration: {e}") from e

        self._method_names = self._build_method_names()

    @property
    def attributes(self) -> Dict[Union[int, str], str]:
        return self.options.attributes

    @property
    def init_arrays_if_empty(self) -> bool:
        return self.options.init_arrays_if_empty

    @property
    def component_name(self) -> str:
        if self.options.component_name:
            return self.options.component_name
        if self.owner is not None:
            return self.owner.__class__.__name__
        return self.__class__.__name__

    def get_methods_map(self) -> Mapping[FluentAction, str]:
        """
        Get the fluent action to primitive method map.

        @return: Read-only mapping of action to behavior method name
        """
        return ACTIONS

    # Resolution

    def resolve(self, name: str) -> Tuple[Optional[FluentAction], str]:
        """
        Resolve a method name to its action and canonical property.

        @param name: The attempted method name
        @return: (action, property), or (None, '') when the name is not a
            fluent method of this behavior
        """
        action, token = resolve_action(name)
        if action is None:
            return None, ''

        prop = resolve_property(token, self.attributes)
        if not prop:
            return None, ''

        return action, prop

    def supports_method(self, name: str) -> bool:
        """Determine if ``name`` resolves to a fluent method. Never dispatches."""
        return bool(self.resolve(name)[1])

    def has_method(self, name: str) -> bool:
        return super().has_method(name) or self.supports_method(name)

    def method(self, name: str) -> Callable[..., Any]:
        if super().has_method(name):
            return super().method(name)
        if not self.supports_method(name):
            raise UnknownMethodError(self.component_name, name)
        return functools.partial(self.call, name)

    def method_names(self) -> List[str]:
        return sorted(set(super().method_names()) | set(self._method_names))

    def fluent_method_names(self) -> List[str]:
        """List the fluent methods of the configured attributes. Empty in wildcard mode."""
        return list(self._method_names)

    def _build_method_names(self) -> List[str]:
        names: List[str] = []
        for key, prop in self.attributes.items():
            token = key if isinstance(key, str) else prop
            names.extend(fluent_method_name(action, token) for action in ACTIONS)
        return names

    # Dispatch

    def call(self, name: str, *args: Any) -> OwnerInterface:
        """
        Run a fluent method against the owner.

        @param name: Fluent method name, e.g. ``setTitle``
        @param args: Call arguments
        @return: The owner
        @raises UnknownMethodError: When ``name`` is not a fluent method
        @raises ReadOnlyPropertyError: When the property can only be read
        @raises UnknownPropertyError: When the owner has no such property
        """
        owner = self._require_owner()
        action, prop = self.resolve(name)
        if action is None:
            raise UnknownMethodError(self.component_name, name)

        if not owner.can_set_property(prop):
            raise self._unwritable_error(prop)

        self.logger.debug(f"Dispatching {name}() to {self.get_methods_map()[action]}('{prop}')")

        if action is FluentAction.UNSET:
            if args:
                raise TypeError(f"{name}() takes no arguments ({len(args)} given)")
            return self.unset_property(prop)

        if action is FluentAction.ADD:
            if len(args) != 1:
                raise TypeError(f"{name}() takes exactly one argument ({len(args)} given)")
            return self.add_item_to(prop, args[0], self.init_arrays_if_empty)

        if len(args) != 1:
            raise TypeError(f"{name}() takes exactly one argument ({len(args)} given)")
        return self.set_property(prop, args[0])

    # Primitives

    def set_property(self, name: str, value: Any) -> OwnerInterface:
        """
        Set an owner property and return the owner.

        @param name: Property name
        @param value: New value
        @return: The owner
        @raises ReadOnlyPropertyError: When the property can only be read
        @raises UnknownPropertyError: When the owner has no such property
        """
        owner = self._require_owner()
        if not owner.can_set_property(name):
            raise self._unwritable_error(name)

        owner.set_attribute(name, value)
        return owner

    def unset_property(self, name: str) -> OwnerInterface:
        """
        Clear an owner property and return the owner.

        Clearing a property that is already clear, or unknown, is not an error.

        @param name: Property name
        @return: The owner
        """
        owner = self._require_owner()
        owner.unset_attribute(name)
        return owner

    def add_item_to(self, arr_name: str, item: Any, init_on_empty: bool = True) -> OwnerInterface:
        """
        Append an item to a list property of the owner and return the owner.

        The new sequence is built aside and written back in one step, so the
        owner is left untouched when the append fails.

        @param arr_name: Property name
        @param item: Item to append
        @param init_on_empty: Treat an empty, non-list value (None, '', 0, ...)
            as an empty list
        @return: The owner
        @raises ReadOnlyPropertyError: When the property can only be read
        @raises UnknownPropertyError: When the owner has no such property
        @raises InvalidOperationError: When the property holds a non-list value
        """
        owner = self._require_owner()
        if not owner.can_set_property(arr_name):
            raise self._unwritable_error(arr_name)

        current = owner.get_attribute(arr_name)
        items: Union[List[Any], Tuple[Any, ...]]
        if isinstance(current, tuple):
            items = current + (item,)
        elif isinstance(current, list):
            items = [*current, item]
        elif not current and init_on_empty:
            self.logger.debug(f"Initializing empty property '{arr_name}' as a list")
            items = [item]
        else:
            self.logger.warning(f"Rejected adding an item to non-list property '{arr_name}'")
            raise InvalidOperationError(self.component_name, arr_name)

        owner.set_attribute(arr_name, items)
        return owner

    def _require_owner(self) -> OwnerInterface:
        if self.owner is None:
            raise ComponentException(f"{self.__class__.__name__} is not attached to a component")
        return self.owner

    def _unwritable_error(self, name: str) -> ComponentException:
        assert self.owner is not None
        if self.owner.can_get_property(name):
            return ReadOnlyPropertyError(self.component_name, name)
        return UnknownPropertyError(self.component_name, name)
