from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, List, Optional, Sequence, Union
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.exc import NoInspectionAvailable
from sqlalchemy.ext.hybrid import hybrid_property
from sqlalchemy.orm import Mapper

from fluentkit.Base.Exceptions import ReadOnlyPropertyError, UnknownPropertyError
from fluentkit.Base.Properties import class_member, is_public
from fluentkit.Behaviors.FluentComponentBehavior import FluentComponentBehavior


class Fluent:
    """
    Laravel-style Fluent trait for SQLAlchemy models.

    Gives a declarative model fluent ``set``/``unset``/``add`` methods for its
    mapped columns, relationships and hybrid properties.

    Usage:
        class Post(Base, Fluent):
            __tablename__ = 'posts'
            __fluent__ = ['title', 'tags', {'summary': 'description'}]

            id: Mapped[int] = mapped_column(primary_key=True)
            title: Mapped[Optional[str]]
            description: Mapped[Optional[str]]
            tags: Mapped[Optional[List[str]]] = mapped_column(JSON)

        post = Post().set_title('Hello').add_tags('news').set_summary('...')

    ``__fluent__`` takes the same attribute declaration as
    ``FluentComponentBehavior(attributes=...)``; leave it empty to expose
    every property.
    """

    __fluent__: ClassVar[Union[Dict[Union[int, str], str], Sequence[Any], None]] = None
    __fluent_init_arrays__: ClassVar[Optional[bool]] = None
    __fluent_component_name__: ClassVar[Optional[str]] = None

    def fluent(self) -> FluentComponentBehavior:
        """
        Get the fluent behavior bound to this model instance.

        @return: The instance's FluentComponentBehavior, created on first use
        """
        behavior = self.__dict__.get('_fluent_behavior')
        if behavior is None:
            behavior = FluentComponentBehavior(
                attributes=self.__fluent__,
                init_arrays_if_empty=self.__fluent_init_arrays__,
                component_name=self.__fluent_component_name__ or self.__class__.__name__
            )
            behavior.attach(self)
            self.__dict__['_fluent_behavior'] = behavior
        return behavior

    @classmethod
    def _fluent_mapper(cls) -> Optional[Mapper[Any]]:
        try:
            return sa_inspect(cls)
        except NoInspectionAvailable:
            return None

    def can_get_property(self, name: str) -> bool:
        """
        Determine if the model exposes a readable property.

        @param name: Property name
        @return: True for mapped columns, relationships, hybrid properties and
            plain properties with a getter
        """
        if not is_public(name):
            return False

        mapper = self._fluent_mapper()
        if mapper is not None:
            if name in mapper.attrs:
                return True
            descriptors = mapper.all_orm_descriptors
            if name in descriptors and isinstance(descriptors[name], hybrid_property):
                return True

        member = class_member(type(self), name)
        return isinstance(member, property) and member.fget is not None

    def can_set_property(self, name: str) -> bool:
        """
        Determine if the model exposes a writable property.

        @param name: Property name
        @return: True for mapped columns, relationships, hybrid properties with
            a setter and plain properties with a setter
        """
        if not is_public(name):
            return False

        mapper = self._fluent_mapper()
        if mapper is not None:
            if name in mapper.attrs:
                return True
            descriptors = mapper.all_orm_descriptors
            if name in descriptors and isinstance(descriptors[name], hybrid_property):
                return descriptors[name].fset is not None

        member = class_member(type(self), name)
        return isinstance(member, property) and member.fset is not None

    def get_attribute(self, name: str) -> Any:
        """Read a property value."""
        if not self.can_get_property(name):
            raise UnknownPropertyError(self.fluent().component_name, name, "Getting")
        return getattr(self, name)

    def set_attribute(self, name: str, value: Any) -> None:
        """Write a property value."""
        if self.can_set_property(name):
            setattr(self, name, value)
        elif self.can_get_property(name):
            raise ReadOnlyPropertyError(self.fluent().component_name, name)
        else:
            raise UnknownPropertyError(self.fluent().component_name, name)

    def unset_attribute(self, name: str) -> None:
        """
        Clear a property. Unknown properties are left alone.

        Columns and many-to-one relationships are cleared to None, to-many
        relationships to an empty collection.
        """
        if self.can_set_property(name):
            setattr(self, name, self._fluent_empty_value(name))
        elif self.can_get_property(name):
            raise ReadOnlyPropertyError(self.fluent().component_name, name, "Unsetting")

    @classmethod
    def _fluent_empty_value(cls, name: str) -> Any:
        mapper = cls._fluent_mapper()
        if mapper is None or name not in mapper.relationships:
            return None

        relationship = mapper.relationships[name]
        if not relationship.uselist:
            return None
        return relationship.collection_class() if relationship.collection_class else []

    def set_property(self, name: str, value: Any) -> Any:
        """Set a property and return the model."""
        return self.fluent().set_property(name, value)

    def unset_property(self, name: str) -> Any:
        """Clear a property and return the model."""
        return self.fluent().unset_property(name)

    def add_item_to(self, arr_name: str, item: Any, init_on_empty: bool = True) -> Any:
        """Append an item to a list property and return the model."""
        return self.fluent().add_item_to(arr_name, item, init_on_empty)

    def __getattr__(self, name: str) -> Any:
        """Handle fluent method calls."""
        # SQLAlchemy probes instance state through private names
        if name.startswith('_'):
            raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}'")

        behavior = self.fluent()
        if behavior.supports_method(name):
            fluent_method: Callable[..., Any] = behavior.method(name)
            return fluent_method

        raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}'")

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | set(self.fluent().fluent_method_names()))
