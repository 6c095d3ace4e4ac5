from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class OwnerInterface(Protocol):
    """
    Property capabilities a component must offer to host behaviors.

    Behaviors only talk to their owner through these methods, so any object
    that implements them (a plain ``Component``, a SQLAlchemy model using the
    ``Fluent`` trait, ...) can own a behavior.
    """

    def can_get_property(self, name: str) -> bool:
        """Determine if the property exists and can be read."""
        ...

    def can_set_property(self, name: str) -> bool:
        """Determine if the property exists and can be written."""
        ...

    def get_attribute(self, name: str) -> Any:
        """Read a property value."""
        ...

    def set_attribute(self, name: str, value: Any) -> None:
        """Write a property value."""
        ...

    def unset_attribute(self, name: str) -> None:
        """Clear a property to its absent (``None``) state."""
        ...
