from __future__ import annotations

from typing import Optional


class ComponentException(Exception):
    """Base exception for component and behavior errors"""
    pass


class UnknownPropertyError(ComponentException, AttributeError):
    """Exception raised when a property does not exist on the component"""

    def __init__(self, component: str, property_name: str, action: str = "Setting") -> None:
        self.component = component
        self.property = property_name

        super().__init__(f"{action} unknown property: {component}::{property_name}")


class ReadOnlyPropertyError(ComponentException, AttributeError):
    """Exception raised when a readable property is written"""

    def __init__(self, component: str, property_name: str, action: str = "Setting") -> None:
        self.component = component
        self.property = property_name

        super().__init__(f"{action} read-only property: {component}::{property_name}")


class InvalidOperationError(ComponentException, TypeError):
    """Exception raised when an item is added to a property that is not a sequence"""

    def __init__(self, component: str, property_name: str, message: Optional[str] = None) -> None:
        self.component = component
        self.property = property_name

        super().__init__(
            message or f"Cannot add item to the non-array property: {component}::{property_name}"
        )


class UnknownMethodError(ComponentException, AttributeError):
    """Exception raised when no method or behavior handles a member name"""

    def __init__(self, component: str, method: str) -> None:
        self.component = component
        self.method = method

        super().__init__(f"Calling unknown method: {component}::{method}()")


class InvalidConfigError(ComponentException, ValueError):
    """Exception raised for an invalid behavior definition or configuration"""
    pass
