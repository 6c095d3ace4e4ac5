"""Test the host component framework: properties and behaviors."""

from __future__ import annotations

import pytest
from typing import List, Optional

from fluentkit.Base.Behavior import Behavior, create_behavior
from fluentkit.Base.Component import BehaviorMap, Component
from fluentkit.Base.Exceptions import (
    InvalidConfigError,
    ReadOnlyPropertyError,
    UnknownMethodError,
    UnknownPropertyError,
)
from fluentkit.Contracts.OwnerInterface import OwnerInterface


class Greeter(Behavior):
    """Behavior lending a greet() method."""

    greeting: str = "Hello"

    def greet(self) -> str:
        return f"{self.greeting}, {self.owner.name}"  # type: ignore[union-attr]


class Shouter(Behavior):
    """Behavior lending greet() and shout()."""

    def greet(self) -> str:
        return "HEY"

    def shout(self, text: str) -> str:
        return text.upper()


class Person(Component):
    """Component with plain, annotated and computed properties."""

    name: Optional[str] = None
    nicknames: List[str] = []
    age: int

    def init(self) -> None:
        self.initialized = True

    @property
    def display_name(self) -> str:
        return self.name or "anonymous"

    @property
    def email(self) -> Optional[str]:
        return self._email if hasattr(self, '_email') else None

    @email.setter
    def email(self, value: Optional[str]) -> None:
        self._email = value

    def rename(self, name: str) -> None:
        self.name = name

    def behaviors(self) -> BehaviorMap:
        return {"greeter": Greeter}


class TestComponentProperties:
    """Test suite for component property introspection."""

    @pytest.fixture
    def person(self) -> Person:
        """Create a person."""
        return Person(name="Ada")

    def test_constructor_assigns_properties(self, person: Person) -> None:
        """Test that keyword configuration is applied and init() runs."""
        assert person.name == "Ada"
        assert person.initialized is True

    def test_constructor_is_strict(self) -> None:
        """Test that unknown or read-only keys fail construction."""
        with pytest.raises(UnknownPropertyError):
            Person(unknown=1)
        with pytest.raises(ReadOnlyPropertyError):
            Person(display_name="x")

    def test_property_kinds(self, person: Person) -> None:
        """Test which members count as readable and writable properties."""
        assert person.can_get_property("name")
        assert person.can_set_property("name")
        assert person.can_get_property("age")
        assert person.can_set_property("email")
        assert person.can_get_property("display_name")
        assert not person.can_set_property("display_name")
        assert person.can_get_property("initialized")

    def test_methods_and_private_names_are_not_properties(self, person: Person) -> None:
        """Test that methods and underscored names are excluded."""
        assert not person.has_property("rename")
        assert not person.has_property("behaviors")
        assert not person.has_property("_behaviors")
        assert not person.has_property("missing")

    def test_get_attribute(self, person: Person) -> None:
        """Test reading properties through the owner API."""
        assert person.get_attribute("display_name") == "Ada"

        with pytest.raises(UnknownPropertyError) as exc_info:
            person.get_attribute("missing")

        assert str(exc_info.value) == "Getting unknown property: Person::missing"

    def test_set_attribute(self, person: Person) -> None:
        """Test writing properties through the owner API."""
        person.set_attribute("email", "ada@example.com")
        assert person.email == "ada@example.com"

        with pytest.raises(ReadOnlyPropertyError):
            person.set_attribute("display_name", "x")

    def test_unset_attribute(self, person: Person) -> None:
        """Test clearing properties through the owner API."""
        person.unset_attribute("name")
        assert person.name is None

        person.unset_attribute("missing")

        with pytest.raises(ReadOnlyPropertyError) as exc_info:
            person.unset_attribute("display_name")

        assert str(exc_info.value) == "Unsetting read-only property: Person::display_name"

    def test_satisfies_owner_interface(self, person: Person) -> None:
        """Test that components are owners."""
        assert isinstance(person, OwnerInterface)


class TestComponentBehaviors:
    """Test suite for attaching behaviors and lending their methods."""

    @pytest.fixture
    def person(self) -> Person:
        """Create a person."""
        return Person(name="Ada")

    def test_declared_behavior_lends_methods(self, person: Person) -> None:
        """Test that methods of declared behaviors are callable on the owner."""
        assert person.greet() == "Hello, Ada"
        assert person.has_method("greet")
        assert "greet" in dir(person)

    def test_behavior_base_api_is_not_lent(self, person: Person) -> None:
        """Test that attach/detach stay on the behavior."""
        with pytest.raises(UnknownMethodError):
            person.attach(person)

        assert not person.has_method("detach")

    def test_attach_behavior_with_configuration(self, person: Person) -> None:
        """Test attaching a behavior from a definition dict."""
        person.attach_behavior("greeter", {"class": Greeter, "greeting": "Hi"})

        assert person.greet() == "Hi, Ada"

    def test_attach_replaces_and_detaches_previous(self, person: Person) -> None:
        """Test that a behavior replaced under the same name is detached."""
        old = person.get_behavior("greeter")
        assert old is not None

        person.attach_behavior("greeter", Greeter(greeting="Yo"))

        assert old.owner is None
        assert person.greet() == "Yo, Ada"

    def test_first_behavior_wins(self, person: Person) -> None:
        """Test that behaviors are searched in attachment order."""
        person.attach_behaviors({"shouter": Shouter})

        assert person.greet() == "Hello, Ada"
        assert person.shout("hi") == "HI"

    def test_list_behaviors_are_named_by_position(self) -> None:
        """Test anonymous behavior declarations."""

        class Anonymous(Component):
            def behaviors(self) -> BehaviorMap:
                return [Shouter, Greeter(greeting="Hi")]

        component = Anonymous()

        assert isinstance(component.get_behavior(0), Shouter)
        assert isinstance(component.get_behavior(1), Greeter)
        assert component.greet() == "HEY"

    def test_detach_behavior(self, person: Person) -> None:
        """Test that detached behaviors stop lending methods."""
        behavior = person.detach_behavior("greeter")

        assert isinstance(behavior, Greeter)
        assert behavior.owner is None
        assert not hasattr(person, "greet")
        assert person.detach_behavior("greeter") is None

    def test_detach_behaviors(self, person: Person) -> None:
        """Test detaching everything."""
        person.attach_behavior("shouter", Shouter)
        person.detach_behaviors()

        assert person.get_behaviors() == {}

    def test_unknown_method(self, person: Person) -> None:
        """Test the error raised for members nobody provides."""
        with pytest.raises(UnknownMethodError) as exc_info:
            person.fly()

        assert isinstance(exc_info.value, AttributeError)
        assert str(exc_info.value) == "Calling unknown method: Person::fly()"

    def test_private_names_are_plain_attribute_errors(self, person: Person) -> None:
        """Test that underscored lookups never reach behaviors."""
        with pytest.raises(AttributeError) as exc_info:
            person._secret

        assert not isinstance(exc_info.value, UnknownMethodError)

    def test_has_method_without_behaviors(self, person: Person) -> None:
        """Test restricting has_method to the component's own methods."""
        assert person.has_method("rename", check_behaviors=False)
        assert not person.has_method("greet", check_behaviors=False)


class TestCreateBehavior:
    """Test suite for building behaviors from definitions."""

    def test_instance_is_returned_as_is(self) -> None:
        """Test that behavior instances pass through."""
        behavior = Greeter()

        assert create_behavior(behavior) is behavior

    def test_class_is_instantiated(self) -> None:
        """Test that behavior classes are instantiated without configuration."""
        assert isinstance(create_behavior(Greeter), Greeter)

    def test_definition_dict(self) -> None:
        """Test that a definition dict configures the behavior."""
        behavior = create_behavior({"class": Greeter, "greeting": "Hi"})

        assert isinstance(behavior, Greeter)
        assert behavior.greeting == "Hi"

    @pytest.mark.parametrize("definition", [
        {"greeting": "Hi"},
        {"class": "Greeter"},
        {"class": Person},
        "Greeter",
        42,
    ])
    def test_invalid_definitions(self, definition: object) -> None:
        """Test that anything else raises InvalidConfigError."""
        with pytest.raises(InvalidConfigError):
            create_behavior(definition)  # type: ignore[arg-type]

    def test_unknown_configuration_key(self) -> None:
        """Test that behaviors reject configuration they do not declare."""
        with pytest.raises(UnknownPropertyError):
            Greeter(volume=11)
        with pytest.raises(UnknownPropertyError):
            Greeter(owner=None)
