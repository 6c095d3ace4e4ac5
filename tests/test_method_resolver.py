"""Test fluent method name resolution.

Covers the action prefix split, the camelCase and snake_case spellings, and
the alias rules applied to the property token.
"""

from __future__ import annotations

import pytest

from fluentkit.Behaviors.MethodResolver import (
    ACTIONS,
    FluentAction,
    fluent_method_name,
    resolve_action,
    resolve_property,
)


class TestResolveAction:
    """Test suite for splitting method names into action and token."""

    @pytest.mark.parametrize("name, expected", [
        ("setTitle", (FluentAction.SET, "title")),
        ("set_title", (FluentAction.SET, "title")),
        ("unsetTitle", (FluentAction.UNSET, "title")),
        ("unset_title", (FluentAction.UNSET, "title")),
        ("addTags", (FluentAction.ADD, "tags")),
        ("add_tags", (FluentAction.ADD, "tags")),
        ("setIsNewRecord", (FluentAction.SET, "isNewRecord")),
        ("set_is_new_record", (FluentAction.SET, "is_new_record")),
        ("setURL", (FluentAction.SET, "uRL")),
    ])
    def test_splits_prefix_and_token(self, name: str, expected: tuple) -> None:
        """Test that each action prefix is split off and the token lowercased."""
        assert resolve_action(name) == expected

    @pytest.mark.parametrize("name", ["set", "set_", "unset", "add", "add_"])
    def test_bare_prefix_is_not_a_method(self, name: str) -> None:
        """Test that a prefix with nothing after it does not resolve."""
        assert resolve_action(name) == (None, "")

    @pytest.mark.parametrize("name", ["getTitle", "title", "upsetTitle", "_setTitle", "reset", ""])
    def test_names_without_action_prefix(self, name: str) -> None:
        """Test that names not starting with an action prefix do not resolve."""
        assert resolve_action(name) == (None, "")

    def test_unset_is_not_read_as_set(self) -> None:
        """Test that 'unset' is matched as a whole prefix, never as 'set'."""
        action, token = resolve_action("unsetSummary")

        assert action is FluentAction.UNSET
        assert token == "summary"

    @pytest.mark.parametrize("name", ["set__title", "unset__tags", "add___items", "set__"])
    def test_private_tokens_are_rejected(self, name: str) -> None:
        """Test that a token left with a leading underscore never resolves."""
        assert resolve_action(name) == (None, "")


class TestResolveProperty:
    """Test suite for translating tokens through the attribute declaration."""

    @pytest.fixture
    def attributes(self) -> dict:
        """Aliased 'is_new_record' and bare 'id'."""
        return {"new": "is_new_record", 0: "id"}

    def test_alias_maps_to_property(self, attributes: dict) -> None:
        """Test that an alias key resolves to the aliased property."""
        assert resolve_property("new", attributes) == "is_new_record"

    def test_bare_attribute_is_kept(self, attributes: dict) -> None:
        """Test that a positional attribute resolves to itself."""
        assert resolve_property("id", attributes) == "id"

    def test_aliased_canonical_name_is_rejected(self, attributes: dict) -> None:
        """Test that an aliased property is only reachable through its alias."""
        assert resolve_property("is_new_record", attributes) == ""

    def test_undeclared_token_is_rejected(self, attributes: dict) -> None:
        """Test that names outside the declaration are rejected."""
        assert resolve_property("name", attributes) == ""

    def test_integer_keys_never_match(self, attributes: dict) -> None:
        """Test that a token equal to a positional key's text is not a match."""
        assert resolve_property("0", attributes) == ""

    def test_empty_declaration_allows_everything(self) -> None:
        """Test wildcard mode."""
        assert resolve_property("anything", {}) == "anything"
        assert resolve_property("is_new_record", {}) == "is_new_record"

    def test_empty_token_is_rejected(self, attributes: dict) -> None:
        """Test that an empty token never resolves, even in wildcard mode."""
        assert resolve_property("", attributes) == ""
        assert resolve_property("", {}) == ""

    def test_first_declaration_wins(self) -> None:
        """Test that the first key holding a property decides its visibility."""
        assert resolve_property("id", {0: "id", "ident": "id"}) == "id"
        assert resolve_property("id", {"ident": "id", 0: "id"}) == ""
        assert resolve_property("ident", {"ident": "id", 0: "id"}) == "id"


class TestActionsMap:
    """Test suite for the action table."""

    def test_actions_route_to_primitives(self) -> None:
        """Test that every action names its behavior primitive."""
        assert ACTIONS[FluentAction.ADD] == "add_item_to"
        assert ACTIONS[FluentAction.SET] == "set_property"
        assert ACTIONS[FluentAction.UNSET] == "unset_property"

    def test_actions_are_read_only(self) -> None:
        """Test that the action table cannot be modified."""
        with pytest.raises(TypeError):
            ACTIONS[FluentAction.SET] = "other"  # type: ignore[index]

    def test_fluent_method_name(self) -> None:
        """Test building the camelCase method name of a token."""
        assert fluent_method_name(FluentAction.SET, "new") == "setNew"
        assert fluent_method_name(FluentAction.UNSET, "id") == "unsetId"
        assert fluent_method_name(FluentAction.ADD, "tags") == "addTags"
