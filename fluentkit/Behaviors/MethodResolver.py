"""
Fluent method name resolution.

A fluent method name is an action prefix followed by a property token:

    setTitle / set_title      -> (SET, 'title')
    unsetTags / unset_tags    -> (UNSET, 'tags')
    addTags / add_tags        -> (ADD, 'tags')

The token is then checked against the attribute declaration, which may both restrict
and alias the properties reachable through fluent methods.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

from fluentkit.Support.Str import Str

AttributeMap = Mapping[Union[int, str], str]


class FluentAction(str, Enum):
    """Fluent method actions, valued by their method name prefix."""
    ADD = "add"
    SET = "set"
    UNSET = "unset"


# Action -> behavior primitive. Prefixes are disjoint, order does not matter.
ACTIONS: Mapping[FluentAction, str] = MappingProxyType({
    FluentAction.ADD: 'add_item_to',
    FluentAction.SET: 'set_property',
    FluentAction.UNSET: 'unset_property',
})


def resolve_action(name: str) -> Tuple[Optional[FluentAction], str]:
    """
    Split a method name into its action and raw property token.

    @param name: The attempted method name
    @return: (action, token), or (None, '') when the name has no action
        prefix, nothing follows the prefix or the token is private
    """
    for action in ACTIONS:
        if not Str.starts_with(name, action.value):
            continue

        token = Str.chop_start(name, action.value)
        token = Str.lcfirst(Str.chop_start(token, '_'))
        if not token or token.startswith('_'):
            return None, ''
        return action, token

    return None, ''


def resolve_property(token: str, attributes: AttributeMap) -> str:
    """
    Translate a raw property token into the canonical property name.

    With an empty declaration every token is allowed as is. Otherwise:

    1. a token that is an alias key maps to the aliased property;
    2. a token declared as a bare (positional) attribute is used as is;
    3. a token that is the canonical name of an aliased attribute is rejected,
       only the alias reaches it;
    4. anything else is rejected.

    @param token: Raw property token from ``resolve_action``
    @param attributes: Alias (str key) / bare (int key) attribute declaration
    @return: Canonical property name, or '' when rejected
    """
    if not token:
        return ''

    if not attributes:
        return token

    if token in attributes:
        return attributes[token]

    for key, value in attributes.items():
        if value == token:
            # The first declaration wins
            return token if isinstance(key, int) else ''

    return ''


def fluent_method_name(action: FluentAction, token: str) -> str:
    """Build the camelCase fluent method name for a property token."""
    return f"{action.value}{Str.ucfirst(token)}"
