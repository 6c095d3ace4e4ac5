"""
Property introspection for plain Python components.

A public name is a *property* of an object when it is an instance attribute,
an annotated or class-level data attribute, a ``property`` or another data
descriptor. Methods, static/class methods and names starting with ``_`` are
never properties.
"""

from __future__ import annotations

import inspect
from typing import Any, Set, Type

_MISSING = object()


def is_public(name: str) -> bool:
    return bool(name) and not name.startswith('_')


def class_member(cls: Type[Any], name: str) -> Any:
    """Find a class-level member without triggering descriptors."""
    return inspect.getattr_static(cls, name, _MISSING)


def annotated_names(cls: Type[Any]) -> Set[str]:
    """Collect annotated attribute names across the MRO."""
    names: Set[str] = set()
    for klass in cls.__mro__:
        if klass is object:
            continue
        names.update(inspect.get_annotations(klass))
    return names


def _is_data_member(member: Any) -> bool:
    if isinstance(member, (staticmethod, classmethod)):
        return False
    return not callable(member)


def can_read(obj: Any, name: str) -> bool:
    """Determine if ``name`` is a readable property of ``obj``."""
    if not is_public(name):
        return False

    member = class_member(type(obj), name)
    if isinstance(member, property):
        return member.fget is not None

    if name in getattr(obj, '__dict__', {}):
        return True

    if member is not _MISSING:
        return _is_data_member(member)

    return name in annotated_names(type(obj))


def can_write(obj: Any, name: str) -> bool:
    """Determine if ``name`` is a writable property of ``obj``."""
    if not is_public(name):
        return False

    member = class_member(type(obj), name)
    if isinstance(member, property):
        return member.fset is not None

    if member is not _MISSING and hasattr(type(member), '__set__'):
        return True

    return can_read(obj, name)
