from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FluentBehaviorConfig(BaseModel):
    """
    Validated configuration of a ``FluentComponentBehavior``.

    ``attributes`` accepts a dict (string keys are aliases, int keys mark bare
    attributes), a list mixing bare names, ``{alias: property}`` dicts and
    ``(alias, property)`` pairs, or None. It is normalized to an ordered dict.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    attributes: Dict[Union[int, str], str] = Field(default_factory=dict)
    init_arrays_if_empty: bool = True
    component_name: Optional[str] = Field(None, min_length=1)

    @field_validator('attributes', mode='before')
    @classmethod
    def normalize_attributes(cls, v: Any) -> Dict[Union[int, str], Any]:
        """Normalize the accepted attribute declaration forms into one ordered dict."""
        if v is None:
            return {}

        if isinstance(v, Mapping):
            return dict(v)

        if isinstance(v, str) or not hasattr(v, '__iter__'):
            raise ValueError('attributes must be a mapping or a list of attribute names')

        normalized: Dict[Union[int, str], Any] = {}

        def add_positional(name: Any) -> None:
            ints = [key for key in normalized if isinstance(key, int)]
            normalized[max(ints) + 1 if ints else 0] = name

        for item in v:
            if isinstance(item, str):
                add_positional(item)
            elif isinstance(item, Mapping):
                for key, name in item.items():
                    if isinstance(key, int):
                        add_positional(name)
                    else:
                        normalized[key] = name
            elif isinstance(item, (tuple, list)) and len(item) == 2:
                normalized[item[0]] = item[1]
            else:
                raise ValueError(f'Invalid attribute declaration: {item!r}')

        return normalized

    @field_validator('attributes')
    @classmethod
    def validate_attribute_names(cls, v: Dict[Union[int, str], str]) -> Dict[Union[int, str], str]:
        """Aliases and property names must be non-empty identifiers."""
        for key, name in v.items():
            if isinstance(key, str) and not key.isidentifier():
                raise ValueError(f'Alias {key!r} is not a valid identifier')
            if not name.isidentifier():
                raise ValueError(f'Attribute name {name!r} is not a valid identifier')
        return v
