from __future__ import annotations

from typing import List, Union


class Str:
    """Laravel-style string helper class."""

    @staticmethod
    def starts_with(haystack: str, needles: Union[str, List[str]]) -> bool:
        """Determine if a given string starts with a given substring."""
        if isinstance(needles, str):
            needles = [needles]

        return any(needle != '' and haystack.startswith(needle) for needle in needles)

    @staticmethod
    def chop_start(subject: str, needle: str) -> str:
        """Remove the given string from the start of the subject if it is present."""
        if needle and subject.startswith(needle):
            return subject[len(needle):]
        return subject

    @staticmethod
    def lcfirst(string: str) -> str:
        """Make a string's first character lowercase."""
        if not string:
            return string
        return string[0].lower() + string[1:]

    @staticmethod
    def ucfirst(string: str) -> str:
        """Make a string's first character uppercase."""
        if not string:
            return string
        return string[0].upper() + string[1:]
