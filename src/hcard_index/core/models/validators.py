"""Validation functions for data models."""

from typing import Any, Optional


def to_str(value: Any) -> str:
    """Convert value to string and strip whitespace."""
    return str(value).strip()


def empty_to_none(value: Optional[str]) -> Optional[str]:
    """Convert empty strings to None."""
    if value == "":
        return None
    return value


def normalize(value: Optional[str]) -> Optional[str]:
    """Normalize strings.

    - Strip white spaces, tabs and new lines.
    - Replace tabs, new lines and multiple white spaces with one white space.
    """
    if value is None:
        return None
    return " ".join(value.split())


def fix_whitespace(value: Optional[str]) -> Optional[str]:
    """Normalize a raw markup string, returning None if nothing is left."""
    if value is None:
        return None
    return empty_to_none(normalize(to_str(value)))
