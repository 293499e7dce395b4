"""Core data models for hCard name processing."""

from .name_component import NameComponent, FIELDS, NAME_COMPONENTS
from .field_value import FieldValue
from .hcard_name import HCardName

__all__ = [
    "NameComponent",
    "FIELDS",
    "NAME_COMPONENTS",
    "FieldValue",
    "HCardName",
]
