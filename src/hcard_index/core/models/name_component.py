"""Name component kinds of an hCard ``n`` property."""

from enum import Enum
from typing import Tuple


class NameComponent(str, Enum):
    """A structurally distinct part of a personal name.

    Values are the hCard class names, so ``NameComponent("given-name")``
    resolves the member for a class found in markup.
    """

    GIVEN_NAME = "given-name"
    FAMILY_NAME = "family-name"
    ADDITIONAL_NAME = "additional-name"
    NICKNAME = "nickname"
    HONORIFIC_PREFIX = "honorific-prefix"
    HONORIFIC_SUFFIX = "honorific-suffix"

    def __str__(self) -> str:
        return self.value


FIELDS: Tuple[NameComponent, ...] = tuple(NameComponent)

# Order used when composing a full name from its parts.
NAME_COMPONENTS: Tuple[NameComponent, ...] = (
    NameComponent.HONORIFIC_PREFIX,
    NameComponent.GIVEN_NAME,
    NameComponent.ADDITIONAL_NAME,
    NameComponent.FAMILY_NAME,
    NameComponent.HONORIFIC_SUFFIX,
)
