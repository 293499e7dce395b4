"""Field value model for hCard name components."""

from typing import List

from pydantic import BaseModel, Field


class FieldValue(BaseModel):
    """Values collected for one name component, in insertion order.

    A field becomes multi-valued as soon as a second value is added. The
    first value stays the canonical one; duplicates are kept.
    """

    values: List[str] = Field(
        ...,
        min_length=1,
        description="Normalized values in the order they were found.",
    )

    def add_value(self, value: str):
        """Append a value, keeping duplicates."""
        self.values.append(value)

    def is_multi_field(self) -> bool:
        """Return True once a second value has been added."""
        return len(self.values) > 1

    def get_value(self) -> str:
        """Return the first value added."""
        return self.values[0]

    def get_values(self) -> List[str]:
        """Return a copy of all values in insertion order."""
        return list(self.values)
