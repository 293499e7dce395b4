"""hCard name model for contact metadata extraction."""

from typing import Annotated, Dict, List, Optional, Union
from pydantic import AfterValidator, BaseModel, BeforeValidator, Field

from .field_value import FieldValue
from .name_component import FIELDS, NAME_COMPONENTS, NameComponent
from .validators import to_str, empty_to_none, normalize, fix_whitespace


ComponentKey = Union[NameComponent, str]


class HCardName(BaseModel):
    """An hCard name, consisting of various parts.

    The extraction pipeline feeds raw markup text through the setters; every
    value is whitespace-normalized and empty values are ignored. The getters
    compute the full name from its parts, and the given and family name from
    the full name, when those are not given explicitly.
    """

    components: Dict[NameComponent, FieldValue] = Field(
        default_factory=dict,
        description="Explicit values per name component. Only components that received a value are present.",
    )

    full_name_tokens: Optional[List[str]] = Field(
        None,
        description="Tokens of the formatted name, in 'Given Family' order.",
    )

    organization: Optional[
        Annotated[
            str,
            BeforeValidator(to_str),
            AfterValidator(empty_to_none),
            AfterValidator(normalize),
        ]
    ] = Field(None, description="Contains an organizational name.")

    organization_unit: Optional[
        Annotated[
            str,
            BeforeValidator(to_str),
            AfterValidator(empty_to_none),
            AfterValidator(normalize),
        ]
    ] = Field(None, description="Contains the unit within the organization.")

    def set_field(self, kind: ComponentKey, value: Optional[str]):
        kind = NameComponent(kind)
        value = fix_whitespace(value)
        if value is None:
            return
        field_value = self.components.get(kind)
        if field_value is None:
            self.components[kind] = FieldValue(values=[value])
        else:
            field_value.add_value(value)

    def set_full_name(self, value: Optional[str]):
        """Store the formatted name.

        "Family, Given [...]" is reordered to "Given Family [...]" when the
        first token ends with a comma.
        """
        value = fix_whitespace(value)
        if value is None:
            return
        tokens = value.split(" ")
        if len(tokens) > 1 and tokens[0].endswith(","):
            family = tokens[0][:-1]
            if family:
                tokens[0], tokens[1] = tokens[1], family
            else:
                # A bare leading comma carries no name.
                tokens = tokens[1:]
        self.full_name_tokens = tokens

    def set_organization(self, value: Optional[str]):
        value = fix_whitespace(value)
        if value is None:
            return
        self.organization = value

    def set_organization_unit(self, value: Optional[str]):
        value = fix_whitespace(value)
        if value is None:
            return
        self.organization_unit = value

    def get_organization(self) -> Optional[str]:
        return self.organization

    def get_organization_unit(self) -> Optional[str]:
        return self.organization_unit

    def is_multi_field(self, kind: ComponentKey) -> bool:
        field_value = self.components.get(NameComponent(kind))
        return field_value is not None and field_value.is_multi_field()

    def contains_field(self, kind: ComponentKey) -> bool:
        """Given and family name always count as contained, they can come from the full name."""
        kind = NameComponent(kind)
        if kind in (NameComponent.GIVEN_NAME, NameComponent.FAMILY_NAME):
            return True
        return kind in self.components

    def get_field(self, kind: ComponentKey) -> Optional[str]:
        kind = NameComponent(kind)
        if kind == NameComponent.GIVEN_NAME:
            return self._get_full_name_part(kind, 0)
        if kind == NameComponent.FAMILY_NAME:
            return self._get_full_name_part(kind, -1)
        field_value = self.components.get(kind)
        return None if field_value is None else field_value.get_value()

    def get_fields(self, kind: ComponentKey) -> List[str]:
        field_value = self.components.get(NameComponent(kind))
        return [] if field_value is None else field_value.get_values()

    def _get_full_name_part(self, kind: NameComponent, index: int) -> Optional[str]:
        if kind in self.components:
            return self.components[kind].get_value()
        if not self.full_name_tokens:
            return None
        # Same fn and org means the hCard is for an organization; do not split the fn.
        if self.organization in (self.full_name_tokens[0], " ".join(self.full_name_tokens)):
            return None
        return self.full_name_tokens[index]

    def has_field(self, kind: ComponentKey) -> bool:
        return self.get_field(kind) is not None

    def has_any_field(self) -> bool:
        return any(self.has_field(kind) for kind in FIELDS)

    def get_full_name(self) -> Optional[str]:
        """Return the formatted name, or compose one from the explicit parts."""
        if self.full_name_tokens:
            return " ".join(self.full_name_tokens)
        parts = [
            self.components[kind].get_value()
            for kind in NAME_COMPONENTS
            if kind in self.components
        ]
        if not parts:
            return None
        return " ".join(parts)
