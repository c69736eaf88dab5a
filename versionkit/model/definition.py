"""Pydantic model describing one named segment of a version scheme."""

from enum import Enum
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from versionkit.exceptions import InvalidSchemeError
from ._parsing import convert_pydantic_error


def validate_non_empty_string(v: str) -> str:
    """Validate that a string is not empty."""
    if not v or not v.strip():
        raise ValueError("must be a non-empty string")
    return v


class CompareAs(str, Enum):
    """Ordering override used when versions of different grammars are mixed."""

    lowest = "lowest"
    highest = "highest"


class ComponentDefinition(BaseModel):
    """Immutable descriptor of one segment (``major``, ``prerelease``, ...).

    Both snake_case and camelCase keys are accepted on input
    (``include_prefix_in_value`` / ``includePrefixInValue``); the model only
    ever exposes the snake_case attributes.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    name: str = Field(..., description="Segment name, unique within a scheme")
    type: str = Field(..., description="Registered component type name")
    subtype: Optional[str] = Field(None, description="Type refinement, e.g. 'month'")
    optional: bool = Field(False, description="Whether the segment may be absent")
    default: Any = Field(None, description="Value used for an empty token")
    separator: Optional[str] = Field(
        None, description="Marker written after this segment"
    )
    prefix: Optional[str] = Field(None, description="Marker written before this segment")
    suffix: Optional[str] = Field(None, description="Marker written after the value")
    values: Tuple[str, ...] = Field((), description="Allowed enum values")
    order: Tuple[str, ...] = Field((), description="Total order of enum values")
    weight: int = Field(1, description="Relative weight of the segment")
    compare_as: Optional[CompareAs] = Field(
        None, description="Force this version to sort lowest/highest"
    )
    ignore_in_comparison: bool = Field(
        False, description="Leave this segment out of the comparable key"
    )
    include_prefix_in_value: bool = Field(
        False, description="Keep the detected prefix as part of the value"
    )

    @field_validator("name", "type", mode="before")
    @classmethod
    def validate_identifier(cls, v: Any) -> Any:
        if isinstance(v, str):
            return validate_non_empty_string(v)
        return v

    @field_validator("values", "order", mode="before")
    @classmethod
    def normalize_symbols(cls, v: Any) -> Any:
        # YAML hands us numbers and None for bare scalars
        if v is None:
            return ()
        if isinstance(v, (list, tuple)):
            return tuple(str(item) for item in v)
        return v

    @field_validator(
        "optional", "ignore_in_comparison", "include_prefix_in_value", mode="before"
    )
    @classmethod
    def none_is_false(cls, v: Any) -> Any:
        return False if v is None else v

    @field_validator("weight", mode="before")
    @classmethod
    def none_is_unit_weight(cls, v: Any) -> Any:
        return 1 if v is None else v

    @field_validator("separator", "prefix", "suffix", mode="before")
    @classmethod
    def empty_marker_is_none(cls, v: Any) -> Any:
        if v == "":
            return None
        return v

    @property
    def has_separator(self) -> bool:
        return bool(self.separator)

    @property
    def has_prefix(self) -> bool:
        return bool(self.prefix)

    @property
    def has_suffix(self) -> bool:
        return bool(self.suffix)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ComponentDefinition":
        """Create a definition from a configuration mapping.

        Raises:
            InvalidSchemeError: If the mapping is not a valid definition
        """
        if not isinstance(data, Mapping):
            raise InvalidSchemeError(
                f"Component definition must be a mapping, got {type(data).__name__}"
            )
        try:
            return cls.model_validate(dict(data))
        except PydanticValidationError as e:
            raise convert_pydantic_error(e, data) from e


DefinitionLike = Union[ComponentDefinition, Mapping[str, Any]]


def coerce_definitions(
    definitions: Optional[Iterable[DefinitionLike]],
) -> List[ComponentDefinition]:
    """Turn a mix of definitions and plain mappings into definitions."""
    if definitions is None:
        return []
    result = []
    for definition in definitions:
        if isinstance(definition, ComponentDefinition):
            result.append(definition)
        else:
            result.append(ComponentDefinition.from_dict(definition))
    return result
