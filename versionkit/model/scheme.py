"""Pydantic model for declarative scheme configuration records."""

from enum import Enum
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from versionkit.exceptions import InvalidSchemeError
from ._parsing import convert_pydantic_error
from .definition import ComponentDefinition


class SchemeType(str, Enum):
    """Scheme variants a configuration record can describe."""

    declarative = "declarative"
    pattern = "pattern"
    calver = "calver"
    composite = "composite"
    semantic = "semantic"
    solover = "solover"
    wendtver = "wendtver"


class SchemeConfig(BaseModel):
    """Realized configuration record for one scheme.

    Records are produced from YAML (or any other mapping source) and nest for
    composite schemes through ``schemes`` and ``fallback_scheme``.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    type: SchemeType = Field(..., description="Scheme variant")
    name: Optional[str] = Field(None, description="Scheme name")
    description: Optional[str] = Field(None, description="Human-readable description")
    pattern: Optional[str] = Field(None, description="Regular expression (pattern)")
    format_template: Optional[str] = Field(
        None, description="Rendering template with {name} placeholders"
    )
    components: List[ComponentDefinition] = Field(
        default_factory=list, description="Ordered segment definitions"
    )
    format: Optional[str] = Field(None, description="CalVer format, e.g. YYYY.MM.DD")
    schemes: List["SchemeConfig"] = Field(
        default_factory=list, description="Composite candidates, in priority order"
    )
    fallback_scheme: Optional["SchemeConfig"] = Field(
        None, description="Composite fallback when no candidate accepts"
    )

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, v: Any) -> Any:
        if isinstance(v, str) and v not in SchemeType.__members__:
            raise ValueError(f"Unknown scheme type: {v}")
        return v

    @field_validator("components", "schemes", mode="before")
    @classmethod
    def none_is_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @model_validator(mode="after")
    def validate_required_fields(self) -> "SchemeConfig":
        """Check the fields each scheme variant cannot do without."""
        if self.type in (SchemeType.declarative, SchemeType.pattern):
            if not self.name:
                raise ValueError(f"{self.type.value} scheme requires a name")
            if not self.components:
                raise ValueError(f"{self.type.value} scheme requires components")
        if self.type == SchemeType.pattern and not self.pattern:
            raise ValueError("pattern scheme requires a pattern")
        if self.type == SchemeType.composite:
            if not self.name:
                raise ValueError("composite scheme requires a name")
            if not self.schemes and self.fallback_scheme is None:
                raise ValueError("composite scheme requires schemes or a fallback_scheme")
        return self

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SchemeConfig":
        """Validate a configuration mapping.

        Raises:
            InvalidSchemeError: If the mapping is not a valid record
        """
        if not isinstance(data, Mapping):
            raise InvalidSchemeError(
                f"Scheme configuration must be a mapping, got {type(data).__name__}"
            )
        try:
            return cls.model_validate(dict(data))
        except PydanticValidationError as e:
            raise convert_pydantic_error(e, data) from e


SchemeConfig.model_rebuild()
