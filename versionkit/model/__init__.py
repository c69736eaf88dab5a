"""Pydantic models for versionkit scheme configuration."""

from versionkit.model.definition import (
    CompareAs,
    ComponentDefinition,
    DefinitionLike,
    coerce_definitions,
    validate_non_empty_string,
)
from versionkit.model.scheme import SchemeConfig, SchemeType

__all__ = [
    "CompareAs",
    "ComponentDefinition",
    "DefinitionLike",
    "coerce_definitions",
    "validate_non_empty_string",
    "SchemeConfig",
    "SchemeType",
]
