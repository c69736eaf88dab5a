"""Component types and the values they produce."""

from versionkit.components.registry import (
    DEFAULT_COMPONENT_TYPES,
    ComponentTypeRegistry,
    default_component_types,
)
from versionkit.components.types import (
    BUILTIN_TYPES,
    ComponentType,
    DatePartType,
    EnumType,
    FloatType,
    HashType,
    IntegerType,
    PostfixType,
    PrereleaseType,
    StringType,
)
from versionkit.components.values import (
    POSTFIX_ORDINALS,
    ComponentValue,
    Postfix,
    PrereleaseIdentifiers,
    PrereleaseKey,
    compare_prerelease,
)

__all__ = [
    "DEFAULT_COMPONENT_TYPES",
    "ComponentTypeRegistry",
    "default_component_types",
    "BUILTIN_TYPES",
    "ComponentType",
    "DatePartType",
    "EnumType",
    "FloatType",
    "HashType",
    "IntegerType",
    "PostfixType",
    "PrereleaseType",
    "StringType",
    "POSTFIX_ORDINALS",
    "ComponentValue",
    "Postfix",
    "PrereleaseIdentifiers",
    "PrereleaseKey",
    "compare_prerelease",
]
