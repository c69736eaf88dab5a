"""
versionkit: parse, compare and render version identifiers of any scheme.

Built-in schemes (semantic, calver, solover, wendtver) are registered in a
default registry at import; custom schemes are declared in YAML or built in
code and registered alongside them.
"""

from typing import Iterable, Optional

from versionkit.exceptions import (
    InvalidSchemeError,
    InvalidVersionError,
    ParseError,
    SchemeMismatchError,
    VersioningError,
)
from versionkit.loader import SchemeLoader
from versionkit.model import CompareAs, ComponentDefinition, SchemeConfig
from versionkit.range import RangeKind, VersionRange
from versionkit.registry import SchemeRegistry, default_registry
from versionkit.schemes import (
    CalVerScheme,
    CompositeScheme,
    DeclarativeScheme,
    PatternScheme,
    SemanticScheme,
    SoloVerScheme,
    VersionScheme,
    WendtVerScheme,
)
from versionkit.version import VersionComponent, VersionIdentifier

__version__ = "0.1.0"

_registry = default_registry()


def scheme_registry() -> SchemeRegistry:
    """The process-wide registry behind the module-level helpers."""
    return _registry


def register_scheme(name: str, scheme: VersionScheme) -> None:
    _registry.register(name, scheme)


def get_scheme(name: str) -> VersionScheme:
    return _registry.get(name)


def detect_scheme(
    version_string: Optional[str], priority: Optional[Iterable[str]] = None
) -> Optional[VersionScheme]:
    return _registry.detect_from(version_string, priority)


__all__ = [
    "__version__",
    "InvalidSchemeError",
    "InvalidVersionError",
    "ParseError",
    "SchemeMismatchError",
    "VersioningError",
    "SchemeLoader",
    "CompareAs",
    "ComponentDefinition",
    "SchemeConfig",
    "RangeKind",
    "VersionRange",
    "SchemeRegistry",
    "default_registry",
    "CalVerScheme",
    "CompositeScheme",
    "DeclarativeScheme",
    "PatternScheme",
    "SemanticScheme",
    "SoloVerScheme",
    "VersionScheme",
    "WendtVerScheme",
    "VersionComponent",
    "VersionIdentifier",
    "scheme_registry",
    "register_scheme",
    "get_scheme",
    "detect_scheme",
]
