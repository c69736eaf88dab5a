"""
Base class shared by every version scheme.

A scheme is a named grammar plus ordering and rendering rules. Subclasses only
have to implement :meth:`VersionScheme.parse`; comparison, range matching,
validation and programmatic construction are derived from it.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from versionkit.components import DEFAULT_COMPONENT_TYPES, ComponentTypeRegistry
from versionkit.exceptions import (
    InvalidVersionError,
    ParseError,
    SchemeMismatchError,
)
from versionkit.model import ComponentDefinition, DefinitionLike, coerce_definitions
from versionkit.ordering import compare_keys
from versionkit.range import RangeKind, VersionRange
from versionkit.version import VersionComponent, VersionIdentifier


VersionLike = Union[str, VersionIdentifier]


class VersionScheme(ABC):
    """
    Abstract version scheme.

    Args:
        name: Scheme name, used for registration and equality
        description: Human-readable description
        format_template: Rendering template with ``{name}`` placeholders
        component_definitions: Ordered segment definitions
        component_types: Registry resolving component type names
    """

    def __init__(
        self,
        name: str,
        description: Optional[str] = None,
        format_template: Optional[str] = None,
        component_definitions: Optional[Sequence[DefinitionLike]] = None,
        component_types: Optional[ComponentTypeRegistry] = None,
    ):
        self.name = name
        self.description = description
        self.format_template = format_template
        self.component_definitions: Tuple[ComponentDefinition, ...] = tuple(
            coerce_definitions(component_definitions)
        )
        self.component_types = component_types or DEFAULT_COMPONENT_TYPES

    @abstractmethod
    def parse(self, version_string: Optional[str]) -> VersionIdentifier:
        """
        Parse text into a version identifier.

        Raises:
            InvalidVersionError: If the input is None or blank
            ParseError: If the input does not satisfy the grammar
        """

    def render(self, version: VersionIdentifier) -> str:
        return version.raw_string

    def compare_arrays(self, left: Sequence[Any], right: Sequence[Any]) -> int:
        """Order two comparable keys produced by this scheme."""
        return compare_keys(left, right)

    def compare(self, a: VersionLike, b: VersionLike) -> int:
        """
        Compare two versions of this scheme.

        Returns:
            -1, 0 or 1
        """
        return self._coerce(a).compare(self._coerce(b))

    def matches_range(self, version: VersionLike, version_range: VersionRange) -> bool:
        """
        Evaluate a range predicate against a version.

        ``after`` and ``between`` include their boundaries; ``before`` excludes.

        Raises:
            SchemeMismatchError: If the range belongs to another scheme
        """
        if version_range.scheme != self:
            raise SchemeMismatchError(self.name, version_range.scheme.name)

        key = self._coerce(version).comparable_key
        if version_range.kind == RangeKind.between:
            lower = self.parse(version_range.from_).comparable_key
            upper = self.parse(version_range.to).comparable_key
            return (
                self.compare_arrays(key, lower) >= 0
                and self.compare_arrays(key, upper) <= 0
            )

        cmp = self.compare_arrays(key, self.parse(version_range.version).comparable_key)
        if version_range.kind == RangeKind.equals:
            return cmp == 0
        if version_range.kind == RangeKind.before:
            return cmp < 0
        return cmp >= 0

    def is_valid(self, version_string: Optional[str]) -> bool:
        """Return True when ``version_string`` parses. Never raises for bad input."""
        try:
            self.parse(version_string)
        except (ParseError, InvalidVersionError):
            return False
        return True

    def supports(self, version_string: Optional[str]) -> bool:
        return self.is_valid(version_string)

    def build(self, **values: Any) -> VersionIdentifier:
        """
        Construct a version from component values without parsing text.

        String values go through the component type's ``parse``; any other
        value is taken as already typed.

        Raises:
            ParseError: If a name is not a component of this scheme or a value
                is outside its type's domain
        """
        for name in values:
            if self.component_definition(name) is None:
                raise ParseError(f"Unknown component '{name}' for scheme {self.name}")

        components = []
        # Definition order, whatever order the keywords came in
        for definition in self.component_definitions:
            if definition.name not in values:
                continue
            value = values[definition.name]
            component_type = self.component_types.resolve(definition.type)
            if isinstance(value, str):
                value = component_type.parse(value, definition)
            components.append(self._component(definition, value))

        raw_string = self._build_raw_string(components)
        return VersionIdentifier(
            raw_string=raw_string,
            scheme=self,
            components=tuple(components),
            comparable_key=self.comparable_key(components),
        )

    def comparable_key(self, components: Sequence[VersionComponent]) -> Tuple[Any, ...]:
        """
        Key over every definition not excluded from comparison.

        A definition without a component (an optional segment that did not
        match) contributes its type's absent key, so keys of one scheme line
        up position by position and an absent prerelease still outranks a
        present one.
        """
        values = {component.name: component.value for component in components}
        key = []
        for definition in self.component_definitions:
            if definition.ignore_in_comparison:
                continue
            component_type = self.component_types.resolve(definition.type)
            key.append(component_type.to_comparable(values.get(definition.name), definition))
        return tuple(key)

    def component_definition(self, name: str) -> Optional[ComponentDefinition]:
        for definition in self.component_definitions:
            if definition.name == name:
                return definition
        return None

    def _build_raw_string(self, components: List[VersionComponent]) -> str:
        return ".".join(self._formatted_values(components).values())

    def _formatted_values(self, components: Sequence[VersionComponent]) -> Dict[str, str]:
        formatted = {}
        for component in components:
            if component.value is None:
                continue
            component_type = self.component_types.resolve(component.type)
            formatted[component.name] = component_type.format(component.value)
        return formatted

    def _component(self, definition: ComponentDefinition, value: Any) -> VersionComponent:
        return VersionComponent(
            name=definition.name,
            type=definition.type,
            value=value,
            weight=definition.weight,
            definition=definition,
        )

    def _coerce(self, version: VersionLike) -> VersionIdentifier:
        if isinstance(version, VersionIdentifier):
            return version
        return self.parse(version)

    def _validate_version_string(self, version_string: Any) -> str:
        if version_string is None:
            raise InvalidVersionError("Version string cannot be None")
        if not isinstance(version_string, str):
            raise InvalidVersionError(
                f"Version must be a string, got {type(version_string).__name__}"
            )
        if not version_string.strip():
            raise InvalidVersionError("Version string cannot be empty", version_string)
        return version_string

    def __eq__(self, other) -> bool:
        if not isinstance(other, VersionScheme):
            return NotImplemented
        return type(self) is type(other) and self.name == other.name

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name='{self.name}')"
