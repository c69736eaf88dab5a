"""Scheme driven by segment definitions instead of a regular expression."""

from typing import Any, Dict, List, Optional, Sequence

from versionkit.components import ComponentTypeRegistry
from versionkit.model import DefinitionLike
from versionkit.parsers import DeclarativeParser
from versionkit.version import VersionComponent, VersionIdentifier

from ._template import render_template
from .base import VersionScheme


class DeclarativeScheme(VersionScheme):
    """
    Version scheme built on :class:`DeclarativeParser`.

    Every non-ignored definition contributes to the comparable key, absent
    optional segments included, so keys of one scheme always line up.
    """

    def __init__(
        self,
        name: str,
        component_definitions: Sequence[DefinitionLike],
        description: Optional[str] = None,
        format_template: Optional[str] = None,
        component_types: Optional[ComponentTypeRegistry] = None,
    ):
        super().__init__(
            name=name,
            description=description,
            format_template=format_template,
            component_definitions=component_definitions,
            component_types=component_types,
        )
        self.parser = DeclarativeParser(self.component_definitions, self.component_types)

    def parse(self, version_string: Optional[str]) -> VersionIdentifier:
        version_string = self._validate_version_string(version_string)
        values = self.parser.parse(version_string)
        return self._identifier(version_string, values)

    def render(self, version: VersionIdentifier) -> str:
        if not self.format_template:
            return version.raw_string
        return render_template(
            self.format_template, self._formatted_values(version.components)
        )

    def _identifier(self, raw_string: str, values: Dict[str, Any]) -> VersionIdentifier:
        components = [
            self._component(definition, values.get(definition.name))
            for definition in self.component_definitions
        ]
        return VersionIdentifier(
            raw_string=raw_string,
            scheme=self,
            components=tuple(components),
            comparable_key=self.comparable_key(components),
        )

    def _build_raw_string(self, components: List[VersionComponent]) -> str:
        """Lay the values out with the definitions' own markers."""
        formatted = self._formatted_values(components)
        parts = []
        for definition in self.component_definitions:
            if definition.name not in formatted:
                continue
            if definition.has_prefix and parts and not definition.include_prefix_in_value:
                previous = parts[-1]
                if not previous.endswith(definition.prefix):
                    parts.append(definition.prefix)
            parts.append(formatted[definition.name])
            if definition.has_suffix:
                parts.append(definition.suffix)
            if definition.has_separator:
                parts.append(definition.separator)

        text = "".join(parts)
        # Drop a separator left dangling after the last written segment
        last = next(
            (d for d in reversed(self.component_definitions) if d.name in formatted),
            None,
        )
        if last is not None and last.has_separator and text.endswith(last.separator):
            text = text[: -len(last.separator)]
        return text
