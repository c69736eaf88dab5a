"""Scheme defined by one regular expression and an optional format template."""

import logging
import re
from typing import List, Optional, Sequence

from versionkit.components import ComponentTypeRegistry
from versionkit.exceptions import InvalidSchemeError, ParseError
from versionkit.model import DefinitionLike
from versionkit.version import VersionComponent, VersionIdentifier

from ._template import render_template
from .base import VersionScheme

logger = logging.getLogger(__name__)

# Shapes known to backtrack catastrophically. This is a blacklist, not a
# proof that an accepted pattern matches in linear time.
_BACKTRACKING_SHAPES = (
    # a group holding an unbounded quantifier that is itself repeated: (a+)+
    re.compile(r"\((?:[^()\\]|\\.)*[+*](?:[^()\\]|\\.)*\)[+*{]"),
    # doubly nested unbounded repetition: ((a*)b*)
    re.compile(r"\(\([^(]*\*\)[^)]*\*\)"),
    re.compile(r"\(\([^(]*\+\)[^)]*\+\)"),
)
MAX_REPETITION_MARKERS = 5


def check_pattern_safety(pattern: str, scheme_name: Optional[str] = None) -> None:
    """
    Reject regular expressions with known catastrophic-backtracking shapes.

    Best effort only: patterns that pass may still be slow on adversarial
    input.

    Raises:
        InvalidSchemeError: If the pattern is flagged
    """
    if r"\d+*" in pattern:
        raise InvalidSchemeError(
            "Pattern may cause catastrophic backtracking", scheme_name
        )
    for shape in _BACKTRACKING_SHAPES:
        if shape.search(pattern):
            raise InvalidSchemeError(
                "Pattern may cause catastrophic backtracking", scheme_name
            )
    if pattern.count("{") > MAX_REPETITION_MARKERS:
        raise InvalidSchemeError("Pattern has too many nested quantifiers", scheme_name)


class PatternScheme(VersionScheme):
    """
    Version scheme backed by a regular expression.

    Capture groups map in order onto ``component_definitions``. Without a
    ``format_template`` rendering returns the original string.

    Raises:
        InvalidSchemeError: If there are no definitions, the pattern is flagged
            as unsafe or does not compile, or the number of capture groups
            differs from the number of definitions
    """

    def __init__(
        self,
        name: str,
        pattern: str,
        component_definitions: Sequence[DefinitionLike],
        format_template: Optional[str] = None,
        description: Optional[str] = None,
        component_types: Optional[ComponentTypeRegistry] = None,
    ):
        super().__init__(
            name=name,
            description=description,
            format_template=format_template,
            component_definitions=component_definitions,
            component_types=component_types,
        )
        if not self.component_definitions:
            raise InvalidSchemeError("No component definitions provided", name)
        for definition in self.component_definitions:
            self.component_types.resolve(definition.type)

        self.pattern = pattern
        self.regex = self._compile(pattern)

    def _compile(self, pattern: str) -> "re.Pattern[str]":
        if not isinstance(pattern, str) or not pattern:
            raise InvalidSchemeError("Pattern is required", self.name)
        check_pattern_safety(pattern, self.name)
        try:
            regex = re.compile(pattern)
        except re.error as e:
            raise InvalidSchemeError(f"Invalid pattern '{pattern}': {e}", self.name) from e

        if regex.groups != len(self.component_definitions):
            raise InvalidSchemeError(
                f"Pattern has {regex.groups} capture groups but "
                f"{len(self.component_definitions)} components are defined",
                self.name,
            )
        logger.debug(f"Compiled pattern for scheme '{self.name}': {pattern}")
        return regex

    def parse(self, version_string: Optional[str]) -> VersionIdentifier:
        version_string = self._validate_version_string(version_string)

        match = self.regex.fullmatch(version_string)
        if match is None:
            raise ParseError(
                f"Version '{version_string}' does not match pattern {self.pattern}",
                version_string,
            )

        components = self._extract_components(match, version_string)
        return VersionIdentifier(
            raw_string=version_string,
            scheme=self,
            components=tuple(components),
            comparable_key=self.comparable_key(components),
        )

    def _extract_components(
        self, match: "re.Match[str]", version_string: str
    ) -> List[VersionComponent]:
        components = []
        for index, definition in enumerate(self.component_definitions, start=1):
            token = match.group(index)
            if token is None:
                if definition.optional:
                    continue
                raise ParseError(
                    f"Required component '{definition.name}' is missing",
                    version_string,
                )
            component_type = self.component_types.resolve(definition.type)
            value = component_type.parse(token, definition)
            components.append(self._component(definition, value))
        return components

    def render(self, version: VersionIdentifier) -> str:
        if not self.format_template:
            return version.raw_string
        return render_template(
            self.format_template, self._formatted_values(version.components)
        )

    def _build_raw_string(self, components: List[VersionComponent]) -> str:
        if not self.format_template:
            return super()._build_raw_string(components)
        return render_template(self.format_template, self._formatted_values(components))
