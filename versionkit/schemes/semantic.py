"""
Semantic versioning (https://semver.org).

Release precedence is delegated to ``packaging.version.Version`` over the
``MAJOR.MINOR.PATCH`` core; prerelease identifiers follow the SemVer 2.0
precedence rules. Build metadata never takes part in ordering.
"""

import re
from typing import Any, List, Optional, Sequence, Tuple

from packaging.version import Version as PackagingVersion

from versionkit.components import ComponentTypeRegistry
from versionkit.exceptions import ParseError
from versionkit.ordering import compare_values
from versionkit.version import VersionComponent, VersionIdentifier

from ._template import render_template
from .base import VersionScheme

SEMVER_PATTERN = re.compile(
    r"^(\d{1,5})\.(\d{1,5})(?:\.(\d{1,5}))?"
    r"(?:-([0-9A-Za-z.-]+))?(?:\+([0-9A-Za-z.-]+))?$"
)

# First fields in this range look like a calendar year, not a major version
YEAR_RANGE = (1900, 2100)

COMPONENTS = (
    {"name": "major", "type": "integer"},
    {"name": "minor", "type": "integer"},
    {"name": "patch", "type": "integer", "optional": True},
    {"name": "prerelease", "type": "prerelease", "optional": True, "prefix": "-"},
    {
        "name": "build",
        "type": "string",
        "optional": True,
        "prefix": "+",
        "ignore_in_comparison": True,
    },
)


def looks_like_year(field: str) -> bool:
    return len(field) == 4 and field.isdigit() and YEAR_RANGE[0] <= int(field) <= YEAR_RANGE[1]


class SemanticScheme(VersionScheme):
    """``X.Y[.Z][-prerelease][+build]``; ``X.Y`` orders as ``X.Y.0``."""

    def __init__(
        self,
        name: str = "semantic",
        description: str = "Semantic versioning (semver.org)",
        component_types: Optional[ComponentTypeRegistry] = None,
    ):
        super().__init__(
            name=name,
            description=description,
            format_template="{major}.{minor}[.{patch}][-{prerelease}][+{build}]",
            component_definitions=COMPONENTS,
            component_types=component_types,
        )

    def parse(self, version_string: Optional[str]) -> VersionIdentifier:
        version_string = self._validate_version_string(version_string)

        match = SEMVER_PATTERN.fullmatch(version_string)
        if match is None:
            raise ParseError(
                f"Invalid semantic version '{version_string}'", version_string
            )
        if looks_like_year(match.group(1)):
            raise ParseError(
                f"'{version_string}' looks like a calendar version, not a semantic one",
                version_string,
            )

        components = []
        for definition, token in zip(self.component_definitions, match.groups()):
            if token is None:
                continue
            component_type = self.component_types.resolve(definition.type)
            components.append(self._component(definition, component_type.parse(token, definition)))

        return VersionIdentifier(
            raw_string=version_string,
            scheme=self,
            components=tuple(components),
            comparable_key=self.comparable_key(components),
        )

    def comparable_key(self, components: Sequence[VersionComponent]) -> Tuple[Any, ...]:
        values = {component.name: component.value for component in components}
        prerelease_type = self.component_types.resolve("prerelease")
        return (
            values.get("major", 0),
            values.get("minor", 0),
            values.get("patch") or 0,
            prerelease_type.to_comparable(values.get("prerelease")),
        )

    def compare_arrays(self, left: Sequence[Any], right: Sequence[Any]) -> int:
        left_release = PackagingVersion(".".join(str(part) for part in left[:3]))
        right_release = PackagingVersion(".".join(str(part) for part in right[:3]))
        if left_release != right_release:
            return -1 if left_release < right_release else 1
        return compare_values(left[3], right[3])

    def render(self, version: VersionIdentifier) -> str:
        return self._build_raw_string(list(version.components))

    def _build_raw_string(self, components: List[VersionComponent]) -> str:
        return render_template(self.format_template, self._formatted_values(components))
