"""WendtVer: ``major.minor.patch.build`` with ripple-carry increments."""

import re
from typing import Optional

from versionkit.components import ComponentTypeRegistry
from versionkit.exceptions import ParseError
from versionkit.version import VersionIdentifier

from .base import VersionScheme

WENDT_PATTERN = re.compile(r"^(\d+)\.(\d+)\.(\d+)\.(\d+)$")

# Highest value each field holds before carrying into the next one
MAX_VALUES = {"build": 999, "patch": 99, "minor": 99}

FIELDS = ("major", "minor", "patch", "build")

COMPONENTS = tuple({"name": field, "type": "integer"} for field in FIELDS)


class WendtVerScheme(VersionScheme):
    """Four numeric fields; minor and patch stay below 100, build below 1000."""

    def __init__(
        self,
        name: str = "wendtver",
        description: str = "WendtVer auto-incrementing with carryover",
        component_types: Optional[ComponentTypeRegistry] = None,
    ):
        super().__init__(
            name=name,
            description=description,
            format_template="{major}.{minor}.{patch}.{build}",
            component_definitions=COMPONENTS,
            component_types=component_types,
        )

    def parse(self, version_string: Optional[str]) -> VersionIdentifier:
        version_string = self._validate_version_string(version_string)

        match = WENDT_PATTERN.fullmatch(version_string)
        if match is None:
            raise ParseError(f"Invalid WendtVer format '{version_string}'", version_string)

        values = dict(zip(FIELDS, (int(group) for group in match.groups())))
        self._check_ranges(values, version_string)

        components = [self._component(d, values[d.name]) for d in self.component_definitions]
        return VersionIdentifier(
            raw_string=version_string,
            scheme=self,
            components=tuple(components),
            comparable_key=self.comparable_key(components),
        )

    def build(self, **values) -> VersionIdentifier:
        # Unset fields are zero
        version = super().build(**{**dict.fromkeys(FIELDS, 0), **values})
        self._check_ranges(version.values, version.raw_string)
        return version

    def _check_ranges(self, values: dict, version_string: Optional[str]) -> None:
        if not 0 <= values.get("minor", 0) <= MAX_VALUES["minor"]:
            raise ParseError("Minor must be 0-99", version_string)
        if not 0 <= values.get("patch", 0) <= MAX_VALUES["patch"]:
            raise ParseError("Patch must be 0-99", version_string)
        if not 0 <= values.get("build", 0) <= MAX_VALUES["build"]:
            raise ParseError("Build must be 0-999", version_string)

    def render(self, version: VersionIdentifier) -> str:
        values = version.values
        return ".".join(str(values.get(field, 0)) for field in FIELDS)

    def increment(self, version: str, field: str = "build") -> str:
        """
        Bump one field, carrying overflow into the more significant fields.

        Args:
            version: WendtVer version string
            field: One of ``build``, ``patch``, ``minor`` or ``major``

        Returns:
            The incremented version as text

        Raises:
            ValueError: If ``field`` is not a WendtVer field

        Example:
            >>> WendtVerScheme().increment("1.99.99.999")
            '2.0.0.0'
        """
        if field not in FIELDS:
            raise ValueError(f"Unknown WendtVer field: {field}")

        values = self.parse(version).values
        position = FIELDS.index(field)
        values[field] += 1
        # Ripple towards major; major itself is unbounded
        while position > 0:
            name = FIELDS[position]
            if values[name] <= MAX_VALUES[name]:
                break
            values[name] = 0
            position -= 1
            values[FIELDS[position]] += 1

        return ".".join(str(values[name]) for name in FIELDS)
