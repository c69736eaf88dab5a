"""SoloVer: a single number with an optional ``+``/``-`` postfix."""

import re
from typing import Any, Optional, Sequence, Tuple

from versionkit.components import ComponentTypeRegistry
from versionkit.exceptions import ParseError
from versionkit.ordering import compare_values
from versionkit.version import VersionComponent, VersionIdentifier

from .base import VersionScheme

SOLO_PATTERN = re.compile(r"^(\d+)([+-][A-Za-z0-9]+)?$")

COMPONENTS = (
    {"name": "number", "type": "integer"},
    {
        "name": "postfix",
        "type": "postfix",
        "optional": True,
        "prefix": "+",
        "include_prefix_in_value": True,
    },
)


class SoloVerScheme(VersionScheme):
    """
    ``N`` or ``N+id`` / ``N-id``.

    Versions order by number, then by postfix: none, then ``+`` (hotfix
    after the release), then ``-``. Equal prefixes order by identifier.
    """

    def __init__(
        self,
        name: str = "solover",
        description: str = "SoloVer single number with optional postfix",
        component_types: Optional[ComponentTypeRegistry] = None,
    ):
        super().__init__(
            name=name,
            description=description,
            component_definitions=COMPONENTS,
            component_types=component_types,
        )

    def parse(self, version_string: Optional[str]) -> VersionIdentifier:
        version_string = self._validate_version_string(version_string)

        match = SOLO_PATTERN.fullmatch(version_string)
        if match is None:
            raise ParseError(f"Invalid SoloVer format '{version_string}'", version_string)

        number, postfix = match.groups()
        return self._identifier(number, postfix, version_string)

    def build(self, number: Any = None, postfix: Any = None, **values: Any) -> VersionIdentifier:
        """
        Construct a SoloVer version.

        ``postfix`` is given as text (``"+hotfix"``) or a Postfix value.
        """
        if values:
            raise ParseError(
                f"Unknown component '{next(iter(values))}' for scheme {self.name}"
            )
        if number is None:
            raise ParseError("SoloVer requires a number")
        return self._identifier(number, postfix)

    def _identifier(
        self, number: Any, postfix: Any, raw_string: Optional[str] = None
    ) -> VersionIdentifier:
        components = []
        for name, value in (("number", number), ("postfix", postfix)):
            if value is None:
                continue
            definition = self.component_definition(name)
            component_type = self.component_types.resolve(definition.type)
            if isinstance(value, str):
                value = component_type.parse(value, definition)
            components.append(self._component(definition, value))

        if raw_string is None:
            raw_string = "".join(self._formatted_values(components).values())
        return VersionIdentifier(
            raw_string=raw_string,
            scheme=self,
            components=tuple(components),
            comparable_key=self.comparable_key(components),
        )

    def comparable_key(self, components: Sequence[VersionComponent]) -> Tuple[Any, ...]:
        values = {component.name: component.value for component in components}
        postfix = values.get("postfix")
        if postfix is None:
            return (values["number"],)
        return (values["number"], postfix.ordinal, postfix.identifier)

    def compare_arrays(self, left: Sequence[Any], right: Sequence[Any]) -> int:
        cmp = compare_values(left[0], right[0])
        if cmp:
            return cmp

        left_has_postfix = len(left) > 1
        right_has_postfix = len(right) > 1
        if not left_has_postfix and not right_has_postfix:
            return 0
        if not left_has_postfix:
            return -1
        if not right_has_postfix:
            return 1

        cmp = compare_values(left[1], right[1])
        if cmp:
            return cmp
        return compare_values(left[2], right[2])

    def render(self, version: VersionIdentifier) -> str:
        return "".join(self._formatted_values(version.components).values())
