"""
Composite scheme: several grammars ordered in one comparable space.

Each sub-scheme produces keys of its own shape. The composite rewrites every
key into ``(rank, k1, k2, k3, k4, k5)``: ``rank`` is -1 when a present
component asks to sort lowest, 1 for highest, 0 otherwise, followed by the
sub-scheme key padded with zeros (or cut) to five elements.
"""

import logging
from typing import Any, List, Optional, Sequence, Tuple

from versionkit.exceptions import ParseError
from versionkit.model import CompareAs
from versionkit.version import VersionIdentifier

from .base import VersionScheme

logger = logging.getLogger(__name__)

KEY_WIDTH = 5

_RANKS = {CompareAs.lowest: -1, CompareAs.highest: 1}


def normalized_key(version: VersionIdentifier) -> Tuple[Any, ...]:
    """Fixed-width composite key for a version parsed by any scheme."""
    rank = 0
    for component in version.components:
        definition = component.definition
        if component.value is None or definition is None or definition.compare_as is None:
            continue
        rank = _RANKS[definition.compare_as]
        break

    base = list(version.comparable_key)[:KEY_WIDTH]
    base.extend([0] * (KEY_WIDTH - len(base)))
    return (rank, *base)


class CompositeScheme(VersionScheme):
    """
    Try ``schemes`` in order; the first one that accepts the text parses it.

    When none accepts, ``fallback_scheme`` parses (and may raise). Without a
    fallback a ParseError is raised.
    """

    def __init__(
        self,
        name: str,
        schemes: Sequence[VersionScheme],
        fallback_scheme: Optional[VersionScheme] = None,
        description: Optional[str] = None,
    ):
        super().__init__(name=name, description=description)
        self.schemes: List[VersionScheme] = list(schemes)
        self.fallback_scheme = fallback_scheme

    def parse(self, version_string: Optional[str]) -> VersionIdentifier:
        version_string = self._validate_version_string(version_string)

        for scheme in self.schemes:
            if scheme.is_valid(version_string):
                logger.debug(
                    f"Composite '{self.name}': '{version_string}' parsed by {scheme.name}"
                )
                return self._wrap(scheme.parse(version_string))

        if self.fallback_scheme is None:
            raise ParseError(
                f"No scheme of composite '{self.name}' accepts '{version_string}'",
                version_string,
            )
        logger.debug(
            f"Composite '{self.name}': falling back to {self.fallback_scheme.name} "
            f"for '{version_string}'"
        )
        return self._wrap(self.fallback_scheme.parse(version_string))

    def build(self, **values: Any) -> VersionIdentifier:
        """Build with the first sub-scheme (then the fallback) declaring every name."""
        for scheme in self._candidates():
            if all(scheme.component_definition(name) is not None for name in values):
                return self._wrap(scheme.build(**values))
        raise ParseError(
            f"No scheme of composite '{self.name}' defines components "
            f"{', '.join(values)}"
        )

    def render(self, version: VersionIdentifier) -> str:
        if version.origin is None:
            return version.raw_string
        return version.origin.scheme.render(version.origin)

    def component_definition(self, name: str):
        for scheme in self._candidates():
            definition = scheme.component_definition(name)
            if definition is not None:
                return definition
        return None

    def _candidates(self) -> List[VersionScheme]:
        if self.fallback_scheme is None:
            return list(self.schemes)
        return [*self.schemes, self.fallback_scheme]

    def _wrap(self, version: VersionIdentifier) -> VersionIdentifier:
        return VersionIdentifier(
            raw_string=version.raw_string,
            scheme=self,
            components=version.components,
            comparable_key=normalized_key(version),
            origin=version,
        )
