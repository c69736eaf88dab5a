"""
Parsed version values.

A :class:`VersionIdentifier` is what every scheme's ``parse`` and ``build``
return: the raw text, the owning scheme, the typed components, and the key the
scheme orders versions by.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

from versionkit.components.values import ComponentValue
from versionkit.exceptions import SchemeMismatchError
from versionkit.model import ComponentDefinition

if TYPE_CHECKING:
    from versionkit.range import VersionRange
    from versionkit.schemes.base import VersionScheme


@dataclass(frozen=True)
class VersionComponent:
    """One resolved segment of a parsed version."""

    name: str
    type: str
    value: ComponentValue
    weight: int = 1
    definition: Optional[ComponentDefinition] = field(
        default=None, compare=False, repr=False
    )

    def __str__(self) -> str:
        if self.value is None:
            return ""
        # prerelease identifiers
        if isinstance(self.value, tuple):
            return ".".join(str(part) for part in self.value)
        return str(self.value)


@dataclass(frozen=True, eq=False)
class VersionIdentifier:
    """
    Immutable result of parsing (or building) a version.

    Identifiers are only ordered against identifiers of the same scheme.
    Equality across schemes is simply False; ordering across schemes raises
    SchemeMismatchError.
    """

    raw_string: str
    scheme: "VersionScheme"
    components: Tuple[VersionComponent, ...]
    comparable_key: Tuple[Any, ...]
    # Sub-scheme identifier wrapped by a composite scheme
    origin: Optional["VersionIdentifier"] = field(default=None, compare=False)

    def component(self, name: str) -> Optional[VersionComponent]:
        """Return the component called ``name``, or None."""
        for component in self.components:
            if component.name == name:
                return component
        return None

    @property
    def values(self) -> Dict[str, ComponentValue]:
        """Component values keyed by component name."""
        return {component.name: component.value for component in self.components}

    def compare(self, other: "VersionIdentifier") -> int:
        """
        Compare with another identifier of the same scheme.

        Returns:
            -1, 0 or 1

        Raises:
            SchemeMismatchError: If ``other`` belongs to a different scheme
        """
        if not isinstance(other, VersionIdentifier) or self.scheme != other.scheme:
            other_name = (
                other.scheme.name
                if isinstance(other, VersionIdentifier)
                else type(other).__name__
            )
            raise SchemeMismatchError(self.scheme.name, other_name)
        return self.scheme.compare_arrays(self.comparable_key, other.comparable_key)

    def matches_range(self, version_range: "VersionRange") -> bool:
        """Check whether this version falls inside ``version_range``."""
        return self.scheme.matches_range(self, version_range)

    def __eq__(self, other) -> bool:
        if not isinstance(other, VersionIdentifier):
            return NotImplemented
        if self.scheme != other.scheme:
            return False
        return self.compare(other) == 0

    def __lt__(self, other) -> bool:
        if not isinstance(other, VersionIdentifier):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, VersionIdentifier):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, VersionIdentifier):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, VersionIdentifier):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash((self.scheme.name, self.comparable_key))

    def __str__(self) -> str:
        return self.scheme.render(self)

    def __repr__(self) -> str:
        return f"VersionIdentifier('{self.raw_string}', scheme='{self.scheme.name}')"
