"""Version ranges evaluated through the owning scheme's comparison."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from versionkit.schemes.base import VersionScheme
    from versionkit.version import VersionIdentifier


class RangeKind(str, Enum):
    """Boundary predicates a range can express."""

    equals = "equals"
    before = "before"
    after = "after"
    between = "between"


@dataclass(frozen=True)
class VersionRange:
    """
    A boundary predicate over versions of one scheme.

    ``equals``, ``before`` and ``after`` need ``version``; ``between`` needs
    ``from_`` and ``to`` and includes both ends. ``after`` includes its
    boundary, ``before`` excludes it.

    Raises:
        ValueError: If the kind is unknown or a required boundary is missing
    """

    kind: RangeKind
    scheme: "VersionScheme"
    version: Optional[str] = None
    from_: Optional[str] = None
    to: Optional[str] = None

    def __post_init__(self):
        try:
            kind = RangeKind(self.kind)
        except ValueError:
            raise ValueError(f"Unknown range type: {self.kind}") from None
        object.__setattr__(self, "kind", kind)

        if kind == RangeKind.between:
            if not self.from_ or not self.to:
                raise ValueError("between range requires from_ and to")
        elif not self.version:
            raise ValueError(f"{kind.value} range requires version")

    @classmethod
    def equals(cls, scheme: "VersionScheme", version: str) -> "VersionRange":
        return cls(RangeKind.equals, scheme, version=version)

    @classmethod
    def before(cls, scheme: "VersionScheme", version: str) -> "VersionRange":
        return cls(RangeKind.before, scheme, version=version)

    @classmethod
    def after(cls, scheme: "VersionScheme", version: str) -> "VersionRange":
        return cls(RangeKind.after, scheme, version=version)

    @classmethod
    def between(
        cls, scheme: "VersionScheme", from_: str, to: str
    ) -> "VersionRange":
        return cls(RangeKind.between, scheme, from_=from_, to=to)

    @property
    def boundary(self) -> Optional[str]:
        return self.version

    def matches(self, version_string: str) -> bool:
        """Parse ``version_string`` with the range's scheme and test it."""
        return self.scheme.matches_range(version_string, self)

    def includes(self, version: Union[str, "VersionIdentifier"]) -> bool:
        """Like :meth:`matches`, also accepting an already parsed identifier."""
        if isinstance(version, str):
            return self.matches(version)
        return self.scheme.matches_range(version, self)

    def __str__(self) -> str:
        if self.kind == RangeKind.equals:
            return f"== {self.version}"
        if self.kind == RangeKind.before:
            return f"< {self.version}"
        if self.kind == RangeKind.after:
            return f">= {self.version}"
        return f"{self.from_} - {self.to}"
