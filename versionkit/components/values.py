"""
Value variants produced by the component types.

A parsed segment is one of: ``int``, ``float``, ``str`` (plain strings, enum
symbols and hashes), :class:`Postfix`, a prerelease tuple of ``int``/``str``
identifiers, or ``None`` for an absent optional segment.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Optional, Tuple, Union

PrereleaseIdentifiers = Tuple[Union[int, str], ...]

# none < "+" (after, hotfix) < "-" (before, prerelease)
POSTFIX_ORDINALS = {"+": 1, "-": 2}


@dataclass(frozen=True)
class Postfix:
    """A ``+identifier`` or ``-identifier`` suffix."""

    prefix: str
    identifier: str

    @property
    def ordinal(self) -> int:
        return POSTFIX_ORDINALS.get(self.prefix, 0)

    def __str__(self) -> str:
        return f"{self.prefix}{self.identifier}"


ComponentValue = Union[int, float, str, Postfix, PrereleaseIdentifiers, None]


def compare_prerelease(
    a: Optional[PrereleaseIdentifiers], b: Optional[PrereleaseIdentifiers]
) -> int:
    """
    Compare two prerelease identifier lists by SemVer 2.0 precedence.

    A missing prerelease outranks any present one. Numeric identifiers sort
    below alphanumeric ones and compare numerically; when one list is a prefix
    of the other the shorter list sorts first.

    Returns:
        -1, 0 or 1
    """
    if a is None and b is None:
        return 0
    if a is None:
        return 1
    if b is None:
        return -1

    for a_val, b_val in zip(a, b):
        a_is_num = isinstance(a_val, int)
        b_is_num = isinstance(b_val, int)
        if a_is_num and not b_is_num:
            return -1
        if b_is_num and not a_is_num:
            return 1
        if a_is_num:
            if a_val != b_val:
                return -1 if a_val < b_val else 1
        else:
            a_str, b_str = str(a_val), str(b_val)
            if a_str != b_str:
                return -1 if a_str < b_str else 1

    if len(a) == len(b):
        return 0
    return -1 if len(a) < len(b) else 1


@total_ordering
class PrereleaseKey:
    """Order key for a prerelease; ``PrereleaseKey(None)`` sorts above all others."""

    __slots__ = ("identifiers",)

    def __init__(self, identifiers: Optional[PrereleaseIdentifiers]):
        self.identifiers = tuple(identifiers) if identifiers is not None else None

    def __eq__(self, other) -> bool:
        if not isinstance(other, PrereleaseKey):
            return NotImplemented
        return compare_prerelease(self.identifiers, other.identifiers) == 0

    def __lt__(self, other) -> bool:
        if not isinstance(other, PrereleaseKey):
            return NotImplemented
        return compare_prerelease(self.identifiers, other.identifiers) < 0

    def __hash__(self) -> int:
        return hash(self.identifiers)

    def __repr__(self) -> str:
        return f"PrereleaseKey({self.identifiers!r})"
