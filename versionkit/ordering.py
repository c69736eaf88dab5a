"""
Total ordering over comparable keys.

Keys are tuples whose elements come from different component types: numbers,
strings, (length, hash) pairs, prerelease keys, or objects supplied by a
scheme. Elements of the same kind compare natively. Elements of different
kinds are ordered by a fixed kind rank, so a comparison never raises.
"""

from typing import Any, Sequence

from versionkit.components.values import PrereleaseKey

_NUMBER = 0
_STRING = 1
_SEQUENCE = 2
_PRERELEASE = 3
_OTHER = 4


def _kind(value: Any) -> int:
    if isinstance(value, (int, float)):
        return _NUMBER
    if isinstance(value, str):
        return _STRING
    if isinstance(value, (tuple, list)):
        return _SEQUENCE
    if isinstance(value, PrereleaseKey):
        return _PRERELEASE
    return _OTHER


def compare_values(a: Any, b: Any) -> int:
    """Compare two key elements, returning -1, 0 or 1."""
    kind_a, kind_b = _kind(a), _kind(b)
    if kind_a != kind_b:
        return -1 if kind_a < kind_b else 1
    if kind_a == _SEQUENCE:
        return compare_keys(a, b, fill=None)
    if kind_a == _OTHER and type(a) is not type(b):
        name_a, name_b = type(a).__name__, type(b).__name__
        return -1 if name_a < name_b else 1
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def compare_keys(a: Sequence[Any], b: Sequence[Any], fill: Any = 0) -> int:
    """
    Lexicographic comparison of two keys.

    Once the shorter key runs out, the remaining elements of the longer one are
    compared against ``fill`` (skip this step with ``fill=None``). Keys that are
    still tied are ordered by length.

    Returns:
        -1, 0 or 1
    """
    for a_val, b_val in zip(a, b):
        cmp = compare_values(a_val, b_val)
        if cmp:
            return cmp

    if fill is not None and len(a) != len(b):
        longer, sign = (a, 1) if len(a) > len(b) else (b, -1)
        for extra in longer[min(len(a), len(b)) :]:
            cmp = compare_values(extra, fill)
            if cmp:
                return cmp * sign

    if len(a) == len(b):
        return 0
    return -1 if len(a) < len(b) else 1
