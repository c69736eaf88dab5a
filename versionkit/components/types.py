"""
Component types: how a raw token becomes a typed value, an order key, and text.

Every type is a stateless object with three operations:

- ``parse(token, definition)``: token -> value, raising ParseError when the
  token is outside the type's domain. An empty or missing token yields the
  definition's default (or the type's zero value).
- ``to_comparable(value, definition)``: value -> key usable in a
  lexicographic comparison. ``None`` (absent optional segment) has a key too.
- ``format(value)``: value -> text, the inverse of ``parse``.
"""

import math
import re
from abc import ABC, abstractmethod
from typing import Any, Optional

from versionkit.exceptions import ParseError
from versionkit.model import ComponentDefinition

from .values import (
    POSTFIX_ORDINALS,
    ComponentValue,
    Postfix,
    PrereleaseKey,
)

_INTEGER = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_DIGITS = re.compile(r"\d+")


def _is_empty(token: Optional[str]) -> bool:
    return token is None or token == ""


def _default(definition: Optional[ComponentDefinition]) -> Any:
    return definition.default if definition is not None else None


class ComponentType(ABC):
    """Base class for component types."""

    name: str = ""

    @abstractmethod
    def parse(
        self, token: Optional[str], definition: Optional[ComponentDefinition] = None
    ) -> ComponentValue: ...

    @abstractmethod
    def to_comparable(
        self, value: ComponentValue, definition: Optional[ComponentDefinition] = None
    ) -> Any: ...

    @abstractmethod
    def format(self, value: ComponentValue) -> str: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class IntegerType(ComponentType):
    name = "integer"

    def parse(self, token, definition=None):
        if _is_empty(token):
            default = _default(definition)
            return self._coerce(default) if default is not None else 0
        return self._coerce(token)

    def _coerce(self, value: Any) -> int:
        if isinstance(value, int):
            return value
        text = str(value).strip()
        if not _INTEGER.fullmatch(text):
            raise ParseError(f"Invalid integer '{value}'")
        return int(text)

    def to_comparable(self, value, definition=None):
        return 0 if value is None else value

    def format(self, value):
        return "" if value is None else str(value)


class FloatType(ComponentType):
    name = "float"

    def parse(self, token, definition=None):
        if _is_empty(token):
            default = _default(definition)
            return self._coerce(default) if default is not None else 0.0
        return self._coerce(token)

    def _coerce(self, value: Any) -> float:
        if isinstance(value, (int, float)) and math.isfinite(value):
            return float(value)
        text = str(value).strip()
        if not _FLOAT.fullmatch(text):
            raise ParseError(f"Invalid float '{value}'")
        return float(text)

    def to_comparable(self, value, definition=None):
        return 0.0 if value is None else value

    def format(self, value):
        return "" if value is None else str(value)


class StringType(ComponentType):
    name = "string"

    def parse(self, token, definition=None):
        if _is_empty(token):
            default = _default(definition)
            return str(default) if default is not None else ""
        return str(token)

    def to_comparable(self, value, definition=None):
        return "" if value is None else value

    def format(self, value):
        return "" if value is None else value


class EnumType(ComponentType):
    """A closed set of symbols ordered by ``definition.order``."""

    name = "enum"

    def parse(self, token, definition=None):
        if _is_empty(token):
            return None
        if definition is not None and definition.values and token not in definition.values:
            raise ParseError(
                f"Invalid enum value '{token}' for {definition.name}. "
                f"Allowed: {', '.join(definition.values)}"
            )
        return str(token)

    def to_comparable(self, value, definition=None):
        if value is None:
            return math.inf
        order = definition.order if definition is not None else ()
        if value in order:
            return order.index(value)
        # Unordered symbols sort after every ordered one
        return len(order) + 1

    def format(self, value):
        return "" if value is None else str(value)


class DatePartType(ComponentType):
    """Integer calendar field whose range depends on ``definition.subtype``."""

    name = "date_part"

    RANGES = {
        "year": (1, 9999),
        "month": (1, 12),
        "day": (1, 31),
        "week": (1, 53),
        "hour": (0, 23),
        "minute": (0, 59),
        "second": (0, 59),
    }

    def parse(self, token, definition=None):
        if _is_empty(token):
            default = _default(definition)
            return int(default) if default is not None else 0

        text = str(token)
        if not _DIGITS.fullmatch(text):
            raise ParseError(f"Invalid date part '{token}'")
        value = int(text)

        subtype = definition.subtype if definition is not None else None
        if subtype in self.RANGES:
            low, high = self.RANGES[subtype]
            if not low <= value <= high:
                raise ParseError(
                    f"Invalid {subtype} '{value}'. Must be between {low} and {high}"
                )
        return value

    def to_comparable(self, value, definition=None):
        return 0 if value is None else value

    def format(self, value):
        if value is None:
            return ""
        return str(value).rjust(2, "0")


class PrereleaseType(ComponentType):
    """Dot separated prerelease identifiers ordered by SemVer precedence."""

    name = "prerelease"

    def parse(self, token, definition=None):
        if _is_empty(token):
            return None
        identifiers = []
        for part in str(token).split("."):
            if part == "":
                raise ParseError(f"Empty prerelease identifier in '{token}'")
            identifiers.append(int(part) if _DIGITS.fullmatch(part) else part)
        return tuple(identifiers)

    def to_comparable(self, value, definition=None):
        return PrereleaseKey(value)

    def format(self, value):
        if value is None:
            return ""
        return ".".join(str(part) for part in value)


class PostfixType(ComponentType):
    """``+identifier`` (after) or ``-identifier`` (before)."""

    name = "postfix"

    def parse(self, token, definition=None):
        if _is_empty(token):
            return None
        if isinstance(token, Postfix):
            return token
        prefix, identifier = token[0], token[1:]
        if prefix not in POSTFIX_ORDINALS:
            raise ParseError(
                f"Invalid postfix '{token}'. Must start with one of "
                f"{', '.join(POSTFIX_ORDINALS)}"
            )
        if not identifier:
            raise ParseError(f"Postfix '{token}' has no identifier")
        return Postfix(prefix, identifier)

    def to_comparable(self, value, definition=None):
        if value is None:
            return (0, "")
        return (value.ordinal, value.identifier)

    def format(self, value):
        return "" if value is None else str(value)


class HashType(ComponentType):
    """Commit-style hash, compared by length first and then by content."""

    name = "hash"

    def parse(self, token, definition=None):
        if _is_empty(token):
            return _default(definition)
        return str(token).lower()

    def to_comparable(self, value, definition=None):
        if value is None:
            return (0, "")
        return (len(value), value)

    def format(self, value):
        return "" if value is None else value


BUILTIN_TYPES = (
    IntegerType(),
    FloatType(),
    EnumType(),
    StringType(),
    DatePartType(),
    PrereleaseType(),
    PostfixType(),
    HashType(),
)
