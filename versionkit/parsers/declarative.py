"""
Segment parser driven purely by component definitions.

No regular expression is compiled for a scheme. The parser walks the string
with a cursor and finds where each segment ends by looking ahead for the
markers (separators and prefixes) that the following segments declare.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from versionkit.components import DEFAULT_COMPONENT_TYPES, ComponentTypeRegistry
from versionkit.exceptions import InvalidSchemeError, InvalidVersionError, ParseError
from versionkit.model import ComponentDefinition, DefinitionLike, coerce_definitions

logger = logging.getLogger(__name__)

# Prefix characters recognized for segments that keep their prefix in the value
ALTERNATE_PREFIXES = ("+", "-")


class DeclarativeParser:
    """
    Parse version strings against an ordered list of segment definitions.

    Args:
        definitions: Ordered segment definitions (models or plain mappings)
        component_types: Registry used to resolve each segment's type

    Raises:
        InvalidSchemeError: If a definition is incomplete, names an unknown
            component type, or is optional without a prefix
    """

    def __init__(
        self,
        definitions: Sequence[DefinitionLike],
        component_types: Optional[ComponentTypeRegistry] = None,
    ):
        self.definitions: List[ComponentDefinition] = coerce_definitions(definitions)
        self.component_types = component_types or DEFAULT_COMPONENT_TYPES
        self._validate_definitions()

    def _validate_definitions(self) -> None:
        for index, segment in enumerate(self.definitions):
            if not segment.name:
                raise InvalidSchemeError("segment name required")
            if not segment.type:
                raise InvalidSchemeError("segment type required")
            if segment.optional and index > 0 and not segment.has_prefix:
                raise InvalidSchemeError(
                    f"Optional segment '{segment.name}' must have prefix or separator"
                )
            # Fail at construction rather than on first parse
            self.component_types.resolve(segment.type)

    def parse(self, version_string: Optional[str]) -> Dict[str, Any]:
        """
        Split a version string into typed segment values.

        Args:
            version_string: Text to parse

        Returns:
            Dict mapping each segment name to its value (None when an optional
            segment is absent), in definition order

        Raises:
            InvalidVersionError: If the input is not a string
            ParseError: If the string does not fit the segment definitions
        """
        if version_string is not None and not isinstance(version_string, str):
            raise InvalidVersionError(
                f"Version must be a string, got {type(version_string).__name__}"
            )
        if not version_string:
            raise ParseError("Version string cannot be empty", version_string)

        text = version_string
        pos = 0
        results: Dict[str, Any] = {}

        for index, segment in enumerate(self.definitions):
            if segment.optional and segment.has_prefix:
                if pos >= len(text):
                    results[segment.name] = None
                    continue

                prefix = segment.prefix
                at_pos = text.startswith(prefix, pos)
                # A previous segment may have stopped right after this prefix
                before_pos = pos >= len(prefix) and text.startswith(
                    prefix, pos - len(prefix)
                )
                prefix_like = (
                    segment.include_prefix_in_value and text[pos] in ALTERNATE_PREFIXES
                )

                if not (at_pos or before_pos or prefix_like):
                    results[segment.name] = None
                    continue

                if at_pos and not segment.include_prefix_in_value:
                    pos += len(prefix)

            end = self._find_segment_end(text, pos, index)
            token = text[pos:end]

            if not token:
                if segment.optional:
                    results[segment.name] = None
                    continue
                raise ParseError(
                    f"Required segment '{segment.name}' is missing or empty",
                    version_string,
                )

            component_type = self.component_types.resolve(segment.type)
            results[segment.name] = component_type.parse(token, segment)
            pos = end

            # Separators belong to the segment they follow
            if segment.has_separator and text.startswith(segment.separator, pos):
                pos += len(segment.separator)

        if pos < len(text):
            raise ParseError(
                f"Unexpected trailing content after parsing: '{text[pos:]}'",
                version_string,
            )

        logger.debug(f"Parsed '{version_string}' into {results}")
        return results

    def matches(self, version_string: Optional[str]) -> bool:
        """Return True when ``version_string`` parses against the definitions."""
        try:
            self.parse(version_string)
        except (ParseError, InvalidVersionError):
            return False
        return True

    def _find_segment_end(self, text: str, pos: int, index: int) -> int:
        """
        Position where the segment at ``index`` stops.

        The earliest of: end of string, the segment's own separator, and the
        separators/prefixes of later segments. Scanning later segments stops at
        the first one whose prefix occurs in the remaining text.
        """
        candidates = [len(text)]
        current = self.definitions[index]

        if current.has_separator:
            found = text.find(current.separator, pos)
            if found >= 0:
                candidates.append(found)

        for following in self.definitions[index + 1 :]:
            if following.has_separator:
                found = text.find(following.separator, pos)
                if found >= 0:
                    candidates.append(found)

            if not following.has_prefix:
                continue

            prefix_found = False
            found = text.find(following.prefix, pos)
            if found >= 0:
                candidates.append(found)
                prefix_found = True

            if following.include_prefix_in_value:
                for alternate in ALTERNATE_PREFIXES:
                    if alternate == following.prefix:
                        continue
                    found = text.find(alternate, pos)
                    if found >= 0:
                        candidates.append(found)
                        prefix_found = True

            if prefix_found:
                break

        return min(candidates)
