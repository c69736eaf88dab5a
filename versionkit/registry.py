"""Name -> scheme directory with first-match auto-detection."""

import logging
import threading
from typing import Dict, Iterable, List, Optional

from versionkit.exceptions import InvalidSchemeError
from versionkit.schemes import (
    CalVerScheme,
    SemanticScheme,
    SoloVerScheme,
    VersionScheme,
    WendtVerScheme,
)

logger = logging.getLogger(__name__)


class SchemeRegistry:
    """
    Registered schemes, kept in registration order.

    Detection walks that order and returns the first scheme accepting the
    text, so overlapping grammars resolve by whichever was registered first
    unless a priority list is given.
    """

    def __init__(self):
        self._schemes: Dict[str, VersionScheme] = {}
        self._lock = threading.Lock()

    def register(self, name: str, scheme: VersionScheme) -> None:
        with self._lock:
            self._schemes[name] = scheme
        logger.debug(f"Registered scheme '{name}' ({type(scheme).__name__})")

    def unregister(self, name: str) -> None:
        with self._lock:
            self._schemes.pop(name, None)

    def get(self, name: str) -> VersionScheme:
        """
        Look up a scheme by name.

        Raises:
            InvalidSchemeError: If nothing is registered under ``name``
        """
        try:
            return self._schemes[name]
        except KeyError:
            raise InvalidSchemeError(f"Unknown scheme: {name}") from None

    def registered(self) -> List[str]:
        return list(self._schemes)

    def detect_from(
        self, version_string: Optional[str], priority: Optional[Iterable[str]] = None
    ) -> Optional[VersionScheme]:
        """
        Find the scheme that accepts ``version_string``.

        Args:
            version_string: Text to classify
            priority: Scheme names to try first, in order; the remaining
                schemes follow in registration order

        Returns:
            The first accepting scheme, or None
        """
        if not version_string:
            return None

        for scheme in self._detection_order(priority):
            if scheme.is_valid(version_string):
                logger.debug(f"Detected scheme '{scheme.name}' for '{version_string}'")
                return scheme

        logger.debug(f"No registered scheme accepts '{version_string}'")
        return None

    def _detection_order(self, priority: Optional[Iterable[str]]) -> List[VersionScheme]:
        schemes = dict(self._schemes)
        ordered = []
        for name in priority or ():
            if name in schemes:
                ordered.append(schemes.pop(name))
        ordered.extend(schemes.values())
        return ordered

    def __contains__(self, name: object) -> bool:
        return name in self._schemes

    def __len__(self) -> int:
        return len(self._schemes)


def default_registry() -> SchemeRegistry:
    """A new registry holding the built-in schemes."""
    registry = SchemeRegistry()
    registry.register("semantic", SemanticScheme())
    registry.register("calver", CalVerScheme())
    registry.register("solover", SoloVerScheme())
    registry.register("wendtver", WendtVerScheme())
    return registry
