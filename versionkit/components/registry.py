"""Name -> component type directory."""

import logging
import threading
from typing import Dict, List

from versionkit.exceptions import InvalidSchemeError

from .types import BUILTIN_TYPES, ComponentType

logger = logging.getLogger(__name__)


class ComponentTypeRegistry:
    """
    Maps component type names to component type objects.

    Registration is guarded by a lock; lookups read the underlying dict
    directly since registration is expected to happen once, at startup.
    """

    def __init__(self):
        self._types: Dict[str, ComponentType] = {}
        self._lock = threading.Lock()

    def register(self, name: str, component_type: ComponentType) -> None:
        """Register (or replace) the component type stored under ``name``."""
        with self._lock:
            self._types[name] = component_type
        logger.debug(f"Registered component type '{name}'")

    def resolve(self, name: str) -> ComponentType:
        """
        Look up a component type.

        Raises:
            InvalidSchemeError: If no type is registered under ``name``
        """
        try:
            return self._types[name]
        except KeyError:
            raise InvalidSchemeError(f"Unknown component type: {name}") from None

    def registered(self) -> List[str]:
        return list(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._types


def default_component_types() -> ComponentTypeRegistry:
    """Build a registry holding the built-in component types."""
    registry = ComponentTypeRegistry()
    for component_type in BUILTIN_TYPES:
        registry.register(component_type.name, component_type)
    return registry


# Injected into schemes and parsers that are not handed a registry explicitly
DEFAULT_COMPONENT_TYPES = default_component_types()
