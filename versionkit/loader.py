"""Build schemes from configuration records (mappings or YAML)."""

import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

import yaml

from versionkit.components import DEFAULT_COMPONENT_TYPES, ComponentTypeRegistry
from versionkit.exceptions import InvalidSchemeError
from versionkit.model import SchemeConfig, SchemeType
from versionkit.schemes import (
    CalVerScheme,
    CompositeScheme,
    DeclarativeScheme,
    PatternScheme,
    SemanticScheme,
    SoloVerScheme,
    VersionScheme,
    WendtVerScheme,
)

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


class SchemeLoader:
    """
    Turn scheme configuration records into scheme objects.

    Records are validated by :class:`SchemeConfig` first, so snake_case and
    camelCase keys are both accepted and every validation problem surfaces as
    InvalidSchemeError.

    Usage:
        loader = SchemeLoader()
        scheme = loader.from_yaml_file("schemes/internal.yaml")
    """

    def __init__(self, component_types: Optional[ComponentTypeRegistry] = None):
        self.component_types = component_types or DEFAULT_COMPONENT_TYPES

    def from_dict(self, data: Union[Mapping[str, Any], SchemeConfig]) -> VersionScheme:
        """
        Build a scheme from a configuration mapping.

        Raises:
            InvalidSchemeError: If the record is invalid
        """
        config = data if isinstance(data, SchemeConfig) else SchemeConfig.from_dict(data)
        return self._build(config)

    def from_yaml_string(self, yaml_string: str) -> VersionScheme:
        """
        Build a scheme from YAML text.

        Raises:
            InvalidSchemeError: If the YAML is malformed or the record invalid
        """
        try:
            data = yaml.safe_load(yaml_string)
        except yaml.YAMLError as e:
            raise InvalidSchemeError(f"Invalid YAML: {e}") from e
        return self.from_dict(data)

    def from_yaml_file(self, path: Union[str, Path]) -> VersionScheme:
        path = Path(path)
        logger.info(f"Loading scheme from {path}")
        try:
            with open(path, "r") as f:
                content = f.read()
        except OSError as e:
            raise InvalidSchemeError(f"Cannot read scheme file {path}: {e}") from e
        return self.from_yaml_string(content)

    def load_directory(self, path: Union[str, Path]) -> List[VersionScheme]:
        """Load every ``*.yaml`` / ``*.yml`` file in ``path``, sorted by file name."""
        directory = Path(path)
        if not directory.is_dir():
            raise InvalidSchemeError(f"Scheme directory not found: {directory}")

        files = sorted(
            p for p in directory.iterdir() if p.is_file() and p.suffix in YAML_SUFFIXES
        )
        return [self.from_yaml_file(file) for file in files]

    def _build(self, config: SchemeConfig) -> VersionScheme:
        definitions = list(config.components)
        scheme_type = config.type

        if scheme_type == SchemeType.declarative:
            scheme = DeclarativeScheme(
                name=config.name,
                component_definitions=definitions,
                description=config.description,
                format_template=config.format_template,
                component_types=self.component_types,
            )
        elif scheme_type == SchemeType.pattern:
            scheme = PatternScheme(
                name=config.name,
                pattern=config.pattern,
                component_definitions=definitions,
                format_template=config.format_template,
                description=config.description,
                component_types=self.component_types,
            )
        elif scheme_type == SchemeType.calver:
            scheme = CalVerScheme(
                format=config.format or "YYYY.MM.DD",
                name=config.name or "calver",
                description=config.description,
                component_types=self.component_types,
            )
        elif scheme_type == SchemeType.composite:
            fallback = config.fallback_scheme
            scheme = CompositeScheme(
                name=config.name,
                schemes=[self._build(sub) for sub in config.schemes],
                fallback_scheme=self._build(fallback) if fallback is not None else None,
                description=config.description,
            )
        else:
            scheme = self._build_fixed(config)

        logger.debug(f"Built {scheme_type.value} scheme '{scheme.name}'")
        return scheme

    def _build_fixed(self, config: SchemeConfig) -> VersionScheme:
        classes = {
            SchemeType.semantic: SemanticScheme,
            SchemeType.solover: SoloVerScheme,
            SchemeType.wendtver: WendtVerScheme,
        }
        kwargs: dict = {"component_types": self.component_types}
        if config.name:
            kwargs["name"] = config.name
        if config.description:
            kwargs["description"] = config.description
        return classes[config.type](**kwargs)
