"""Version scheme implementations."""

from versionkit.schemes.base import VersionLike, VersionScheme
from versionkit.schemes.calver import FORMATS as CALVER_FORMATS
from versionkit.schemes.calver import CalVerScheme
from versionkit.schemes.composite import CompositeScheme
from versionkit.schemes.declarative import DeclarativeScheme
from versionkit.schemes.pattern import PatternScheme, check_pattern_safety
from versionkit.schemes.semantic import SemanticScheme
from versionkit.schemes.solover import SoloVerScheme
from versionkit.schemes.wendtver import WendtVerScheme

__all__ = [
    "VersionLike",
    "VersionScheme",
    "CALVER_FORMATS",
    "CalVerScheme",
    "CompositeScheme",
    "DeclarativeScheme",
    "PatternScheme",
    "check_pattern_safety",
    "SemanticScheme",
    "SoloVerScheme",
    "WendtVerScheme",
]
