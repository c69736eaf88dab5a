"""User settings: extra scheme directories and detection priority"""

import configparser
import logging
import os
import platform
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

APP_NAME = "versionkit"

SCHEMES_SECTION = "schemes"
DETECT_SECTION = "detect"


def get_config_dir() -> Path:
    if platform.system() == "Darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / APP_NAME


def get_config_file() -> Path:
    return get_config_dir() / f"{APP_NAME}.cfg"


class ConfigAccessor:
    """
    Read and update the versionkit settings file (INI format).

    A missing file behaves like an empty one; absent sections and keys fall
    back to the caller's default.

    Example file:
        [schemes]
        paths = ~/schemes:/etc/versionkit/schemes

        [detect]
        priority = wendtver, semantic
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.config_path = Path(config_path) if config_path else get_config_file()
        self.config = configparser.ConfigParser()
        # read() skips files that do not exist
        self.config.read(self.config_path)

    def get(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.config.get(section, key, fallback=default)

    def get_list(self, section: str, key: str, separator: str) -> List[str]:
        """Split a value on ``separator``, dropping blank items."""
        raw = self.get(section, key) or ""
        return [item.strip() for item in raw.split(separator) if item.strip()]

    def set(self, section: str, key: str, value: str) -> None:
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value

    def save(self) -> None:
        """Write the settings back; an unwritable location only logs a warning."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w") as f:
                self.config.write(f)
        except OSError as e:
            logger.warning(f"Could not save configuration to {self.config_path}: {e}")

    def sections(self) -> List[str]:
        return self.config.sections()

    def scheme_paths(self) -> List[Path]:
        """Directories listed under ``[schemes] paths``, separated by os.pathsep."""
        return [
            Path(item).expanduser()
            for item in self.get_list(SCHEMES_SECTION, "paths", os.pathsep)
        ]

    def detect_priority(self) -> List[str]:
        """Scheme names listed under ``[detect] priority``, comma separated."""
        return self.get_list(DETECT_SECTION, "priority", ",")
