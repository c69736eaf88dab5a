"""Calendar versioning (https://calver.org) on top of the pattern scheme."""

import logging
from typing import Dict, List, Optional

from versionkit.components import ComponentTypeRegistry

from .pattern import PatternScheme

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "YYYY.MM.DD"

# format -> (regular expression, rendering template)
FORMATS: Dict[str, tuple] = {
    "YYYY.MM.DD": (r"^(\d{4})\.(\d{2})\.(\d{2})$", "{year}.{month}.{day}"),
    "YYYY.MM": (r"^(\d{4})\.(\d{2})$", "{year}.{month}"),
    "YYYY.WW": (r"^(\d{4})\.(\d{2})$", "{year}.{week}"),
    "YY.MM.DD": (r"^(\d{2})\.(\d{2})\.(\d{2})$", "{year}.{month}.{day}"),
    "YY.MM": (r"^(\d{2})\.(\d{2})$", "{year}.{month}"),
    "YY.WW": (r"^(\d{2})\.(\d{2})$", "{year}.{week}"),
}


def normalize_format(fmt: str) -> str:
    """Map the zero-padded spellings (0M, 0W, 0D) onto MM, WW and DD."""
    return fmt.replace("0M", "MM").replace("0W", "WW").replace("0D", "DD")


def _date_definitions(fmt: str) -> List[dict]:
    definitions = [{"name": "year", "type": "date_part", "subtype": "year"}]
    if "MM" in fmt:
        definitions.append({"name": "month", "type": "date_part", "subtype": "month"})
    if "DD" in fmt:
        definitions.append({"name": "day", "type": "date_part", "subtype": "day"})
    if "WW" in fmt:
        definitions.append({"name": "week", "type": "date_part", "subtype": "week"})
    return definitions


class CalVerScheme(PatternScheme):
    """
    Calendar version scheme.

    Args:
        format: One of the keys of ``FORMATS`` (``0M``/``0W``/``0D`` accepted).
            Unknown formats fall back to ``YYYY.MM.DD`` with a warning.
        name: Scheme name
        description: Defaults to "Calendar versioning (<format>)"
    """

    def __init__(
        self,
        format: str = DEFAULT_FORMAT,
        name: str = "calver",
        description: Optional[str] = None,
        component_types: Optional[ComponentTypeRegistry] = None,
    ):
        fmt = normalize_format(format or DEFAULT_FORMAT)
        if fmt not in FORMATS:
            logger.warning(
                f"Unknown CalVer format '{format}', falling back to {DEFAULT_FORMAT}"
            )
            fmt = DEFAULT_FORMAT
        pattern, template = FORMATS[fmt]

        self.format = fmt
        super().__init__(
            name=name,
            pattern=pattern,
            component_definitions=_date_definitions(fmt),
            format_template=template,
            description=description or f"Calendar versioning ({fmt})",
            component_types=component_types,
        )
