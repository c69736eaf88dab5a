"""Helper functions for turning pydantic failures into scheme errors."""

from typing import Any, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from versionkit.exceptions import InvalidSchemeError


def _format_location(loc: tuple) -> str:
    """Render a pydantic error location as a dotted path.

    Args:
        loc: Location tuple like ('components', 2, 'name')

    Returns:
        Path string like 'components[2].name'
    """
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path


def convert_pydantic_error(
    pydantic_error: PydanticValidationError,
    data: Optional[Mapping[str, Any]] = None,
) -> InvalidSchemeError:
    """Convert a pydantic validation error to an InvalidSchemeError.

    Only the first reported problem is used; the name of the record (when the
    data carries one) is attached so the message points at the right scheme.
    """
    scheme_name = None
    if isinstance(data, Mapping) and data.get("name") is not None:
        scheme_name = str(data["name"])

    errors = pydantic_error.errors()
    if not errors:
        return InvalidSchemeError(str(pydantic_error), scheme_name)

    error = errors[0]
    location = _format_location(error.get("loc", ()))
    message = error.get("msg", str(pydantic_error))
    # pydantic prefixes messages raised from our validators
    message = message.removeprefix("Value error, ")

    if error.get("type") == "missing":
        message = f"{location} is required"
    elif location:
        message = f"{location}: {message}"

    return InvalidSchemeError(message, scheme_name)
