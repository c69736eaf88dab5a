"""Rendering of ``{name}`` / ``[...]`` format templates."""

import re
from typing import Mapping

_OPTIONAL_SPAN = re.compile(r"\[([^\[\]]*)\]")
_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def render_template(template: str, values: Mapping[str, str]) -> str:
    """
    Fill a format template.

    ``[...]`` spans are resolved innermost first: a span is kept (without its
    brackets) when at least one placeholder inside it has a value, otherwise it
    is dropped. Placeholders are then replaced by their value, or by nothing
    when unset.

    Example:
        >>> render_template("{major}.{minor}[-{stage}]", {"major": "1", "minor": "2"})
        '1.2'
    """
    result = template
    while True:
        match = _OPTIONAL_SPAN.search(result)
        if match is None:
            break
        content = match.group(1)
        keep = any(name in values for name in _PLACEHOLDER.findall(content))
        result = result[: match.start()] + (content if keep else "") + result[match.end() :]

    return _PLACEHOLDER.sub(lambda m: values.get(m.group(1), ""), result)
