"""
Turning logged values into the text elements handed to a sink.
"""

import json
from typing import Any, List, Optional, Sequence

from .options import Formatter


def to_text(value: Any):
    """
    Text form of a logged value.

    Strings and None pass through unchanged. Anything else is serialised as
    compact JSON ({"a":1}), or with repr() when JSON cannot represent it.
    Values nested too deeply for either come out as their type, e.g. <list>.
    """
    if value is None or isinstance(value, str):
        return value
    try:
        return json.dumps(value, separators=(',', ':'), ensure_ascii=False)
    except (TypeError, ValueError):
        pass
    except RecursionError:
        return f"<{type(value).__name__}>"
    try:
        return repr(value)
    except RecursionError:
        return f"<{type(value).__name__}>"


def build_parts(prefix: str, values: Sequence[Any], formatter: Optional[Formatter] = None) -> List[Any]:
    """
    Build the elements written for one message.

    The prefix is joined to the first element; the remaining values stay
    separate elements. A formatter, when given, is applied to every element.

    Args:
        prefix: '[LABEL] ' or ''
        values: The values passed to the logging call
        formatter: Optional text to text styling function

    Returns:
        list: Elements for a single write
    """
    parts = [to_text(value) for value in values]

    if prefix:
        if parts:
            parts[0] = f"{prefix}{parts[0]}"
        else:
            parts.append(prefix.rstrip())

    if formatter is not None:
        parts = [formatter(part if isinstance(part, str) else str(part)) for part in parts]

    return parts
