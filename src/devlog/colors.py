"""
ANSI formatters for terminal output.

Any callable mapping str to str can be used as a channel formatter; these
are ready-made ones. Set NO_COLOR to turn them into no-ops.
"""

import os
from typing import Optional

from .logger_injection import get_logger
from .options import Formatter

_RESET = "\033[0m"

# SGR codes
PALETTE = {
    'red': '31',
    'green': '32',
    'yellow': '33',
    'blue': '34',
    'magenta': '35',
    'cyan': '36',
    'grey': '90',
    'gray': '90',
    'bold': '1',
    'dim': '2',
}


def ansi(code: str) -> Formatter:
    """
    Build a formatter wrapping text in the given SGR code.

    Args:
        code: SGR parameter, e.g. '33' for yellow

    Returns:
        callable: text -> styled text
    """
    start = f"\033[{code}m"

    def formatter(text: str) -> str:
        if os.environ.get('NO_COLOR'):
            return text
        return f"{start}{text}{_RESET}"

    formatter.__name__ = f"ansi_{code}"
    return formatter


red = ansi(PALETTE['red'])
green = ansi(PALETTE['green'])
yellow = ansi(PALETTE['yellow'])
blue = ansi(PALETTE['blue'])
magenta = ansi(PALETTE['magenta'])
cyan = ansi(PALETTE['cyan'])
grey = ansi(PALETTE['grey'])
bold = ansi(PALETTE['bold'])
dim = ansi(PALETTE['dim'])


def named_formatter(name) -> Optional[Formatter]:
    """
    Look up a palette formatter by name ('yellow', 'Grey', ...).

    Returns None for empty or unknown names; unknown names are reported.
    """
    if not name:
        return None
    code = PALETTE.get(str(name).strip().lower())
    if code is None:
        get_logger().warning(f"Unknown colour '{name}', leaving output unstyled")
        return None
    return ansi(code)
