"""
Development environment detection.

``is_development`` asks a short, ordered list of probes whether the current
process runs in development mode. A probe answers True (development), or
None when it cannot tell; a probe that raises counts as None. The answer is
never cached so changes to the environment show up on the next call.
"""

import os
import sys
from typing import Callable, Optional

from .logger_injection import get_logger

EnvironmentQuery = Callable[[], bool]

# Checked in order, the first variable that is set decides
MODE_VARIABLES = ('DEVLOG_ENV', 'APP_ENV', 'PYTHON_ENV')
DEVELOPMENT_TOKEN = 'dev'


def probe_mode_variable(environ=None) -> Optional[bool]:
    """
    Look for a runtime-mode variable such as DEVLOG_ENV=development.

    Args:
        environ: Mapping to read instead of os.environ

    Returns:
        True if the first mode variable set starts with 'dev', otherwise None
    """
    if environ is None:
        environ = os.environ
    for name in MODE_VARIABLES:
        value = environ.get(name)
        if value is None:
            continue
        if value.strip().lower().startswith(DEVELOPMENT_TOKEN):
            return True
        return None
    return None


def probe_interpreter_dev_mode() -> Optional[bool]:
    """True when the interpreter runs with -X dev (or PYTHONDEVMODE=1)."""
    if getattr(sys.flags, 'dev_mode', False) is True:
        return True
    return None


PROBES = (probe_mode_variable, probe_interpreter_dev_mode)


def is_development() -> bool:
    """
    Is this process considered a development environment?

    Returns:
        bool: True if any probe says so, False when all are inconclusive
    """
    for probe in PROBES:
        try:
            if probe() is True:
                return True
        except Exception as e:
            get_logger().debug(f"Environment probe {getattr(probe, '__name__', probe)} failed: {e}")
    return False
