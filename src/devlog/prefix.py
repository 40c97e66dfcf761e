"""
Prefix derivation.

An explicit prefix option always wins. Otherwise the prefix names the source
file of the code that called the public Logger method, found by walking a
trace captured at call time.
"""

import re
import traceback
from typing import List, Optional, Sequence

from .logger_injection import get_logger
from .options import LoggerOptions

# Frames between the capture and the caller of a public Logger method:
# capture_trace, derive_prefix, Logger._emit, Logger.<public method>
CALLER_FRAME_OFFSET = 4

_SOURCE_FILE = re.compile(r'File "[^"]*?([\w\-]+)\.pyw?"')


def capture_trace() -> List[str]:
    """
    Capture the active call frames as text, innermost first.

    The first entry is this function's own frame.
    """
    return list(reversed(traceback.format_stack()))


def resolve_caller_frame(trace: Sequence[str], skip_frames: int) -> Optional[str]:
    """
    Pick the frame ``skip_frames`` entries away from the capture point.

    Falls back to the outermost frame when the trace is shorter than that.

    Args:
        trace: Frame descriptions, innermost first
        skip_frames: Number of frames to skip

    Returns:
        The selected frame description, None if the trace is empty
    """
    if not trace:
        return None
    index = min(max(skip_frames, 0), len(trace) - 1)
    return trace[index]


def source_label(frame_text: Optional[str]) -> Optional[str]:
    """
    Base name of the Python source file named in a frame description.

    '  File "/app/jobs/nightly.py", line 3, in run' -> 'nightly'

    Returns None for frames without a .py file, e.g. <stdin> or <string>.
    """
    if not frame_text:
        return None
    match = _SOURCE_FILE.search(frame_text)
    if not match:
        return None
    return match.group(1)


def format_prefix(label: Optional[str]) -> str:
    return f"[{label}] " if label else ''


def derive_prefix(options: LoggerOptions, skip_frames: int = CALLER_FRAME_OFFSET) -> str:
    """
    Work out the prefix for a message.

    Args:
        options: Options merged for this call
        skip_frames: Frames between capture_trace and the caller to label

    Returns:
        str: '[LABEL] ' or an empty string, never raises
    """
    if options.prefix:
        return format_prefix(options.prefix)

    if not options.show_file_prefix:
        return ''

    try:
        trace = capture_trace()
    except Exception as e:
        get_logger().debug(f"Could not capture a trace for the file prefix: {e}")
        return ''

    label = source_label(resolve_caller_frame(trace, skip_frames))
    return format_prefix(label.upper() if label else None)
