"""
devlog Package

A small console logger that only speaks up in development. Messages are
prefixed with the calling file's name, can be styled per channel, and go
to one of the log, error, warn, debug and plain channels.
"""

__version__ = '0.1.0'

from .channels import Channel
from .options import LoggerOptions, merge_options
from .environment import is_development
from .prefix import derive_prefix, resolve_caller_frame, CALLER_FRAME_OFFSET
from .sinks import StreamSink
from .logger import Logger
from .config import parse_logger_config, load_logger

# Define what's publicly available when using "from devlog import *"
__all__ = [

    # Logger
    'Logger',
    'LoggerOptions',
    'merge_options',
    'Channel',
    'StreamSink',

    # Environment detection
    'is_development',

    # Prefixes
    'derive_prefix',
    'resolve_caller_frame',
    'CALLER_FRAME_OFFSET',

    # Configuration
    'parse_logger_config',
    'load_logger',
]
