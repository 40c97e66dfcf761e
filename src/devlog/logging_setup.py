"""
Diagnostics logging setup for devlog.

The package reports its own problems (unreadable settings files, failing
environment probes, unknown colour names) through the standard ``logging``
module. These records never travel through the ``Logger`` channels.
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional


DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass
class LoggingOptions:
    """
    Settings for a diagnostics logger.

    Attributes:
        filePath: Optional path of a file that receives a copy of the records
        level: Logging level for the logger and its handlers
    """
    filePath: Optional[str] = None
    level: int = logging.WARNING


def _has_file_handler(logger: logging.Logger, file_path: str) -> bool:
    target = os.path.abspath(file_path)
    return any(isinstance(handler, logging.FileHandler) and handler.baseFilename == target
               for handler in logger.handlers)


def setup_logging(name, logging_options: Optional[LoggingOptions] = None) -> logging.Logger:
    """
    Create (or fetch) a configured diagnostics logger.

    Calling this repeatedly with the same name does not stack handlers.

    Args:
        name: Logger name
        logging_options: LoggingOptions to apply, defaults used if None

    Returns:
        logging.Logger: The configured logger
    """
    if logging_options is None:
        logging_options = LoggingOptions()

    logger = logging.getLogger(name)
    logger.setLevel(logging_options.level)
    logger.propagate = False

    formatter = logging.Formatter(DEFAULT_FORMAT)

    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # A file configured after the logger was first created still gets attached
    if logging_options.filePath and not _has_file_handler(logger, logging_options.filePath):
        file_handler = logging.FileHandler(logging_options.filePath, mode='a')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    for handler in logger.handlers:
        handler.setLevel(logging_options.level)

    return logger
