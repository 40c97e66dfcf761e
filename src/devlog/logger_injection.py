"""
Logger injection for devlog diagnostics - saves passing logging options around
"""
from typing import Dict, Any, Callable
import functools
import logging
import inspect
from .logging_setup import setup_logging, LoggingOptions

# Global storage for logging options - set once at application startup
_global_logging_options: Dict[str, Any] = {}


def configure_logging(logging_options: Dict[str, Any]) -> None:
    """
    Configure global diagnostics logging options. Call this once at startup.

    Args:
        logging_options: Dictionary containing logging configuration
            ('log_file_path', 'log_level')

    Example:
        configure_logging({'log_level': logging.DEBUG})
    """
    global _global_logging_options
    _global_logging_options = logging_options


def _get_logger_name_from_context(func_name: str = None, func_module: str = None) -> str:
    """Diagnostics loggers are named module.function."""
    if func_module and func_name:
        return f"{func_module}.{func_name}"
    else:
        return "devlog.unknown"


def _resolve_logging_options(logging_options=None):
    """Helper function to resolve logging options with fallback chain."""

    # 1. Use provided logging_options if given
    if logging_options is not None:
        return logging_options

    # 2. Check global configuration
    if _global_logging_options:
        return LoggingOptions(
            filePath=_global_logging_options.get('log_file_path'),
            level=_global_logging_options.get('log_level', logging.WARNING)
        )

    # 3. Final fallback: console only, warnings and above
    return LoggingOptions()


def get_logger(logging_options=None, logger=None, func_name: str = None, func_module: str = None):
    """
    Get a diagnostics logger named after the code asking for it.

    Args:
        logging_options: Specific logging options to use
        logger: If provided, just returns this logger
        func_name: Name of the requesting function (auto-detected if not provided)
        func_module: Module of the requesting function (auto-detected if not provided)

    Returns:
        Logger instance
    """
    if logger is not None:
        return logger

    if func_name is None or func_module is None:
        caller_frame = inspect.currentframe().f_back
        if caller_frame:
            if func_name is None:
                func_name = caller_frame.f_code.co_name
            if func_module is None:
                func_module = caller_frame.f_globals.get('__name__', 'unknown')

    logger_name = _get_logger_name_from_context(func_name, func_module)
    return setup_logging(logger_name, _resolve_logging_options(logging_options))


def with_logger(func: Callable) -> Callable:
    """
    Decorator that supplies a ``logger`` keyword argument when the caller did not.
    """
    accepts_logger = 'logger' in inspect.signature(func).parameters

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if accepts_logger and kwargs.get('logger') is None:
            kwargs['logger'] = get_logger(func_name=func.__name__, func_module=func.__module__)
        return func(*args, **kwargs)

    return wrapper


def reset_logging_config() -> None:
    """Reset global logging configuration (mainly for testing)"""
    global _global_logging_options
    _global_logging_options = {}
