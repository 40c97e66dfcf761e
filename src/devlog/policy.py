"""
Emission decision: does a message on a channel get written at all?
"""

from .channels import Channel
from .environment import EnvironmentQuery
from .logger_injection import get_logger
from .options import LoggerOptions


def _query(environment_query: EnvironmentQuery) -> bool:
    try:
        return bool(environment_query())
    except Exception as e:
        get_logger().debug(f"Environment query failed, treating as production: {e}")
        return False


def should_emit(channel: Channel, options: LoggerOptions, environment_query: EnvironmentQuery) -> bool:
    """
    Decide whether a message proceeds to formatting and output.

    Precedence: always_log, then log_if_development, then environment
    detection. The debug channel additionally needs debug_enabled.

    Args:
        channel: Channel the message is for
        options: Options already merged for this call
        environment_query: Zero-argument callable answering "is development?"

    Returns:
        bool: True if the message should be written
    """
    if options.always_log:
        allowed = True
    elif not options.log_if_development:
        allowed = False
    else:
        allowed = _query(environment_query)

    if channel is Channel.DEBUG:
        return allowed and options.debug_enabled
    return allowed
