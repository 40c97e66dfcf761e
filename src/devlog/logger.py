"""
Development-gated console logger.

By default a Logger only writes while the process runs in development mode
(see devlog.environment). Each message can carry a prefix naming the source
file that made the call, and each channel can have its own formatter.

Example:
    from devlog import Logger
    from devlog.colors import yellow

    log = Logger(colors={'log': yellow})
    log.log('loaded', {'rows': 12})           # [JOBS] loaded {"rows":12}
    log.error('failed', options={'prefix': 'db'})
    log.force('debug', 'shown even in production')
"""

from typing import Any, Mapping, Optional

from .channels import Channel
from .environment import EnvironmentQuery, is_development
from .formatting import build_parts
from .options import LoggerOptions, forced, merge_options, recognised
from .policy import should_emit
from .prefix import derive_prefix
from .sinks import StreamSink


class Logger:
    """
    Writes messages to the log, error, warn, debug and plain channels.

    Options are fixed at construction. Each call may pass ``options``, a
    mapping of overrides that applies to that call only.

    Every public method calls ``_emit`` directly: the file prefix relies on
    that fixed call depth (see devlog.prefix.CALLER_FRAME_OFFSET).
    """

    def __init__(self,
                 options=None,
                 *,
                 environment_query: EnvironmentQuery = is_development,
                 sink=None,
                 **option_kwargs):
        """
        Args:
            options (LoggerOptions or Mapping): Initial options, unknown keys ignored
            environment_query (callable): Answers "is this development?", called per message
            sink: Object with write(channel, parts), a StreamSink if None
            **option_kwargs: Option values, these win over ``options``
        """
        if isinstance(options, LoggerOptions):
            base = options
        else:
            base = merge_options(LoggerOptions(), options)
        self._options = merge_options(base, recognised(option_kwargs))
        self._environment_query = environment_query
        self._sink = sink if sink is not None else StreamSink()

    @property
    def options(self) -> LoggerOptions:
        return self._options

    @property
    def sink(self):
        return self._sink

    def _emit(self, channel: Channel, values, options: LoggerOptions) -> None:
        if not should_emit(channel, options, self._environment_query):
            return
        prefix = derive_prefix(options)
        self._sink.write(channel, build_parts(prefix, values, options.formatter_for(channel)))

    def log(self, *values: Any, options: Optional[Mapping[str, Any]] = None) -> None:
        """Write to the standard output channel."""
        self._emit(Channel.LOG, values, merge_options(self._options, options))

    def error(self, *values: Any, options: Optional[Mapping[str, Any]] = None) -> None:
        """Write to the error channel (standard error)."""
        self._emit(Channel.ERROR, values, merge_options(self._options, options))

    def warn(self, *values: Any, options: Optional[Mapping[str, Any]] = None) -> None:
        self._emit(Channel.WARN, values, merge_options(self._options, options))

    def debug(self, *values: Any, options: Optional[Mapping[str, Any]] = None) -> None:
        """Write to the debug channel, which also needs debug_enabled."""
        self._emit(Channel.DEBUG, values, merge_options(self._options, options))

    def plain(self, *values: Any, options: Optional[Mapping[str, Any]] = None) -> None:
        """Write to standard output without any formatter."""
        self._emit(Channel.PLAIN, values, merge_options(self._options, options))

    def force(self, channel, *values: Any, options: Optional[Mapping[str, Any]] = None) -> None:
        """
        Write one message regardless of environment and debug gates.

        The stored options are not touched, so concurrent calls are safe.

        Args:
            channel: Channel or channel name ('log', 'error', 'warn', 'debug', 'plain')
            *values: Values to write
            options: Per-call overrides

        Raises:
            ValueError: If channel is not a known channel name
        """
        self._emit(Channel.parse(channel), values, forced(merge_options(self._options, options)))

    def __repr__(self):
        return f"Logger({self._options!r})"
