"""
Logger options and how per-call overrides combine with instance defaults.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Mapping, Optional

from .channels import Channel

Formatter = Callable[[str], str]


def _normalise_colors(colors) -> dict:
    """
    Key a colour mapping by Channel, dropping entries that name no channel.
    """
    normalised = {}
    for key, formatter in dict(colors or {}).items():
        try:
            channel = Channel.parse(key)
        except ValueError:
            continue
        if formatter is not None and not callable(formatter):
            continue
        normalised[channel] = formatter
    return normalised


@dataclass(frozen=True)
class LoggerOptions:
    """
    Emission and formatting settings for a Logger.

    Attributes:
        always_log: Emit regardless of the detected environment
        log_if_development: Gate emission on development detection; when False
            (and always_log is False) nothing is emitted
        show_file_prefix: Derive a prefix from the calling source file
        prefix: Explicit prefix label, always used when set
        debug_enabled: Separate gate for the debug channel
        colors: Channel to formatter mapping, entries may be None
    """
    always_log: bool = False
    log_if_development: bool = True
    show_file_prefix: bool = True
    prefix: Optional[str] = None
    debug_enabled: bool = True
    colors: Mapping[Channel, Optional[Formatter]] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, 'colors', _normalise_colors(self.colors))

    def formatter_for(self, channel: Channel) -> Optional[Formatter]:
        if not channel.decorated:
            return None
        return self.colors.get(channel)


OPTION_NAMES = frozenset(f.name for f in fields(LoggerOptions))


def recognised(overrides: Optional[Mapping[str, Any]]) -> dict:
    """Keep only the keys that name a LoggerOptions field."""
    if not overrides:
        return {}
    return {key: value for key, value in dict(overrides).items() if key in OPTION_NAMES}


def merge_options(base: LoggerOptions, overrides: Optional[Mapping[str, Any]] = None) -> LoggerOptions:
    """
    Combine stored options with per-call overrides.

    Unknown keys are ignored. A ``colors`` override is merged channel by
    channel over the stored map. ``base`` is left untouched.

    Args:
        base: The stored options
        overrides: Mapping of option name to value, or None

    Returns:
        LoggerOptions: Options for this single call
    """
    changes = recognised(overrides)
    if not changes:
        return base

    if 'colors' in changes:
        colors = dict(base.colors)
        colors.update(_normalise_colors(changes['colors']))
        changes['colors'] = colors

    return replace(base, **changes)


def forced(options: LoggerOptions) -> LoggerOptions:
    """Options with both emission gates opened, for a single forced call."""
    return replace(options, always_log=True, debug_enabled=True)
