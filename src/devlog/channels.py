"""
Output channels.

The set of channels is closed: every message goes to exactly one of them.
"""

import sys
from enum import Enum


class Channel(Enum):
    LOG = 'log'
    ERROR = 'error'
    WARN = 'warn'
    DEBUG = 'debug'
    PLAIN = 'plain'

    @classmethod
    def parse(cls, name) -> 'Channel':
        """
        Resolve a channel from its name.

        Args:
            name: A Channel, or its value in any letter case ('log', 'ERROR', ...)

        Returns:
            Channel: The matching channel

        Raises:
            ValueError: If the name is not one of the known channels
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            known = ', '.join(channel.value for channel in cls)
            raise ValueError(f"Unknown channel '{name}' (expected one of: {known})") from None

    @property
    def uses_error_stream(self) -> bool:
        return self is Channel.ERROR

    @property
    def decorated(self) -> bool:
        # plain output never goes through a formatter
        return self is not Channel.PLAIN

    def stream(self):
        """Return the stream this channel writes to, looked up at call time."""
        return sys.stderr if self.uses_error_stream else sys.stdout
