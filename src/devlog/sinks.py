"""
Sinks receive finished messages and write them out.
"""

from typing import Any, Sequence

from .channels import Channel


class StreamSink:
    """
    Writes each message with a single print() call to the channel's stream.

    Elements are passed to print() as separate arguments, so they come out
    separated by one space, the same way print('a', 'b') does.
    """

    def __init__(self, stdout=None, stderr=None):
        """
        Args:
            stdout: Stream for every channel except error, sys.stdout if None
            stderr: Stream for the error channel, sys.stderr if None
        """
        self.stdout = stdout
        self.stderr = stderr

    def stream_for(self, channel: Channel):
        override = self.stderr if channel.uses_error_stream else self.stdout
        return override if override is not None else channel.stream()

    def write(self, channel: Channel, parts: Sequence[Any]) -> None:
        print(*parts, file=self.stream_for(channel))
