"""Stream printer adapter (default jot output)."""

import sys
import threading
from datetime import datetime
from typing import Any, Optional, TextIO

from ..formatting import sprint, sprintf, sprintln
from ..interfaces import IPrinter

# Local time, as Go's log.LstdFlags renders it
DEFAULT_TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S "


class StreamAdapter(IPrinter):
    """Adapter writing one entry per call to a text stream.

    Each entry is ``prefix + timestamp + message`` and always ends with a
    newline. With no stream given, output goes to whatever ``sys.stderr``
    is at write time. Writes from concurrent calls are serialized per
    adapter.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        prefix: str = "",
        timestamp: bool = True,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    ):
        self.stream = stream
        self.prefix = prefix
        self.timestamp = timestamp
        self.timestamp_format = timestamp_format
        self._lock = threading.Lock()

    def _format_entry(self, message: str) -> str:
        """Build the full entry line for message."""
        stamp = ""
        if self.timestamp:
            stamp = datetime.now().strftime(self.timestamp_format)
        if not message.endswith("\n"):
            message += "\n"
        return f"{self.prefix}{stamp}{message}"

    def _write(self, entry: str) -> None:
        """Write a finished entry to the stream."""
        stream = self.stream if self.stream is not None else sys.stderr
        with self._lock:
            stream.write(entry)
            stream.flush()

    def print(self, *args: Any) -> None:
        """Write operands in the manner of fmt.Print."""
        self._write(self._format_entry(sprint(*args)))

    def printf(self, format: str, *args: Any) -> None:
        """Write format with args substituted."""
        self._write(self._format_entry(sprintf(format, *args)))

    def println(self, *args: Any) -> None:
        """Write space separated operands."""
        self._write(self._format_entry(sprintln(*args)))
