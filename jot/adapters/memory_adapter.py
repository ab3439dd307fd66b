"""In-memory printer adapter."""

from dataclasses import dataclass
from typing import Any

from ..formatting import sprint, sprintf, sprintln
from ..interfaces import IPrinter


@dataclass
class Entry:
    """A recorded printer call."""
    method: str
    args: tuple
    text: str


class MemoryAdapter(IPrinter):
    """Adapter recording every call in order, without output."""

    def __init__(self):
        """Start with no entries."""
        self.entries: list[Entry] = []

    def print(self, *args: Any) -> None:
        """Record a print call."""
        self.entries.append(Entry("print", args, sprint(*args)))

    def printf(self, format: str, *args: Any) -> None:
        """Record a printf call."""
        self.entries.append(
            Entry("printf", (format,) + args, sprintf(format, *args))
        )

    def println(self, *args: Any) -> None:
        """Record a println call."""
        self.entries.append(Entry("println", args, sprintln(*args)))

    def getvalue(self) -> str:
        """Return all recorded output joined together."""
        return "".join(entry.text for entry in self.entries)

    def clear(self) -> None:
        """Forget all recorded entries."""
        self.entries.clear()
