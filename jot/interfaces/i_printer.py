"""Printer interface (adapter pattern)."""

from typing import Any, Protocol


class IPrinter(Protocol):
    """Interface for jot output, in the manner of Go's fmt functions."""

    def print(self, *args: Any) -> None:
        """Write operands, spaced where neither side is a string."""
        ...

    def printf(self, format: str, *args: Any) -> None:
        """Write format with args substituted."""
        ...

    def println(self, *args: Any) -> None:
        """Write space separated operands and a newline."""
        ...
