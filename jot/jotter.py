"""Jotter: a printer gated by an enabled flag."""

import threading
from typing import Any, Optional

from .adapters import StreamAdapter
from .interfaces import IPrinter

PRINTER_METHODS = ("print", "printf", "println")


def default_printer() -> IPrinter:
    """Printer used when none is supplied: stderr with timestamps."""
    return StreamAdapter()


class Jotter:
    """Forward print calls to a printer only while enabled.

    Jotters start disabled. The flag and printer are only changed through
    ``enable``/``disable`` and ``set_printer``; every forwarding call reads
    both under one lock, then calls the printer outside it. Printer errors
    propagate to the caller unchanged.
    """

    def __init__(
        self,
        printer: Optional[IPrinter] = None,
        enabled: bool = False
    ):
        if printer is None:
            printer = default_printer()
        _check_printer(printer)

        self._lock = threading.Lock()
        self._enabled = bool(enabled)
        self._printer = printer

    @property
    def enabled(self) -> bool:
        """Whether calls are currently forwarded."""
        with self._lock:
            return self._enabled

    @property
    def printer(self) -> IPrinter:
        """The printer calls are forwarded to."""
        with self._lock:
            return self._printer

    def enable(self) -> None:
        """Enable output."""
        with self._lock:
            self._enabled = True

    def disable(self) -> None:
        """Disable output."""
        with self._lock:
            self._enabled = False

    def set_printer(self, printer: IPrinter) -> None:
        """Replace the printer. The enabled flag is left as is."""
        _check_printer(printer)
        with self._lock:
            self._printer = printer

    def _active_printer(self) -> Optional[IPrinter]:
        """Printer to use for one call, or None when disabled."""
        with self._lock:
            return self._printer if self._enabled else None

    def print(self, *args: Any) -> None:
        """Print via the printer, in the manner of fmt.Print."""
        printer = self._active_printer()
        if printer is None:
            return
        printer.print(*args)

    def printf(self, format: str, *args: Any) -> None:
        """Printf via the printer, in the manner of fmt.Printf."""
        printer = self._active_printer()
        if printer is None:
            return
        printer.printf(format, *args)

    def println(self, *args: Any) -> None:
        """Println via the printer, in the manner of fmt.Println."""
        printer = self._active_printer()
        if printer is None:
            return
        printer.println(*args)

    def __repr__(self) -> str:
        state = "enabled" if self.enabled else "disabled"
        return f"<Jotter {state} printer={self.printer!r}>"


def _check_printer(printer: Any) -> None:
    """Reject missing or non-conforming printers."""
    if printer is None:
        raise ValueError("printer required")
    missing = [
        name for name in PRINTER_METHODS
        if not callable(getattr(printer, name, None))
    ]
    if missing:
        raise TypeError(
            f"printer missing {', '.join(missing)}: "
            f"got {type(printer).__name__}"
        )
