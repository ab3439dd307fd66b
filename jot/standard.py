"""The standard Jotter and package level functions delegating to it.

The standard Jotter is created once, at import, disabled and writing to
stderr with timestamps. It is only reachable through the functions here.
"""

from typing import Any

from .interfaces import IPrinter
from .jotter import Jotter

_jotter = Jotter()


def standard() -> Jotter:
    """Return the standard Jotter."""
    return _jotter


def is_enabled() -> bool:
    """Report whether the standard Jotter is enabled."""
    return _jotter.enabled


def set_printer(printer: IPrinter) -> None:
    """Change the printer used by the standard Jotter."""
    _jotter.set_printer(printer)


def enable() -> None:
    """Enable output from the standard Jotter."""
    _jotter.enable()


def disable() -> None:
    """Disable output from the standard Jotter."""
    _jotter.disable()


def print(*args: Any) -> None:
    """Print via the standard Jotter.

    Arguments are handled in the manner of fmt.Print.
    """
    _jotter.print(*args)


def printf(format: str, *args: Any) -> None:
    """Printf via the standard Jotter.

    Arguments are handled in the manner of fmt.Printf.
    """
    _jotter.printf(format, *args)


def println(*args: Any) -> None:
    """Println via the standard Jotter.

    Arguments are handled in the manner of fmt.Println.
    """
    _jotter.println(*args)
