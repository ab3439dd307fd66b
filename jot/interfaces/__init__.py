"""Interface definitions for jot printers."""

from .i_printer import IPrinter

__all__ = [
    'IPrinter',
]
