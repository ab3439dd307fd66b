"""Simple logger for developers making notes during development.

Similar in use to a ``debug`` log level: jot lines are annotations that only
appear at runtime once output is enabled.

    import jot

    jot.enable()
    jot.print("This is printed")
    jot.disable()
    jot.print("This is not")

The package level functions drive a standard ``Jotter`` writing to stderr.
Independent ``Jotter`` instances can wrap any printer implementing
``print``, ``printf`` and ``println``.
"""

from .interfaces import IPrinter
from .jotter import Jotter
from .standard import (
    standard,
    is_enabled,
    set_printer,
    enable,
    disable,
    print,
    printf,
    println,
)
from .config import env_enabled, enable_from_env
from .adapters import (
    StreamAdapter,
    FileAdapter,
    LoggingAdapter,
    HttpCollectorAdapter,
    MemoryAdapter,
)

__version__ = "1.0.0"

__all__ = [
    'IPrinter',
    'Jotter',
    'standard',
    'is_enabled',
    'set_printer',
    'enable',
    'disable',
    'print',
    'printf',
    'println',
    'env_enabled',
    'enable_from_env',
    'StreamAdapter',
    'FileAdapter',
    'LoggingAdapter',
    'HttpCollectorAdapter',
    'MemoryAdapter',
]
