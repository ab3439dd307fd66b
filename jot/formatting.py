"""Operand rendering shared by the printer adapters."""

from typing import Any, Mapping

# Marker appended when format and args don't fit, like fmt's %!verb(...)
BAD_FORMAT_MARKER = "%!(BADFORMAT"


def sprint(*args: Any) -> str:
    """Render args like fmt.Sprint.

    A space is added between two operands only when neither is a string.
    """
    parts = []
    prev_is_str = True
    for idx, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if idx > 0 and not is_str and not prev_is_str:
            parts.append(" ")
        parts.append(str(arg))
        prev_is_str = is_str
    return "".join(parts)


def sprintf(format: str, *args: Any) -> str:
    """Render args into a %-style format string.

    A single mapping argument feeds ``%(name)s`` verbs. Like fmt.Sprintf
    this never raises on a bad format: the format is returned as written,
    followed by a marker holding the args.
    """
    values: Any = args
    if len(args) == 1 and isinstance(args[0], Mapping):
        values = args[0]

    try:
        return format % values
    except (TypeError, ValueError, KeyError):
        return f"{format} {BAD_FORMAT_MARKER} {args!r})"


def sprintln(*args: Any) -> str:
    """Render args separated by single spaces, newline terminated."""
    return " ".join(str(arg) for arg in args) + "\n"
