"""Standard library logging adapter."""

import logging
from typing import Any, Optional

from ..formatting import sprint, sprintf, sprintln
from ..interfaces import IPrinter

DEFAULT_LOGGER_NAME = "jot"


class LoggingAdapter(IPrinter):
    """Adapter forwarding jot output to a ``logging.Logger``.

    Timestamps and prefixes are left to the logger's handlers. A trailing
    newline from println is stripped since handlers add their own.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG
    ):
        self.logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)
        self.level = level

    def _log(self, message: str) -> None:
        """Log message at the configured level."""
        self.logger.log(self.level, message.rstrip("\n"))

    def print(self, *args: Any) -> None:
        """Log operands in the manner of fmt.Print."""
        self._log(sprint(*args))

    def printf(self, format: str, *args: Any) -> None:
        """Log format with args substituted."""
        self._log(sprintf(format, *args))

    def println(self, *args: Any) -> None:
        """Log space separated operands."""
        self._log(sprintln(*args))
