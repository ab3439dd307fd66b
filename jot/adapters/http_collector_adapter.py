"""Network collector adapter (HTTP JSON API)."""

import sys
from datetime import datetime, timezone
from typing import Any, Optional

import requests

from ..formatting import sprint, sprintf, sprintln
from ..interfaces import IPrinter


class HttpCollectorAdapter(IPrinter):
    """Adapter posting jot entries to an HTTP log collector."""

    def __init__(
        self,
        url: str,
        timeout: float = 10,
        source: Optional[str] = None
    ):
        # Validate input (early return)
        if not url:
            print("ERROR: collector url empty", file=sys.stderr)
            raise ValueError("url required")

        self.url = url.rstrip('/')
        self.timeout = timeout
        self.source = source

    def _payload(self, message: str) -> dict:
        """Build JSON body for one entry."""
        return {
            "message": message.rstrip("\n"),
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "source": self.source,
        }

    def _send(self, message: str) -> None:
        """Post one entry; non-2xx responses raise ValueError."""
        resp = requests.post(
            self.url,
            json=self._payload(message),
            timeout=self.timeout
        )

        if not 200 <= resp.status_code < 300:
            print(
                f"ERROR: collector post failed: {resp.status_code}",
                file=sys.stderr
            )
            raise ValueError(f"post failed: {resp.status_code}")

    def print(self, *args: Any) -> None:
        """Send operands rendered like fmt.Print."""
        self._send(sprint(*args))

    def printf(self, format: str, *args: Any) -> None:
        """Send format with args substituted."""
        self._send(sprintf(format, *args))

    def println(self, *args: Any) -> None:
        """Send space separated operands."""
        self._send(sprintln(*args))
