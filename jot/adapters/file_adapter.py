"""File printer adapter."""

from pathlib import Path
from typing import Union

from .stream_adapter import DEFAULT_TIMESTAMP_FORMAT, StreamAdapter


class FileAdapter(StreamAdapter):
    """Adapter appending jot entries to a file."""

    def __init__(
        self,
        path: Union[str, Path],
        prefix: str = "",
        timestamp: bool = True,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    ):
        # Validate input (early return)
        if not path:
            raise ValueError("path required")

        super().__init__(
            prefix=prefix,
            timestamp=timestamp,
            timestamp_format=timestamp_format
        )
        self.path = Path(path)

    def _write(self, entry: str) -> None:
        """Append entry, creating parent directories on demand."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self._lock, self.path.open("a", encoding="utf-8") as handle:
            handle.write(entry)
