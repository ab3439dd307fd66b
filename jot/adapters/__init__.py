"""Printer adapters for jot."""

from .stream_adapter import StreamAdapter, DEFAULT_TIMESTAMP_FORMAT
from .file_adapter import FileAdapter
from .logging_adapter import LoggingAdapter
from .http_collector_adapter import HttpCollectorAdapter
from .memory_adapter import MemoryAdapter, Entry

__all__ = [
    'StreamAdapter',
    'DEFAULT_TIMESTAMP_FORMAT',
    'FileAdapter',
    'LoggingAdapter',
    'HttpCollectorAdapter',
    'MemoryAdapter',
    'Entry',
]
