"""Shared fixtures."""

import pytest

import jot


@pytest.fixture(autouse=True)
def restore_standard_jotter():
    """Put the standard Jotter back the way each test found it."""
    jotter = jot.standard()
    printer = jotter.printer
    enabled = jotter.enabled
    yield
    jotter.set_printer(printer)
    if enabled:
        jotter.enable()
    else:
        jotter.disable()
