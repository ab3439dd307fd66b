"""Configuration management.

jot never enables itself from the environment. Programs that want an
environment switch opt in by calling ``enable_from_env()`` at startup:

    export JOTTER_ENABLE=true
"""

import os
from typing import Mapping, Optional

from .jotter import Jotter
from .standard import standard

# Environment Configuration
ENABLE_ENV_VAR = "JOTTER_ENABLE"
ENABLE_VALUE = "true"


def env_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Check whether the environment asks for jot output."""
    if environ is None:
        environ = os.environ
    value = environ.get(ENABLE_ENV_VAR, "")
    return value.strip().lower() == ENABLE_VALUE


def enable_from_env(
    jotter: Optional[Jotter] = None,
    environ: Optional[Mapping[str, str]] = None
) -> bool:
    """Enable jotter (default: the standard one) if the env says so.

    Returns whether it was enabled. A jotter is never disabled here.
    """
    if not env_enabled(environ):
        return False

    if jotter is None:
        jotter = standard()

    jotter.enable()
    return True
