"""contentsdb utilities package."""

from .constants import (
    DEFAULT_ARCH,
    DEFAULT_CACHE_DIR,
    DEFAULT_RELEASE,
    DEFAULT_VERSION,
    JAMMY_RELEASE,
    SCHEMA_VERSIONS,
    database_name,
)
from .error_handler import handle_exceptions
from .exit_codes import ExitCodes
from .logging import Verbosity, logger, set_verbosity

__all__ = [
    "DEFAULT_ARCH",
    "DEFAULT_CACHE_DIR",
    "DEFAULT_RELEASE",
    "DEFAULT_VERSION",
    "JAMMY_RELEASE",
    "SCHEMA_VERSIONS",
    "database_name",
    "handle_exceptions",
    "ExitCodes",
    "Verbosity",
    "logger",
    "set_verbosity",
]
