"""Centralized constants for the contentsdb utils package.

Single source of truth for defaults and environment variable names used by
the command line and the import runner.
"""

# ============================================================================
# COMMAND LINE DEFAULTS
# ============================================================================

# Directory holding the downloaded <release><pocket>-Contents-<arch>.gz files
DEFAULT_CACHE_DIR = "contents_cache"

DEFAULT_RELEASE = "noble"
JAMMY_RELEASE = "jammy"

DEFAULT_ARCH = "amd64"

# Schema variant: 1 = flat, 2 = packages normalized, 3 = packages + directories
DEFAULT_VERSION = 1
SCHEMA_VERSIONS = (1, 2, 3)

# ============================================================================
# OUTPUT
# ============================================================================

DB_NAME_TEMPLATE = "contents-{release}_v{version}.sqlite3"

# ============================================================================
# ENVIRONMENT VARIABLES
# ============================================================================

ENV_LOG_LEVEL = "CONTENTSDB_LOG_LEVEL"
ENV_LOG_JSON = "CONTENTSDB_LOG_JSON"
ENV_LOG_FILE = "CONTENTSDB_LOG_FILE"
ENV_ERROR_LOG = "CONTENTSDB_ERROR_LOG"
ENV_DB_BATCH_SIZE = "CONTENTSDB_DB_BATCH_SIZE"


def database_name(release: str, version: int) -> str:
    """File name of the database for a release and schema version."""
    return DB_NAME_TEMPLATE.format(release=release, version=version)
