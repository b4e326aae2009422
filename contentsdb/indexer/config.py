"""Indexer configuration - constants and patterns.

CRITICAL: This file should contain ONLY configuration constants.
Parsing logic lives in reader.py.
"""


import os
import re

from contentsdb.utils.constants import ENV_DB_BATCH_SIZE

# =============================================================================
# PERFORMANCE CONFIGURATION
# =============================================================================

def _get_batch_size(env_var: str, default: int, max_value: int) -> int:
    """Get batch size from environment or use default."""
    try:
        value = int(os.environ.get(env_var, default))
        return min(value, max_value)
    except (ValueError, TypeError):
        return default


# Rows queued per table before an executemany() flush
DEFAULT_BATCH_SIZE = _get_batch_size(ENV_DB_BATCH_SIZE, 5000, 50000)
MAX_BATCH_SIZE = 50000  # Hard cap for safety


# =============================================================================
# CONTENTS FILES
# =============================================================================

# Processing order. Later pockets override earlier ones for the same path.
POCKETS: tuple[str, ...] = ("-proposed", "", "-security", "-updates")

CONTENTS_FILE_TEMPLATE = "{release}{pocket}-Contents-{arch}.gz"


# =============================================================================
# PATH FILTERING
# =============================================================================

# Lines that are dropped before parsing:
#   - ":" prefixed metadata records
#   - boot/, var/
#   - usr/include/, usr/src/, usr/<anything>/include/
#   - usr/share/{doc,gocode,help,icons,locale,man,texlive}/
PATH_EXCLUDE_PATTERN = re.compile(
    r"^(?::"
    r"|(?:boot|var"
    r"|usr/(?:include|src|[^/]+/include"
    r"|share/(?:doc|gocode|help|icons|locale|man|texlive)))/)"
)


# =============================================================================
# DIRECTORY NORMALIZATION (schema v3)
# =============================================================================

# Number of leading path separators kept in the directories table
DIRECTORY_DEPTH = 5
