"""contentsdb Indexer Package.

Turns the gzip-compressed Contents files of a release into a SQLite database
answering "which package owns this path?". It includes:
- reader: streaming decompression, exclusion filter, line parsing, path segmentation
- KeyCache: in-memory id allocation for normalization tables
- database: the three schema layouts (flat, packages, packages + directories)
- ImportOrchestrator: one transaction over the four pockets of a release

Data flow per line:
    read_lines -> is_excluded -> parse_line -> [split_directory] -> KeyCache -> add_entry
"""

from .database import DATABASE_VERSIONS, get_database_manager
from .exceptions import ContentsError, ContentsFileError, MalformedLineError
from .key_cache import KeyCache
from .orchestrator import ImportOrchestrator, PocketStats
from .reader import ContentsEntry, is_excluded, parse_line, read_lines, split_directory
from .runner import ImportResult, run_contents_import

__all__ = [
    'ContentsEntry',
    'ContentsError',
    'ContentsFileError',
    'DATABASE_VERSIONS',
    'ImportOrchestrator',
    'ImportResult',
    'KeyCache',
    'MalformedLineError',
    'PocketStats',
    'get_database_manager',
    'is_excluded',
    'parse_line',
    'read_lines',
    'run_contents_import',
    'split_directory',
]
