"""Import orchestrator - drives one release through one database layout."""

from dataclasses import dataclass
from pathlib import Path

from contentsdb.utils.constants import DEFAULT_ARCH
from contentsdb.utils.logging import logger

from .config import CONTENTS_FILE_TEMPLATE, POCKETS
from .database import BaseDatabaseManager
from .reader import is_excluded, parse_line, read_lines


@dataclass
class PocketStats:
    """Line counts for one Contents file."""

    filename: str
    lines: int = 0
    processed: int = 0

    @property
    def percentage(self) -> float:
        """Share of lines that made it into the database."""
        if not self.lines:
            return 0.0
        return 100 * self.processed / self.lines


class ImportOrchestrator:
    """Load every pocket of a release into one database in one transaction.

    Pockets are processed in POCKETS order; a later pocket overwrites the
    rows an earlier one wrote for the same path. Nothing is committed unless
    all pockets load without error.
    """

    def __init__(
        self,
        db_manager: BaseDatabaseManager,
        cache_dir: str | Path,
        release: str,
        arch: str = DEFAULT_ARCH,
    ):
        self.db_manager = db_manager
        self.cache_dir = Path(cache_dir)
        self.release = release
        self.arch = arch

    def contents_files(self) -> list[Path]:
        """Expected Contents file of every pocket, in processing order."""
        return [
            self.cache_dir / CONTENTS_FILE_TEMPLATE.format(
                release=self.release, pocket=pocket, arch=self.arch
            )
            for pocket in POCKETS
        ]

    def index(self) -> list[PocketStats]:
        """Create the schema and import all pockets. Returns per-file counts."""
        self.db_manager.create_schema()
        self.db_manager.begin_transaction()

        stats = []
        try:
            for contents_file in self.contents_files():
                stats.append(self.load_contents_file(contents_file))
            self.db_manager.commit()
        except Exception:
            self.db_manager.rollback()
            raise

        return stats

    def load_contents_file(self, contents_file: Path) -> PocketStats:
        """Decode, filter, parse and queue every line of one Contents file."""
        stats = PocketStats(contents_file.name)
        logger.debug(f"Reading {contents_file}")

        for line in read_lines(contents_file):
            stats.lines += 1
            if is_excluded(line):
                continue
            self.db_manager.add_entry(parse_line(line))
            stats.processed += 1

        self.db_manager.flush_batch()

        logger.info(
            f"Added paths to database: {stats.processed}/{stats.lines} "
            f"({stats.percentage:.1f} %)"
        )
        return stats
