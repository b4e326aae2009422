"""Import workflow runner."""

import time
from dataclasses import dataclass, field
from pathlib import Path

from contentsdb.utils.constants import DEFAULT_ARCH, DEFAULT_CACHE_DIR, database_name
from contentsdb.utils.logging import logger

from .config import DEFAULT_BATCH_SIZE
from .database import get_database_manager
from .orchestrator import ImportOrchestrator, PocketStats


@dataclass
class ImportResult:
    """Outcome of a successful import run."""

    db_path: Path
    release: str
    version: int
    pockets: list[PocketStats] = field(default_factory=list)
    packages: int | None = None
    directories: int | None = None
    row_counts: dict[str, int] = field(default_factory=dict)
    elapsed: float = 0.0

    @property
    def lines(self) -> int:
        return sum(p.lines for p in self.pockets)

    @property
    def processed(self) -> int:
        return sum(p.processed for p in self.pockets)


def run_contents_import(
    release: str,
    version: int,
    cache_dir: str | Path = DEFAULT_CACHE_DIR,
    db_path: str | Path | None = None,
    arch: str = DEFAULT_ARCH,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> ImportResult:
    """Build the database of one release from its cached Contents files.

    The caller is responsible for removing a stale database first. On any
    failure the partially written database file is deleted and the error
    propagates, so a failed run never leaves a file behind.
    """
    start_time = time.time()
    db_file = Path(db_path) if db_path is not None else Path(database_name(release, version))

    # A file we did not create is left alone: create_schema() refuses it
    existed = db_file.exists()
    db_manager = get_database_manager(version, str(db_file), batch_size=batch_size)
    orchestrator = ImportOrchestrator(db_manager, cache_dir, release, arch=arch)

    try:
        pockets = orchestrator.index()
    except BaseException:
        db_manager.close()
        if not existed:
            db_file.unlink(missing_ok=True)
        raise

    sizes = db_manager.cache_sizes()
    row_counts = db_manager.row_counts()
    db_manager.close()

    if "packages" in sizes:
        logger.info(f"Entries in packages table: {sizes['packages']}")
    if "directories" in sizes:
        logger.info(f"Entries in directories table: {sizes['directories']}")

    return ImportResult(
        db_path=db_file,
        release=release,
        version=version,
        pockets=pockets,
        packages=sizes.get("packages"),
        directories=sizes.get("directories"),
        row_counts=row_counts,
        elapsed=time.time() - start_time,
    )
