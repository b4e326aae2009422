"""Pytest configuration and fixtures."""
import gzip
import sqlite3

import pytest

from contentsdb.indexer.config import POCKETS
from contentsdb.utils.logging import logger


def _write_contents(path, lines):
    with gzip.open(path, "wt", encoding="utf-8", newline="") as f:
        f.write("".join(f"{line}\n" for line in lines))
    return path


@pytest.fixture
def contents_cache(tmp_path):
    """Cache directory holding an empty Contents file for every pocket of 'noble'."""
    cache_dir = tmp_path / "contents_cache"
    cache_dir.mkdir()
    for pocket in POCKETS:
        _write_contents(cache_dir / f"noble{pocket}-Contents-amd64.gz", [])
    return cache_dir


@pytest.fixture
def write_contents(contents_cache):
    """Write the Contents file of one pocket.

    Usage: write_contents("-updates", ["usr/bin/foo admin/foo"], release="noble")
    """

    def _write(pocket, lines, release="noble", arch="amd64"):
        return _write_contents(contents_cache / f"{release}{pocket}-Contents-{arch}.gz", lines)

    return _write


@pytest.fixture
def log_messages():
    """Collect every loguru message (DEBUG and up) emitted during the test."""
    messages = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]),
        level="DEBUG",
        format="{message}",
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def fetch_rows():
    """Read all rows of a table from a finished database, ordered for comparison."""

    def _fetch(db_path, table):
        conn = sqlite3.connect(db_path)
        try:
            return sorted(conn.execute(f"SELECT * FROM {table}").fetchall())
        finally:
            conn.close()

    return _fetch
