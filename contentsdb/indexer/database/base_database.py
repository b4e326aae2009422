"""Base database manager with core infrastructure."""

import sqlite3
from abc import ABC, abstractmethod
from collections import defaultdict

from contentsdb.utils.logging import logger

from ..config import DEFAULT_BATCH_SIZE, MAX_BATCH_SIZE
from ..key_cache import KeyCache
from ..reader import ContentsEntry
from ..schemas import TableSchema, get_schema_tables


class BaseDatabaseManager(ABC):
    """Connection, transaction, schema and batching shared by all layouts.

    Subclasses set ``version`` and implement add_entry(). Rows are queued per
    table and written with executemany() in table order, so normalization
    rows always reach SQLite before the rows referencing them.
    """

    version: int = 0

    def __init__(self, db_path: str, batch_size: int = DEFAULT_BATCH_SIZE):
        """Initialize the database manager."""
        self.db_path = str(db_path)
        self.tables: dict[str, TableSchema] = get_schema_tables(self.version)

        self.conn = sqlite3.connect(self.db_path, timeout=60)
        self.conn.execute("PRAGMA synchronous=NORMAL")
        self.conn.execute("PRAGMA foreign_keys = ON")

        if batch_size <= 0:
            self.batch_size = DEFAULT_BATCH_SIZE
        elif batch_size > MAX_BATCH_SIZE:
            self.batch_size = MAX_BATCH_SIZE
        else:
            self.batch_size = batch_size

        self.generic_batches: dict[str, list[tuple]] = defaultdict(list)
        self._insert_sql = {name: schema.insert_sql() for name, schema in self.tables.items()}

    def begin_transaction(self) -> None:
        """Start a new transaction."""
        self.conn.execute("BEGIN IMMEDIATE")

    def commit(self) -> None:
        """Flush pending rows and commit the current transaction."""
        self.flush_batch()
        try:
            self.conn.commit()
        except sqlite3.Error as e:
            self.conn.rollback()
            raise RuntimeError(f"Failed to commit database changes: {e}") from e

    def rollback(self) -> None:
        """Rollback the current transaction and drop queued rows."""
        self.generic_batches.clear()
        self.conn.rollback()

    def close(self) -> None:
        """Close the database connection."""
        self.conn.close()

    def create_schema(self) -> None:
        """Create the layout's tables. Fails if any of them already exists."""
        cursor = self.conn.cursor()

        for table_schema in self.tables.values():
            cursor.execute(table_schema.create_table_sql())

        self.conn.commit()

    def validate_schema(self) -> bool:
        """Validate database schema matches expected definitions."""
        cursor = self.conn.cursor()
        valid = True

        for table_schema in self.tables.values():
            ok, errors = table_schema.validate_against_db(cursor)
            for error in errors:
                logger.warning(f"[SCHEMA] {error}")
            valid = valid and ok

        return valid

    @abstractmethod
    def add_entry(self, entry: ContentsEntry) -> None:
        """Queue the rows for one Contents entry."""

    def cache_sizes(self) -> dict[str, int]:
        """Number of ids issued per normalization table."""
        return {}

    # ========================================================
    # ROW QUEUEING
    # ========================================================

    def _queue(self, table_name: str, row: tuple) -> None:
        """Append a row to its table batch, flushing when the batch is full."""
        batch = self.generic_batches[table_name]
        batch.append(row)
        if len(batch) >= self.batch_size:
            self.flush_batch()

    def _resolve_id(self, cache: KeyCache, table_name: str, key: str) -> int:
        """Id of a normalization key; a new key gets its row queued once."""
        key_id = cache.lookup(key)
        if key_id is None:
            key_id = cache.allocate(key)
            logger.debug("INSERT INTO {} VALUES ({}, '{}')", table_name, key_id, key)
            self._queue(table_name, (key_id, key))
        return key_id

    # ========================================================
    # FLUSHING
    # ========================================================

    def flush_generic_batch(self, table_name: str) -> None:
        """Flush a single table's batch using the schema-driven statement."""
        batch = self.generic_batches.get(table_name, [])
        if not batch:
            return

        query = self._insert_sql[table_name]
        cursor = self.conn.cursor()
        try:
            cursor.executemany(query, batch)
        except sqlite3.IntegrityError as e:
            logger.error(
                "IntegrityError in table '{}': {} (query: {}, batch size: {}, first rows: {})",
                table_name,
                e,
                query,
                len(batch),
                batch[:3],
            )
            raise

        self.generic_batches[table_name] = []

    def flush_batch(self) -> None:
        """Execute all pending batch inserts, parent tables first."""
        for table_name in self.tables:
            self.flush_generic_batch(table_name)

    # ========================================================
    # REPORTING
    # ========================================================

    def row_counts(self) -> dict[str, int]:
        """Number of rows per table of this layout."""
        cursor = self.conn.cursor()
        counts = {}
        for table_name in self.tables:
            cursor.execute(f"SELECT COUNT(*) FROM {table_name}")
            counts[table_name] = cursor.fetchone()[0]
        return counts
