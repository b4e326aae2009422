"""Schema v3: packages and bounded-depth directory prefixes normalized.

A path is split after its fifth separator (or its last one, for shallower
paths). Most files then share a handful of directories rows such as
``usr/lib/x86_64-linux-gnu`` while deep per-package trees keep the remainder
in the leaf name.
"""

from contentsdb.utils.logging import logger

from ..key_cache import KeyCache
from ..reader import ContentsEntry, split_directory
from .base_database import BaseDatabaseManager


class DirectoryDatabase(BaseDatabaseManager):
    """packages, directories, and directory_name_package(directory_id, name, package_id)."""

    version = 3

    def __init__(self, db_path: str, **kwargs):
        super().__init__(db_path, **kwargs)
        self.package_ids = KeyCache()
        self.directory_ids = KeyCache()

    def add_entry(self, entry: ContentsEntry) -> None:
        """Register directory and package on first sight, then upsert the leaf row."""
        directory, name = split_directory(entry.path)

        directory_id = self._resolve_id(self.directory_ids, "directories", directory)
        package_id = self._resolve_id(self.package_ids, "packages", entry.package)

        logger.debug(
            "INSERT INTO directory_name_package VALUES ({}, '{}', {})",
            directory_id,
            name,
            package_id,
        )
        self._queue("directory_name_package", (directory_id, name, package_id))

    def cache_sizes(self) -> dict[str, int]:
        return {
            "packages": self.package_ids.max_id,
            "directories": self.directory_ids.max_id,
        }
