"""Schema v1: one row per path holding the package name itself."""

from contentsdb.utils.logging import logger

from ..reader import ContentsEntry
from .base_database import BaseDatabaseManager


class FlatDatabase(BaseDatabaseManager):
    """path_package(path, package) with the package name stored inline."""

    version = 1

    def add_entry(self, entry: ContentsEntry) -> None:
        """Upsert (path, package); a later pocket replaces the package."""
        logger.debug("INSERT INTO path_package VALUES ('{}', '{}')", entry.path, entry.package)
        self._queue("path_package", (entry.path, entry.package))
