"""Schema v2: package names normalized into the packages table."""

from contentsdb.utils.logging import logger

from ..key_cache import KeyCache
from ..reader import ContentsEntry
from .base_database import BaseDatabaseManager


class PackageDatabase(BaseDatabaseManager):
    """packages(id, package) plus path_package(path, package_id)."""

    version = 2

    def __init__(self, db_path: str, **kwargs):
        super().__init__(db_path, **kwargs)
        self.package_ids = KeyCache()

    def add_entry(self, entry: ContentsEntry) -> None:
        """Register the package on first sight, then upsert the path row."""
        package_id = self._resolve_id(self.package_ids, "packages", entry.package)
        logger.debug("INSERT INTO path_package VALUES ('{}', {})", entry.path, package_id)
        self._queue("path_package", (entry.path, package_id))

    def cache_sizes(self) -> dict[str, int]:
        return {"packages": self.package_ids.max_id}
