"""Database operations for the indexer.

ARCHITECTURE: Schema-Driven Database Layer
- schemas/contents_schema.py is the Single Source of Truth for table definitions
- BaseDatabaseManager consumes the per-version table registry to generate
  CREATE TABLE and INSERT/upsert statements
- Exactly three layouts exist, one per schema version:

  1. FlatDatabase: path_package(path, package)
  2. PackageDatabase: packages + path_package(path, package_id)
  3. DirectoryDatabase: packages + directories +
     directory_name_package(directory_id, name, package_id)

The database is generated fresh every run. NO migrations, NO IF NOT EXISTS.
"""

from .base_database import BaseDatabaseManager
from .directory_database import DirectoryDatabase
from .flat_database import FlatDatabase
from .package_database import PackageDatabase

DATABASE_VERSIONS: dict[int, type[BaseDatabaseManager]] = {
    FlatDatabase.version: FlatDatabase,
    PackageDatabase.version: PackageDatabase,
    DirectoryDatabase.version: DirectoryDatabase,
}


def get_database_manager(version: int, db_path: str, **kwargs) -> BaseDatabaseManager:
    """Open the database manager for a schema version."""
    try:
        manager_cls = DATABASE_VERSIONS[version]
    except KeyError:
        raise ValueError(
            f"Unknown schema version: {version}. Must be one of {sorted(DATABASE_VERSIONS)}."
        ) from None
    return manager_cls(db_path, **kwargs)


__all__ = [
    'BaseDatabaseManager',
    'FlatDatabase',
    'PackageDatabase',
    'DirectoryDatabase',
    'DATABASE_VERSIONS',
    'get_database_manager',
]
