"""
Contents database schema definitions.

Three mutually exclusive layouts, selected by schema version:

- v1 (flat): path_package maps every path to its package name.
- v2 (packages normalized): package names move to a packages table and
  path_package references them by id.
- v3 (packages + directories normalized): paths are split into a bounded
  directory prefix (directories table) and a leaf name; directory_name_package
  maps (directory_id, name) to a package id.

Design Philosophy:
- Normalization tables (packages, directories) are append-only within a run;
  their ids come from the in-memory KeyCache, not from SQLite.
- Leaf tables are upserted: a later pocket overwrites an earlier one.
"""

from .utils import Column, ForeignKey, TableSchema


# ============================================================================
# NORMALIZATION TABLES
# ============================================================================

PACKAGES = TableSchema(
    name="packages",
    columns=[
        Column("id", "INTEGER", nullable=False, primary_key=True),
        Column("package", "TEXT", nullable=False, unique=True),
    ],
)

DIRECTORIES = TableSchema(
    name="directories",
    columns=[
        Column("id", "INTEGER", nullable=False, primary_key=True),
        Column("directory", "TEXT", nullable=False, unique=True),
    ],
)

# ============================================================================
# LEAF TABLES
# ============================================================================

PATH_PACKAGE_FLAT = TableSchema(
    name="path_package",
    columns=[
        Column("path", "TEXT", nullable=False, primary_key=True),
        Column("package", "TEXT", nullable=False),
    ],
    conflict_columns=["path"],
)

PATH_PACKAGE_ID = TableSchema(
    name="path_package",
    columns=[
        Column("path", "TEXT", nullable=False, primary_key=True),
        Column("package_id", "INTEGER", nullable=False),
    ],
    foreign_keys=[
        ForeignKey(
            local_columns=["package_id"],
            foreign_table="packages",
            foreign_columns=["id"],
        ),
    ],
    conflict_columns=["path"],
)

DIRECTORY_NAME_PACKAGE = TableSchema(
    name="directory_name_package",
    columns=[
        Column("directory_id", "INTEGER", nullable=False),
        Column("name", "TEXT", nullable=False),
        Column("package_id", "INTEGER", nullable=False),
    ],
    primary_key=["directory_id", "name"],
    foreign_keys=[
        ForeignKey(
            local_columns=["directory_id"],
            foreign_table="directories",
            foreign_columns=["id"],
        ),
        ForeignKey(
            local_columns=["package_id"],
            foreign_table="packages",
            foreign_columns=["id"],
        ),
    ],
    conflict_columns=["directory_id", "name"],
)

# ============================================================================
# SCHEMA REGISTRY
# ============================================================================

# Tables are listed parents first: this is both creation and flush order.
FLAT_TABLES: dict[str, TableSchema] = {
    "path_package": PATH_PACKAGE_FLAT,
}

PACKAGE_TABLES: dict[str, TableSchema] = {
    "packages": PACKAGES,
    "path_package": PATH_PACKAGE_ID,
}

DIRECTORY_TABLES: dict[str, TableSchema] = {
    "packages": PACKAGES,
    "directories": DIRECTORIES,
    "directory_name_package": DIRECTORY_NAME_PACKAGE,
}

SCHEMA_TABLES: dict[int, dict[str, TableSchema]] = {
    1: FLAT_TABLES,
    2: PACKAGE_TABLES,
    3: DIRECTORY_TABLES,
}
