"""Declarative table definitions for the three Contents database layouts."""

from .contents_schema import (
    DIRECTORY_TABLES,
    FLAT_TABLES,
    PACKAGE_TABLES,
    SCHEMA_TABLES,
)
from .utils import Column, ForeignKey, TableSchema


def get_schema_tables(version: int) -> dict[str, TableSchema]:
    """Tables of a schema version, in creation order."""
    if version not in SCHEMA_TABLES:
        raise ValueError(
            f"Unknown schema version: {version}. Must be one of {sorted(SCHEMA_TABLES)}."
        )
    return SCHEMA_TABLES[version]


def validate_foreign_keys(tables: dict[str, TableSchema]) -> dict[str, list[str]]:
    """Check every foreign key of a layout against the layout itself."""
    problems = {}
    for name, schema in tables.items():
        errors = []
        for fk in schema.foreign_keys:
            errors.extend(fk.validate(name, tables))
        if errors:
            problems[name] = errors
    return problems


for _version, _tables in SCHEMA_TABLES.items():
    assert not validate_foreign_keys(_tables), (
        f"Schema contract violation in v{_version}: {validate_foreign_keys(_tables)}"
    )


__all__ = [
    "Column",
    "ForeignKey",
    "TableSchema",
    "FLAT_TABLES",
    "PACKAGE_TABLES",
    "DIRECTORY_TABLES",
    "SCHEMA_TABLES",
    "get_schema_tables",
    "validate_foreign_keys",
]
