"""Schema utility classes - Foundation for all schema definitions."""

import sqlite3
from dataclasses import dataclass, field


@dataclass
class Column:
    """Represents a database column with type and constraints."""

    name: str
    type: str
    nullable: bool = True
    primary_key: bool = False
    unique: bool = False

    def to_sql(self) -> str:
        """Generate SQL column definition."""
        parts = [self.name, self.type]
        if self.primary_key:
            parts.append("PRIMARY KEY")
        if not self.nullable:
            parts.append("NOT NULL")
        if self.unique:
            parts.append("UNIQUE")
        return " ".join(parts)


@dataclass
class ForeignKey:
    """Foreign key relationship between a table and a normalization table."""

    local_columns: list[str]
    foreign_table: str
    foreign_columns: list[str]

    def to_sql(self) -> str:
        """Generate the FOREIGN KEY table constraint."""
        local = ", ".join(self.local_columns)
        foreign = ", ".join(self.foreign_columns)
        return f"FOREIGN KEY ({local}) REFERENCES {self.foreign_table}({foreign})"

    def validate(self, local_table: str, all_tables: dict[str, "TableSchema"]) -> list[str]:
        """Validate foreign key definition against schema."""
        errors = []

        if self.foreign_table not in all_tables:
            errors.append(f"Foreign table '{self.foreign_table}' does not exist")
            return errors

        local_schema = all_tables[local_table]
        foreign_schema = all_tables[self.foreign_table]

        local_col_names = set(local_schema.column_names())
        for col in self.local_columns:
            if col not in local_col_names:
                errors.append(f"Local column '{col}' not found in table '{local_table}'")

        foreign_col_names = set(foreign_schema.column_names())
        for col in self.foreign_columns:
            if col not in foreign_col_names:
                errors.append(f"Foreign column '{col}' not found in table '{self.foreign_table}'")

        if len(self.local_columns) != len(self.foreign_columns):
            errors.append(
                f"Column count mismatch: {len(self.local_columns)} local vs "
                f"{len(self.foreign_columns)} foreign"
            )

        return errors


@dataclass
class TableSchema:
    """Represents a complete table schema.

    ``conflict_columns`` names the key a re-inserted row collides on. Tables
    with conflict columns are written as upserts that overwrite every other
    column; tables without them are written with a plain INSERT.
    """

    name: str
    columns: list[Column]
    primary_key: list[str] | None = None
    foreign_keys: list[ForeignKey] = field(default_factory=list)
    conflict_columns: list[str] = field(default_factory=list)

    def column_names(self) -> list[str]:
        """Get list of column names in definition order."""
        return [col.name for col in self.columns]

    def create_table_sql(self) -> str:
        """Generate CREATE TABLE statement.

        No IF NOT EXISTS: every import starts from a fresh database file and
        an existing table is an error.
        """
        col_defs = [col.to_sql() for col in self.columns]

        if self.primary_key:
            pk_cols = ", ".join(self.primary_key)
            col_defs.append(f"PRIMARY KEY ({pk_cols})")

        for fk in self.foreign_keys:
            col_defs.append(fk.to_sql())

        return f"CREATE TABLE {self.name} (\n    " + ",\n    ".join(col_defs) + "\n)"

    def insert_sql(self) -> str:
        """Generate the INSERT (or upsert) statement for a full row."""
        columns = self.column_names()
        placeholders = ", ".join("?" for _ in columns)
        query = f"INSERT INTO {self.name} ({', '.join(columns)}) VALUES ({placeholders})"

        if self.conflict_columns:
            updates = ", ".join(
                f"{col}=excluded.{col}" for col in columns if col not in self.conflict_columns
            )
            query += f" ON CONFLICT({', '.join(self.conflict_columns)}) DO UPDATE SET {updates}"

        return query

    def validate_against_db(self, cursor: sqlite3.Cursor) -> tuple[bool, list[str]]:
        """Validate that actual database table matches this schema."""
        errors = []

        cursor.execute("SELECT name FROM sqlite_master WHERE type='table' AND name=?", (self.name,))
        if not cursor.fetchone():
            errors.append(f"Table {self.name} does not exist")
            return False, errors

        cursor.execute(f"PRAGMA table_info({self.name})")
        actual_cols = {row[1]: row[2] for row in cursor.fetchall()}

        for col in self.columns:
            if col.name not in actual_cols:
                errors.append(f"Column {self.name}.{col.name} missing in database")
            elif actual_cols[col.name].upper() != col.type.upper():
                errors.append(
                    f"Column {self.name}.{col.name} type mismatch: "
                    f"expected {col.type}, got {actual_cols[col.name]}"
                )

        return len(errors) == 0, errors
