"""contentsdb - Contents index files to SQLite path/package lookup databases."""

__version__ = "0.1.0"
