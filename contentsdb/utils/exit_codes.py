"""Centralized exit codes for the contentsdb CLI."""


class ExitCodes:
    """Standard exit codes for the contentsdb CLI."""

    SUCCESS = 0

    IMPORT_FAILED = 1

    # Matches click.UsageError.exit_code
    USAGE_ERROR = 2

    @classmethod
    def get_description(cls, code: int) -> str:
        """Get human-readable description for an exit code."""
        descriptions = {
            cls.SUCCESS: "Success - database created",
            cls.IMPORT_FAILED: "Import failed - no database was written",
            cls.USAGE_ERROR: "Invalid command line arguments",
        }
        return descriptions.get(code, f"Unknown exit code: {code}")
