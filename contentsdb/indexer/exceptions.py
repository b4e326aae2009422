"""Custom exceptions for the indexer module.

Every one of these aborts the whole import run. There is no line-level
recovery: a partially imported release is never committed.
"""


class ContentsError(Exception):
    """Base class for Contents import failures.

    Attributes:
        message: Human-readable error description
        details: Dict with additional context for debugging
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}


class ContentsFileError(ContentsError):
    """Raised when a Contents file is missing, unreadable or corrupt."""

    def __init__(self, path, reason: str):
        super().__init__(f"Cannot read Contents file '{path}': {reason}", {"path": str(path)})
        self.path = path


class MalformedLineError(ContentsError):
    """Raised for a line without a tab or space separating path and packages."""

    def __init__(self, line: str):
        super().__init__(f"Malformed line: '{line}'", {"line": line})
        self.line = line
