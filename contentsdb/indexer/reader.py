"""Contents file reading: decompression, filtering, and line parsing.

A Contents line is ``<path><sep><section>/<package>[,<section>/<package>...]``
where ``<sep>`` is the last run of tabs or spaces on the line. Only the first
package of the list is kept.
"""

import gzip
import zlib
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .config import DIRECTORY_DEPTH, PATH_EXCLUDE_PATTERN
from .exceptions import ContentsFileError, MalformedLineError


@dataclass(frozen=True)
class ContentsEntry:
    """One accepted Contents line."""

    path: str
    package: str


def read_lines(path: str | Path) -> Iterator[str]:
    """Stream the text lines of a gzip-compressed Contents file.

    Line terminators are stripped. Any I/O, decompression or decoding failure
    raises ContentsFileError; there is no partial-file recovery.
    """
    try:
        with gzip.open(path, "rt", encoding="utf-8", newline="\n") as f:
            for line in f:
                if line.endswith("\n"):
                    line = line[:-1]
                    if line.endswith("\r"):
                        line = line[:-1]
                yield line
    except (OSError, EOFError, zlib.error, UnicodeDecodeError) as e:
        raise ContentsFileError(path, str(e) or type(e).__name__) from e


def is_excluded(line: str) -> bool:
    """True for metadata records and paths under ignored subtrees."""
    return PATH_EXCLUDE_PATTERN.match(line) is not None


def parse_line(line: str) -> ContentsEntry:
    """Split a Contents line into its path and primary package name."""
    sep = max(line.rfind(" "), line.rfind("\t"))
    if sep < 0:
        raise MalformedLineError(line)

    path = line[:sep].rstrip()
    packages = line[sep + 1:]

    # "admin/foo,admin/bar" -> "admin/foo"
    primary = packages.split(",", 1)[0]
    # "admin/foo" -> "foo"; a bare "foo" is kept as is
    package = primary.rsplit("/", 1)[-1]

    return ContentsEntry(path, package)


def split_directory(path: str, depth: int = DIRECTORY_DEPTH) -> tuple[str, str]:
    """Split a path after its depth-th separator (or its last one).

    >>> split_directory("usr/bin/vim")
    ('usr/bin', 'vim')
    >>> split_directory("usr/lib/x86_64-linux-gnu/pkgconfig/a/b/c.pc")
    ('usr/lib/x86_64-linux-gnu/pkgconfig/a', 'b/c.pc')
    """
    index = -1
    for _ in range(depth):
        found = path.find("/", index + 1)
        if found < 0:
            break
        index = found

    if index < 0:
        # No separator at all: the file lives in the root
        return "", path

    return path[:index], path[index + 1:]
