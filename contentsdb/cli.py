"""contentsdb CLI - build a path -> package SQLite database from Contents files."""

from pathlib import Path

import click

from contentsdb.indexer.runner import run_contents_import
from contentsdb.pipeline.ui import console, print_success, print_summary_table
from contentsdb.utils.constants import (
    DEFAULT_ARCH,
    DEFAULT_CACHE_DIR,
    DEFAULT_RELEASE,
    DEFAULT_VERSION,
    JAMMY_RELEASE,
    SCHEMA_VERSIONS,
    database_name,
)
from contentsdb.utils.error_handler import handle_exceptions
from contentsdb.utils.logging import Verbosity, set_verbosity


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-c",
    "--cache",
    "cache_dir",
    default=DEFAULT_CACHE_DIR,
    show_default=True,
    metavar="DIR",
    help="Cache directory that contains the Contents files.",
)
@click.option(
    "-r",
    "--release",
    default=DEFAULT_RELEASE,
    show_default=True,
    metavar="R",
    help="Release (e.g. noble or jammy).",
)
@click.option("-j", "--jammy", is_flag=True, help=f"Short for --release={JAMMY_RELEASE}.")
@click.option(
    "-V",
    "--version",
    "version",
    type=click.IntRange(min(SCHEMA_VERSIONS), max(SCHEMA_VERSIONS)),
    default=DEFAULT_VERSION,
    show_default=True,
    metavar="V",
    help="SQLite database implementation version/variant (1-3).",
)
@click.option(
    "-a",
    "--arch",
    default=DEFAULT_ARCH,
    show_default=True,
    help="Architecture suffix of the Contents files.",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose output.")
@click.option("--debug", is_flag=True, help="Debug output (every inserted row).")
@handle_exceptions
def cli(cache_dir, release, jammy, version, arch, verbose, debug):
    """Build contents-<release>_v<version>.sqlite3 from cached Contents files.

    Reads <release>-proposed, <release>, <release>-security and
    <release>-updates Contents files (in that order, later pockets win) and
    writes a fresh database to the current directory.

    \b
    Schema versions:
      1  path_package(path, package)
      2  packages + path_package(path, package_id)
      3  packages + directories +
         directory_name_package(directory_id, name, package_id)
    """
    if debug:
        verbosity = Verbosity.DEBUG
    elif verbose:
        verbosity = Verbosity.INFO
    else:
        verbosity = Verbosity.WARNING
    set_verbosity(verbosity)

    if jammy:
        release = JAMMY_RELEASE

    db_name = database_name(release, version)
    Path(db_name).unlink(missing_ok=True)

    if verbosity >= Verbosity.INFO:
        console.print(f"Creating {db_name}...", highlight=False)

    result = run_contents_import(
        release,
        version,
        cache_dir=cache_dir,
        db_path=db_name,
        arch=arch,
    )

    if verbosity >= Verbosity.INFO:
        print_summary_table(result)
        print_success(
            f"{result.processed}/{result.lines} paths "
            f"in {result.elapsed:.1f}s -> [path]{result.db_path}[/path]"
        )


def main():
    """Main entry point for console script."""
    cli(prog_name="contentsdb")


if __name__ == "__main__":
    main()
