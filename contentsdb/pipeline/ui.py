"""Central UI handler for contentsdb.

Single source of truth for Rich console styling. Import this instead of
instantiating Console() in every module.

Usage:
    from contentsdb.pipeline.ui import console, print_success

    console.print("[warning]Contents file is empty[/warning]")
    print_success("Database created")
"""

import sys

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

CONTENTSDB_THEME = Theme({
    "info": "bold cyan",
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "path": "bold cyan",
    "dim": "dim white",
})

# Single console instance - import this, don't create your own
console = Console(
    theme=CONTENTSDB_THEME,
    force_terminal=sys.stdout.isatty()
)


def print_success(msg: str) -> None:
    """Print a success message in green."""
    console.print(f"[success]OK:[/success] {msg}")


def print_summary_table(result) -> None:
    """Render the per-pocket line counts and table sizes of an import."""
    table = Table(title=f"{result.release} (schema v{result.version})", box=None, padding=(0, 2, 0, 0))
    table.add_column("Contents file", style="path")
    table.add_column("Processed", justify="right")
    table.add_column("Total", justify="right")
    table.add_column("%", justify="right", style="dim")

    for pocket in result.pockets:
        table.add_row(
            pocket.filename,
            str(pocket.processed),
            str(pocket.lines),
            f"{pocket.percentage:.1f}",
        )

    console.print(table)

    rows = Table(box=None, padding=(0, 2, 0, 0))
    rows.add_column("Table")
    rows.add_column("Rows", justify="right")
    for table_name, count in result.row_counts.items():
        rows.add_row(table_name, str(count))

    console.print(rows)
