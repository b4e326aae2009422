"""Console output for import runs."""
from .ui import console, print_success, print_summary_table

__all__ = ["console", "print_success", "print_summary_table"]
