"""Centralized error handler for contentsdb commands."""

import os
import traceback
from collections.abc import Callable
from datetime import datetime
from functools import wraps
from typing import Any

import click

from contentsdb.utils.logging import logger

from .constants import ENV_ERROR_LOG


def handle_exceptions(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator that turns any failure into a logged click error (exit 1)."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        """Inner wrapper that implements the try-except logic."""
        try:
            return func(*args, **kwargs)
        except click.ClickException:
            raise
        except Exception as e:
            error_type = type(e).__name__
            error_msg = str(e)

            logger.opt(exception=True).debug(
                "Command '{cmd}' failed: {err}",
                cmd=func.__name__,
                err=error_msg,
            )

            error_log_path = os.environ.get(ENV_ERROR_LOG)
            if error_log_path:
                with open(error_log_path, "a", encoding="utf-8") as f:
                    f.write("\n" + "=" * 80 + "\n")
                    f.write(f"[{datetime.now().isoformat()}] Error in command: {func.__name__}\n")
                    f.write("=" * 80 + "\n")
                    f.write(f"{error_type}: {error_msg}\n\n")
                    f.write(traceback.format_exc())
                    f.write("=" * 80 + "\n\n")

            user_message = f"{error_type}: {error_msg}"
            if error_log_path:
                user_message += f"\n\nFull traceback logged to: {error_log_path}"

            raise click.ClickException(user_message) from e

    return wrapper
