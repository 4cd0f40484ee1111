"""Console output, logging, and error reporting helpers."""

from typing import NoReturn

import typer
from rich.console import Console

from codemate.errors import CodemateError, UsageError

USAGE_HINT = "Run 'codemate help' for usage."

console = Console()
err_console = Console(stderr=True)

_verbose = False
_log_file = ""


def configure_logging(verbose: bool = False, log_file: str = "") -> None:
    """Set the process-wide verbosity and optional mirror log file."""
    global _verbose, _log_file
    _verbose = verbose
    _log_file = log_file


def _write_log_entry(text: str) -> None:
    """Append a line to the mirror log file, if one is configured. Never raises."""
    if not _log_file:
        return
    try:
        with open(_log_file, "a", encoding="utf-8") as f:
            f.write(text + "\n")
    except Exception:
        pass  # Never break generation over logging


def log(message: str, style: str = "") -> None:
    """Write a message to stdout (with optional style) and the mirror log file."""
    console.print(message, style=style or None, markup=False, highlight=False, soft_wrap=True)
    _write_log_entry(message)


def log_error(message: str) -> None:
    """Write an error message to stderr and the mirror log file."""
    err_console.print(message, style="bold red", markup=False, highlight=False, soft_wrap=True)
    _write_log_entry(f"ERROR: {message}")


def log_debug(message: str) -> None:
    """Write a dim diagnostic line when verbose output is enabled."""
    if not _verbose:
        return
    err_console.print(message, style="dim", markup=False, highlight=False, soft_wrap=True)
    _write_log_entry(f"DEBUG: {message}")


def exit_with_error(exc: CodemateError) -> NoReturn:
    """Report *exc* on stderr and exit with its exit code.

    Usage errors get a hint pointing at the help command.
    """
    log_error(str(exc))
    if isinstance(exc, UsageError):
        err_console.print(USAGE_HINT, style="yellow", markup=False, highlight=False, soft_wrap=True)
    raise typer.Exit(exc.exit_code)
