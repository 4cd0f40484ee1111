"""CLI app definition and command registration."""

import contextlib
import importlib
from collections.abc import Generator
from typing import Annotated

import typer
from rich.table import Table
from typer.core import TyperGroup

from codemate.config import DEFAULT_OUTPUT_ROOT, LOG_FILE_ENV, OUTPUT_DIR_ENV, VERBOSE_ENV, Settings, load_settings
from codemate.registry import FRAMEWORKS, SUPPORTED_FRAMEWORKS
from codemate.utils import configure_logging, console, log
from codemate.version import get_version

USAGE_TEXT = f"""\
Usage: codemate <command> [arguments]

Commands:
  generate, g <framework> <name> [outputDir]   Generate one component file
  list, l                                      List supported frameworks
  interactive, i                               Generate components from prompts
  help, h                                      Show this help

Frameworks: {", ".join(SUPPORTED_FRAMEWORKS)}

Options:
  --version, -v    Show version and exit
  --verbose        Print debug output

Environment:
  {OUTPUT_DIR_ENV:<21} Output root, one subdirectory per framework (default: {DEFAULT_OUTPUT_ROOT})
  {VERBOSE_ENV:<21} Set to 1, true, yes or on for debug output
  {LOG_FILE_ENV:<21} Also append console output to this file

Examples:
  codemate generate react UserCard
  codemate g python "user card" ./models
"""


def _usage_error_class() -> type[Exception]:
    """Return the UsageError of the click build TyperGroup is based on.

    Newer typer releases bundle their own click, so the class comes from the
    group's base class rather than from the click package.
    """
    group_base = next(base for base in TyperGroup.__mro__[1:] if base.__name__ == "Group")
    click_package = group_base.__module__.rsplit(".", 1)[0]
    return importlib.import_module(f"{click_package}.exceptions").UsageError


USAGE_ERROR = _usage_error_class()


@contextlib.contextmanager
def _usage_errors_exit_one() -> Generator[None, None, None]:
    try:
        yield
    except USAGE_ERROR as exc:
        exc.exit_code = 1
        raise


class CodemateGroup(TyperGroup):
    """Command group that exits 1 on usage errors instead of click's 2."""

    def make_context(self, info_name, args, parent=None, **extra):
        with _usage_errors_exit_one():
            return super().make_context(info_name, args, parent=parent, **extra)

    def invoke(self, ctx):
        with _usage_errors_exit_one():
            return super().invoke(ctx)


def print_usage() -> None:
    log(USAGE_TEXT.rstrip("\n"))


def _version_callback(value: bool):
    if value:
        console.print(get_version())
        raise typer.Exit()


app = typer.Typer(
    cls=CodemateGroup,
    help="Scaffold component files for React, Angular, Python, Node.js and Java.",
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit.", callback=_version_callback, is_eager=True),
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", help="Print debug output.")] = False,
) -> None:
    """Scaffold component files for React, Angular, Python, Node.js and Java."""
    settings = load_settings(verbose=verbose)
    configure_logging(verbose=settings.verbose, log_file=settings.log_file)
    ctx.obj = settings
    if ctx.invoked_subcommand is None:
        print_usage()


# Register commands from submodules
from codemate import generator as _generator_mod
from codemate import interactive as _interactive_mod

_generator_mod.register(app)
_interactive_mod.register(app)


# ============================================
# Commands
# ============================================


@app.command("list")
def list_frameworks(
    ctx: typer.Context,
    details: Annotated[bool, typer.Option("--details", help="Show naming rule and default directory.")] = False,
) -> None:
    """List supported framework identifiers."""
    if not details:
        for framework_id in SUPPORTED_FRAMEWORKS:
            log(framework_id)
        return

    settings = ctx.obj if isinstance(ctx.obj, Settings) else load_settings()
    table = Table(title="Supported frameworks")
    table.add_column("Framework", style="bold cyan")
    table.add_column("Name")
    table.add_column("Example file")
    table.add_column("Default directory")
    for framework_id, spec in FRAMEWORKS.items():
        table.add_row(
            framework_id,
            spec.display_name,
            spec.filename("user card"),
            _generator_mod.resolve_output_dir(_generator_mod.GenerationRequest(framework_id, "user card"), settings),
        )
    console.print(table)


@app.command("help")
def help_command() -> None:
    """Show usage text."""
    print_usage()


app.command("l", hidden=True)(list_frameworks)
app.command("h", hidden=True)(help_command)
