"""Generate command: validate a request, render its template, write the file."""

import os
from dataclasses import dataclass
from typing import Annotated

import typer

from codemate.config import Settings, load_settings
from codemate.errors import CodemateError, FilesystemError, UnsupportedFrameworkError, UsageError
from codemate.naming import split_words
from codemate.registry import SUPPORTED_FRAMEWORKS, lookup
from codemate.utils import exit_with_error, log, log_debug, log_error
from codemate.writer import resolve_target_path, write_component


@dataclass(frozen=True)
class GenerationRequest:
    framework: str
    component_name: str
    output_dir: str | None = None


@dataclass(frozen=True)
class GenerationResult:
    file_path: str
    success: bool
    error_message: str | None = None
    content: str = ""


def validate_component_name(name: str) -> str:
    """Return the stripped component name, or raise UsageError.

    The name must contain letters or digits and start with a letter, so every
    naming convention yields a valid identifier.
    """
    stripped = (name or "").strip()
    if not stripped:
        raise UsageError("Component name must not be empty.")
    words = split_words(stripped)
    if not words:
        raise UsageError(f"Component name '{stripped}' has no letters or digits.")
    if not words[0][0].isalpha():
        raise UsageError(f"Component name '{stripped}' must start with a letter.")
    return stripped


def build_request(framework: str, name: str, output_dir: str | None = None) -> GenerationRequest:
    """Validate raw arguments and return a GenerationRequest.

    Raises UnsupportedFrameworkError for unknown framework ids and
    UsageError for an invalid component name.
    """
    if lookup(framework) is None:
        raise UnsupportedFrameworkError(framework, SUPPORTED_FRAMEWORKS)
    component_name = validate_component_name(name)
    if output_dir is not None and not output_dir.strip():
        output_dir = None
    return GenerationRequest(framework=framework, component_name=component_name, output_dir=output_dir)


def resolve_output_dir(request: GenerationRequest, settings: Settings) -> str:
    """Pick the directory for a request.

    An explicit output_dir wins; otherwise each framework gets its own
    subdirectory of the configured output root.
    """
    if request.output_dir:
        return os.path.expanduser(request.output_dir)
    return os.path.join(settings.output_root, request.framework)


def generate(request: GenerationRequest, settings: Settings, dry_run: bool = False) -> GenerationResult:
    """Render and write one component.

    Filesystem failures are reported in the result rather than raised.
    With *dry_run* the file is rendered and its path resolved but nothing
    is written.
    """
    spec = lookup(request.framework)
    if spec is None:
        raise UnsupportedFrameworkError(request.framework, SUPPORTED_FRAMEWORKS)

    directory = resolve_output_dir(request, settings)
    filename = spec.filename(request.component_name)
    content = spec.render(request.component_name)
    log_debug(f"{spec.display_name} template for '{request.component_name}' -> {filename} in {directory}")

    try:
        if dry_run:
            file_path = resolve_target_path(directory, filename)
        else:
            file_path = write_component(directory, filename, content)
    except FilesystemError as exc:
        return GenerationResult(file_path=exc.path, success=False, error_message=str(exc), content=content)

    return GenerationResult(file_path=file_path, success=True, content=content)


def report_result(result: GenerationResult, dry_run: bool = False) -> None:
    """Print the outcome of a generation to the console."""
    if not result.success:
        return
    if dry_run:
        log(f"Would write {result.file_path}:", style="cyan")
        log(result.content.rstrip("\n"))
        return
    log(f"✓ Created {result.file_path}", style="green")


def register(app: typer.Typer) -> None:
    """Register generate and its short alias on the shared app."""
    app.command("generate")(generate_command)
    app.command("g", hidden=True)(generate_command)


def generate_command(
    ctx: typer.Context,
    framework: Annotated[str, typer.Argument(help=f"One of: {', '.join(SUPPORTED_FRAMEWORKS)}")],
    name: Annotated[str, typer.Argument(help="Component name, e.g. UserCard or 'user card'")],
    output_dir: Annotated[
        str | None, typer.Argument(help="Directory to write into (overrides the per-framework default)")
    ] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Print the generated file instead of writing it.")] = False,
) -> None:
    """Generate one component file for FRAMEWORK named NAME."""
    settings = ctx.obj if isinstance(ctx.obj, Settings) else load_settings()
    try:
        request = build_request(framework, name, output_dir)
    except CodemateError as exc:
        exit_with_error(exc)

    result = generate(request, settings, dry_run=dry_run)
    if not result.success:
        log_error(result.error_message or f"Generation failed: {result.file_path}")
        raise typer.Exit(1)
    report_result(result, dry_run=dry_run)
