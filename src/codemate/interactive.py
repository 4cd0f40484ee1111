"""Interactive command: prompt for components in a loop and generate each one.

The loop is an explicit state machine:

    AWAITING_NAME -> AWAITING_FRAMEWORK -> GENERATING -> AWAITING_NAME
    AWAITING_NAME -> TERMINATED   (exit sentinel or end of input)

Input is read through a callable so the loop can be driven without a
terminal. End of input or Ctrl+C at any prompt is a normal exit.
"""

from collections.abc import Callable
from enum import Enum

import typer

from codemate.config import Settings, load_settings
from codemate.errors import CodemateError, UsageError
from codemate.generator import build_request, generate, report_result, validate_component_name
from codemate.registry import FRAMEWORKS, SUPPORTED_FRAMEWORKS
from codemate.utils import console, log, log_error

EXIT_SENTINELS = {"exit", "quit", "q"}


class LoopState(Enum):
    AWAITING_NAME = "awaiting_name"
    AWAITING_FRAMEWORK = "awaiting_framework"
    GENERATING = "generating"
    TERMINATED = "terminated"


def is_exit_sentinel(text: str) -> bool:
    return text.strip().lower() in EXIT_SENTINELS


def parse_framework_choice(text: str) -> str | None:
    """Map a framework selection to its id.

    Pure function: accepts an id ('react') or its 1-based position in the
    listing ('1'). Returns None for anything else.
    """
    choice = text.strip()
    if choice in FRAMEWORKS:
        return choice
    if choice.isdigit():
        index = int(choice) - 1
        if 0 <= index < len(SUPPORTED_FRAMEWORKS):
            return SUPPORTED_FRAMEWORKS[index]
    return None


def format_framework_menu() -> str:
    """Return the numbered framework list shown before the framework prompt."""
    lines = [
        f"  {number}. {framework_id:<8} ({FRAMEWORKS[framework_id].display_name})"
        for number, framework_id in enumerate(SUPPORTED_FRAMEWORKS, start=1)
    ]
    return "\n".join(lines)


def _read(read_line: Callable[[str], str], prompt: str) -> str | None:
    """Read one line, returning None on end of input or interrupt."""
    try:
        return read_line(prompt)
    except (EOFError, KeyboardInterrupt):
        return None


def run_interactive(settings: Settings, read_line: Callable[[str], str] | None = None) -> int:
    """Run the prompt loop until the user exits. Returns the number of files generated."""
    if read_line is None:
        read_line = console.input

    state = LoopState.AWAITING_NAME
    name = ""
    framework = ""
    generated = 0

    while state is not LoopState.TERMINATED:
        if state is LoopState.AWAITING_NAME:
            text = _read(read_line, "Component name (or 'exit'): ")
            if text is None or is_exit_sentinel(text):
                state = LoopState.TERMINATED
                continue
            try:
                name = validate_component_name(text)
            except UsageError as exc:
                log(str(exc), style="yellow")
            else:
                state = LoopState.AWAITING_FRAMEWORK

        elif state is LoopState.AWAITING_FRAMEWORK:
            log(format_framework_menu())
            text = _read(read_line, "Framework: ")
            if text is None:
                state = LoopState.TERMINATED
                continue
            choice = parse_framework_choice(text)
            if choice is None:
                log(f"Unknown framework '{text.strip()}'. Pick a number or one of: "
                    f"{', '.join(SUPPORTED_FRAMEWORKS)}", style="yellow")
            else:
                framework = choice
                state = LoopState.GENERATING

        elif state is LoopState.GENERATING:
            try:
                result = generate(build_request(framework, name), settings)
            except CodemateError as exc:
                log_error(str(exc))
            else:
                if result.success:
                    report_result(result)
                    generated += 1
                else:
                    log_error(result.error_message or f"Generation failed: {result.file_path}")
            state = LoopState.AWAITING_NAME

    log("")
    log(f"Goodbye! Generated {generated} file(s).", style="bold cyan")
    return generated


def register(app: typer.Typer) -> None:
    """Register interactive and its short alias on the shared app."""
    app.command("interactive")(interactive)
    app.command("i", hidden=True)(interactive)


def interactive(ctx: typer.Context) -> None:
    """Prompt for component names and frameworks until you type 'exit'."""
    settings = ctx.obj if isinstance(ctx.obj, Settings) else load_settings()
    log("======================================", style="bold cyan")
    log(" codemate interactive mode", style="bold cyan")
    log(" Type 'exit' or press Ctrl+D to quit", style="bold cyan")
    log("======================================", style="bold cyan")
    run_interactive(settings)
