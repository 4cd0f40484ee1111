"""Runtime configuration for the scaffold generator.

All settings come from environment variables and have built-in defaults,
so the CLI works with nothing set. Settings are read when a command runs,
not at import time.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

OUTPUT_DIR_ENV = "CODEMATE_OUTPUT_DIR"
VERBOSE_ENV = "CODEMATE_VERBOSE"
LOG_FILE_ENV = "CODEMATE_LOG_FILE"

DEFAULT_OUTPUT_ROOT = os.path.join("src", "components")

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    output_root: str = DEFAULT_OUTPUT_ROOT
    verbose: bool = False
    log_file: str = ""


def parse_flag(value: str | None) -> bool:
    """Interpret a boolean-like environment value. Unset or unrecognized is False."""
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY


def load_settings(environ: Mapping[str, str] | None = None, verbose: bool = False) -> Settings:
    """Build Settings from the environment.

    *verbose* forces debug output on even when the environment flag is off
    (used by the --verbose option).
    """
    if environ is None:
        environ = os.environ
    output_root = environ.get(OUTPUT_DIR_ENV, "").strip() or DEFAULT_OUTPUT_ROOT
    return Settings(
        output_root=os.path.expanduser(output_root),
        verbose=verbose or parse_flag(environ.get(VERBOSE_ENV)),
        log_file=os.path.expanduser(environ.get(LOG_FILE_ENV, "").strip()),
    )
