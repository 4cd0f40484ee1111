"""Error taxonomy for the scaffold generator.

Every error carries the process exit code the CLI should use. The CLI is
the only place that turns these into output and an exit status.
"""


class CodemateError(Exception):
    """Base class for all errors reported to the user."""

    exit_code = 1


class UsageError(CodemateError):
    """Missing or invalid command arguments."""


class UnsupportedFrameworkError(UsageError):
    """Framework identifier is not in the registry."""

    def __init__(self, framework: str, supported: tuple[str, ...]):
        self.framework = framework
        self.supported = supported
        super().__init__(
            f"Unsupported framework '{framework}'. Supported frameworks: {', '.join(supported)}"
        )


class FilesystemError(CodemateError):
    """Directory creation or file write failed."""

    def __init__(self, message: str, path: str):
        self.path = path
        super().__init__(f"{message}: {path}")
