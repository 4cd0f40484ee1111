"""File writer: create the output directory and write one generated file."""

import os

from codemate.errors import FilesystemError
from codemate.utils import log_debug


def resolve_target_path(directory: str, filename: str) -> str:
    """Join *directory* and *filename*, refusing paths that escape the directory.

    Pure function over path strings. Raises FilesystemError when the
    resolved file would land outside *directory*.
    """
    root = os.path.abspath(directory)
    target = os.path.abspath(os.path.join(root, filename))
    if os.path.dirname(target) != root:
        raise FilesystemError("Refusing to write outside the output directory", target)
    return target


def write_component(directory: str, filename: str, content: str) -> str:
    """Write *content* to directory/filename and return the written path.

    Creates the directory tree if needed (succeeds silently if it exists).
    An existing file at the same path is overwritten without warning.
    Raises FilesystemError with the attempted path on any OS failure.
    """
    target = resolve_target_path(directory, filename)
    root = os.path.dirname(target)

    try:
        os.makedirs(root, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(f"Could not create directory ({exc.strerror or exc})", root) from exc

    if os.path.exists(target):
        log_debug(f"Overwriting existing file {target}")

    try:
        with open(target, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as exc:
        raise FilesystemError(f"Could not write file ({exc.strerror or exc})", target) from exc

    return target
