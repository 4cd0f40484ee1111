"""Version information.

Reports the installed package version. When running from a git checkout
(editable installs), the short commit hash is appended so you can tell
exactly what code is running.
"""

import os
import subprocess
from importlib.metadata import PackageNotFoundError, version

PACKAGE_NAME = "codemate"
FALLBACK_VERSION = "0.1.0"

_REPO_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def _git_commit() -> str | None:
    """Return the short HEAD hash of the source checkout, or None outside one."""
    if not os.path.isdir(os.path.join(_REPO_DIR, ".git")):
        return None
    try:
        result = subprocess.run(
            ["git", "-C", _REPO_DIR, "rev-parse", "--short", "HEAD"],
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired):
        return None
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None


def get_version() -> str:
    """Return a version string like '0.1.0' or '0.1.0 (g3a7f2c1)'."""
    try:
        package_version = version(PACKAGE_NAME)
    except PackageNotFoundError:
        package_version = FALLBACK_VERSION
    commit = _git_commit()
    if commit:
        return f"{package_version} (g{commit})"
    return package_version
