"""Allow ``python -m codemate``."""

from codemate.cli import app

app(prog_name="codemate")
