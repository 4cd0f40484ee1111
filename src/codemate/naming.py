"""Component name normalization.

Pure functions that split a free-form component name ("user card",
"UserCard", "user-card", "HTTPServer2", "Über Card") into lowercase words
and rebuild it in each naming convention the templates need.
"""

import re
import unicodedata

# Runs of Unicode letters and digits; everything else separates words.
_CHUNK_RE = re.compile(r"[^\W_]+")


def _split_chunk(chunk: str) -> list[str]:
    """Split one alphanumeric run at camelCase humps, acronym ends, and digit edges."""
    words = []
    start = 0
    for i in range(1, len(chunk)):
        prev, char = chunk[i - 1], chunk[i]
        nxt = chunk[i + 1] if i + 1 < len(chunk) else ""
        if (
            prev.isdigit() != char.isdigit()
            or (prev.islower() and char.isupper())
            or (prev.isupper() and char.isupper() and nxt.islower())
        ):
            words.append(chunk[start:i])
            start = i
    words.append(chunk[start:])
    return words


def split_words(name: str) -> list[str]:
    """Split a component name into lowercase words.

    Non-alphanumeric characters act as separators. Letters outside ASCII are
    kept. Returns an empty list when the name has no letters or digits.
    """
    normalized = unicodedata.normalize("NFC", name)
    return [word.lower() for chunk in _CHUNK_RE.findall(normalized) for word in _split_chunk(chunk)]


def to_pascal_case(name: str) -> str:
    return "".join(word.capitalize() for word in split_words(name))


def to_camel_case(name: str) -> str:
    words = split_words(name)
    if not words:
        return ""
    return words[0] + "".join(word.capitalize() for word in words[1:])


def to_kebab_case(name: str) -> str:
    return "-".join(split_words(name))


def to_snake_case(name: str) -> str:
    return "_".join(split_words(name))


def to_title(name: str) -> str:
    """Human-readable form used in docstrings and headings ('User Card')."""
    return " ".join(word.capitalize() for word in split_words(name))


def name_forms(name: str) -> dict[str, str]:
    """Return every naming convention of *name*, keyed by template placeholder."""
    return {
        "pascal": to_pascal_case(name),
        "camel": to_camel_case(name),
        "kebab": to_kebab_case(name),
        "snake": to_snake_case(name),
        "title": to_title(name),
    }
