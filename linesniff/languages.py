from pathlib import Path
from typing import Optional

from linesniff.detectors.patterns import LANGUAGE_PATTERNS

_ALIASES = {
    "js": "javascript",
    "jsx": "javascript",
    "mjs": "javascript",
    "node": "javascript",
    "py": "python",
    "python3": "python",
    "ts": "typescript",
    "tsx": "typescript",
}

_EXTENSIONS = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".py": "python",
    ".pyw": "python",
    ".ts": "typescript",
    ".tsx": "typescript",
}


def known_languages() -> list:
    return sorted(LANGUAGE_PATTERNS)


def is_known(language: str) -> bool:
    return language in LANGUAGE_PATTERNS


def normalize_language(name: str) -> str:
    """Map aliases to canonical identifiers. Unknown names pass through."""
    key = name.strip().lower()
    return _ALIASES.get(key, key)


def language_from_path(path: str) -> Optional[str]:
    return _EXTENSIONS.get(Path(path).suffix.lower())


def resolve_language(explicit: Optional[str], path: Optional[str], default: str) -> str:
    """Explicit flag first, then the file extension, then the configured default."""
    if explicit:
        return normalize_language(explicit)
    if path:
        guessed = language_from_path(path)
        if guessed:
            return guessed
    return normalize_language(default)
