"""Language classification by file extension.

Adding a new language:
  1. Add a LanguageTag member with its display name.
  2. Map its extensions in _EXTENSIONS below.
  3. Register an extractor for the tag in extractors/__init__.py.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Union


class LanguageTag(Enum):
    """Closed set of languages the extractors know about."""

    RUST = "Rust"
    GO = "Go"
    JAVASCRIPT = "JavaScript"
    TYPESCRIPT = "TypeScript"
    PYTHON = "Python"
    JAVA = "Java"
    CPP = "C++"
    C = "C"
    CSHARP = "C#"
    PHP = "PHP"
    HTML = "HTML"
    CSS = "CSS"
    UNSUPPORTED = "Unknown"

    @property
    def display_name(self) -> str:
        return self.value


_EXTENSIONS: dict[str, LanguageTag] = {
    "rs": LanguageTag.RUST,
    "go": LanguageTag.GO,
    "js": LanguageTag.JAVASCRIPT,
    "mjs": LanguageTag.JAVASCRIPT,
    "cjs": LanguageTag.JAVASCRIPT,
    "ts": LanguageTag.TYPESCRIPT,
    "tsx": LanguageTag.TYPESCRIPT,
    "jsx": LanguageTag.TYPESCRIPT,
    "py": LanguageTag.PYTHON,
    "pyw": LanguageTag.PYTHON,
    "java": LanguageTag.JAVA,
    "cpp": LanguageTag.CPP,
    "cc": LanguageTag.CPP,
    "cxx": LanguageTag.CPP,
    "hpp": LanguageTag.CPP,
    "h++": LanguageTag.CPP,
    "c": LanguageTag.C,
    "h": LanguageTag.C,
    "cs": LanguageTag.CSHARP,
    "razor": LanguageTag.CSHARP,
    "php": LanguageTag.PHP,
    "php3": LanguageTag.PHP,
    "php4": LanguageTag.PHP,
    "php5": LanguageTag.PHP,
    "php7": LanguageTag.PHP,
    "php8": LanguageTag.PHP,
    "phtml": LanguageTag.PHP,
    "html": LanguageTag.HTML,
    "htm": LanguageTag.HTML,
    "xhtml": LanguageTag.HTML,
    "css": LanguageTag.CSS,
    "scss": LanguageTag.CSS,
    "sass": LanguageTag.CSS,
    "less": LanguageTag.CSS,
}


def classify(extension: str) -> LanguageTag:
    """Map a file extension to its language tag.

    Case-insensitive; a leading dot is optional. Unknown extensions give
    ``LanguageTag.UNSUPPORTED``.
    """
    return _EXTENSIONS.get(extension.lower().lstrip("."), LanguageTag.UNSUPPORTED)


def classify_path(path: Union[str, Path]) -> LanguageTag:
    """Classify a file by its suffix."""
    return classify(Path(path).suffix)


def is_supported(path: Union[str, Path]) -> bool:
    return classify_path(path) is not LanguageTag.UNSUPPORTED


def supported_extensions() -> list[str]:
    """All extensions with a dedicated language, dot-prefixed and sorted."""
    return sorted(f".{ext}" for ext in _EXTENSIONS)
