"""Structural extractors: source text to UnitModel, one variant per language family.

``get_extractor`` is the single dispatch point from LanguageTag to
extractor; ``extract`` classifies a path and runs the matching extractor.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, Union

from ..languages import LanguageTag, classify_path
from ..models import UnitModel
from .base import BaseExtractor, SignatureExtractor
from .c_extractor import CExtractor
from .csharp_extractor import CSharpExtractor
from .css_extractor import CSSExtractor
from .generic_extractor import GenericExtractor
from .go_extractor import GoExtractor
from .html_extractor import HTMLExtractor
from .java_extractor import JavaExtractor
from .javascript_extractor import JavaScriptExtractor
from .php_extractor import PHPExtractor
from .python_extractor import PythonExtractor
from .rust_extractor import RustExtractor

_REGISTRY: dict[LanguageTag, Callable[[LanguageTag], BaseExtractor]] = {
    LanguageTag.C: CExtractor,
    LanguageTag.CPP: CExtractor,
    LanguageTag.GO: GoExtractor,
    LanguageTag.JAVA: JavaExtractor,
    LanguageTag.CSHARP: CSharpExtractor,
    LanguageTag.JAVASCRIPT: JavaScriptExtractor,
    LanguageTag.TYPESCRIPT: JavaScriptExtractor,
    LanguageTag.PYTHON: PythonExtractor,
    LanguageTag.PHP: PHPExtractor,
    LanguageTag.RUST: RustExtractor,
    LanguageTag.CSS: CSSExtractor,
    LanguageTag.HTML: HTMLExtractor,
    LanguageTag.UNSUPPORTED: GenericExtractor,
}


def get_extractor(language: LanguageTag) -> BaseExtractor:
    """Extractor instance for a language tag, tagged with that language.

    Every LanguageTag member is registered, so this never falls through.
    """
    return _REGISTRY[language](language)


def extract(
    path: Union[str, Path], content: str, language: Optional[LanguageTag] = None
) -> UnitModel:
    """Classify ``path`` (unless ``language`` is given) and extract its unit model."""
    tag = language if language is not None else classify_path(path)
    return get_extractor(tag).extract(content, str(path))


__all__ = [
    "BaseExtractor",
    "SignatureExtractor",
    "CExtractor",
    "CSharpExtractor",
    "CSSExtractor",
    "GenericExtractor",
    "GoExtractor",
    "HTMLExtractor",
    "JavaExtractor",
    "JavaScriptExtractor",
    "PHPExtractor",
    "PythonExtractor",
    "RustExtractor",
    "extract",
    "get_extractor",
]
