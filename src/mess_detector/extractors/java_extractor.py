"""Java extractor"""

import re

from ..languages import LanguageTag
from .base import SignatureExtractor


class JavaExtractor(SignatureExtractor):
    """Methods: modifiers, return type, name and parameters, then ``{`` or ``throws``."""

    language = LanguageTag.JAVA
    signature = re.compile(
        r"(?:public|private|protected|static|\s)+[\w<>\[\]]+\s+(\w+)\s*\(([^)]*)\)\s*(?:\{|throws)"
    )
    complexity_tokens = (
        " if ",
        " else ",
        " for ",
        " while ",
        " switch ",
        " case ",
        " catch ",
        " && ",
        " || ",
    )
