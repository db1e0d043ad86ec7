"""Go extractor"""

import re

from ..languages import LanguageTag
from .base import SignatureExtractor


class GoExtractor(SignatureExtractor):
    """Functions and methods (``func (r *T) Name(...)``)."""

    language = LanguageTag.GO
    signature = re.compile(
        r"func\s+(?:\([^)]*\)\s+)?([a-zA-Z_][a-zA-Z0-9_]*)\s*\(([^)]*)\)"
    )
    complexity_tokens = (" if ", " else ", " for ", " switch ", " case ", " && ", " || ")
