"""Rust extractor"""

import re

from ..languages import LanguageTag
from .base import SignatureExtractor


class RustExtractor(SignatureExtractor):
    """Free functions and ``impl`` methods.

    Trait method declarations without a body (``fn f(&self);``) also match;
    their span runs to the next body's closing brace, which is accepted
    for a token-counting heuristic.
    """

    language = LanguageTag.RUST
    signature = re.compile(
        r"^\s*(?:pub(?:\([^)]*\))?\s+)?(?:const\s+)?(?:async\s+)?(?:unsafe\s+)?"
        r"(?:extern\s+\"[^\"]*\"\s+)?fn\s+([a-zA-Z_][a-zA-Z0-9_]*)\s*(?:<[^>]*>)?\s*\(([^)]*)\)"
    )
    complexity_tokens = (
        " if ",
        " else ",
        " for ",
        " while ",
        " loop ",
        " match ",
        " => ",
        " && ",
        " || ",
        "?;",
    )
