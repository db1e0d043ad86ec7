"""Comment-line counters, one small state machine per comment family.

Every physical line inside an open block comment counts, including the
lines that open and close it.
"""

from __future__ import annotations

from typing import Sequence


def count_c_style_comments(lines: Sequence[str], hash_comments: bool = False) -> int:
    """Count ``//`` lines and ``/* ... */`` blocks.

    Args:
        lines: Source lines
        hash_comments: Also treat ``#`` lines as comments (PHP)
    """
    count = 0
    in_block = False

    for line in lines:
        trimmed = line.strip()

        if in_block:
            count += 1
            if "*/" in trimmed:
                in_block = False
            continue

        if trimmed.startswith("//") or (hash_comments and trimmed.startswith("#")):
            count += 1
            continue

        # Covers /** doc comments too
        if trimmed.startswith("/*"):
            count += 1
            in_block = "*/" not in trimmed

    return count


def count_python_comments(lines: Sequence[str]) -> int:
    """Count ``#`` lines and triple-quoted docstring blocks."""
    count = 0
    delimiter = ""

    for line in lines:
        trimmed = line.strip()

        if delimiter:
            count += 1
            if delimiter in trimmed:
                delimiter = ""
            continue

        if trimmed.startswith("#"):
            count += 1
            continue

        for quote in ('"""', "'''"):
            if trimmed.startswith(quote):
                count += 1
                # One-line docstring when the delimiter shows up twice
                if trimmed.count(quote) == 1:
                    delimiter = quote
                break

    return count


def count_delimited_comments(lines: Sequence[str], opener: str, closer: str) -> int:
    """Count lines of block comments that start a line with ``opener``.

    Used for stylesheets (``/* */``) and markup (``<!-- -->``), which have no
    single-line form.
    """
    count = 0
    in_block = False

    for line in lines:
        trimmed = line.strip()

        if in_block:
            count += 1
            if closer in trimmed:
                in_block = False
            continue

        if trimmed.startswith(opener):
            count += 1
            in_block = closer not in trimmed

    return count
