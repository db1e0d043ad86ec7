"""Source file discovery and reading.

Walks a directory tree once, pruning hidden and excluded directories,
and yields the files whose extension has a known language.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterable, List, Optional, Pattern, Sequence, Union

from .config import DEFAULT_EXCLUDES
from .exceptions import FileAccessError, InvalidPatternError, PathNotFoundError
from .languages import is_supported
from .logging_config import get_logger

logger = get_logger(__name__)


def validate_pattern(pattern: str) -> None:
    """Reject empty globs and globs with unbalanced brackets or braces.

    Raises:
        InvalidPatternError: If the pattern cannot be compiled
    """
    if not pattern or not pattern.strip():
        raise InvalidPatternError(pattern, "pattern is empty")
    for opener, closer in (("[", "]"), ("{", "}")):
        depth = 0
        for ch in pattern:
            if ch == opener:
                depth += 1
            elif ch == closer:
                depth -= 1
                if depth < 0:
                    raise InvalidPatternError(pattern, f"unmatched '{closer}'")
        if depth != 0:
            raise InvalidPatternError(pattern, f"unmatched '{opener}'")


def translate_glob(pattern: str) -> str:
    """Translate a glob with ``**`` support into an anchored regex.

    ``**/`` matches zero or more directories, a trailing ``/**`` matches
    the directory itself and everything below it, ``*`` and ``?`` never
    cross a ``/``, ``{a,b}`` is alternation and ``[...]`` is a character
    class.
    """
    validate_pattern(pattern)
    pattern = pattern.replace("\\", "/")
    out: List[str] = []
    braces = 0
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if pattern.startswith("**/", i):
            out.append("(?:.*/)?")
            i += 3
        elif pattern.startswith("/**", i) and i + 3 == n:
            out.append("(?:/.*)?")
            i += 3
        elif pattern.startswith("**", i):
            out.append(".*")
            i += 2
        elif ch == "*":
            out.append("[^/]*")
            i += 1
        elif ch == "?":
            out.append("[^/]")
            i += 1
        elif ch == "[":
            end = pattern.index("]", i + 1)
            body = pattern[i + 1 : end]
            if body.startswith("!"):
                body = "^" + body[1:]
            elif body.startswith("^"):
                body = "\\" + body
            out.append("[" + body + "]")
            i = end + 1
        elif ch == "{":
            out.append("(?:")
            braces += 1
            i += 1
        elif ch == "}":
            out.append(")")
            braces -= 1
            i += 1
        elif ch == "," and braces > 0:
            out.append("|")
            i += 1
        else:
            out.append(re.escape(ch))
            i += 1
    return "^" + "".join(out) + "$"


def compile_globs(patterns: Iterable[str]) -> List[Pattern[str]]:
    """Compile globs once so the walk does not re-translate them per file.

    Raises:
        InvalidPatternError: If any pattern is malformed
    """
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(translate_glob(pattern)))
        except re.error as e:
            raise InvalidPatternError(pattern, str(e))
    return compiled


def _matches_any(rel_path: str, patterns: Sequence[Pattern[str]]) -> bool:
    return any(p.match(rel_path) for p in patterns)


class FileFinder:
    """Finds analyzable source files below a root directory.

    Args:
        root: Directory to walk (a single file is also accepted)
        include_patterns: If given, a file must match at least one of these
        exclude_patterns: Files and directories matching any of these are skipped
        max_file_size: Files larger than this many bytes are skipped
        min_file_size: Files smaller than this many bytes are skipped

    Raises:
        InvalidPatternError: If a pattern is malformed
    """

    def __init__(
        self,
        root: Union[str, Path],
        include_patterns: Optional[Sequence[str]] = None,
        exclude_patterns: Optional[Sequence[str]] = None,
        max_file_size: int = 10 * 1024 * 1024,
        min_file_size: int = 1,
    ):
        self.root = Path(root)
        self.include_patterns = list(include_patterns or [])
        self.exclude_patterns = list(
            DEFAULT_EXCLUDES if exclude_patterns is None else exclude_patterns
        )
        self.max_file_size = max_file_size
        self.min_file_size = min_file_size
        self._includes = compile_globs(self.include_patterns)
        self._excludes = compile_globs(self.exclude_patterns)

    def find(self) -> List[Path]:
        """Walk the tree and return matching files, sorted by path.

        Raises:
            PathNotFoundError: If the root does not exist
        """
        if not self.root.exists():
            raise PathNotFoundError(self.root)

        if self.root.is_file():
            return [self.root] if self._accepts(self.root, self.root.name) else []

        found: List[Path] = []
        skipped = 0
        for dirpath, dirnames, filenames in os.walk(self.root):
            rel_dir = Path(dirpath).relative_to(self.root).as_posix()
            rel_dir = "" if rel_dir == "." else rel_dir + "/"

            # Prune in place so os.walk never descends into them
            dirnames[:] = sorted(
                d
                for d in dirnames
                if not d.startswith(".") and not _matches_any(rel_dir + d, self._excludes)
            )

            for name in filenames:
                path = Path(dirpath) / name
                if self._accepts(path, rel_dir + name):
                    found.append(path)
                else:
                    skipped += 1

        found.sort()
        logger.info(f"Discovered {len(found)} source files under {self.root} ({skipped} skipped)")
        return found

    def _accepts(self, path: Path, rel_path: str) -> bool:
        if not is_supported(path):
            return False
        if _matches_any(rel_path, self._excludes):
            logger.debug(f"Skipped (pattern): {rel_path}")
            return False
        if self._includes and not _matches_any(rel_path, self._includes):
            return False
        try:
            size = path.stat().st_size
        except OSError as e:
            logger.warning(f"Cannot stat {path}: {e}")
            return False
        if size < self.min_file_size or size > self.max_file_size:
            logger.debug(f"Skipped (size): {rel_path} ({size} bytes)")
            return False
        return True


def read_source(path: Union[str, Path]) -> str:
    """Read a source file as UTF-8, replacing undecodable bytes.

    Raises:
        FileAccessError: If the file cannot be read
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            return f.read()
    except OSError as e:
        raise FileAccessError(Path(path), f"OS error: {e}")


def find_source_files(
    root: Union[str, Path],
    include: Optional[Sequence[str]] = None,
    exclude: Optional[Sequence[str]] = None,
    max_file_size: int = 10 * 1024 * 1024,
    min_file_size: int = 1,
) -> List[Path]:
    """Shortcut for ``FileFinder(...).find()``."""
    return FileFinder(root, include, exclude, max_file_size, min_file_size).find()
