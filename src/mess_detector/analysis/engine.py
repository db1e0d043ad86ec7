"""Analysis pipeline: classify, extract, score, then aggregate.

Per file:
  read → classify → extract UnitModel → seven metrics → weighted score

Per project:
  discover → fan out over a thread pool → gather → aggregate

Workers never share mutable state. Each chunk of files builds its own
success and failure lists, and the lists are concatenated once after
the pool joins. Aggregation sorts and averages with ``statistics.mean``,
which sums exactly, so the result does not depend on completion order.
"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from statistics import mean
from pathlib import Path
from threading import Lock
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from ..config import AnalysisConfig
from ..discovery import find_source_files, read_source
from ..exceptions import FileAccessError, PathNotFoundError
from ..extractors import get_extractor
from ..languages import classify_path
from ..logging_config import get_logger
from ..metrics import BaseMetric, MetricResult, default_metrics, run_metrics
from .models import AnalysisResult, FileAnalysisResult, FileFailure, weighted_score

logger = get_logger(__name__)

ProgressCallback = Callable[[int, int], None]
AnalyzeFn = Callable[[Path], FileAnalysisResult]


def analyze_file(
    path: Union[str, Path], content: str, metrics: Optional[Sequence[BaseMetric]] = None
) -> FileAnalysisResult:
    """Run the per-file pipeline on already-read content."""
    language = classify_path(path)
    model = get_extractor(language).extract(content, str(path))
    results = run_metrics(model, metrics)

    issues = [issue for result in results.values() for issue in result.issues]
    return FileAnalysisResult(
        file_path=str(path),
        file_score=weighted_score(results),
        issues=issues,
        metrics=results,
        language=language.display_name,
        total_lines=model.total_lines,
    )


def _chunks(files: Sequence[Path], count: int) -> List[List[Path]]:
    """Split ``files`` into ``count`` contiguous, near-equal chunks."""
    size, extra = divmod(len(files), count)
    chunks = []
    start = 0
    for i in range(count):
        end = start + size + (1 if i < extra else 0)
        if end > start:
            chunks.append(list(files[start:end]))
        start = end
    return chunks


def fan_out(
    files: Sequence[Path],
    analyze_fn: AnalyzeFn,
    workers: int = 1,
    progress: Optional[ProgressCallback] = None,
) -> Tuple[List[FileAnalysisResult], List[FileFailure]]:
    """Analyze ``files`` on up to ``workers`` threads.

    A file whose analysis raises becomes a FileFailure; the rest of the
    run is unaffected.

    Returns:
        (successes, failures), each in no particular order
    """
    if not files:
        return [], []

    total = len(files)
    done = 0
    done_lock = Lock()

    def tick() -> None:
        nonlocal done
        if progress is None:
            return
        with done_lock:
            done += 1
            current = done
        progress(current, total)

    def run_chunk(chunk: List[Path]) -> Tuple[List[FileAnalysisResult], List[FileFailure]]:
        successes: List[FileAnalysisResult] = []
        failures: List[FileFailure] = []
        for path in chunk:
            try:
                successes.append(analyze_fn(path))
            except FileAccessError as e:
                logger.warning(f"Access error for {path}: {e.reason}")
                failures.append(FileFailure(str(path), e.reason))
            except Exception as e:
                logger.error(f"Unexpected error analyzing {path}: {e}")
                failures.append(FileFailure(str(path), f"{type(e).__name__}: {e}"))
            tick()
        return successes, failures

    workers = max(1, min(workers, total))
    chunks = _chunks(files, workers)

    if workers == 1:
        return run_chunk(chunks[0])

    successes: List[FileAnalysisResult] = []
    failures: List[FileFailure] = []
    with ThreadPoolExecutor(max_workers=workers) as executor:
        for chunk_successes, chunk_failures in executor.map(run_chunk, chunks):
            successes.extend(chunk_successes)
            failures.extend(chunk_failures)
    return successes, failures


def aggregate(
    results: Sequence[FileAnalysisResult],
    metrics: Optional[Sequence[BaseMetric]] = None,
    failures: Sequence[FileFailure] = (),
) -> AnalysisResult:
    """Fold per-file results into the project result.

    Each metric's score is the plain mean over files. Weight and
    description come from the first file carrying that metric (or from
    ``metrics`` when no file does).
    """
    if not results:
        empty = AnalysisResult.empty()
        empty.failures = list(failures)
        return empty

    scores: Dict[str, List[float]] = {}
    templates: Dict[str, MetricResult] = {}
    for result in results:
        for name, metric in result.metrics.items():
            scores.setdefault(name, []).append(metric.score)
            templates.setdefault(name, metric)

    if metrics is not None:
        order = [m.name for m in metrics if m.name in templates]
    else:
        order = list(templates)

    averaged = {
        name: MetricResult(
            score=mean(scores[name]),
            weight=templates[name].weight,
            description=templates[name].description,
        )
        for name in order
    }

    ranked = sorted(results, key=lambda r: (-r.file_score, r.file_path))
    return AnalysisResult(
        code_quality_score=weighted_score(averaged),
        metrics=averaged,
        files_analyzed=ranked,
        total_files=len(results),
        total_lines=sum(r.total_lines for r in results),
        is_empty=False,
        failures=sorted(failures, key=lambda f: f.file_path),
    )


class CodeAnalyzer:
    """Analyzes a single file or a whole directory tree.

    Example:
        analyzer = CodeAnalyzer(load_config(workers=4))
        result = analyzer.analyze("src/")
        print(result.code_quality_score * 100)
    """

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()
        self.metrics = default_metrics(self.config)
        logger.debug(f"Initialized CodeAnalyzer with {len(self.metrics)} metrics")

    @property
    def worker_count(self) -> int:
        if not self.config.parallel:
            return 1
        if self.config.workers is not None:
            return self.config.workers
        return os.cpu_count() or 1

    def analyze(
        self, path: Union[str, Path], progress: Optional[ProgressCallback] = None
    ) -> AnalysisResult:
        """Analyze ``path``.

        Raises:
            PathNotFoundError: If the path does not exist
            FileAccessError: If ``path`` is a single unreadable file
            InvalidPatternError: If a configured glob is malformed
        """
        root = Path(path)
        if not root.exists():
            raise PathNotFoundError(root)

        if root.is_file():
            return self._analyze_single(root, progress)

        files = find_source_files(
            root,
            include=self.config.include_patterns,
            exclude=self.config.effective_exclude_patterns,
            max_file_size=self.config.max_file_size_bytes,
            min_file_size=self.config.min_file_size_bytes,
        )
        if not files:
            logger.info(f"No analyzable files under {root}")
            return AnalysisResult.empty()

        workers = self.worker_count
        logger.info(f"Analyzing {len(files)} files with {workers} worker(s)")
        successes, failures = fan_out(files, self.analyze_path, workers, progress)
        if failures:
            logger.warning(f"{len(failures)} file(s) could not be analyzed")
        return aggregate(successes, self.metrics, failures)

    def analyze_path(self, path: Path) -> FileAnalysisResult:
        """Read and analyze one file."""
        return analyze_file(path, read_source(path), self.metrics)

    def _analyze_single(
        self, path: Path, progress: Optional[ProgressCallback]
    ) -> AnalysisResult:
        result = self.analyze_path(path)
        if progress is not None:
            progress(1, 1)
        return aggregate([result], self.metrics)
