"""Rich terminal formatter for Legacy Mess Detector."""

from io import StringIO
from typing import List, Optional

from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..analysis.models import AnalysisResult, FileAnalysisResult
from .base import BaseFormatter, ReportOptions
from .wording import (
    advice,
    advice_level,
    describe_issue,
    metric_comment,
    metric_label,
    quality_level,
    score_style,
    shorten_path,
    status_symbol,
)

_ADVICE_STYLES = {"good": "bold green", "moderate": "yellow", "bad": "red"}


class RichFormatter(BaseFormatter):
    """Terminal report: header panel, score, metric table, worst files, conclusion."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, result: AnalysisResult, options: ReportOptions = ReportOptions()) -> None:
        for renderable in self._build(result, options):
            self.console.print(renderable)

    def format(self, result: AnalysisResult, options: ReportOptions = ReportOptions()) -> str:
        buffer = StringIO()
        console = Console(file=buffer, width=100, no_color=True, highlight=False)
        for renderable in self._build(result, options):
            console.print(renderable)
        return buffer.getvalue()

    def _build(self, result: AnalysisResult, options: ReportOptions) -> List[RenderableType]:
        parts: List[RenderableType] = [
            Panel(
                Text("Legacy Mess Detector Report", style="bold yellow", justify="center"),
                expand=True,
            )
        ]

        if result.is_empty:
            parts.append(Text("  No analyzable source files found.", style="yellow"))
            parts.extend(self._failures(result))
            return parts

        parts.extend(self._score_summary(result))
        if not options.summary_only:
            parts.append(self._metrics_table(result))
            parts.extend(self._files(result, options))
        parts.extend(self._failures(result))
        parts.extend(self._conclusion(result))
        if options.verbose:
            parts.extend(self._verbose_details(result))
        return parts

    def _score_summary(self, result: AnalysisResult) -> List[RenderableType]:
        score = result.code_quality_score
        level = quality_level(score)
        line = Text("  Mess score: ", style="bold cyan")
        line.append(f"{score * 100:.2f} / 100", style=score_style(score))
        line.append(f"  ({level.label})", style="cyan")
        return [Text(""), line, Text(f"  {level.description}", style="dim"), Text("")]

    def _metrics_table(self, result: AnalysisResult) -> Table:
        table = Table(title="Metrics", title_style="bold magenta", show_header=True, expand=False)
        table.add_column("Metric", style="bold")
        table.add_column("Score", justify="right")
        table.add_column("Weight", justify="right")
        table.add_column("Status")

        # Best metrics first, worst last
        for name, metric in sorted(result.metrics.items(), key=lambda item: item[1].score):
            style = score_style(metric.score)
            table.add_row(
                f"{status_symbol(metric.score)} {metric_label(name)}",
                Text(f"{metric.score * 100:.2f}", style=style),
                f"{metric.weight:.2f}",
                Text(metric_comment(name, metric.score), style="cyan"),
            )
        return table

    def _files(self, result: AnalysisResult, options: ReportOptions) -> List[RenderableType]:
        title = "All files" if options.verbose else "Worst files"
        parts: List[RenderableType] = [Text(""), Text(f"◆ {title}", style="bold magenta"), Text("")]

        files = result.files_analyzed if options.verbose else result.files_analyzed[: options.top_files]
        if not files:
            parts.append(Text("  No problem files, nice work.", style="bold green"))
            return parts

        for index, file in enumerate(files, 1):
            parts.extend(self._file_item(index, file, options.max_issues))
        return parts

    def _file_item(self, index: int, file: FileAnalysisResult, max_issues: int) -> List[RenderableType]:
        header = Text(f"  {index}. ", style="bold")
        header.append(shorten_path(file.file_path), style="magenta")
        header.append(f" ({file.language}, ", style="dim")
        header.append(f"score {file.file_score * 100:.2f}", style=score_style(file.file_score))
        header.append(")", style="dim")

        parts: List[RenderableType] = [header]
        for issue in file.issues[:max_issues]:
            parts.append(Text(f"     {describe_issue(issue)}", style="yellow"))
        hidden = len(file.issues) - max_issues
        if hidden > 0:
            parts.append(Text(f"     ...and {hidden} more issue(s)", style="yellow"))
        return parts

    def _failures(self, result: AnalysisResult) -> List[RenderableType]:
        if not result.failures:
            return []
        return [
            Text(""),
            Text(f"  {len(result.failures)} file(s) could not be analyzed", style="red"),
        ]

    def _conclusion(self, result: AnalysisResult) -> List[RenderableType]:
        score = result.code_quality_score
        level = quality_level(score)
        return [
            Text(""),
            Text("◆ Conclusion", style="bold magenta"),
            Text(""),
            Text(f"  {level.label} - {level.description}", style="cyan"),
            Text(f"  {advice(score)}", style=_ADVICE_STYLES[advice_level(score)]),
            Text(""),
        ]

    def _verbose_details(self, result: AnalysisResult) -> List[RenderableType]:
        total_issues = sum(len(f.issues) for f in result.files_analyzed)

        stats = Table(title="Statistics", title_style="bold blue", show_header=False, box=None)
        stats.add_column("Key", style="bold")
        stats.add_column("Value", justify="right")
        stats.add_row("Total files", str(result.total_files))
        stats.add_row("Total lines", str(result.total_lines))
        stats.add_row("Total issues", str(total_issues))
        stats.add_row("Failed files", str(len(result.failures)))

        details = Table(title="Metric details", title_style="bold blue", show_header=True)
        details.add_column("Metric", style="bold")
        details.add_column("Weight", justify="right")
        details.add_column("Description")
        for name, metric in result.metrics.items():
            details.add_row(metric_label(name), f"{metric.weight:.2f}", metric.description)

        return [stats, Text(""), details]
