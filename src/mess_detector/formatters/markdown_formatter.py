"""Markdown formatter for Legacy Mess Detector."""

from typing import List

from ..analysis.models import AnalysisResult
from .base import BaseFormatter, ReportOptions
from .wording import advice, describe_issue, metric_comment, metric_label, quality_level, status_symbol


class MarkdownFormatter(BaseFormatter):
    """Markdown report with the same sections as the terminal report."""

    def render(self, result: AnalysisResult, options: ReportOptions = ReportOptions()) -> None:
        print(self.format(result, options))

    def format(self, result: AnalysisResult, options: ReportOptions = ReportOptions()) -> str:
        lines: List[str] = ["# Legacy Mess Detector Report", ""]

        if result.is_empty:
            lines += ["No analyzable source files found.", ""]
            lines += self._failures(result)
            return "\n".join(lines)

        score = result.code_quality_score
        level = quality_level(score)
        lines += [
            "## Summary",
            "",
            f"- **Mess score**: {score * 100:.2f} / 100",
            f"- **Quality level**: {level.label} - {level.description}",
            f"- **Files analyzed**: {result.total_files}",
            f"- **Total lines**: {result.total_lines}",
            "",
        ]

        if not options.summary_only:
            lines += self._metrics_table(result)
            lines += self._problem_files(result, options)

        lines += self._failures(result)
        lines += ["## Conclusion", "", advice(score), ""]

        if options.verbose:
            lines += ["## Metric details", ""]
            for name, metric in result.metrics.items():
                lines.append(f"- **{metric_label(name)}** (weight {metric.weight:.2f}): {metric.description}")
            lines.append("")

        return "\n".join(lines)

    def _metrics_table(self, result: AnalysisResult) -> List[str]:
        lines = [
            "## Metrics",
            "",
            "| Metric | Score | Weight | Status |",
            "|--------|-------|--------|--------|",
        ]
        for name, metric in sorted(result.metrics.items(), key=lambda item: item[1].score):
            lines.append(
                f"| {status_symbol(metric.score)} {metric_label(name)} "
                f"| {metric.score * 100:.2f} | {metric.weight:.2f} "
                f"| {metric_comment(name, metric.score)} |"
            )
        lines.append("")
        return lines

    def _problem_files(self, result: AnalysisResult, options: ReportOptions) -> List[str]:
        files = result.files_analyzed if options.verbose else result.files_analyzed[: options.top_files]
        lines = ["## Problem files", ""]
        if not files:
            return lines + ["No problem files.", ""]

        for index, file in enumerate(files, 1):
            lines.append(f"### {index}. {file.file_path}")
            lines.append("")
            lines.append(f"- **Language**: {file.language}")
            lines.append(f"- **Score**: {file.file_score * 100:.2f}")
            lines.append(f"- **Issues**: {len(file.issues)}")
            lines.append("")
            for issue in file.issues[: options.max_issues]:
                lines.append(f"- {describe_issue(issue)}")
            hidden = len(file.issues) - options.max_issues
            if hidden > 0:
                lines.append(f"- ...and {hidden} more issue(s)")
            lines.append("")
        return lines

    def _failures(self, result: AnalysisResult) -> List[str]:
        if not result.failures:
            return []
        lines = ["## Failed files", ""]
        lines += [f"- `{f.file_path}`: {f.reason}" for f in result.failures]
        lines.append("")
        return lines
