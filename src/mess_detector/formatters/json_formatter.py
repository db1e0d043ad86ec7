"""JSON formatter for Legacy Mess Detector."""

import json
from dataclasses import asdict

from ..analysis.models import AnalysisResult
from .base import BaseFormatter, ReportOptions
from .wording import quality_level


class JsonFormatter(BaseFormatter):
    """Render the full analysis result as JSON.

    Report options do not trim the output; consumers get every file.
    """

    def render(self, result: AnalysisResult, options: ReportOptions = ReportOptions()) -> None:
        print(self.format(result, options))

    def format(self, result: AnalysisResult, options: ReportOptions = ReportOptions()) -> str:
        data = asdict(result)
        data["quality_level"] = quality_level(result.code_quality_score).key
        return json.dumps(data, indent=2)
