"""Tests for the metric engine."""

import math

import pytest

from mess_detector.config import AnalysisConfig, DuplicationThresholds
from mess_detector.languages import LanguageTag
from mess_detector.metrics import (
    METRIC_NAMES,
    CommentRatioMetric,
    CyclomaticComplexityMetric,
    ErrorHandlingMetric,
    FunctionLengthMetric,
    IssueKind,
    MetricResult,
    NamingConventionMetric,
    StructureAnalysisMetric,
    clamp,
    default_metrics,
    run_metrics,
)
from mess_detector.metrics.error_handling import estimate
from mess_detector.metrics.naming import is_bad_name
from mess_detector.models import FunctionUnit, UnitModel


def unit(name="compute", lines=5, complexity=1, parameters=0, start=1):
    return FunctionUnit(name, start, start + lines - 1, complexity, parameters)


def model(*units, comments=0, total=100, language=LanguageTag.PYTHON):
    return UnitModel(
        functions=tuple(units), comment_lines=comments, total_lines=total, language=language
    )


def kinds(result):
    return [issue.kind for issue in result.issues]


class TestMetricResult:
    """Clamping and validation of MetricResult."""

    @pytest.mark.parametrize("raw,expected", [(-1.0, 0.0), (0.25, 0.25), (2.0, 1.0)])
    def test_score_clamped(self, raw, expected):
        assert MetricResult(raw, 0.1, "d").score == expected

    def test_nan_becomes_zero(self):
        assert MetricResult(float("nan"), 0.1, "d").score == 0.0
        assert clamp(math.nan) == 0.0

    def test_weight_must_be_positive(self):
        with pytest.raises(ValueError, match="weight must be positive"):
            MetricResult(0.5, 0.0, "d")

    def test_issues_stored_as_tuple(self):
        assert MetricResult(0.5, 0.1, "d", issues=[]).issues == ()


class TestCyclomaticComplexity:
    metric = CyclomaticComplexityMetric()

    def test_no_units_scores_base(self):
        assert self.metric.analyze(model()).score == pytest.approx(0.4)

    def test_average_complexity(self):
        result = self.metric.analyze(model(unit("a", complexity=2), unit("b", complexity=4)))
        assert result.score == pytest.approx(0.7)
        assert result.issues == ()

    def test_score_capped(self):
        assert self.metric.analyze(model(unit(complexity=20))).score == 1.0

    def test_issue_thresholds(self):
        result = self.metric.analyze(
            model(unit("tangled", complexity=16), unit("busy", complexity=11), unit("ok", complexity=10))
        )
        very_high, high = result.issues
        assert (very_high.kind, very_high.subject, very_high.observed_value, very_high.threshold) == (
            IssueKind.COMPLEXITY_VERY_HIGH,
            "tangled",
            16,
            15,
        )
        assert (high.kind, high.subject, high.threshold) == (IssueKind.COMPLEXITY_HIGH, "busy", 10)


class TestFunctionLength:
    metric = FunctionLengthMetric()

    def test_no_units_scores_zero(self):
        assert self.metric.analyze(model()).score == 0.0

    def test_one_bucket_per_function(self):
        """A 130-line function is 'extreme' only, not also 'very long' and 'long'."""
        result = self.metric.analyze(model(unit("monster", lines=130)))
        assert kinds(result) == [IssueKind.LENGTH_EXTREME]
        assert result.score == pytest.approx(0.8)

    def test_penalty_is_averaged(self):
        result = self.metric.analyze(model(unit("a", lines=50), unit("b", lines=10)))
        assert result.score == pytest.approx(0.15)
        assert result.issues[0].observed_value == 50
        assert result.issues[0].threshold == 40

    def test_limits_are_exclusive(self):
        assert self.metric.analyze(model(unit(lines=40))).issues == ()

    def test_complexity_and_parameter_issues(self):
        result = self.metric.analyze(
            model(
                unit("a", complexity=19, parameters=9),
                unit("b", complexity=13, parameters=7),
            )
        )
        assert kinds(result) == [
            IssueKind.FUNCTION_COMPLEXITY_SEVERE,
            IssueKind.PARAMETERS_EXCESSIVE,
            IssueKind.FUNCTION_COMPLEXITY_HIGH,
            IssueKind.PARAMETERS_MANY,
        ]
        # Only length contributes to the score
        assert result.score == 0.0


class TestCommentRatio:
    metric = CommentRatioMetric()

    def test_empty_file(self):
        result = self.metric.analyze(model(total=0))
        assert result.score == pytest.approx(0.9)
        assert kinds(result) == [IssueKind.COMMENT_RATIO_VERY_LOW]

    def test_ten_percent_has_no_issue(self):
        result = self.metric.analyze(model(comments=10, total=100))
        assert result.score == pytest.approx(0.4)
        assert result.issues == ()

    def test_low_ratio(self):
        result = self.metric.analyze(model(comments=7, total=100))
        assert result.score == pytest.approx(0.55)
        (issue,) = result.issues
        assert issue.kind is IssueKind.COMMENT_RATIO_LOW
        assert issue.subject is None
        assert issue.observed_value == pytest.approx(0.07)

    def test_well_commented_floors_at_zero(self):
        assert self.metric.analyze(model(comments=40, total=100)).score == 0.0


class TestErrorHandling:
    metric = ErrorHandlingMetric()

    def test_no_units_scores_zero(self):
        assert self.metric.analyze(model()).score == 0.0

    def test_python_io_without_handling(self):
        result = self.metric.analyze(model(unit("read_file")))
        assert result.score == pytest.approx(0.91)
        (issue,) = result.issues
        assert issue.kind is IssueKind.ERROR_HANDLING_MISSING
        assert issue.subject == "read_file"

    def test_go_handled(self):
        result = self.metric.analyze(model(unit("Serve", complexity=9), language=LanguageTag.GO))
        assert result.score == pytest.approx(0.18)
        assert result.issues == ()

    def test_markup_is_neutral(self):
        result = self.metric.analyze(model(unit(".nav", complexity=30), language=LanguageTag.CSS))
        assert result.score == pytest.approx(0.3)
        assert result.issues == ()

    def test_estimators_by_family(self):
        assert estimate(unit("alloc_buffer"), LanguageTag.C).potential
        assert estimate(unit("fetchUser"), LanguageTag.TYPESCRIPT).quality == pytest.approx(0.2)
        assert estimate(unit("Run", complexity=9), LanguageTag.CSHARP).handled


class TestNamingConvention:
    metric = NamingConventionMetric()

    @pytest.mark.parametrize("name", ["x", "fn", "tmp", "foo", "xyz", "zyx"])
    def test_bad_names(self, name):
        assert is_bad_name(name)

    @pytest.mark.parametrize("name", ["calculate_total", "run", "render", "tmp_path"])
    def test_acceptable_names(self, name):
        assert not is_bad_name(name)

    def test_clean_file_scores_base(self):
        result = self.metric.analyze(model(unit("calculate"), unit("render")))
        assert result.score == pytest.approx(0.4)

    def test_ratio_amplified(self):
        result = self.metric.analyze(model(unit("x"), unit("tmp"), unit("calculate_total")))
        assert result.score == 1.0
        first = result.issues[0]
        assert (first.kind, first.subject, first.observed_value, first.threshold) == (
            IssueKind.BAD_NAME,
            "x",
            1,
            2,
        )


class TestStructureAnalysis:
    metric = StructureAnalysisMetric()

    def test_shallow(self):
        assert self.metric.analyze(model()).score == pytest.approx(0.4)
        assert self.metric.analyze(model(unit(complexity=3))).score == pytest.approx(0.4)

    def test_depth_three_no_issue(self):
        result = self.metric.analyze(model(unit(complexity=7)))
        assert result.score == pytest.approx(0.7)
        assert result.issues == ()

    def test_deep_and_very_deep(self):
        deep = self.metric.analyze(model(unit("a", complexity=12)))
        assert deep.score == pytest.approx(0.85)
        assert kinds(deep) == [IssueKind.NESTING_DEEP]

        very_deep = self.metric.analyze(model(unit("b", complexity=18)))
        assert very_deep.score == 1.0
        assert very_deep.issues[0].observed_value == 6


class TestRegistry:
    """default_metrics and run_metrics."""

    def test_canonical_order(self):
        assert tuple(m.name for m in default_metrics()) == METRIC_NAMES

    def test_weight_override(self):
        metrics = default_metrics(AnalysisConfig(metric_weights={"comment_ratio": 0.5}))
        weights = {m.name: m.weight for m in metrics}
        assert weights["comment_ratio"] == 0.5
        assert weights["cyclomatic_complexity"] == 0.30
        # Class defaults untouched
        assert CommentRatioMetric.weight == 0.15

    def test_duplication_thresholds_passed_through(self):
        thresholds = DuplicationThresholds(highly_similar=0.9)
        metrics = default_metrics(AnalysisConfig(duplication=thresholds))
        assert metrics[METRIC_NAMES.index("code_duplication")].thresholds is thresholds

    def test_run_metrics_has_every_key(self):
        results = run_metrics(model(unit("compute")))
        assert tuple(results) == METRIC_NAMES
        assert all(0.0 <= r.score <= 1.0 for r in results.values())

    def test_degenerate_model(self):
        """A file with no units still gets all seven scores."""
        results = run_metrics(model(total=0))
        assert results["function_length"].score == 0.0
        assert results["cyclomatic_complexity"].score == pytest.approx(0.4)
