"""Configuration loading and management for Legacy Mess Detector.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.mess-detector.toml)
    3. Project config (./mess-detector.toml)
    4. Explicit config file
    5. Environment variables (MESS_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(skip_index=True, workers=4)
    >>> config.workers
    4
    >>> "**/index.js" in config.effective_exclude_patterns
    True
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Literal, Optional, get_type_hints

from .exceptions import InvalidConfigError, MessDetectorError
from .models import METRIC_NAMES

Verbosity = Literal["quiet", "normal", "verbose"]

DEFAULT_EXCLUDES: tuple[str, ...] = (
    # frontend
    "**/node_modules/**",
    "**/dist/**",
    "**/build/**",
    "**/.next/**",
    "**/public/assets/**",
    "**/out/**",
    "**/.cache/**",
    "**/.nuxt/**",
    "**/.output/**",
    "**/coverage/**",
    "**/.vscode/**",
    "**/.idea/**",
    "**/.git/**",
    "**/bower_components/**",
    "**/*.min.js",
    "**/*.bundle.js",
    "**/*.chunk.js",
    "**/static/js/*.js",
    "**/static/css/*.css",
    # backend
    "**/vendor/**",
    "**/bin/**",
    "**/obj/**",
    "**/target/**",
    "**/__pycache__/**",
    "**/*.pyc",
    "**/venv/**",
    "**/.env/**",
    "**/migrations/**",
    "**/generated/**",
    "**/logs/**",
    "**/tmp/**",
    "**/temp/**",
    "**/test-results/**",
    "**/testdata/**",
)

INDEX_EXCLUDES: tuple[str, ...] = (
    "**/index.js",
    "**/index.ts",
    "**/index.jsx",
    "**/index.tsx",
)


@dataclass(frozen=True)
class DuplicationThresholds:
    """Empirical constants of the code-duplication metric.

    None of these have a derivation beyond "they worked on real code", so
    they are tunable from the ``[duplication]`` table of a config file.

    Attributes:
        highly_similar: Signature similarity above which a group is a copy
        moderately_similar: Similarity above which a group is only flagged
        moderate_weight: Penalty factor applied to moderately similar groups
        naming_group_min: Naming-variant groups larger than this are flagged
        naming_penalty: Penalty per member of a flagged naming group
        param_duplicate_min: Shared (params, complexity) counts above this are flagged
        param_penalty: Penalty per unit sharing a (params, complexity) pair
        line_ratio_weight: Weight of duplicated_lines / total_lines in the score
        group_penalty_weight: Weight of the normalized group penalty in the score
    """

    highly_similar: float = 0.7
    moderately_similar: float = 0.5
    moderate_weight: float = 0.5
    naming_group_min: int = 2
    naming_penalty: float = 0.3
    param_duplicate_min: int = 3
    param_penalty: float = 0.2
    line_ratio_weight: float = 0.4
    group_penalty_weight: float = 0.6

    def __post_init__(self) -> None:
        for name in ("highly_similar", "moderately_similar", "moderate_weight"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise InvalidConfigError(name, value, "must be between 0.0 and 1.0")
        if self.moderately_similar > self.highly_similar:
            raise InvalidConfigError(
                "moderately_similar",
                self.moderately_similar,
                "must not exceed highly_similar",
            )
        if self.naming_group_min < 1:
            raise InvalidConfigError("naming_group_min", self.naming_group_min, "must be at least 1")
        if self.param_duplicate_min < 0:
            raise InvalidConfigError(
                "param_duplicate_min", self.param_duplicate_min, "must be non-negative"
            )
        weight_sum = self.line_ratio_weight + self.group_penalty_weight
        if not 0.99 <= weight_sum <= 1.01:
            raise InvalidConfigError(
                "line_ratio_weight", self.line_ratio_weight, f"weights must sum to 1.0, got {weight_sum:.3f}"
            )


DEFAULT_DUPLICATION = DuplicationThresholds()


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for one analysis run.

    Attributes:
        File filtering:
            include_patterns: Globs a file must match (empty = everything)
            exclude_patterns: Extra globs to skip, on top of the defaults
            use_default_excludes: Prepend DEFAULT_EXCLUDES to exclude_patterns
            skip_index: Also skip index.{js,ts,jsx,tsx} barrel files
            max_file_size_mb: Larger files are skipped
            min_file_size_bytes: Smaller files are skipped

        Performance tuning:
            parallel: Analyze files on a worker pool
            workers: Pool size (None = auto-detect from CPU cores)

        Scoring:
            metric_weights: Per-metric weight overrides, keyed by metric name
            duplication: Constants of the code-duplication metric

        Output control:
            verbosity: Logging verbosity level
    """

    include_patterns: list[str] = field(default_factory=list)
    exclude_patterns: list[str] = field(default_factory=list)
    use_default_excludes: bool = True
    skip_index: bool = False
    max_file_size_mb: float = 10.0
    min_file_size_bytes: int = 1

    parallel: bool = True
    workers: Optional[int] = None

    metric_weights: Dict[str, float] = field(default_factory=dict)
    duplication: DuplicationThresholds = field(default_factory=DuplicationThresholds)

    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        if self.max_file_size_mb <= 0:
            raise InvalidConfigError("max_file_size_mb", self.max_file_size_mb, "must be positive")
        if self.min_file_size_bytes < 0:
            raise InvalidConfigError(
                "min_file_size_bytes", self.min_file_size_bytes, "must be non-negative"
            )
        if self.min_file_size_bytes > self.max_file_size_bytes:
            raise InvalidConfigError(
                "min_file_size_bytes", self.min_file_size_bytes, "must not exceed the maximum size"
            )
        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        for name, weight in self.metric_weights.items():
            if name not in METRIC_NAMES:
                raise InvalidConfigError(
                    "metric_weights", name, f"unknown metric, expected one of {', '.join(METRIC_NAMES)}"
                )
            if weight <= 0:
                raise InvalidConfigError(f"metric_weights.{name}", weight, "must be positive")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError("verbosity", self.verbosity, "must be quiet, normal or verbose")

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)

    @property
    def effective_exclude_patterns(self) -> list[str]:
        """Exclude globs actually handed to the file finder."""
        patterns: list[str] = []
        if self.use_default_excludes:
            patterns.extend(DEFAULT_EXCLUDES)
        patterns.extend(self.exclude_patterns)
        if self.skip_index:
            patterns.extend(INDEX_EXCLUDES)
        return patterns


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options keep file/env values.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        MessDetectorError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".mess-detector.toml"
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except MessDetectorError:
            raise
        except Exception as e:
            raise MessDetectorError(f"Invalid global config '{global_config}': {e}")

    project_config = Path.cwd() / "mess-detector.toml"
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except MessDetectorError:
            raise
        except Exception as e:
            raise MessDetectorError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise MessDetectorError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except MessDetectorError:
            raise
        except Exception as e:
            raise MessDetectorError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    duplication = merged.pop("duplication", None)
    if duplication is not None:
        if isinstance(duplication, dict):
            try:
                merged["duplication"] = DuplicationThresholds(**duplication)
            except TypeError as e:
                raise MessDetectorError(f"Invalid [duplication] config: {e}")
        elif isinstance(duplication, DuplicationThresholds):
            merged["duplication"] = duplication

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        raise MessDetectorError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load scalar configuration fields from MESS_* environment variables.

    For example MESS_WORKERS=4, MESS_PARALLEL=false, MESS_SKIP_INDEX=1.
    List and mapping fields are config-file only.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"MESS_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise MessDetectorError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Returns None for types that cannot come from the environment.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin in (list, dict) or type_hint in (list, dict):
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load a TOML file and return the parsed dict."""
    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise MessDetectorError(
                "TOML support requires Python 3.11+ or the 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
