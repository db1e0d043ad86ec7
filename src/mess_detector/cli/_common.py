"""Shared CLI helpers."""

from pathlib import Path
from typing import List, Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config

console = Console()
err_console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    include: Optional[List[str]] = None,
    exclude: Optional[List[str]] = None,
    skip_index: bool = False,
    workers: Optional[int] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build the analysis config from CLI options.

    Unset options stay None so config files and MESS_* variables still apply.
    """
    overrides = {
        "include_patterns": list(include) if include else None,
        "exclude_patterns": list(exclude) if exclude else None,
        "skip_index": True if skip_index else None,
        "workers": workers,
    }
    if verbose:
        overrides["verbose"] = True
    elif quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)
