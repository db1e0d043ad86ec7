"""The analyze command: scan a tree, score it, print a report."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from ..analysis import CodeAnalyzer
from ..exceptions import MessDetectorError
from ..formatters import ReportOptions, RichFormatter, get_formatter
from ..logging_config import get_logger, setup_logging
from . import app
from ._common import console, err_console, resolve_config
from .progress import AnalysisProgress


@app.command()
def analyze(
    path: Path = typer.Argument(
        Path("."),
        help="File or directory to analyze",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="List every file, plus statistics and metric descriptions",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    top: int = typer.Option(
        5,
        "--top",
        "-t",
        help="Number of worst files to show",
        min=0,
    ),
    issues: int = typer.Option(
        5,
        "--issues",
        "-i",
        help="Issues shown per file",
        min=0,
    ),
    summary: bool = typer.Option(
        False,
        "--summary",
        "-s",
        help="Only show the score and the conclusion",
    ),
    markdown: bool = typer.Option(
        False,
        "--markdown",
        "-m",
        help="Output a Markdown report",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output machine-readable JSON",
    ),
    exclude: Optional[List[str]] = typer.Option(
        None,
        "--exclude",
        "-e",
        help="Glob to exclude (repeatable), added to the default excludes",
    ),
    include: Optional[List[str]] = typer.Option(
        None,
        "--include",
        help="Only analyze files matching this glob (repeatable)",
    ),
    skip_index: bool = typer.Option(
        False,
        "--skipindex",
        help="Skip index.js / index.ts barrel files",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    workers: Optional[int] = typer.Option(
        None,
        "-w",
        "--workers",
        help="Parallel workers (default: auto-detect)",
        min=1,
        max=64,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Find out how messy a codebase is.

    Scores every source file on seven metrics (complexity, function
    length, comments, error handling, naming, duplication, nesting)
    and reports the worst offenders. Higher scores are worse.

    [bold cyan]Examples:[/bold cyan]

      mess-detector

      mess-detector src/ --top 10 --issues 3

      mess-detector . --markdown > report.md

      mess-detector . --exclude "**/fixtures/**" --skipindex
    """
    from .. import __version__

    if version:
        console.print(
            f"[bold cyan]Legacy Mess Detector[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)

    logger = get_logger(__name__)

    try:
        settings = resolve_config(
            config=config,
            include=include,
            exclude=exclude,
            skip_index=skip_index,
            workers=workers,
            verbose=verbose,
            quiet=quiet,
        )
        setup_logging(settings.verbosity)
        analyzer = CodeAnalyzer(settings)

        if json_output:
            formatter = get_formatter("json")
        elif markdown:
            formatter = get_formatter("markdown")
        else:
            formatter = RichFormatter(console)

        # Only the terminal report gets a progress bar; piped output stays clean
        show_progress = isinstance(formatter, RichFormatter) and err_console.is_terminal
        with AnalysisProgress(err_console, enabled=show_progress) as progress:
            result = analyzer.analyze(path, progress=progress)

        options = ReportOptions(
            top_files=top,
            max_issues=issues,
            summary_only=summary,
            verbose=settings.verbosity == "verbose",
        )
        formatter.render(result, options)

    except typer.Exit:
        raise

    except MessDetectorError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error during analysis")
        console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)
