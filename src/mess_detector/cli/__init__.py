"""CLI entry point."""

import typer

app = typer.Typer(
    name="mess-detector",
    help="Legacy Mess Detector - multi-language code quality analyzer",
    add_completion=False,
    rich_markup_mode="rich",
)


def main() -> None:
    """Console script entry point."""
    app()


# Import the command module to register its callback
from .analyze import analyze as _analyze_callback  # noqa: F401, E402
