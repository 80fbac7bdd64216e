"""
Command-Line Interface for check-doc.
"""
import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import __version__
from .engine import check_project
from .errors import CheckDocError
from .reporter import report

app = typer.Typer(
    help="Check if go functions in the project have comments conforming to the Go Swaggo format.",
    add_completion=False,
)

console = Console()


def _version_callback(value: bool):
    if value:
        console.print(f"check-doc {__version__}")
        raise typer.Exit()


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command(name="check-doc")
def run_check(
    path: str = typer.Option(
        ".", "--path", "-p",
        help="Path to the project's root directory."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Log every directory visited and every missing tag."
    ),
    version: bool = typer.Option(
        False, "--version",
        callback=_version_callback, is_eager=True,
        help="Show the version and exit."
    ),
):
    """
    Scan every controllers/main.go under PATH for undocumented handlers.
    """
    _setup_logging(verbose)

    try:
        results = check_project(path)
    except CheckDocError as e:
        console.print(f"[bold red]✗ Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(code=1)

    if not report(results, console):
        console.print("[bold red]some functions failed the comment check[/bold red]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
