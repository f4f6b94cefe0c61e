"""Golfkit CLI Main Entry Point

Usage:
    golfkit build page.yaml            # print the compiled page
    golfkit build page.yaml -o out.html
    golfkit literal "it's"             # print the quote-minimal literal
    golfkit style style.yaml           # render a selector mapping to CSS
    golfkit --version
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from ._version import __version__
from .exceptions import GolfkitError
from .page import PageCompiler, Renderer, load_page
from .page.config import load_stylesheet
from .quoting import quote_text

console = Console(stderr=True)
log = logging.getLogger(__name__)

typer_app = typer.Typer(no_args_is_help=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the golfkit CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (-v): INFO level - compile summaries
    - Debug (GOLFKIT_DEBUG=1): DEBUG level - quoting fallbacks, var resolution
    """
    debug = bool(os.environ.get("GOLFKIT_DEBUG"))
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    pkg_logger = logging.getLogger("golfkit")
    pkg_logger.setLevel(level)
    pkg_logger.handlers = [handler]
    pkg_logger.propagate = False


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the program with an error message."""
    typer.secho(f"Error: {message}", err=True, fg=typer.colors.RED)
    sys.exit(exit_code)


def handle_error(error: Exception) -> NoReturn:
    """Handle and exit on golfkit errors."""
    if isinstance(error, GolfkitError):
        exit_with_error(error.message, error.exit_code)
    typer.secho(f"Unexpected error: {error}", err=True, fg=typer.colors.RED)
    sys.exit(1)


def _emit(text: str, output: Optional[Path]) -> None:
    if output is None:
        typer.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    typer.echo(f"Wrote {len(text)} bytes to {output}")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"golfkit {__version__}")
        raise typer.Exit()


@typer_app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Compose ultra-compact JS, HTML and CSS payloads."""


@typer_app.command()
def build(
    page: Path = typer.Argument(..., help="Path to a page description (YAML)."),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write the HTML to a file instead of stdout."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Show compile details."),
) -> None:
    """Compile a YAML page description to compact HTML."""
    setup_logging(verbose)
    try:
        config = load_page(page)
        document = PageCompiler().compile(config)
        html = Renderer().render(document)
    except Exception as exc:
        handle_error(exc)

    log.debug("Rendered %s to %d bytes", page, len(html))
    _emit(html, output)


@typer_app.command()
def literal(
    text: str = typer.Argument(..., help="Text to render as a string literal."),
    forbid: Optional[List[str]] = typer.Option(
        None, "--forbid", "-f", help="Quote character that must not be used."
    ),
) -> None:
    """Print TEXT as a JS string literal with the cheapest quote."""
    setup_logging()
    try:
        typer.echo(quote_text(text, forbid or ()))
    except Exception as exc:
        handle_error(exc)


@typer_app.command()
def style(
    path: Path = typer.Argument(..., help="YAML mapping of selectors to rules."),
    output: Optional[Path] = typer.Option(None, "-o", "--output"),
) -> None:
    """Render a selector mapping to minified CSS."""
    setup_logging()
    try:
        rules = load_stylesheet(path)
        css = PageCompiler().compile_stylesheet(rules)
    except Exception as exc:
        handle_error(exc)

    log.debug("Rendered %d rule(s) from %s", len(rules), path)
    _emit(css, output)


def app(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI."""
    typer_app(args=argv)


if __name__ == "__main__":
    app()
