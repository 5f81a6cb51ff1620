"""
Command-line interface: view, write, readme.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from el2md.core.constants import DEFAULT_KEY_NAMES
from el2md.core.models import ConversionConfig
from el2md.core.utils import readme_path_for
from el2md.processing.ingest import read_source
from el2md.rendering.markdown import emit_document
from el2md.rendering.sinks import MarkdownSink, write_sink_to_file

app = typer.Typer(add_completion=False, no_args_is_help=True)

logger = logging.getLogger(__name__)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging")) -> None:
    """Convert the Commentary section of an Emacs Lisp file to Markdown."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _build_config(symmetric_quotes: bool, keys: Optional[List[str]]) -> ConversionConfig:
    key_names = set(DEFAULT_KEY_NAMES) | set(keys or [])
    return ConversionConfig(
        translate_keys_within_symmetric_quotes=symmetric_quotes,
        recognized_key_names=key_names,
    )


def _convert(input_path: Path, encoding: str, config: ConversionConfig) -> MarkdownSink:
    try:
        document = read_source(input_path, encoding=encoding, config=config)
    except (OSError, UnicodeDecodeError) as exc:
        typer.echo(f"error: cannot read {input_path}: {exc}", err=True)
        raise typer.Exit(code=1)
    logger.info("Converting %s (%d lines)", input_path, len(document))
    return emit_document(document, config)


def _write(sink: MarkdownSink, output: Path, force: bool, encoding: str) -> None:
    if output.exists() and not force:
        if not typer.confirm(f"{output} exists. Overwrite?", default=False):
            typer.echo("Aborted.", err=True)
            raise typer.Exit(code=1)
    try:
        path = write_sink_to_file(sink, output, overwrite=True, encoding=encoding)
    except OSError as exc:
        typer.echo(f"error: cannot write {output}: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(str(path))


@app.command()
def view(
    input_path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    symmetric_quotes: bool = typer.Option(
        False,
        "--symmetric-quotes/--no-symmetric-quotes",
        help="Also translate `...` spans",
    ),
    key: Optional[List[str]] = typer.Option(None, "--key", "-k", help="Extra key name rendered as <kbd>"),
    encoding: str = typer.Option("utf-8", "--encoding"),
) -> None:
    """Print the Markdown for INPUT_PATH."""
    sink = _convert(input_path, encoding, _build_config(symmetric_quotes, key))
    typer.echo(sink.getvalue(), nl=False)


@app.command()
def write(
    input_path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    output: Path = typer.Option(..., "--output", "-o", help="Markdown file to write"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite without asking"),
    symmetric_quotes: bool = typer.Option(
        False,
        "--symmetric-quotes/--no-symmetric-quotes",
        help="Also translate `...` spans",
    ),
    key: Optional[List[str]] = typer.Option(None, "--key", "-k", help="Extra key name rendered as <kbd>"),
    encoding: str = typer.Option("utf-8", "--encoding"),
) -> None:
    """Write the Markdown for INPUT_PATH to a named file."""
    sink = _convert(input_path, encoding, _build_config(symmetric_quotes, key))
    _write(sink, output, force, encoding)


@app.command()
def readme(
    input_path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite without asking"),
    symmetric_quotes: bool = typer.Option(
        False,
        "--symmetric-quotes/--no-symmetric-quotes",
        help="Also translate `...` spans",
    ),
    key: Optional[List[str]] = typer.Option(None, "--key", "-k", help="Extra key name rendered as <kbd>"),
    encoding: str = typer.Option("utf-8", "--encoding"),
) -> None:
    """Write README.md next to INPUT_PATH."""
    sink = _convert(input_path, encoding, _build_config(symmetric_quotes, key))
    _write(sink, readme_path_for(input_path), force, encoding)


def run() -> None:  # entry point for module execution
    app()


if __name__ == "__main__":
    run()
