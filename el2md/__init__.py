"""
el2md: convert the Commentary section of an Emacs Lisp file to Markdown.

This package reads the structured documentation comment at the top of a
source file and renders it as a README-style Markdown document.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union

from el2md.core.models import ConversionConfig
from el2md.processing.ingest import document_from_text, make_document, read_source
from el2md.rendering.markdown import render_body, render_markdown

__version__ = "0.1.0"


def convert(
    lines: Iterable[str],
    source_name: Optional[str] = None,
    config: Optional[ConversionConfig] = None,
) -> str:
    """Convert source lines to Markdown."""
    return render_markdown(make_document(lines, source_name, config), config)


def convert_text(text: str, source_name: Optional[str] = None, config: Optional[ConversionConfig] = None) -> str:
    """Convert the full text of a source file to Markdown."""
    return render_markdown(document_from_text(text, source_name, config), config)


def convert_file(path: Union[str, Path], config: Optional[ConversionConfig] = None, encoding: str = "utf-8") -> str:
    """Read ``path`` and convert it to Markdown."""
    return render_markdown(read_source(path, encoding=encoding, config=config), config)


__all__ = [
    "ConversionConfig",
    "convert",
    "convert_text",
    "convert_file",
    "render_body",
    "__version__",
]
