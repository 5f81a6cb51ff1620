"""
Ingestion utilities: reading source files, splitting into lines, and
normalizing comment prefixes.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional, Union

from el2md.core.models import ConversionConfig, SourceDocument
from el2md.core.utils import get_file_contents

logger = logging.getLogger(__name__)


def normalize_prefix(line: str, comment_markers: str) -> str:
    """Rewrite the leading run of equivalent comment characters to the canonical one.

    The run keeps its length, so ``;;`` and ``;;;`` stay distinguishable.
    """
    if not line:
        return ""
    canonical = comment_markers[0]
    match = re.match(f"[{re.escape(comment_markers)}]+", line)
    if match is None:
        return line
    return canonical * match.end() + line[match.end():]


def normalize_lines(lines: Iterable[str], comment_markers: str) -> List[str]:
    """Strip line endings and trailing whitespace, then normalize prefixes."""
    return [normalize_prefix(line.rstrip("\r\n").rstrip(), comment_markers) for line in lines]


def make_document(
    lines: Iterable[str],
    source_name: Optional[str] = None,
    config: Optional[ConversionConfig] = None,
) -> SourceDocument:
    """Build a `SourceDocument` from raw lines."""
    config = config or ConversionConfig()
    normalized = normalize_lines(lines, config.comment_markers)
    return SourceDocument(lines=tuple(normalized), source_name=source_name)


def document_from_text(
    text: str,
    source_name: Optional[str] = None,
    config: Optional[ConversionConfig] = None,
) -> SourceDocument:
    """Split ``text`` on newlines and build a `SourceDocument`."""
    return make_document(text.splitlines(), source_name=source_name, config=config)


def read_source(
    path: Union[str, Path],
    encoding: str = "utf-8",
    config: Optional[ConversionConfig] = None,
) -> SourceDocument:
    """Read a source file from disk. The file name is kept for attribution."""
    source_path = Path(path)
    text = get_file_contents(source_path, encoding=encoding)
    logger.debug("Read %d characters from %s", len(text), source_path)
    return document_from_text(text, source_name=source_path.name, config=config)
