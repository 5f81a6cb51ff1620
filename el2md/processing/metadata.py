"""
Metadata extraction from the header region of a source file.

The header region is everything before the Commentary marker. It carries the
title line and the declared Author, Version and URL fields.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from el2md.core.constants import DECLARED_FIELDS, MODE_LINE, compile_line_patterns
from el2md.core.models import ConversionConfig, Metadata, SourceDocument
from el2md.processing.cursor import Cursor

logger = logging.getLogger(__name__)


def _title_pattern(config: ConversionConfig):
    m = re.escape(config.canonical_marker)
    ext = re.escape(config.source_extension)
    return re.compile(rf"^{m}+ ([^ ]+)\.{ext} --+ (.*)$")


def _field_pattern(field: str, config: ConversionConfig):
    m = re.escape(config.canonical_marker)
    return re.compile(rf"^{m}+ {re.escape(field)}: *(.*?)\s*$")


def extract_title(cursor: Cursor, metadata: Metadata, config: Optional[ConversionConfig] = None) -> bool:
    """Match the title line at ``cursor``; on success record it and advance.

    Returns:
        True if the title line matched
    """
    config = config or ConversionConfig()
    line = cursor.peek()
    match = _title_pattern(config).match(line) if line is not None else None
    if match is None:
        return False
    metadata.package_name = match.group(1)
    # A title line holding only a mode annotation has no title
    metadata.title = MODE_LINE.sub("", match.group(2)).strip() or None
    cursor.advance()
    logger.debug("Title %r for package %r", metadata.title, metadata.package_name)
    return True


def find_commentary(document: SourceDocument, config: Optional[ConversionConfig] = None) -> Optional[int]:
    """Return the line index of the Commentary marker, if any."""
    config = config or ConversionConfig()
    patterns = compile_line_patterns(config.canonical_marker)
    return Cursor(document.lines).find(patterns["commentary"])


def extract_declared_fields(
    document: SourceDocument,
    metadata: Metadata,
    config: Optional[ConversionConfig] = None,
) -> Metadata:
    """Record Author, Version and URL from the header region.

    Each field is searched on a throwaway cursor bounded to the lines before
    the Commentary marker. Without a marker there is no header region and
    nothing is recorded.
    """
    config = config or ConversionConfig()
    end = find_commentary(document, config)
    if end is None:
        return metadata
    metadata.has_header_region = True
    header = Cursor(document.lines).bounded(end)
    for field in DECLARED_FIELDS:
        pattern = _field_pattern(field, config)
        index = header.copy().find(pattern)
        if index is None:
            continue
        value = pattern.match(document.lines[index]).group(1)
        if field == "URL":
            value = f"[{value}]({value})"
        setattr(metadata, field.lower(), value)
    return metadata


def extract_metadata(
    document: SourceDocument,
    config: Optional[ConversionConfig] = None,
    cursor: Optional[Cursor] = None,
) -> Metadata:
    """Run title and field extraction once for a conversion."""
    metadata = Metadata()
    extract_title(cursor or Cursor(document.lines), metadata, config)
    extract_declared_fields(document, metadata, config)
    return metadata
