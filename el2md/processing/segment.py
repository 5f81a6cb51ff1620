"""
Section segmentation and block classification for the Commentary body.

The body is walked once by a small state machine:

    scanning_header -> scanning_body <-> in_block
                           |   ^
                           v   |
                      in_license_skip

``done`` is reached at the Code marker or at the end of input. Each pass
through ``in_block`` produces one `Block`.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Literal, Optional

from el2md.core.constants import (
    BULLET_TEXT,
    HEADING_TEXT,
    INDENTED_TEXT,
    PAREN_TEXT,
    TAB_WIDTH,
    compile_line_patterns,
)
from el2md.core.models import Block, BlockKind, ConversionConfig, SourceDocument
from el2md.processing.cursor import Cursor
from el2md.processing.ingest import normalize_lines

logger = logging.getLogger(__name__)

ScanState = Literal["scanning_header", "scanning_body", "in_license_skip", "in_block", "done"]


class CommentarySegmenter:
    """Partition comment lines into classified blocks."""

    def __init__(self, config: Optional[ConversionConfig] = None) -> None:
        self.config = config or ConversionConfig()
        self.patterns = compile_line_patterns(self.config.canonical_marker)
        self.state: ScanState = "scanning_header"
        self._heading_seen = False

    def _comment_text(self, line: Optional[str]) -> Optional[str]:
        """Return the text after ``<prefix> ``, or ``None`` for non-comment lines."""
        if line is None:
            return None
        match = self.patterns["comment"].match(line.expandtabs(TAB_WIDTH))
        return match.group(2) if match else None

    def _is_marker(self, line: str) -> bool:
        return any(self.patterns[name].match(line) for name in ("commentary", "code", "license"))

    def _is_heading(self, cursor: Cursor) -> bool:
        """Colon-terminated line, then a blank line, then something that is not a list or code."""
        text = self._comment_text(cursor.peek())
        if text is None or HEADING_TEXT.match(text) is None:
            return False
        look = cursor.copy()
        look.advance()
        if not look.peek_matches(self.patterns["blank"]):
            return False
        look.skip_while(self.patterns["blank"])
        following = self._comment_text(look.peek())
        if following is None:
            return True
        return not (BULLET_TEXT.match(following) or PAREN_TEXT.match(following) or INDENTED_TEXT.match(following))

    @staticmethod
    def classify(text: str) -> BlockKind:
        """Kind of a non-heading block, decided from its first line."""
        if PAREN_TEXT.match(text) or INDENTED_TEXT.match(text):
            return "code_block"
        if BULLET_TEXT.match(text):
            return "bullet_list"
        return "paragraph"

    def _read_block(self, cursor: Cursor) -> Block:
        if self._is_heading(cursor):
            title = HEADING_TEXT.match(self._comment_text(cursor.peek())).group(1)
            level = 3 if self._heading_seen else 2
            self._heading_seen = True
            cursor.advance()
            return Block(kind="heading", lines=[title], level=level)

        kind = self.classify(self._comment_text(cursor.peek()))
        lines: List[str] = []
        while not cursor.at_end():
            line = cursor.peek()
            text = self._comment_text(line)
            if text is None or self.patterns["blank"].match(line):
                break
            if lines and self._is_marker(line):
                break
            lines.append(text)
            cursor.advance()
        return Block(kind=kind, lines=lines)

    def _step(self, cursor: Cursor, blocks: List[Block]) -> None:
        if self.state == "scanning_header":
            index = cursor.find(self.patterns["commentary"])
            if index is None:
                logger.debug("No Commentary marker; body is empty")
                self.state = "done"
                return
            cursor.advance(index - cursor.position + 1)
            self.state = "scanning_body"

        elif self.state == "scanning_body":
            cursor.skip_while(self.patterns["blank"])
            if cursor.at_end() or cursor.peek_matches(self.patterns["code"]):
                self.state = "done"
            elif cursor.peek_matches(self.patterns["license"]):
                cursor.advance()
                self.state = "in_license_skip"
            elif self._comment_text(cursor.peek()) is None:
                cursor.advance()
            else:
                self.state = "in_block"

        elif self.state == "in_license_skip":
            start = cursor.position
            while not cursor.at_end() and not cursor.peek_matches(self.patterns["top_level"]):
                cursor.advance()
            logger.debug("Skipped %d license lines", cursor.position - start)
            self.state = "scanning_body"

        elif self.state == "in_block":
            block = self._read_block(cursor)
            logger.debug("Block %s (%d lines) ending at line %d", block.kind, len(block.lines), cursor.position)
            blocks.append(block)
            self.state = "scanning_body"

    def run(self, cursor: Cursor, state: ScanState = "scanning_header") -> List[Block]:
        """Drive the state machine from ``state`` until ``done``."""
        self.state = state
        self._heading_seen = False
        blocks: List[Block] = []
        while self.state != "done":
            self._step(cursor, blocks)
        return blocks


def segment_document(document: SourceDocument, config: Optional[ConversionConfig] = None) -> List[Block]:
    """Classify the Commentary body of ``document``. No marker means no blocks."""
    segmenter = CommentarySegmenter(config)
    return segmenter.run(Cursor(document.lines))


def segment_body(lines: Iterable[str], config: Optional[ConversionConfig] = None) -> List[Block]:
    """Classify comment lines that are already known to form the body."""
    segmenter = CommentarySegmenter(config)
    normalized = normalize_lines(lines, segmenter.config.comment_markers)
    return segmenter.run(Cursor(normalized), state="scanning_body")
