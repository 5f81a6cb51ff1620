"""
Markdown emission: title, formal metadata, classified blocks and the
attribution footer. The footer is rendered from a Jinja2 template.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from el2md.core.constants import CODE_INDENT, METADATA_LINE_BREAK, TRAILING_PERIODS
from el2md.core.models import Block, ConversionConfig, Metadata, SourceDocument
from el2md.processing.cursor import Cursor
from el2md.processing.inline import translate_line
from el2md.processing.metadata import extract_metadata
from el2md.processing.segment import segment_body, segment_document
from el2md.rendering.sinks import MarkdownSink

logger = logging.getLogger(__name__)


def strip_trailing_periods(text: str) -> str:
    """Remove trailing periods (and the whitespace around them) from a heading."""
    return TRAILING_PERIODS.sub("", text)


def _env(template_dir: Optional[str] = None) -> Environment:
    dir_path = Path(template_dir) if template_dir else Path(__file__).parent / "templates"
    return Environment(
        loader=FileSystemLoader(str(dir_path)),
        autoescape=select_autoescape([]),
    )


def render_footer(source_name: Optional[str], config: Optional[ConversionConfig] = None) -> str:
    config = config or ConversionConfig()
    template = _env(config.template_dir).get_template(config.footer_template)
    return template.render(
        source_name=source_name,
        tool_name=config.tool_name,
        tool_url=config.tool_url,
    ).strip()


def _code_lines(lines: List[str]) -> List[str]:
    """Drop the indentation shared by all lines of a code block."""
    indents = [len(line) - len(line.lstrip(" ")) for line in lines if line.strip()]
    common = min(indents) if indents else 0
    return [line[common:] for line in lines]


def emit_block(sink: MarkdownSink, block: Block, config: ConversionConfig) -> None:
    if block.kind == "heading":
        sink.header(block.level or 3, translate_line(strip_trailing_periods(block.lines[0]), config))
    elif block.kind == "code_block":
        for line in _code_lines(block.lines):
            sink.text(CODE_INDENT + translate_line(line, config))
    elif block.kind == "bullet_list":
        for line in block.lines:
            sink.text(translate_line(line.rstrip(), config))
    else:
        for line in block.lines:
            sink.text(translate_line(line.strip(), config))


def emit_blocks(sink: MarkdownSink, blocks: Iterable[Block], config: Optional[ConversionConfig] = None) -> None:
    """Emit blocks separated by one blank line, none between two bullet lists."""
    config = config or ConversionConfig()
    previous: Optional[Block] = None
    for block in blocks:
        if previous is not None and not (previous.is_bullet_list and block.is_bullet_list):
            sink.blank()
        emit_block(sink, block, config)
        previous = block


def emit_metadata(sink: MarkdownSink, metadata: Metadata, config: ConversionConfig) -> None:
    title = strip_trailing_periods(metadata.title or "")
    if title:
        sink.header(1, translate_line(title, config))
        sink.blank()
    if metadata.has_header_region:
        for name, value in metadata.declared_fields():
            sink.text(f"*{name}:* {value}{METADATA_LINE_BREAK}")
        sink.blank()


def run_hooks(sink: MarkdownSink, config: ConversionConfig) -> None:
    """Call each post-conversion hook in registration order. Failures propagate."""
    for hook in config.post_conversion_hooks:
        logger.debug("Running post-conversion hook %r", hook)
        hook(sink)


def emit_document(document: SourceDocument, config: Optional[ConversionConfig] = None) -> MarkdownSink:
    """Convert ``document`` into a filled `MarkdownSink` and run the hooks."""
    config = config or ConversionConfig()
    sink = MarkdownSink()
    metadata = extract_metadata(document, config, Cursor(document.lines))
    emit_metadata(sink, metadata, config)
    blocks = segment_document(document, config)
    emit_blocks(sink, blocks, config)
    sink.blank()
    sink.rule()
    sink.attribution(render_footer(document.source_name, config))
    logger.debug("Emitted %d tokens from %d blocks", len(sink), len(blocks))
    run_hooks(sink, config)
    return sink


def render_markdown(document: SourceDocument, config: Optional[ConversionConfig] = None) -> str:
    return emit_document(document, config).getvalue()


def render_body(lines: Iterable[str], config: Optional[ConversionConfig] = None) -> str:
    """Render a bare Commentary body, without title, metadata or footer."""
    config = config or ConversionConfig()
    sink = MarkdownSink()
    emit_blocks(sink, segment_body(lines, config), config)
    return sink.getvalue()
