"""
Core domain models for the comment-to-Markdown conversion.

Defines typed structures for the source document, extracted metadata,
classified blocks, inline spans, output tokens, and the conversion
configuration model.
"""

from __future__ import annotations

from typing import Any, Callable, List, Literal, Optional, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field

from el2md.core.constants import (
    DEFAULT_COMMENT_MARKERS,
    DEFAULT_FOOTER_TEMPLATE,
    DEFAULT_KEY_NAMES,
    DEFAULT_SOURCE_EXTENSION,
    DEFAULT_TOOL_NAME,
    DEFAULT_TOOL_URL,
)

BlockKind = Literal["heading", "paragraph", "bullet_list", "code_block"]
SpanKind = Literal["text", "code", "key"]
TokenKind = Literal["header", "blank", "text", "rule", "attribution"]


class ConversionConfig(BaseModel):
    """Settings for a conversion. Passed explicitly, never held globally."""

    translate_keys_within_symmetric_quotes: bool = False
    recognized_key_names: Set[str] = Field(default_factory=lambda: set(DEFAULT_KEY_NAMES))
    post_conversion_hooks: List[Callable[..., Any]] = Field(default_factory=list)
    comment_markers: str = Field(default=DEFAULT_COMMENT_MARKERS, min_length=1)
    source_extension: str = DEFAULT_SOURCE_EXTENSION
    tool_name: str = DEFAULT_TOOL_NAME
    tool_url: str = DEFAULT_TOOL_URL
    footer_template: str = DEFAULT_FOOTER_TEMPLATE
    template_dir: Optional[str] = None

    @property
    def canonical_marker(self) -> str:
        return self.comment_markers[0]


class SourceDocument(BaseModel):
    """The comment-bearing source file as an immutable sequence of lines."""

    model_config = ConfigDict(frozen=True)

    lines: Tuple[str, ...] = ()
    source_name: Optional[str] = None

    def __len__(self) -> int:
        return len(self.lines)


class Metadata(BaseModel):
    """Title and declared header fields. Absent fields stay ``None``."""

    title: Optional[str] = None
    package_name: Optional[str] = None
    author: Optional[str] = None
    version: Optional[str] = None
    url: Optional[str] = None
    has_header_region: bool = False

    def declared_fields(self) -> List[Tuple[str, str]]:
        """Return the present (field name, value) pairs in output order."""
        fields = [("Author", self.author), ("Version", self.version), ("URL", self.url)]
        return [(name, value) for name, value in fields if value is not None]


class Block(BaseModel):
    """A classified span of consecutive comment lines."""

    kind: BlockKind
    lines: List[str] = Field(default_factory=list)
    level: Optional[Literal[2, 3]] = None

    @property
    def is_bullet_list(self) -> bool:
        return self.kind == "bullet_list"


class InlineSpan(BaseModel):
    """One piece of a translated line."""

    kind: SpanKind
    content: str


class OutputToken(BaseModel):
    """A single emitted line of the Markdown output."""

    kind: TokenKind
    text: str = ""
