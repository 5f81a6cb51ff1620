"""
Inline translation of quoted spans within a single line.

Emacs documentation quotes symbols as `like-this'. Each such span becomes
either a keyboard tag (for key chords and named keys) or a Markdown code
span with symmetric backticks.
"""

from __future__ import annotations

import re
from typing import AbstractSet, List, Optional

from el2md.core.constants import KEY_MODIFIERS
from el2md.core.models import ConversionConfig, InlineSpan

ASYMMETRIC_SPAN = re.compile(r"`([^`'\n]+)'")
SYMMETRIC_SPAN = re.compile(r"`([^`'\n]+)[`']")
KEY_CHORD = re.compile(rf"^(?:[{KEY_MODIFIERS}]-)+\S")
# s.el style symbols: a lone super modifier followed by a multi-character word
SUPER_SYMBOL = re.compile(r"^s-([^\s<-][^\s-]+)")


def _span_pattern(config: ConversionConfig) -> re.Pattern:
    if config.translate_keys_within_symmetric_quotes:
        return SYMMETRIC_SPAN
    return ASYMMETRIC_SPAN


def is_key_name(content: str, key_names: AbstractSet[str]) -> bool:
    """True for modifier chords such as ``C-x C-f`` and for recognized key names.

    ``s-<key>`` is a chord only when the key is a single character, a
    ``<...>`` key or a recognized key name, so ``s-join`` stays a symbol.
    """
    if content in key_names:
        return True
    symbol = SUPER_SYMBOL.match(content)
    if symbol is not None and symbol.group(1) not in key_names:
        return False
    return KEY_CHORD.match(content) is not None


def tokenize_inline(text: str, config: Optional[ConversionConfig] = None) -> List[InlineSpan]:
    """Split ``text`` into plain, code and key spans."""
    config = config or ConversionConfig()
    spans: List[InlineSpan] = []
    pos = 0
    for match in _span_pattern(config).finditer(text):
        if match.start() > pos:
            spans.append(InlineSpan(kind="text", content=text[pos : match.start()]))
        content = match.group(1)
        kind = "key" if is_key_name(content, config.recognized_key_names) else "code"
        spans.append(InlineSpan(kind=kind, content=content))
        pos = match.end()
    if pos < len(text):
        spans.append(InlineSpan(kind="text", content=text[pos:]))
    return spans


def render_span(span: InlineSpan) -> str:
    if span.kind == "key":
        return f"<kbd>{span.content}</kbd>"
    if span.kind == "code":
        return f"`{span.content}`"
    return span.content


def translate_line(text: str, config: Optional[ConversionConfig] = None) -> str:
    """Rewrite every quoted span in ``text`` as Markdown."""
    return "".join(render_span(span) for span in tokenize_inline(text, config))
