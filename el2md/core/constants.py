"""
Core Constants Module.

This module defines the section markers, default settings and line patterns
used across the application.
"""

import re
from typing import Dict

# Comment syntax
DEFAULT_COMMENT_MARKERS = ";"
DEFAULT_SOURCE_EXTENSION = "el"

# Section markers, written without their comment prefix
COMMENTARY_MARKER = "Commentary:"
CODE_MARKER = "Code:"
LICENSE_MARKER = "License:"

# Header fields, in the order they are emitted
DECLARED_FIELDS = ("Author", "Version", "URL")

# Inline translation
DEFAULT_KEY_NAMES = frozenset({"RET", "TAB"})
KEY_MODIFIERS = "CMSsHA"

# Attribution
DEFAULT_TOOL_NAME = "el2md"
DEFAULT_TOOL_URL = "https://gitlab.com/thomasluquet/el2md"
DEFAULT_FOOTER_TEMPLATE = "footer.md.j2"

# Markdown output
CODE_INDENT = "    "
METADATA_LINE_BREAK = "<br>"
HORIZONTAL_RULE = "---"

# Minimum indentation (beyond "<prefix> ") that marks a line as code
CODE_INDENT_WIDTH = 4

# Tabs in comments expand to this many columns, as in Emacs by default
TAB_WIDTH = 8


def compile_line_patterns(marker: str = DEFAULT_COMMENT_MARKERS[0]) -> Dict[str, re.Pattern]:
    """
    Build the line patterns for a canonical comment character.

    Every pattern expects a line whose comment prefix has already been
    normalized to ``marker``.

    Args:
        marker: Canonical comment character

    Returns:
        Dictionary of compiled patterns keyed by name
    """
    m = re.escape(marker)
    return {
        # Any comment line: group 1 is the prefix, group 2 the text after one space
        "comment": re.compile(rf"^({m}{{2,}}) ?(.*)$"),
        # Prefix alone, optionally followed by a folding marker such as {{{ or }}}2
        "blank": re.compile(rf"^(?:{m}{{2,}} *(?:(?:\{{+|\}}+)[0-9]*)? *|\s*)$"),
        "top_level": re.compile(rf"^{m}{{3}}"),
        "commentary": re.compile(rf"^{m}{{3}} {re.escape(COMMENTARY_MARKER)}$"),
        "code": re.compile(rf"^{m}{{3}} {re.escape(CODE_MARKER)}$"),
        "license": re.compile(rf"^{m}{{3}} {re.escape(LICENSE_MARKER)}$"),
    }


# Patterns applied to the text that follows "<prefix> "
HEADING_TEXT = re.compile(r"^(?![-*(\s])(.*\S):$")
BULLET_TEXT = re.compile(r"^ {0,3}[-*](?:\s|$)")
PAREN_TEXT = re.compile(r"^ *\(")
INDENTED_TEXT = re.compile(rf"^ {{{CODE_INDENT_WIDTH},}}\S")
MODE_LINE = re.compile(r"\s*-\*-.*-\*-\s*$")
TRAILING_PERIODS = re.compile(r"[.\s]+$")
