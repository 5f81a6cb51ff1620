"""
Output sinks: an append-only token buffer and writers that persist it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

from el2md.core.constants import HORIZONTAL_RULE
from el2md.core.models import OutputToken
from el2md.core.utils import write_file_contents

logger = logging.getLogger(__name__)


class MarkdownSink:
    """Append-only sequence of output tokens.

    Consecutive blank lines collapse into one and a blank line is never the
    first token.
    """

    def __init__(self) -> None:
        self._tokens: List[OutputToken] = []

    @property
    def tokens(self) -> List[OutputToken]:
        return list(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def append(self, token: OutputToken) -> None:
        if token.kind == "blank" and (not self._tokens or self._tokens[-1].kind == "blank"):
            return
        self._tokens.append(token)

    def header(self, level: int, text: str) -> None:
        self.append(OutputToken(kind="header", text=f"{'#' * level} {text}"))

    def text(self, line: str) -> None:
        self.append(OutputToken(kind="text", text=line))

    def blank(self) -> None:
        self.append(OutputToken(kind="blank"))

    def rule(self) -> None:
        self.append(OutputToken(kind="rule", text=HORIZONTAL_RULE))

    def attribution(self, line: str) -> None:
        self.append(OutputToken(kind="attribution", text=line))

    def getvalue(self) -> str:
        """Render the tokens as Markdown text ending in a newline."""
        if not self._tokens:
            return ""
        return "\n".join(token.text for token in self._tokens) + "\n"


def write_sink_to_file(
    sink: MarkdownSink,
    path: Union[str, Path],
    overwrite: bool = False,
    encoding: str = "utf-8",
) -> Path:
    """
    Write the rendered sink to ``path``.

    Args:
        sink: Sink holding the converted document
        path: Destination file
        overwrite: Replace an existing file instead of refusing
        encoding: Output encoding

    Returns:
        Path: The written file

    Raises:
        FileExistsError: If ``path`` exists and ``overwrite`` is false
    """
    out_path = Path(path)
    if out_path.exists() and not overwrite:
        raise FileExistsError(f"{out_path} already exists")
    write_file_contents(out_path, sink.getvalue(), encoding=encoding)
    logger.info("Wrote %d lines to %s", len(sink), out_path)
    return out_path
