"""Short file previews for completion documentation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable

MAX_LINES = 20
HEAD_BYTES = 1024
BINARY_MESSAGE = "binary file"

_LINE_BREAKS = re.compile(r"[\r\n]+")


class MarkupKind(str, Enum):
    PLAINTEXT = "plaintext"
    MARKDOWN = "markdown"


@dataclass(frozen=True)
class Preview:
    kind: MarkupKind
    value: str


def build_preview(
    path: str,
    max_lines: int | None = MAX_LINES,
    filetype: Callable[[str], str | None] | None = None,
) -> Preview:
    """Render the head of a file.

    Reads at most HEAD_BYTES. A null byte marks the file as binary. When
    ``filetype`` knows the file's type the lines are fenced as Markdown code.
    OSError from opening or reading propagates to the caller.
    """
    with open(path, "rb") as f:
        head = f.read(HEAD_BYTES)

    if b"\0" in head:
        return Preview(MarkupKind.PLAINTEXT, BINARY_MESSAGE)

    text = head.decode("utf-8", errors="replace")
    lines = [line for line in _LINE_BREAKS.split(text) if line]
    if max_lines is not None:
        lines = lines[:max_lines]

    language = filetype(path) if filetype else None
    if not language:
        return Preview(MarkupKind.PLAINTEXT, "\n".join(lines))

    fenced = [f"```{language}", *lines, "```"]
    return Preview(MarkupKind.MARKDOWN, "\n".join(fenced))
