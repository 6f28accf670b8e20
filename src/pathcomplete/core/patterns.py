"""Trailing-path recognition for the text before the cursor."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

IS_WIN = os.name == "nt"

# One character of a file name: anything but separators and shell/quote specials.
NAME_CHARS = r"""[^/\\:*?<>'"`|]"""

# Last character of a directory segment: a name character that is not @, space, . or ~
_SEGMENT_END = r"""[^/\\:*?<>'"`|@ .~]"""

KEYWORD_PATTERN = NAME_CHARS + "*"

POSIX_TRIGGER_CHARACTERS: tuple[str, ...] = ("/", ".")
WINDOWS_TRIGGER_CHARACTERS: tuple[str, ...] = ("/", ".", "\\")


def build_path_pattern(windows: bool) -> re.Pattern[str]:
    """Compile the trailing-path regex for one platform flavour.

    The match starts at the first separator of the directory run and ends
    just after its last separator; the lookahead requires that only name
    characters follow up to the end of the text.
    """
    sep = r"[/\\]" if windows else "/"
    segment = rf"(?:{sep}{NAME_CHARS}*{_SEGMENT_END}|/\.\.)"
    return re.compile(rf"{segment}*{sep}(?={NAME_CHARS}*\Z)")


POSIX_PATH_PATTERN = build_path_pattern(windows=False)
WINDOWS_PATH_PATTERN = build_path_pattern(windows=True)

PATH_PATTERN = WINDOWS_PATH_PATTERN if IS_WIN else POSIX_PATH_PATTERN
TRIGGER_CHARACTERS = WINDOWS_TRIGGER_CHARACTERS if IS_WIN else POSIX_TRIGGER_CHARACTERS

_PARTIAL_NAME = re.compile(KEYWORD_PATTERN + r"\Z")


@dataclass(frozen=True)
class PathBoundary:
    """Where the directory prefix ends and the partial name begins."""

    start: int  # offset of the first separator of the run
    end: int  # offset just after the last separator
    partial: str


def find_path_boundary(
    text: str, pattern: re.Pattern[str] = PATH_PATTERN
) -> PathBoundary | None:
    """Locate the trailing path run of ``text``, or None if there is none."""
    match = pattern.search(text)
    if match is None:
        return None
    return PathBoundary(start=match.start(), end=match.end(), partial=text[match.end():])


def partial_name(text: str) -> str:
    """Return the run of name characters that ends ``text``."""
    match = _PARTIAL_NAME.search(text)
    return match.group() if match else ""


def strip_partial_name(text: str) -> str:
    """Drop the trailing name characters, keeping everything up to the last separator."""
    return text[: len(text) - len(partial_name(text))]
