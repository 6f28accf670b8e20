"""Directory listing and completion candidate construction."""

from __future__ import annotations

import logging
import os
import stat as stat_module
from dataclasses import dataclass
from enum import Enum

from pathcomplete.core.config import CompletionOption
from pathcomplete.core.preview import Preview

logger = logging.getLogger(__name__)

SEPARATOR = "/"


class ItemKind(str, Enum):
    FILE = "file"
    FOLDER = "folder"


@dataclass(frozen=True)
class CandidateData:
    """Filesystem facts about one candidate."""

    path: str
    type: str  # "file", "directory", "link", "fifo", "socket", "char", "block", "unknown"
    stat: os.stat_result | None = None
    lstat: os.stat_result | None = None


@dataclass
class Candidate:
    """One directory entry offered as a completion."""

    label: str
    filter_text: str
    insert_text: str
    kind: ItemKind
    data: CandidateData
    word: str | None = None
    documentation: Preview | None = None


class ScanError(Exception):
    """A directory could not be listed."""

    def __init__(self, directory: str, reason: OSError | ValueError) -> None:
        super().__init__(f"Cannot scan {directory}: {reason}")
        self.directory = directory
        self.reason = reason


def file_type(mode: int) -> str:
    """Name the kind of inode described by a stat mode."""
    if stat_module.S_ISDIR(mode):
        return "directory"
    if stat_module.S_ISREG(mode):
        return "file"
    if stat_module.S_ISLNK(mode):
        return "link"
    if stat_module.S_ISFIFO(mode):
        return "fifo"
    if stat_module.S_ISSOCK(mode):
        return "socket"
    if stat_module.S_ISCHR(mode):
        return "char"
    if stat_module.S_ISBLK(mode):
        return "block"
    return "unknown"


class DirectoryScanner:
    """Lists a directory as completion candidates, in enumeration order."""

    def __init__(self, option: CompletionOption) -> None:
        self.option = option

    def scan(self, dirname: str, include_hidden: bool = False) -> list[Candidate]:
        """Build candidates for every visible entry of ``dirname``.

        Raises ScanError if the directory is missing or unreadable.
        """
        candidates: list[Candidate] = []
        try:
            with os.scandir(dirname) as entries:
                for entry in entries:
                    candidate = self._create_candidate(dirname, entry, include_hidden)
                    if candidate is not None:
                        candidates.append(candidate)
        except (OSError, ValueError) as e:
            raise ScanError(dirname, e) from e
        return candidates

    def _create_candidate(
        self, dirname: str, entry: os.DirEntry[str], include_hidden: bool
    ) -> Candidate | None:
        name = entry.name
        if name.startswith(".") and not include_hidden:
            return None

        path = os.path.join(dirname, name)
        lstat = None
        try:
            st = os.stat(path)
            fs_type = file_type(st.st_mode)
        except OSError:
            st = None
            if not _is_symlink(entry):
                return None
            # Broken symlink: describe the link itself
            try:
                lstat = os.lstat(path)
            except OSError:
                logger.debug("Skipping unreadable entry %s", path)
                return None
            fs_type = "link"

        data = CandidateData(path=path, type=fs_type, stat=st, lstat=lstat)
        if fs_type == "directory":
            return self._directory_candidate(name, data)
        return Candidate(
            label=name,
            filter_text=name,
            insert_text=name,
            kind=ItemKind.FILE,
            data=data,
        )

    def _directory_candidate(self, name: str, data: CandidateData) -> Candidate:
        label = name + SEPARATOR if self.option.label_trailing_slash else name
        return Candidate(
            label=label,
            filter_text=name,
            insert_text=name + SEPARATOR,
            kind=ItemKind.FOLDER,
            data=data,
            word=None if self.option.trailing_slash else name,
        )


def _is_symlink(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_symlink()
    except OSError:
        return False
