"""Completion source: fans a request out over path aliases and merges the results."""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Iterator

from pathcomplete.core.config import FOLDER_PLACEHOLDER, CompletionOption, validate_option
from pathcomplete.core.host import EditorHost, LocalHost
from pathcomplete.core.patterns import (
    IS_WIN,
    KEYWORD_PATTERN,
    POSIX_TRIGGER_CHARACTERS,
    WINDOWS_TRIGGER_CHARACTERS,
)
from pathcomplete.core.preview import MAX_LINES, build_preview
from pathcomplete.core.request import CompletionRequest, SingleShot
from pathcomplete.core.resolver import PrefixResolver, has_alias
from pathcomplete.core.scanner import Candidate, DirectoryScanner, ScanError

logger = logging.getLogger(__name__)


class PathSource:
    """Filesystem path completion source.

    Results are delivered through a callback that is invoked exactly once
    per request. Ordinary failures (no path context, missing alias target,
    unreadable directory) shrink the result instead of raising.
    """

    def __init__(
        self,
        host: EditorHost | None = None,
        windows: bool = IS_WIN,
        max_lines: int | None = MAX_LINES,
    ) -> None:
        self.host = host or LocalHost()
        self.resolver = PrefixResolver(self.host, windows=windows)
        self.max_lines = max_lines
        self._trigger_characters = (
            WINDOWS_TRIGGER_CHARACTERS if windows else POSIX_TRIGGER_CHARACTERS
        )

    def trigger_characters(self) -> list[str]:
        return list(self._trigger_characters)

    def keyword_pattern(self) -> str:
        return KEYWORD_PATTERN

    def complete(
        self, request: CompletionRequest, callback: Callable[[list[Candidate]], Any]
    ) -> None:
        """Collect candidates for ``request`` and hand them to ``callback``.

        Raises pydantic.ValidationError for a malformed ``request.option``;
        that is a host configuration error and is not absorbed.
        """
        deliver = SingleShot(callback)
        option = validate_option(request.option)

        candidates: list[Candidate] = []
        seen: set[str] = set()
        for alias, target in self._aliases(request, option):
            for candidate in self.get_candidates(request, option, alias, target):
                if candidate.data.path in seen:
                    continue
                seen.add(candidate.data.path)
                candidates.append(candidate)

        deliver(candidates)

    def get_candidates(
        self,
        request: CompletionRequest,
        option: CompletionOption,
        alias: str | None = None,
        alias_target: str | None = None,
    ) -> list[Candidate]:
        """Candidates for one alias, or for the plain line when ``alias`` is None."""
        resolution = self.resolver.resolve(request, option, alias, alias_target)
        if resolution is None:
            return []

        include_hidden = resolution.partial.startswith(".")
        try:
            return DirectoryScanner(option).scan(resolution.directory, include_hidden)
        except ScanError as e:
            logger.debug("%s", e)
            return []

    def resolve(self, candidate: Candidate, callback: Callable[[Candidate], Any]) -> None:
        """Attach a preview to file candidates, then hand the candidate back."""
        deliver = SingleShot(callback)
        data = candidate.data
        if data.stat is not None and data.type == "file":
            try:
                candidate.documentation = build_preview(
                    data.path, self.max_lines, self.host.filetype
                )
            except Exception:
                logger.debug("Preview failed for %s", data.path, exc_info=True)
        deliver(candidate)

    def _aliases(
        self, request: CompletionRequest, option: CompletionOption
    ) -> Iterator[tuple[str | None, str | None]]:
        """Yield (alias, expanded target) pairs to complete against.

        An alias only takes part when its quoted token appears in the line.
        The plain, un-aliased line is used when no alias token appears.
        Presence is a substring test, so overlapping names such as "@" and
        "@d" both take part for a line containing "'@d"; dedup by path
        merges whatever they have in common.
        """
        line = request.cursor_before_line[: request.cursor_offset]
        present = [alias for alias in option.path_mappings if has_alias(line, alias)]
        if not present:
            yield None, None
            return

        cwd = self.host.getcwd()
        for alias in present:
            target = option.path_mappings[alias].replace(FOLDER_PLACEHOLDER, cwd)
            if not os.path.isdir(target):
                logger.debug("Skipping alias %s: %s is not a directory", alias, target)
                continue
            yield alias, target
