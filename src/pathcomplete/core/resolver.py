"""Classify the text before a path separator and resolve its base directory."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from pathcomplete.core.config import CompletionOption
from pathcomplete.core.host import EditorHost
from pathcomplete.core.patterns import (
    IS_WIN,
    POSIX_PATH_PATTERN,
    WINDOWS_PATH_PATTERN,
    find_path_boundary,
    strip_partial_name,
)
from pathcomplete.core.request import CompletionRequest

logger = logging.getLogger(__name__)


class Strategy(str, Enum):
    """How a prefix anchors the path being typed."""

    PARENT = "parent"
    CURRENT = "current"
    QUOTED = "quoted"
    HOME = "home"
    ENV = "env"
    DRIVE = "drive"
    ROOT = "root"


@dataclass(frozen=True)
class Classification:
    strategy: Strategy
    name: str = ""  # variable name for ENV, drive for DRIVE


@dataclass(frozen=True)
class Resolution:
    """An absolute directory plus the partial name typed after it."""

    directory: str
    partial: str
    strategy: Strategy


_PARENT = re.compile(r"\.\.[/\\]\Z")
_CURRENT = re.compile(r"\.[/\\]\Z")
_QUOTED = re.compile(r"""['"][/\\]\Z""")
_HOME = re.compile(r"~[/\\]\Z")
_ENV_DOLLAR = re.compile(r"\$([A-Za-z_]\w*)[/\\]\Z")
_ENV_BRACED = re.compile(r"\$\{([A-Za-z_]\w*)\}[/\\]\Z")
_ENV_PERCENT = re.compile(r"%([A-Za-z_]\w*)%[/\\]\Z")
_DRIVE = re.compile(r"([A-Za-z]:)[/\\]\Z")

# Bare "/" false positives. Best-effort only: these can both miss and over-fire.
_URL_COMPONENT = re.compile(r"[A-Za-z]/\Z")
_URL_SCHEME = re.compile(r"[A-Za-z]+:/{1,2}\Z")
_HTML_CLOSING_TAG = re.compile(r"</\Z")
_DIVISION = re.compile(r"[\d)]\s*/\Z")
_ONLY_SLASHES = re.compile(r"[\s/]*\Z")


class PrefixResolver:
    """Turns the text before the cursor into an absolute directory.

    Prefix classification is an ordered table of (strategy, predicate) pairs;
    the first predicate that matches decides how the directory is resolved.
    """

    def __init__(self, host: EditorHost, windows: bool = IS_WIN) -> None:
        self.host = host
        self.windows = windows
        self.pattern = WINDOWS_PATH_PATTERN if windows else POSIX_PATH_PATTERN
        self._rules: list[
            tuple[Strategy, Callable[[str, CompletionRequest], Classification | None]]
        ] = [
            (Strategy.PARENT, self._match(_PARENT, Strategy.PARENT)),
            (Strategy.CURRENT, self._match(_CURRENT, Strategy.CURRENT)),
            (Strategy.QUOTED, self._match(_QUOTED, Strategy.QUOTED)),
            (Strategy.HOME, self._match(_HOME, Strategy.HOME)),
            (Strategy.ENV, self._match_env),
            (Strategy.DRIVE, self._match_drive),
            (Strategy.ROOT, self._match_root),
        ]

    @property
    def strategies(self) -> list[Strategy]:
        """Strategies in the order they are tried."""
        return [strategy for strategy, _ in self._rules]

    def resolve(
        self,
        request: CompletionRequest,
        option: CompletionOption,
        alias: str | None = None,
        alias_target: str | None = None,
    ) -> Resolution | None:
        """Resolve the request's line to a directory, or None if it is not a path."""
        line = request.cursor_before_line[: request.cursor_offset]
        if alias is not None and alias_target is not None:
            line = substitute_alias(line, alias, alias_target)

        boundary = find_path_boundary(line, self.pattern)
        if boundary is None:
            return None

        prefix = line[: boundary.start + 1]
        dirname = strip_partial_name(line[boundary.start + 1:])

        classification = self.classify(prefix, request)
        if classification is None:
            return None

        directory = self._directory(classification, dirname, request, option)
        if directory is None:
            return None
        return Resolution(
            directory=directory,
            partial=boundary.partial,
            strategy=classification.strategy,
        )

    def classify(self, prefix: str, request: CompletionRequest) -> Classification | None:
        """Return the first strategy whose predicate accepts ``prefix``."""
        for _, predicate in self._rules:
            classification = predicate(prefix, request)
            if classification is not None:
                return classification
        return None

    def _directory(
        self,
        classification: Classification,
        dirname: str,
        request: CompletionRequest,
        option: CompletionOption,
    ) -> str | None:
        strategy = classification.strategy
        if strategy is Strategy.PARENT:
            return _canonical(self._base_directory(request, option), "..", dirname)
        if strategy is Strategy.CURRENT:
            return _canonical(self._base_directory(request, option), dirname)
        if strategy is Strategy.HOME:
            return _canonical(self.host.home(), dirname)
        if strategy is Strategy.ENV:
            value = self.host.getenv(classification.name)
            if value is None:
                logger.debug("Environment variable %s is not set", classification.name)
                return None
            return _canonical(value, dirname)
        if strategy is Strategy.DRIVE:
            return _canonical(classification.name + "/", dirname)
        # QUOTED and ROOT both anchor at the filesystem root
        return _canonical("/", dirname)

    def _base_directory(self, request: CompletionRequest, option: CompletionOption) -> str:
        if request.is_cmdline:
            return self.host.getcwd()
        return option.get_cwd(request)

    @staticmethod
    def _match(
        pattern: re.Pattern[str], strategy: Strategy
    ) -> Callable[[str, CompletionRequest], Classification | None]:
        def predicate(prefix: str, request: CompletionRequest) -> Classification | None:
            if pattern.search(prefix):
                return Classification(strategy)
            return None

        return predicate

    def _match_env(self, prefix: str, request: CompletionRequest) -> Classification | None:
        patterns = [_ENV_DOLLAR]
        if not request.is_cmdline:
            patterns.append(_ENV_BRACED)
            if self.windows:
                patterns.append(_ENV_PERCENT)
        for pattern in patterns:
            match = pattern.search(prefix)
            if match:
                return Classification(Strategy.ENV, match.group(1))
        return None

    def _match_drive(self, prefix: str, request: CompletionRequest) -> Classification | None:
        if not self.windows or request.is_cmdline:
            return None
        match = _DRIVE.search(prefix)
        if match:
            return Classification(Strategy.DRIVE, match.group(1))
        return None

    def _match_root(self, prefix: str, request: CompletionRequest) -> Classification | None:
        if not prefix.endswith("/"):
            return None
        if looks_like_false_root(prefix):
            return None
        if _ONLY_SLASHES.match(prefix) and self.host.is_slash_comment(request):
            return None
        return Classification(Strategy.ROOT)


def looks_like_false_root(prefix: str) -> bool:
    """Textual heuristics for a "/" that is probably not the filesystem root."""
    return bool(
        _URL_COMPONENT.search(prefix)
        or _URL_SCHEME.search(prefix)
        or _HTML_CLOSING_TAG.search(prefix)
        or _DIVISION.search(prefix)
    )


def substitute_alias(line: str, alias: str, target: str) -> str:
    """Replace every quoted occurrence of ``alias`` with ``target``."""
    return line.replace("'" + alias, "'" + target).replace('"' + alias, '"' + target)


def has_alias(line: str, alias: str) -> bool:
    return ("'" + alias) in line or ('"' + alias) in line


def _canonical(base: str, *parts: str) -> str | None:
    try:
        return os.path.realpath(os.path.join(base, *parts))
    except ValueError:
        # embedded NUL
        logger.debug("Unresolvable path %r", os.path.join(base, *parts))
        return None
