"""prompt_toolkit adapter around the path completion source."""

from __future__ import annotations

from typing import Any, Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from pathcomplete.core.patterns import partial_name
from pathcomplete.core.request import CompletionRequest
from pathcomplete.core.scanner import Candidate, ItemKind
from pathcomplete.core.source import PathSource


class PathCompleter(Completer):
    """Completer that offers filesystem entries for the path before the cursor."""

    def __init__(
        self,
        source: PathSource | None = None,
        option: dict[str, Any] | None = None,
        buffer_path: str | None = None,
        is_cmdline: bool = True,
    ) -> None:
        self._source = source or PathSource()
        self._option = option or {}
        self._buffer_path = buffer_path
        self._is_cmdline = is_cmdline

    def get_completions(
        self, document: Document, complete_event: Any
    ) -> Iterable[Completion]:
        text = document.text_before_cursor
        request = CompletionRequest(
            cursor_before_line=text,
            offset=len(text),
            buffer_path=self._buffer_path,
            is_cmdline=self._is_cmdline,
            option=self._option,
        )
        results: list[Candidate] = []
        self._source.complete(request, results.extend)

        partial = partial_name(text)
        for candidate in results:
            if not candidate.filter_text.startswith(partial):
                continue
            yield Completion(
                candidate.insert_text,
                start_position=-len(partial),
                display=candidate.label,
                display_meta=_meta(candidate),
            )


def _meta(candidate: Candidate) -> str:
    if candidate.data.type == "link":
        return "link"
    if candidate.kind is ItemKind.FOLDER:
        return "dir"
    return "file"
