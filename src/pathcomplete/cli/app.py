"""Interactive prompt with path completion and file previews."""

from __future__ import annotations

import sys
from typing import Any

from prompt_toolkit import PromptSession
from rich.console import Console

from pathcomplete.cli.completer import PathCompleter
from pathcomplete.cli.renderer import Renderer
from pathcomplete.core.patterns import partial_name
from pathcomplete.core.request import CompletionRequest
from pathcomplete.core.scanner import Candidate, ItemKind
from pathcomplete.core.source import PathSource

BANNER = """[bold blue] pathcomplete [/bold blue][dim]- type a path, Tab to complete, Enter to preview[/dim]
[dim]Ctrl-D or /exit to quit[/dim]
"""


def handle_line(
    line: str, source: PathSource, option: dict[str, Any], renderer: Renderer
) -> None:
    """List the directory a line points into, or preview the entry it names."""
    request = CompletionRequest(cursor_before_line=line, is_cmdline=True, option=option)
    results: list[Candidate] = []
    source.complete(request, results.extend)

    name = partial_name(line)
    if not name:
        renderer.listing(results)
        return

    match = next((c for c in results if c.filter_text == name), None)
    if match is None:
        renderer.error(f"No such entry: {name}")
        return
    if match.kind is ItemKind.FOLDER:
        renderer.info(f"{match.data.path} is a directory; add a trailing / to list it")
        return

    def show(candidate: Candidate) -> None:
        if candidate.documentation is None:
            renderer.info(f"No preview for {candidate.data.path}")
        else:
            renderer.preview(candidate.documentation, title=candidate.data.path)

    source.resolve(match, show)


def run_cli(option: dict[str, Any] | None = None, max_lines: int | None = None) -> None:
    """Main REPL loop."""
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    console = Console()
    renderer = Renderer(console)
    option = option or {}
    source = PathSource() if max_lines is None else PathSource(max_lines=max_lines)

    session: PromptSession[str] = PromptSession(
        completer=PathCompleter(source, option=option),
        complete_while_typing=True,
    )
    console.print(BANNER)

    while True:
        try:
            line = session.prompt("path> ")
        except KeyboardInterrupt:
            continue
        except EOFError:
            break
        if line.strip() == "/exit":
            break
        if not line.strip():
            continue
        handle_line(line, source, option, renderer)
