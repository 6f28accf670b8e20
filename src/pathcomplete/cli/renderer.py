"""Rich-based output rendering for the CLI."""

from __future__ import annotations

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.text import Text

from pathcomplete.core.preview import MarkupKind, Preview
from pathcomplete.core.scanner import Candidate, ItemKind


class Renderer:
    """Renders previews and listings to the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def preview(self, preview: Preview, title: str = "") -> None:
        """Render a file preview, highlighting fenced code."""
        if preview.kind is MarkupKind.MARKDOWN:
            body = Markdown(preview.value)
        else:
            body = Text(preview.value)
        self.console.print(Panel(body, title=title or None, border_style="blue", expand=False))

    def listing(self, candidates: list[Candidate]) -> None:
        """Print candidate labels, directories highlighted."""
        if not candidates:
            self.info("(empty)")
            return
        line = Text()
        for i, candidate in enumerate(candidates):
            if i:
                line.append("  ")
            style = "bold blue" if candidate.kind is ItemKind.FOLDER else ""
            if candidate.data.type == "link":
                style = "red"
            line.append(candidate.label, style=style)
        self.console.print(line)

    def error(self, message: str) -> None:
        """Display an error message."""
        self.console.print(Text(f"Error: {message}", style="bold red"))

    def info(self, message: str) -> None:
        """Display an info message."""
        self.console.print(Text(message, style="dim"))
