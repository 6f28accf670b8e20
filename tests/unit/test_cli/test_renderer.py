"""Tests for Renderer — previews and listings."""

from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from pathcomplete.cli.renderer import Renderer
from pathcomplete.core.preview import MarkupKind, Preview
from pathcomplete.core.scanner import Candidate, CandidateData, ItemKind


@pytest.fixture
def captured_renderer():
    """Create a Renderer that writes to a string buffer for assertion."""
    buf = StringIO()
    console = Console(file=buf, force_terminal=False, width=120)
    renderer = Renderer(console)
    return renderer, buf


def _candidate(name: str, kind: ItemKind, fs_type: str) -> Candidate:
    label = name + "/" if kind is ItemKind.FOLDER else name
    return Candidate(
        label=label,
        filter_text=name,
        insert_text=label,
        kind=kind,
        data=CandidateData(path="/x/" + name, type=fs_type),
    )


class TestPreview:
    def test_plain_preview(self, captured_renderer):
        renderer, buf = captured_renderer
        renderer.preview(Preview(MarkupKind.PLAINTEXT, "hello\nworld"), title="/x/notes")
        output = buf.getvalue()
        assert "hello" in output
        assert "world" in output
        assert "/x/notes" in output

    def test_markdown_preview_renders_code(self, captured_renderer):
        renderer, buf = captured_renderer
        renderer.preview(Preview(MarkupKind.MARKDOWN, "```python\nx = 1\n```"))
        output = buf.getvalue()
        assert "x = 1" in output
        assert "```" not in output


class TestListing:
    def test_labels_printed(self, captured_renderer):
        renderer, buf = captured_renderer
        renderer.listing([
            _candidate("src", ItemKind.FOLDER, "directory"),
            _candidate("README.md", ItemKind.FILE, "file"),
        ])
        output = buf.getvalue()
        assert "src/" in output
        assert "README.md" in output

    def test_empty_listing(self, captured_renderer):
        renderer, buf = captured_renderer
        renderer.listing([])
        assert "(empty)" in buf.getvalue()

    def test_error(self, captured_renderer):
        renderer, buf = captured_renderer
        renderer.error("boom")
        assert "Error: boom" in buf.getvalue()
