"""Tests for the local host implementation."""

import os

from pathcomplete.core.host import COMMENT_STRINGS, LocalHost
from pathcomplete.core.request import CompletionRequest, SingleShot


class TestLocalHost:
    def setup_method(self):
        self.host = LocalHost()

    def test_cwd_and_home(self):
        assert self.host.getcwd() == os.getcwd()
        assert self.host.home() == os.path.expanduser("~")

    def test_getenv(self, monkeypatch):
        monkeypatch.setenv("PC_HOST_VAR", "/x")
        monkeypatch.delenv("PC_HOST_MISSING", raising=False)
        assert self.host.getenv("PC_HOST_VAR") == "/x"
        assert self.host.getenv("PC_HOST_MISSING") is None

    def test_filetype_from_extension(self):
        assert self.host.filetype("/src/main.py") == "python"

    def test_no_filetype_without_extension(self):
        assert self.host.filetype("/src/Makefile.unknownext") is None
        assert self.host.filetype("/src/LICENSE") is None

    def test_slash_comment_language(self):
        assert self.host.is_slash_comment(CompletionRequest("//", buffer_path="/src/main.c"))

    def test_hash_comment_language(self):
        assert not self.host.is_slash_comment(CompletionRequest("//", buffer_path="/src/main.py"))

    def test_unnamed_buffer_has_no_comment(self):
        assert not self.host.is_slash_comment(CompletionRequest("//"))

    def test_comment_table_shapes(self):
        assert all("%s" in value for value in COMMENT_STRINGS.values())


class TestSingleShot:
    def test_first_call_delivered(self):
        received = []
        deliver = SingleShot(received.append)
        deliver([1])
        assert received == [[1]]
        assert deliver.delivered is True

    def test_second_call_ignored(self):
        received = []
        deliver = SingleShot(received.append)
        deliver("first")
        deliver("second")
        assert received == ["first"]

    def test_cursor_offset_defaults_to_line_length(self):
        assert CompletionRequest("abc").cursor_offset == 3
        assert CompletionRequest("abc", offset=1).cursor_offset == 1
