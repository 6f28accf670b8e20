"""Shared test fixtures for pathcomplete."""

import os

import pytest

from pathcomplete.core.host import EditorHost


class FakeHost(EditorHost):
    """Deterministic host: fixed cwd and home, explicit environment."""

    def __init__(self, cwd, home, env=None, filetypes=None, comment=""):
        self.cwd = str(cwd)
        self.home_dir = str(home)
        self.env = dict(env or {})
        self.filetypes = dict(filetypes or {})
        self.comment = comment

    def getcwd(self):
        return self.cwd

    def home(self):
        return self.home_dir

    def getenv(self, name):
        return self.env.get(name)

    def filetype(self, path):
        return self.filetypes.get(os.path.splitext(path)[1])

    def comment_string(self, request):
        return self.comment


@pytest.fixture
def tmp_tree(tmp_path):
    """A small directory tree: project/{src/main.py, README.md, .hidden, docs/}."""
    project = tmp_path / "project"
    (project / "src").mkdir(parents=True)
    (project / "src" / "main.py").write_text("print('hello')\n")
    (project / "README.md").write_text("# Test Project\n")
    (project / ".hidden").write_text("secret\n")
    (project / "docs").mkdir()
    (tmp_path / "home").mkdir()
    return tmp_path


@pytest.fixture
def host(tmp_tree):
    return FakeHost(cwd=tmp_tree / "project", home=tmp_tree / "home")


@pytest.fixture
def make_host(tmp_tree):
    """Factory for hosts rooted in tmp_tree with custom env or file types."""

    def _make(**kwargs):
        kwargs.setdefault("cwd", tmp_tree / "project")
        kwargs.setdefault("home", tmp_tree / "home")
        return FakeHost(**kwargs)

    return _make
