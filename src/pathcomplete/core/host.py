"""Host environment interface consumed by the completion engine."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod

from rich.syntax import Syntax

from pathcomplete.core.request import CompletionRequest

# Comment strings per file type, in the "<open> %s <close>" form editors use.
COMMENT_STRINGS: dict[str, str] = {
    "c": "/* %s */",
    "cpp": "// %s",
    "csharp": "// %s",
    "css": "/* %s */",
    "dart": "// %s",
    "go": "// %s",
    "java": "// %s",
    "javascript": "// %s",
    "jsx": "// %s",
    "kotlin": "// %s",
    "less": "// %s",
    "objective-c": "// %s",
    "php": "// %s",
    "rust": "// %s",
    "scala": "// %s",
    "scss": "// %s",
    "swift": "// %s",
    "typescript": "// %s",
    "tsx": "// %s",
    "bash": "# %s",
    "lua": "-- %s",
    "python": "# %s",
    "ruby": "# %s",
    "sql": "-- %s",
    "toml": "# %s",
    "yaml": "# %s",
    "html": "<!-- %s -->",
    "xml": "<!-- %s -->",
    "markdown": "<!-- %s -->",
}


class EditorHost(ABC):
    """Everything the engine needs to ask of its surroundings."""

    @abstractmethod
    def getcwd(self) -> str:
        """Current working directory of the host process."""

    @abstractmethod
    def home(self) -> str:
        """The user's home directory."""

    @abstractmethod
    def getenv(self, name: str) -> str | None:
        """Value of an environment variable, or None when it is undefined."""

    @abstractmethod
    def filetype(self, path: str) -> str | None:
        """Content type used for syntax highlighting, or None if unknown."""

    def comment_string(self, request: CompletionRequest) -> str:
        """Comment template for the request's buffer, empty if unknown."""
        if not request.buffer_path:
            return ""
        filetype = self.filetype(request.buffer_path)
        if not filetype:
            return ""
        return COMMENT_STRINGS.get(filetype, "")

    def is_slash_comment(self, request: CompletionRequest) -> bool:
        """True when the buffer has a file type whose comments start with a slash."""
        commentstring = self.comment_string(request)
        return "/*" in commentstring or "//" in commentstring


class LocalHost(EditorHost):
    """Host backed by the running process and pygments lexer lookup."""

    def getcwd(self) -> str:
        return os.getcwd()

    def home(self) -> str:
        return os.path.expanduser("~")

    def getenv(self, name: str) -> str | None:
        return os.environ.get(name)

    def filetype(self, path: str) -> str | None:
        lexer = Syntax.guess_lexer(path)
        if lexer in ("default", "text"):
            return None
        return lexer
