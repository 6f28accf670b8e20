"""Path completion engine: pattern matching, prefix resolution, scanning, previews."""

from pathcomplete.core.config import CompletionOption, validate_option
from pathcomplete.core.host import EditorHost, LocalHost
from pathcomplete.core.preview import MarkupKind, Preview, build_preview
from pathcomplete.core.request import CompletionRequest, SingleShot
from pathcomplete.core.resolver import PrefixResolver, Resolution, Strategy
from pathcomplete.core.scanner import (
    Candidate,
    CandidateData,
    DirectoryScanner,
    ItemKind,
    ScanError,
)
from pathcomplete.core.source import PathSource

__all__ = [
    "Candidate",
    "CandidateData",
    "CompletionOption",
    "CompletionRequest",
    "DirectoryScanner",
    "EditorHost",
    "ItemKind",
    "LocalHost",
    "MarkupKind",
    "PathSource",
    "PrefixResolver",
    "Preview",
    "Resolution",
    "ScanError",
    "SingleShot",
    "Strategy",
    "build_preview",
    "validate_option",
]
