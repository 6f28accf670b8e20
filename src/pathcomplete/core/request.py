"""Per-request context and single-shot result delivery."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompletionRequest:
    """What the host knows about one completion request."""

    cursor_before_line: str
    offset: int | None = None
    buffer_path: str | None = None
    is_cmdline: bool = False
    option: dict[str, Any] = field(default_factory=dict)

    @property
    def cursor_offset(self) -> int:
        if self.offset is None:
            return len(self.cursor_before_line)
        return self.offset


class SingleShot:
    """Wrap a callback so that only the first invocation is delivered."""

    def __init__(self, callback: Callable[..., Any]) -> None:
        self._callback = callback
        self._delivered = False

    @property
    def delivered(self) -> bool:
        return self._delivered

    def __call__(self, result: Any = None) -> None:
        if self._delivered:
            logger.warning("Ignoring repeated delivery for a completed request")
            return
        self._delivered = True
        self._callback(result)
