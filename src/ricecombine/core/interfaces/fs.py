from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class SourceReaderProtocol(Protocol):
    def read_text(self, path: Path) -> str:
        ...

    def write_text(self, path: Path, content: str) -> None:
        ...


@runtime_checkable
class ContentLoaderProtocol(Protocol):
    """Return a file's content ready for line classification."""

    def load(self, path: Path) -> str:
        ...
