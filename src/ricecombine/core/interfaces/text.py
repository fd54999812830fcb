from __future__ import annotations
"""Line-level protocol definitions."""

from typing import Optional, Protocol, runtime_checkable

from ricecombine.core.models import IncludeReference


@runtime_checkable
class LineRewriterProtocol(Protocol):
    """Rewrite library identifiers on one line; unmatched lines come back unchanged."""

    def rewrite_line(self, line: str) -> str:
        ...

    def rewrite_text(self, text: str) -> str:
        ...


@runtime_checkable
class LineClassifierProtocol(Protocol):
    """Tell internal includes and include guards apart from ordinary content."""

    def include_reference(self, line: str) -> Optional[IncludeReference]:
        ...

    def is_guard(self, line: str) -> bool:
        ...
