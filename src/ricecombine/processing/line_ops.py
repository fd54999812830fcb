# src/ricecombine/processing/line_ops.py
import enum
from typing import List, Optional, Pattern, Sequence

from ricecombine.core.interfaces.text import LineClassifierProtocol
from ricecombine.core.models import IncludeReference
from ricecombine.processing.rewrite_rules import INCLUDE_RE, build_guard_patterns


def split_lines(text: str) -> List[str]:
    """Split *text* after each line feed only, keeping the line ends.

    Form feeds, lone carriage returns and the other Unicode line boundaries
    stay inside their line, unlike `str.splitlines`.
    """
    parts = text.split('\n')
    lines = [ln + '\n' for ln in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


class LineKind(enum.Enum):
    INCLUDE = 'include'
    GUARD = 'guard'
    CONTENT = 'content'


class LineClassifier(LineClassifierProtocol):
    """Guard/include filter for library source lines.

    Only quoted includes are internal; `#include <...>` stays ordinary
    content. Guard lines are the `#ifndef`, `#define` and `#endif //` lines
    carrying the library's `<Name>__` token.
    """

    def __init__(
        self,
        *,
        library_name: str,
        include_re: Pattern[str] = INCLUDE_RE,
        guard_patterns: Optional[Sequence[Pattern[str]]] = None,
    ) -> None:
        self._include_re = include_re
        self._guards = tuple(guard_patterns or build_guard_patterns(library_name))

    def include_reference(self, line: str) -> Optional[IncludeReference]:
        m = self._include_re.search(line)
        return IncludeReference(m.group(1)) if m else None

    def is_guard(self, line: str) -> bool:
        return any(rx.search(line) for rx in self._guards)

    def classify(self, line: str) -> LineKind:
        if self.include_reference(line) is not None:
            return LineKind.INCLUDE
        if self.is_guard(line):
            return LineKind.GUARD
        return LineKind.CONTENT
