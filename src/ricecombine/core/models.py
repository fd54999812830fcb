from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Pattern, Tuple

from ricecombine import constants as C


@dataclass(frozen=True)
class SourceFile:
    """A file of the library tree, identified by its path."""
    path: Path

    @property
    def basename(self) -> str:
        return self.path.name

    @property
    def stem(self) -> str:
        return self.path.stem

    @property
    def suffix(self) -> str:
        return self.path.suffix

    @property
    def directory(self) -> Path:
        return self.path.parent


@dataclass(frozen=True)
class IncludeReference:
    """Quoted path text of an internal `#include "..."` line."""
    target: str

    @property
    def basename(self) -> str:
        return Path(self.target).name

    def resolve(self, directory: Path) -> Path:
        return directory / self.target


@dataclass(frozen=True)
class CompanionSet:
    """Basenames that count as companions of one header.

    A header `<stem><suffix>` has `<stem>_defn<suffix>` and `<stem>.ipp` as
    companions; nothing else is ever inlined into it.
    """
    names: frozenset

    @classmethod
    def for_file(cls, source: SourceFile) -> 'CompanionSet':
        return cls(frozenset({
            f'{source.stem}{C.DEFN_SUFFIX}{source.suffix}',
            f'{source.stem}{C.INLINE_SUFFIX}',
        }))

    def matches(self, ref: IncludeReference) -> bool:
        return ref.basename in self.names


class OutputStream:
    """Append-only sequence of text segments for one combined header."""

    def __init__(self) -> None:
        self._segments: List[str] = []

    def append(self, segment: str) -> None:
        self._segments.append(segment)

    def extend(self, segments: Iterable[str]) -> None:
        for seg in segments:
            self.append(seg)

    def getvalue(self) -> str:
        return ''.join(self._segments)


@dataclass(frozen=True)
class RewriteRule:
    """One textual substitution: every match of `pattern` becomes `replacement`.

    The replacement is inserted literally; backslashes are not expanded.
    """
    name: str
    pattern: Pattern[str]
    replacement: str

    def matches(self, line: str) -> bool:
        return self.pattern.search(line) is not None

    def apply(self, line: str) -> Optional[str]:
        """Return the rewritten line, or None when the rule does not match."""
        if not self.matches(line):
            return None
        return self.pattern.sub(lambda _m: self.replacement, line)


@dataclass(frozen=True)
class RewriteRuleSet:
    """Ordered groups of rules.

    Within a group the first matching rule fires; groups are independent
    passes applied one after the other to the same line.
    """
    groups: Tuple[Tuple[RewriteRule, ...], ...]

    def apply(self, line: str) -> str:
        for group in self.groups:
            for rule in group:
                out = rule.apply(line)
                if out is not None:
                    line = out
                    break
        return line

    @property
    def rules(self) -> Tuple[RewriteRule, ...]:
        return tuple(rule for group in self.groups for rule in group)


@dataclass(frozen=True)
class CombineConfig:
    """Immutable configuration for one batch run, rooted at `root`."""
    root: Path
    source_dir: str = C.SOURCE_DIR
    dist_dir: str = C.DIST_DIR
    test_dir: str = C.TEST_DIR
    test_glob: str = C.TEST_GLOB
    license_file: str = C.LICENSE_FILE
    entry_headers: Tuple[str, ...] = C.ENTRY_HEADERS
    library_name: str = C.LIBRARY_NAME
    product_name: str = C.PRODUCT_NAME
    project_url: str = C.PROJECT_URL
    shared_fragment: str = C.SHARED_FRAGMENT
    shared_fragment_dir: str = C.SHARED_FRAGMENT_DIR

    def __post_init__(self) -> None:
        object.__setattr__(self, 'root', Path(self.root))
        object.__setattr__(self, 'entry_headers', tuple(self.entry_headers))
        if not self.entry_headers:
            raise ValueError('entry_headers must name at least one header')
        for attr in ('library_name', 'product_name', 'shared_fragment'):
            if not getattr(self, attr):
                raise ValueError(f'{attr} must be a non-empty string')
        if self.library_name == self.product_name:
            raise ValueError('product_name must differ from library_name')

    @classmethod
    def default(cls, root: Path | str | None = None) -> 'CombineConfig':
        return cls(root=Path(root) if root is not None else Path.cwd())

    def source_path(self, name: str) -> Path:
        return self.root / self.source_dir / name

    def dist_path(self, name: str) -> Path:
        return self.root / self.dist_dir / name

    @property
    def license_path(self) -> Path:
        return self.root / self.license_file

    @property
    def test_path(self) -> Path:
        return self.root / self.test_dir


@dataclass(frozen=True)
class CombineResult:
    """Summary of one combined header."""
    entry: str
    output_path: Path
    inlined: Tuple[Path, ...] = ()
    dropped: Tuple[str, ...] = ()
    size: int = 0


@dataclass
class BatchReport:
    """What a batch run produced, in order."""
    headers: List[CombineResult] = field(default_factory=list)
    test_files: List[Path] = field(default_factory=list)
