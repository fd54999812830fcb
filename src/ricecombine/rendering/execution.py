from __future__ import annotations

"""
HeaderCombiner – builds one self-contained header from an entry header.

Walk
----
• Entry lines are copied verbatim, except quoted includes which are replaced
  by the included header (section banner + guard-stripped, rewritten body).
• Inside an included header only its companions are inlined (companion
  banner + guard-stripped, rewritten body); a companion's own includes are
  dropped, which bounds the walk at one level.
• Non-companion includes and guard lines are dropped silently.

The whole header is assembled in memory and written once at the end, so a
missing input aborts the run before anything is written for that entry.
"""

import logging
from pathlib import Path
from typing import List, Optional

from ricecombine.core.interfaces.fs import ContentLoaderProtocol, SourceReaderProtocol
from ricecombine.core.interfaces.text import LineClassifierProtocol, LineRewriterProtocol
from ricecombine.core.models import (
    CombineConfig,
    CombineResult,
    CompanionSet,
    OutputStream,
    SourceFile,
)
from ricecombine.logging.helpers import get_logger
from ricecombine.processing.line_ops import split_lines
from ricecombine.rendering.path_resolver import CompanionResolver
from ricecombine.rendering.renderer import BannerRenderer


class _Walk:
    """Per-entry bookkeeping."""

    def __init__(self) -> None:
        self.stream = OutputStream()
        self.inlined: List[Path] = []
        self.dropped: List[str] = []


class HeaderCombiner:
    def __init__(
        self,
        *,
        config: CombineConfig,
        reader: SourceReaderProtocol,
        loader: ContentLoaderProtocol,
        classifier: LineClassifierProtocol,
        rewriter: LineRewriterProtocol,
        resolver: Optional[CompanionResolver] = None,
        renderer: Optional[BannerRenderer] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._cfg = config
        self._reader = reader
        self._loader = loader
        self._classifier = classifier
        self._rewriter = rewriter
        self._resolver = resolver or CompanionResolver()
        self._renderer = renderer or BannerRenderer(project_url=config.project_url)
        self._log = logger or get_logger('combine')

    def render(self, entry_name: str) -> str:
        """Return the combined text for *entry_name* without writing it."""
        return self._walk_entry(entry_name).stream.getvalue()

    def combine(self, entry_name: str) -> CombineResult:
        """Combine *entry_name* and write it under the distribution directory."""
        walk = self._walk_entry(entry_name)
        text = walk.stream.getvalue()
        out_path = self._cfg.dist_path(entry_name)
        self._reader.write_text(out_path, text)
        self._log.info(
            '✔ %s → %s (%d file(s) inlined, %d include(s) dropped)',
            entry_name, out_path, len(walk.inlined), len(walk.dropped),
        )
        return CombineResult(
            entry=entry_name,
            output_path=out_path,
            inlined=tuple(walk.inlined),
            dropped=tuple(walk.dropped),
            size=len(text),
        )

    # Walk -------------------------------------------------------------------

    def _walk_entry(self, entry_name: str) -> _Walk:
        entry = SourceFile(self._cfg.source_path(entry_name))
        content = self._loader.load(entry.path)
        license_text = self._reader.read_text(self._cfg.license_path)

        walk = _Walk()
        walk.stream.extend(self._renderer.preamble(license_text))

        for line in split_lines(content):
            ref = self._classifier.include_reference(line)
            if ref is None:
                # Entry lines are kept as written, guards included.
                walk.stream.append(line)
                continue
            header = SourceFile(ref.resolve(entry.directory))
            walk.stream.append(self._renderer.section(header.basename))
            self._inline(header, CompanionSet.for_file(header), walk)
        return walk

    def _inline(self, source: SourceFile, companions: Optional[CompanionSet], walk: _Walk) -> None:
        """Append *source* to the walk; `companions=None` means no deeper level."""
        walk.inlined.append(source.path)
        for line in split_lines(self._loader.load(source.path)):
            ref = self._classifier.include_reference(line)
            if ref is not None:
                companion = (
                    self._resolver.resolve(source, ref, companions)
                    if companions is not None else None
                )
                if companion is None:
                    self._log.debug('dropping include %r from %s', ref.target, source.basename)
                    walk.dropped.append(ref.target)
                    continue
                walk.stream.append(self._renderer.companion(companion.basename))
                self._inline(companion, None, walk)
            elif self._classifier.is_guard(line):
                continue
            else:
                walk.stream.append(self._rewriter.rewrite_line(line))
