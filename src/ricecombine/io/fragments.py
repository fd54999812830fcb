from __future__ import annotations

"""Shared-fragment merging.

`shared_methods.hpp` is not a header of its own: every file that includes it
(directly or as `cpp_api/shared_methods.hpp`) gets the fragment's text spliced
in place of the include directive before any other processing, so the
fragment's own lines are classified as if they had been written there.
"""

import logging
from pathlib import Path
from typing import Optional, Pattern

from ricecombine.core.interfaces.fs import ContentLoaderProtocol, SourceReaderProtocol
from ricecombine.io.readers import SourceReader
from ricecombine.logging.helpers import get_logger
from ricecombine.processing.rewrite_rules import build_fragment_pattern


class SharedFragmentMerger(ContentLoaderProtocol):
    def __init__(
        self,
        *,
        fragment: str,
        subdir: Optional[str] = None,
        reader: Optional[SourceReaderProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._pattern: Pattern[str] = build_fragment_pattern(fragment, subdir)
        self._reader = reader or SourceReader()
        self._log = logger or get_logger('io.fragments')

    def merge(self, content: str, directory: Path) -> str:
        """Replace every fragment include in *content* with the fragment text.

        The fragment is located from the first occurrence, relative to
        *directory*; all occurrences receive the same text.
        """
        m = self._pattern.search(content)
        if m is None:
            return content
        fragment_path = directory / m.group(1)
        fragment = self._reader.read_text(fragment_path)
        self._log.debug('merging %s', fragment_path)
        return self._pattern.sub(lambda _m: fragment, content)

    def load(self, path: Path) -> str:
        path = Path(path)
        return self.merge(self._reader.read_text(path), path.parent)
