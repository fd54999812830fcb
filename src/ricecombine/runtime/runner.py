from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional

from ricecombine import constants as C
from ricecombine.core.interfaces.fs import SourceReaderProtocol
from ricecombine.core.interfaces.text import LineRewriterProtocol
from ricecombine.core.models import BatchReport, CombineConfig
from ricecombine.logging.helpers import get_logger
from ricecombine.rendering.execution import HeaderCombiner


class BatchDriver:
    """Combine every entry header in order, then rewrite the test sources in place.

    There is no rollback: the first failure propagates, leaving earlier
    outputs written and later ones absent.
    """

    def __init__(
        self,
        *,
        config: CombineConfig,
        combiner: HeaderCombiner,
        rewriter: LineRewriterProtocol,
        reader: SourceReaderProtocol,
        progress: Callable[[str], None] = print,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._cfg = config
        self._combiner = combiner
        self._rewriter = rewriter
        self._reader = reader
        self._progress = progress
        self._log = logger or get_logger('runner')

    def test_files(self) -> List[Path]:
        """Files of the test directory matching the test glob, sorted."""
        return sorted(p for p in self._cfg.test_path.glob(self._cfg.test_glob) if p.is_file())

    def rewrite_test_file(self, path: Path) -> None:
        content = self._reader.read_text(path)
        self._reader.write_text(path, self._rewriter.rewrite_text(content))

    def run(self) -> BatchReport:
        report = BatchReport()
        for name in self._cfg.entry_headers:
            self._progress(f'Building {name}')
            report.headers.append(self._combiner.combine(name))

        self._progress('Building test files')
        for path in self.test_files():
            self.rewrite_test_file(path)
            report.test_files.append(path)
        self._log.info('✔ %d test file(s) rewritten in %s', len(report.test_files), self._cfg.test_path)

        self._progress(C.SUCCESS_MESSAGE)
        return report
