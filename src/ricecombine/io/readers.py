from __future__ import annotations

"""
Whole-file reader/writer for library sources and combined headers.

Content is decoded as UTF-8 with `surrogateescape` and newline translation is
disabled, so arbitrary bytes and CRLF line endings survive a read/write cycle
unchanged.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from ricecombine.core.interfaces.fs import SourceReaderProtocol
from ricecombine.logging.helpers import get_logger, trace_io

ENCODING = 'utf-8'
ERRORS = 'surrogateescape'


class SourceReader(SourceReaderProtocol):
    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('io.readers')

    def read_text(self, path: Path) -> str:
        """Read *path* fully; a missing file raises FileNotFoundError."""
        with open(path, 'r', encoding=ENCODING, errors=ERRORS, newline='') as fh:
            content = fh.read()
        trace_io(self._log, 'read', path=str(path), chars=len(content))
        return content

    def write_text(self, path: Path, content: str) -> None:
        """Replace *path* with *content* atomically, creating parent dirs.

        A symlink is followed and its target replaced; the permission bits of
        an existing target are kept, a new file gets `0o666 & ~umask`.
        """
        path = Path(os.path.realpath(path))
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f'.{path.name}.', suffix='.tmp', dir=path.parent)
        try:
            with os.fdopen(fd, 'w', encoding=ENCODING, errors=ERRORS, newline='') as fh:
                fh.write(content)
            if path.exists():
                shutil.copymode(path, tmp_name)
            else:
                os.chmod(tmp_name, 0o666 & ~_current_umask())
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        trace_io(self._log, 'write', path=str(path), chars=len(content))


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask
