from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, NoReturn, Optional

from ricecombine.core.models import BatchReport, CombineConfig
from ricecombine.logging.factory import DefaultLoggerFactory
from ricecombine.logging.helpers import get_logger
from ricecombine.runtime.wiring import build_driver


logger = get_logger('ricecombine')


def _configure_logging(enable_json: bool) -> None:
    """Configure process-wide logging once, either JSON or plain text."""
    prev = getattr(_configure_logging, '_configured_mode', None)
    if prev is not None and prev == bool(enable_json):
        return
    factory = DefaultLoggerFactory(json_logs=enable_json, level=logging.INFO)
    lg = factory.get_logger('ricecombine')
    global logger
    logger = lg
    setattr(_configure_logging, '_configured_mode', bool(enable_json))


class RiceCombine:
    """Top-level façade: run the whole header build."""

    @staticmethod
    def run(
        root: Optional[Path] = None,
        *,
        config: Optional[CombineConfig] = None,
        progress: Callable[[str], None] = print,
    ) -> BatchReport:
        """Build the combined headers and rewrite the tests under *root* (cwd by default)."""
        _configure_logging(os.getenv('RICECOMBINE_JSON_LOGS') == '1')
        cfg = config or CombineConfig.default(root)
        return build_driver(cfg, progress=progress).run()


def main() -> NoReturn:
    """Entry point for `python -m ricecombine` and the `ricecombine` script."""
    try:
        RiceCombine.run()
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.exception('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
