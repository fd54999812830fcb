from __future__ import annotations

import logging
from typing import Callable, Optional

from ricecombine.core.interfaces.fs import SourceReaderProtocol
from ricecombine.core.interfaces.text import LineRewriterProtocol
from ricecombine.core.models import CombineConfig
from ricecombine.io.fragments import SharedFragmentMerger
from ricecombine.io.readers import SourceReader
from ricecombine.logging.helpers import get_logger
from ricecombine.processing.line_ops import LineClassifier
from ricecombine.processing.text_ops import NamespaceRewriter
from ricecombine.rendering.execution import HeaderCombiner
from ricecombine.runtime.runner import BatchDriver


def build_rewriter(config: CombineConfig, *, logger: Optional[logging.Logger] = None) -> NamespaceRewriter:
    return NamespaceRewriter(
        library_name=config.library_name,
        product_name=config.product_name,
        logger=logger,
    )


def build_combiner(
    config: CombineConfig,
    *,
    reader: Optional[SourceReaderProtocol] = None,
    rewriter: Optional[LineRewriterProtocol] = None,
    logger: Optional[logging.Logger] = None,
) -> HeaderCombiner:
    """Wire the default components of a HeaderCombiner for *config*."""
    rd = reader or SourceReader()
    loader = SharedFragmentMerger(
        fragment=config.shared_fragment,
        subdir=config.shared_fragment_dir,
        reader=rd,
    )
    return HeaderCombiner(
        config=config,
        reader=rd,
        loader=loader,
        classifier=LineClassifier(library_name=config.library_name),
        rewriter=rewriter or build_rewriter(config),
        logger=logger or get_logger('combine'),
    )


def build_driver(
    config: CombineConfig,
    *,
    progress: Callable[[str], None] = print,
    reader: Optional[SourceReaderProtocol] = None,
    logger: Optional[logging.Logger] = None,
) -> BatchDriver:
    """Wire a BatchDriver sharing one reader and one rewriter across steps."""
    rd = reader or SourceReader()
    rewriter = build_rewriter(config)
    return BatchDriver(
        config=config,
        combiner=build_combiner(config, reader=rd, rewriter=rewriter),
        rewriter=rewriter,
        reader=rd,
        progress=progress,
        logger=logger,
    )
