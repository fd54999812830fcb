from __future__ import annotations

from ricecombine.constants import ENTRY_HEADERS, LIBRARY_NAME, PRODUCT_NAME
from ricecombine.core.models import BatchReport, CombineConfig, CombineResult
from ricecombine.cli import RiceCombine, main
from ricecombine.io.fragments import SharedFragmentMerger
from ricecombine.io.readers import SourceReader
from ricecombine.processing.line_ops import LineClassifier, LineKind
from ricecombine.processing.text_ops import NamespaceRewriter
from ricecombine.rendering.execution import HeaderCombiner
from ricecombine.rendering.path_resolver import CompanionResolver
from ricecombine.runtime.runner import BatchDriver
from ricecombine.runtime.wiring import build_combiner, build_driver
from ricecombine.logging.helpers import get_logger

__version__ = '1.0.0'

__all__ = [
    'ENTRY_HEADERS',
    'LIBRARY_NAME',
    'PRODUCT_NAME',
    'BatchDriver',
    'BatchReport',
    'CombineConfig',
    'CombineResult',
    'CompanionResolver',
    'HeaderCombiner',
    'LineClassifier',
    'LineKind',
    'NamespaceRewriter',
    'RiceCombine',
    'SharedFragmentMerger',
    'SourceReader',
    'build_combiner',
    'build_driver',
    'get_logger',
    'main',
]
