from .fs import ContentLoaderProtocol, SourceReaderProtocol
from .text import LineClassifierProtocol, LineRewriterProtocol

__all__ = [
    'ContentLoaderProtocol',
    'SourceReaderProtocol',
    'LineClassifierProtocol',
    'LineRewriterProtocol',
]
