import logging
from typing import Optional

from ricecombine.core.interfaces.text import LineRewriterProtocol
from ricecombine.core.models import RewriteRuleSet
from ricecombine.logging.helpers import get_logger
from ricecombine.processing.line_ops import split_lines
from ricecombine.processing.rewrite_rules import build_rewrite_rules


class NamespaceRewriter(LineRewriterProtocol):
    def __init__(
        self,
        *,
        library_name: str,
        product_name: str,
        rules: Optional[RewriteRuleSet] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """Pattern-based renaming of the library namespace and Ruby modules."""
        if not library_name or not product_name:
            raise ValueError('library_name and product_name must be non-empty')
        self._library = library_name
        self._product = product_name
        self._rules = rules or build_rewrite_rules(library_name, product_name)
        self._log = logger or get_logger('processing.textops')

    @property
    def rules(self) -> RewriteRuleSet:
        return self._rules

    @property
    def product_name(self) -> str:
        return self._product

    def rewrite_line(self, line: str) -> str:
        return self._rules.apply(line)

    def rewrite_text(self, text: str) -> str:
        changed = 0
        out: list[str] = []
        for ln in split_lines(text):
            new = self.rewrite_line(ln)
            if new != ln:
                changed += 1
            out.append(new)
        if changed:
            self._log.debug('rewrote %d line(s) %s → %s', changed, self._library, self._product)
        return ''.join(out)
