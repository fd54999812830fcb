from __future__ import annotations

"""Public surface for ricecombine.core: data model and protocol types."""

from ricecombine.core.models import (
    BatchReport,
    CombineConfig,
    CombineResult,
    CompanionSet,
    IncludeReference,
    OutputStream,
    RewriteRule,
    RewriteRuleSet,
    SourceFile,
)

__all__ = [
    'BatchReport',
    'CombineConfig',
    'CombineResult',
    'CompanionSet',
    'IncludeReference',
    'OutputStream',
    'RewriteRule',
    'RewriteRuleSet',
    'SourceFile',
]
