from __future__ import annotations
"""
Include resolution for the amalgamation walk.

An included header may pull in its own companions (`<stem>_defn<suffix>` and
`<stem>.ipp`); those are inlined, every other include is dropped. Resolution
never goes further than that single level.
"""

from pathlib import Path
from typing import Optional

from ricecombine.core.models import CompanionSet, IncludeReference, SourceFile


class CompanionResolver:
    """Decide whether an include seen inside *including* must be inlined."""

    @staticmethod
    def resolve_path(including: SourceFile, ref: IncludeReference) -> Path:
        """Resolve *ref* against the including file's directory."""
        return ref.resolve(including.directory)

    @staticmethod
    def companions_of(including: SourceFile) -> CompanionSet:
        return CompanionSet.for_file(including)

    def resolve(
        self,
        including: SourceFile,
        ref: IncludeReference,
        companions: Optional[CompanionSet] = None,
    ) -> Optional[SourceFile]:
        """Return the companion to inline, or None when *ref* is dropped."""
        allowed = companions if companions is not None else self.companions_of(including)
        if not allowed.matches(ref):
            return None
        return SourceFile(self.resolve_path(including, ref))
