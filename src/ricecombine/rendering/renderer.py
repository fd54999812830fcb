"""
Renderer pieces for combined headers.

This module provides:
  • BannerRenderer – license preamble and the section banners that mark where
    each inlined header and companion starts.

Notes
-----
• Every banner is preceded by an empty line and terminated by a newline.
• Blank license lines become a bare comment marker, never marker-plus-space.
"""

from typing import List

from ricecombine import constants as C
from ricecombine.processing.line_ops import split_lines


class BannerRenderer:
    def __init__(
        self,
        *,
        project_url: str = C.PROJECT_URL,
        comment: str = C.COMMENT_MARKER,
        line_ending: str = '\n',
    ) -> None:
        self._url = project_url
        self._comment = comment
        self._eol = line_ending

    def preamble(self, license_text: str) -> List[str]:
        """Return the license preamble segments, ending with one blank line."""
        eol = self._eol
        out = [
            f'{self._comment} This file is part of [rice]({self._url}).{eol}',
            f'{self._comment}{eol}',
        ]
        for ln in split_lines(license_text):
            if not ln.strip():
                out.append(f'{self._comment}{eol}')
            else:
                out.append(f'{self._comment} {ln}')
        out.append(eol)
        return out

    def section(self, name: str) -> str:
        return f'{self._eol}{self._comment} {C.SECTION_BANNER}   {name}   {C.SECTION_BANNER}{self._eol}'

    def companion(self, name: str) -> str:
        return f'{self._eol}{self._comment} {C.COMPANION_BANNER}   {name}   {C.COMPANION_BANNER}{self._eol}'
