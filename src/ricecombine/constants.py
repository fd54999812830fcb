from __future__ import annotations

"""Project-wide constants used across modules.

Every value here is the stock setting of the Rice header build; the engine
itself receives them through `CombineConfig` so tests can override them.
"""

from typing import Tuple

LIBRARY_NAME: str = 'Rice'
PRODUCT_NAME: str = 'Rice4RubyQt6'
PROJECT_URL: str = 'https://github.com/ruby-rice/rice'

SOURCE_DIR: str = 'rice'
DIST_DIR: str = 'include/rice'
TEST_DIR: str = 'test'
TEST_GLOB: str = '*pp'
LICENSE_FILE: str = 'COPYING'

# Built in this order.
ENTRY_HEADERS: Tuple[str, ...] = ('rice.hpp', 'stl.hpp', 'api.hpp')

SHARED_FRAGMENT: str = 'shared_methods.hpp'
SHARED_FRAGMENT_DIR: str = 'cpp_api'

# Companion suffixes appended to the stem of an included header.
DEFN_SUFFIX: str = '_defn'
INLINE_SUFFIX: str = '.ipp'

COMMENT_MARKER: str = '//'
SECTION_BANNER: str = '========='
COMPANION_BANNER: str = '---------'

SUCCESS_MESSAGE: str = 'Success'
