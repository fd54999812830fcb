#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
build_fixtures – Creates a miniature Rice source tree used by the ricecombine
test-suite.

Idempotent; every test builds its own tree under a temporary directory.

Layout
------
COPYING
rice/rice.hpp           entry: guards, <string>, Object.hpp
rice/Object.hpp         includes Object_defn.hpp, Object.ipp, Other.hpp
rice/Object_defn.hpp    guarded companion; includes Object_defn.ipp (never inlined)
rice/Object.ipp         companion; define_module("Libc")
rice/stl.hpp            entry: Stl.hpp
rice/Stl.hpp            includes shared_methods.hpp
rice/shared_methods.hpp fragment
rice/api.hpp            entry: Api.hpp
rice/Api.hpp            includes cpp_api/shared_methods.hpp
rice/cpp_api/shared_methods.hpp fragment that includes Api_defn.hpp
rice/Api_defn.hpp       companion reached only through the fragment
test/test_Object.cpp    test idioms
test/unittest.hpp       Std:: reference
test/README.md          not matched by the test glob
"""
from __future__ import annotations

import sys
import textwrap
from pathlib import Path

COPYING = """\
Copyright (C) 2025 Jason Roelofs

Redistribution and use in source and binary forms are permitted.
"""


# ────────────────────────── utilities ──────────────────────────
def _write(path: Path, body: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


# ───────────────────── library sources ─────────────────────
def _populate_sources(root: Path) -> None:
    rice = root / "rice"

    _write(rice / "rice.hpp", """
        #ifndef Rice__hpp_
        #define Rice__hpp_

        #include <string>
        #include "Object.hpp"

        // Rice::Object is only documented here
        #endif // Rice__hpp_
    """)

    _write(rice / "Object.hpp", """
        #ifndef Rice__Object__hpp_
        #define Rice__Object__hpp_

        #include <vector>
        #include "Object_defn.hpp"
        #include "Other.hpp"
        namespace Rice
        {
          Rice::Object make_object();
        }
        #include "Object.ipp"
        #endif // Rice__Object__hpp_
    """)

    _write(rice / "Object_defn.hpp", """
        #ifndef Rice__Object_defn__hpp_
        #define Rice__Object_defn__hpp_

        #include "Object_defn.ipp"
        namespace Rice
        {
          class Object;
        }
        #endif // Rice__Object_defn__hpp_
    """)

    _write(rice / "Object.ipp", """
        namespace Rice
        {
          inline Module libc() { return define_module("Libc"); }
        }
    """)

    _write(rice / "Object_defn.ipp", """
        // companion of a companion
    """)

    _write(rice / "stl.hpp", """
        #include "Stl.hpp"
    """)

    _write(rice / "Stl.hpp", """
        namespace Rice::stl
        {
        #include "shared_methods.hpp"
        }
    """)

    _write(rice / "shared_methods.hpp", """
          Module rb_mStd = define_module("Std");
    """)

    _write(rice / "api.hpp", """
        #include "Api.hpp"
    """)

    _write(rice / "Api.hpp", """
        #include "cpp_api/shared_methods.hpp"
        Module rice = define_module("Rice");
    """)

    _write(rice / "cpp_api" / "shared_methods.hpp", """
        #include "Api_defn.hpp"
        // api shared
    """)

    _write(rice / "Api_defn.hpp", """
        namespace Rice { class Api; }
    """)


# ───────────────────── tests ─────────────────────
def _populate_tests(root: Path) -> None:
    test = root / "test"

    _write(test / "test_Object.cpp", """
        #include "unittest.hpp"
        using namespace Rice;

        TESTCASE(Object)
        {
          Module aModule("Std");
          Module stdModule("Std");
          Rice::Object o;
        }
    """)

    _write(test / "unittest.hpp", """
        Std::Vector v;
    """)

    _write(test / "README.md", """
        Rice::Object stays untouched here.
    """)


def build_tree(root: Path) -> Path:
    """Create (or refresh) the fixture tree under *root* and return it."""
    root = Path(root)
    _write(root / "COPYING", COPYING)
    _populate_sources(root)
    _populate_tests(root)
    return root


if __name__ == "__main__":
    build_tree(Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd() / "test-fixtures")
