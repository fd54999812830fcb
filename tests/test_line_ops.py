from __future__ import annotations

import unittest
from pathlib import Path

from ricecombine.core.models import CompanionSet, IncludeReference, SourceFile
from ricecombine.processing.line_ops import LineClassifier, LineKind, split_lines
from ricecombine.rendering.path_resolver import CompanionResolver


class LineClassifierTests(unittest.TestCase):
    def setUp(self) -> None:
        self.clf = LineClassifier(library_name="Rice")

    def test_quoted_include_is_internal(self) -> None:
        self.assertEqual(self.clf.classify('#include "Object.hpp"\n'), LineKind.INCLUDE)
        ref = self.clf.include_reference('#include "detail/Wrapper.hpp"\n')
        self.assertEqual(ref, IncludeReference("detail/Wrapper.hpp"))
        self.assertEqual(ref.basename, "Wrapper.hpp")

    def test_angle_include_is_content(self) -> None:
        self.assertEqual(self.clf.classify("#include <ruby.h>\n"), LineKind.CONTENT)
        self.assertIsNone(self.clf.include_reference("#include <ruby.h>\n"))

    def test_guard_patterns(self) -> None:
        for line in (
            "#ifndef Rice__Object__hpp_\n",
            "#define Rice__Object__hpp_\n",
            "#endif // Rice__Object__hpp_\n",
            "#endif//Rice__Object__hpp_\n",
            "#endif   //   Rice__Object__hpp_\n",
        ):
            with self.subTest(line=line):
                self.assertEqual(self.clf.classify(line), LineKind.GUARD)

    def test_foreign_guards_and_plain_endif_are_content(self) -> None:
        for line in (
            "#ifndef OTHER__hpp_\n",
            "#define RICE_VERSION 4\n",
            "#endif\n",
            "#endif // defined(_WIN32)\n",
        ):
            with self.subTest(line=line):
                self.assertEqual(self.clf.classify(line), LineKind.CONTENT)

    def test_guard_token_follows_library_name(self) -> None:
        clf = LineClassifier(library_name="Lib")
        self.assertTrue(clf.is_guard("#ifndef Lib__x\n"))
        self.assertFalse(clf.is_guard("#ifndef Rice__x\n"))

    def test_include_takes_precedence_over_guard(self) -> None:
        self.assertEqual(self.clf.classify('#include "Rice__guard.hpp"\n'), LineKind.INCLUDE)


class SplitLinesTests(unittest.TestCase):
    def test_only_line_feed_ends_a_line(self) -> None:
        self.assertEqual(
            split_lines("a\x0cb\nc\rd\r\ne\x85f g\n"),
            ["a\x0cb\n", "c\rd\r\n", "e\x85f g\n"],
        )

    def test_trailing_partial_line_and_empty_text(self) -> None:
        self.assertEqual(split_lines("a\nb"), ["a\n", "b"])
        self.assertEqual(split_lines("\n\n"), ["\n", "\n"])
        self.assertEqual(split_lines(""), [])


class CompanionTests(unittest.TestCase):
    def test_companion_set_for_header(self) -> None:
        cs = CompanionSet.for_file(SourceFile(Path("rice/Object.hpp")))
        self.assertEqual(cs.names, frozenset({"Object_defn.hpp", "Object.ipp"}))
        self.assertTrue(cs.matches(IncludeReference("detail/Object.ipp")))
        self.assertFalse(cs.matches(IncludeReference("Object_defn.ipp")))

    def test_defn_suffix_follows_header_extension(self) -> None:
        cs = CompanionSet.for_file(SourceFile(Path("rice/Array.h")))
        self.assertEqual(cs.names, frozenset({"Array_defn.h", "Array.ipp"}))

    def test_resolver_inlines_companions_only(self) -> None:
        resolver = CompanionResolver()
        header = SourceFile(Path("rice/Object.hpp"))

        hit = resolver.resolve(header, IncludeReference("Object_defn.hpp"))
        self.assertEqual(hit, SourceFile(Path("rice/Object_defn.hpp")))

        nested = resolver.resolve(header, IncludeReference("detail/Object.ipp"))
        self.assertEqual(nested, SourceFile(Path("rice/detail/Object.ipp")))

        self.assertIsNone(resolver.resolve(header, IncludeReference("Module.hpp")))
        self.assertIsNone(resolver.resolve(header, IncludeReference("Object_defn.ipp")))

    def test_resolver_honours_explicit_companion_set(self) -> None:
        resolver = CompanionResolver()
        header = SourceFile(Path("rice/Object.hpp"))
        empty = CompanionSet(frozenset())
        self.assertIsNone(resolver.resolve(header, IncludeReference("Object_defn.hpp"), empty))


if __name__ == "__main__":
    unittest.main()
