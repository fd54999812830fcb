"""
rewrite_rules – Centralized identifier-rewrite and line-classification regexes.

This module is the single source of truth for:
  • The ordered namespace/module rewrite table (`build_rewrite_rules`)
  • Quoted include detection (`INCLUDE_RE`, angle-bracket includes never match)
  • Include-guard detection scoped to the library token (`build_guard_patterns`)
  • Shared-fragment include detection (`build_fragment_pattern`)

Rule groups
-----------
Group "declarations" (first match wins):
  namespace-decl, qualified-ref, module-self, module-libc, module-std
Group "test-idioms" (first match wins, independent of the first group):
  std-qualified, std-amodule, std-stdmodule
"""

from __future__ import annotations

import re
from typing import Pattern, Tuple

from ricecombine.core.models import RewriteRule, RewriteRuleSet

INCLUDE_RE: Pattern[str] = re.compile(r'#include "(.*)"')

NESTED_MODULES: Tuple[str, ...] = ('Libc', 'Std')


def _literal(text: str) -> Pattern[str]:
    return re.compile(re.escape(text))


def nested_module_call(product: str, module: str) -> str:
    """`define_module_under(define_module("<product>"), "<module>")`"""
    return f'define_module_under(define_module("{product}"), "{module}")'


def build_rewrite_rules(library: str, product: str) -> RewriteRuleSet:
    """Return the ordered rule table renaming *library* to *product*."""
    lib = re.escape(library)

    declarations = [
        RewriteRule(
            'namespace-decl',
            re.compile(rf'(?<=\bnamespace ){lib}(?=[\s;:])'),
            product,
        ),
        RewriteRule('qualified-ref', _literal(f'{library}::'), f'{product}::'),
        RewriteRule(
            'module-self',
            _literal(f'define_module("{library}")'),
            f'define_module("{product}")',
        ),
    ]
    for module in NESTED_MODULES:
        declarations.append(RewriteRule(
            f'module-{module.lower()}',
            _literal(f'define_module("{module}")'),
            nested_module_call(product, module),
        ))

    test_idioms = (
        RewriteRule('std-qualified', re.compile(r'(?<![\w:])Std::'), f'{product}::Std::'),
        RewriteRule(
            'std-amodule',
            _literal('aModule("Std")'),
            f'aModule = {nested_module_call(product, "Std")}',
        ),
        RewriteRule(
            'std-stdmodule',
            _literal('stdModule("Std")'),
            f'stdModule = {nested_module_call(product, "Std")}',
        ),
    )

    return RewriteRuleSet(groups=(tuple(declarations), test_idioms))


def build_guard_patterns(library: str) -> Tuple[Pattern[str], Pattern[str], Pattern[str]]:
    """Return the (#ifndef, #define, #endif comment) guard patterns for *library*."""
    lib = re.escape(library)
    return (
        re.compile(rf'#ifndef {lib}__'),
        re.compile(rf'#define {lib}__'),
        re.compile(rf'#endif\s*//\s*{lib}__'),
    )


def build_fragment_pattern(fragment: str, subdir: str | None) -> Pattern[str]:
    """Match `#include "<fragment>"`, optionally prefixed by `<subdir>/`."""
    prefix = f'(?:{re.escape(subdir)}/)?' if subdir else ''
    return re.compile(rf'#include "({prefix}{re.escape(fragment)})"')
