# -*- coding: utf-8 -*-
"""
LaTeX escaping for question bank text.

The replacements are plain substring substitutions applied one after the
other, so later rules see the output of earlier ones. Backslashes and dollar
signs are deliberately left alone: question texts carry inline math and
hand-written macros that must reach LaTeX untouched.

Date: 2026-10-19
"""

from typing import Any, List, Tuple


# Order matters: '{' and '}' must be handled before the rules that emit them.
LATEX_REPLACEMENTS: List[Tuple[str, str]] = [
    ('&', '\\&'),
    ('%', '\\%'),
    ('#', '\\#'),
    ('_', '\\_'),
    ('{', '\\{'),
    ('}', '\\}'),
    ('~', '\\textasciitilde{}'),
    ('^', '\\textasciicircum{}'),
    ('"', '""'),
]


def escape_latex(value: Any) -> str:
    """
    Escape a text value for use inside a LaTeX macro argument.

    Args:
        value: Any value; only strings are escaped

    Returns:
        The escaped text, or an empty string for non-string input
    """
    if not isinstance(value, str):
        return ''

    text = value
    for special, replacement in LATEX_REPLACEMENTS:
        text = text.replace(special, replacement)
    return text
