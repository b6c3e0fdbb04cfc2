# -*- coding: utf-8 -*-
"""
Question extractor module for flattening nested JSON question banks.

Question catalogues nest their questions at arbitrary depth (chapters,
sections, sub-sections, ...). Every array stored under a key named
``questions`` is collected, in the order a depth-first walk meets it.

Date: 2026-10-19
"""

from typing import Any, Dict, Iterator, List, Tuple

from .errors import MalformedInputError

QUESTIONS_KEY = 'questions'


def _children(value: Any, path: str) -> Iterator[Tuple[Any, Any, str]]:
    """Yield (key, child, child_path) for a dict or list; keys are None for list items."""
    if isinstance(value, dict):
        for key, child in value.items():
            yield key, child, f"{path}.{key}"
    else:
        for index, child in enumerate(value):
            yield None, child, f"{path}[{index}]"


def extract_questions(data: Any, verbose: int = 0) -> List[Dict[str, Any]]:
    """
    Collect every question array found under a 'questions' key.

    The walk uses an explicit stack so that arbitrarily deep documents do
    not hit the interpreter's recursion limit. Arrays found under
    'questions' are appended as-is; their elements are not searched.

    Args:
        data: Parsed JSON value (dict, list, scalar or None)
        verbose: Verbosity level (0-3)

    Returns:
        Flat list of question records in traversal order

    Raises:
        MalformedInputError: If a 'questions' value is not a list
    """
    questions: List[Dict[str, Any]] = []

    if not isinstance(data, (dict, list)):
        return questions

    stack = [_children(data, '$')]
    while stack:
        try:
            key, value, path = next(stack[-1])
        except StopIteration:
            stack.pop()
            continue

        if key == QUESTIONS_KEY:
            if not isinstance(value, list):
                raise MalformedInputError(path, type(value).__name__)
            if verbose >= 3:
                print(f"[EXTRACT] {len(value)} questions at {path}")
            questions.extend(value)
        elif isinstance(value, (dict, list)):
            stack.append(_children(value, path))

    return questions
