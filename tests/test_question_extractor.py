"""
Unit tests for collecting questions from nested JSON catalogues.
"""

import pytest

from texbank.errors import MalformedInputError
from texbank.question_extractor import extract_questions


@pytest.mark.parametrize("data", [{}, None, [], 42, "questions", True])
def test_empty_or_scalar_input(data):
    assert extract_questions(data) == []


def test_sibling_arrays_are_concatenated():
    data = {"a": {"questions": [1, 2]}, "b": {"questions": [3]}}
    assert extract_questions(data) == [1, 2, 3]


def test_traversal_order_across_depths():
    data = {
        "x": [
            {"questions": [1]},
            {"y": {"questions": [2, 3]}},
        ],
        "questions": [4],
        "z": {"deeper": {"questions": [5]}},
    }
    assert extract_questions(data) == [1, 2, 3, 4, 5]


def test_question_elements_are_not_searched():
    inner = {"number": "A", "questions": [99]}
    assert extract_questions({"questions": [inner]}) == [inner]


def test_top_level_list_walked_element_wise():
    data = [{"questions": [1]}, [{"questions": [2]}], "noise", None]
    assert extract_questions(data) == [1, 2]


def test_empty_questions_arrays_contribute_nothing():
    data = {"a": {"questions": []}, "b": {"questions": [7]}}
    assert extract_questions(data) == [7]


def test_length_equals_sum_of_arrays():
    chapters = {
        f"chapter{c}": {
            "sections": [{"questions": list(range(c * 10, c * 10 + c))} for _ in range(3)]
        }
        for c in range(1, 5)
    }
    result = extract_questions({"catalogue": chapters})
    assert len(result) == sum(3 * c for c in range(1, 5))


def test_duplicates_are_kept():
    q = {"number": "NA101"}
    assert extract_questions({"a": {"questions": [q]}, "b": {"questions": [q]}}) == [q, q]


def test_non_list_questions_value_fails_fast():
    with pytest.raises(MalformedInputError) as exc_info:
        extract_questions({"a": [{"questions": "abc"}]})

    assert exc_info.value.path == "$.a[0].questions"
    assert exc_info.value.value_type == "str"


def test_null_questions_value_fails_fast():
    with pytest.raises(MalformedInputError):
        extract_questions({"questions": None})


def test_very_deep_nesting():
    data = {"questions": [0]}
    for _ in range(20000):
        data = {"child": data}

    assert extract_questions(data) == [0]
