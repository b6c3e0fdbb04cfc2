import json
import sys
from pathlib import Path

import pytest

# Add the repository root and src/ to sys.path so the package and the scripts import
ROOT_PATH = Path(__file__).resolve().parent.parent
for path in (ROOT_PATH, ROOT_PATH / "src"):
    if path.as_posix() not in sys.path:
        sys.path.insert(0, path.as_posix())


@pytest.fixture
def write_json(tmp_path: Path):
    """Write a JSON document below tmp_path and return its path."""
    def _write(relative: str, data) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_questions():
    """Three questions spread over two sections of chapter 1."""
    return [
        {
            "number": "NA101",
            "chapter": 1,
            "section": 1,
            "question": "Was ist 1 & 2?",
            "answer_a": "A",
            "answer_b": "B",
            "answer_c": "C",
            "answer_d": "D",
            "picture_question": "NA101_q.svg",
        },
        {
            "number": "NA201",
            "chapter": 1,
            "section": 2,
            "question": "50 % von 10",
            "answer_a": "5",
            "answer_b": "10",
            "answer_c": "15",
            "answer_d": "20",
        },
        {
            "number": "NA102",
            "chapter": 1,
            "section": 1,
            "question": "Spannung U_1",
            "answer_a": "1 V",
            "answer_b": "2 V",
            "answer_c": "3 V",
            "answer_d": "4 V",
            "picture_a": True,
        },
    ]


@pytest.fixture
def sample_sections():
    return [
        {"chapter": 1, "section": 1, "section_txt": "Grundlagen"},
        {"chapter": 1, "section": 2, "section_txt": "Prozentrechnung"},
        {"chapter": 2, "section": 1, "section_txt": "Leer"},
    ]
