# -*- coding: utf-8 -*-
"""
Question fragment writer module.

Each question of the catalogue becomes one small LaTeX file holding a single
``\\frage`` macro call. The document's section files ``\\input`` these
fragments, so the file name is the question number.

Date: 2026-10-19
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from pylatexenc.latex2text import LatexNodes2Text

from .errors import PerItemWriteError
from .file_io import ensure_directory, write_text_file
from .latex_escape import escape_latex


FRAGMENT_TEMPLATE = """
\\frage{{{number}}}
    {{{question}}}
    {{{answer_a}}}
    {{{answer_b}}}
    {{{answer_c}}}
    {{{answer_d}}}
    {{{has_picture}}}{{{has_picture_a}}}
"""


def _latex_bool(value: Any) -> str:
    return 'true' if value else 'false'


def render_fragment(question: Dict[str, Any]) -> str:
    """
    Render the LaTeX fragment for a single question.

    Args:
        question: Question record

    Returns:
        Fragment text without surrounding whitespace
    """
    fragment = FRAGMENT_TEMPLATE.format(
        number=escape_latex(question.get('number')),
        question=escape_latex(question.get('question')),
        answer_a=escape_latex(question.get('answer_a')),
        answer_b=escape_latex(question.get('answer_b')),
        answer_c=escape_latex(question.get('answer_c')),
        answer_d=escape_latex(question.get('answer_d')),
        has_picture=_latex_bool(question.get('picture_question')),
        has_picture_a=_latex_bool(question.get('picture_a')),
    )
    return fragment.strip()


def fragment_filename(question: Dict[str, Any]) -> Optional[str]:
    """File name for a question's fragment, or None if it has no number."""
    number = question.get('number')
    if number is None or number == '':
        return None
    return f"{number}.tex"


class QuestionFragmentWriter:
    """Writes one .tex fragment per question into an output directory."""

    def __init__(self, output_dir: Path, encoding: str = 'utf-8', verbose: int = 2):
        """
        Initialize the writer.

        Args:
            output_dir: Directory receiving the fragment files
            encoding: Text encoding of the written files
            verbose: Verbosity level (0-3)
        """
        self.output_dir = Path(output_dir)
        self.encoding = encoding
        self.verbose = verbose
        self.latex_converter = LatexNodes2Text()
        self.failed: List[Dict[str, str]] = []

    def preview(self, question: Dict[str, Any]) -> str:
        """Plain-text rendering of the escaped question text."""
        return self.latex_converter.latex_to_text(escape_latex(question.get('question'))).strip()

    def write_all(self, questions: List[Dict[str, Any]]) -> int:
        """
        Write fragments for all questions, skipping the ones that fail.

        Args:
            questions: Question records in output order

        Returns:
            Number of files written

        Raises:
            OSError: If the output directory cannot be created
        """
        ensure_directory(self.output_dir, verbose=self.verbose)
        self.failed = []
        files_created = 0

        for index, question in enumerate(questions, 1):
            if not isinstance(question, dict):
                self._record_failure(f"#{index}", f"not a question object ({type(question).__name__})")
                continue

            file_name = fragment_filename(question)
            if file_name is None:
                self._record_failure(f"#{index}", "question has no 'number'")
                continue

            file_path = self.output_dir / file_name
            try:
                write_text_file(file_path, render_fragment(question), self.encoding)
            except PerItemWriteError as e:
                self._record_failure(str(file_path), e.reason)
                continue

            files_created += 1
            if self.verbose >= 3:
                print(f"[WRITE] {file_name}: {self.preview(question)[:60]}")

        return files_created

    def _record_failure(self, item: str, reason: str) -> None:
        self.failed.append({"item": item, "reason": reason})
        if self.verbose >= 1:
            print(f"[WRITE] Error writing {item}: {reason}")
