# -*- coding: utf-8 -*-
"""
Section grouper module for joining questions to their chapter sections.

Questions and sections share a (chapter, section) key. Both halves of the
key are normalised to strings, so a section numbered ``1`` in one place and
``"1"`` in another still join.

Date: 2026-10-19
"""

from typing import Any, Dict, List, NamedTuple


class SectionKey(NamedTuple):
    """Composite (chapter, section) join key."""
    chapter: str
    section: str

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'SectionKey':
        return cls(_key_part(record.get('chapter')), _key_part(record.get('section')))

    @property
    def file_stem(self) -> str:
        """Base name of the section file, e.g. '1S2'."""
        return f"{self.chapter}S{self.section}"


class SectionUnit(NamedTuple):
    """One section together with the questions filed under it."""
    key: SectionKey
    section_title: str
    questions: List[Dict[str, Any]]


def _key_part(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def group_questions(questions: List[Dict[str, Any]]) -> Dict[SectionKey, List[Dict[str, Any]]]:
    """Map each (chapter, section) key to its questions, in original order."""
    mapping: Dict[SectionKey, List[Dict[str, Any]]] = {}
    for question in questions:
        key = SectionKey.from_record(question)
        if key not in mapping:
            mapping[key] = []
        mapping[key].append(question)
    return mapping


def build_section_units(questions: List[Dict[str, Any]],
                        sections: List[Dict[str, Any]],
                        verbose: int = 0) -> List[SectionUnit]:
    """
    Pair every section that has questions with its question list.

    Sections without any matching question are skipped silently. Units come
    out in section order; questions inside a unit keep their original order.

    Args:
        questions: Question records with 'chapter' and 'section'
        sections: Section records with 'chapter', 'section' and 'section_txt'
        verbose: Verbosity level (0-3)

    Returns:
        List of section units
    """
    mapping = group_questions(questions)
    units: List[SectionUnit] = []

    for section in sections:
        key = SectionKey.from_record(section)
        matched = mapping.get(key)
        if not matched:
            if verbose >= 3:
                print(f"[GROUP] No questions for chapter {key.chapter}, section {key.section}; skipping")
            continue
        units.append(SectionUnit(key, section.get('section_txt'), matched))

    if verbose >= 2:
        print(f"[GROUP] {len(units)} of {len(sections)} sections have questions")

    return units
