# -*- coding: utf-8 -*-
"""
Section file writer module.

For every conversion job, reads a ``{"sections": [...], "questions": [...]}``
document, joins questions to their sections and writes one
``<chapter>S<section>.tex`` file per section that has questions. Each file is
a ``description`` environment that inputs the matching question fragments.

Date: 2026-10-19
"""

from pathlib import Path
from typing import Any, Dict, List

from .config_manager import ConfigManager
from .errors import ConversionError, PerItemWriteError, SchemaError
from .file_io import ensure_directory, load_json_document, write_text_file
from .section_grouper import SectionUnit, build_section_units


SECTION_HEADER = "% Kapitel {chapter}, Sektion {section}: {title}\n\n"


def render_section(unit: SectionUnit, fragment_subdir: str) -> str:
    """
    Render the LaTeX content of one section file.

    Args:
        unit: Section with its matched questions
        fragment_subdir: Directory of the fragment files as seen from LaTeX

    Returns:
        The full file content, header included
    """
    lines = ['\\begin{description}']
    for question in unit.questions:
        lines.append(f"    \\input{{{fragment_subdir}/{question.get('number')}.tex}}")
    lines.append('\\end{description}')

    header = SECTION_HEADER.format(
        chapter=unit.key.chapter,
        section=unit.key.section,
        title=unit.section_title,
    )
    return header + '\n'.join(lines) + '\n'


def validate_document(data: Any, json_path: Path) -> None:
    """
    Check that a job document has list-valued 'sections' and 'questions'.

    Raises:
        SchemaError: If the document does not have the expected shape
    """
    if not isinstance(data, dict):
        raise SchemaError(f"{json_path} must contain a JSON object, got {type(data).__name__}")

    missing = [field for field in ('sections', 'questions') if data.get(field) is None]
    if missing:
        raise SchemaError(f"{json_path} lacks the expected field(s): {', '.join(missing)}")

    for field in ('sections', 'questions'):
        if not isinstance(data[field], list):
            raise SchemaError(f"'{field}' in {json_path} must be a list, got {type(data[field]).__name__}")
        for index, record in enumerate(data[field]):
            if not isinstance(record, dict):
                raise SchemaError(f"{field}[{index}] in {json_path} must be an object, got {type(record).__name__}")


class SectionFileProcessor:
    """Runs section conversion jobs one after the other."""

    def __init__(self, config: ConfigManager, verbose: int = 2):
        """
        Initialize the processor.

        Args:
            config: Configuration manager instance
            verbose: Verbosity level (0-3)
        """
        self.config = config
        self.verbose = verbose
        self.fragment_subdir = config.get('sections.fragment_subdir', 'tex_fragen')
        self.encoding = config.encoding

    def process_job(self, job: Dict[str, Path]) -> Dict[str, Any]:
        """
        Convert a single JSON document into section files.

        Read, parse and schema failures end the job and are returned in the
        result. A failure to write one section file is recorded and the
        remaining sections are still written.

        Args:
            job: Dict with 'json_path' and 'output_dir'

        Returns:
            Result dict with 'json_path', 'output_dir', 'files_written',
            'write_failures' and, on fatal failure, 'error'
        """
        json_path = Path(job['json_path'])
        output_dir = Path(job['output_dir'])
        result: Dict[str, Any] = {
            "json_path": str(json_path),
            "output_dir": str(output_dir),
            "files_written": 0,
            "write_failures": [],
        }

        if self.verbose >= 2:
            print(f"\n[SECTIONS] Processing job: {json_path} -> {output_dir}")

        try:
            ensure_directory(output_dir, verbose=self.verbose)
        except OSError as e:
            if self.verbose >= 1:
                print(f"[SECTIONS] Error: cannot create output directory {output_dir}: {e}")
            result["error"] = f"Cannot create output directory {output_dir}: {e}"
            return result

        try:
            data = load_json_document(json_path, self.encoding)
            validate_document(data, json_path)
        except ConversionError as e:
            if self.verbose >= 1:
                print(f"[SECTIONS] Error: {e}")
            result["error"] = str(e)
            return result

        units = build_section_units(data['questions'], data['sections'], verbose=self.verbose)

        for unit in units:
            file_path = output_dir / f"{unit.key.file_stem}.tex"
            try:
                write_text_file(file_path, render_section(unit, self.fragment_subdir), self.encoding)
            except PerItemWriteError as e:
                if self.verbose >= 1:
                    print(f"[SECTIONS] Error: {e}")
                result["write_failures"].append(str(file_path))
                continue

            result["files_written"] += 1
            if self.verbose >= 3:
                print(f"[SECTIONS] {file_path.name}: {len(unit.questions)} questions ({unit.section_title})")

        if self.verbose >= 2:
            print(f"[SECTIONS] Generated {result['files_written']} section files")

        return result

    def run(self, jobs: List[Dict[str, Path]]) -> List[Dict[str, Any]]:
        """Process all jobs; a failed job does not stop the next one."""
        return [self.process_job(job) for job in jobs]
