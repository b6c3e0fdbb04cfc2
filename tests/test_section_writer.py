"""
Unit tests for section file generation and job processing.
"""

from pathlib import Path

from texbank.config_manager import ConfigManager
from texbank.section_grouper import build_section_units
from texbank.section_writer import SectionFileProcessor, render_section


def make_processor(tmp_path: Path, verbose: int = 0) -> SectionFileProcessor:
    config = ConfigManager(verbose=0, base_dir=tmp_path)
    return SectionFileProcessor(config, verbose=verbose)


def test_render_section(sample_questions, sample_sections):
    units = build_section_units(sample_questions, sample_sections)

    assert render_section(units[0], "tex_fragen") == (
        "% Kapitel 1, Sektion 1: Grundlagen\n"
        "\n"
        "\\begin{description}\n"
        "    \\input{tex_fragen/NA101.tex}\n"
        "    \\input{tex_fragen/NA102.tex}\n"
        "\\end{description}\n"
    )


def test_render_section_custom_fragment_dir(sample_questions, sample_sections):
    units = build_section_units(sample_questions, sample_sections)

    assert "\\input{fragen/NA201.tex}" in render_section(units[1], "fragen")


def test_process_job_writes_matched_sections(tmp_path, write_json, sample_questions, sample_sections):
    json_path = write_json("50Ohm/50Ohm_NE.json", {"sections": sample_sections, "questions": sample_questions})
    output_dir = tmp_path / "tex_sections"

    result = make_processor(tmp_path).process_job({"json_path": json_path, "output_dir": output_dir})

    assert result["files_written"] == 2
    assert "error" not in result
    assert sorted(p.name for p in output_dir.iterdir()) == ["1S1.tex", "1S2.tex"]
    assert (output_dir / "1S2.tex").read_text(encoding="utf-8").startswith("% Kapitel 1, Sektion 2: Prozentrechnung")


def test_missing_input_is_reported(tmp_path, capsys):
    output_dir = tmp_path / "out"

    result = make_processor(tmp_path, verbose=1).process_job(
        {"json_path": tmp_path / "missing.json", "output_dir": output_dir}
    )

    assert "Could not read" in result["error"]
    assert result["files_written"] == 0
    assert output_dir.is_dir()
    assert list(output_dir.iterdir()) == []
    assert "[SECTIONS] Error" in capsys.readouterr().out


def test_invalid_json_is_reported(tmp_path):
    json_path = tmp_path / "broken.json"
    json_path.write_text("{not json", encoding="utf-8")

    result = make_processor(tmp_path).process_job({"json_path": json_path, "output_dir": tmp_path / "out"})

    assert "Invalid JSON" in result["error"]


def test_missing_fields_are_reported(tmp_path, write_json):
    json_path = write_json("only_sections.json", {"sections": []})

    result = make_processor(tmp_path).process_job({"json_path": json_path, "output_dir": tmp_path / "out"})

    assert "questions" in result["error"]


def test_wrong_shapes_are_reported(tmp_path, write_json):
    processor = make_processor(tmp_path)

    not_object = write_json("list.json", [1, 2])
    not_list = write_json("dict.json", {"sections": {}, "questions": []})
    bad_record = write_json("record.json", {"sections": [], "questions": ["NA101"]})

    for path in (not_object, not_list, bad_record):
        result = processor.process_job({"json_path": path, "output_dir": tmp_path / "out"})
        assert "error" in result, path


def test_empty_lists_are_valid(tmp_path, write_json):
    json_path = write_json("empty.json", {"sections": [], "questions": []})

    result = make_processor(tmp_path).process_job({"json_path": json_path, "output_dir": tmp_path / "out"})

    assert "error" not in result
    assert result["files_written"] == 0


def test_failed_job_does_not_stop_batch(tmp_path, write_json, sample_questions, sample_sections):
    good = write_json("good.json", {"sections": sample_sections, "questions": sample_questions})

    results = make_processor(tmp_path).run([
        {"json_path": tmp_path / "missing.json", "output_dir": tmp_path / "a"},
        {"json_path": good, "output_dir": tmp_path / "b"},
    ])

    assert "error" in results[0]
    assert results[1]["files_written"] == 2


def test_write_failure_skips_single_section(tmp_path, write_json, sample_questions, sample_sections):
    json_path = write_json("doc.json", {"sections": sample_sections, "questions": sample_questions})
    output_dir = tmp_path / "out"
    (output_dir / "1S1.tex").mkdir(parents=True)

    result = make_processor(tmp_path).process_job({"json_path": json_path, "output_dir": output_dir})

    assert result["files_written"] == 1
    assert result["write_failures"] == [str(output_dir / "1S1.tex")]
    assert (output_dir / "1S2.tex").is_file()


def test_rerun_overwrites(tmp_path, write_json, sample_questions, sample_sections):
    json_path = write_json("doc.json", {"sections": sample_sections, "questions": sample_questions})
    job = {"json_path": json_path, "output_dir": tmp_path / "out"}
    processor = make_processor(tmp_path)

    processor.process_job(job)
    first = (tmp_path / "out" / "1S1.tex").read_text(encoding="utf-8")
    processor.process_job(job)

    assert (tmp_path / "out" / "1S1.tex").read_text(encoding="utf-8") == first


def test_output_dir_blocked_by_file_fails_only_that_job(tmp_path, write_json, sample_questions, sample_sections):
    good = write_json("good.json", {"sections": sample_sections, "questions": sample_questions})
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    results = make_processor(tmp_path).run([
        {"json_path": good, "output_dir": blocker},
        {"json_path": good, "output_dir": tmp_path / "b"},
    ])

    assert "Cannot create output directory" in results[0]["error"]
    assert results[0]["files_written"] == 0
    assert results[1]["files_written"] == 2
