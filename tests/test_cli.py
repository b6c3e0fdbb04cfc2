"""
Integration tests for the command-line scripts in src/.
"""

from pathlib import Path

import questions2tex
import sections2tex
import svg2tex
import svgdims


def test_questions2tex_end_to_end(tmp_path: Path, write_json, sample_questions):
    catalogue = {
        "chapters": [
            {"title": "Kapitel 1", "questions": sample_questions[:2]},
            {"title": "Kapitel 2", "sub": {"questions": sample_questions[2:]}},
        ]
    }
    input_file = write_json("Fragen/katalog.json", catalogue)
    output_dir = tmp_path / "tex_fragen"

    exit_code = questions2tex.main(["-i", str(input_file), "-o", str(output_dir), "-v", "0"])

    assert exit_code == 0
    assert sorted(p.name for p in output_dir.iterdir()) == ["NA101.tex", "NA102.tex", "NA201.tex"]


def test_questions2tex_missing_input(tmp_path: Path, capsys):
    exit_code = questions2tex.main(["-i", str(tmp_path / "missing.json"), "-o", str(tmp_path / "out"), "-v", "1"])

    assert exit_code == 1
    assert "missing.json" in capsys.readouterr().out
    assert not (tmp_path / "out").exists()


def test_questions2tex_malformed_catalogue(tmp_path: Path, write_json):
    input_file = write_json("bad.json", {"questions": {"number": "NA101"}})

    assert questions2tex.main(["-i", str(input_file), "-o", str(tmp_path / "out"), "-v", "0"]) == 1


def test_sections2tex_jobs(tmp_path: Path, write_json, sample_questions, sample_sections):
    good = write_json("50Ohm/50Ohm_NE.json", {"sections": sample_sections, "questions": sample_questions})
    out = tmp_path / "tex_sections"

    exit_code = sections2tex.main([
        "--job", f"{good}:{out}",
        "--fragment-dir", "fragen",
        "-v", "0",
    ])

    assert exit_code == 0
    assert "\\input{fragen/NA101.tex}" in (out / "1S1.tex").read_text(encoding="utf-8")


def test_sections2tex_failed_job_sets_exit_code(tmp_path: Path, write_json, sample_questions, sample_sections):
    good = write_json("good.json", {"sections": sample_sections, "questions": sample_questions})

    exit_code = sections2tex.main([
        "--job", f"{tmp_path / 'missing.json'}:{tmp_path / 'a'}",
        "--job", f"{good}:{tmp_path / 'b'}",
        "-v", "0",
    ])

    assert exit_code == 1
    assert (tmp_path / "b" / "1S1.tex").is_file()


def test_svgdims_builtin_examples(capsys):
    assert svgdims.main([]) == 0

    out = capsys.readouterr().out
    assert "viewBox aspect ratio" in out
    assert "400px" in out


def test_svgdims_reports_per_file(tmp_path: Path, capsys):
    svg = tmp_path / "icon.svg"
    svg.write_text('<svg width="16px" height="16px"/>', encoding="utf-8")

    exit_code = svgdims.main([str(tmp_path / "missing.svg"), str(svg)])

    out = capsys.readouterr().out
    assert exit_code == 1
    assert "File not found" in out
    assert "16px" in out


def test_svg2tex_requires_files(capsys):
    assert svg2tex.main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_questions2tex_reports_too_deeply_nested_json(tmp_path: Path, capsys):
    deep = tmp_path / "deep.json"
    deep.write_text("[" * 200000 + "]" * 200000, encoding="utf-8")

    exit_code = questions2tex.main(["-i", str(deep), "-o", str(tmp_path / "out"), "-v", "1"])

    assert exit_code == 1
    assert "nested too deeply" in capsys.readouterr().out


def test_questions2tex_output_path_is_a_file(tmp_path: Path, write_json, sample_questions, capsys):
    input_file = write_json("katalog.json", {"questions": sample_questions})
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    exit_code = questions2tex.main(["-i", str(input_file), "-o", str(blocker), "-v", "1"])

    assert exit_code == 1
    assert "Cannot create output directory" in capsys.readouterr().out


def test_svgdims_quiet_prints_no_cards(capsys):
    assert svgdims.main(["-v", "0"]) == 0

    assert capsys.readouterr().out == ""
