"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest

from reviewpack.cli import main


def test_review_writes_store_and_reports(tmp_path: Path, console_file: Path):
    db = tmp_path / "out.reviewpack"
    reports = tmp_path / "reviews"

    main(["review", str(console_file), "-t", "100", "-o", "20", "--db", str(db), "--reports", str(reports)])

    assert db.exists()
    assert len(list(reports.glob("*.json"))) == 1
    assert len(list(reports.glob("*.md"))) == 1


def test_review_json_output(capsys, console_file: Path):
    main(["review", str(console_file), "--json"])

    data = json.loads(capsys.readouterr().out)
    assert data["total_chunks"] == 1
    assert len(data["findings"]) == 40
    assert all(f["chunk"] is None for f in data["findings"])


def test_review_folder(tmp_path: Path, capsys):
    project = tmp_path / "project"
    project.mkdir()
    (project / "a.py").write_text("eval(x)\n", encoding="utf-8")
    (project / "b.js").write_text("const y = 1;\n", encoding="utf-8")

    main(["review", str(project), "-r", "security", "--json"])

    out = capsys.readouterr().out
    assert out.count('"rule_set": "security"') == 2


def test_review_missing_file_exits_non_zero(tmp_path: Path):
    with pytest.raises(SystemExit) as exc_info:
        main(["review", str(tmp_path / "missing.py")])
    assert exc_info.value.code == 1


def test_review_rejects_overlap_not_below_max(console_file: Path):
    with pytest.raises(SystemExit) as exc_info:
        main(["review", str(console_file), "-t", "100", "-o", "100"])
    assert exc_info.value.code == 1


def test_chunk_writes_manifest(tmp_path: Path, console_file: Path):
    out = tmp_path / "chunks"
    main(["chunk", str(console_file), "-t", "100", "-o", "20", "--out", str(out)])

    (folder,) = list(out.iterdir())
    manifest = json.loads((folder / "metadata.json").read_text(encoding="utf-8"))
    assert manifest["total_chunks"] == 3
    assert len(list(folder.glob("chunk_*.js"))) == 3


def test_chunk_rejects_bad_budget(console_file: Path):
    with pytest.raises(SystemExit):
        main(["chunk", str(console_file), "-t", "10", "-o", "50"])


def test_info_summarizes_store(tmp_path: Path, console_file: Path, capsys):
    db = tmp_path / "out.reviewpack"
    main(["review", str(console_file), "-t", "100", "-o", "20", "--db", str(db)])
    capsys.readouterr()

    main(["info", str(db)])
    out = capsys.readouterr().out
    assert "Files reviewed: 1" in out
    assert "Chunked files: 1" in out
    assert "Findings: 40" in out


def test_info_missing_store_exits(tmp_path: Path):
    with pytest.raises(SystemExit):
        main(["info", str(tmp_path / "absent.reviewpack")])
