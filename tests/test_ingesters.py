"""Tests for input source handlers."""

import zipfile
from pathlib import Path

import pytest

from reviewpack.errors import InputError
from reviewpack.ingesters import (
    FileIngester,
    FolderIngester,
    ZipIngester,
    get_ingester,
    read_source,
)
from reviewpack.protocols import Ingester


def build_tree(root: Path) -> None:
    files = {
        "a.py": b"print('a')\n",
        "src/b.js": b"console.log('b')\n",
        "node_modules/c.js": b"module.exports = 1\n",
        ".hidden/d.py": b"x = 1\n",
        "image.png": b"\x89PNG",
        "notes.txt": b"just notes\n",
        "bad.py": b"\x00\x01\x02",
    }
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)


def test_folder_ingester_yields_source_files(tmp_path: Path):
    build_tree(tmp_path)
    sources = list(FolderIngester().ingest(tmp_path))

    assert [Path(s.path).relative_to(tmp_path).as_posix() for s in sources] == ["a.py", "src/b.js"]
    assert [s.language for s in sources] == ["python", "javascript"]


def test_zip_ingester_reads_code_members(tmp_path: Path):
    archive = tmp_path / "project.zip"
    with zipfile.ZipFile(archive, "w") as zf:
        zf.writestr("src/x.py", "def x():\n    return 1\n")
        zf.writestr("logo.png", b"\x89PNG")

    (source,) = list(ZipIngester().ingest(archive))
    assert source.path.endswith("project.zip/src/x.py")
    assert source.language == "python"
    assert source.text.startswith("def x()")


def test_corrupt_zip_raises_input_error(tmp_path: Path):
    archive = tmp_path / "broken.zip"
    archive.write_bytes(b"not a zip")
    with pytest.raises(InputError):
        list(ZipIngester().ingest(archive))


def test_get_ingester_picks_by_source_shape(tmp_path: Path):
    build_tree(tmp_path)
    archive = tmp_path / "project.zip"
    with zipfile.ZipFile(archive, "w") as zf:
        zf.writestr("x.py", "x = 1\n")

    assert isinstance(get_ingester(tmp_path), FolderIngester)
    assert isinstance(get_ingester(archive), ZipIngester)
    assert isinstance(get_ingester(tmp_path / "a.py"), FileIngester)
    assert get_ingester(tmp_path / "missing.py") is None


def test_ingesters_satisfy_protocol():
    for ingester in (FileIngester(), FolderIngester(), ZipIngester()):
        assert isinstance(ingester, Ingester)


def test_read_source_detects_language(tmp_path: Path):
    path = tmp_path / "main.go"
    path.write_text("package main\n", encoding="utf-8")

    source = read_source(path)
    assert source.language == "go"
    assert source.text == "package main\n"


def test_read_source_rejects_directories(tmp_path: Path):
    with pytest.raises(InputError):
        read_source(tmp_path)
