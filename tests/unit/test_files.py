from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from domains.file_ingest.processors import files
from domains.file_ingest.processors.files import created_date, trash_file


def test_trash_file_removes_file(tmp_path):
    target = tmp_path / "upload.pdf"
    target.write_text("data")

    trash_file(target)

    assert not target.exists()


def test_trash_file_missing_path_is_noop(tmp_path):
    missing = tmp_path / "missing.txt"

    trash_file(missing)
    trash_file(str(missing))

    assert not missing.exists()


def test_trash_file_leaves_directories_alone(tmp_path):
    directory = tmp_path / "folder"
    directory.mkdir()
    (directory / "keep.txt").write_text("keep")

    trash_file(directory)

    assert directory.is_dir()
    assert (directory / "keep.txt").read_text() == "keep"


def test_trash_file_removes_symlink_not_target(tmp_path):
    directory = tmp_path / "real"
    directory.mkdir()
    link = tmp_path / "link"
    link.symlink_to(directory, target_is_directory=True)

    trash_file(link)

    assert not link.exists()
    assert directory.is_dir()


def test_trash_file_lstat_failure_is_noop(tmp_path, monkeypatch):
    target = tmp_path / "unreadable.txt"
    target.write_text("data")

    def denied(path):
        raise PermissionError("no stat for you")

    monkeypatch.setattr(files.os, "lstat", denied)

    trash_file(target)

    monkeypatch.undo()
    assert target.exists()


def test_trash_file_propagates_delete_failure(tmp_path, monkeypatch):
    target = tmp_path / "locked.txt"
    target.write_text("busy")

    def refuse(self, missing_ok=False):
        raise PermissionError("locked")

    monkeypatch.setattr(Path, "unlink", refuse)

    with pytest.raises(PermissionError):
        trash_file(target)


def _fake_os(stat_result):
    return SimpleNamespace(stat=lambda path: stat_result)


def test_created_date_zero_birth_time_is_unknown(monkeypatch):
    monkeypatch.setattr(files, "os", _fake_os(SimpleNamespace(st_birthtime=0)))

    assert created_date("anything.txt") == "unknown"


def test_created_date_without_birth_time_is_unknown(monkeypatch):
    monkeypatch.setattr(files, "os", _fake_os(SimpleNamespace(st_mtime=1_700_000_000)))

    assert created_date("anything.txt") == "unknown"


def test_created_date_formats_birth_time(monkeypatch):
    born = 1_700_000_000.0
    monkeypatch.setattr(files, "os", _fake_os(SimpleNamespace(st_birthtime=born)))

    assert created_date("anything.txt") == datetime.fromtimestamp(born).strftime("%c")


def test_created_date_missing_file_is_unknown(tmp_path):
    assert created_date(tmp_path / "missing.txt") == "unknown"


if __name__ == "__main__":  # pragma: no cover
    pytest.main([__file__])
