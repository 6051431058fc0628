from pathlib import Path

import pytest

from student_management.database import build_engine, sqlite_file_path


@pytest.mark.parametrize(
    "database_url",
    [
        "sqlite://",
        "sqlite:///:memory:",
        "sqlite+pysqlite:///:memory:",
        "postgresql://user:pw@localhost/students",
    ],
)
def test_sqlite_file_path_none_without_file(database_url: str):
    assert sqlite_file_path(database_url) is None


def test_sqlite_file_path_handles_driver_urls():
    assert sqlite_file_path("sqlite:///./data/students.db") == Path("./data/students.db")
    assert sqlite_file_path("sqlite+pysqlite:///./data/students.db") == Path("./data/students.db")


def test_build_engine_creates_parent_dir_only(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)

    build_engine(f"sqlite+pysqlite:///{tmp_path}/nested/students.db").dispose()
    build_engine("sqlite://").dispose()

    assert (tmp_path / "nested").is_dir()
    assert sorted(p.name for p in tmp_path.iterdir()) == ["nested"]
