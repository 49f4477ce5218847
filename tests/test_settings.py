from pathlib import Path

import pytest

from configs.settings import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "RECDB_STORE_DIR",
        "RECDB_LOG_PATH",
        "RECDB_MERGE_FILENAME",
        "RECDB_REMOVE_MISSING_KEY",
        "RECDB_SET_CREATES_MISSING",
        "RECDB_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    s = Settings()
    assert s.store_dir == Path("db")
    assert s.log_path == Path("log.txt")
    assert s.merge_filename == "merge.json"
    assert s.remove_missing_key == "ignore"
    assert s.set_creates_missing is False
    assert s.log_level == "WARNING"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("RECDB_STORE_DIR", str(tmp_path / "records"))
    monkeypatch.setenv("RECDB_LOG_PATH", str(tmp_path / "ops.log"))
    monkeypatch.setenv("RECDB_MERGE_FILENAME", "everything.json")
    monkeypatch.setenv("RECDB_REMOVE_MISSING_KEY", "Error")
    monkeypatch.setenv("RECDB_SET_CREATES_MISSING", "yes")
    monkeypatch.setenv("RECDB_LOG_LEVEL", "debug")

    s = Settings()
    assert s.store_dir == tmp_path / "records"
    assert s.log_path == tmp_path / "ops.log"
    assert s.merge_filename == "everything.json"
    assert s.remove_missing_key == "error"
    assert s.set_creates_missing is True
    assert s.log_level == "DEBUG"


@pytest.mark.parametrize(
    "name, value, attr",
    [
        ("RECDB_REMOVE_MISSING_KEY", "maybe", "remove_missing_key"),
        ("RECDB_SET_CREATES_MISSING", "perhaps", "set_creates_missing"),
        ("RECDB_MERGE_FILENAME", "merge.txt", "merge_filename"),
        ("RECDB_LOG_LEVEL", "LOUD", "log_level"),
    ],
)
def test_invalid_values_raise(monkeypatch, name, value, attr):
    monkeypatch.setenv(name, value)
    with pytest.raises(RuntimeError):
        getattr(Settings(), attr)
