import time

import pytest

from runtime.models.record_models import LogEntry
from runtime.store.log_store import LogStore


def test_append_writes_message_and_epoch_millis(log_store):
    before = int(time.time() * 1000)
    log_store.append("scott.json succesfully deleted")
    after = int(time.time() * 1000)

    text = log_store.log_path.read_text()
    assert text.endswith("\n")
    message, stamp = text.rstrip("\n").rsplit(" ", 1)
    assert message == "scott.json succesfully deleted"
    assert before <= int(stamp) <= after


def test_append_is_append_only(log_store):
    log_store.append("first")
    log_store.append("second")
    assert [e.message for e in log_store.entries()] == ["first", "second"]


def test_append_never_raises(tmp_path, caplog):
    # The log path is a directory, so opening it for append fails.
    target = tmp_path / "logdir"
    target.mkdir()
    LogStore(str(target)).append("lost")
    assert "Could not append" in caplog.text


def test_truncate_empties_log(log_store):
    log_store.append("something")
    log_store.truncate()
    assert log_store.log_path.read_text() == ""
    assert log_store.entries() == []


def test_entries_of_missing_log_is_empty(tmp_path):
    assert LogStore(str(tmp_path / "missing.txt")).entries() == []


def test_parse_line_keeps_spaces_in_message():
    entry = LogEntry.parse_line("email: a@b.c successfully added to scott.json 1563221866619\n")
    assert entry.message == "email: a@b.c successfully added to scott.json"
    assert entry.timestamp == 1563221866619


def test_parse_line_rejects_missing_timestamp():
    with pytest.raises(ValueError):
        LogEntry.parse_line("no timestamp here")


def test_append_escapes_line_breaks(log_store):
    log_store.append("note: line one\nline two\r\nend")
    log_store.append("next")

    assert len(log_store.log_path.read_text().splitlines()) == 2
    assert [e.message for e in log_store.entries()] == [
        "note: line one\\nline two\\r\\nend",
        "next",
    ]


def test_append_unencodable_message_is_escaped(log_store):
    log_store.append("\ud800")
    assert [e.message for e in log_store.entries()] == ["\\ud800"]


def test_entries_skips_malformed_lines(log_store, caplog):
    log_store.append("first")
    with log_store.log_path.open("a", encoding="utf-8") as f:
        f.write("stray fragment\n")
    log_store.append("second")

    assert [e.message for e in log_store.entries()] == ["first", "second"]
    assert "Skipping malformed line 2" in caplog.text
