import json
import logging

from growthrates.logging_utils import get_logger
from growthrates.server import _configure_logging


def test_key_value_output(monkeypatch, capsys):
    monkeypatch.setenv("GROWTH_LOG_LEVEL", "debug")
    monkeypatch.delenv("GROWTH_LOG_JSON", raising=False)
    get_logger("kv").debug(event="curve loaded", id="Fast", count=6)
    out = capsys.readouterr().out
    assert "level=debug" in out
    assert "event=curve_loaded" in out
    assert "id=Fast" in out
    assert "count=6" in out
    assert "logger=kv" in out


def test_json_output(monkeypatch, capsys):
    monkeypatch.setenv("GROWTH_LOG_JSON", "1")
    get_logger("js").info(event="seeded", skipped=None)
    rec = json.loads(capsys.readouterr().out.strip())
    assert rec["event"] == "seeded"
    assert rec["level"] == "info"
    assert rec["logger"] == "js"
    assert "skipped" not in rec


def test_threshold_and_streams(monkeypatch, capsys):
    monkeypatch.setenv("GROWTH_LOG_LEVEL", "warn")
    log = get_logger("th")
    log.info(event="hidden")
    log.warn(event="shown")
    captured = capsys.readouterr()
    assert "hidden" not in captured.out + captured.err
    assert "event=shown" in captured.err


def test_get_logger_is_cached():
    assert get_logger("same") is get_logger("same")


def test_configure_logging_is_idempotent(tmp_path):
    root = logging.getLogger()
    saved = list(root.handlers)
    try:
        _configure_logging(str(tmp_path))
        _configure_logging(str(tmp_path))
        assert len(root.handlers) == 2
        logging.getLogger("growthrates.test").info("hello")
        for h in root.handlers:
            h.flush()
        assert "hello" in (tmp_path / "growth.log").read_text()
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)


def test_reserved_level_field_does_not_break_logging(monkeypatch, capsys):
    monkeypatch.setenv("GROWTH_LOG_JSON", "1")
    get_logger("reserved").error(event="clash", level=8)
    rec = json.loads(capsys.readouterr().err.strip())
    assert rec["event"] == "clash"
    assert rec["level"] == "error"
