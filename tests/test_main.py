# tests/test_main.py

from __future__ import annotations

import io
import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.cli import main as main_module
from taskpad.config import Settings
from taskpad.logging_setup import _ConsoleNoiseFilter, setup_logging


@pytest.fixture()
def run_main(monkeypatch: pytest.MonkeyPatch, settings: SimpleNamespace):
    """Run main() with injected settings, no logging setup and a fake stdin."""
    monkeypatch.setattr(main_module, "get_settings", lambda: settings)
    monkeypatch.setattr(main_module, "setup_logging", lambda **kwargs: None)

    def _run(stdin_text: str) -> int:
        monkeypatch.setattr("sys.stdin", io.StringIO(stdin_text))
        return main_module.main()

    return _run


def test_bye_exits_zero(run_main, settings: SimpleNamespace, capsys) -> None:
    assert run_main("todo a\nbye\n") == 0
    assert "Bye." in capsys.readouterr().out
    assert settings.tasks_path.read_text("utf-8") == "T | 0 | a\n"


def test_non_txt_task_file_exits_nonzero(run_main, settings: SimpleNamespace, capsys) -> None:
    settings.tasks_path = settings.data_dir / "tasks.csv"

    assert run_main("bye\n") == 1
    assert ".txt" in capsys.readouterr().err


def test_unwritable_task_file_exits_nonzero(
    run_main, settings: SimpleNamespace, tmp_path: Path, capsys
) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", "utf-8")
    settings.tasks_path = blocker / "tasks.txt"

    assert run_main("list\n") == 1
    assert "Fatal:" in capsys.readouterr().err


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKPAD_APP_NAME", "tracker")
    monkeypatch.setenv("TASKPAD_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("TASKPAD_TASKS_PATH", raising=False)
    monkeypatch.setenv("TASKPAD_STRICT_DATES", "yes")

    s = Settings.from_env()

    assert s.app_name == "tracker"
    assert s.data_dir == tmp_path
    assert s.tasks_path == tmp_path / "tasks.txt"
    assert s.strict_dates is True


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for suffix in ("APP_NAME", "LOG_LEVEL", "DATA_DIR", "TASKS_PATH", "STRICT_DATES"):
        monkeypatch.delenv(f"TASKPAD_{suffix}", raising=False)

    s = Settings.from_env()

    assert s.app_name == "taskpad"
    assert s.log_level == "WARNING"
    assert s.tasks_path == Path(".local/taskpad") / "tasks.txt"
    assert s.strict_dates is False


def test_console_noise_filter() -> None:
    def record(name: str, level: int) -> logging.LogRecord:
        return logging.LogRecord(name, level, __file__, 1, "msg", None, None)

    f = _ConsoleNoiseFilter()
    assert f.filter(record("taskpad.tasks.task_file", logging.INFO))
    assert not f.filter(record("py.warnings", logging.WARNING))
    assert not f.filter(record("urllib3", logging.WARNING))
    assert f.filter(record("urllib3", logging.ERROR))


def test_setup_logging_writes_app_records_to_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        log_file = setup_logging(log_dir=tmp_path / "logs")
        logging.getLogger("taskpad.tests").debug("hello from tests")
        for h in root.handlers:
            h.flush()

        assert log_file == tmp_path / "logs" / "taskpad.log"
        assert "taskpad.tests: hello from tests" in log_file.read_text("utf-8")
        assert len(root.handlers) == 2
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)
