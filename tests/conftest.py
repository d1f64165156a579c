# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.cli.bootstrap import create_initial_state
from taskpad.core.state import AppState


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any .env file.
    """
    return SimpleNamespace(
        app_name="taskpad",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "data" / "tasks.txt",
        strict_dates=False,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState backed by a real (empty) task file under tmp_path."""
    return create_initial_state(settings=settings)
