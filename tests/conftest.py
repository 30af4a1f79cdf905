"""Shared fixtures: a fake %USERPROFILE% with one GTA V profile."""

import logging
import os
from pathlib import Path

import pytest

from gtav_saveload.logging_config import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


@pytest.fixture
def home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
    return home


@pytest.fixture
def game_dir(home):
    game = home / "Documents" / "Rockstar Games" / "GTA V"
    (game / "Profiles").mkdir(parents=True)
    return game


@pytest.fixture
def profile(game_dir):
    path = game_dir / "Profiles" / "3F2A91C0"
    path.mkdir()
    return path


@pytest.fixture
def make_files():
    """Create files in a directory; returns {name: content}."""
    def _make(directory: Path, *names: str, content: bytes | None = None) -> dict[str, bytes]:
        directory.mkdir(parents=True, exist_ok=True)
        written = {}
        for name in names:
            data = content if content is not None else f"payload of {name}".encode()
            (directory / name).write_bytes(data)
            written[name] = data
        return written
    return _make


@pytest.fixture
def save_names():
    """Sorted names of SGTA* files directly under a directory."""
    def _names(directory: Path, prefix: str = "SGTA") -> list[str]:
        return sorted(p.name for p in directory.iterdir() if p.is_file() and p.name.startswith(prefix))
    return _names


@pytest.fixture
def set_mtime():
    def _set(path: Path, timestamp: float) -> None:
        os.utime(path, (timestamp, timestamp))
    return _set
