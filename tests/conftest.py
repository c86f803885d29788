"""Shared fixtures for config file tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def metadata_dir(tmp_path: Path) -> Path:
    """Create the private metadata directory (a bare .git stand-in)."""
    path = tmp_path / ".git"
    path.mkdir()
    return path


@pytest.fixture()
def write_file(tmp_path: Path):  # type: ignore[no-untyped-def]
    """Return a helper that writes text under tmp_path and returns its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


class RecordingLogger:
    """Stand-in for the structlog logger that keeps every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def _record(self, level: str, event: str, **kw: Any) -> None:
        self.calls.append((level, event, kw))

    def debug(self, event: str, **kw: Any) -> None:
        self._record("debug", event, **kw)

    def info(self, event: str, **kw: Any) -> None:
        self._record("info", event, **kw)

    def warning(self, event: str, **kw: Any) -> None:
        self._record("warning", event, **kw)

    def error(self, event: str, **kw: Any) -> None:
        self._record("error", event, **kw)

    def events(self, level: str) -> list[str]:
        return [event for lvl, event, _ in self.calls if lvl == level]


@pytest.fixture()
def recorded_logs(monkeypatch: pytest.MonkeyPatch) -> RecordingLogger:
    """Capture log calls made by the config file modules."""
    recorder = RecordingLogger()
    monkeypatch.setattr("tfs_bridge.config_files.cached_file.logger", recorder)
    monkeypatch.setattr("tfs_bridge.config_files.excluded_renames.logger", recorder)
    return recorder
