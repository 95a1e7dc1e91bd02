from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _silence_logging() -> None:
    logger.remove()


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in list(os.environ):
        if name.startswith("SPLITCTL_"):
            monkeypatch.delenv(name)
    monkeypatch.setenv("SPLITCTL_LOG_LEVEL", "CRITICAL")
    monkeypatch.chdir(tmp_path)


class RecordingTransport:
    """Transport double that records every delivery attempt."""

    def __init__(self, result: bool = True, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple[Any, Any, Any]] = []

    def deliver(self, target: Any, verb: Any, payload: Any) -> bool:
        self.calls.append((target, verb, payload))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def make_transport():
    def _make(result: bool = True, error: Exception | None = None) -> RecordingTransport:
        return RecordingTransport(result=result, error=error)

    return _make


@pytest.fixture
def transport(make_transport) -> RecordingTransport:
    return make_transport()
