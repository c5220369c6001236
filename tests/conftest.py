"""Shared pytest fixtures for desklaunch tests."""
from __future__ import annotations

import os

# Widget tests run without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import textwrap
from pathlib import Path
from typing import Callable, List

import pytest

from desklaunch import launcher


@pytest.fixture
def write_entry() -> Callable[..., Path]:
    """Write a desktop entry file; the text is dedented and stripped."""

    def _write(folder: Path, filename: str, text: str) -> Path:
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / filename
        path.write_text(textwrap.dedent(text).strip() + "\n", encoding="utf-8")
        return path

    return _write


class FakePopen:
    """Records spawn calls instead of starting processes."""

    calls: List[tuple] = []

    def __init__(self, argv, **kwargs):
        FakePopen.calls.append((list(argv), kwargs))


@pytest.fixture
def fake_popen(monkeypatch: pytest.MonkeyPatch):
    FakePopen.calls = []
    monkeypatch.setattr(launcher.subprocess, "Popen", FakePopen)
    return FakePopen


@pytest.fixture(scope="session")
def qapp():
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
