"""Shared fixtures: a headless Qt application and sample image bytes."""

import base64
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

# 1x1 PNG
PNG_BASE64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
PNG_BYTES = base64.b64decode(PNG_BASE64)


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    """Create the QApplication once for the whole test session."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def png_bytes():
    return PNG_BYTES


class InlineThreadPool:
    """Thread pool stand-in that runs workers immediately on the calling thread."""

    def __init__(self):
        self.started = []

    def start(self, worker):
        self.started.append(worker)
        worker.run()


class HeldThreadPool:
    """Thread pool stand-in that keeps workers queued until released."""

    def __init__(self):
        self.pending = []
        self.started = []

    def start(self, worker):
        self.started.append(worker)
        self.pending.append(worker)

    def run_next(self):
        worker = self.pending.pop(0)
        worker.run()

    def run_all(self):
        while self.pending:
            self.run_next()


@pytest.fixture
def inline_pool():
    return InlineThreadPool()


@pytest.fixture
def held_pool():
    return HeldThreadPool()
