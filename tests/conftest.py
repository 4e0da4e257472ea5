"""Pytest fixtures for tests."""

import pytest

from ycclab.logic.session.state import ColorSession


class RecordingCopier:
    """Stands in for the system clipboard and remembers what was copied."""

    def __init__(self):
        self.copied = []

    def __call__(self, text):
        self.copied.append(text)


@pytest.fixture
def copier():
    """Create a clipboard stand-in."""
    return RecordingCopier()


@pytest.fixture
def session(copier):
    """Create a session on the default color with a recording clipboard."""
    return ColorSession(copier=copier)


@pytest.fixture
def no_clipboard(monkeypatch):
    """Route every clipboard write made by the CLI into a list."""
    recorder = RecordingCopier()
    monkeypatch.setattr("ycclab.logic.color.engine.copy_text", recorder)
    return recorder
