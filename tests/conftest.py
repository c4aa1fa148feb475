import logging

import pytest

from voc import config


class ScriptedInput:
    """Stands in for input(): hands out the given lines, then EOFError."""

    def __init__(self, lines):
        self.lines = list(lines)

    def __call__(self):
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)
    monkeypatch.setattr(config, "SEED", None)


@pytest.fixture(autouse=True)
def restore_root_logger():
    # the cli reconfigures the root logger with force=True
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def scripted():
    return ScriptedInput


@pytest.fixture
def make_db(tmp_path):
    """Build a vocabulary database directory from {name: bytes}."""

    def _make(files=None, subdirs=()):
        db = tmp_path / "voc_db"
        db.mkdir()
        for name, content in (files or {}).items():
            (db / name).write_bytes(content)
        for name in subdirs:
            (db / name).mkdir()
        return db

    return _make


@pytest.fixture
def animals(make_db):
    return make_db({"animals": b"cat:feline\ndog:canine\n"})
