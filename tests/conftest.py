"""
Pytest configuration and shared fixtures.
"""

from typing import Optional

import pytest

from unitranslit import Transliterator
from unitranslit.exceptions import TableLoadError
from unitranslit.profiles import CharsetProfile
from unitranslit.tables.sources import TableSource
from unitranslit.utils import config as config_module


class FakeSource(TableSource):
    """In-memory source that records every fetch."""

    def __init__(self, name: str, blocks: Optional[dict] = None, broken: tuple = ()):
        self.name = name
        self.blocks = blocks or {}
        self.broken = set(broken)
        self.calls: list[int] = []

    def fetch_rows(self, block: int):
        self.calls.append(block)
        if block in self.broken:
            raise TableLoadError("disk on fire", source=self.name, block=block)
        rows = self.blocks.get(block)
        return list(rows) if rows is not None else None


def write_table(directory, block: int, content: str):
    path = directory / f"X{block:03x}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def fake_source():
    return FakeSource


@pytest.fixture
def make_profile():
    def _make(*sources, name="TEST"):
        return CharsetProfile(name, tuple(sources))
    return _make


@pytest.fixture(scope="session")
def ascii_translit():
    return Transliterator.for_charset("ASCII")


@pytest.fixture(scope="session")
def latin2_translit():
    return Transliterator.for_charset("ISO-8859-2")


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Keep the process-wide config isolated between tests."""
    for key in ("UNITRANSLIT_CONFIG", "UNITRANSLIT_ENGINE__CHARSET", "UNITRANSLIT_ENGINE__ON_UNKNOWN"):
        monkeypatch.delenv(key, raising=False)
    config_module.reset_config()
    yield
    config_module.reset_config()


@pytest.fixture
def table_writer():
    return write_table
