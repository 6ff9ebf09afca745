"""Shared fixtures: a file-backed store per test and a controllable clock."""

import pytest

from audread.io import StoreHandle


class FakeClock:
    """Epoch-seconds clock advanced by hand."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def handle(tmp_path):
    store = StoreHandle(tmp_path / "audread.db")
    store.open()
    yield store
    store.close()
