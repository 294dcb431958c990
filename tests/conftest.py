from __future__ import annotations

from typing import Iterable

import pytest


class SequenceSource:
    """Randomness source replaying a fixed list of draws (taken modulo n)."""

    def __init__(self, values: Iterable[int]) -> None:
        self.values = list(values)
        self.bounds: list[int] = []
        self._pos = 0

    def randbelow(self, n: int) -> int:
        self.bounds.append(n)
        value = self.values[self._pos % len(self.values)]
        self._pos += 1
        return value % n


@pytest.fixture
def sequence_source():
    return SequenceSource
