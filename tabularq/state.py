"""Discrete states of the Q-table."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from functools import cache

STATE_SIZE_ENV = "STATE_SIZE"
DEFAULT_STATE_SIZE = 15

_UNSIGNED = re.compile(r"\+?[0-9]+")


@cache
def _configured_size() -> int:
    raw = os.environ.get(STATE_SIZE_ENV)
    if raw is None or not _UNSIGNED.fullmatch(raw):
        return DEFAULT_STATE_SIZE
    return int(raw)


@dataclass(frozen=True)
class State:
    """Index of a state, always below :meth:`State.size`."""

    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index < self.size():
            raise ValueError(
                f"state index {self.index} out of range 0..{self.size()}"
            )

    @classmethod
    def size(cls) -> int:
        """Number of states, read once from ``STATE_SIZE`` (default 15)."""
        return _configured_size()

    def __index__(self) -> int:
        return self.index

    def __int__(self) -> int:
        return self.index