"""Discrete actions of the Q-table."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from functools import cache

ACTION_SIZE_ENV = "ACTION_SIZE"
DEFAULT_ACTION_SIZE = 15

_UNSIGNED = re.compile(r"\+?[0-9]+")


@cache
def _configured_size() -> int:
    raw = os.environ.get(ACTION_SIZE_ENV)
    if raw is None or not _UNSIGNED.fullmatch(raw):
        return DEFAULT_ACTION_SIZE
    return int(raw)


@dataclass(frozen=True)
class Action:
    """Index of an action, always below :meth:`Action.size`."""

    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index < self.size():
            raise ValueError(
                f"action index {self.index} out of range 0..{self.size()}"
            )

    @classmethod
    def size(cls) -> int:
        """Number of actions, read once from ``ACTION_SIZE`` (default 15)."""
        return _configured_size()

    def __index__(self) -> int:
        return self.index

    def __int__(self) -> int:
        return self.index