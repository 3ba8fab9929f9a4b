"""Tabular Q-learning table."""

from __future__ import annotations

import json
import operator
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from .action import Action
from .state import State
from .value import QValue

if TYPE_CHECKING:
    from .strategy import Strategy

PathType = Union[str, "os.PathLike[str]"]


@dataclass
class QTableConfig:
    """Learning parameters."""

    gamma: float = 0.99
    alpha: float = 0.5
    epsilon: float = 0.5


@dataclass(frozen=True)
class Update:
    """One observed transition used to update the table."""

    state: State
    action: Action
    reward: float
    next_state: State


class QTable:
    """Q-values indexed by state, then action.

    Values are read through indexing and changed only through :meth:`update`.
    """

    def __init__(self, config: QTableConfig | None = None) -> None:
        self.config = config if config is not None else QTableConfig()
        self._qvalues: list[list[QValue]] = [
            QValue.random_collect(Action.size()) for _ in range(State.size())
        ]

    @classmethod
    def load(cls, file_path: PathType, config: QTableConfig | None = None) -> QTable:
        """Read a table saved by :meth:`save`."""
        with open(file_path, encoding="utf-8") as handle:
            raw = json.load(handle)
        table = cls.__new__(cls)
        table.config = config if config is not None else QTableConfig()
        table._qvalues = [[QValue(value) for value in row] for row in raw]
        return table

    def save(self, file_path: PathType) -> None:
        """Write the Q-values as a JSON array of arrays of numbers."""
        rows = [[q.value for q in row] for row in self._qvalues]
        with open(file_path, "w", encoding="utf-8") as handle:
            json.dump(rows, handle)

    def __getitem__(self, state: State) -> tuple[QValue, ...]:
        return tuple(self._qvalues[operator.index(state)])

    def __len__(self) -> int:
        return len(self._qvalues)

    @property
    def gamma(self) -> float:
        return self.config.gamma

    @property
    def alpha(self) -> float:
        return self.config.alpha

    @property
    def epsilon(self) -> float:
        return self.config.epsilon

    def next_action(self, state: State, strategy: Strategy) -> Action:
        """Choose an action for ``state`` with the given strategy."""
        return strategy.determine(self, state)

    def update(self, update: Update) -> None:
        """Apply the Q-learning rule for one transition.

        Raises ValueError if the new value falls outside the Q-value range.
        """
        row = self._qvalues[operator.index(update.state)]
        action_index = operator.index(update.action)
        current = row[action_index].value
        next_max = max(self._qvalues[operator.index(update.next_state)]).value
        row[action_index] = QValue(
            (1.0 - self.alpha) * current
            + self.alpha * (update.reward + self.gamma * next_max)
        )