"""Action-selection strategies for a Q-table."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .action import Action
from .state import State

if TYPE_CHECKING:
    from .qtable import QTable


class Strategy(ABC):
    """Chooses an action for a state of a Q-table."""

    @abstractmethod
    def determine(self, qtable: QTable, state: State) -> Action:
        """Return the chosen action."""


class Explore(Strategy):
    """Greedy choice; ties between best actions are broken at random."""

    def determine(self, qtable: QTable, state: State) -> Action:
        row = qtable[state]
        best = max(row)
        candidates = [Action(index) for index, q in enumerate(row) if q == best]
        return random.choice(candidates)


class SoftMax(Strategy):
    """Sample an action with probability proportional to exp(Q)."""

    def determine(self, qtable: QTable, state: State) -> Action:
        row = qtable[state]
        best = max(row).value
        weights = [math.exp(q.value - best) for q in row]
        total = sum(weights)
        probabilities = [w / total for w in weights]
        (index,) = random.choices(range(len(row)), weights=probabilities)
        return Action(index)


class Random(Strategy):
    """Uniformly random action."""

    def determine(self, qtable: QTable, state: State) -> Action:
        return Action(random.randrange(Action.size()))


class EpsilonGreedy(Strategy):
    """Random action with probability epsilon, greedy otherwise."""

    def determine(self, qtable: QTable, state: State) -> Action:
        if random.random() < qtable.epsilon:
            return Random().determine(qtable, state)
        return Explore().determine(qtable, state)