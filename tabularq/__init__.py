"""Tabular Q-learning with action-selection strategies, and a control-loop environment framework."""

__version__ = "0.1.0"

__all__ = ["action", "state", "value", "qtable", "strategy", "control"]