"""Environment loop that ties a physics simulation to a task."""

from __future__ import annotations

import enum
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

Observation = TypeVar("Observation")
P = TypeVar("P", bound="Physics")


class PhysicsError(ValueError):
    """Raised when data handed to the physics has the wrong size."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Size not matching: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class Physics(ABC):
    """A simulation that can be reset and advanced in fixed time steps."""

    #: True once a reset has been completed by ``after_reset``.
    reset_complete: bool = False

    @abstractmethod
    def reset(self) -> None:
        """Return the simulation to its initial state."""

    def after_reset(self) -> None:
        """Finish a reset; subclasses refresh derived quantities here."""
        self.reset_complete = True

    @abstractmethod
    def step(self, n: int) -> None:
        """Advance the simulation by ``n`` time steps."""

    @abstractmethod
    def timestamp(self) -> float:
        """Length of one simulation time step, in seconds."""

    def with_reset(self, f: Callable[[Any], Any]) -> None:
        """Reset, call ``f`` with this physics, then finish the reset."""
        self.reset()
        f(self)
        self.after_reset()


class Task(ABC, Generic[P, Observation]):
    """Defines episodes, observations and rewards for a physics."""

    #: Discount returned by ``get_final_discount``; None keeps episodes running.
    final_discount: Optional[float] = None
    #: Number of times ``after_step`` has run on this task.
    steps_observed: int = 0

    @abstractmethod
    def initialize_episode(self, physics: P) -> None:
        """Set the state of the environment at the start of an episode."""

    @abstractmethod
    def before_step(self, action: Any, physics: P) -> None:
        """Apply ``action`` before the physics advances."""

    def after_step(self, physics: P) -> None:
        """Update the task after the physics has advanced."""
        self.steps_observed += 1

    @abstractmethod
    def get_observation(self, physics: P) -> Observation:
        """Return an observation of the current state."""

    @abstractmethod
    def get_reward(self, physics: P) -> float:
        """Return the reward for the current state."""

    def get_final_discount(self, physics: P) -> Optional[float]:
        """Return a final discount if the episode should end, else None."""
        return self.final_discount


@dataclass(frozen=True)
class BoundedArraySpec:
    """Shape of an array of bounded values."""

    shape: tuple[int, int]


class StepType(enum.Enum):
    FIRST = "first"
    MID = "mid"
    LAST = "last"


@dataclass(frozen=True)
class TimeStep(Generic[Observation]):
    """Result of resetting or stepping an environment.

    ``reward`` and ``discount`` are None on the first step of an episode.
    """

    step_type: StepType
    observation: Observation
    reward: Optional[float] = None
    discount: Optional[float] = None

    def is_first(self) -> bool:
        return self.step_type is StepType.FIRST

    def is_mid(self) -> bool:
        return self.step_type is StepType.MID

    def is_last(self) -> bool:
        return self.step_type is StepType.LAST


def compute_n_steps(control_timestamp: float, physics_timestamp: float) -> int:
    """Number of physics steps in one control step.

    Raises ValueError unless the control timestamp is an integer multiple,
    at least one, of the physics timestamp.
    """
    if not control_timestamp >= physics_timestamp:
        raise ValueError(
            f"Control timestamp ({control_timestamp}) must not be less than "
            f"physics timestamp ({physics_timestamp})"
        )
    div = control_timestamp / physics_timestamp
    rounded = float(round(div))
    if not abs(rounded - div) < sys.float_info.epsilon:
        raise ValueError(
            f"Control timestamp ({control_timestamp}) must be an integer-multiple "
            f"of physics timestamp ({physics_timestamp})"
        )
    return int(rounded)


class Environment(Generic[P, Observation]):
    """Runs a task on a physics, one control step at a time."""

    def __init__(
        self,
        physics: P,
        task: Task[P, Observation],
        control_timestamp: float = 1.0,
    ) -> None:
        self._n_sub_steps = compute_n_steps(control_timestamp, physics.timestamp())
        self._physics = physics
        self._task = task
        self.step_count = 0
        self._reset_next_step = True

    @property
    def physics(self) -> P:
        return self._physics

    @property
    def task(self) -> Task[P, Observation]:
        return self._task

    @property
    def n_sub_steps(self) -> int:
        return self._n_sub_steps

    def control_timestamp(self) -> float:
        """Length of one control step, in seconds."""
        return self._n_sub_steps * self._physics.timestamp()

    def reset(self) -> TimeStep[Observation]:
        """Start a new episode."""
        self._reset_next_step = False
        self.step_count = 0

        def start_episode(physics: P) -> None:
            self._task.initialize_episode(physics)
            self._task.after_step(physics)

        self._physics.with_reset(start_episode)
        return TimeStep(
            step_type=StepType.FIRST,
            observation=self._task.get_observation(self._physics),
        )

    def step(self, action: Any) -> TimeStep[Observation]:
        """Apply ``action`` for one control step; resets if the episode ended."""
        if self._reset_next_step:
            return self.reset()

        self._task.before_step(action, self._physics)
        self._physics.step(self._n_sub_steps)
        self._task.after_step(self._physics)

        reward = self._task.get_reward(self._physics)
        observation = self._task.get_observation(self._physics)
        self.step_count += 1

        final_discount = self._task.get_final_discount(self._physics)
        if final_discount is not None:
            self._reset_next_step = True
            return TimeStep(
                step_type=StepType.LAST,
                observation=observation,
                reward=reward,
                discount=final_discount,
            )
        return TimeStep(
            step_type=StepType.MID,
            observation=observation,
            reward=reward,
            discount=1.0,
        )