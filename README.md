# tabularq

A small tabular Q-learning toolkit, together with a framework for stepping
control tasks that are driven by a physics simulation.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Q-tables

A `QTable` (in `tabularq.qtable`) holds one row of `QValue`s for every `State`,
with one entry for each `Action`. Every value lies in the half-open range
`[-1.0, 1.0)`. A new table starts with uniformly random values.

The table sizes come from environment variables. Each is read once, the first
time it is needed:

- `STATE_SIZE`: the number of states (default 15)
- `ACTION_SIZE`: the number of actions (default 15)

If a variable is missing, or does not hold a non-negative integer, the default
is used. `State.size()` and `Action.size()` return the sizes in use.

```python
from tabularq.qtable import QTable, QTableConfig, Update
from tabularq.state import State
from tabularq.action import Action
from tabularq.strategy import EpsilonGreedy

table = QTable(QTableConfig(gamma=0.99, alpha=0.5, epsilon=0.5))

state = State(0)
action = table.next_action(state, EpsilonGreedy())

table.update(Update(state=state, action=action, reward=0.1, next_state=State(1)))

row = table[state]          # tuple of QValue, one for each action

table.save("qtable.json")
restored = QTable.load("qtable.json", QTableConfig())
```

`QTableConfig` defaults to `gamma=0.99`, `alpha=0.5` and `epsilon=0.5`; the
table exposes them as the `gamma`, `alpha` and `epsilon` properties. `save`
writes the values as a JSON array of arrays of numbers, and `load` reads that
format back.

`update` applies the Q-learning rule:

```
Q(s, a) <- (1 - alpha) * Q(s, a) + alpha * (reward + gamma * max_a' Q(s', a'))
```

The table can only be changed through `update`. If the new value falls outside
`[-1.0, 1.0)`, `update` raises `ValueError` and the table is left as it was.
`State`, `Action` and `QValue` also raise `ValueError` when given an index or a
value out of range (a NaN Q-value included).

### Strategies

`tabularq.strategy` provides:

- `Explore`: picks an action with the highest Q-value, choosing at random
  among ties.
- `SoftMax`: samples an action with softmax probabilities over the row.
- `EpsilonGreedy`: picks uniformly at random with probability `epsilon`, and
  otherwise behaves like `Explore`.
- `Random`: picks any action uniformly.

Pass a strategy instance to `QTable.next_action`, or call
`strategy.determine(table, state)` directly. Subclass `Strategy` and implement
`determine` to write your own.

## Control environments

`tabularq.control` provides the loop that drives a task against a simulation.

- `Physics`: abstract base for a simulation. Subclasses implement `reset()`,
  `step(n)` and `timestamp()` (the length of one simulation step, in seconds).
  `after_reset()` marks the reset as complete (`reset_complete`), and
  `with_reset(f)` calls `reset()`, then `f(physics)`, then `after_reset()`.
- `Task`: abstract base for a task. Subclasses implement `initialize_episode`,
  `before_step`, `get_observation` and `get_reward`. `after_step` counts its
  calls in `steps_observed`; `get_final_discount` returns the task's
  `final_discount` attribute, which is `None` by default.
- `Environment(physics, task, control_timestamp=1.0)`: `reset()` starts an
  episode and returns a first `TimeStep`. `step(action)` runs `before_step`,
  advances the simulation by `n_sub_steps` physics steps, runs `after_step`, and
  returns a `TimeStep`. `step_count` counts the steps of the current episode,
  and `control_timestamp()` gives the length of one control step.
- `TimeStep`: carries a `step_type` (`StepType.FIRST`, `MID` or `LAST`), the
  `observation`, the `reward` and the `discount`. Reward and discount are `None`
  on the first step; a middle step has discount `1.0`. `is_first()`,
  `is_mid()` and `is_last()` tell the kinds apart.
- `BoundedArraySpec`: a frozen record of an array `shape`.
- `PhysicsError`: a `ValueError` for data of the wrong size, carrying
  `expected` and `actual`.

An episode ends when `get_final_discount` returns a value other than `None`;
that step is `LAST`, and the next call to `step` starts a new episode.
The first call to `step` on a new environment also starts an episode.

`compute_n_steps(control_timestamp, physics_timestamp)` returns the number of
physics steps in one control step. It raises `ValueError` if the control
timestamp is smaller than the physics timestamp, or is not a whole multiple of
it.

## What this package does not do

- It ships no physics engine and no ready-made tasks. `Physics` and `Task` are
  bases for you to implement against a simulator of your choice.
- It has no command-line program and no training loop; you combine a
  `QTable`, a strategy and an `Environment` in your own code.