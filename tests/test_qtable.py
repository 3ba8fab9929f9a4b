import json

import pytest

from tabularq import action, state
from tabularq.action import Action
from tabularq.qtable import QTable, QTableConfig, Update
from tabularq.state import State
from tabularq.value import QValue


@pytest.fixture(autouse=True)
def fresh_sizes(monkeypatch):
    monkeypatch.delenv("ACTION_SIZE", raising=False)
    monkeypatch.delenv("STATE_SIZE", raising=False)
    action._configured_size.cache_clear()
    state._configured_size.cache_clear()
    yield
    action._configured_size.cache_clear()
    state._configured_size.cache_clear()


def _table_from(tmp_path, rows, config=None):
    path = tmp_path / "table.json"
    path.write_text(json.dumps(rows), encoding="utf-8")
    return QTable.load(path, config)


def test_default_config():
    config = QTableConfig()
    assert (config.gamma, config.alpha, config.epsilon) == (0.99, 0.5, 0.5)


def test_new_table_shape_and_range():
    table = QTable()
    assert len(table) == State.size()
    for index in range(State.size()):
        row = table[State(index)]
        assert len(row) == Action.size()
        assert all(-1.0 <= q.value < 1.0 for q in row)


def test_config_accessors():
    table = QTable(QTableConfig(gamma=0.9, alpha=0.1, epsilon=0.2))
    assert (table.gamma, table.alpha, table.epsilon) == (0.9, 0.1, 0.2)


def test_save_load_round_trip(tmp_path):
    table = QTable()
    path = tmp_path / "q.json"
    table.save(path)
    loaded = QTable.load(path)
    for index in range(State.size()):
        assert loaded[State(index)] == table[State(index)]


def test_saved_file_is_nested_numbers(tmp_path):
    table = QTable()
    path = tmp_path / "q.json"
    table.save(path)
    raw = json.loads(path.read_text(encoding="utf-8"))
    assert len(raw) == State.size()
    assert all(len(row) == Action.size() for row in raw)
    assert raw[0][0] == table[State(0)][0].value


def test_load_uses_given_config(tmp_path):
    table = _table_from(tmp_path, [[0.0]], QTableConfig(epsilon=0.0))
    assert table.epsilon == 0.0
    assert table[State(0)] == (QValue(0.0),)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        QTable.load(tmp_path / "missing.json")


def test_load_malformed_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("not json", encoding="utf-8")
    with pytest.raises(ValueError):
        QTable.load(path)


def test_update_applies_rule(tmp_path):
    rows = [[0.0, 0.2], [0.4, -0.3]]
    table = _table_from(tmp_path, rows, QTableConfig(gamma=0.5, alpha=0.5))
    table.update(Update(State(0), Action(1), 0.1, State(1)))
    assert table[State(0)][1].value == pytest.approx(0.25)
    assert table[State(0)][0] == QValue(0.0)
    assert table[State(1)] == (QValue(0.4), QValue(-0.3))


def test_update_with_zero_alpha_keeps_value(tmp_path):
    rows = [[0.3, -0.6], [0.9, 0.1]]
    table = _table_from(tmp_path, rows, QTableConfig(alpha=0.0))
    table.update(Update(State(0), Action(1), 0.5, State(1)))
    assert table[State(0)][1] == QValue(-0.6)


def test_update_out_of_range_raises_and_keeps_table(tmp_path):
    rows = [[0.0, 0.2], [0.4, -0.3]]
    table = _table_from(tmp_path, rows, QTableConfig(alpha=1.0))
    with pytest.raises(ValueError):
        table.update(Update(State(0), Action(1), 5.0, State(1)))
    assert table[State(0)][1] == QValue(0.2)


def test_indexing_returns_immutable_row(tmp_path):
    table = _table_from(tmp_path, [[0.1, 0.2]])
    row = table[State(0)]
    with pytest.raises(TypeError):
        row[0] = QValue(0.5)