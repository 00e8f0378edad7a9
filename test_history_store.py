#!/usr/bin/env python3
"""
Тест HistoryStore: запись, undo/redo, переходы, вытеснение и ёмкость.
"""

import sys
import os

import pytest

# Добавляем src в путь для импортов
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from models.domain.history_store import (
    DEFAULT_CAPACITY, HistoryStore, InvalidCapacity, create_history, opaque_equals
)


def _state(store):
    return store.timeline, store.pointer


def test_initial_value_and_defaults():
    """Начальное состояние: один элемент, указатель 0, ёмкость 10."""
    store = create_history(5)

    assert store.timeline == (5,)
    assert store.pointer == 0
    assert store.current_value == 5
    assert store.capacity == DEFAULT_CAPACITY == 10
    assert len(store) == 1


def test_factory_called_exactly_once():
    calls = []

    def factory():
        calls.append(1)
        return "seed"

    store = HistoryStore(factory)
    store.write("next")
    store.undo()

    assert store.current_value == "seed"
    assert len(calls) == 1


def test_factory_failure_propagates():
    def broken():
        raise RuntimeError("no seed")

    with pytest.raises(RuntimeError, match="no seed"):
        create_history(broken)


@pytest.mark.parametrize("capacity", [0, -1, -10, 2.5, "3", True])
def test_invalid_capacity_rejected(capacity):
    with pytest.raises(InvalidCapacity):
        HistoryStore(0, capacity=capacity)


def test_invalid_capacity_is_value_error():
    with pytest.raises(ValueError):
        create_history(0, capacity=0)


def test_write_moves_pointer_to_tail():
    store = create_history(0)

    for value in range(1, 6):
        assert store.write(value) is True
        assert store.pointer == len(store.timeline) - 1
        assert store.current_value == value

    assert store.timeline == (0, 1, 2, 3, 4, 5)


def test_write_equal_value_is_noop():
    store = create_history("a")
    store.write("b")
    before = _state(store)

    assert store.write("b") is False
    assert store.write(store.current_value) is False
    assert _state(store) == before


def test_write_transform_function():
    store = create_history(1)

    assert store.write(lambda prev: prev + 1) is True
    assert store.current_value == 2
    # Преобразование, возвращающее то же значение, ничего не меняет
    assert store.write(lambda prev: prev) is False
    assert store.timeline == (1, 2)


def test_transform_error_leaves_state_untouched():
    store = create_history(1)
    store.write(2)
    before = _state(store)

    with pytest.raises(ZeroDivisionError):
        store.write(lambda prev: prev / 0)

    assert _state(store) == before


def test_composite_values_compared_by_identity():
    """Два разных списка с одинаковым содержимым - разные записи."""
    first = [1, 2]
    store = create_history(first)

    assert store.write(first) is False
    assert store.write([1, 2]) is True
    assert len(store.timeline) == 2


def test_int_and_float_compare_by_value():
    """1 и 1.0 - одно и то же число, запись не добавляет шаг."""
    store = create_history(1)

    assert store.write(1.0) is False
    assert store.write(lambda prev: prev * 1.0) is False
    assert store.timeline == (1,)

    store = create_history(2.5)
    assert store.write(2.5) is False
    assert store.write(2) is True
    assert store.timeline == (2.5, 2)


def test_bool_never_equals_number():
    store = create_history(1)

    assert store.write(1) is False
    assert store.write(True) is True
    assert store.write(1.0) is True
    assert store.write(1) is False
    assert store.timeline == (1, True, 1.0)


def test_custom_equality_strategy():
    store = create_history([1, 2], equals=lambda a, b: a == b)

    assert store.write([1, 2]) is False
    assert store.write([3]) is True
    assert store.timeline == ([1, 2], [3])


def test_opaque_equals():
    data = {"a": 1}
    assert opaque_equals(data, data)
    assert not opaque_equals(data, {"a": 1})
    assert opaque_equals("x", "x")
    assert opaque_equals(None, None)
    assert not opaque_equals(0, False)
    assert not opaque_equals(1.0, True)
    assert opaque_equals(3, 3.0)
    assert opaque_equals(3.0, 3)
    assert not opaque_equals("3", 3)


def test_branch_discard():
    """[0,1,2,3], два undo, запись 9 -> [0,1,9]."""
    store = create_history(0)
    for value in (1, 2, 3):
        store.write(value)
    assert store.pointer == 3

    store.undo()
    store.undo()
    assert store.pointer == 1
    assert store.current_value == 1

    assert store.write(9) is True
    assert store.timeline == (0, 1, 9)
    assert store.pointer == 2
    assert store.redo() is False


def test_eviction_example():
    store = create_history(0, capacity=3)

    store.write(1)
    assert store.timeline == (0, 1)
    store.write(2)
    assert store.timeline == (0, 1, 2)
    store.write(3)
    assert store.timeline == (1, 2, 3)
    assert store.pointer == 2

    assert store.undo() is True
    assert store.pointer == 1
    assert store.current_value == 2

    assert store.redo() is True
    assert store.pointer == 2
    assert store.current_value == 3


def test_eviction_after_undo_keeps_capacity():
    store = create_history(0, capacity=3)
    for value in (1, 2):
        store.write(value)
    store.goto(0)

    store.write(7)
    assert store.timeline == (0, 7)
    assert store.pointer == 1


@pytest.mark.parametrize("capacity", [1, 2, 3, 7])
def test_capacity_bound_holds(capacity):
    store = create_history(-1, capacity=capacity)

    for value in range(25):
        store.write(value)
        assert 1 <= len(store.timeline) <= capacity
        assert store.pointer == len(store.timeline) - 1
        if value % 4 == 0:
            store.undo()

    assert store.current_value == store.timeline[store.pointer]


def test_capacity_one_keeps_latest_only():
    store = create_history("a", capacity=1)

    assert store.write("b") is True
    assert store.timeline == ("b",)
    assert store.pointer == 0
    assert store.undo() is False
    assert store.redo() is False


def test_boundary_navigation_is_idempotent():
    store = create_history(0)
    store.write(1)
    store.write(2)

    for _ in range(3):
        assert store.redo() is False
    assert _state(store) == ((0, 1, 2), 2)

    store.goto(0)
    for _ in range(3):
        assert store.undo() is False
    assert _state(store) == ((0, 1, 2), 0)


def test_goto_valid_indices():
    store = create_history("a")
    store.write("b")
    store.write("c")

    assert store.goto(0) is True
    assert store.current_value == "a"
    # Верхняя граница включительно: последний индекс допустим
    assert store.goto(2) is True
    assert store.current_value == "c"
    assert store.goto(1) is True
    assert store.current_value == "b"


@pytest.mark.parametrize("index", [-1, -3, 3, 100, 1.0, "1", None, True])
def test_invalid_goto_is_noop(index):
    store = create_history("a")
    store.write("b")
    store.write("c")
    store.goto(1)
    before = _state(store)

    assert store.goto(index) is False
    assert _state(store) == before


class _Position:
    """Целочисленный тип с __index__, как numpy.int64."""

    def __init__(self, value):
        self.value = value

    def __index__(self):
        return self.value


def test_goto_accepts_index_types():
    store = create_history("a")
    store.write("b")
    store.write("c")

    assert store.goto(_Position(0)) is True
    assert store.pointer == 0
    assert type(store.pointer) is int
    assert store.current_value == "a"

    assert store.goto(_Position(3)) is False
    assert store.goto(_Position(-1)) is False
    assert store.pointer == 0


def test_timeline_is_read_only_snapshot():
    store = create_history(0)
    store.write(1)

    timeline = store.timeline
    assert isinstance(timeline, tuple)
    with pytest.raises(TypeError):
        timeline[0] = 99

    store.write(2)
    assert timeline == (0, 1)


def test_can_undo_can_redo():
    store = create_history(0)
    assert not store.can_undo()
    assert not store.can_redo()

    store.write(1)
    assert store.can_undo()
    assert not store.can_redo()

    store.undo()
    assert not store.can_undo()
    assert store.can_redo()


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
