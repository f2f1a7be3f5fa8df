import numpy as np
import pytest

from lifegrid.core.errors import (
    EmptyCandidateSetError,
    InconsistentDimensionsError,
    OutOfBoundsError,
)
from lifegrid.core.grid import Grid, Index


def test_filled_grid_with_unequal_width_and_height():
    grid = Grid.filled_with(0, 4, 6)
    assert grid.width == 4
    assert grid.height == 6
    assert grid.shape == (4, 6)
    assert all(grid.get(x, y) == 0 for x, y in grid.indexes())


def test_new_grid_is_zeroed():
    grid = Grid.new(3, 2)
    assert grid.rows() == [[0, 0, 0], [0, 0, 0]]


def test_negative_dimensions_are_rejected():
    with pytest.raises(ValueError):
        Grid.new(-1, 3)
    with pytest.raises(ValueError):
        Grid.filled_with(1, 3, -2)


def test_random_filled_uses_only_candidates():
    grid = Grid.random_filled([0, 1], 4, 6)
    assert (grid.width, grid.height) == (4, 6)
    assert {grid.get(x, y) for x, y in grid.indexes()} <= {0, 1}


def test_random_filled_is_reproducible_with_seed():
    first = Grid.random_filled([0, 1, 2], 10, 10, seed=42)
    second = Grid.random_filled([0, 1, 2], 10, 10, seed=42)
    assert first == second


def test_random_filled_with_single_object_candidate():
    grid = Grid.random_filled(["a"], 2, 3)
    assert grid.rows() == [["a", "a"], ["a", "a"], ["a", "a"]]


def test_random_filled_rejects_empty_candidates():
    with pytest.raises(EmptyCandidateSetError):
        Grid.random_filled([], 3, 3)


def test_from_rows_axis_convention():
    rows = [[1, 2, 3], [4, 5, 6]]
    grid = Grid.from_rows(rows)
    assert grid.width == 3
    assert grid.height == 2
    for y, row in enumerate(rows):
        for x, value in enumerate(row):
            assert grid.get(x, y) == value


def test_from_columns_matches_transposed_rows():
    columns = [[1, 4], [2, 5], [3, 6]]
    grid = Grid.from_columns(columns)
    assert grid == Grid.from_rows([[1, 2, 3], [4, 5, 6]])
    assert grid.get(2, 1) == columns[2][1]


def test_ragged_rows_are_rejected():
    with pytest.raises(InconsistentDimensionsError):
        Grid.from_rows([[0, 0, 0], [0, 0]])


def test_ragged_columns_are_rejected():
    with pytest.raises(InconsistentDimensionsError) as excinfo:
        Grid.from_columns([[0], [0, 1]])
    assert isinstance(excinfo.value, ValueError)


def test_empty_rows_give_empty_grid():
    grid = Grid.from_rows([])
    assert grid.shape == (0, 0)
    assert grid.get(0, 0) is None


def test_sequence_values_are_kept_as_cells():
    grid = Grid.from_rows([[(0, 1), (2, 3)]])
    assert grid.shape == (2, 1)
    assert grid.get(1, 0) == (2, 3)


def test_from_array_copies_input():
    array = np.zeros((2, 3), dtype=int)
    grid = Grid.from_array(array)
    array[0, 0] = 1
    assert grid.get(0, 0) == 0
    assert grid.shape == (3, 2)


def test_from_array_rejects_wrong_dimensions():
    with pytest.raises(InconsistentDimensionsError):
        Grid.from_array(np.zeros(4))


def test_get_outside_bounds_returns_none():
    grid = Grid.filled_with(1, 3, 2)
    assert grid.get(3, 0) is None
    assert grid.get(0, 2) is None
    assert grid.get(-1, 0) is None
    assert grid.get(0, -1) is None
    assert grid.get_index(Index(2, 1)) == 1


def test_set_then_get_returns_value():
    grid = Grid.new(3, 3)
    for x, y in grid.indexes():
        grid.set(x, y, x * 10 + y)
    for x, y in grid.indexes():
        assert grid.get(x, y) == x * 10 + y


def test_set_index():
    grid = Grid.new(2, 2)
    grid.set_index(Index(1, 0), 5)
    assert grid.rows() == [[0, 5], [0, 0]]


def test_set_outside_bounds_raises():
    grid = Grid.new(3, 3)
    with pytest.raises(OutOfBoundsError) as excinfo:
        grid.set(3, 0, 1)
    assert isinstance(excinfo.value, IndexError)
    assert (excinfo.value.x, excinfo.value.y) == (3, 0)

    with pytest.raises(OutOfBoundsError):
        grid.set(-1, 0, 1)


def test_get_mut_writes_through():
    grid = Grid.new(3, 2)
    cell = grid.get_mut(2, 1)
    cell[...] = 7
    assert grid.get(2, 1) == 7

    cell = grid.get_mut_index(Index(0, 1))
    cell[...] += 3
    assert grid.get(0, 1) == 3


def test_get_mut_outside_bounds_returns_none():
    grid = Grid.new(3, 2)
    assert grid.get_mut(0, 2) is None
    assert grid.get_mut_index(Index(-1, 0)) is None


def test_contains():
    grid = Grid.new(2, 3)
    assert Index(1, 2) in grid
    assert (2, 0) not in grid
    assert not grid.contains(0, 3)


def test_indexes_are_row_major():
    grid = Grid.new(2, 2)
    assert list(grid.indexes()) == [Index(0, 0), Index(1, 0), Index(0, 1), Index(1, 1)]


def test_copy_is_independent():
    grid = Grid.from_rows([[0, 1], [1, 0]])
    copy = grid.copy()
    copy.set(0, 0, 1)
    assert grid.get(0, 0) == 0
    assert copy != grid


def test_index_is_hashable_and_compares_by_coordinates():
    assert Index(1, 2) == Index(1, 2)
    assert Index(1, 2) != Index(2, 1)
    assert len({Index(1, 2), Index(1, 2), Index(2, 1)}) == 2


def test_string_grid_keeps_longer_values():
    grid = Grid.filled_with("dead", 2, 2)
    grid.set(0, 0, "alive")
    assert grid.get(0, 0) == "alive"
    assert grid.get(1, 1) == "dead"


def test_mixed_rows_keep_value_types():
    grid = Grid.from_rows([["x", 0], [1.5, True]])
    assert grid.get(0, 0) == "x"
    assert grid.get(1, 0) == 0 and isinstance(grid.get(1, 0), int)
    assert grid.get(0, 1) == 1.5
    assert grid.get(1, 1) is True


def test_float_written_into_int_grid_is_kept():
    grid = Grid.new(2, 2)
    grid.set(0, 0, 2.5)
    assert grid.get(0, 0) == 2.5
    assert grid.get(1, 1) == 0


def test_string_written_into_int_grid_is_kept():
    grid = Grid.from_rows([[0, 1], [1, 0]])
    grid.set(1, 0, "alive")
    assert grid.get(1, 0) == "alive"
    assert grid.rows() == [[0, "alive"], [1, 0]]


def test_random_filled_keeps_mixed_candidates():
    grid = Grid.random_filled(["a", 1], 4, 4, seed=5)
    values = {grid.get(x, y) for x, y in grid.indexes()}
    assert values <= {"a", 1}


def test_numeric_rows_stay_numeric():
    grid = Grid.from_rows([[0, 1], [1, 0]])
    assert grid.to_array().dtype.kind == "i"
