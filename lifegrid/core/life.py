"""Conway's Game of Life (B3/S23) on a clamped, non-wrapping grid."""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .errors import InconsistentDimensionsError, InvalidCellStateError, OutOfBoundsError
from .grid import Grid, Index, Selection, Square

DEAD = 0
ALIVE = 1

# 3x3 block around a cell; the center is excluded when counting neighbors.
MOORE = Square(2)


@dataclass(frozen=True)
class CellState:
    """Classification of one cell for one transition step."""

    neighbors: int


@dataclass(frozen=True)
class Alive(CellState):
    pass


@dataclass(frozen=True)
class Dead(CellState):
    pass


def _checked_value(index: Index, value) -> int:
    if value not in (DEAD, ALIVE):
        raise InvalidCellStateError(index.x, index.y, value)
    return int(value)


def get_cell_state(grid: Grid, index: Index, neighborhood: Selection = MOORE) -> CellState:
    """Classify a cell as alive or dead along with its live neighbor count.

    Args:
        grid: Current generation.
        index: Cell to classify.
        neighborhood: Shape whose cells (minus the center) count as neighbors.

    Returns:
        ``Alive(n)`` or ``Dead(n)`` where ``n`` excludes the cell itself.

    Raises:
        OutOfBoundsError: If ``index`` is outside the grid.
        InvalidCellStateError: If the cell or a neighbor is neither 0 nor 1.
    """
    index = Index(*index)
    if not grid.contains(index.x, index.y):
        raise OutOfBoundsError(index.x, index.y, grid.width, grid.height)

    value = _checked_value(index, grid.get_index(index))
    neighbors = sum(
        _checked_value(selected, selected_value)
        for selected, selected_value in grid.get_selection(neighborhood, index).items()
        if selected != index
    )

    if value == ALIVE:
        return Alive(neighbors)
    return Dead(neighbors)


def get_next_state(state: CellState) -> int:
    """Apply the B3/S23 rule table to a classified cell.

    Args:
        state: Classified cell.

    Returns:
        1 if the cell is alive in the next generation, 0 otherwise.
    """
    if isinstance(state, Alive):
        return ALIVE if 2 <= state.neighbors <= 3 else DEAD
    if isinstance(state, Dead):
        return ALIVE if state.neighbors == 3 else DEAD
    raise TypeError(f"Expected Alive or Dead, got {type(state).__name__}")


def get_next_state_for_index(
    grid: Grid, index: Index, neighborhood: Selection = MOORE
) -> int:
    return get_next_state(get_cell_state(grid, index, neighborhood))


def _validated_cells(grid: Grid) -> np.ndarray:
    """Return the grid as an int array, rejecting values other than 0 and 1."""
    cells = grid.to_array()
    if cells.dtype.kind in "biuf":
        valid = (cells == DEAD) | (cells == ALIVE)
    else:
        valid = np.frompyfunc(lambda value: value in (DEAD, ALIVE), 1, 1)(cells).astype(bool)

    invalid = np.argwhere(~valid)
    if len(invalid):
        y, x = (int(i) for i in invalid[0])
        raise InvalidCellStateError(x, y, grid.get(x, y))
    return cells.astype(int)


def _neighbor_counts(cells: np.ndarray, neighborhood: Selection) -> np.ndarray:
    # Zero padding instead of np.roll: edges clamp, they do not wrap.
    r = neighborhood.radius
    height, width = cells.shape
    padded = np.pad(cells, r)
    counts = np.zeros((height, width), dtype=int)
    for dx, dy in neighborhood.offsets():
        if dx == 0 and dy == 0:
            continue
        counts += padded[r + dy : r + dy + height, r + dx : r + dx + width]
    return counts


def count_live_neighbors(grid: Grid, neighborhood: Selection = MOORE) -> np.ndarray:
    """Count live neighbors for every cell at once.

    Args:
        grid: Current generation.
        neighborhood: Neighborhood shape.

    Returns:
        Array of shape ``(height, width)`` with neighbor counts.

    Raises:
        InvalidCellStateError: If any cell is neither 0 nor 1.
    """
    return _neighbor_counts(_validated_cells(grid), neighborhood)


def create_next_grid(grid: Grid, neighborhood: Selection = MOORE) -> Grid:
    """Compute the next generation.

    Every cell is derived from the frozen input grid, which is left
    untouched; the result is a new grid of the same dimensions.

    Args:
        grid: Current generation.
        neighborhood: Neighborhood shape.

    Returns:
        Next generation.

    Raises:
        InvalidCellStateError: For the first cell (row-major) that is
            neither 0 nor 1.
    """
    cells = _validated_cells(grid)
    neighbors = _neighbor_counts(cells, neighborhood)

    new_cells = np.where((cells == ALIVE) & ((neighbors < 2) | (neighbors > 3)), DEAD, cells)
    new_cells = np.where((cells == DEAD) & (neighbors == 3), ALIVE, new_cells)
    return Grid(new_cells)


class LifeEngine:
    """Owns the current generation and advances it step by step."""

    CANDIDATES = (DEAD, ALIVE)

    def __init__(
        self,
        width: int,
        height: int,
        neighborhood: Selection = MOORE,
        seed: Optional[int] = None,
        grid: Optional[Grid] = None,
    ):
        """Initialize the engine.

        Args:
            width: Grid width in cells.
            height: Grid height in cells.
            neighborhood: Neighborhood shape used for counting.
            seed: Seed for the random fills.
            grid: Starting generation; copied. A random grid is used if omitted.

        Raises:
            InconsistentDimensionsError: If ``grid`` does not match
                ``width`` and ``height``.
        """
        self.width = width
        self.height = height
        self.neighborhood = neighborhood
        self._rng = np.random.default_rng(seed)
        if grid is None:
            self.grid = Grid.random_filled(self.CANDIDATES, width, height, seed=self._rng)
        elif grid.shape != (width, height):
            raise InconsistentDimensionsError(
                f"Grid is {grid.width}x{grid.height}, engine expects {width}x{height}"
            )
        else:
            self.grid = grid.copy()
        self.generation = 0

    @classmethod
    def from_grid(
        cls, grid: Grid, neighborhood: Selection = MOORE, seed: Optional[int] = None
    ) -> "LifeEngine":
        """Create an engine starting from a copy of ``grid``."""
        return cls(grid.width, grid.height, neighborhood, seed=seed, grid=grid)

    def step(self) -> Grid:
        """Advance the grid by one generation.

        Returns:
            The new grid.
        """
        self.grid = create_next_grid(self.grid, self.neighborhood)
        self.generation += 1
        return self.grid

    def reset(self) -> Grid:
        """Reset the grid to a new random state."""
        self.grid = Grid.random_filled(self.CANDIDATES, self.width, self.height, seed=self._rng)
        self.generation = 0
        return self.grid

    @property
    def population(self) -> int:
        return int(np.count_nonzero(self.grid.to_array() == ALIVE))

    def is_dead(self) -> bool:
        """Check if the grid has no live cells."""
        return self.population == 0
