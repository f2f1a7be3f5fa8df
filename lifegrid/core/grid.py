"""Fixed-size two-dimensional grid with bounds-checked access.

Cells are addressed as ``(x, y)`` where ``x`` is the column and ``y`` is the
row, so ``Grid.from_rows(rows).get(x, y) == rows[y][x]``. Internally the
cells live in a numpy array of shape ``(height, width)``.
"""

import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Set, Tuple

import numpy as np

from .errors import EmptyCandidateSetError, InconsistentDimensionsError, OutOfBoundsError
from .render import render_text


class Index(NamedTuple):
    """Coordinate of a single cell."""

    x: int
    y: int


@dataclass(frozen=True)
class Selection(ABC):
    """Neighborhood shape around a cell.

    ``extent`` counts the cells along one arm of the shape including the
    center, so an extent of 1 always selects just the queried cell.
    """

    extent: int = 1

    def __post_init__(self):
        if self.extent < 1:
            raise ValueError(f"Selection extent must be at least 1, got {self.extent}")

    @property
    def radius(self) -> int:
        return self.extent - 1

    @abstractmethod
    def includes(self, dx: int, dy: int) -> bool:
        """Check whether an offset inside the bounding window is part of the shape."""

    def offsets(self) -> List[Tuple[int, int]]:
        """List the shape's ``(dx, dy)`` offsets on an unbounded plane."""
        r = self.radius
        return [
            (dx, dy)
            for dy in range(-r, r + 1)
            for dx in range(-r, r + 1)
            if self.includes(dx, dy)
        ]


@dataclass(frozen=True)
class Cross(Selection):
    """Plus-sign shape."""

    def includes(self, dx: int, dy: int) -> bool:
        return dx == 0 or dy == 0


@dataclass(frozen=True)
class Square(Selection):
    """Filled axis-aligned block (Chebyshev radius)."""

    def includes(self, dx: int, dy: int) -> bool:
        return True


@dataclass(frozen=True)
class DiagonalCross(Selection):
    """Plus-sign shape rotated by 45 degrees."""

    def includes(self, dx: int, dy: int) -> bool:
        return abs(dx) == abs(dy)


@dataclass(frozen=True)
class Circle(Selection):
    """Filled disk of Euclidean radius ``extent - 1``."""

    def includes(self, dx: int, dy: int) -> bool:
        return dx * dx + dy * dy <= self.radius * self.radius


def _check_dimensions(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")


def _check_rectangular(sequences: List[list], kind: str) -> None:
    lengths = {len(sequence) for sequence in sequences}
    if len(lengths) > 1:
        raise InconsistentDimensionsError(
            f"All {kind}s must have the same length, got lengths {sorted(lengths)}"
        )


def _value_kind(value) -> Optional[str]:
    if isinstance(value, (bool, np.bool_)):
        return "b"
    if isinstance(value, numbers.Integral):
        return "i"
    if isinstance(value, numbers.Real):
        return "f"
    return None


def _inferred_dtype(values: Iterable[Any]):
    """Pick ``object`` unless every value is a bool, every value an integer,
    or every value a float; numpy would otherwise coerce or truncate them."""
    kinds = {_value_kind(value) for value in values}
    if len(kinds) == 1 and None not in kinds:
        return None
    return object


def _to_cells(rows: List[list], width: int, height: int, dtype=None) -> np.ndarray:
    """Pack a rectangular list of rows into a ``(height, width)`` array.

    Strings, mixed types and sequence-valued cells are stored in an object
    array so values come back exactly as they went in.
    """
    if width == 0 or height == 0:
        return np.zeros((height, width), dtype=dtype or int)

    if dtype is None:
        dtype = _inferred_dtype(value for row in rows for value in row)

    cells = None
    if dtype is not object:
        try:
            cells = np.array(rows, dtype=dtype)
        except (ValueError, OverflowError):
            cells = None

    if cells is None or cells.shape != (height, width):
        cells = np.empty((height, width), dtype=object)
        for y, row in enumerate(rows):
            for x, value in enumerate(row):
                cells[y, x] = value
    return cells


class Grid:
    """Rectangular container of cell values with fixed dimensions."""

    def __init__(self, cells: np.ndarray):
        """Wrap an existing array without copying it.

        Prefer the ``new``/``filled_with``/``from_rows`` constructors.

        Args:
            cells: 2D array of shape ``(height, width)``.

        Raises:
            InconsistentDimensionsError: If ``cells`` is not two-dimensional.
        """
        if cells.ndim != 2:
            raise InconsistentDimensionsError(
                f"Grid cells must be two-dimensional, got {cells.ndim} dimensions"
            )
        self._cells = cells

    @classmethod
    def new(cls, width: int, height: int, dtype=int) -> "Grid":
        """Create a grid with every cell set to the dtype's zero value."""
        _check_dimensions(width, height)
        return cls(np.zeros((height, width), dtype=dtype))

    @classmethod
    def filled_with(cls, value: Any, width: int, height: int, dtype=None) -> "Grid":
        """Create a grid with every cell set to ``value``."""
        _check_dimensions(width, height)
        if dtype is None:
            dtype = _inferred_dtype([value])
        if dtype is object:
            cells = np.empty((height, width), dtype=object)
            cells.fill(value)
            return cls(cells)
        return cls(np.full((height, width), value, dtype=dtype))

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Any]], dtype=None) -> "Grid":
        """Create a grid from a sequence of rows (``rows[y][x]``).

        Raises:
            InconsistentDimensionsError: If the rows differ in length.
        """
        rows = [list(row) for row in rows]
        _check_rectangular(rows, "row")
        height = len(rows)
        width = len(rows[0]) if rows else 0
        return cls(_to_cells(rows, width, height, dtype))

    @classmethod
    def from_columns(cls, columns: Iterable[Sequence[Any]], dtype=None) -> "Grid":
        """Create a grid from a sequence of columns (``columns[x][y]``).

        Raises:
            InconsistentDimensionsError: If the columns differ in length.
        """
        columns = [list(column) for column in columns]
        _check_rectangular(columns, "column")
        width = len(columns)
        height = len(columns[0]) if columns else 0
        return cls(_to_cells(columns, height, width, dtype).T.copy())

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Grid":
        """Create a grid from a copy of a ``(height, width)`` array."""
        return cls(np.array(array))

    @classmethod
    def random_filled(
        cls,
        candidates: Iterable[Any],
        width: int,
        height: int,
        seed: Optional[int | np.random.Generator] = None,
    ) -> "Grid":
        """Create a grid by sampling each cell uniformly from ``candidates``.

        Sampling is with replacement.

        Args:
            candidates: Values to choose from.
            width: Grid width in cells.
            height: Grid height in cells.
            seed: Seed or numpy Generator for reproducible fills.

        Raises:
            EmptyCandidateSetError: If ``candidates`` is empty.
        """
        candidates = list(candidates)
        if not candidates:
            raise EmptyCandidateSetError("Random fill requires at least one candidate value")
        _check_dimensions(width, height)

        rng = np.random.default_rng(seed)
        picks = rng.integers(len(candidates), size=(height, width))
        choices = _to_cells([candidates], len(candidates), 1)[0]
        return cls(choices[picks])

    @property
    def width(self) -> int:
        return self._cells.shape[1]

    @property
    def height(self) -> int:
        return self._cells.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions as ``(width, height)``."""
        return self.width, self.height

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def __contains__(self, index) -> bool:
        x, y = index
        return self.contains(x, y)

    def get(self, x: int, y: int) -> Any:
        """Return the value at ``(x, y)``, or None if out of bounds."""
        if not self.contains(x, y):
            return None
        return self._cells.item(y, x)

    def get_index(self, index: Index) -> Any:
        return self.get(*index)

    def get_mut(self, x: int, y: int) -> Optional[np.ndarray]:
        """Return a writable 0-d view of the cell, or None if out of bounds.

        Assigning through the view (``view[...] = value``) updates the grid.
        """
        if not self.contains(x, y):
            return None
        return self._cells[y, x, ...]

    def get_mut_index(self, index: Index) -> Optional[np.ndarray]:
        return self.get_mut(*index)

    def set(self, x: int, y: int, value: Any) -> None:
        """Write ``value`` at ``(x, y)``.

        A value the current dtype cannot hold exactly switches the grid to
        object storage; views returned earlier by ``get_mut`` then no longer
        write through.

        Raises:
            OutOfBoundsError: If the coordinate is outside the grid.
        """
        if not self.contains(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)
        if not self._holds(value):
            self._cells = self._cells.astype(object)
        self._cells[y, x] = value

    def _holds(self, value: Any) -> bool:
        if self._cells.dtype == object:
            return True
        if _value_kind(value) is None:
            return False
        return np.can_cast(np.asarray(value).dtype, self._cells.dtype, casting="safe")

    def set_index(self, index: Index, value: Any) -> None:
        self.set(index.x, index.y, value)

    def indexes(self) -> Iterator[Index]:
        """Iterate over every index in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield Index(x, y)

    def rows(self) -> List[list]:
        return self._cells.tolist()

    def to_array(self) -> np.ndarray:
        return self._cells.copy()

    def copy(self) -> "Grid":
        return Grid(self._cells.copy())

    def get_selection_indexes(self, selection: Selection, index: Index) -> Set[Index]:
        """Return the indexes of a neighborhood shape around ``index``.

        The shape's bounding window ``[index - r, index + r]`` is clamped to
        the grid on each axis, so cells near an edge get a smaller
        neighborhood instead of wrapping around. The queried index is always
        part of the result.

        Args:
            selection: Shape and extent of the neighborhood.
            index: Center of the neighborhood.

        Returns:
            Set of in-bounds indexes.

        Raises:
            OutOfBoundsError: If ``index`` itself is outside the grid.
        """
        x, y = index
        if not self.contains(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)

        r = selection.radius
        start_x, end_x = max(0, x - r), min(self.width - 1, x + r)
        start_y, end_y = max(0, y - r), min(self.height - 1, y + r)

        return {
            Index(i, j)
            for j in range(start_y, end_y + 1)
            for i in range(start_x, end_x + 1)
            if selection.includes(i - x, j - y)
        }

    def get_selection(self, selection: Selection, index: Index) -> Dict[Index, Any]:
        """Return the values of a neighborhood shape, keyed by index."""
        return {
            selected: self.get_index(selected)
            for selected in self.get_selection_indexes(selection, index)
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells.shape == other._cells.shape and bool(
            np.array_equal(self._cells, other._cells)
        )

    __hash__ = None

    def __str__(self) -> str:
        return render_text(self)

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, rows={self.rows()!r})"
