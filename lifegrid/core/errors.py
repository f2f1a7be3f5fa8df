"""Error types raised by the grid and life engine."""


class GridError(Exception):
    """Base class for grid and life engine errors."""


class OutOfBoundsError(GridError, IndexError):
    """Coordinate lies outside the grid dimensions."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"Index ({x}, {y}) out of bounds for {width}x{height} grid"
        )


class InconsistentDimensionsError(GridError, ValueError):
    """Rows or columns passed to a grid constructor differ in length."""


class InvalidCellStateError(GridError, ValueError):
    """Cell value is neither dead (0) nor alive (1)."""

    def __init__(self, x: int, y: int, value):
        self.x = x
        self.y = y
        self.value = value
        super().__init__(f"Unknown cell state {value!r} at ({x}, {y})")


class EmptyCandidateSetError(GridError, ValueError):
    """Random fill was requested without any candidate values."""
