"""Grid, neighborhood selection and life engine."""

from .errors import (
    EmptyCandidateSetError,
    GridError,
    InconsistentDimensionsError,
    InvalidCellStateError,
    OutOfBoundsError,
)
from .grid import Circle, Cross, DiagonalCross, Grid, Index, Selection, Square
from .life import (
    Alive,
    CellState,
    Dead,
    LifeEngine,
    count_live_neighbors,
    create_next_grid,
    get_cell_state,
    get_next_state,
    get_next_state_for_index,
)
from .render import render_debug, render_text

__all__ = [
    "Alive",
    "CellState",
    "Circle",
    "Cross",
    "Dead",
    "DiagonalCross",
    "EmptyCandidateSetError",
    "Grid",
    "GridError",
    "InconsistentDimensionsError",
    "Index",
    "InvalidCellStateError",
    "LifeEngine",
    "OutOfBoundsError",
    "Selection",
    "Square",
    "count_live_neighbors",
    "create_next_grid",
    "get_cell_state",
    "get_next_state",
    "get_next_state_for_index",
    "render_debug",
    "render_text",
]
