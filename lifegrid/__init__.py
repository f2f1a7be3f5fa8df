"""Conway's Game of Life on a fixed-size grid with shape-based neighborhoods."""

__version__ = "0.1.0"
