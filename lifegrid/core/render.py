"""Text renderings of a grid of integer cells."""

ALIVE_GLYPH = "■"
DEAD_GLYPH = " "


def render_text(grid, alive: str = ALIVE_GLYPH, dead: str = DEAD_GLYPH) -> str:
    """Render a grid for humans.

    Every cell becomes a space followed by the alive glyph (for value 1) or
    the dead glyph (for anything else). Rows are separated by newlines.

    Args:
        grid: Grid to render.
        alive: Glyph for live cells.
        dead: Glyph for all other cells.

    Returns:
        Multi-line string, one line per grid row.
    """
    return "\n".join(
        "".join(f" {alive if value == 1 else dead}" for value in row)
        for row in grid.rows()
    )


def render_debug(grid) -> str:
    """Render raw cell values, comma separated, one line per row."""
    return "\n".join(", ".join(str(value) for value in row) for row in grid.rows())
