"""Configuration dataclasses for lifegrid."""

from dataclasses import dataclass, field
from typing import Optional

from .core.grid import Circle, Cross, DiagonalCross, Selection, Square
from .core.render import ALIVE_GLYPH, DEAD_GLYPH


NEIGHBORHOODS = {
    "square": Square,
    "cross": Cross,
    "diagonal": DiagonalCross,
    "circle": Circle,
}


@dataclass
class GridConfig:
    """Configuration for the initial grid."""

    width: int = 40
    height: int = 20
    seed: Optional[int] = None


@dataclass
class RuleConfig:
    """Configuration for neighbor counting."""

    neighborhood: str = "square"
    extent: int = 2

    def build_selection(self) -> Selection:
        """Create the Selection named by ``neighborhood``.

        Raises:
            ValueError: If the name or extent is invalid.
        """
        try:
            shape = NEIGHBORHOODS[self.neighborhood]
        except KeyError:
            raise ValueError(f"Unknown neighborhood: {self.neighborhood}") from None
        return shape(self.extent)


@dataclass
class RenderConfig:
    """Configuration for terminal and image rendering."""

    alive_glyph: str = ALIVE_GLYPH
    dead_glyph: str = DEAD_GLYPH
    cell_size: int = 8
    clear_screen: bool = True


@dataclass
class OutputConfig:
    """Configuration for headless output."""

    path: Optional[str] = None
    generations: Optional[int] = None
    fps: int = 10


@dataclass
class SimulationConfig:
    """Combined configuration for a run."""

    grid: GridConfig
    rule: RuleConfig = field(default_factory=RuleConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    interval_ms: int = 100

    @property
    def headless(self) -> bool:
        return self.output.path is not None

    @classmethod
    def from_args(
        cls,
        width: int,
        height: int,
        interval_ms: int = 100,
        seed: Optional[int] = None,
        neighborhood: str = "square",
        extent: int = 2,
        alive_glyph: str = ALIVE_GLYPH,
        dead_glyph: str = DEAD_GLYPH,
        cell_size: int = 8,
        clear_screen: bool = True,
        output_path: Optional[str] = None,
        generations: Optional[int] = None,
        fps: int = 10,
    ) -> "SimulationConfig":
        """Create SimulationConfig from CLI arguments."""
        return cls(
            grid=GridConfig(width=width, height=height, seed=seed),
            rule=RuleConfig(neighborhood=neighborhood, extent=extent),
            render=RenderConfig(
                alive_glyph=alive_glyph,
                dead_glyph=dead_glyph,
                cell_size=cell_size,
                clear_screen=clear_screen,
            ),
            output=OutputConfig(path=output_path, generations=generations, fps=fps),
            interval_ms=interval_ms,
        )
