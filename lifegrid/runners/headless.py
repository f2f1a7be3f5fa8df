"""Headless batch runner."""

from tqdm import tqdm

from ..config import SimulationConfig
from ..core.grid import Grid
from ..core.io import VideoWriter, grid_to_image, is_video_file, save_image
from ..core.life import LifeEngine


def run_headless(config: SimulationConfig) -> Grid:
    """Compute a fixed number of generations and write them to disk.

    Video outputs receive one frame per generation, starting with the
    initial grid. Any other path receives an image of the final generation.

    Args:
        config: Run configuration; ``output.path`` and ``output.generations``
            must be set.

    Returns:
        The final generation.
    """
    output = config.output
    if output.path is None or output.generations is None:
        raise ValueError("Headless runs need an output path and a generation count")

    selection = config.rule.build_selection()
    engine = LifeEngine(
        config.grid.width,
        config.grid.height,
        neighborhood=selection,
        seed=config.grid.seed,
    )
    cell_size = config.render.cell_size
    print(
        f"Simulating {output.generations} generations on a "
        f"{engine.width}x{engine.height} grid ({selection})"
    )

    if is_video_file(output.path):
        frame = grid_to_image(engine.grid, cell_size)
        height, width = frame.shape[:2]
        with VideoWriter(output.path, width, height, output.fps) as writer:
            writer.write_frame(frame)
            for _ in tqdm(range(output.generations), desc="Simulating"):
                writer.write_frame(grid_to_image(engine.step(), cell_size))
    else:
        for _ in tqdm(range(output.generations), desc="Simulating"):
            engine.step()
        save_image(grid_to_image(engine.grid, cell_size), output.path)

    print(f"Final population: {engine.population}")
    print(f"Output saved to: {output.path}")
    return engine.grid
