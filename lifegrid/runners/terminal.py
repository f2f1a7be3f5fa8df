"""Interactive terminal runner."""

import sys
import threading
from typing import Callable, Optional, TextIO

from ..config import RenderConfig, SimulationConfig
from ..core.grid import Grid
from ..core.life import LifeEngine
from ..core.render import render_text

CLEAR_SCREEN = "\033[2J\033[H"

GenerationCallback = Callable[[Grid, int], None]


def make_printer(
    render: RenderConfig, stream: Optional[TextIO] = None
) -> GenerationCallback:
    """Create a callback that prints each generation to ``stream``.

    Args:
        render: Glyphs and screen clearing options.
        stream: Output stream, stdout when omitted.

    Returns:
        Callback taking the grid and its generation number.
    """

    def print_generation(grid: Grid, generation: int) -> None:
        out = stream if stream is not None else sys.stdout
        if render.clear_screen:
            out.write(CLEAR_SCREEN)
        out.write(render_text(grid, render.alive_glyph, render.dead_glyph))
        out.write(f"\n\nGeneration {generation}. Press Enter to stop.\n")
        out.flush()

    return print_generation


def simulate(
    engine: LifeEngine,
    on_generation: GenerationCallback,
    generations: Optional[int] = None,
    interval_ms: int = 0,
    stop_event: Optional[threading.Event] = None,
) -> int:
    """Alternate between computing and rendering generations.

    The current grid is rendered first, then each computed generation after
    waiting ``interval_ms``.

    Args:
        engine: Engine holding the current generation.
        on_generation: Called with every grid and its generation number.
        generations: Number of generations to compute; None runs until stopped.
        interval_ms: Delay before each generation in milliseconds.
        stop_event: Set to end the loop early.

    Returns:
        Number of generations computed.
    """
    if stop_event is None:
        stop_event = threading.Event()

    on_generation(engine.grid, engine.generation)
    computed = 0
    while generations is None or computed < generations:
        if stop_event.wait(interval_ms / 1000):
            break
        grid = engine.step()
        computed += 1
        on_generation(grid, engine.generation)
    return computed


def run_terminal(config: SimulationConfig, input_fn: Callable[[], str] = input) -> None:
    """Run the simulation in the terminal until Enter is pressed.

    The compute-and-render loop runs on a daemon thread so the main thread
    stays free to wait for the user. With a generation limit the call
    returns once the limit is reached.

    Args:
        config: Run configuration.
        input_fn: Blocks until the user asks to stop.
    """
    engine = LifeEngine(
        config.grid.width,
        config.grid.height,
        neighborhood=config.rule.build_selection(),
        seed=config.grid.seed,
    )
    stop_event = threading.Event()
    thread = threading.Thread(
        target=simulate,
        args=(
            engine,
            make_printer(config.render),
            config.output.generations,
            config.interval_ms,
            stop_event,
        ),
        daemon=True,
    )
    thread.start()

    if config.output.generations is not None:
        thread.join()
        return

    try:
        input_fn()
    except (EOFError, KeyboardInterrupt):
        print()
    stop_event.set()
