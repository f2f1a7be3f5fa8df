"""Image and video output for grid snapshots."""

from pathlib import Path
from typing import Tuple

import cv2
import numpy as np
from PIL import Image

from .grid import Grid


VIDEO_EXTENSIONS = {".mp4", ".avi", ".mov", ".mkv"}

ALIVE_COLOR = (255, 255, 255)
DEAD_COLOR = (0, 0, 0)


def is_video_file(filename: str) -> bool:
    """Check if filename has a video extension.

    Args:
        filename: Path to file.

    Returns:
        True if file has a video extension.
    """
    return Path(filename).suffix.lower() in VIDEO_EXTENSIONS


def grid_to_image(
    grid: Grid,
    cell_size: int = 8,
    alive_color: Tuple[int, int, int] = ALIVE_COLOR,
    dead_color: Tuple[int, int, int] = DEAD_COLOR,
) -> np.ndarray:
    """Rasterise a grid of 0/1 cells.

    Args:
        grid: Grid to draw.
        cell_size: Edge length of one cell in pixels.
        alive_color: RGB color for cells holding 1.
        dead_color: RGB color for every other cell.

    Returns:
        RGB uint8 array of shape ``(height * cell_size, width * cell_size, 3)``.
    """
    if cell_size < 1:
        raise ValueError(f"cell_size must be positive, got {cell_size}")

    alive = (grid.to_array() == 1).astype(np.uint8)
    mask = cv2.resize(
        alive,
        (grid.width * cell_size, grid.height * cell_size),
        interpolation=cv2.INTER_NEAREST,
    )[:, :, np.newaxis]

    return np.where(
        mask == 1,
        np.array(alive_color, dtype=np.uint8),
        np.array(dead_color, dtype=np.uint8),
    ).astype(np.uint8)


def save_image(image: np.ndarray, path: str) -> None:
    """Save an RGB array to an image file; the format follows the extension."""
    Image.fromarray(image).save(path)


class VideoWriter:
    """Write RGB frames to a video file."""

    def __init__(self, path: str, width: int, height: int, fps: float = 10.0):
        """Initialize the writer.

        Args:
            path: Output video path.
            width: Frame width in pixels.
            height: Frame height in pixels.
            fps: Frames per second.

        Raises:
            IOError: If the video file cannot be created.
        """
        self.path = path
        self.width = width
        self.height = height
        self.fps = fps

        fourcc = cv2.VideoWriter_fourcc(*"mp4v")
        self._writer = cv2.VideoWriter(path, fourcc, fps, (width, height))
        if not self._writer.isOpened():
            raise IOError(f"Cannot create video writer: {path}")

    def write_frame(self, frame: np.ndarray):
        """Write a frame to the video.

        Args:
            frame: RGB numpy array of the writer's dimensions.
        """
        if frame.shape[:2] != (self.height, self.width):
            raise ValueError(
                f"Frame shape {frame.shape[:2]} does not match video size "
                f"{(self.height, self.width)}"
            )
        self._writer.write(cv2.cvtColor(frame, cv2.COLOR_RGB2BGR))

    def close(self):
        """Release resources."""
        self._writer.release()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
