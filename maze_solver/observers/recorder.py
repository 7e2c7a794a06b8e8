import logging
from pathlib import Path
from typing import List, Optional

from PIL import Image

from ..report.generator import render_maze_image
from .base import MazeObserver

logger = logging.getLogger(__name__)


class FrameRecorder(MazeObserver):
    """Renders each highlighted path into a Pillow frame for an animated GIF.

    Only the first max_frames highlights are kept; later ones are counted but
    not drawn.
    """

    def __init__(self, cell_px: int = 12, max_frames: int = 200):
        self.cell_px = cell_px
        self.max_frames = max_frames
        self.grid = None
        self.frames: List[Image.Image] = []
        self.events = 0

    def draw_grid(self, grid) -> None:
        self.grid = grid
        self.frames = [render_maze_image(grid, None, cell_px=self.cell_px)]
        self.events = 0

    def highlight_path(self, path, color: str, width: int) -> None:
        self.events += 1
        if self.grid is None or len(self.frames) >= self.max_frames:
            return
        self.frames.append(render_maze_image(self.grid, list(path), cell_px=self.cell_px, color=color, width=width))

    def save_gif(self, output_path, duration_ms: int = 80, final_path: Optional[list] = None) -> Path:
        if not self.frames:
            raise ValueError('no frames recorded; draw_grid was never called')
        frames = list(self.frames)
        if final_path:
            frames.append(render_maze_image(self.grid, list(final_path), cell_px=self.cell_px, color='red', width=10))
        out = Path(output_path)
        frames[0].save(out, format='GIF', save_all=True, append_images=frames[1:], duration=duration_ms, loop=0)
        logger.debug('wrote %d frames (%d events) to %s', len(frames), self.events, out)
        return out
