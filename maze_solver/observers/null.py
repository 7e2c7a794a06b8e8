from .base import MazeObserver


class NullObserver(MazeObserver):
    """Headless observer: accepts every event and does nothing."""
    wants_paths = False

    def draw_grid(self, grid) -> None:
        pass

    def highlight_path(self, path, color: str, width: int) -> None:
        pass
