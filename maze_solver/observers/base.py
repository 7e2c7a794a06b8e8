from abc import ABC, abstractmethod
from typing import Sequence, Tuple


class MazeObserver(ABC):
    """Receives progress events from the solver. Never feeds data back into it.

    Observers with wants_paths = False get draw_grid only; the solver skips
    building a path list for highlight_path on every dequeue.
    """
    wants_paths = True

    @abstractmethod
    def draw_grid(self, grid) -> None:
        raise NotImplementedError

    @abstractmethod
    def highlight_path(self, path: Sequence[Tuple[int, int]], color: str, width: int) -> None:
        raise NotImplementedError

    def name(self) -> str:
        return self.__class__.__name__
