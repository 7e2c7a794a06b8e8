import logging
from collections import deque
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..errors import SearchCancelled
from .grid import Grid, Location, neighbors
from .path import PathNode

logger = logging.getLogger(__name__)

HIGHLIGHT_COLOR = 'blue'
HIGHLIGHT_WIDTH = 10


@dataclass
class SolveStats:
    dequeued: int = 0
    enqueued: int = 0
    found: bool = False
    length: int = 0


def find_path(grid: Grid, observer=None, global_visited: bool = False,
              cancel: Optional[Callable[[], bool]] = None,
              stats: Optional[SolveStats] = None) -> Optional[List[Location]]:
    """Breadth-first search over partial paths from entry to exit.

    Returns the first path to reach the exit (a shortest one), or None when
    the frontier empties. By default cycles are only pruned within a single
    candidate path; global_visited=True additionally drops any cell already
    reached by an earlier path, which turns the search into plain O(V+E) BFS.
    """
    stats = stats if stats is not None else SolveStats()
    if observer is not None:
        observer.draw_grid(grid)
    show_paths = observer is not None and getattr(observer, 'wants_paths', True)
    goal = grid.exit
    start = PathNode(grid.entry)
    paths = deque([start])
    stats.enqueued += 1
    seen = {grid.entry}
    while paths:
        if cancel is not None and cancel():
            raise SearchCancelled(f'search cancelled after {stats.dequeued} paths')
        current_path = paths.popleft()
        stats.dequeued += 1
        if show_paths:
            observer.highlight_path(current_path.to_list(), HIGHLIGHT_COLOR, HIGHLIGHT_WIDTH)
        current = current_path.last
        if current == goal:
            stats.found = True
            stats.length = len(current_path)
            logger.debug('solved %r: length=%d dequeued=%d enqueued=%d',
                         grid, stats.length, stats.dequeued, stats.enqueued)
            return current_path.to_list()
        # sorted: deterministic tie-breaking
        for move in sorted(neighbors(grid, current)):
            if global_visited:
                if move in seen:
                    continue
                seen.add(move)
            elif move in current_path:
                continue
            paths.append(current_path.extend(move))
            stats.enqueued += 1
    logger.warning('no route from %s to %s in %r (dequeued=%d)',
                   tuple(grid.entry), tuple(goal), grid, stats.dequeued)
    return None


def solve(grid: Grid, observer=None, global_visited: bool = False,
          cancel: Optional[Callable[[], bool]] = None,
          stats: Optional[SolveStats] = None) -> List[Location]:
    """Shortest entry-to-exit path; [entry] alone when no route exists."""
    path = find_path(grid, observer=observer, global_visited=global_visited,
                     cancel=cancel, stats=stats)
    if path is None:
        return [grid.entry]
    return path
