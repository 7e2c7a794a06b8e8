from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..errors import EmptyPath, IllegalMove, LoopDetected, PathValidationError, WrongEntry, WrongExit
from ..maze_core.grid import Grid, Location, neighbors
from ..maze_core.solver import find_path

Coord = Tuple[int, int]


def validate_path(grid: Grid, path: Sequence[Coord]) -> None:
    """Raise the first PathValidationError the path violates; return None if legal.

    Checks run in a fixed order: empty, exit, then each step walking backward
    from the exit (adjacency before repeats), and the entry last. The caller's
    sequence is only read.
    """
    if not path:
        raise EmptyPath('Path is empty')
    steps = [Location(*p) for p in path]
    if steps[-1] != grid.exit:
        raise WrongExit(f'Path ends at {tuple(steps[-1])}, not at maze exit {tuple(grid.exit)}')
    target = steps[-1]
    seen = {target}
    for i in range(len(steps) - 2, -1, -1):
        prev = steps[i]
        if target not in neighbors(grid, prev):
            raise IllegalMove(f'Move {i} from {tuple(prev)} to {tuple(target)} is not a valid move')
        if prev in seen:
            raise LoopDetected(f'Path revisits {tuple(prev)} (loop at move {i})')
        seen.add(prev)
        target = prev
    if target != grid.entry or not grid[grid.entry]:
        raise WrongEntry(f'Path starts at {tuple(target)}, not at open maze entry {tuple(grid.entry)}')


class Validator:
    def __init__(self, grid: Grid, shortest_path: Optional[List[Coord]] = None):
        self.grid = grid
        if shortest_path is None:
            shortest_path = find_path(grid, global_visited=True) or []
        self.shortest_path = [tuple(p) for p in shortest_path]

    def validate(self, path: Sequence[Coord]) -> Dict[str, Any]:
        try:
            validate_path(self.grid, path)
        except PathValidationError as e:
            return {'ok': False, 'error': f'{e.code}: {e.reason}', 'code': e.code, 'reason': e.reason}
        length = len(path) - 1
        optimal = bool(self.shortest_path) and length == len(self.shortest_path) - 1
        return {'ok': True, 'length': length, 'optimal': optimal, 'overlap': self._overlap(path)}

    def _overlap(self, path: Sequence[Coord]) -> float:
        if not self.shortest_path:
            return 0.0
        sp = set(self.shortest_path)
        cells = set(tuple(p) for p in path)
        union = len(sp | cells)
        return len(sp & cells)/union if union else 0.0
