import logging
from pathlib import Path
from typing import List, Optional

from ..errors import FileOpenFailure, InconsistentRowLength, InvalidCharacter, MazeFormatError
from .grid import Grid

logger = logging.getLogger(__name__)

WALL = '@'
CORRIDOR = '-'


def parse_maze_text(text: str, wall: str = WALL, corridor: str = CORRIDOR) -> Grid:
    if len(wall) != 1 or len(corridor) != 1 or wall == corridor:
        raise ValueError('wall and corridor must be two distinct single characters')
    # only \n ends a row; other line separators are invalid characters
    lines = [l[:-1] if l.endswith('\r') else l for l in text.split('\n')]
    # tolerate trailing blank lines at end of file
    while lines and not lines[-1]:
        lines.pop()
    if not lines:
        raise MazeFormatError('maze text is empty')
    n_cols = len(lines[0])
    rows: List[List[bool]] = []
    for r, line in enumerate(lines):
        if len(line) != n_cols:
            raise InconsistentRowLength(
                f'maze row {r} has {len(line)} columns, expected {n_cols}')
        row = []
        for c, ch in enumerate(line):
            if ch == wall:
                row.append(False)
            elif ch == corridor:
                row.append(True)
            else:
                raise InvalidCharacter(f"maze location ({r},{c}) has invalid character: {ch!r}")
        rows.append(row)
    return Grid.from_rows(rows)


def read_maze_file(path, wall: str = WALL, corridor: str = CORRIDOR) -> Grid:
    p = Path(path)
    try:
        text = p.read_text(encoding='utf-8')
    except OSError as e:
        raise FileOpenFailure(f'cannot open maze file {p}: {e}') from e
    grid = parse_maze_text(text, wall=wall, corridor=corridor)
    logger.debug('loaded %s as %dx%d grid', p, grid.rows, grid.cols)
    return grid


def format_grid(grid: Grid, wall: str = WALL, corridor: str = CORRIDOR,
                path: Optional[list] = None, mark: str = '*') -> str:
    on_path = {tuple(p) for p in path} if path else set()
    lines = []
    for r in range(grid.rows):
        chars = []
        for c in range(grid.cols):
            if (r, c) in on_path:
                chars.append(mark)
            else:
                chars.append(corridor if grid[r, c] else wall)
        lines.append(''.join(chars))
    return '\n'.join(lines) + '\n'
