import re
import json
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple

from ..errors import FileOpenFailure, MalformedSolutionFormat
from ..maze_core.grid import Location

Coord = Tuple[int, int]

_STACK_ITEM = re.compile(r"r(-?\d+)c(-?\d+)")
_TUPLE_ITEM = re.compile(r"\(\s*(-?\d+)\s*,\s*(-?\d+)\s*\)")
_STACK_FULL = re.compile(r"\{\s*(?:r-?\d+c-?\d+\s*(?:,\s*r-?\d+c-?\d+\s*)*)?\}")
_TUPLE_FULL = re.compile(
    r"\[\s*(?:\(\s*-?\d+\s*,\s*-?\d+\s*\)\s*(?:,\s*\(\s*-?\d+\s*,\s*-?\d+\s*\)\s*)*)?\]")


@dataclass
class ParseResult:
    path: List[Location]
    raw: str
    mode: str


class SolutionParser:
    """Reads a serialized path, first element = entry.

    Accepted notations:
      stack   {r0c0, r1c0, r1c1}
      coords  [(0,0),(1,0),(1,1)]
      json    [[0,0],[1,0],[1,1]]
    """

    def parse(self, text: str) -> ParseResult:
        raw = text.strip()
        if _STACK_FULL.fullmatch(raw):
            path = [Location(int(a), int(b)) for a, b in _STACK_ITEM.findall(raw)]
            return ParseResult(path=path, raw=raw, mode='stack')
        if _TUPLE_FULL.fullmatch(raw):
            path = [Location(int(a), int(b)) for a, b in _TUPLE_ITEM.findall(raw)]
            return ParseResult(path=path, raw=raw, mode='coords')
        try:
            obj = json.loads(raw)
        except ValueError:
            obj = None
        if isinstance(obj, list) and all(_is_pair(p) for p in obj):
            path = [Location(int(r), int(c)) for r, c in obj]
            return ParseResult(path=path, raw=raw, mode='json_list')
        snippet = raw if len(raw) <= 60 else raw[:57] + '...'
        raise MalformedSolutionFormat(f'Maze solution did not have the correct format: {snippet!r}')


def _is_pair(p) -> bool:
    return (isinstance(p, list) and len(p) == 2
            and all(isinstance(v, int) and not isinstance(v, bool) for v in p))


def read_solution_file(path) -> List[Location]:
    p = Path(path)
    try:
        text = p.read_text(encoding='utf-8')
    except OSError as e:
        raise FileOpenFailure(f'cannot open solution file {p}: {e}') from e
    return SolutionParser().parse(text).path


def format_path(path: Sequence[Coord], mode: str = 'stack') -> str:
    if mode == 'stack':
        return '{' + ', '.join(f'r{r}c{c}' for r, c in path) + '}'
    if mode == 'coords':
        return '[' + ','.join(f'({r},{c})' for r, c in path) + ']'
    if mode == 'json_list':
        return json.dumps([[int(r), int(c)] for r, c in path])
    raise ValueError(f'unknown path format: {mode}')


def write_solution_file(path, solution: Sequence[Coord], mode: str = 'stack') -> Path:
    p = Path(path)
    p.write_text(format_path(solution, mode) + '\n', encoding='utf-8')
    return p
