from typing import Iterable, Iterator, List, Optional
from .grid import Location


class PathNode:
    """Append-only route from the entry: a new location plus a link to its prefix.

    Extending a node never touches the node itself, so any number of frontier
    entries can share one prefix.
    """
    __slots__ = ('loc', 'parent', 'length')

    def __init__(self, loc, parent: Optional['PathNode'] = None):
        self.loc = Location(*loc)
        self.parent = parent
        self.length = 1 if parent is None else parent.length + 1

    @classmethod
    def from_locations(cls, locs: Iterable) -> Optional['PathNode']:
        node = None
        for loc in locs:
            node = cls(loc, node)
        return node

    def extend(self, loc) -> 'PathNode':
        return PathNode(loc, self)

    @property
    def last(self) -> Location:
        return self.loc

    def walk_back(self) -> Iterator[Location]:
        node = self
        while node is not None:
            yield node.loc
            node = node.parent

    def __contains__(self, loc) -> bool:
        return any(p == loc for p in self.walk_back())

    def __len__(self) -> int:
        return self.length

    def to_list(self) -> List[Location]:
        out = list(self.walk_back())
        out.reverse()
        return out

    def __repr__(self) -> str:
        return f'PathNode({self.to_list()})'
