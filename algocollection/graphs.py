"""A directed graph stored as adjacency lists, with breadth- and depth-first walks."""

from collections import defaultdict, deque
from collections.abc import Hashable, Iterator


class Graph:
    """A directed graph; vertices are any hashable values."""

    def __init__(self) -> None:
        self._adjacency: defaultdict[Hashable, list[Hashable]] = defaultdict(list)

    def add_edge(self, source: Hashable, target: Hashable) -> None:
        """Add an edge from ``source`` to ``target``."""
        self._adjacency[source].append(target)

    def _neighbours(self, vertex: Hashable) -> list[Hashable]:
        return self._adjacency.get(vertex, [])

    def bfs(self, start: Hashable) -> list[Hashable]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        visited = {start}
        order = []
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._neighbours(vertex):
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, start: Hashable) -> list[Hashable]:
        """Return the vertices reachable from ``start`` in depth-first order."""
        visited = {start}
        order = [start]
        stack: list[Iterator[Hashable]] = [iter(self._neighbours(start))]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self._neighbours(neighbour)))
                    break
            else:
                stack.pop()
        return order