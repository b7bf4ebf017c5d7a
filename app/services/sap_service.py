"""
Shortest ancestral path (SAP) engine.

An *ancestral path* between vertex sets ``V`` and ``W`` is a pair of directed
paths ``v → ... → a`` and ``w → ... → a`` (``v`` in ``V``, ``w`` in ``W``)
that meet at a common ancestor ``a``.  The SAP is the one with the fewest
total edges; ``a`` is then the *nearest common ancestor*.

Algorithm
---------
1. Multi-source BFS from all of ``V`` at once (every source at distance 0),
   following hypernym edges only.  Same for ``W``, independently.
2. Every vertex present in both distance maps is a candidate ancestor with
   cost ``dist_v[a] + dist_w[a]``.
3. Fold over the candidates in ascending vertex id, starting from the
   incumbent ``(0, ∞)`` and replacing it only on a strictly smaller cost.
   Among equal-cost ancestors the lowest vertex id therefore wins.  This
   tie-break is a convention, not a semantic "best" choice.

Each query allocates its own distance maps; the engine holds nothing but a
reference to the immutable graph, so concurrent queries are safe.

Complexity
----------
O(V + E) per query.
"""

import logging
import math
from collections import deque
from functools import reduce
from typing import Dict, Iterable, List, NamedTuple, Tuple, Union

from app.exceptions import InvalidArgumentError, InvalidVertexError
from app.utils.graph import Digraph

logger = logging.getLogger(__name__)

# Reported by length() and ancestor() when the two sides share no ancestor.
NO_PATH = -1

VertexArg = Union[int, Iterable[int]]


class AncestralPath(NamedTuple):
    """Result of one SAP search; both fields are ``NO_PATH`` if none exists."""

    ancestor: int
    length: int

    @property
    def exists(self) -> bool:
        return self.ancestor != NO_PATH


def bfs_distances(graph: Digraph, sources: Iterable[int]) -> Dict[int, int]:
    """
    Multi-source breadth-first search along hypernym edges.

    Returns
    -------
    dict
        ``{vertex: hops}`` for every vertex reachable from any source; the
        hop count is the minimum over all sources.  Unreachable vertices are
        absent.

    Examples
    --------
    >>> g = Digraph(4, [(1, 0), (2, 1), (3, 0)])
    >>> bfs_distances(g, [2, 3])
    {2: 0, 3: 0, 1: 1, 0: 1}
    """
    dist: Dict[int, int] = {}
    queue: deque = deque()
    for s in sources:
        if s not in dist:
            dist[s] = 0
            queue.append(s)

    while queue:
        node = queue.popleft()
        hops = dist[node] + 1
        for w in graph.neighbors(node):
            if w not in dist:
                dist[w] = hops
                queue.append(w)
    return dist


def nearest_common_ancestor(
    dist_v: Dict[int, int],
    dist_w: Dict[int, int],
) -> AncestralPath:
    """
    Pick the common ancestor with the smallest summed distance.

    Only vertices in both maps have a finite cost, so folding over their
    sorted intersection gives the same answer as a scan of ``0 .. N-1``.
    """

    def step(best: Tuple[int, float], vertex: int) -> Tuple[int, float]:
        cost = dist_v[vertex] + dist_w[vertex]
        return (vertex, cost) if cost < best[1] else best

    common = sorted(dist_v.keys() & dist_w.keys())
    vertex, cost = reduce(step, common, (0, math.inf))
    if cost == math.inf:
        return AncestralPath(ancestor=NO_PATH, length=NO_PATH)
    return AncestralPath(ancestor=vertex, length=int(cost))


class ShortestAncestralPath:
    """
    SAP queries over a fixed digraph.

    Each side of a query is either a single vertex id or a non-empty
    iterable of vertex ids (a multi-source query).

    Examples
    --------
    >>> sap = ShortestAncestralPath(Digraph(3, [(2, 1), (1, 0)]))
    >>> sap.length(2, 0), sap.ancestor(2, 0)
    (2, 0)
    >>> sap.length({2}, [1]), sap.ancestor({2}, [1])
    (1, 1)
    """

    def __init__(self, graph: Digraph):
        self._graph = graph

    @property
    def graph(self) -> Digraph:
        return self._graph

    def length(self, v: VertexArg, w: VertexArg) -> int:
        """Length of the shortest ancestral path, or ``NO_PATH``."""
        return self.search(v, w).length

    def ancestor(self, v: VertexArg, w: VertexArg) -> int:
        """Nearest common ancestor vertex, or ``NO_PATH``."""
        return self.search(v, w).ancestor

    def search(self, v: VertexArg, w: VertexArg) -> AncestralPath:
        """
        Run one SAP query and return both the ancestor and the length.

        Raises
        ------
        InvalidArgumentError
            If either side is None, empty, or holds a non-integer.
        InvalidVertexError
            If any vertex id is outside ``[0, N)``.
        """
        sources_v = self._sources(v)
        sources_w = self._sources(w)

        result = nearest_common_ancestor(
            bfs_distances(self._graph, sources_v),
            bfs_distances(self._graph, sources_w),
        )
        logger.debug(
            "SAP %s ↔ %s → ancestor=%d length=%d",
            sources_v, sources_w, result.ancestor, result.length,
        )
        return result

    def _sources(self, arg: VertexArg) -> List[int]:
        if arg is None:
            raise InvalidArgumentError("Vertex argument must not be None.")

        if isinstance(arg, int):
            vertices = [arg]
        else:
            try:
                vertices = list(arg)
            except TypeError:
                raise InvalidArgumentError(
                    f"Expected a vertex id or an iterable of ids, got {arg!r}."
                ) from None
        if not vertices:
            raise InvalidArgumentError("Vertex set must not be empty.")

        n = self._graph.vertex_count
        for vertex in vertices:
            if isinstance(vertex, bool) or not isinstance(vertex, int):
                raise InvalidArgumentError(
                    f"Vertex ids must be integers, got {vertex!r}."
                )
            if not 0 <= vertex < n:
                raise InvalidVertexError(f"Vertex {vertex} is outside [0, {n}).")
        return vertices
