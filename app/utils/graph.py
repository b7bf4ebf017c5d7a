"""
Immutable directed graph and rooted-DAG validation for the hypernym taxonomy.

Graph store
-----------
Vertices are the integers ``0 .. N-1`` (one per synset).  Each vertex keeps the
set of vertices it points to: its hypernyms, the more general concepts.
The store is built once from an edge list and frozen; there is no removal.

Validation
----------
A taxonomy is usable only if it is a *single-rooted* DAG:

1. **Acyclic**, checked with an iterative three-colour DFS.  A vertex is
   WHITE (unseen), GRAY (on the current DFS path) or BLACK (finished).
   Reaching a GRAY vertex means we followed a back edge → cycle.
2. **Exactly one sink**: the root is the unique vertex with out-degree 0.

Why both
--------
Without (1) a traversal could loop; without (2) two vertices may share no
ancestor at all.  In a finite acyclic graph every walk ends at a sink, so
with a single sink every vertex reaches the root and any two vertices have
at least one common ancestor.

Complexity
----------
O(V + E) for construction and for each check.

Example::

    graph = Digraph(3, [(1, 0), (2, 0)])   # 1→0, 2→0
    validate_rooted_dag(graph)              # → 0 (the root)

    Digraph(2, [(0, 1), (1, 0)])            # 0→1→0
    # validate_rooted_dag(...) raises NotAcyclicError([0, 1, 0])
"""

from typing import Iterable, Iterator, List, Optional, Set, Tuple

from app.exceptions import (
    InvalidArgumentError,
    InvalidEdgeError,
    NotAcyclicError,
    NotSingleRootedError,
    OutOfRangeError,
)

WHITE, GRAY, BLACK = 0, 1, 2


class Digraph:
    """
    Directed graph over vertices ``0 .. vertex_count-1``, frozen after construction.

    Parameters
    ----------
    vertex_count:
        Number of vertices ``N``.
    edges:
        Iterable of ``(v, w)`` pairs meaning ``v → w`` (``w`` is a hypernym of
        ``v``).  Duplicate edges collapse into one.

    Raises
    ------
    InvalidEdgeError
        If any endpoint lies outside ``[0, N)``.
    """

    __slots__ = ("_adj", "_edge_count")

    def __init__(self, vertex_count: int, edges: Iterable[Tuple[int, int]] = ()):
        if vertex_count < 0:
            raise InvalidArgumentError(
                f"Vertex count must be non-negative, got {vertex_count}."
            )

        adj: List[Set[int]] = [set() for _ in range(vertex_count)]
        for v, w in edges:
            if not (0 <= v < vertex_count and 0 <= w < vertex_count):
                raise InvalidEdgeError(
                    f"Edge {v} → {w} has an endpoint outside [0, {vertex_count})."
                )
            adj[v].add(w)

        self._adj: Tuple[Tuple[int, ...], ...] = tuple(
            tuple(sorted(successors)) for successors in adj
        )
        self._edge_count = sum(len(successors) for successors in self._adj)

    @property
    def vertex_count(self) -> int:
        return len(self._adj)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"<Digraph V={self.vertex_count} E={self.edge_count}>"

    def vertices(self) -> range:
        return range(len(self._adj))

    def edges(self) -> Iterator[Tuple[int, int]]:
        """Yield every edge ``(v, w)`` in ascending ``v`` then ``w`` order."""
        for v, successors in enumerate(self._adj):
            for w in successors:
                yield v, w

    def neighbors(self, v: int) -> Tuple[int, ...]:
        """Return the successors (hypernyms) of ``v`` in ascending order."""
        self._check(v)
        return self._adj[v]

    def out_degree(self, v: int) -> int:
        self._check(v)
        return len(self._adj[v])

    def sinks(self) -> List[int]:
        """Return every vertex with out-degree 0, ascending."""
        return [v for v, successors in enumerate(self._adj) if not successors]

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self._adj):
            raise OutOfRangeError(f"Vertex {v} is outside [0, {len(self._adj)}).")


def find_cycle(graph: Digraph) -> Optional[List[int]]:
    """
    Return one directed cycle of ``graph`` or None if it is acyclic.

    Iterative DFS so that deep taxonomies do not hit the recursion limit.
    The search stops at the first back edge found.

    Returns
    -------
    list or None
        The cycle as a vertex path that starts and ends on the same vertex,
        e.g. ``[4, 7, 9, 4]``.  A self-loop on ``v`` is ``[v, v]``.

    Examples
    --------
    >>> find_cycle(Digraph(3, [(2, 1), (1, 0)])) is None
    True
    >>> find_cycle(Digraph(3, [(0, 1), (1, 2), (2, 1)]))
    [1, 2, 1]
    """
    color = [WHITE] * graph.vertex_count

    for start in graph.vertices():
        if color[start] != WHITE:
            continue

        # Each frame is (vertex, iterator over its remaining successors).
        path: List[int] = [start]
        stack = [(start, iter(graph.neighbors(start)))]
        color[start] = GRAY

        while stack:
            node, successors = stack[-1]
            for w in successors:
                if color[w] == GRAY:
                    return path[path.index(w):] + [w]
                if color[w] == WHITE:
                    color[w] = GRAY
                    path.append(w)
                    stack.append((w, iter(graph.neighbors(w))))
                    break
            else:
                color[node] = BLACK
                path.pop()
                stack.pop()

    return None


def validate_rooted_dag(graph: Digraph) -> int:
    """
    Verify ``graph`` is a single-rooted DAG and return its root.

    Parameters
    ----------
    graph:
        The fully built hypernym graph.

    Returns
    -------
    int
        The unique vertex with out-degree 0.

    Raises
    ------
    NotAcyclicError
        If the graph contains a directed cycle (checked first).
    NotSingleRootedError
        If the graph has zero or several vertices of out-degree 0.
    """
    cycle = find_cycle(graph)
    if cycle is not None:
        raise NotAcyclicError(cycle)

    sinks = graph.sinks()
    if len(sinks) != 1:
        raise NotSingleRootedError(sinks)
    return sinks[0]
