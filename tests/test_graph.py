"""Tests for the graph store and rooted-DAG validation (unit tests — no DB required)."""

import pytest

from app.exceptions import (
    InvalidArgumentError,
    InvalidEdgeError,
    InvalidTaxonomyError,
    NotAcyclicError,
    NotSingleRootedError,
    OutOfRangeError,
)
from app.utils.graph import Digraph, find_cycle, validate_rooted_dag


class TestDigraph:
    def test_counts(self):
        g = Digraph(4, [(1, 0), (2, 0), (3, 0)])
        assert g.vertex_count == 4
        assert len(g) == 4
        assert g.edge_count == 3

    def test_neighbors_sorted(self):
        g = Digraph(4, [(0, 3), (0, 1), (0, 2)])
        assert g.neighbors(0) == (1, 2, 3)
        assert g.neighbors(3) == ()

    def test_duplicate_edges_collapse(self):
        g = Digraph(2, [(1, 0), (1, 0)])
        assert g.edge_count == 1
        assert g.out_degree(1) == 1

    def test_sinks(self):
        g = Digraph(5, [(1, 0), (2, 1), (4, 3)])
        assert g.sinks() == [0, 3]

    def test_edges_iteration(self):
        g = Digraph(3, [(2, 0), (1, 0), (2, 1)])
        assert list(g.edges()) == [(1, 0), (2, 0), (2, 1)]

    def test_empty_graph(self):
        g = Digraph(0)
        assert g.vertex_count == 0
        assert g.sinks() == []

    def test_edge_out_of_range_rejected(self):
        with pytest.raises(InvalidEdgeError):
            Digraph(2, [(0, 2)])
        with pytest.raises(InvalidEdgeError):
            Digraph(2, [(-1, 0)])

    def test_negative_vertex_count_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Digraph(-1)

    def test_neighbors_out_of_range(self):
        g = Digraph(2, [(1, 0)])
        with pytest.raises(OutOfRangeError):
            g.neighbors(2)
        with pytest.raises(OutOfRangeError):
            g.out_degree(-1)


class TestFindCycle:
    def test_chain_is_acyclic(self):
        assert find_cycle(Digraph(3, [(2, 1), (1, 0)])) is None

    def test_diamond_is_acyclic(self):
        # 3→1, 3→2, 1→0, 2→0
        assert find_cycle(Digraph(4, [(3, 1), (3, 2), (1, 0), (2, 0)])) is None

    def test_two_cycle(self):
        assert find_cycle(Digraph(2, [(0, 1), (1, 0)])) == [0, 1, 0]

    def test_self_loop(self):
        assert find_cycle(Digraph(1, [(0, 0)])) == [0, 0]

    def test_cycle_behind_acyclic_prefix(self):
        # 0→1→2→3→1
        cycle = find_cycle(Digraph(4, [(0, 1), (1, 2), (2, 3), (3, 1)]))
        assert cycle == [1, 2, 3, 1]

    def test_deep_chain_does_not_recurse(self):
        n = 20_000
        g = Digraph(n, [(v, v - 1) for v in range(1, n)])
        assert find_cycle(g) is None


class TestValidateRootedDag:
    def test_star_rooted_at_zero(self):
        assert validate_rooted_dag(Digraph(4, [(1, 0), (2, 0), (3, 0)])) == 0

    def test_root_need_not_be_zero(self):
        assert validate_rooted_dag(Digraph(3, [(0, 2), (1, 2)])) == 2

    def test_single_vertex(self):
        assert validate_rooted_dag(Digraph(1)) == 0

    def test_cycle_rejected(self):
        # 1→2→1 plus root 0
        with pytest.raises(NotAcyclicError) as exc_info:
            validate_rooted_dag(Digraph(3, [(1, 2), (2, 1), (1, 0)]))
        assert exc_info.value.cycle == [1, 2, 1]
        assert "cycle" in str(exc_info.value).lower()

    def test_zero_sinks_rejected(self):
        # Every vertex has an outgoing edge
        with pytest.raises(InvalidTaxonomyError):
            validate_rooted_dag(Digraph(2, [(0, 1), (1, 0)]))

    def test_empty_graph_has_no_root(self):
        with pytest.raises(NotSingleRootedError) as exc_info:
            validate_rooted_dag(Digraph(0))
        assert exc_info.value.sinks == []

    def test_two_sinks_rejected(self):
        with pytest.raises(NotSingleRootedError) as exc_info:
            validate_rooted_dag(Digraph(4, [(1, 0), (3, 2)]))
        assert exc_info.value.sinks == [0, 2]

    def test_isolated_vertex_is_second_root(self):
        with pytest.raises(NotSingleRootedError):
            validate_rooted_dag(Digraph(3, [(1, 0)]))

    def test_errors_are_taxonomy_errors(self):
        assert issubclass(NotAcyclicError, InvalidTaxonomyError)
        assert issubclass(NotSingleRootedError, InvalidTaxonomyError)
