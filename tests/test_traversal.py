# tests/test_traversal.py
"""
Tests for forward reachability and the labelled depth-first traversals.
"""

import pytest

from sdfv_graphlib import (
    NodeNotFoundError,
    UndirectedGraph,
    all_reachable,
    dfs_labeled_edges,
    dfs_postorder_nodes,
)


class TestAllReachable:

    def test_reachability_in_single_loop(self, single_loop):
        assert set(all_reachable(single_loop, "0")) == set()
        assert set(all_reachable(single_loop, "1")) == {"2", "3", "4", "5", "6"}
        assert set(all_reachable(single_loop, "5")) == set()

    def test_start_included_only_through_a_cycle(self, single_loop):
        reached = list(all_reachable(single_loop, "2"))
        assert set(reached) == {"2", "3", "4", "5", "6"}
        assert len(reached) == len(set(reached))
        assert "1" not in set(all_reachable(single_loop, "4"))
        assert "4" in set(all_reachable(single_loop, "4"))

    def test_self_loop_reaches_itself(self, self_loop):
        assert set(all_reachable(self_loop, "2")) == {"2", "3"}
        assert set(all_reachable(self_loop, "1")) == {"2", "3"}

    def test_unknown_start_raises_eagerly(self, single_loop):
        with pytest.raises(NodeNotFoundError):
            all_reachable(single_loop, "ghost")

    def test_each_call_starts_fresh(self, single_loop):
        first = all_reachable(single_loop, "1")
        next(first)
        second = set(all_reachable(single_loop, "1"))
        assert second == {"2", "3", "4", "5", "6"}

    def test_result_is_lazy(self, build_digraph):
        g = build_digraph([("a", "b"), ("b", "c")])
        it = all_reachable(g, "a")
        assert next(it) == "b"
        assert next(it) == "c"
        with pytest.raises(StopIteration):
            next(it)

    def test_undirected_reachability(self):
        g = UndirectedGraph()
        g.add_edges([("a", "b"), ("b", "c")])
        g.add_node("d")
        # every neighbour leads back, so the start is reached too
        assert set(all_reachable(g, "a")) == {"a", "b", "c"}
        assert set(all_reachable(g, "d")) == set()


class TestLabeledEdges:

    def test_labels_on_small_cycle(self, build_digraph):
        g = build_digraph([("1", "2"), ("2", "3"), ("3", "2")])
        assert list(dfs_labeled_edges(g, "1")) == [
            ("1", "1", "forward"),
            ("1", "2", "forward"),
            ("2", "3", "forward"),
            ("3", "2", "nontree"),
            ("2", "3", "reverse"),
            ("1", "2", "reverse"),
            ("1", "1", "reverse"),
        ]

    def test_all_roots_when_source_omitted(self, single_loop):
        labels = list(dfs_labeled_edges(single_loop))
        roots = [u for u, v, d in labels if u == v and d == "forward"]
        assert roots == ["0", "1"]
        forward = {v for u, v, d in labels if d == "forward"}
        assert forward == set(single_loop.nodes())

    def test_depth_limit(self, build_digraph):
        g = build_digraph([("a", "b"), ("b", "c")])
        assert list(dfs_labeled_edges(g, "a", depth_limit=1)) == [
            ("a", "a", "forward"),
            ("a", "b", "forward"),
            ("a", "a", "reverse"),
        ]

    def test_unknown_source_raises_eagerly(self, single_loop):
        with pytest.raises(NodeNotFoundError):
            dfs_labeled_edges(single_loop, "ghost")


class TestPostorder:

    def test_postorder_on_chain(self, build_digraph):
        g = build_digraph([("a", "b"), ("b", "c")])
        assert list(dfs_postorder_nodes(g, "a")) == ["c", "b", "a"]

    def test_postorder_visits_reachable_nodes_once(self, single_loop):
        order = list(dfs_postorder_nodes(single_loop, "1"))
        assert sorted(order) == ["1", "2", "3", "4", "5", "6"]
        assert order[-1] == "1"
        assert order.index("6") < order.index("4") < order.index("2")

    def test_postorder_unknown_start(self, single_loop):
        with pytest.raises(NodeNotFoundError):
            dfs_postorder_nodes(single_loop, "ghost")


class TestLongChains:

    def test_reachability_does_not_recurse(self, long_cycle):
        reached = set(all_reachable(long_cycle, "0"))
        assert reached == set(long_cycle.nodes())

    def test_postorder_does_not_recurse(self, long_cycle):
        order = list(dfs_postorder_nodes(long_cycle, "0"))
        assert len(order) == 20001
        assert order[0] == "20000"
        assert order[-1] == "0"
