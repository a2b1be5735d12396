# tests/conftest.py
"""
Shared fixtures for the sdfv_graphlib test-suite.

Graph drawings use ``↓``/``→`` for edges and ``=`` for a self-loop.
"""

import os
import sys

import pytest

# Ensure the package is importable without installation
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from sdfv_graphlib import DirectedGraph, UndirectedGraph  # noqa: E402


def make_digraph(edges, nodes=()):
    g = DirectedGraph()
    g.add_nodes(nodes)
    g.add_edges(edges)
    return g


@pytest.fixture
def payloads():
    return (
        {"attr1": "val1"},
        {"otherAttr": "otherVal"},
        {"thatAttr": "someVal"},
    )


@pytest.fixture
def undirected(payloads):
    """Five nodes, five edges; n5 isolated."""
    e1, e2, e3 = payloads
    g = UndirectedGraph("undirected")
    g.add_node("n5")
    g.add_edge("n1", "n2", e1)
    g.add_edges([("n1", "n3"), ("n4", "n1")])
    g.add_edges_with_attributes([("n2", "n3", e2), ("n3", "n4", e3)])
    return g


@pytest.fixture
def directed(payloads):
    """Same shape as ``undirected`` but with ordered edges."""
    e1, e2, e3 = payloads
    g = DirectedGraph("directed")
    g.add_node("n5")
    g.add_edge("n1", "n2", e1)
    g.add_edges([("n1", "n3"), ("n4", "n1")])
    g.add_edges_with_attributes([("n2", "n3", e2), ("n3", "n4", e3)])
    return g


@pytest.fixture
def single_loop():
    #  0    1
    #       ↓
    #     ┌→2
    #     | ↓
    #     6 3
    #     ↑ ↓
    #     └-4
    #       ↓
    #       5
    return make_digraph(
        [("1", "2"), ("2", "3"), ("3", "4"), ("4", "5"), ("4", "6"), ("6", "2")],
        nodes=["0"],
    )


@pytest.fixture
def self_loop():
    #  0    1
    #       ↓
    #      =2
    #       ↓
    #       3
    return make_digraph([("1", "2"), ("2", "3"), ("2", "2")], nodes=["0"])


@pytest.fixture
def nested_loops():
    #       1
    #       ↓
    #   ┌--→2
    #   |   ↓
    #   | ┌→3
    #   | ↑ ↓
    #   | 8 4=
    #   | ↑ ↓
    #   | └-5
    #   |   ↓
    #   └---6
    #       ↓
    #       7
    return make_digraph([
        ("1", "2"), ("2", "3"), ("3", "4"), ("4", "5"), ("5", "6"),
        ("6", "7"), ("5", "8"), ("8", "3"), ("6", "2"), ("4", "4"),
    ])


@pytest.fixture
def tight_nested_loops():
    #   0
    #   ↓
    # ┌→1=-┐
    # | ↓  |
    # └-2= |
    # ┌→|  |
    # | ↓  |
    # └-3= |
    #      |
    #   4←-┘
    return make_digraph([
        ("0", "1"), ("1", "1"), ("1", "2"), ("1", "4"), ("2", "1"),
        ("2", "2"), ("2", "3"), ("3", "2"), ("3", "3"),
    ])


@pytest.fixture
def eclipsed_distinct():
    #       1
    #       ↓
    #   ┌--→2
    #   | | ↓
    #   | | 3
    #   | | ↓
    #   | | 4=
    #   | | ↓
    #   | └-5
    #   |   ↓
    #   |   6
    #   |   ↓
    #   └---7
    #       ↓
    #       8
    return make_digraph([
        ("1", "2"), ("2", "3"), ("3", "4"), ("4", "5"), ("5", "6"),
        ("6", "7"), ("7", "8"), ("5", "2"), ("7", "2"), ("4", "4"),
    ])


@pytest.fixture
def eclipsed_similar():
    #       1
    #       ↓
    #   ┌--→2
    #   | | ↓
    #   | | 3
    #   | | ↓
    #   | | 4=
    #   | | ↓
    #   | └-5
    #   |   ↓
    #   └---6
    #       ↓
    #       7
    return make_digraph([
        ("1", "2"), ("2", "3"), ("3", "4"), ("4", "5"), ("5", "6"),
        ("6", "7"), ("5", "2"), ("6", "2"), ("4", "4"),
    ])


@pytest.fixture
def cross_edges():
    return make_digraph([
        ("0", "1"), ("0", "15"), ("1", "2"), ("1", "7"), ("2", "3"),
        ("2", "6"), ("3", "4"), ("4", "3"), ("4", "5"), ("5", "6"),
        ("6", "2"), ("6", "7"), ("7", "8"), ("7", "16"), ("8", "9"),
        ("8", "17"), ("9", "10"), ("10", "9"), ("10", "11"), ("11", "12"),
        ("12", "8"), ("12", "13"), ("13", "14"), ("14", "1"), ("14", "15"),
        ("16", "14"), ("17", "12"),
    ])


@pytest.fixture
def long_cycle():
    """Chain 0 -> 1 -> ... -> 20000 closed by 20000 -> 0."""
    n = 20000
    edges = [(str(i), str(i + 1)) for i in range(n)]
    edges.append((str(n), "0"))
    return make_digraph(edges)


@pytest.fixture
def build_digraph():
    """Factory fixture: ``build_digraph(edges, nodes=())``."""
    return make_digraph
