"""
sdfv_graphlib.traversal
=======================

Depth-first traversals and forward reachability over a
:class:`~sdfv_graphlib.di_graph.DirectedGraph`.

All traversals use explicit stacks, so long chains never hit the
interpreter's recursion limit.  Each call starts from fresh state; the
returned iterators are one-shot.

Public API
----------
    all_reachable        - nodes reachable from a start node
    dfs_labeled_edges    - DFS edge stream labelled forward/nontree/reverse
    dfs_postorder_nodes  - DFS postorder derived from the labelled stream
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Set, Tuple

from .di_graph import DirectedGraph
from .errors import NodeNotFoundError
from .graph import BaseGraph

#: ``(parent, child, label)`` with label ``forward`` / ``nontree`` / ``reverse``
LabeledEdge = Tuple[str, str, str]


def all_reachable(graph: BaseGraph, start: str) -> Iterator[str]:
    """Lazily yield every node reachable from *start* along graph edges.

    The visited set starts empty, so *start* itself is yielded only when a
    cycle leads back to it.  A sink or isolated *start* yields nothing.

    Raises :class:`NodeNotFoundError` immediately if *start* is unknown.
    """
    if not graph.has_node(start):
        raise NodeNotFoundError(start)
    return _reachable(graph, start)


def _reachable(graph: BaseGraph, start: str) -> Iterator[str]:
    visited: Set[str] = set()
    stack = graph.neighbors(start)
    while stack:
        n = stack.pop()
        if n in visited:
            continue
        visited.add(n)
        yield n
        stack.extend(graph.neighbors(n))


def dfs_labeled_edges(
    graph: DirectedGraph,
    source: Optional[str] = None,
    depth_limit: Optional[int] = None,
) -> Iterator[LabeledEdge]:
    """Yield the edges of a depth-first search, labelled by kind.

    * ``forward``  - a tree edge discovering a new node; every DFS root is
      announced as ``(root, root, "forward")``
    * ``nontree``  - an edge to an already discovered node
    * ``reverse``  - the search retreats along a tree edge; every DFS root
      is closed with ``(root, root, "reverse")``

    When *source* is ``None`` every node is used as a potential root, in
    node order.  *depth_limit* defaults to the number of nodes.
    """
    if source is not None and not graph.has_node(source):
        raise NodeNotFoundError(source)
    return _labeled_edges(graph, source, depth_limit)


def _labeled_edges(
    graph: DirectedGraph,
    source: Optional[str],
    depth_limit: Optional[int],
) -> Iterator[LabeledEdge]:
    if depth_limit is None:
        depth_limit = graph.number_of_nodes()
    sources = graph.nodes() if source is None else [source]

    visited: Set[str] = set()
    for start in sources:
        if start in visited:
            continue
        yield start, start, "forward"
        visited.add(start)
        stack: List[Tuple[str, int, List[str]]] = [
            (start, depth_limit, graph.successors(start))
        ]
        while stack:
            parent, depth, succs = stack[-1]
            if succs:
                child = succs.pop()
                if child in visited:
                    yield parent, child, "nontree"
                else:
                    yield parent, child, "forward"
                    visited.add(child)
                    if depth > 1:
                        stack.append(
                            (child, depth - 1, graph.successors(child))
                        )
            else:
                stack.pop()
                if stack:
                    yield stack[-1][0], parent, "reverse"
        yield start, start, "reverse"


def dfs_postorder_nodes(
    graph: DirectedGraph,
    start: str,
    depth_limit: Optional[int] = None,
) -> Iterator[str]:
    """Return the nodes reachable from *start* in DFS postorder."""
    edges = dfs_labeled_edges(graph, start, depth_limit)
    return (v for _, v, label in edges if label == "reverse")
