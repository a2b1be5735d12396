"""
sdfv_graphlib.cycles
====================

Enumeration of the elementary cycles of a directed graph.

An elementary (simple) cycle is a closed walk that visits no node twice,
self-loops included.  Cycles are reported as ``(nodes, edges)`` where
``nodes`` is the closed walk in order and ``edges`` the ordered list of
edges that close it, e.g. ``(["2", "3"], [("2", "3"), ("3", "2")])``.

Algorithm
---------
Johnson-style circuit enumeration [1]:

1. Self-loops are reported first and removed from a working copy.
2. Non-trivial SCCs of the working copy are placed on a worklist.
3. For each SCC a start node is picked and every cycle through it is found
   by an explicit-stack DFS restricted to the SCC.  Nodes are *blocked* while
   on the current path and only *unblocked* once a cycle has been closed
   through them, which keeps the search output-sensitive.
4. The start node is dropped and the SCCs of the remainder are pushed back
   onto the worklist.

The input graph is never mutated.

[1] Johnson, "Finding All the Elementary Circuits of a Directed Graph",
    SIAM J. Comput. 4(1), 1975.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import DefaultDict, Dict, FrozenSet, Iterator, List, Optional, Set, Tuple

from .components import non_trivial_components
from .config import AnalysisConfig
from .di_graph import DirectedGraph
from .graph import EdgeKey

logger = logging.getLogger(__name__)

#: ``(ordered nodes, ordered closing edges)``
Cycle = Tuple[List[str], List[EdgeKey]]


@dataclass(frozen=True)
class NodeCycle:
    """Order-insensitive view of one elementary cycle.

    ``length`` is the number of edges on the cycle.
    """
    nodes: FrozenSet[str]
    edges: FrozenSet[EdgeKey] = field(default_factory=frozenset)

    @classmethod
    def from_cycle(cls, cycle: Cycle) -> "NodeCycle":
        nodes, edges = cycle
        return cls(nodes=frozenset(nodes), edges=frozenset(edges))

    @property
    def length(self) -> int:
        return len(self.edges)

    def __contains__(self, item: object) -> bool:
        return item in self.nodes or item in self.edges


def _closing_edges(path: List[str]) -> List[EdgeKey]:
    return list(zip(path, path[1:] + path[:1]))


def _unblock(node: str, blocked: Set[str], b_map: DefaultDict[str, Set[str]]) -> None:
    stack = [node]
    while stack:
        n = stack.pop()
        if n in blocked:
            blocked.discard(n)
            stack.extend(b_map.pop(n, ()))


def _circuits_through(scc_graph: DirectedGraph, start: str) -> Iterator[Cycle]:
    """Yield every elementary cycle of *scc_graph* that passes *start*."""
    path = [start]
    blocked: Set[str] = {start}
    closed: Set[str] = set()
    b_map: DefaultDict[str, Set[str]] = defaultdict(set)
    stack: List[Tuple[str, List[str]]] = [(start, scc_graph.successors(start))]

    while stack:
        this_node, nbrs = stack[-1]
        if nbrs:
            next_node = nbrs.pop()
            if next_node == start:
                yield list(path), _closing_edges(path)
                closed.update(path)
            elif next_node not in blocked:
                path.append(next_node)
                stack.append((next_node, scc_graph.successors(next_node)))
                closed.discard(next_node)
                blocked.add(next_node)
                continue

        if not nbrs:
            if this_node in closed:
                _unblock(this_node, blocked, b_map)
            else:
                for nbr in scc_graph.successors(this_node):
                    b_map[nbr].add(this_node)
            stack.pop()
            path.pop()


def _simple_cycles(graph: DirectedGraph) -> Iterator[Cycle]:
    work = graph.copy()

    for node in work.nodes():
        if work.has_edge(node, node):
            yield [node], [(node, node)]
            work.remove_edge(node, node)

    sccs = non_trivial_components(work)
    while sccs:
        scc = sccs.pop()
        scc_graph = work.subgraph(scc)
        start = scc_graph.nodes()[0]
        yield from _circuits_through(scc_graph, start)

        remainder = set(scc)
        remainder.discard(start)
        sccs.extend(non_trivial_components(work.subgraph(remainder)))


def simple_cycles(graph: DirectedGraph) -> Iterator[Cycle]:
    """Lazily yield every elementary cycle of *graph* exactly once.

    Each call starts a fresh enumeration; the iterator is one-shot.
    Overlapping cycles (e.g. two loops through a shared header) are reported
    separately.
    """
    return _simple_cycles(graph)


class CycleEnumerator:
    """Configurable front end to :func:`simple_cycles`.

    Usage::

        enum = CycleEnumerator(g, AnalysisConfig(max_cycles=100))
        for nodes, edges in enum.cycles():
            ...
        by_node = enum.cycles_by_node()
    """

    def __init__(self, graph: DirectedGraph, config: Optional[AnalysisConfig] = None) -> None:
        self.graph = graph
        self.config = config or AnalysisConfig()
        self.config.log_warnings("CycleEnumerator")

    def cycles(self) -> Iterator[Cycle]:
        limit = self.config.max_cycles
        count = 0
        for cycle in simple_cycles(self.graph):
            if limit is not None and limit > 0 and count >= limit:
                logger.warning(
                    "cycle enumeration truncated after %d cycles", limit
                )
                return
            count += 1
            yield cycle
        logger.debug("enumerated %d elementary cycles", count)

    def node_cycles(self) -> List[NodeCycle]:
        return [NodeCycle.from_cycle(c) for c in self.cycles()]

    def cycles_by_node(self) -> Dict[str, List[NodeCycle]]:
        """Map each node id to the list of :class:`NodeCycle` containing it."""
        result: DefaultDict[str, List[NodeCycle]] = defaultdict(list)
        for cycle in self.node_cycles():
            for node in cycle.nodes:
                result[node].append(cycle)
        return dict(result)
