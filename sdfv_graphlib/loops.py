"""
sdfv_graphlib.loops
===================

Back-edge classification and natural-loop nesting for directed graphs.

A *back edge* is an edge ``u -> v`` met during a depth-first traversal
where ``v`` is still on the current DFS path, i.e. an ancestor of ``u`` (a
self-loop ``u -> u`` always qualifies).  ``v`` is the loop *header* and the
*natural loop* of the back edge is the header plus every traversed node that
reaches ``u`` without passing through the header.

With nesting deduplication enabled, back edges sharing a header are ranked
outermost-first and a back edge whose loop body is contained in the body of
an already retained loop is *eclipsed*.  For a ``while`` loop with a
``continue`` inside, the loop edge is the back edge and the ``continue`` edge
is eclipsed.

Public API
----------
    all_backedges      - ``(backedges, eclipsed_backedges)`` as sets
    LoopAnalyzer       - configurable analysis returning BackedgeAnalysis
    BackedgeAnalysis   - result record (root, ordered edges, loop bodies)

Usage example::

    from sdfv_graphlib import DirectedGraph, all_backedges

    g = DirectedGraph()
    g.add_edges([("1", "2"), ("2", "3"), ("3", "2"), ("3", "4")])
    backedges, eclipsed = all_backedges(g)
    # backedges == {("3", "2")}, eclipsed == set()

References
----------
[1] Aho, Lam, Sethi, Ullman - "Compilers: Principles, Techniques, &
    Tools", 2e, §9.6 (natural loops).
[2] Tarjan - "Depth-First Search and Linear Graph Algorithms", 1972.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Set, Tuple

from .config import AnalysisConfig
from .di_graph import DirectedGraph
from .errors import AmbiguousRootError, NodeNotFoundError
from .graph import EdgeKey

logger = logging.getLogger(__name__)


@dataclass
class BackedgeAnalysis:
    """
    Result of a back-edge analysis.

    Attributes:
    root               : the node the DFS started from
    backedges          : retained back edges, in discovery order
    eclipsed_backedges : back edges suppressed by an enclosing loop on the
                         same header, in discovery order
    loop_bodies        : natural-loop node set of every back edge found
    """
    root: str
    backedges: List[EdgeKey] = field(default_factory=list)
    eclipsed_backedges: List[EdgeKey] = field(default_factory=list)
    loop_bodies: Dict[EdgeKey, FrozenSet[str]] = field(default_factory=dict)

    def as_sets(self) -> Tuple[Set[EdgeKey], Set[EdgeKey]]:
        return set(self.backedges), set(self.eclipsed_backedges)

    @property
    def headers(self) -> Set[str]:
        """Loop headers of the retained back edges."""
        return {v for _, v in self.backedges}

    def loop_for_header(self, header: str) -> FrozenSet[str]:
        """Union of the retained loop bodies closed at *header*."""
        body: Set[str] = set()
        for e in self.backedges:
            if e[1] == header:
                body |= self.loop_bodies[e]
        return frozenset(body)


class LoopAnalyzer:
    """
    Detect back edges and their natural loops.

    Algorithm:
    1. Pick the root: the explicit start, or the unique source node.
    2. Iterative DFS from the root; an edge to a node on the DFS path is a
       back edge.
    3. Compute each back edge's natural loop by walking predecessors from
       the tail, stopping at the header.
    4. Optionally eclipse nested back edges per header.
    """

    def __init__(self, graph: DirectedGraph,
                 config: Optional[AnalysisConfig] = None) -> None:
        self.graph = graph
        self.config = config or AnalysisConfig()
        self.config.log_warnings("LoopAnalyzer")

    # ----- root selection ---------------------------------------------------

    def find_root(self) -> str:
        """Return the unique source node, or raise AmbiguousRootError."""
        sources = self.graph.sources()
        if len(sources) != 1:
            raise AmbiguousRootError(sources)
        return sources[0]

    # ----- main entry -------------------------------------------------------

    def analyze(self, start: Optional[str] = None,
                coalesce_nested: Optional[bool] = None) -> BackedgeAnalysis:
        if start is None:
            start = self.find_root()
        elif not self.graph.has_node(start):
            raise NodeNotFoundError(start)
        if coalesce_nested is None:
            coalesce_nested = self.config.coalesce_nested

        backedges, visited = self._classify(start)
        bodies = {e: self._loop_body(e, visited) for e in backedges}
        result = BackedgeAnalysis(root=start, loop_bodies=bodies)

        if coalesce_nested:
            result.backedges, result.eclipsed_backedges = self._coalesce(
                backedges, bodies)
        else:
            result.backedges = list(backedges)

        logger.debug(
            "root %r: %d back edges, %d eclipsed",
            start, len(result.backedges), len(result.eclipsed_backedges),
        )
        return result

    # ----- internals --------------------------------------------------------

    def _classify(self, root: str) -> Tuple[List[EdgeKey], Set[str]]:
        """DFS from *root*; return back edges in discovery order and the
        set of visited nodes."""
        backedges: List[EdgeKey] = []
        visited: Set[str] = {root}
        on_path: Set[str] = {root}
        stack = [(root, iter(self.graph.successors(root)))]

        while stack:
            node, succs = stack[-1]
            for v in succs:
                if v in on_path:
                    backedges.append((node, v))
                elif v not in visited:
                    visited.add(v)
                    on_path.add(v)
                    stack.append((v, iter(self.graph.successors(v))))
                    break
            else:
                stack.pop()
                on_path.discard(node)

        return backedges, visited

    def _loop_body(self, backedge: EdgeKey, visited: Set[str]) -> FrozenSet[str]:
        tail, header = backedge
        body: Set[str] = {header}
        worklist = [tail]
        while worklist:
            m = worklist.pop()
            if m in body or m not in visited:
                continue
            body.add(m)
            worklist.extend(self.graph.predecessors(m))
        return frozenset(body)

    @staticmethod
    def _coalesce(
        backedges: List[EdgeKey],
        bodies: Dict[EdgeKey, FrozenSet[str]],
    ) -> Tuple[List[EdgeKey], List[EdgeKey]]:
        by_header: Dict[str, List[int]] = {}
        for idx, (_, header) in enumerate(backedges):
            by_header.setdefault(header, []).append(idx)

        eclipsed_idx: Set[int] = set()
        for idxs in by_header.values():
            # outermost first; equal extent keeps discovery order
            ranked = sorted(idxs, key=lambda i: (-len(bodies[backedges[i]]), i))
            retained: List[FrozenSet[str]] = []
            for i in ranked:
                body = bodies[backedges[i]]
                if any(body <= outer for outer in retained):
                    eclipsed_idx.add(i)
                else:
                    retained.append(body)

        kept = [e for i, e in enumerate(backedges) if i not in eclipsed_idx]
        eclipsed = [e for i, e in enumerate(backedges) if i in eclipsed_idx]
        return kept, eclipsed


def all_backedges(
    graph: DirectedGraph,
    start: Optional[str] = None,
    coalesce_nested: bool = False,
) -> Tuple[Set[EdgeKey], Set[EdgeKey]]:
    """Return ``(backedges, eclipsed_backedges)`` for *graph*.

    Parameters
    ----------
    start:
        DFS root.  When omitted the unique source node is used; if there are
        zero or several sources :class:`AmbiguousRootError` is raised.
    coalesce_nested:
        Keep only the outermost loop's back edge per header and move nested
        ones to the eclipsed set.  When false the eclipsed set is empty.
    """
    analysis = LoopAnalyzer(graph).analyze(start, coalesce_nested)
    return analysis.as_sets()
