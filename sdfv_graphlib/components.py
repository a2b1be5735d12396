"""
sdfv_graphlib.components
========================

Strongly connected components of a directed graph.

Non-recursive variant of Tarjan's algorithm: the DFS is driven by an
explicit queue, and the low-link of a node is settled once all of its
successors have been explored.

Reference: Tarjan, "Depth-First Search and Linear Graph Algorithms",
SIAM J. Comput. 1(2), 1972.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Set

from .di_graph import DirectedGraph


def strongly_connected_components(graph: DirectedGraph) -> Iterator[Set[str]]:
    """Yield every SCC of *graph* as a set of node ids.

    Components are produced in reverse topological order of the
    condensation (a component is yielded after every component it can
    reach).  Single nodes without a self-loop form trivial components.
    """
    preorder: Dict[str, int] = {}
    lowlink: Dict[str, int] = {}
    scc_found: Set[str] = set()
    scc_queue: List[str] = []
    i = 0

    for source in graph.nodes():
        if source in scc_found:
            continue
        queue = [source]
        while queue:
            v = queue[-1]
            if v not in preorder:
                i += 1
                preorder[v] = i

            done = True
            for w in graph.successors(v):
                if w not in preorder:
                    queue.append(w)
                    done = False
                    break
            if not done:
                continue

            lowlink[v] = preorder[v]
            for w in graph.successors(v):
                if w in scc_found:
                    continue
                if preorder[w] > preorder[v]:
                    lowlink[v] = min(lowlink[v], lowlink[w])
                else:
                    lowlink[v] = min(lowlink[v], preorder[w])
            queue.pop()

            if lowlink[v] == preorder[v]:
                scc = {v}
                while scc_queue and preorder[scc_queue[-1]] > preorder[v]:
                    scc.add(scc_queue.pop())
                scc_found.update(scc)
                yield scc
            else:
                scc_queue.append(v)


def non_trivial_components(graph: DirectedGraph) -> List[Set[str]]:
    """Return only the SCCs with more than one node."""
    return [scc for scc in strongly_connected_components(graph) if len(scc) > 1]
