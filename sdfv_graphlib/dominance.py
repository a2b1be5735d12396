"""
sdfv_graphlib.dominance
=======================

Dominator computation on a :class:`~sdfv_graphlib.di_graph.DirectedGraph`.

Node *d* dominates node *n* if every path from the start to *n* passes
through *d*.  Immediate dominators are computed with the iterative
algorithm of Cooper, Harvey and Kennedy over reverse postorder.

Reference: Cooper, Harvey, Kennedy - "A Simple, Fast Dominance
Algorithm", 2001.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Dict, List, Optional, Set, Tuple

from .di_graph import DirectedGraph
from .errors import NodeNotFoundError
from .traversal import dfs_postorder_nodes

logger = logging.getLogger(__name__)


def immediate_dominators(graph: DirectedGraph, start: str) -> Dict[str, str]:
    """Return ``{node: idom}`` for every node reachable from *start*.

    The start node is its own immediate dominator; unreachable nodes are
    absent from the mapping.
    """
    if not graph.has_node(start):
        raise NodeNotFoundError(start)

    idom: Dict[str, str] = {start: start}
    order = list(dfs_postorder_nodes(graph, start))
    dfn = {u: i for i, u in enumerate(order)}
    order.pop()
    order.reverse()

    def intersect(u: str, v: str) -> str:
        while u != v:
            while dfn[u] < dfn[v]:
                u = idom[u]
            while dfn[u] > dfn[v]:
                v = idom[v]
        return u

    changed = True
    rounds = 0
    while changed:
        changed = False
        rounds += 1
        for u in order:
            preds = [v for v in graph.predecessors(u) if v in idom]
            new_idom = preds[0]
            for p in preds[1:]:
                new_idom = intersect(new_idom, p)
            if idom.get(u) != new_idom:
                idom[u] = new_idom
                changed = True

    logger.debug("immediate dominators converged after %d rounds", rounds)
    return idom


def dominator_tree(
    graph: DirectedGraph,
    start: str,
    idoms: Optional[Dict[str, str]] = None,
) -> Tuple[Dict[str, Set[str]], DirectedGraph]:
    """Return ``(all_dominated, tree)``.

    ``all_dominated[d]`` is the set of nodes strictly dominated by *d*
    (empty for every node that dominates nothing, including unreachable
    ones).  ``tree`` has an edge ``idom(n) -> n`` per reachable node and
    the payload ``{"level": depth}`` on every node, the start being level 0.
    """
    if idoms is None:
        idoms = immediate_dominators(graph, start)

    all_dominated: Dict[str, Set[str]] = {n: set() for n in graph.nodes()}
    tree: DirectedGraph = DirectedGraph()

    for node, dom in idoms.items():
        if node == dom:
            continue
        tree.add_edge(dom, node)
        ancestor = dom
        while True:
            all_dominated[ancestor].add(node)
            nxt = idoms[ancestor]
            if nxt == ancestor:
                break
            ancestor = nxt

    queue = deque([(start, 0)])
    while queue:
        node, level = queue.popleft()
        tree.add_node(node, {"level": level})
        for succ in tree.successors(node):
            queue.append((succ, level + 1))

    return all_dominated, tree


def dominators_of(idoms: Dict[str, str], node: str) -> List[str]:
    """Return the dominator chain of *node*, from *node* up to the start."""
    if node not in idoms:
        raise NodeNotFoundError(node)
    chain = [node]
    while idoms[chain[-1]] != chain[-1]:
        chain.append(idoms[chain[-1]])
    return chain
