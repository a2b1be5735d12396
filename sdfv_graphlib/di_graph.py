"""
sdfv_graphlib.di_graph
======================

Directed graph container with independent successor and predecessor maps.

An edge ``u -> v`` is stored once in ``succ[u]`` and once in ``pred[v]``,
both entries referencing the same payload object.  Removing a node strips
its id from the maps of every former neighbour, so no dangling edge is ever
observable through :meth:`DirectedGraph.successors` or
:meth:`DirectedGraph.predecessors`.

Public API
----------
    DirectedGraph    - the container

Typical usage::

    from sdfv_graphlib import DirectedGraph

    g = DirectedGraph("state machine")
    g.add_edges([("entry", "loop"), ("loop", "loop"), ("loop", "exit")])
    g.sources()                # ['entry']
    g.sinks()                  # ['exit']
    g.in_degree("loop")        # 2
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .errors import EdgeNotFoundError, NodeNotFoundError
from .graph import BaseGraph, E, EdgeKey, N

#: ``((u, v), payload)`` as produced by :meth:`DirectedGraph.in_edges`
PayloadEdge = Tuple[EdgeKey, Optional[E]]


class DirectedGraph(BaseGraph[N, E]):
    """Adjacency container with ordered edges.

    ``neighbors(id)`` is an alias for ``successors(id)``.  Every per-node
    query raises :class:`~sdfv_graphlib.errors.NodeNotFoundError` for an
    unknown id.
    """

    _dot_kind = "digraph"
    _dot_edge_op = "->"

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self._succ: Dict[str, Dict[str, Optional[E]]] = {}
        self._pred: Dict[str, Dict[str, Optional[E]]] = {}

    # ----- adjacency hooks --------------------------------------------------

    def _ensure_adjacency(self, node_id: str) -> None:
        if node_id not in self._succ:
            self._succ[node_id] = {}
        if node_id not in self._pred:
            self._pred[node_id] = {}

    def _unlink(self, node_id: str) -> None:
        for v in self._succ.pop(node_id):
            if v != node_id:
                del self._pred[v][node_id]
        for u in self._pred.pop(node_id):
            if u != node_id:
                del self._succ[u][node_id]

    def _clear_adjacency(self) -> None:
        self._succ.clear()
        self._pred.clear()

    def _succ_of(self, node_id: str) -> Dict[str, Optional[E]]:
        try:
            return self._succ[node_id]
        except KeyError:
            raise NodeNotFoundError(node_id) from None

    def _pred_of(self, node_id: str) -> Dict[str, Optional[E]]:
        try:
            return self._pred[node_id]
        except KeyError:
            raise NodeNotFoundError(node_id) from None

    # ----- edge management --------------------------------------------------

    def add_edge(self, u: str, v: str, payload: Optional[E] = None) -> None:
        """Insert (or overwrite) ``u -> v``, creating missing endpoints."""
        if u not in self._nodes:
            self.add_node(u)
        if v not in self._nodes:
            self.add_node(v)
        self._succ[u][v] = payload
        self._pred[v][u] = payload

    def remove_edge(self, u: str, v: str) -> None:
        if not self.has_edge(u, v):
            raise EdgeNotFoundError(u, v, directed=True)
        del self._succ[u][v]
        del self._pred[v][u]

    def has_edge(self, u: str, v: str) -> bool:
        return v in self._succ.get(u, ())

    def edge(self, u: str, v: str) -> Optional[E]:
        try:
            return self._succ[u][v]
        except KeyError:
            raise EdgeNotFoundError(u, v, directed=True) from None

    def edges_iter(self) -> Iterator[EdgeKey]:
        return iter([(u, v) for u, nbrs in self._succ.items() for v in nbrs])

    def number_of_edges(self) -> int:
        return sum(len(nbrs) for nbrs in self._succ.values())

    # ----- directed queries -------------------------------------------------

    def neighbors_iter(self, node_id: str) -> Iterator[str]:
        return self.successors_iter(node_id)

    def successors_iter(self, node_id: str) -> Iterator[str]:
        return iter(list(self._succ_of(node_id)))

    def successors(self, node_id: str) -> List[str]:
        return list(self._succ_of(node_id))

    def predecessors_iter(self, node_id: str) -> Iterator[str]:
        return iter(list(self._pred_of(node_id)))

    def predecessors(self, node_id: str) -> List[str]:
        return list(self._pred_of(node_id))

    def in_edges(self, node_id: str) -> List[PayloadEdge]:
        """Return ``((u, node_id), payload)`` for every incoming edge."""
        return [((u, node_id), p) for u, p in self._pred_of(node_id).items()]

    def out_edges(self, node_id: str) -> List[PayloadEdge]:
        """Return ``((node_id, v), payload)`` for every outgoing edge."""
        return [((node_id, v), p) for v, p in self._succ_of(node_id).items()]

    def in_degree(self, node_id: str) -> int:
        return len(self._pred_of(node_id))

    def out_degree(self, node_id: str) -> int:
        return len(self._succ_of(node_id))

    def sources(self) -> List[str]:
        """Nodes with in-degree 0 (isolated nodes included)."""
        return [nid for nid, preds in self._pred.items() if not preds]

    def sinks(self) -> List[str]:
        """Nodes with out-degree 0 (isolated nodes included)."""
        return [nid for nid, succs in self._succ.items() if not succs]

    # ----- whole-graph operations -------------------------------------------

    def copy(self) -> "DirectedGraph[N, E]":
        """Shallow copy: fresh adjacency maps, shared payload objects."""
        c: DirectedGraph[N, E] = DirectedGraph(self.name)
        c._nodes = dict(self._nodes)
        c._succ = {nid: dict(nbrs) for nid, nbrs in self._succ.items()}
        c._pred = {nid: dict(nbrs) for nid, nbrs in self._pred.items()}
        return c

    def reversed(self) -> "DirectedGraph[N, E]":
        """Return a shallow copy with every edge direction flipped."""
        r: DirectedGraph[N, E] = DirectedGraph(self.name)
        r._nodes = dict(self._nodes)
        r._succ = {nid: dict(nbrs) for nid, nbrs in self._pred.items()}
        r._pred = {nid: dict(nbrs) for nid, nbrs in self._succ.items()}
        return r

    def subgraph(self, node_ids: Iterable[str]) -> "DirectedGraph[N, E]":
        """Induced subgraph on *node_ids* (shallow, see :meth:`copy`)."""
        wanted = self._induced_node_set(node_ids)
        h: DirectedGraph[N, E] = DirectedGraph()
        for nid in self._nodes:
            if nid in wanted:
                h.add_node(nid, self._nodes[nid])
        for u in h._nodes:
            for v, payload in self._succ[u].items():
                if v in wanted:
                    h.add_edge(u, v, payload)
        return h
