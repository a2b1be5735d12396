"""
sdfv_graphlib.graph
===================

In-memory graph containers keyed by string node ids.

Every node id maps to an optional payload of type ``N`` and every edge
carries an optional payload of type ``E``.  A node that exists without a
payload stores ``None``; looking up a node that does not exist raises
:class:`~sdfv_graphlib.errors.NodeNotFoundError`.  The two cases are never
conflated.

Public API
----------
    BaseGraph        - node table and the CRUD surface shared by all graphs
    UndirectedGraph  - symmetric adjacency container

Ownership
---------
``copy()`` and ``subgraph()`` are *shallow*: the new container owns fresh
adjacency maps but shares the payload objects of the source by reference.
Payloads are expected to be treated as immutable; mutating one in place is
visible through every container that shares it.

Iteration
---------
Every ``*_iter`` method and every list-returning query snapshots the keys it
walks when it is called.  Mutating a container while iterating over one of
its snapshots is not supported: it never raises, but the mutation is not
reflected in the running iteration.

Typical usage::

    from sdfv_graphlib import UndirectedGraph

    g = UndirectedGraph("layout")
    g.add_edge("a", "b", {"weight": 2})
    g.add_node("c")
    assert g.edge("b", "a") == {"weight": 2}
    assert g.get("c") is None
    print(g.number_of_edges())   # 1
"""

from __future__ import annotations

import abc
from typing import (
    Dict,
    FrozenSet,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Set,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from .errors import EdgeNotFoundError, NodeNotFoundError

N = TypeVar("N")
E = TypeVar("E")
G = TypeVar("G", bound="BaseGraph")

EdgeKey = Tuple[str, str]


# ---------------------------------------------------------------------------
# BaseGraph
# ---------------------------------------------------------------------------

class BaseGraph(abc.ABC, Generic[N, E]):
    """Node table plus the CRUD surface shared by both containers.

    Subclasses own the adjacency representation and implement the
    edge-level operations.
    """

    #: keyword used by :meth:`to_dot`
    _dot_kind: str = "graph"
    #: edge operator used by :meth:`to_dot`
    _dot_edge_op: str = "--"

    def __init__(self, name: str = "") -> None:
        self.name: str = name
        self._nodes: Dict[str, Optional[N]] = {}

    # ----- construction -----------------------------------------------------

    @classmethod
    def from_edges(
        cls: Type[G],
        nodes: Iterable[Tuple[str, Optional[N]]] = (),
        edges: Iterable[Tuple[str, str, Optional[E]]] = (),
        name: str = "",
    ) -> G:
        """Build a container from ``(id, payload)`` and
        ``(src, dst, payload)`` tuples, in order."""
        g = cls(name)
        g.add_nodes_with_attributes(nodes)
        g.add_edges_with_attributes(edges)
        return g

    # ----- adjacency hooks --------------------------------------------------

    @abc.abstractmethod
    def _ensure_adjacency(self, node_id: str) -> None:
        """Create empty adjacency maps for *node_id* if missing."""

    @abc.abstractmethod
    def _unlink(self, node_id: str) -> None:
        """Drop every edge incident to *node_id* and its adjacency maps."""

    @abc.abstractmethod
    def _clear_adjacency(self) -> None:
        ...

    # ----- node management --------------------------------------------------

    def _require(self, node_id: str) -> None:
        if node_id not in self._nodes:
            raise NodeNotFoundError(node_id)

    def add_node(self, node_id: str, payload: Optional[N] = None) -> None:
        """Insert *node_id*, or overwrite its payload if it already exists.

        Incident edges of an existing node are preserved.
        """
        self._nodes[node_id] = payload
        self._ensure_adjacency(node_id)

    def add_nodes(self, node_ids: Iterable[str]) -> None:
        for node_id in node_ids:
            self.add_node(node_id)

    def add_nodes_with_attributes(
        self, nodes: Iterable[Tuple[str, Optional[N]]]
    ) -> None:
        for node_id, payload in nodes:
            self.add_node(node_id, payload)

    def remove_node(self, node_id: str) -> None:
        """Remove *node_id* together with every incident edge."""
        self._require(node_id)
        self._unlink(node_id)
        del self._nodes[node_id]

    def remove_nodes(self, node_ids: Iterable[str]) -> None:
        """Remove several nodes.  Nothing is removed if any id is unknown."""
        ids = list(dict.fromkeys(node_ids))
        for node_id in ids:
            self._require(node_id)
        for node_id in ids:
            self.remove_node(node_id)

    def get(self, node_id: str) -> Optional[N]:
        """Return the payload of *node_id* (``None`` if it has none)."""
        try:
            return self._nodes[node_id]
        except KeyError:
            raise NodeNotFoundError(node_id) from None

    def has_node(self, node_id: str) -> bool:
        return node_id in self._nodes

    def nodes(self) -> List[str]:
        return list(self._nodes)

    def nodes_iter(self) -> Iterator[str]:
        return iter(list(self._nodes))

    def number_of_nodes(self) -> int:
        return len(self._nodes)

    # ----- edge management --------------------------------------------------

    @abc.abstractmethod
    def add_edge(self, u: str, v: str, payload: Optional[E] = None) -> None:
        ...

    def add_edges(self, edges: Iterable[EdgeKey]) -> None:
        for u, v in edges:
            self.add_edge(u, v)

    def add_edges_with_attributes(
        self, edges: Iterable[Tuple[str, str, Optional[E]]]
    ) -> None:
        for u, v, payload in edges:
            self.add_edge(u, v, payload)

    @abc.abstractmethod
    def remove_edge(self, u: str, v: str) -> None:
        ...

    @abc.abstractmethod
    def has_edge(self, u: str, v: str) -> bool:
        ...

    @abc.abstractmethod
    def edge(self, u: str, v: str) -> Optional[E]:
        ...

    @abc.abstractmethod
    def neighbors_iter(self, node_id: str) -> Iterator[str]:
        ...

    def neighbors(self, node_id: str) -> List[str]:
        return list(self.neighbors_iter(node_id))

    @abc.abstractmethod
    def edges_iter(self) -> Iterator[EdgeKey]:
        ...

    def edges(self) -> List[EdgeKey]:
        return list(self.edges_iter())

    @abc.abstractmethod
    def number_of_edges(self) -> int:
        ...

    # ----- whole-graph operations -------------------------------------------

    def adj_list(self) -> List[Union[str, EdgeKey]]:
        """Return one ``(src, dst)`` pair per adjacency entry, and the bare
        id of every node without any outgoing adjacency."""
        result: List[Union[str, EdgeKey]] = []
        for node_id in self._nodes:
            nbrs = self.neighbors(node_id)
            if nbrs:
                result.extend((node_id, dst) for dst in nbrs)
            else:
                result.append(node_id)
        return result

    def clear(self) -> None:
        """Reset to the empty state, including the name."""
        self.name = ""
        self._nodes.clear()
        self._clear_adjacency()

    @abc.abstractmethod
    def copy(self) -> "BaseGraph[N, E]":
        ...

    @abc.abstractmethod
    def subgraph(self, node_ids: Iterable[str]) -> "BaseGraph[N, E]":
        ...

    def _induced_node_set(self, node_ids: Iterable[str]) -> Set[str]:
        wanted = set(node_ids)
        for node_id in wanted:
            self._require(node_id)
        return wanted

    # ----- serialisation helpers --------------------------------------------

    def to_dot(self, title: Optional[str] = None) -> str:
        """Return a Graphviz DOT representation (ids only, no payloads)."""
        lines = [f"{self._dot_kind} G {{"]
        if title:
            lines.append(f'  label="{title}";')
        for node_id in self._nodes:
            escaped = node_id.replace('"', '\\"')
            lines.append(f'  "{escaped}";')
        for u, v in self.edges_iter():
            eu = u.replace('"', '\\"')
            ev = v.replace('"', '\\"')
            lines.append(f'  "{eu}" {self._dot_edge_op} "{ev}";')
        lines.append("}")
        return "\n".join(lines)

    # ----- dunder -----------------------------------------------------------

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[str]:
        return self.nodes_iter()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"nodes={self.number_of_nodes()}, edges={self.number_of_edges()})"
        )


# ---------------------------------------------------------------------------
# UndirectedGraph
# ---------------------------------------------------------------------------

class UndirectedGraph(BaseGraph[N, E]):
    """Symmetric adjacency container.

    An edge ``{u, v}`` is stored in both ``adj[u]`` and ``adj[v]`` with the
    same payload object.  A self-loop occupies a single entry ``adj[u][u]``.

    ``edges_iter()`` deduplicates by content: each logical edge is yielded
    once, in the orientation in which it is first met.  Pass ``raw=True`` to
    walk the physical records instead, which visits every non-loop edge
    twice.  A self-loop has a single physical record and is visited once
    even then, so ``len(edges(raw=True))`` equals twice the logical count
    minus the number of self-loops.  ``number_of_edges()`` always counts
    logical edges and is kept as a running total.
    """

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self._adj: Dict[str, Dict[str, Optional[E]]] = {}
        self._edge_count = 0

    # ----- adjacency hooks --------------------------------------------------

    def _ensure_adjacency(self, node_id: str) -> None:
        if node_id not in self._adj:
            self._adj[node_id] = {}

    def _unlink(self, node_id: str) -> None:
        nbrs = self._adj.pop(node_id)
        self._edge_count -= len(nbrs)
        for v in nbrs:
            if v != node_id:
                del self._adj[v][node_id]

    def _clear_adjacency(self) -> None:
        self._adj.clear()
        self._edge_count = 0

    # ----- edge management --------------------------------------------------

    def add_edge(self, u: str, v: str, payload: Optional[E] = None) -> None:
        """Insert (or overwrite) the edge ``{u, v}``, creating missing
        endpoints with a ``None`` payload."""
        if u not in self._nodes:
            self.add_node(u)
        if v not in self._nodes:
            self.add_node(v)
        if v not in self._adj[u]:
            self._edge_count += 1
        self._adj[u][v] = payload
        self._adj[v][u] = payload

    def remove_edge(self, u: str, v: str) -> None:
        if not self.has_edge(u, v):
            raise EdgeNotFoundError(u, v)
        del self._adj[u][v]
        if u != v:
            del self._adj[v][u]
        self._edge_count -= 1

    def has_edge(self, u: str, v: str) -> bool:
        return v in self._adj.get(u, ())

    def edge(self, u: str, v: str) -> Optional[E]:
        try:
            return self._adj[u][v]
        except KeyError:
            raise EdgeNotFoundError(u, v) from None

    def neighbors_iter(self, node_id: str) -> Iterator[str]:
        try:
            return iter(list(self._adj[node_id]))
        except KeyError:
            raise NodeNotFoundError(node_id) from None

    def degree(self, node_id: str) -> int:
        self._require(node_id)
        return len(self._adj[node_id])

    def edges_iter(self, raw: bool = False) -> Iterator[EdgeKey]:
        result: List[EdgeKey] = []
        seen: Set[FrozenSet[str]] = set()
        for u, nbrs in self._adj.items():
            for v in nbrs:
                if not raw:
                    key = frozenset((u, v))
                    if key in seen:
                        continue
                    seen.add(key)
                result.append((u, v))
        return iter(result)

    def edges(self, raw: bool = False) -> List[EdgeKey]:
        return list(self.edges_iter(raw=raw))

    def number_of_edges(self) -> int:
        return self._edge_count

    # ----- whole-graph operations -------------------------------------------

    def copy(self) -> "UndirectedGraph[N, E]":
        """Shallow copy: fresh adjacency maps, shared payload objects."""
        c: UndirectedGraph[N, E] = UndirectedGraph(self.name)
        c._nodes = dict(self._nodes)
        c._adj = {nid: dict(nbrs) for nid, nbrs in self._adj.items()}
        c._edge_count = self._edge_count
        return c

    def subgraph(self, node_ids: Iterable[str]) -> "UndirectedGraph[N, E]":
        """Induced subgraph on *node_ids* (shallow, see :meth:`copy`)."""
        wanted = self._induced_node_set(node_ids)
        h: UndirectedGraph[N, E] = UndirectedGraph()
        for nid in self._nodes:
            if nid in wanted:
                h.add_node(nid, self._nodes[nid])
        for u, v in self.edges_iter():
            if u in wanted and v in wanted:
                h.add_edge(u, v, self._adj[u][v])
        return h
