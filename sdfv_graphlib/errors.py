# sdfv_graphlib/errors.py
"""
Error types raised by the graph containers and analyses.

Error Hierarchy:
────────────────
    GraphError (base)
    ├── NotFoundError        - a referenced node or edge does not exist
    │   ├── NodeNotFoundError
    │   └── EdgeNotFoundError
    └── AmbiguousRootError   - root inference found zero or several sources

Error Codes:
────────────
Each error carries a code of the form GRAPH-NNNN:
  - 1000-1999: lookup errors
  - 2000-2999: analysis setup errors

All errors are usage errors.  Nothing is retried internally; the caller
decides whether to recover (e.g. re-run with an explicit root) or propagate.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple


class GraphError(Exception):
    """Base exception for all sdfv_graphlib errors."""

    code: str = "GRAPH-0000"

    def __init__(self, message: str, hint: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint

    def __str__(self) -> str:
        if self.hint:
            return f"[{self.code}] {self.message} (hint: {self.hint})"
        return f"[{self.code}] {self.message}"


# ───────────────────────────────────────────────────────────────────────────
# LOOKUP ERRORS
# ───────────────────────────────────────────────────────────────────────────

class NotFoundError(GraphError, LookupError):
    """A node or edge reference that does not exist.

    Distinct from a node or edge that exists with a ``None`` payload.
    """

    code = "GRAPH-1000"

    def __init__(self, message: str, ids: Tuple[str, ...], hint: str = "") -> None:
        super().__init__(message, hint=hint)
        self.ids = ids


class NodeNotFoundError(NotFoundError):
    code = "GRAPH-1001"

    def __init__(self, node_id: str) -> None:
        super().__init__(f"Node {node_id!r} does not exist", (node_id,))
        self.node_id = node_id


class EdgeNotFoundError(NotFoundError):
    code = "GRAPH-1002"

    def __init__(self, u: str, v: str, directed: bool = False) -> None:
        arrow = "->" if directed else "<->"
        super().__init__(f"Edge {u!r} {arrow} {v!r} does not exist", (u, v))
        self.u = u
        self.v = v


# ───────────────────────────────────────────────────────────────────────────
# ANALYSIS SETUP ERRORS
# ───────────────────────────────────────────────────────────────────────────

class AmbiguousRootError(GraphError, ValueError):
    """Root inference found no source node, or more than one."""

    code = "GRAPH-2001"

    def __init__(self, candidates: Iterable[str], message: Optional[str] = None) -> None:
        self.candidates: List[str] = list(candidates)
        if message is None:
            if self.candidates:
                shown = ", ".join(repr(c) for c in self.candidates)
                message = (
                    f"Cannot infer a unique root: {len(self.candidates)} "
                    f"source nodes ({shown})"
                )
            else:
                message = "Cannot infer a root: the graph has no source node"
        super().__init__(message, hint="pass an explicit start node")
