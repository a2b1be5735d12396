"""
sdfv_graphlib: Graph Substrate for the Data-Centric IR Visualizer
=================================================================

In-memory graph containers plus the control-flow style analyses the
visualizer runs on them (dead-code shading, loop highlighting, layout).

Core modules
------------
graph
    ``BaseGraph`` and the symmetric ``UndirectedGraph`` container.
di_graph
    ``DirectedGraph`` with independent successor/predecessor maps.
traversal
    Forward reachability and labelled depth-first traversals.
components
    Strongly connected components (non-recursive Tarjan).
cycles
    Elementary-cycle enumeration (Johnson-style).
loops
    Back-edge classification with loop-nesting deduplication.
dominance
    Immediate dominators and dominator trees.
config
    ``AnalysisConfig`` tuning knobs.
errors
    ``GraphError`` hierarchy.

Quick start
-----------
>>> from sdfv_graphlib import DirectedGraph, all_reachable, all_backedges
>>> g = DirectedGraph()
>>> g.add_edges([("1", "2"), ("2", "3"), ("3", "2")])
>>> sorted(all_reachable(g, "1"))
['2', '3']
>>> all_backedges(g)
({('3', '2')}, set())

Package layout
--------------
::

    sdfv_graphlib/
    ├── __init__.py            ← this file
    ├── errors.py
    ├── config.py
    ├── graph.py
    ├── di_graph.py
    ├── traversal.py
    ├── components.py
    ├── cycles.py
    ├── loops.py
    └── dominance.py
"""

from __future__ import annotations

import logging
from typing import List

# ---------------------------------------------------------------------------
# Package metadata
# ---------------------------------------------------------------------------

__version__ = "0.1.0"
__author__ = "sdfv-graphlib contributors"
__license__ = "MIT"

_log = logging.getLogger(__name__)
_log.addHandler(logging.NullHandler())

from .errors import (  # noqa: E402
    AmbiguousRootError,
    EdgeNotFoundError,
    GraphError,
    NodeNotFoundError,
    NotFoundError,
)
from .config import AnalysisConfig  # noqa: E402
from .graph import BaseGraph, UndirectedGraph  # noqa: E402
from .di_graph import DirectedGraph  # noqa: E402
from .traversal import (  # noqa: E402
    all_reachable,
    dfs_labeled_edges,
    dfs_postorder_nodes,
)
from .components import strongly_connected_components  # noqa: E402
from .cycles import CycleEnumerator, NodeCycle, simple_cycles  # noqa: E402
from .loops import BackedgeAnalysis, LoopAnalyzer, all_backedges  # noqa: E402
from .dominance import dominator_tree, immediate_dominators  # noqa: E402

__all__: List[str] = [
    # errors
    "GraphError",
    "NotFoundError",
    "NodeNotFoundError",
    "EdgeNotFoundError",
    "AmbiguousRootError",
    # config
    "AnalysisConfig",
    # containers
    "BaseGraph",
    "UndirectedGraph",
    "DirectedGraph",
    # algorithms
    "all_reachable",
    "dfs_labeled_edges",
    "dfs_postorder_nodes",
    "strongly_connected_components",
    "simple_cycles",
    "CycleEnumerator",
    "NodeCycle",
    "all_backedges",
    "LoopAnalyzer",
    "BackedgeAnalysis",
    "immediate_dominators",
    "dominator_tree",
]
