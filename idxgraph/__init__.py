"""idxgraph: single-source shortest paths over indexed graphs.

Nodes are dense integers ``0..N-1``. A graph is built once, can be cloned
cheaply and extended with a few extra nodes and edges, then solved with
Dijkstra's algorithm. The result answers path and weight queries for every
destination.

Primary API:
    IndexedDiGraph - Append-only weighted directed graph
    calculate_for() - Solve shortest paths from one start node
    ShortestPaths - Result with shortest_path_to() and total_weight()
    from_networkx() / to_networkx() - NetworkX interop

Example:
    from idxgraph import IndexedDiGraph

    template = IndexedDiGraph(3)
    template.add_edge(0, 2, 42)

    graph = template.clone()
    extra = graph.add_node()
    graph.add_bidir_edge(2, extra, 1)

    paths = graph.calculate_for(0)
    paths.shortest_path_to(extra)  # [0, 2, 3]
    paths.total_weight(extra)  # 43
    paths.total_weight(1)  # inf (unreachable)
"""

from __future__ import annotations

from idxgraph import cli, logging
from idxgraph._version import __version__
from idxgraph.algorithms.paths import ShortestPaths
from idxgraph.algorithms.spf import calculate_for
from idxgraph.config import SOLVER_CONFIG, SolverConfig
from idxgraph.errors import IdxGraphError, InvalidArgument, NoPathFound
from idxgraph.graph.convert import NodeMap, from_networkx, to_networkx
from idxgraph.graph.indexed_graph import IndexedDiGraph
from idxgraph.types import NO_PREDECESSOR, UNREACHED, Edge, NodeID, Weight

__all__ = [
    # Version
    "__version__",
    # Graph
    "IndexedDiGraph",
    "Edge",
    "NodeID",
    "Weight",
    # Solver
    "calculate_for",
    "ShortestPaths",
    "SolverConfig",
    "SOLVER_CONFIG",
    "UNREACHED",
    "NO_PREDECESSOR",
    # Errors
    "IdxGraphError",
    "InvalidArgument",
    "NoPathFound",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
