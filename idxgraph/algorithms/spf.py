"""Shortest-path-first (SPF) computation over an `IndexedDiGraph`.

Implements Dijkstra's algorithm with a binary min-heap keyed by tentative
distance. One call computes distances and predecessors from a single start node
to every node of the graph.

Notes:
    Edge weights must be non-negative. The graph enforces this on insertion;
    results are undefined if a negative weight is introduced by other means.

    Relaxation uses a strict ``<`` comparison. When two paths to a node have the
    same total weight, the predecessor discovered first in heap-pop order is
    kept.
"""

from __future__ import annotations

import logging
import math
from heapq import heappop, heappush
from time import perf_counter
from typing import List, Optional, Tuple

from idxgraph.algorithms.paths import ShortestPaths
from idxgraph.config import SOLVER_CONFIG, SolverConfig
from idxgraph.graph.indexed_graph import IndexedDiGraph
from idxgraph.graph.validation import NodeIndexChecker
from idxgraph.logging import get_logger
from idxgraph.types import NO_PREDECESSOR, NodeID, Weight

logger = get_logger(__name__)

_START_NODE = NodeIndexChecker("start_node")


def calculate_for(
    graph: IndexedDiGraph,
    start_node: NodeID,
    config: Optional[SolverConfig] = None,
) -> ShortestPaths:
    """Compute shortest paths from ``start_node`` to every node of ``graph``.

    The graph is only read. The returned result captures the node count at call
    time and holds no reference to ``graph``.

    Args:
        graph: Graph to solve over.
        start_node: Node id the paths start from.
        config: Solver settings. Defaults to the global ``SOLVER_CONFIG``.

    Returns:
        ShortestPaths: Distances and predecessors for every node. Unreached
        nodes have distance ``math.inf`` and no predecessor.

    Raises:
        InvalidArgument: If ``start_node`` is not in ``[0, graph.node_count)``.
    """
    cfg = config or SOLVER_CONFIG
    start = _START_NODE.check(start_node, graph.node_count)

    started_at = perf_counter()
    adjacency = graph.adjacency()
    node_count = len(adjacency)

    distances: List[Weight] = [math.inf] * node_count
    predecessors: List[NodeID] = [NO_PREDECESSOR] * node_count
    distances[start] = 0

    min_pq: List[Tuple[Weight, NodeID]] = [(0, start)]
    skip_stale = cfg.skip_stale_entries
    pops = 0

    while min_pq:
        current_cost, node_id = heappop(min_pq)
        pops += 1
        best_cost = distances[node_id]
        if skip_stale and current_cost > best_cost:
            continue

        for neighbor_id, edge_weight in adjacency[node_id]:
            new_cost = best_cost + edge_weight
            if new_cost < distances[neighbor_id]:
                distances[neighbor_id] = new_cost
                predecessors[neighbor_id] = node_id
                heappush(min_pq, (new_cost, neighbor_id))

    elapsed = perf_counter() - started_at
    if cfg.is_slow(elapsed):
        logger.info(
            f"SPF from node {start} over {node_count} nodes and "
            f"{graph.edge_count} edges took {elapsed:.3f}s"
        )
    elif logger.isEnabledFor(logging.DEBUG):
        settled = sum(1 for d in distances if d != math.inf)
        logger.debug(
            f"SPF from node {start}: {settled}/{node_count} nodes reached, "
            f"{pops} heap pops, {elapsed * 1000.0:.2f} ms"
        )

    return ShortestPaths(node_count, start, predecessors, distances)
