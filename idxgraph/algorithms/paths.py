"""Shortest-path result returned by the solver."""

from __future__ import annotations

import math
from typing import Iterator, List

from idxgraph.errors import NoPathFound
from idxgraph.graph.validation import NodeIndexChecker
from idxgraph.types import NO_PREDECESSOR, NodeID, Weight

_END_NODE = NodeIndexChecker("end_node")


class ShortestPaths:
    """Distances and predecessors from one start node to every node.

    The result is self-contained: it keeps no reference to the graph it was
    computed from, so later mutation of that graph does not affect it. It
    exposes no mutators and is safe to share read-only.

    Paths are reconstructed on demand by walking predecessors backwards, so
    callers that only need costs can probe :meth:`total_weight` for many nodes
    cheaply.

    Args:
        node_count: Number of nodes in the graph at solve time.
        start_node: The node the paths start from.
        predecessors: Node-indexed predecessor ids, ``NO_PREDECESSOR`` when none.
        distances: Node-indexed best distances, ``math.inf`` when unreached.
    """

    __slots__ = (
        "_node_count",
        "_start_node",
        "_predecessors",
        "_distances",
    )

    def __init__(
        self,
        node_count: int,
        start_node: NodeID,
        predecessors: List[NodeID],
        distances: List[Weight],
    ) -> None:
        if len(predecessors) != node_count or len(distances) != node_count:
            raise ValueError(
                f"predecessors and distances must have {node_count} entries"
            )
        self._node_count = node_count
        self._start_node = start_node
        self._predecessors = predecessors
        self._distances = distances

    @property
    def node_count(self) -> int:
        """Number of nodes at solve time."""
        return self._node_count

    @property
    def start_node(self) -> NodeID:
        return self._start_node

    def shortest_path_to(self, end_node: NodeID) -> List[NodeID]:
        """Return the shortest path from the start node to ``end_node``.

        Args:
            end_node: Destination node id.

        Returns:
            List of node ids from the start node to ``end_node``, both
            included. ``[start_node]`` when ``end_node`` is the start node.

        Raises:
            InvalidArgument: If ``end_node`` is not in ``[0, node_count)``.
            NoPathFound: If ``end_node`` is unreachable from the start node.
        """
        end = _END_NODE.check(end_node, self._node_count)
        start = self._start_node
        predecessors = self._predecessors

        path = [end]
        step = end
        while step != start:
            step = predecessors[step]
            if step == NO_PREDECESSOR:
                raise NoPathFound(start, end)
            path.append(step)

        path.reverse()
        return path

    def total_weight(self, end_node: NodeID) -> Weight:
        """Return the total weight of the shortest path to ``end_node``.

        Unlike :meth:`shortest_path_to`, an unreachable node is not an error:
        the result is ``math.inf``.

        Raises:
            InvalidArgument: If ``end_node`` is not in ``[0, node_count)``.
        """
        return self._distances[_END_NODE.check(end_node, self._node_count)]

    weight_of_path_to = total_weight

    def is_reachable(self, end_node: NodeID) -> bool:
        """Return True if a path from the start node to ``end_node`` exists."""
        return self.total_weight(end_node) != math.inf

    def reachable_nodes(self) -> Iterator[NodeID]:
        """Yield reachable node ids in ascending order, start node included."""
        for node, distance in enumerate(self._distances):
            if distance != math.inf:
                yield node

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(start_node={self._start_node}, "
            f"node_count={self._node_count})"
        )
