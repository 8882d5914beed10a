"""Append-only directed graph over dense integer node ids.

`IndexedDiGraph` stores one adjacency list per node, indexed by node id. Nodes
and edges can only be added; existing ids are never renumbered. ``clone()``
copies the per-node edge lists so a large *template graph* can be built once,
duplicated cheaply and extended with a few extra nodes and edges before each
shortest-path computation.

Example:
    >>> g = IndexedDiGraph(3)
    >>> g.add_edge(0, 2, 42)
    >>> work = g.clone()
    >>> extra = work.add_node()
    >>> work.add_bidir_edge(2, extra, 1)
    >>> work.calculate_for(0).shortest_path_to(extra)
    [0, 2, 3]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Optional, Sequence, Tuple

from idxgraph.graph.validation import NodeIndexChecker, check_node_count, check_weight
from idxgraph.logging import get_logger
from idxgraph.types import Edge, NodeID, Weight

if TYPE_CHECKING:
    from idxgraph.algorithms.paths import ShortestPaths
    from idxgraph.config import SolverConfig

logger = get_logger(__name__)

_FROM_NODE = NodeIndexChecker("from_node")
_TO_NODE = NodeIndexChecker("to_node")
_NODE = NodeIndexChecker("node")


class IndexedDiGraph:
    """Weighted directed multigraph with nodes numbered ``0..node_count-1``.

    This class enforces:
      - At least two nodes at construction.
      - Edge endpoints within ``[0, node_count)`` at insertion time.
      - Non-negative, non-NaN edge weights.
      - Append-only mutation (no node or edge removal).

    Parallel edges and self-loops are accepted. A rejected insertion leaves the
    graph unchanged.

    Args:
        node_count: Initial number of isolated nodes.

    Raises:
        InvalidArgument: If ``node_count`` is not an integer ``>= 2``.
    """

    def __init__(self, node_count: int) -> None:
        count = check_node_count(node_count)
        self._init_state([[] for _ in range(count)], 0)

    def _init_state(self, adjacency: List[List[Edge]], edge_count: int) -> None:
        self._adj: List[List[Edge]] = adjacency
        self._edge_count: int = edge_count

    @classmethod
    def init(cls, node_count: int) -> IndexedDiGraph:
        """Create a graph with ``node_count`` isolated nodes.

        Equivalent to ``IndexedDiGraph(node_count)``.
        """
        return cls(node_count)

    def clone(self) -> IndexedDiGraph:
        """Return an independent copy of this graph.

        Per-node edge lists are copied; edges themselves are immutable tuples
        and are shared. Mutating the clone never affects this graph and vice
        versa.

        Returns:
            IndexedDiGraph: The copy.
        """
        new = self.__class__.__new__(self.__class__)
        new._init_state([edges.copy() for edges in self._adj], self._edge_count)
        logger.debug(
            f"Cloned graph with {self.node_count} nodes and {self._edge_count} edges"
        )
        return new

    def __copy__(self) -> IndexedDiGraph:
        return self.clone()

    def __deepcopy__(self, memo: dict) -> IndexedDiGraph:
        return self.clone()

    #
    # Read interface
    #
    @property
    def node_count(self) -> int:
        """Number of nodes. Nodes are numbered ``0`` to ``node_count - 1``."""
        return len(self._adj)

    @property
    def edge_count(self) -> int:
        """Number of directed edges inserted so far."""
        return self._edge_count

    def __len__(self) -> int:
        return len(self._adj)

    def out_edges(self, node: NodeID) -> Sequence[Edge]:
        """Return the edges leaving ``node`` in insertion order.

        The returned tuple is a snapshot; use the ``add_*`` methods to mutate
        the graph.

        Raises:
            InvalidArgument: If ``node`` is not a valid node id.
        """
        return tuple(self._adj[_NODE.check(node, len(self._adj))])

    def edges(self) -> Iterator[Tuple[NodeID, NodeID, Weight]]:
        """Yield every edge as ``(from_node, to_node, weight)``."""
        for from_node, edges in enumerate(self._adj):
            for to_node, weight in edges:
                yield from_node, to_node, weight

    def adjacency(self) -> Sequence[Sequence[Edge]]:
        """Return the adjacency lists for read-only use by algorithms.

        No copy is made. Callers must not mutate the returned lists.
        """
        return self._adj

    #
    # Mutation
    #
    def add_node(self) -> NodeID:
        """Append a new isolated node.

        The typical use is a static template graph that is cloned and given a
        few extra nodes and edges before each solve, instead of rebuilding the
        whole graph from scratch.

        Returns:
            NodeID: The id of the new node (``node_count - 1``).
        """
        self._adj.append([])
        return len(self._adj) - 1

    def add_edge(self, from_node: NodeID, to_node: NodeID, weight: Weight) -> None:
        """Add a directed edge ``from_node -> to_node``.

        Args:
            from_node: Source node id.
            to_node: Destination node id.
            weight: Edge weight, ``>= 0``.

        Raises:
            InvalidArgument: If the weight is negative or not a number, or if
                either endpoint is out of range.
        """
        weight = check_weight(weight)
        u = _FROM_NODE.check(from_node, len(self._adj))
        v = _TO_NODE.check(to_node, len(self._adj))

        self._adj[u].append(Edge(v, weight))
        self._edge_count += 1

    def add_bidir_edge(
        self, from_node: NodeID, to_node: NodeID, weight: Weight
    ) -> None:
        """Add two directed edges, ``from_node -> to_node`` and back, with one weight.

        Raises:
            InvalidArgument: Same conditions as :meth:`add_edge`.
        """
        weight = check_weight(weight)
        u = _FROM_NODE.check(from_node, len(self._adj))
        v = _TO_NODE.check(to_node, len(self._adj))

        self._adj[u].append(Edge(v, weight))
        self._adj[v].append(Edge(u, weight))
        self._edge_count += 2

    #
    # Convenience
    #
    def calculate_for(
        self, start_node: NodeID, config: Optional[SolverConfig] = None
    ) -> ShortestPaths:
        """Compute shortest paths from ``start_node`` to every node.

        Shortcut for :func:`idxgraph.algorithms.spf.calculate_for`.
        """
        from idxgraph.algorithms.spf import calculate_for

        return calculate_for(self, start_node, config)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(node_count={self.node_count}, "
            f"edge_count={self._edge_count})"
        )
