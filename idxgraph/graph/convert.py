"""Conversion between NetworkX graphs and `IndexedDiGraph`.

NetworkX nodes can be any hashable; `IndexedDiGraph` needs dense integer ids.
`from_networkx` assigns indices and returns a `NodeMap` that translates results
back to the original names.

Example:
    >>> import networkx as nx
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=10)
    >>> G.add_edge("B", "C", weight=5)
    >>> graph, node_map = from_networkx(G)
    >>> paths = graph.calculate_for(node_map.to_index["A"])
    >>> node_map.names(paths.shortest_path_to(node_map.to_index["C"]))
    ['A', 'B', 'C']
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, Tuple, Union

import networkx as nx

from idxgraph.errors import InvalidArgument
from idxgraph.graph.indexed_graph import IndexedDiGraph
from idxgraph.graph.validation import MIN_NODES
from idxgraph.types import Weight

NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer indices.

    Attributes:
        to_index: Maps original node names to integer indices.
        to_name: Maps integer indices back to original node names.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from node names listed in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def names(self, indices: List[int]) -> List[Hashable]:
        """Translate a list of indices (e.g. a path) to node names."""
        return [self.to_name[i] for i in indices]

    def __len__(self) -> int:
        return len(self.to_index)


def from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = "weight",
    default_weight: Weight = 1,
) -> Tuple[IndexedDiGraph, NodeMap]:
    """Convert a NetworkX graph to an `IndexedDiGraph`.

    Nodes are indexed in ``sorted(G.nodes(), key=str)`` order. Undirected
    graphs (``Graph``, ``MultiGraph``) produce a bidirectional edge per
    NetworkX edge; parallel edges of multigraphs are kept as parallel edges.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight used when the attribute is missing.

    Returns:
        Tuple of ``(graph, node_map)``.

    Raises:
        TypeError: If ``G`` is not a NetworkX graph.
        InvalidArgument: If ``G`` has fewer than two nodes or an edge weight
            is invalid.
    """
    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )
    if G.number_of_nodes() < MIN_NODES:
        raise InvalidArgument(
            "node_count", G.number_of_nodes(), f"must be at least {MIN_NODES}"
        )

    node_map = NodeMap.from_names(sorted(G.nodes(), key=str))
    graph = IndexedDiGraph(len(node_map))
    add = graph.add_edge if G.is_directed() else graph.add_bidir_edge

    for u, v, data in G.edges(data=True):
        add(
            node_map.to_index[u],
            node_map.to_index[v],
            data.get(weight_attr, default_weight),
        )
    return graph, node_map


def to_networkx(
    graph: IndexedDiGraph,
    node_map: Optional[NodeMap] = None,
    *,
    weight_attr: str = "weight",
) -> nx.MultiDiGraph:
    """Convert an `IndexedDiGraph` to a NetworkX MultiDiGraph.

    Every stored directed edge becomes one NetworkX edge, so a bidirectional
    edge appears once in each direction.

    Args:
        graph: Graph to convert.
        node_map: Optional mapping used to relabel indices to names. Indices
            without a name (e.g. nodes added after conversion) keep their index.
        weight_attr: Edge attribute name for the weight.

    Returns:
        nx.MultiDiGraph with ``graph.node_count`` nodes.
    """

    def name(index: int) -> Hashable:
        if node_map is None:
            return index
        return node_map.to_name.get(index, index)

    G = nx.MultiDiGraph()
    G.add_nodes_from(name(i) for i in range(graph.node_count))
    for u, v, weight in graph.edges():
        G.add_edge(name(u), name(v), **{weight_attr: weight})
    return G
