"""Basic types and sentinels shared across idxgraph."""

from __future__ import annotations

import math
from typing import NamedTuple, Union

#: Dense integer node identifier in ``[0, node_count)``.
NodeID = int

#: Non-negative edge weight or path cost.
Weight = Union[int, float]

#: Distance sentinel for nodes not reached from the start node.
UNREACHED: float = math.inf

#: Predecessor sentinel for nodes without a known predecessor.
NO_PREDECESSOR: int = -1


class Edge(NamedTuple):
    """A directed edge as stored in the source node's adjacency list."""

    to_node: NodeID
    weight: Weight
