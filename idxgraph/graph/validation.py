"""Argument checks for node ids, node counts and edge weights.

Each check returns the normalized value so callers can validate and convert in
one step. Failures raise :class:`~idxgraph.errors.InvalidArgument`.
"""

from __future__ import annotations

import math
import operator
from numbers import Real
from typing import Any

from idxgraph.errors import InvalidArgument
from idxgraph.types import NodeID, Weight

#: Smallest node count that can express a path.
MIN_NODES = 2


def _as_int(value: Any, label: str) -> int:
    if isinstance(value, bool):
        raise InvalidArgument(label, value, "must be an integer")
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidArgument(label, value, "must be an integer") from None


def check_node_count(value: Any) -> int:
    """Validate the initial node count of a graph.

    Args:
        value: Requested node count.

    Returns:
        The node count as ``int``.

    Raises:
        InvalidArgument: If the value is not an integer or is below ``MIN_NODES``.
    """
    count = _as_int(value, "node_count")
    if count < MIN_NODES:
        raise InvalidArgument(
            "node_count", value, f"must be at least {MIN_NODES}"
        )
    return count


def check_weight(value: Any) -> Weight:
    """Validate an edge weight: a real number, not NaN, ``>= 0``."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgument("weight", value, "must be a number")
    if math.isnan(value) or value < 0:
        raise InvalidArgument("weight", value, "must be >= 0")
    return value


class NodeIndexChecker:
    """Range check for node id arguments.

    The checker only carries the argument label. The caller passes its
    current ``node_count`` at check time, so a single checker serves every
    graph and stays correct after nodes are appended.

    Args:
        label: Argument name used in error messages.
    """

    __slots__ = ("label",)

    def __init__(self, label: str) -> None:
        self.label = label

    def check(self, value: Any, node_count: int) -> NodeID:
        """Return ``value`` as ``int`` if it is a valid node id.

        Raises:
            InvalidArgument: If ``value`` is not an integer or not in
                ``[0, node_count)``.
        """
        index = _as_int(value, self.label)
        if index < 0 or index >= node_count:
            raise InvalidArgument(
                self.label, value, f"must be in range 0..{node_count - 1}"
            )
        return index
