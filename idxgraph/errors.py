"""Exceptions raised by idxgraph.

All errors are caller-input errors. They are raised before any mutation or
computation takes place, so the object that raised remains fully usable.
"""

from __future__ import annotations

from typing import Any


class IdxGraphError(Exception):
    """Base class for all idxgraph errors."""


class InvalidArgument(IdxGraphError, ValueError):
    """A node id, node count or edge weight is outside its valid domain.

    Attributes:
        label: Name of the offending argument (e.g. ``"endNode"``).
        value: The rejected value.
        constraint: Human-readable description of the violated constraint.
    """

    def __init__(self, label: str, value: Any, constraint: str) -> None:
        self.label = label
        self.value = value
        self.constraint = constraint
        super().__init__(f"{label} {constraint}: {value!r}")


class NoPathFound(IdxGraphError, LookupError):
    """The requested destination is a valid node but is unreachable.

    Attributes:
        start_node: Start node of the result that was queried.
        end_node: Destination that could not be reached.
    """

    def __init__(self, start_node: int, end_node: int) -> None:
        self.start_node = start_node
        self.end_node = end_node
        super().__init__(f"no path from {start_node} to {end_node}")
