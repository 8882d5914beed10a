"""Café walkthrough: a small worked example of template reuse.

Six cafés are connected by walking routes with travel times in minutes. Each
café is mapped to a dense index through the `Cafe` enum. The template graph is
built once; a walk that starts somewhere new (e.g. the user's current location)
clones the template and attaches one extra node before solving.
"""

from __future__ import annotations

from enum import IntEnum
from typing import List, NamedTuple, Sequence, Tuple

from idxgraph.graph.indexed_graph import IndexedDiGraph
from idxgraph.types import NodeID, Weight


class Cafe(IntEnum):
    """Café names mapped to node ids."""

    FULLSTACK = 0
    DIGINN = 1
    DUBLINER = 2
    STARBUCKS = 3
    CAFEGRUMPY = 4
    INSOMNIACOOKIES = 5

    @classmethod
    def from_string(cls, value: str) -> "Cafe":
        """Parse a case-insensitive café name.

        Raises:
            ValueError: If the name is not a known café.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(c.name for c in cls)
            raise ValueError(
                f"Unknown cafe '{value}'. Valid values are: {valid}"
            ) from None


#: Two-way walking routes as (cafe, cafe, minutes).
CAFE_ROUTES: Tuple[Tuple[Cafe, Cafe, Weight], ...] = (
    (Cafe.DIGINN, Cafe.FULLSTACK, 7),
    (Cafe.FULLSTACK, Cafe.STARBUCKS, 6),
    (Cafe.DIGINN, Cafe.DUBLINER, 4),
    (Cafe.FULLSTACK, Cafe.DUBLINER, 2),
    (Cafe.DUBLINER, Cafe.STARBUCKS, 3),
    (Cafe.DIGINN, Cafe.CAFEGRUMPY, 9),
    (Cafe.CAFEGRUMPY, Cafe.INSOMNIACOOKIES, 5),
    (Cafe.DUBLINER, Cafe.INSOMNIACOOKIES, 7),
    (Cafe.STARBUCKS, Cafe.INSOMNIACOOKIES, 6),
)


class Route(NamedTuple):
    """A resolved walk between two cafés."""

    stops: List[str]
    minutes: Weight


def build_cafe_graph() -> IndexedDiGraph:
    """Return the template graph of all cafés and routes."""
    graph = IndexedDiGraph(len(Cafe))
    for a, b, minutes in CAFE_ROUTES:
        graph.add_bidir_edge(a, b, minutes)
    return graph


def _names(path: Sequence[NodeID], extra_label: str = "YOU") -> List[str]:
    return [Cafe(n).name if n < len(Cafe) else extra_label for n in path]


def route(graph: IndexedDiGraph, start: Cafe, end: Cafe) -> Route:
    """Return the quickest walk from ``start`` to ``end``.

    Raises:
        NoPathFound: If ``end`` cannot be reached (never the case for the
            connected template graph).
    """
    paths = graph.calculate_for(start)
    return Route(_names(paths.shortest_path_to(end)), paths.total_weight(end))


def route_from_location(
    template: IndexedDiGraph,
    nearby: Sequence[Tuple[Cafe, Weight]],
    end: Cafe,
) -> Route:
    """Return the quickest walk from an ad-hoc location to ``end``.

    The template is cloned, a node for the location is appended and connected
    to the ``nearby`` cafés; the template itself is left unchanged.

    Args:
        template: Graph returned by :func:`build_cafe_graph`.
        nearby: ``(cafe, minutes)`` pairs reachable directly from the location.
        end: Destination café.
    """
    graph = template.clone()
    here = graph.add_node()
    for cafe, minutes in nearby:
        graph.add_bidir_edge(here, cafe, minutes)
    paths = graph.calculate_for(here)
    return Route(_names(paths.shortest_path_to(end)), paths.total_weight(end))
