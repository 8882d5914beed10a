"""Global pytest configuration and sample graph fixtures.

Node ids are dense integers; the diagrams below label them by index.
"""

from __future__ import annotations

import pytest

from idxgraph.graph.indexed_graph import IndexedDiGraph
from idxgraph.logging import reset_logging, setup_root_logger


@pytest.fixture
def line1():
    #      [1]      [1,2]
    #  0────────►1════════►2
    #
    # Parallel 1->2 edges with weights 1 and 2.
    g = IndexedDiGraph(3)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 2)
    g.add_edge(1, 2, 1)
    return g


@pytest.fixture
def square1():
    #      [1]
    #  0────────►1
    #  │         │
    #  │[2]      │[1]
    #  ▼   [2]   ▼
    #  3────────►2
    g = IndexedDiGraph(4)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 1)
    g.add_edge(0, 3, 2)
    g.add_edge(3, 2, 2)
    return g


@pytest.fixture
def square2():
    # Same as square1 with all weights 1: two equal-cost paths 0->2.
    g = IndexedDiGraph(4)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 1)
    g.add_edge(0, 3, 1)
    g.add_edge(3, 2, 1)
    return g


@pytest.fixture
def cafe_graph():
    # 0 FULLSTACK, 1 DIGINN, 2 DUBLINER, 3 STARBUCKS, 4 CAFEGRUMPY,
    # 5 INSOMNIACOOKIES; all routes are two-way.
    g = IndexedDiGraph(6)
    for u, v, w in (
        (1, 0, 7),
        (0, 3, 6),
        (1, 2, 4),
        (0, 2, 2),
        (2, 3, 3),
        (1, 4, 9),
        (4, 5, 5),
        (2, 5, 7),
        (3, 5, 6),
    ):
        g.add_bidir_edge(u, v, w)
    return g


@pytest.fixture
def two_islands():
    # {0, 1} and {2, 3} with no edges between them.
    g = IndexedDiGraph(4)
    g.add_bidir_edge(0, 1, 3)
    g.add_bidir_edge(2, 3, 4)
    return g


@pytest.fixture
def fresh_logging():
    """Give a test a clean package logger and restore the default afterwards."""
    reset_logging()
    yield
    reset_logging()
    setup_root_logger()
