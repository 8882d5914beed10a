"""Checks that the top-level package exposes the documented API."""

import math

import idxgraph
from idxgraph import IndexedDiGraph, InvalidArgument, NoPathFound


def test_all_names_importable():
    for name in idxgraph.__all__:
        assert hasattr(idxgraph, name), name


def test_package_docstring_example():
    template = IndexedDiGraph(3)
    template.add_edge(0, 2, 42)

    graph = template.clone()
    extra = graph.add_node()
    graph.add_bidir_edge(2, extra, 1)

    paths = graph.calculate_for(0)
    assert paths.shortest_path_to(extra) == [0, 2, 3]
    assert paths.total_weight(extra) == 43
    assert paths.total_weight(1) == math.inf
    assert template.edge_count == 1


def test_error_hierarchy():
    assert issubclass(InvalidArgument, idxgraph.IdxGraphError)
    assert issubclass(NoPathFound, idxgraph.IdxGraphError)
    assert idxgraph.UNREACHED == math.inf
    assert idxgraph.NO_PREDECESSOR == -1
