import pytest

from idxgraph.demo import (
    CAFE_ROUTES,
    Cafe,
    Route,
    build_cafe_graph,
    route,
    route_from_location,
)


def test_cafe_indices():
    assert [c.value for c in Cafe] == list(range(6))
    assert Cafe.from_string("cafeGrumpy") is Cafe.CAFEGRUMPY
    with pytest.raises(ValueError, match="Valid values are: FULLSTACK"):
        Cafe.from_string("espresso")


def test_template_graph_shape():
    graph = build_cafe_graph()
    assert graph.node_count == 6
    assert graph.edge_count == 2 * len(CAFE_ROUTES)


def test_route_fullstack_to_cafegrumpy():
    walk = route(build_cafe_graph(), Cafe.FULLSTACK, Cafe.CAFEGRUMPY)
    assert walk == Route(
        ["FULLSTACK", "DUBLINER", "INSOMNIACOOKIES", "CAFEGRUMPY"], 14
    )


def test_route_from_location_leaves_template_unchanged():
    template = build_cafe_graph()
    edges_before = list(template.edges())

    walk = route_from_location(
        template, [(Cafe.DIGINN, 2), (Cafe.STARBUCKS, 1)], Cafe.FULLSTACK
    )

    assert walk.stops == ["YOU", "STARBUCKS", "DUBLINER", "FULLSTACK"]
    assert walk.minutes == 6
    assert list(template.edges()) == edges_before
    assert template.node_count == 6
