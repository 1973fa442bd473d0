from __future__ import annotations

import pytest

from labelgraph.graph.graph_store import Graph
from labelgraph.graph.graph_builder import GraphBuilder
from labelgraph.filtering.predicates import FunctionPredicate


@pytest.fixture()
def graph() -> Graph:
    return Graph()


@pytest.fixture()
def mini_graph() -> Graph:
    g = Graph("New York")
    GraphBuilder(g).add_adjacents(
        "New York", [("50", "Philadelphia"), ("75", "Boston")]
    )
    return g


@pytest.fixture()
def city_graph(mini_graph: Graph) -> Graph:
    builder = GraphBuilder(mini_graph)
    builder.add_adjacents("Philadelphia", [("50", "DC"), ("75", "Miami")])
    builder.add_adjacents("Boston", [("100", "Chicago")])
    return mini_graph


@pytest.fixture()
def longer_than_six() -> FunctionPredicate:
    return FunctionPredicate(lambda s: len(s) > 6)


@pytest.fixture()
def shorter_than_eight() -> FunctionPredicate:
    return FunctionPredicate(lambda s: len(s) < 8)
