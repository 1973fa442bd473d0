import dataclasses

import pytest

from labelgraph.errors import InvalidArgumentError
from labelgraph.graph.graph_schema import GraphEdge, GraphVertex
from labelgraph.graph.visited import VisitedTable


def test_vertex_rejects_none_value():
    with pytest.raises(InvalidArgumentError):
        GraphVertex(value=None, index=0)


def test_vertex_is_frozen_and_edges_are_a_tuple():
    vertex = GraphVertex(
        value="New York",
        index=0,
        edges=[GraphEdge(label="50", neighbor_value="Philadelphia")],
    )
    assert isinstance(vertex.edges, tuple)
    assert vertex.degree == 1
    assert vertex.neighbor_values() == ["Philadelphia"]
    with pytest.raises(dataclasses.FrozenInstanceError):
        vertex.value = "Boston"
    with pytest.raises(dataclasses.FrozenInstanceError):
        vertex.edges[0].label = "60"


def test_visited_table_grows_on_demand():
    table = VisitedTable(capacity=2, growth_factor=2.0)
    assert not table.is_visited(10)
    table.mark(1)
    table.mark(10)
    assert 1 in table and 10 in table
    assert 5 not in table
    assert table.capacity >= 11
    assert len(table) == 2


def test_visited_table_rejects_negative_index():
    table = VisitedTable()
    with pytest.raises(InvalidArgumentError):
        table.mark(-1)
