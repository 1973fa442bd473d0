import logging

import pytest

from labelgraph.config.constants import DEFAULTS
from labelgraph.config.settings import GraphConfig, configure_logging, load_config
from labelgraph.errors import InvalidArgumentError
from labelgraph.graph.graph_store import Graph


def test_defaults():
    config = GraphConfig()
    assert config.visited_initial_capacity == DEFAULTS["VISITED_INITIAL_CAPACITY"]
    assert config.visited_growth_factor == DEFAULTS["VISITED_GROWTH_FACTOR"]
    assert config.log_level == DEFAULTS["LOG_LEVEL"]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"visited_initial_capacity": 0},
        {"visited_growth_factor": 1.0},
        {"log_level": "LOUD"},
    ],
)
def test_invalid_config_is_rejected(kwargs):
    with pytest.raises(InvalidArgumentError):
        GraphConfig(**kwargs)


def test_load_config_reads_environment(monkeypatch):
    monkeypatch.setenv("LABELGRAPH_VISITED_INITIAL_CAPACITY", "64")
    monkeypatch.setenv("LABELGRAPH_LOG_LEVEL", "DEBUG")
    config = load_config()
    assert config.visited_initial_capacity == 64
    assert config.log_level == "DEBUG"


def test_load_config_overrides_win(monkeypatch):
    monkeypatch.setenv("LABELGRAPH_VISITED_GROWTH_FACTOR", "3.0")
    config = load_config(visited_growth_factor=1.5)
    assert config.visited_growth_factor == 1.5


def test_graph_uses_default_config():
    assert Graph().config == GraphConfig()


def test_clone_keeps_config():
    config = GraphConfig(visited_initial_capacity=4)
    assert Graph("a", config=config).clone().config is config


def test_configure_logging_sets_level(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: captured.update(kw))
    configure_logging(GraphConfig(log_level="debug"))
    assert captured["level"] == "DEBUG"


def test_mutations_log_to_graph_logger(caplog):
    with caplog.at_level(logging.DEBUG, logger="labelgraph.graph"):
        g = Graph("New York")
        g.add("New York", "50", "Philadelphia")
    assert any(r.name == "labelgraph.graph" for r in caplog.records)
