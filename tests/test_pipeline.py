"""Pipeline: BasicGeneratorConfiguration + GraphGenerator over networkx creators."""

import networkx as nx
import pytest

from graphgen.config import settings
from graphgen.core.erdos_renyi import ErdosRenyiRelationshipGenerator
from graphgen.core.relationship_generator import InvalidConfigurationError
from graphgen.creators import NetworkXNodeCreator, NetworkXRelationshipCreator
from graphgen.generator_config import ErdosRenyiConfig
from graphgen.pipeline import BasicGeneratorConfiguration, GraphGenerator


def _pipeline(n: int, m: int, graph: nx.Graph, seed: int = 0) -> BasicGeneratorConfiguration:
    gen = ErdosRenyiRelationshipGenerator(ErdosRenyiConfig(n, m), rng=seed)
    return BasicGeneratorConfiguration(gen, NetworkXNodeCreator(graph), NetworkXRelationshipCreator(graph))


def test_configuration_exposes_components() -> None:
    G = nx.Graph()
    node_creator = NetworkXNodeCreator(G)
    rel_creator = NetworkXRelationshipCreator(G)
    gen = ErdosRenyiRelationshipGenerator(ErdosRenyiConfig(12, 8))
    cfg = BasicGeneratorConfiguration(gen, node_creator, rel_creator)

    assert cfg.relationship_generator is gen
    assert cfg.node_creator is node_creator
    assert cfg.relationship_creator is rel_creator
    assert cfg.batch_size == settings.DEFAULT_BATCH_SIZE == 1000
    assert cfg.number_of_nodes == 12


def test_generate_graph_writes_everything() -> None:
    G = nx.Graph()
    report = GraphGenerator().generate_graph(_pipeline(2500, 3000, G, seed=4))

    assert G.number_of_nodes() == 2500
    assert G.number_of_edges() == 3000
    assert nx.number_of_selfloops(G) == 0
    assert report.number_of_nodes == 2500
    assert report.number_of_relationships == 3000
    assert report.node_batches == 3
    assert report.relationship_batches == 3
    assert G.nodes[0]["label"] == "Node"
    u, v = next(iter(G.edges()))
    assert G.edges[u, v]["type"] == "RELATED"


def test_progress_callback_reaches_totals() -> None:
    G = nx.Graph()
    seen = []
    GraphGenerator().generate_graph(_pipeline(10, 20, G), progress_cb=lambda done, total: seen.append((done, total)))
    assert seen == [(10, 10), (20, 20)]


def test_invalid_config_writes_nothing() -> None:
    G = nx.Graph()
    with pytest.raises(InvalidConfigurationError):
        GraphGenerator().generate_graph(_pipeline(5, 11, G))
    assert G.number_of_nodes() == 0


def test_relationship_creator_refuses_self_loop() -> None:
    G = nx.Graph()
    with pytest.raises(ValueError):
        NetworkXRelationshipCreator(G).create_relationship(1, 1)
