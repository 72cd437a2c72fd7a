"""Conversions and CSV/JSON export of edge lists."""

import json

import numpy as np

from graphgen.edge_io import export_edges_csv, export_edges_json, load_edges_csv
from graphgen.generator_config import ErdosRenyiConfig
from graphgen.graph_build import (
    edge_set_report,
    edge_set_summary,
    edges_to_array,
    edges_to_frame,
    edges_to_graph,
)
from graphgen.pair import UnorderedPair

EDGES = [UnorderedPair(3, 1), UnorderedPair(0, 2), UnorderedPair(2, 1)]


def test_frame_is_normalized_and_sorted() -> None:
    df = edges_to_frame(EDGES)
    assert list(df.columns) == ["src", "dst"]
    assert df.values.tolist() == [[0, 2], [1, 2], [1, 3]]


def test_array_shape() -> None:
    arr = edges_to_array(EDGES)
    assert arr.shape == (3, 2)
    assert arr.dtype == np.int64
    assert edges_to_array([]).shape == (0, 2)


def test_graph_keeps_isolated_nodes() -> None:
    G = edges_to_graph(6, EDGES)
    assert G.number_of_nodes() == 6
    assert G.number_of_edges() == 3


def test_csv_round_trip_preserves_edge_set() -> None:
    data = export_edges_csv(EDGES)
    assert data.decode("utf-8").splitlines()[0] == "src,dst"
    assert set(load_edges_csv(data)) == set(EDGES)


def test_json_export_contains_config_and_edges() -> None:
    payload = json.loads(export_edges_json(ErdosRenyiConfig(4, 3), EDGES))
    assert payload["config"]["model"] == "erdos_renyi"
    assert payload["config"]["number_of_edges"] == 3
    assert payload["edges"] == [[0, 2], [1, 2], [1, 3]]


def test_edge_set_report_accepts_valid_set() -> None:
    report = edge_set_report(6, 3, EDGES)
    assert report["ok"]
    assert report["produced_edges"] == 3 and report["duplicate_edges"] == 0
    assert report["max_edges"] == 15
    assert np.isclose(report["density"], 0.2)
    assert report["components"] == 3
    summary = edge_set_summary(report)
    assert "E=3/3 (OK)" in summary and "Components=3" in summary


def test_edge_set_report_flags_bad_sets() -> None:
    bad = [UnorderedPair(0, 1), UnorderedPair(1, 0), UnorderedPair(2, 2), UnorderedPair(3, 9)]
    report = edge_set_report(5, 4, bad)
    assert not report["ok"]
    assert report["duplicate_edges"] == 1
    assert report["self_loops"] == 1
    assert report["out_of_range"] == 1
    assert "MISMATCH" in edge_set_summary(report)


def test_edge_set_report_on_generated_edges() -> None:
    from graphgen.core.erdos_renyi import ErdosRenyiRelationshipGenerator

    edges = ErdosRenyiRelationshipGenerator(ErdosRenyiConfig(10, 23), rng=5).generate_edges()
    assert edge_set_report(10, 23, edges)["ok"]


def test_json_export_numpy_config_values() -> None:
    payload = json.loads(export_edges_json(ErdosRenyiConfig(np.int64(4), np.int64(3)), EDGES))
    assert payload["config"]["number_of_nodes"] == 4
