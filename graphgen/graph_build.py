from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Sequence

import numpy as np
import networkx as nx
import pandas as pd

from .generator_config import max_edges_for
from .pair import UnorderedPair


def _ordered(pair: UnorderedPair[int]) -> tuple[int, int]:
    u, v = int(pair.first), int(pair.second)
    if u > v:
        u, v = v, u
    return u, v


def edges_to_frame(edges: Iterable[UnorderedPair[int]]) -> pd.DataFrame:
    """Edge list as a dataframe with src < dst, sorted by (src, dst)."""
    rows = sorted(_ordered(p) for p in edges)
    df = pd.DataFrame(rows, columns=["src", "dst"])
    return df.astype({"src": "int64", "dst": "int64"})


def edges_to_array(edges: Iterable[UnorderedPair[int]]) -> np.ndarray:
    """Edge list as an (m, 2) int64 array, rows ordered the same way as edges_to_frame."""
    return edges_to_frame(edges).to_numpy(dtype=np.int64).reshape(-1, 2)


def edges_to_graph(number_of_nodes: int, edges: Iterable[UnorderedPair[int]]) -> nx.Graph:
    """Build an nx.Graph over range(number_of_nodes); isolated nodes are kept."""
    df = edges_to_frame(edges)
    G = nx.from_pandas_edgelist(df, source="src", target="dst", create_using=nx.Graph())
    G.add_nodes_from(range(int(number_of_nodes)))
    return G


def pairs_from_frame(df: pd.DataFrame, src_col: str = "src", dst_col: str = "dst") -> List[UnorderedPair[int]]:
    """Read an edge table back into pairs. Rows with missing ids are dropped."""
    if src_col not in df.columns or dst_col not in df.columns:
        raise ValueError(f"Нет обязательных колонок: {[src_col, dst_col]}")
    clean = df[[src_col, dst_col]].dropna()
    return [UnorderedPair(int(u), int(v)) for u, v in clean.itertuples(index=False, name=None)]


def edge_set_report(
    number_of_nodes: int,
    requested_edges: int,
    edges: Sequence[UnorderedPair[int]],
) -> Dict[str, Any]:
    """Проверить выданный набор рёбер против запроса.

    Считает дубли, петли и выход за ``[0, number_of_nodes)``; ``ok`` истинно,
    только если рёбер ровно ``requested_edges`` и все они различны и допустимы.
    """
    n = int(number_of_nodes)
    requested = int(requested_edges)
    arr = edges_to_array(edges)
    produced = len(edges)
    distinct = len(set(edges))
    self_loops = int(np.count_nonzero(arr[:, 0] == arr[:, 1]))
    out_of_range = int(np.count_nonzero(((arr < 0) | (arr >= n)).any(axis=1)))
    total = max_edges_for(n) if n >= 2 else 0

    G = edges_to_graph(n, edges)
    return {
        "number_of_nodes": n,
        "requested_edges": requested,
        "produced_edges": produced,
        "duplicate_edges": produced - distinct,
        "self_loops": self_loops,
        "out_of_range": out_of_range,
        "max_edges": total,
        "density": float(distinct) / float(total) if total else 0.0,
        "components": nx.number_connected_components(G) if G.number_of_nodes() > 0 else 0,
        "ok": produced == requested == distinct and self_loops == 0 and out_of_range == 0,
    }


def edge_set_summary(report: Mapping[str, Any]) -> str:
    """Human-readable form of :func:`edge_set_report`."""
    status = "OK" if report["ok"] else "MISMATCH"
    return (
        f"N={report['number_of_nodes']}\n"
        f"E={report['produced_edges']}/{report['requested_edges']} ({status})\n"
        f"Duplicates={report['duplicate_edges']}\n"
        f"Selfloops={report['self_loops']}\n"
        f"OutOfRange={report['out_of_range']}\n"
        f"Density={report['density']:.6g} of {report['max_edges']}\n"
        f"Components={report['components']}\n"
    )
