"""Экспорт/импорт сгенерированных рёбер (CSV и JSON)."""

from __future__ import annotations

import io
import json
from typing import Iterable, List

import numpy as np
import pandas as pd

from .generator_config import NumberOfNodesBasedConfig
from .graph_build import edges_to_frame, pairs_from_frame
from .pair import UnorderedPair


class GraphDataEncoder(json.JSONEncoder):
    """JSON encoder for numpy scalars and arrays."""
    def default(self, obj):  # noqa: ANN001 - JSONEncoder API uses untyped args.
        if isinstance(obj, (np.integer, np.floating, np.bool_)):
            return obj.item()
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        return super().default(obj)


def export_edges_csv(edges: Iterable[UnorderedPair[int]]) -> bytes:
    """Serialize edges to UTF-8 CSV with ``src,dst`` header."""
    return edges_to_frame(edges).to_csv(index=False).encode("utf-8")


def load_edges_csv(data: bytes) -> List[UnorderedPair[int]]:
    """Parse CSV produced by export_edges_csv (or any table with src/dst columns)."""
    df = pd.read_csv(io.BytesIO(data))
    df.columns = [str(c).strip() for c in df.columns]
    return pairs_from_frame(df)


def export_edges_json(config: NumberOfNodesBasedConfig, edges: Iterable[UnorderedPair[int]]) -> bytes:
    """Config fields plus the edge list as ``[[src, dst], ...]``."""
    payload = {
        "config": config.as_dict(),
        "edges": edges_to_frame(edges).to_numpy(),
    }
    return json.dumps(payload, cls=GraphDataEncoder, ensure_ascii=False, indent=2).encode("utf-8")
