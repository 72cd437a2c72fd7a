"""Загрузка пресетов генераторов из YAML.

Пресеты лежат в config/generators.yaml, формат:

    presets:
      small_sparse:
        model: erdos_renyi
        number_of_nodes: 100
        number_of_edges: 250
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from .generator_config import CompleteGraphConfig, ErdosRenyiConfig, NumberOfNodesBasedConfig, as_count


def _project_root() -> Path:
    # graphgen/.. -> корень репо
    return Path(__file__).resolve().parents[1]


def load_presets(path: str | Path | None = None) -> Dict[str, Dict[str, Any]]:
    """Прочитать config/generators.yaml (или переданный путь)."""
    p = Path(path) if path is not None else _project_root() / "config" / "generators.yaml"
    if not p.exists():
        return {}
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    presets = data.get("presets", {}) or {}
    return {str(name): dict(body or {}) for name, body in presets.items()}


def _count_field(mapping: Mapping[str, Any], key: str) -> int:
    # 10.7 или "10" не округляем молча: в пресете должно быть целое
    value = as_count(mapping[key])
    if value is None:
        raise ValueError(f"{key} must be an integer, got {mapping[key]!r}")
    return value


def config_from_mapping(mapping: Mapping[str, Any]) -> NumberOfNodesBasedConfig:
    """Build a generator config from a plain mapping (one YAML preset)."""
    model = str(mapping.get("model", "erdos_renyi")).strip().lower()
    if "number_of_nodes" not in mapping:
        raise ValueError(f"preset for model {model!r} needs number_of_nodes")
    n = _count_field(mapping, "number_of_nodes")

    if model == ErdosRenyiConfig.model_name():
        if "number_of_edges" not in mapping:
            raise ValueError("erdos_renyi preset needs number_of_edges")
        return ErdosRenyiConfig(number_of_nodes=n, number_of_edges=_count_field(mapping, "number_of_edges"))
    if model == CompleteGraphConfig.model_name():
        return CompleteGraphConfig(number_of_nodes=n)

    raise ValueError(f"unknown generator model: {model!r}")


def load_generator_config(name: str, path: str | Path | None = None) -> NumberOfNodesBasedConfig:
    """Look up a named preset and turn it into a config."""
    presets = load_presets(path)
    if name not in presets:
        raise KeyError(f"no generator preset named {name!r}")
    return config_from_mapping(presets[name])
