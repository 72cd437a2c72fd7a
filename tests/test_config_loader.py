"""YAML presets -> generator configs."""

import pytest

from graphgen.config_loader import config_from_mapping, load_generator_config, load_presets
from graphgen.generator_config import CompleteGraphConfig, ErdosRenyiConfig


def test_bundled_presets_load() -> None:
    presets = load_presets()
    assert "tiny" in presets
    cfg = load_generator_config("tiny_dense")
    assert cfg == ErdosRenyiConfig(10, 23)
    assert cfg.is_valid()


def test_custom_file(tmp_path) -> None:
    p = tmp_path / "g.yaml"
    p.write_text("presets:\n  k4:\n    model: complete\n    number_of_nodes: 4\n", encoding="utf-8")
    assert load_generator_config("k4", path=p) == CompleteGraphConfig(4)


def test_missing_file_gives_no_presets(tmp_path) -> None:
    assert load_presets(tmp_path / "nope.yaml") == {}


def test_unknown_preset(tmp_path) -> None:
    with pytest.raises(KeyError):
        load_generator_config("nope", path=tmp_path / "nope.yaml")


def test_bad_mappings() -> None:
    with pytest.raises(ValueError):
        config_from_mapping({"model": "watts_strogatz", "number_of_nodes": 10})
    with pytest.raises(ValueError):
        config_from_mapping({"model": "erdos_renyi", "number_of_nodes": 10})
    with pytest.raises(ValueError):
        config_from_mapping({"number_of_edges": 3})


def test_default_model_is_erdos_renyi() -> None:
    assert config_from_mapping({"number_of_nodes": 5, "number_of_edges": 2}) == ErdosRenyiConfig(5, 2)


@pytest.mark.parametrize(
    "mapping",
    [
        {"model": "erdos_renyi", "number_of_nodes": 10.7, "number_of_edges": 3},
        {"model": "erdos_renyi", "number_of_nodes": 10, "number_of_edges": 2.5},
        {"model": "complete", "number_of_nodes": "10"},
        {"model": "complete", "number_of_nodes": True},
    ],
)
def test_non_integral_values_rejected(mapping) -> None:
    """Дробные/строковые значения в пресете не обрезаются до int."""
    with pytest.raises(ValueError):
        config_from_mapping(mapping)


def test_yaml_float_preset_rejected(tmp_path) -> None:
    p = tmp_path / "g.yaml"
    p.write_text("presets:\n  bad:\n    number_of_nodes: 10.7\n    number_of_edges: 3\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_generator_config("bad", path=p)
