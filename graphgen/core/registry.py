"""Model dispatch: config type -> generator class."""

from __future__ import annotations

from typing import Dict, List, Type

from ..generator_config import CompleteGraphConfig, ErdosRenyiConfig, NumberOfNodesBasedConfig
from ..pair import UnorderedPair
from .complete_graph import CompleteGraphRelationshipGenerator
from .erdos_renyi import ErdosRenyiRelationshipGenerator
from .relationship_generator import RandomSource, RelationshipGenerator

GENERATORS: Dict[Type[NumberOfNodesBasedConfig], Type[RelationshipGenerator]] = {
    ErdosRenyiConfig: ErdosRenyiRelationshipGenerator,
    CompleteGraphConfig: CompleteGraphRelationshipGenerator,
}


def generator_for(config: NumberOfNodesBasedConfig, rng: RandomSource = None) -> RelationshipGenerator:
    """Build the generator registered for ``type(config)``."""
    cls = GENERATORS.get(type(config))
    if cls is None:
        raise TypeError(f"no relationship generator for config type {type(config).__name__}")
    return cls(config, rng)


def generate(config: NumberOfNodesBasedConfig, rng: RandomSource = None) -> List[UnorderedPair[int]]:
    """Generate the edge list for any supported model config."""
    return generator_for(config, rng).generate_edges()
