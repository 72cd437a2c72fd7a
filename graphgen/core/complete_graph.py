"""Complete graph generator: every pair of nodes is connected."""

from __future__ import annotations

from typing import List

from ..generator_config import CompleteGraphConfig
from ..pair import UnorderedPair
from .erdos_renyi import index_to_edge
from .relationship_generator import RelationshipGenerator


class CompleteGraphRelationshipGenerator(RelationshipGenerator[CompleteGraphConfig]):
    """Emits all n*(n-1)/2 edges in triangular order; the random source is unused."""

    def _do_generate_edges(self) -> List[UnorderedPair[int]]:
        total = self.configuration.number_of_edges
        return [UnorderedPair(*index_to_edge(k)) for k in range(total)]
