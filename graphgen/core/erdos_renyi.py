"""Erdos-Renyi G(n, m) relationship generator.

Два алгоритма и переключатель по плотности:

- sparse: trial-and-correct (Batagelj & Brandes, "Efficient generation of
  large random networks", Phys. Rev. E 71, 036113, 2005). Тянем случайные пары
  узлов и складываем в set, пока не наберём m рёбер. На почти полных графах
  большинство попыток попадает в уже выбранные рёбра, поэтому выше ~50%
  плотности он не используется.
- dense: биекция индекс -> ребро. Тянем m различных индексов из
  ``[0, n*(n-1)/2)`` и отображаем каждый в своё ребро; дубли и петли
  невозможны по построению.
"""

from __future__ import annotations

import logging
import math
import operator
from typing import List, Optional, Set, Tuple

from ..config import settings
from ..generator_config import ErdosRenyiConfig
from ..pair import UnorderedPair
from .relationship_generator import (
    GenerationDidNotConvergeError,
    RandomSource,
    RelationshipGenerator,
    trial_ceiling,
)

logger = logging.getLogger("graphgen.generator")


def uses_dense_algorithm(config: ErdosRenyiConfig) -> bool:
    """True when more than half of all possible edges are requested."""
    n = operator.index(config.number_of_nodes)
    return operator.index(config.number_of_edges) * 4 > n * (n - 1)


def index_to_edge(index: int) -> Tuple[int, int]:
    """Map an edge index to its ``(i, j)`` realisation, ``j < i``.

    Row i of the triangular enumeration holds the i pairs (i, 0) .. (i, i-1),
    so i is the smallest row with i*(i+1)/2 >= index + 1.
    Closed form: i = ceil((sqrt(1 + 8*(index+1)) - 1) / 2). Считаем через
    isqrt, чтобы не ловить off-by-one от float sqrt на больших индексах.
    """
    k = int(index)
    if k < 0:
        raise ValueError(f"edge index must be >= 0, got {index!r}")
    i = (math.isqrt(1 + 8 * (k + 1)) - 1) // 2
    if i * (i + 1) // 2 < k + 1:
        i += 1
    j = k - i * (i - 1) // 2
    return i, j


def edge_to_index(first: int, second: int) -> int:
    """Inverse of :func:`index_to_edge`; the order of the two nodes does not matter."""
    i, j = (first, second) if first > second else (second, first)
    if i == j:
        raise ValueError(f"self-loop ({first}, {second}) has no edge index")
    if j < 0:
        raise ValueError(f"node ids must be >= 0, got ({first}, {second})")
    return i * (i - 1) // 2 + j


class ErdosRenyiRelationshipGenerator(RelationshipGenerator[ErdosRenyiConfig]):
    """
    Erdos-Renyi random graphs with a fixed number of edges.

    The switch to the dense generator allows even complete graphs
    (e.g. n=20, m=190) in reasonable time.
    """

    def __init__(
        self,
        configuration: ErdosRenyiConfig,
        rng: RandomSource = None,
        max_trials: Optional[int] = None,
    ) -> None:
        super().__init__(configuration, rng)
        self._max_trials = max_trials

    def _do_generate_edges(self) -> List[UnorderedPair[int]]:
        cfg = self.configuration
        if uses_dense_algorithm(cfg):
            algo = "dense"
            edges = self._generate_edges_with_omit_list()
        else:
            algo = "sparse"
            edges = self._generate_edges_simpler()
        logger.debug(
            "erdos-renyi %s: n=%d m=%d density=%.4f",
            algo,
            cfg.number_of_nodes,
            cfg.number_of_edges,
            cfg.density,
        )
        return edges

    def _ceiling(self) -> int:
        return trial_ceiling(
            self.configuration.number_of_edges,
            settings.MAX_TRIALS_PER_EDGE,
            self._max_trials,
        )

    def _generate_edges_simpler(self) -> List[UnorderedPair[int]]:
        """Trial-and-correct sampling for sparse graphs."""
        n = operator.index(self.configuration.number_of_nodes)
        m = operator.index(self.configuration.number_of_edges)
        rng = self.rng
        limit = self._ceiling()

        edges: Set[UnorderedPair[int]] = set()
        trials = 0
        while len(edges) < m:
            if trials >= limit:
                raise GenerationDidNotConvergeError(
                    f"sparse sampler collected {len(edges)}/{m} edges after {trials} draws (n={n})"
                )
            trials += 1
            origin = rng.randrange(n)
            target = rng.randrange(n)
            if origin == target:
                continue
            edges.add(UnorderedPair(origin, target))

        logger.debug("sparse sampler: %d draws for %d edges", trials, m)
        return list(edges)

    def _generate_edges_with_omit_list(self) -> List[UnorderedPair[int]]:
        """Index-bijection sampling for dense graphs."""
        edges: List[UnorderedPair[int]] = []
        for index in self._edge_indices():
            i, j = index_to_edge(index)
            edges.append(UnorderedPair(i, j))
        return edges

    def _edge_indices(self) -> Set[int]:
        m = operator.index(self.configuration.number_of_edges)
        total = self.configuration.max_edges
        rng = self.rng
        limit = self._ceiling()

        result: Set[int] = set()
        trials = 0
        while len(result) < m:
            if trials >= limit:
                raise GenerationDidNotConvergeError(
                    f"dense sampler collected {len(result)}/{m} indices after {trials} draws"
                )
            trials += 1
            result.add(rng.randrange(total))

        logger.debug("dense sampler: %d draws for %d indices", trials, m)
        return result
