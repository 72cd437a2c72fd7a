"""Base contract for random-graph relationship generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
import logging
import random
from typing import Generic, List, Optional, TypeVar, Union

from ..generator_config import NumberOfNodesBasedConfig
from ..pair import UnorderedPair
from ..profiling import timeit

logger = logging.getLogger("graphgen.generator")

C = TypeVar("C", bound=NumberOfNodesBasedConfig)

RandomSource = Union[random.Random, int, None]


class InvalidConfigurationError(ValueError):
    """Generator was handed a configuration that fails ``is_valid()``."""


class GenerationDidNotConvergeError(RuntimeError):
    """Sampling loop hit its trial ceiling before collecting enough edges."""


def make_rng(rng: RandomSource = None) -> random.Random:
    """Normalize a seed / Random / None into a private ``random.Random``."""
    if isinstance(rng, random.Random):
        return rng
    if rng is None:
        return random.Random()
    return random.Random(int(rng))


class RelationshipGenerator(ABC, Generic[C]):
    """
    Генератор рёбер для одной конфигурации.

    Выдаёт список UnorderedPair[int] над узлами ``range(number_of_nodes)``:
    ровно столько рёбер, сколько требует модель, без дублей и петель.
    Источник случайности передаётся явно, глобальный ``random`` не трогаем.
    """

    def __init__(self, configuration: C, rng: RandomSource = None) -> None:
        self._configuration = configuration
        self._rng = make_rng(rng)

    @property
    def configuration(self) -> C:
        return self._configuration

    @property
    def number_of_nodes(self) -> int:
        return self._configuration.number_of_nodes

    @property
    def rng(self) -> random.Random:
        return self._rng

    @timeit("generate_edges", count=len)
    def generate_edges(self) -> List[UnorderedPair[int]]:
        """Validate the configuration and produce the edge list."""
        if not self._configuration.is_valid():
            raise InvalidConfigurationError(
                f"invalid configuration for {type(self).__name__}: {self._configuration!r}"
            )
        return self._do_generate_edges()

    @abstractmethod
    def _do_generate_edges(self) -> List[UnorderedPair[int]]:
        """Model-specific edge generation; configuration is already valid here."""


def trial_ceiling(number_of_edges: int, per_edge: int, override: Optional[int] = None) -> int:
    """Upper bound on random draws before giving up."""
    if override is not None:
        return int(override)
    return max(1, int(per_edge) * int(number_of_edges))
