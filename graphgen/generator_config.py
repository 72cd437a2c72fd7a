"""Typed configurations for relationship generators.

Конструктор никогда не падает: проверка допустимости живёт в is_valid(),
и её обязан вызвать генератор перед запуском.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
import numbers
import operator
from typing import Any, Dict, Optional


def as_count(value: Any) -> Optional[int]:
    """Integral count (int, np.int64, ...) as a plain int; None for anything else.

    bool тоже Integral, но счётчиком не считается.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        return None
    return operator.index(value)


def max_edges_for(number_of_nodes: int) -> int:
    """Maximum number of distinct undirected edges without self-loops.

    Python int не переполняется, так что n*(n-1)/2 честный для любых n.
    """
    n = operator.index(number_of_nodes)
    if n < 2:
        return 0
    return n * (n - 1) // 2


@dataclass(frozen=True)
class NumberOfNodesBasedConfig:
    """Base config for generators whose node universe is ``range(number_of_nodes)``."""

    number_of_nodes: int

    def is_valid(self) -> bool:
        """Check that the node count can carry at least one edge."""
        n = as_count(self.number_of_nodes)
        return n is not None and n >= 2

    def as_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["model"] = self.model_name()
        return out

    @classmethod
    def model_name(cls) -> str:
        return "number_of_nodes"


@dataclass(frozen=True)
class ErdosRenyiConfig(NumberOfNodesBasedConfig):
    """
    Config for the Erdos-Renyi G(n, m) generator.

    number_of_nodes: size of the node universe ``[0, number_of_nodes)``.
    number_of_edges: exact number of distinct edges to draw,
        permitted range ``1 .. n*(n-1)/2``.
    """

    number_of_edges: int

    @property
    def max_edges(self) -> int:
        return max_edges_for(self.number_of_nodes)

    @property
    def density(self) -> float:
        """Requested edges as a fraction of all possible edges (0.0 if undefined)."""
        total = self.max_edges
        if total == 0:
            return 0.0
        return float(self.number_of_edges) / float(total)

    def is_valid(self) -> bool:
        m = as_count(self.number_of_edges)
        if m is None:
            return False
        return super().is_valid() and 0 < m <= self.max_edges

    @classmethod
    def model_name(cls) -> str:
        return "erdos_renyi"


@dataclass(frozen=True)
class CompleteGraphConfig(NumberOfNodesBasedConfig):
    """Config for the complete graph: every pair of nodes gets an edge."""

    @property
    def number_of_edges(self) -> int:
        return max_edges_for(self.number_of_nodes)

    @classmethod
    def model_name(cls) -> str:
        return "complete"
