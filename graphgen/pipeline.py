"""Generation pipeline: generator + creators + batch size, and the writer that runs it."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Callable, List, Optional

from .config import settings
from .core.relationship_generator import RelationshipGenerator
from .creators import NodeCreator, RelationshipCreator
from .profiling import timeit

logger = logging.getLogger("graphgen.pipeline")

ProgressCallback = Callable[[int, int], None]


class BasicGeneratorConfiguration:
    """
    Всё настраивается через конструктор, кроме batch_size (всегда 1000).

    Число узлов не хранится отдельно, а берётся из конфигурации генератора,
    чтобы эти два значения не разъехались.
    """

    def __init__(
        self,
        relationship_generator: RelationshipGenerator,
        node_creator: NodeCreator,
        relationship_creator: RelationshipCreator,
    ) -> None:
        self._relationship_generator = relationship_generator
        self._node_creator = node_creator
        self._relationship_creator = relationship_creator

    @property
    def number_of_nodes(self) -> int:
        return self._relationship_generator.number_of_nodes

    @property
    def relationship_generator(self) -> RelationshipGenerator:
        return self._relationship_generator

    @property
    def node_creator(self) -> NodeCreator:
        return self._node_creator

    @property
    def relationship_creator(self) -> RelationshipCreator:
        return self._relationship_creator

    @property
    def batch_size(self) -> int:
        return settings.DEFAULT_BATCH_SIZE


@dataclass
class GenerationReport:
    """What a single generate_graph run wrote."""

    number_of_nodes: int
    number_of_relationships: int
    node_batches: int
    relationship_batches: int


class GraphGenerator:
    """Materializes a generated edge list through the configured creators, batch by batch."""

    @timeit("generate_graph", count=lambda report: report.number_of_relationships, unit="relationships")
    def generate_graph(
        self,
        config: BasicGeneratorConfiguration,
        progress_cb: Optional[ProgressCallback] = None,
    ) -> GenerationReport:
        # рёбра считаем до записи узлов: кривая конфигурация не должна оставить полграфа
        edges = config.relationship_generator.generate_edges()
        nodes, node_batches = self._generate_nodes(config, progress_cb)
        n_rels, rel_batches = self._generate_relationships(config, nodes, edges, progress_cb)
        logger.info(
            "graph written: %d nodes (%d batches), %d relationships (%d batches)",
            len(nodes),
            node_batches,
            n_rels,
            rel_batches,
        )
        return GenerationReport(
            number_of_nodes=len(nodes),
            number_of_relationships=n_rels,
            node_batches=node_batches,
            relationship_batches=rel_batches,
        )

    def _generate_nodes(
        self,
        config: BasicGeneratorConfiguration,
        progress_cb: Optional[ProgressCallback],
    ) -> tuple[List[Any], int]:
        total = config.number_of_nodes
        batch_size = max(1, int(config.batch_size))
        nodes: List[Any] = []
        batches = 0
        for start in range(0, total, batch_size):
            stop = min(total, start + batch_size)
            for index in range(start, stop):
                nodes.append(config.node_creator.create_node(index))
            batches += 1
            logger.debug("nodes batch %d: %d/%d", batches, stop, total)
            if progress_cb is not None:
                progress_cb(stop, total)
        return nodes, batches

    def _generate_relationships(
        self,
        config: BasicGeneratorConfiguration,
        nodes: List[Any],
        edges: list,
        progress_cb: Optional[ProgressCallback],
    ) -> tuple[int, int]:
        total = len(edges)
        batch_size = max(1, int(config.batch_size))
        batches = 0
        for start in range(0, total, batch_size):
            stop = min(total, start + batch_size)
            for pair in edges[start:stop]:
                config.relationship_creator.create_relationship(nodes[pair.first], nodes[pair.second])
            batches += 1
            logger.debug("relationships batch %d: %d/%d", batches, stop, total)
            if progress_cb is not None:
                progress_cb(stop, total)
        return total, batches
