"""Node/relationship creators: where generated indices become store objects."""

from __future__ import annotations

from typing import Any, Hashable, Protocol

import networkx as nx


class NodeCreator(Protocol):
    def create_node(self, index: int) -> Any:
        """Create a store node for generated node ``index`` and return it."""
        ...


class RelationshipCreator(Protocol):
    def create_relationship(self, first: Any, second: Any) -> Any:
        """Connect two store nodes and return the relationship."""
        ...


class NetworkXNodeCreator:
    """Adds labelled nodes to a NetworkX graph; the node key is the index itself."""

    def __init__(self, graph: nx.Graph, label: str = "Node") -> None:
        self.graph = graph
        self.label = label

    def create_node(self, index: int) -> Hashable:
        node = int(index)
        self.graph.add_node(node, label=self.label)
        return node


class NetworkXRelationshipCreator:
    """Adds typed, unit-weight edges to a NetworkX graph."""

    def __init__(self, graph: nx.Graph, rel_type: str = "RELATED") -> None:
        self.graph = graph
        self.rel_type = rel_type

    def create_relationship(self, first: Hashable, second: Hashable) -> tuple:
        if first == second:
            raise ValueError(f"refusing to create self-loop on node {first!r}")
        self.graph.add_edge(first, second, type=self.rel_type, weight=1.0)
        return (first, second)
