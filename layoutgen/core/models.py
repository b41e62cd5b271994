"""
Core Value Objects
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Tuple

import networkx as nx

#: A directed edge ``(predecessor, successor)`` between zero-based node indices.
Edge = Tuple[int, int]
EdgeList = List[Edge]


def to_networkx(edges: Iterable[Edge], node_count: int = 0) -> nx.DiGraph:
    """Build a DiGraph from an edge list, adding isolated nodes up to ``node_count``."""
    graph = nx.DiGraph()
    graph.add_nodes_from(range(node_count))
    graph.add_edges_from(edges)
    return graph


@dataclass
class GeneratedGraph:
    """Edge list produced by a layout together with its generation metadata."""
    edges: EdgeList
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def node_count(self) -> int:
        declared = self.metadata.get("node_count")
        if declared is not None:
            return declared
        if not self.edges:
            return 0
        return max(max(p, s) for p, s in self.edges) + 1

    @property
    def is_acyclic(self) -> bool:
        return nx.is_directed_acyclic_graph(self.to_networkx())

    def to_networkx(self) -> nx.DiGraph:
        graph = to_networkx(self.edges, self.node_count)
        graph.graph.update(self.metadata)
        return graph

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metadata": dict(self.metadata),
            "edges": [list(edge) for edge in self.edges],
        }
