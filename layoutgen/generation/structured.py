"""
Structured Layout

Fan-out DAG over the natural node ordering.
"""
import logging
from dataclasses import dataclass

from layoutgen.core import EdgeList, require_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StructuredLayout:
    """
    Deterministic DAG where node ``i`` points at its nearest higher-indexed
    neighbours ``i+1 .. i+edges_per_node``.

    Every edge satisfies ``predecessor < successor``, so the result is
    acyclic without a separate cycle check. Nodes near the tail get fewer
    edges once no higher-indexed successors remain.
    """
    node_count: int
    edges_per_node: int

    def __post_init__(self) -> None:
        require_int("node_count", self.node_count, minimum=1)
        require_int("edges_per_node", self.edges_per_node, minimum=0)

    @classmethod
    def new_from_num_nodes(cls, node_count: int, edges_per_node: int) -> "StructuredLayout":
        return cls(node_count=node_count, edges_per_node=edges_per_node)

    def build_edges(self) -> EdgeList:
        edges: EdgeList = []
        last = self.node_count - 1
        for predecessor in range(self.node_count):
            stop = min(predecessor + self.edges_per_node, last)
            for successor in range(predecessor + 1, stop + 1):
                edges.append((predecessor, successor))

        logger.debug(
            "Structured layout: %d nodes, fan-out %d -> %d edges",
            self.node_count, self.edges_per_node, len(edges),
        )
        return edges
