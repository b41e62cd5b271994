"""
Communication Layout

Layered computation grid with relay vertices between layers.
"""
import logging
from dataclasses import dataclass
from typing import List

from layoutgen.core import EdgeList, require_int

logger = logging.getLogger(__name__)


def create_layers(nodes_per_layer: int, n_layers: int) -> List[List[int]]:
    """Number the grid row by row: layer ``k`` holds ``k*w .. (k+1)*w - 1``."""
    return [
        list(range(k * nodes_per_layer, (k + 1) * nodes_per_layer))
        for k in range(n_layers)
    ]


@dataclass(frozen=True)
class CommLayout:
    """
    ``n_layers`` rows of ``inside + outside`` vertices.

    Each vertex points at its left, lower and right neighbour in the next
    row. The last ``outside`` columns additionally talk through one
    communication vertex per pair of consecutive rows, numbered after the
    grid. All edges lead to a later row, so the result is a DAG.
    """
    inside: int
    outside: int
    n_layers: int

    def __post_init__(self) -> None:
        require_int("inside", self.inside, minimum=0)
        require_int("outside", self.outside, minimum=0)
        require_int("n_layers", self.n_layers, minimum=0)

    @classmethod
    def new(cls, inside: int, outside: int, n_layers: int) -> "CommLayout":
        return cls(inside=inside, outside=outside, n_layers=n_layers)

    @property
    def width(self) -> int:
        return self.inside + self.outside

    @property
    def is_empty(self) -> bool:
        return self.n_layers <= 1 or self.width == 0

    @property
    def node_count(self) -> int:
        if self.is_empty:
            return 0
        comm_vertices = self.n_layers - 1 if self.outside else 0
        return self.width * self.n_layers + comm_vertices

    def build_edges(self) -> EdgeList:
        if self.is_empty:
            return []

        layers = create_layers(self.width, self.n_layers)
        edges: EdgeList = []

        for upper, lower in zip(layers, layers[1:]):
            for i, vertex in enumerate(upper):
                if i > 0:
                    edges.append((vertex, lower[i - 1]))
                edges.append((vertex, lower[i]))
                if i + 1 < self.width:
                    edges.append((vertex, lower[i + 1]))

        if self.outside:
            comm = self.width * self.n_layers
            for upper, lower in zip(layers, layers[1:]):
                for vertex_upper, vertex_lower in zip(upper[self.inside:], lower[self.inside:]):
                    edges.append((vertex_upper, comm))
                    edges.append((comm, vertex_lower))
                comm += 1

        logger.debug(
            "Comm layout: %dx%d grid (+%d outside) -> %d edges",
            self.n_layers, self.width, self.outside, len(edges),
        )
        return edges
