"""
Random Layouts

Uniformly sampled edge lists, with and without an acyclicity guarantee.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Optional, Set

import networkx as nx

from layoutgen.core import Edge, EdgeList, InvalidParameter, require_int

logger = logging.getLogger(__name__)


def _resolve_rng(seed: Optional[int], rng: Optional[random.Random]) -> random.Random:
    """Injected generator wins; otherwise a fresh one per call, seeded or not."""
    if rng is not None:
        return rng
    return random.Random(seed)


def _check_source(seed: Optional[int], rng: Optional[random.Random]) -> None:
    if seed is not None and rng is not None:
        raise InvalidParameter("seed", seed, "pass either a seed or an rng, not both")
    if seed is not None:
        require_int("seed", seed)


@dataclass(frozen=True)
class RandomLayout:
    """
    Edge list of ``node_count`` pairs drawn uniformly from ``[0, node_count)``.

    The single sizing parameter is both the node universe and the number of
    edges. Self-loops are redrawn; duplicates and cycles are allowed.

    With a ``seed`` every call of ``build_edges`` returns the same edges.
    With an injected ``rng`` successive calls continue that generator.
    """
    node_count: int
    seed: Optional[int] = None
    rng: Optional[random.Random] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        # a single node admits no pair without a self-loop
        require_int("node_count", self.node_count, minimum=2)
        _check_source(self.seed, self.rng)

    @classmethod
    def new(
        cls,
        node_count: int,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> "RandomLayout":
        return cls(node_count=node_count, seed=seed, rng=rng)

    def build_edges(self) -> EdgeList:
        rng = _resolve_rng(self.seed, self.rng)
        edges: EdgeList = []
        redraws = 0

        while len(edges) < self.node_count:
            predecessor = rng.randrange(self.node_count)
            successor = rng.randrange(self.node_count)
            if predecessor == successor:
                redraws += 1
                continue
            edges.append((predecessor, successor))

        logger.debug(
            "Random layout: %d edges (%d self-loop redraws)", len(edges), redraws
        )
        return edges


@dataclass(frozen=True)
class AcyclicRandomLayout:
    """
    Random DAG grown one edge at a time from the seed edge ``(0, 1)``.

    Each new edge starts at an endpoint of a randomly chosen existing edge
    and ends at a node drawn from ``[0, num_edges]``. Self-loops, duplicates
    and edges that would close a cycle are rejected and redrawn.
    """
    num_edges: int
    seed: Optional[int] = None
    rng: Optional[random.Random] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        require_int("num_edges", self.num_edges, minimum=1)
        _check_source(self.seed, self.rng)

    @classmethod
    def new(
        cls,
        num_edges: int,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> "AcyclicRandomLayout":
        return cls(num_edges=num_edges, seed=seed, rng=rng)

    @property
    def node_count(self) -> int:
        return self.num_edges + 1

    def build_edges(self) -> EdgeList:
        rng = _resolve_rng(self.seed, self.rng)
        edges: EdgeList = [(0, 1)]
        seen: Set[Edge] = {(0, 1)}
        graph = nx.DiGraph(edges)
        rejected = 0

        while len(edges) < self.num_edges:
            anchor = edges[rng.randrange(len(edges))]
            predecessor = anchor[rng.randrange(2)]
            successor = rng.randrange(self.node_count)
            candidate = (predecessor, successor)

            if predecessor == successor or candidate in seen:
                rejected += 1
                continue
            if successor in graph and nx.has_path(graph, successor, predecessor):
                rejected += 1
                continue

            edges.append(candidate)
            seen.add(candidate)
            graph.add_edge(predecessor, successor)

        logger.debug(
            "Acyclic random layout: %d edges (%d candidates rejected)",
            len(edges), rejected,
        )
        return edges
