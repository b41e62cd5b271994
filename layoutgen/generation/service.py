"""
Layout Generation Service
"""
import logging
import time
from dataclasses import fields
from typing import Any, Optional

from layoutgen.config import Settings
from layoutgen.core import EdgeList, EdgeProducer, GeneratedGraph, InvalidParameter

from .comm import CommLayout
from .models import LayoutConfig
from .random_graph import AcyclicRandomLayout, RandomLayout
from .structured import StructuredLayout

logger = logging.getLogger(__name__)


def build_layout(config: LayoutConfig) -> EdgeProducer:
    """Construct the layout named by ``config.kind``."""
    params = config.to_params()
    logger.debug("Building %s layout with %s", config.kind, params)
    if config.kind == "structured":
        return StructuredLayout.new_from_num_nodes(**params)
    if config.kind == "random":
        return RandomLayout.new(**params)
    if config.kind == "comm":
        return CommLayout.new(**params)
    if config.kind == "acyclic_random":
        return AcyclicRandomLayout.new(**params)
    raise InvalidParameter("kind", config.kind, "no layout registered")


def _node_count(layout: EdgeProducer) -> Optional[int]:
    return getattr(layout, "node_count", None)


class GenerationService:
    """Service for generating synthetic edge lists."""

    def __init__(
        self,
        kind: str = "structured",
        scale: str = "medium",
        seed: Optional[int] = 42,
        config: Optional[LayoutConfig] = None,
    ) -> None:
        if config is not None:
            self.config = config
        else:
            self.config = LayoutConfig.from_scale(kind, scale, seed)

        self.layout = build_layout(self.config)
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings: Settings, kind: str = "structured") -> "GenerationService":
        """Create a service sized and seeded from environment settings."""
        settings.configure_logging()
        return cls(kind=kind, scale=settings.scale, seed=settings.seed)

    def generate(self) -> GeneratedGraph:
        """Build the edges and attach the parameters that produced them."""
        start = time.perf_counter()
        edges = self.layout.build_edges()
        elapsed = time.perf_counter() - start
        params = self.config.to_params()

        graph = GeneratedGraph(
            edges=edges,
            metadata={
                "kind": self.config.kind,
                "params": params,
                # only the random kinds consume a seed
                "seed": params.get("seed"),
                "node_count": _node_count(self.layout),
                "edge_count": len(edges),
            },
        )
        self.logger.info(
            "Generated %s layout: %d edges in %.3fs",
            self.config.kind, len(edges), elapsed,
        )
        return graph


_GENERATE_KEYS = {f.name for f in fields(LayoutConfig)} | {"scale", "num_edges"}


def generate_edges(kind: str = "structured", **kwargs: Any) -> EdgeList:
    """Convenience function building a single edge list from keyword parameters."""
    unknown = sorted(set(kwargs) - _GENERATE_KEYS)
    if unknown:
        raise InvalidParameter(unknown[0], kwargs[unknown[0]], "unknown layout parameter")
    config = LayoutConfig.from_dict({"kind": kind, **kwargs})
    return build_layout(config).build_edges()
