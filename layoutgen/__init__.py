"""
layoutgen - Synthetic Directed Graph Layouts

Edge-list generators for DAG scheduler and dependency resolver benchmarks.
"""
from .core import Edge, EdgeProducer, InvalidParameter, GeneratedGraph
from .config import Settings
from .generation import (
    StructuredLayout,
    RandomLayout,
    CommLayout,
    AcyclicRandomLayout,
    GenerationService,
    LayoutConfig,
    build_layout,
    generate_edges,
)

__version__ = "0.1.0"

__all__ = [
    "Edge",
    "EdgeProducer",
    "InvalidParameter",
    "GeneratedGraph",
    "Settings",
    "StructuredLayout",
    "RandomLayout",
    "CommLayout",
    "AcyclicRandomLayout",
    "GenerationService",
    "LayoutConfig",
    "build_layout",
    "generate_edges",
]
