"""
Layout Generation Package
"""
from .structured import StructuredLayout
from .random_graph import RandomLayout, AcyclicRandomLayout
from .comm import CommLayout, create_layers
from .models import LayoutConfig, LAYOUT_KINDS, SCALE_PRESETS
from .service import GenerationService, build_layout, generate_edges

__all__ = [
    "StructuredLayout",
    "RandomLayout",
    "AcyclicRandomLayout",
    "CommLayout",
    "create_layers",
    "LayoutConfig",
    "LAYOUT_KINDS",
    "SCALE_PRESETS",
    "GenerationService",
    "build_layout",
    "generate_edges",
]
