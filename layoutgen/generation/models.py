"""
Layout Configuration Models
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from layoutgen.core import InvalidParameter

LAYOUT_KINDS = ("structured", "random", "comm", "acyclic_random")

SCALE_PRESETS: Dict[str, Dict[str, int]] = {
    "tiny":   {"node_count": 10,    "edges_per_node": 2, "inside": 2,  "outside": 1, "n_layers": 3},
    "small":  {"node_count": 100,   "edges_per_node": 3, "inside": 6,  "outside": 2, "n_layers": 8},
    "medium": {"node_count": 1000,  "edges_per_node": 3, "inside": 12, "outside": 4, "n_layers": 20},
    "large":  {"node_count": 5000,  "edges_per_node": 4, "inside": 24, "outside": 8, "n_layers": 50},
    "xlarge": {"node_count": 20000, "edges_per_node": 5, "inside": 48, "outside": 16, "n_layers": 100},
}


@dataclass
class LayoutConfig:
    """Configuration selecting a layout kind and its sizing parameters."""
    kind: str = "structured"
    node_count: int = 1000
    edges_per_node: int = 3
    inside: int = 12
    outside: int = 4
    n_layers: int = 20
    seed: Optional[int] = 42

    def __post_init__(self) -> None:
        if self.kind not in LAYOUT_KINDS:
            raise InvalidParameter(
                "kind", self.kind, f"expected one of {', '.join(LAYOUT_KINDS)}"
            )

    @classmethod
    def from_scale(cls, kind: str = "structured", scale: str = "medium", seed: Optional[int] = 42) -> "LayoutConfig":
        if scale not in SCALE_PRESETS:
            raise InvalidParameter(
                "scale", scale, f"expected one of {', '.join(SCALE_PRESETS)}"
            )
        return cls(kind=kind, seed=seed, **SCALE_PRESETS[scale])

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LayoutConfig":
        layout_data = data.get("layout", data)
        if layout_data is None:
            layout_data = {}
        if not isinstance(layout_data, dict):
            raise InvalidParameter("layout", layout_data, "section must be a mapping")
        scale = layout_data.get("scale")
        base = SCALE_PRESETS.get(scale, {}) if scale else {}
        if scale and not base:
            raise InvalidParameter(
                "scale", scale, f"expected one of {', '.join(SCALE_PRESETS)}"
            )

        def pick(key: str, default: Any) -> Any:
            return layout_data.get(key, base.get(key, default))

        return cls(
            kind=layout_data.get("kind", "structured"),
            node_count=layout_data.get("node_count", _edge_count_default(layout_data, base)),
            edges_per_node=pick("edges_per_node", 3),
            inside=pick("inside", 12),
            outside=pick("outside", 4),
            n_layers=pick("n_layers", 20),
            seed=layout_data.get("seed", 42),
        )

    @classmethod
    def from_yaml(cls, text: str) -> "LayoutConfig":
        """Parse a YAML document (already read by the caller) into a config."""
        data = yaml.safe_load(text) or {}
        if not isinstance(data, dict):
            raise InvalidParameter("yaml", text, "top level must be a mapping")
        return cls.from_dict(data)

    def to_params(self) -> Dict[str, Any]:
        """Parameters actually consumed by the selected layout kind."""
        if self.kind == "structured":
            return {"node_count": self.node_count, "edges_per_node": self.edges_per_node}
        if self.kind == "random":
            return {"node_count": self.node_count, "seed": self.seed}
        if self.kind == "comm":
            return {"inside": self.inside, "outside": self.outside, "n_layers": self.n_layers}
        return {"num_edges": self.node_count, "seed": self.seed}


def _edge_count_default(layout_data: Dict[str, Any], base: Dict[str, int]) -> int:
    # acyclic_random is sized by num_edges; it shares the node_count slot
    num_edges = layout_data.get("num_edges")
    if num_edges is None:
        return base.get("node_count", 1000)
    if layout_data.get("kind") != "acyclic_random":
        raise InvalidParameter("num_edges", num_edges, "only applies to the acyclic_random kind")
    node_count = layout_data.get("node_count")
    if node_count is not None and node_count != num_edges:
        raise InvalidParameter(
            "num_edges", num_edges, f"conflicts with node_count={node_count!r}"
        )
    return num_edges
