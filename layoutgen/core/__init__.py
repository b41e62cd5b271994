"""
Core Package

Edge types, the layout protocol and the error taxonomy.
"""
from .errors import InvalidParameter, require_int
from .interfaces import EdgeProducer
from .models import Edge, EdgeList, GeneratedGraph, to_networkx

__all__ = [
    "InvalidParameter",
    "require_int",
    "EdgeProducer",
    "Edge",
    "EdgeList",
    "GeneratedGraph",
    "to_networkx",
]
