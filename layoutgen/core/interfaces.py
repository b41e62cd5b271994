"""
Layout Interface

Defines the EdgeProducer Protocol, the contract every layout satisfies.

Callers that treat layouts polymorphically depend on this Protocol rather
than on concrete classes; no common base class is required.
"""

from __future__ import annotations

from typing import List, Protocol, Tuple, runtime_checkable


@runtime_checkable
class EdgeProducer(Protocol):
    """
    Port for anything that materializes a directed edge list.

    Any class implementing ``build_edges`` satisfies this protocol
    via structural subtyping.
    """

    def build_edges(self) -> List[Tuple[int, int]]:
        """Return the ordered sequence of (predecessor, successor) pairs."""
        ...
