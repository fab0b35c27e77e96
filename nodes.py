"""
Node record for the rank graph.

A node is addressed by its dense integer position. Incoming edges are kept
as source positions (duplicates allowed); outgoing edges are only counted.
"""

from dataclasses import dataclass, field
from typing import Generic, Hashable, List, TypeVar

K = TypeVar("K", bound=Hashable)


@dataclass
class GraphNode(Generic[K]):
    """
    Single node in the graph's node store.
    """
    key: K
    incoming: List[int] = field(default_factory=list)  # source positions
    outgoing: int = 0
