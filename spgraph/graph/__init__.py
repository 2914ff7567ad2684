"""Graph contracts and reference implementations.

`base` defines the `Graph`/`Edge` contracts the engine consumes; `arena`
provides an integer-indexed graph built on those contracts.
"""

from spgraph.graph.arena import ArenaGraph, WeightedEdge
from spgraph.graph.base import Edge, Graph

__all__ = [
    "ArenaGraph",
    "Edge",
    "Graph",
    "WeightedEdge",
]
