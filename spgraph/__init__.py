"""spgraph: generic single-source shortest paths.

spgraph runs Dijkstra's algorithm over any graph that can list the hops
leaving a node. Callers own their node and edge types; edges price themselves
against a read-only context supplied per search.

Primary API:
    Graph - Abstract graph contract (implement ``neighbors``)
    shortest_path() - Build the shortest-path tree from a start node
    ShortestPath - Predecessor tree with ``prev`` and ``sequence``
    PathSequence - Reconstructed goal-to-start path with completion status
    ArenaGraph - Integer-indexed graph implementing the contract
    NxGraph - Adapter for NetworkX graphs

Example:
    from spgraph import ArenaGraph

    graph = ArenaGraph(3)
    graph.add_edge(0, 1, 10)
    graph.add_edge(1, 2, 5)

    result = graph.shortest_path(None, 0)
    path = result.sequence(0, 2)
    assert path.complete
    assert result.nodes(0, 2) == [2, 1, 0]
"""

from __future__ import annotations

from spgraph import logging
from spgraph._version import __version__
from spgraph.algorithms.spf import shortest_path
from spgraph.config import SPF_CONFIG, SpfConfig
from spgraph.graph.arena import ArenaGraph, WeightedEdge
from spgraph.graph.base import Edge, Graph
from spgraph.lib.nx import NxEdge, NxGraph, to_networkx
from spgraph.model.path import PathSequence, ShortestPath, path_cost
from spgraph.types.base import Cost, FrontierSelect, PathStatus

__all__ = [
    # Version
    "__version__",
    # Contracts
    "Graph",
    "Edge",
    # Engine
    "shortest_path",
    # Results
    "ShortestPath",
    "PathSequence",
    "path_cost",
    # Types
    "Cost",
    "FrontierSelect",
    "PathStatus",
    # Configuration
    "SpfConfig",
    "SPF_CONFIG",
    # Graph implementations
    "ArenaGraph",
    "WeightedEdge",
    # Library integrations (NetworkX)
    "NxGraph",
    "NxEdge",
    "to_networkx",
    # Utilities
    "logging",
]
