"""Search result model: predecessor trees and reconstructed paths."""

from spgraph.model.path import PathSequence, ShortestPath, path_cost

__all__ = [
    "PathSequence",
    "ShortestPath",
    "path_cost",
]
