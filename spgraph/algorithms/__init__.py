"""Search algorithms operating on the `Graph` contract."""

from spgraph.algorithms.spf import shortest_path

__all__ = ["shortest_path"]
