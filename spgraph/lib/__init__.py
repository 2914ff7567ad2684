"""Integrations with third-party graph libraries."""

from spgraph.lib.nx import NxEdge, NxGraph, to_networkx

__all__ = [
    "NxEdge",
    "NxGraph",
    "to_networkx",
]
