"""Shared typing constructs for spgraph.

Public aliases and enums used by the engine, the result model and the
configuration layer. Contains no runtime logic beyond enum parsing.
"""

from spgraph.types.base import Cost, FrontierSelect, PathStatus

__all__ = [
    "Cost",
    "FrontierSelect",
    "PathStatus",
]
