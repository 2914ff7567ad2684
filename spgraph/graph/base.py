"""Graph and edge contracts consumed by the shortest-path engine.

A searchable graph only has to answer one question: which ``(node, edge)``
hops leave a given node. Edges in turn only have to price themselves against
a caller-supplied context. Storage, node identity and edge payloads stay with
the caller.
"""

from __future__ import annotations

import abc
from typing import (
    TYPE_CHECKING,
    Any,
    Generic,
    Hashable,
    List,
    Optional,
    Protocol,
    Tuple,
    TypeVar,
    runtime_checkable,
)

from spgraph.types.base import Cost

if TYPE_CHECKING:
    from spgraph.config import SpfConfig
    from spgraph.model.path import ShortestPath

NodeT = TypeVar("NodeT", bound=Hashable)
EdgeT = TypeVar("EdgeT", bound="Edge")


@runtime_checkable
class Edge(Protocol):
    """Protocol for a traversable edge.

    ``cost`` must be a pure function of the edge and ``context``; replaying a
    search with the same context has to produce identical costs.
    """

    def cost(self, context: Any) -> Cost:
        """Return the cost of traversing this edge under ``context``."""
        ...


class Graph(abc.ABC, Generic[NodeT, EdgeT]):
    """Abstract graph that the engine can traverse.

    Subclasses must override :meth:`neighbors`. Nodes must be hashable,
    comparable for equality and totally ordered; edges must satisfy
    :class:`Edge`.
    """

    @abc.abstractmethod
    def neighbors(self, node: NodeT) -> List[Tuple[NodeT, EdgeT]]:
        """Return every ``(adjacent_node, edge)`` hop leaving ``node``.

        Undirected graphs return both directions of an edge. Unknown nodes
        and dead ends return an empty list. Order is not significant.
        """
        ...

    def shortest_path(
        self,
        context: Any,
        start: NodeT,
        *,
        zero: Cost = 0,
        config: Optional[SpfConfig] = None,
    ) -> ShortestPath[NodeT, EdgeT]:
        """Run a single-source shortest-path search from ``start``.

        Args:
            context: Read-only value passed to every ``Edge.cost`` call.
            start: Source node.
            zero: Identity cost assigned to ``start``.
            config: Search configuration; defaults to ``SPF_CONFIG``.

        Returns:
            ShortestPath holding the predecessor tree rooted at ``start``.
        """
        from spgraph.algorithms.spf import shortest_path

        return shortest_path(self, context, start, zero=zero, config=config)
