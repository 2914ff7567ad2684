"""NetworkX integration.

`NxGraph` exposes any NetworkX graph (simple or multi, directed or
undirected) through the :class:`~spgraph.graph.base.Graph` contract, and
`to_networkx` exports an :class:`~spgraph.graph.arena.ArenaGraph` for use with
NetworkX tooling.

Example:
    >>> import networkx as nx
    >>> from spgraph.lib.nx import NxGraph
    >>>
    >>> G = nx.Graph()
    >>> G.add_edge("A", "B", weight=2)
    >>> G.add_edge("B", "C", weight=3)
    >>>
    >>> result = NxGraph(G).shortest_path(None, "A")
    >>> result.nodes("A", "C")
    ['C', 'B', 'A']
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Hashable,
    List,
    Mapping,
    Optional,
    Tuple,
    Union,
)

import networkx as nx

from spgraph.graph.base import Graph
from spgraph.types.base import Cost

if TYPE_CHECKING:
    from spgraph.graph.arena import ArenaGraph

#: ``(u, v, attrs, context) -> cost`` callable for context-dependent weights.
WeightFunc = Callable[[Hashable, Hashable, Mapping[str, Any], Any], Cost]

#: Edge reference: ``(u, v)`` for simple graphs, ``(u, v, key)`` for multigraphs.
EdgeRef = Tuple[Hashable, ...]


@dataclass(frozen=True)
class NxEdge:
    """One traversable hop of a NetworkX graph.

    Equality and hashing use ``ref`` only, so two hops over the same stored
    edge compare equal regardless of attribute contents.

    Attributes:
        ref: ``(u, v)`` or ``(u, v, key)`` as traversed.
        attrs: The live NetworkX attribute dict of the edge.
        weight: Attribute name or :data:`WeightFunc` used by :meth:`cost`.
        default: Cost used when the weight attribute is missing.
    """

    ref: EdgeRef
    attrs: Mapping[str, Any] = field(compare=False, repr=False)
    weight: Union[str, WeightFunc] = field(default="weight", compare=False, repr=False)
    default: Cost = field(default=1, compare=False, repr=False)

    @property
    def u(self) -> Hashable:
        return self.ref[0]

    @property
    def v(self) -> Hashable:
        return self.ref[1]

    def cost(self, context: Any) -> Cost:
        """Return the hop cost.

        With a callable ``weight`` the context is handed to it. With an
        attribute name the context may be None or a mapping of edge
        reference to replacement cost.

        Mapping keys are matched against ``ref`` in the direction of travel.
        An undirected edge ``A-B`` is hopped as ``("A", "B")`` from ``A`` and
        as ``("B", "A")`` from ``B``; list both keys to override it both ways.
        """
        if callable(self.weight):
            return self.weight(self.u, self.v, self.attrs, context)
        if context is not None and self.ref in context:
            return context[self.ref]
        return self.attrs.get(self.weight, self.default)


class NxGraph(Graph[Hashable, NxEdge]):
    """Adapter presenting a NetworkX graph as a searchable graph.

    Undirected graphs yield each edge from both endpoints; multigraphs yield
    one hop per parallel edge. The wrapped graph is read live, not copied.

    Args:
        G: Any NetworkX graph.
        weight: Edge attribute holding the cost, or a :data:`WeightFunc`.
        default: Cost for edges lacking the weight attribute.
    """

    def __init__(
        self,
        G: nx.Graph,
        weight: Union[str, WeightFunc] = "weight",
        default: Cost = 1,
    ) -> None:
        self.G = G
        self.weight = weight
        self.default = default

    def __len__(self) -> int:
        return self.G.number_of_nodes()

    def __contains__(self, node: object) -> bool:
        return node in self.G

    def neighbors(self, node: Hashable) -> List[Tuple[Hashable, NxEdge]]:
        if node not in self.G:
            return []

        hops: List[Tuple[Hashable, NxEdge]] = []
        if self.G.is_multigraph():
            for nbr, keydict in self.G.adj[node].items():
                for key, attrs in keydict.items():
                    hops.append((nbr, self._edge((node, nbr, key), attrs)))
        else:
            for nbr, attrs in self.G.adj[node].items():
                hops.append((nbr, self._edge((node, nbr), attrs)))
        return hops

    def _edge(self, ref: EdgeRef, attrs: Mapping[str, Any]) -> NxEdge:
        return NxEdge(ref, attrs, self.weight, self.default)


def to_networkx(
    graph: ArenaGraph,
    *,
    weight_attr: str = "weight",
    context: Optional[Mapping[int, Cost]] = None,
) -> nx.MultiDiGraph:
    """Export an ArenaGraph as a NetworkX ``MultiDiGraph``.

    Undirected arena edges become two directed edges sharing the arena edge
    id as key. Node labels are stored under the ``label`` attribute.

    Args:
        graph: Source arena graph.
        weight_attr: Attribute name for edge costs.
        context: Optional edge-id overrides, priced as the engine would.

    Returns:
        A new ``networkx.MultiDiGraph`` keyed by arena indices.
    """
    G = nx.MultiDiGraph()
    for node in graph:
        G.add_node(node, label=graph.label(node))
    for edge in graph.edges:
        attrs = {weight_attr: edge.cost(context)}
        G.add_edge(edge.src, edge.dst, key=edge.edge_id, **attrs)
        if not edge.directed and edge.src != edge.dst:
            G.add_edge(edge.dst, edge.src, key=edge.edge_id, **attrs)
    return G
