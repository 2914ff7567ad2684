"""Integer-indexed arena graph.

Nodes live in an arena and are addressed by stable integer indices, so node
identity is plain integer equality and the engine's maps are keyed by ints.
Optional per-node labels carry caller payloads without affecting identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterator, List, Mapping, Optional, Tuple

from spgraph.graph.base import Graph
from spgraph.types.base import Cost


@dataclass(frozen=True)
class WeightedEdge:
    """Edge with a static weight that a context may override.

    Attributes:
        edge_id: Index of the edge in its arena.
        src: Source node index.
        dst: Destination node index.
        weight: Base traversal cost.
        directed: False when the edge is traversable in both directions.
    """

    edge_id: int
    src: int
    dst: int
    weight: Cost
    directed: bool = False

    def cost(self, context: Optional[Mapping[int, Cost]]) -> Cost:
        """Return the edge cost under ``context``.

        ``context`` is either None (use the base weight) or a mapping of
        edge id to replacement weight.
        """
        if context is None:
            return self.weight
        return context.get(self.edge_id, self.weight)


class ArenaGraph(Graph[int, WeightedEdge]):
    """Graph whose nodes are contiguous integer indices.

    Edges are undirected by default: ``neighbors`` reports them from both
    endpoints. Hops are returned in edge insertion order.
    """

    def __init__(self, count: int = 0) -> None:
        self._labels: List[Hashable] = []
        self._edges: List[WeightedEdge] = []
        self._adj: List[List[Tuple[int, WeightedEdge]]] = []
        self.add_nodes(count)

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, node: object) -> bool:
        return isinstance(node, int) and 0 <= node < len(self._labels)

    def __iter__(self) -> Iterator[int]:
        return iter(range(len(self._labels)))

    @property
    def edges(self) -> Tuple[WeightedEdge, ...]:
        """All edges in insertion order."""
        return tuple(self._edges)

    def add_node(self, label: Optional[Hashable] = None) -> int:
        """Append a node and return its index.

        Args:
            label: Optional payload; defaults to the node index.

        Returns:
            The new node index.
        """
        node = len(self._labels)
        self._labels.append(node if label is None else label)
        self._adj.append([])
        return node

    def add_nodes(self, count: int) -> range:
        """Append ``count`` unlabeled nodes and return their index range."""
        first = len(self._labels)
        for _ in range(count):
            self.add_node()
        return range(first, first + count)

    def label(self, node: int) -> Hashable:
        """Return the payload stored for ``node``.

        Raises:
            ValueError: If the node does not exist.
        """
        if node not in self:
            raise ValueError(f"Node '{node}' does not exist.")
        return self._labels[node]

    def index_of(self, label: Hashable) -> int:
        """Return the index of the first node carrying ``label``.

        Raises:
            ValueError: If no node carries the label.
        """
        try:
            return self._labels.index(label)
        except ValueError:
            raise ValueError(f"No node labeled '{label}'.") from None

    def add_edge(
        self, src: int, dst: int, weight: Cost, *, directed: bool = False
    ) -> WeightedEdge:
        """Connect ``src`` and ``dst``.

        Args:
            src: Source node index. Must exist.
            dst: Destination node index. Must exist.
            weight: Base cost of the edge.
            directed: If True, only ``src -> dst`` is traversable.

        Returns:
            The created edge.

        Raises:
            ValueError: If either node does not exist.
        """
        if src not in self:
            raise ValueError(f"Source node '{src}' does not exist.")
        if dst not in self:
            raise ValueError(f"Target node '{dst}' does not exist.")

        edge = WeightedEdge(len(self._edges), src, dst, weight, directed)
        self._edges.append(edge)
        self._adj[src].append((dst, edge))
        if not directed and src != dst:
            self._adj[dst].append((src, edge))
        return edge

    def neighbors(self, node: int) -> List[Tuple[int, WeightedEdge]]:
        if node not in self:
            return []
        return list(self._adj[node])

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain-dict view of the graph (labels and edges)."""
        return {
            "nodes": list(self._labels),
            "edges": [
                {
                    "src": e.src,
                    "dst": e.dst,
                    "weight": e.weight,
                    "directed": e.directed,
                }
                for e in self._edges
            ],
        }
