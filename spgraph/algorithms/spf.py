"""Shortest-path-first (SPF) search over caller-defined graphs.

Implements single-source Dijkstra against the :class:`~spgraph.graph.base.Graph`
contract. Edge costs are priced against a read-only context supplied per
search.

Notes:
    Relaxation uses ``>=``: when a hop reaches a node at exactly its recorded
    distance, the hop evaluated last becomes the node's predecessor. This
    decides which of several equal-cost paths is reported.

    Hops into already finalized nodes are not relaxed. With non-negative
    costs such a hop can only tie, through a zero-cost edge, and accepting it
    could close a predecessor cycle or give the start node a predecessor.

    The frontier is ordered by ``(distance, node)`` under both selection
    strategies, so equal-distance candidates are finalized smallest node
    first and both strategies build the same predecessor map.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Any, Dict, Hashable, List, Optional, Set, Tuple

from spgraph.config import SPF_CONFIG, SpfConfig
from spgraph.graph.base import Graph
from spgraph.logging import get_logger
from spgraph.model.path import ShortestPath
from spgraph.types.base import Cost, FrontierSelect

logger = get_logger(__name__)


def _relax(
    graph: Graph,
    context: Any,
    node: Hashable,
    node_cost: Cost,
    zero: Cost,
    validate_costs: bool,
    distance: Dict[Hashable, Cost],
    pred: Dict[Hashable, Tuple[Hashable, Any]],
    visited: Set[Hashable],
) -> List[Tuple[Cost, Hashable]]:
    """Relax every hop leaving ``node``.

    Returns:
        ``(new_cost, neighbor)`` for each neighbor whose distance was updated.
    """
    updated: List[Tuple[Cost, Hashable]] = []
    for neighbor, edge in graph.neighbors(node):
        if validate_costs:
            # Priced before the visited skip: back edges into finalized
            # nodes must be checked too
            edge_cost = edge.cost(context)
            if edge_cost < zero:
                raise ValueError(
                    f"Negative cost {edge_cost!r} on hop '{node}' -> '{neighbor}'."
                )
            if neighbor in visited:
                continue
        else:
            if neighbor in visited:
                continue
            edge_cost = edge.cost(context)

        alt = node_cost + edge_cost
        if neighbor not in distance or distance[neighbor] >= alt:
            distance[neighbor] = alt
            pred[neighbor] = (node, edge)
            updated.append((alt, neighbor))
    return updated


def _spf_heap(
    graph: Graph,
    context: Any,
    start: Hashable,
    zero: Cost,
    validate_costs: bool,
) -> Tuple[Dict[Hashable, Cost], Dict[Hashable, Tuple[Hashable, Any]]]:
    """Dijkstra with a binary heap and lazy deletion of stale entries."""
    distance: Dict[Hashable, Cost] = {start: zero}
    pred: Dict[Hashable, Tuple[Hashable, Any]] = {}
    visited: Set[Hashable] = set()
    min_pq: List[Tuple[Cost, Hashable]] = [(zero, start)]

    while min_pq:
        current_cost, node = heappop(min_pq)
        if node in visited or current_cost > distance[node]:
            continue
        visited.add(node)

        for entry in _relax(
            graph,
            context,
            node,
            current_cost,
            zero,
            validate_costs,
            distance,
            pred,
            visited,
        ):
            heappush(min_pq, entry)

    return distance, pred


def _spf_linear_scan(
    graph: Graph,
    context: Any,
    start: Hashable,
    zero: Cost,
    validate_costs: bool,
) -> Tuple[Dict[Hashable, Cost], Dict[Hashable, Tuple[Hashable, Any]]]:
    """Dijkstra selecting the frontier minimum by scanning all distances."""
    distance: Dict[Hashable, Cost] = {start: zero}
    pred: Dict[Hashable, Tuple[Hashable, Any]] = {}
    visited: Set[Hashable] = set()

    while True:
        frontier = [n for n in distance if n not in visited]
        if not frontier:
            break
        node = min(frontier, key=lambda n: (distance[n], n))
        visited.add(node)

        _relax(
            graph,
            context,
            node,
            distance[node],
            zero,
            validate_costs,
            distance,
            pred,
            visited,
        )

    return distance, pred


def shortest_path(
    graph: Graph,
    context: Any,
    start: Hashable,
    *,
    zero: Cost = 0,
    config: Optional[SpfConfig] = None,
) -> ShortestPath:
    """Compute the shortest-path tree rooted at ``start``.

    Every node reachable from ``start`` is finalized exactly once. The distance
    table and visited set are discarded; only the predecessor tree is
    returned.

    Args:
        graph: Graph implementing ``neighbors``.
        context: Read-only value passed to every ``edge.cost`` call.
        start: Source node.
        zero: Identity cost for ``start`` (use the zero of custom cost types).
        config: Search configuration. Defaults to ``SPF_CONFIG``.

    Returns:
        ShortestPath wrapping the ``node -> (predecessor, edge)`` map.

    Raises:
        ValueError: If ``config.validate_costs`` is set and an edge cost is
            below ``zero``.
    """
    if config is None:
        config = SPF_CONFIG

    logger.debug(
        "SPF from %r using %s frontier selection", start, config.frontier.name
    )

    if config.frontier == FrontierSelect.LINEAR_SCAN:
        distance, pred = _spf_linear_scan(
            graph, context, start, zero, config.validate_costs
        )
    else:
        distance, pred = _spf_heap(graph, context, start, zero, config.validate_costs)

    logger.debug("SPF from %r finalized %d nodes", start, len(distance))
    return ShortestPath(pred, start)
