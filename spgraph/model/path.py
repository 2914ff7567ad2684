"""Shortest-path results and path reconstruction.

`ShortestPath` owns the predecessor tree produced by one search. It answers
single-step lookups (`prev`) and rebuilds edge-annotated paths (`sequence`).
Reconstruction returns a `PathSequence` that records whether the backward walk
actually reached the start node, so a missing path is never mistaken for a
short one.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import (
    Any,
    Dict,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Set,
    Tuple,
    TypeVar,
)

from spgraph.types.base import Cost, PathStatus

NodeT = TypeVar("NodeT", bound=Hashable)
EdgeT = TypeVar("EdgeT")


@dataclass(frozen=True)
class PathSequence(Generic[NodeT, EdgeT]):
    """Edge-annotated path in goal-to-start order.

    Attributes:
        steps: ``(predecessor, edge)`` pairs walking back from the goal. The
            goal itself is not included; on a complete path the last step's
            node is the start.
        status: Whether the walk reached the start node.
    """

    steps: Tuple[Tuple[NodeT, EdgeT], ...]
    status: PathStatus

    @property
    def complete(self) -> bool:
        """True when the walk reached the start node."""
        return self.status is PathStatus.COMPLETE

    def __iter__(self) -> Iterator[Tuple[NodeT, EdgeT]]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, idx: int) -> Tuple[NodeT, EdgeT]:
        return self.steps[idx]

    @property
    def edges(self) -> Tuple[EdgeT, ...]:
        """Edges along the path, goal-to-start."""
        return tuple(edge for _, edge in self.steps)

    def nodes(self, goal: NodeT) -> List[NodeT]:
        """Return the visited nodes goal-to-start, including ``goal``."""
        return [goal] + [node for node, _ in self.steps]

    def reversed(self) -> Tuple[Tuple[NodeT, EdgeT], ...]:
        """Return the steps in start-to-goal order.

        Each pair is still ``(node, edge leaving node toward the goal)``.
        """
        return tuple(reversed(self.steps))


class ShortestPath(Generic[NodeT, EdgeT]):
    """Predecessor tree rooted at the search's start node.

    The tree is read-only once built. Unreachable nodes and the start node
    have no predecessor.
    """

    def __init__(
        self, pred: Dict[NodeT, Tuple[NodeT, EdgeT]], start: NodeT
    ) -> None:
        self._pred: Mapping[NodeT, Tuple[NodeT, EdgeT]] = MappingProxyType(
            dict(pred)
        )
        self._start = start

    def __repr__(self) -> str:
        return f"ShortestPath(start={self._start!r}, reached={len(self._pred)})"

    def __contains__(self, node: object) -> bool:
        return node == self._start or node in self._pred

    def __len__(self) -> int:
        """Number of nodes reached, the start included."""
        return len(self.reachable())

    @property
    def start(self) -> NodeT:
        """Source node of the search."""
        return self._start

    @property
    def predecessors(self) -> Mapping[NodeT, Tuple[NodeT, EdgeT]]:
        """Read-only ``node -> (predecessor, edge)`` mapping."""
        return self._pred

    def reachable(self) -> Set[NodeT]:
        """Return every node reached by the search, the start included."""
        return set(self._pred) | {self._start}

    def prev(self, node: NodeT) -> Optional[Tuple[NodeT, EdgeT]]:
        """Return ``(predecessor, edge)`` for ``node`` or None."""
        return self._pred.get(node)

    def sequence(self, start: NodeT, goal: NodeT) -> PathSequence[NodeT, EdgeT]:
        """Rebuild the path from ``goal`` back to ``start``.

        The walk stops as soon as the current node equals ``start`` (status
        COMPLETE) or a predecessor lookup fails (status NO_PATH, with the
        partial walk kept in ``steps``). ``start == goal`` yields an empty
        COMPLETE sequence.

        Args:
            start: Node the walk should end at.
            goal: Node the walk starts from.

        Returns:
            PathSequence in goal-to-start order.
        """
        steps: List[Tuple[NodeT, EdgeT]] = []
        seen = {goal}
        current = goal
        while current != start:
            hop = self._pred.get(current)
            if hop is None:
                return PathSequence(tuple(steps), PathStatus.NO_PATH)
            steps.append(hop)
            current = hop[0]
            if current in seen:
                # cycle in a hand-built map; the start is not on it
                return PathSequence(tuple(steps), PathStatus.NO_PATH)
            seen.add(current)
        return PathSequence(tuple(steps), PathStatus.COMPLETE)

    def nodes(self, start: NodeT, goal: NodeT) -> List[NodeT]:
        """Return the nodes from ``goal`` back to ``start``, both included.

        Returns an empty list when no path exists.
        """
        seq = self.sequence(start, goal)
        if not seq.complete:
            return []
        return seq.nodes(goal)


def path_cost(
    steps: Iterable[Tuple[Any, Any]], context: Any, zero: Cost = 0
) -> Cost:
    """Sum ``edge.cost(context)`` over a sequence of ``(node, edge)`` steps.

    Args:
        steps: A PathSequence or any iterable of ``(node, edge)`` pairs.
        context: Value passed to every ``Edge.cost`` call.
        zero: Identity cost for an empty path.

    Returns:
        Total path cost.
    """
    total = zero
    for _, edge in steps:
        total = total + edge.cost(context)
    return total
