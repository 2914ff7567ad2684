"""Shared sample graphs for the test suite.

Edge weights are shown in brackets; all edges are undirected unless drawn
with a single arrow.
"""

from __future__ import annotations

import pytest

from spgraph.graph.arena import ArenaGraph


def _ten_node(detour_cost: int) -> ArenaGraph:
    #        [50]
    #   ┌─────────────┐
    #   │             │
    #   1───2───3─────9
    #   │ [10] [*] [10]
    #  [10]
    #   │
    #   0
    g = ArenaGraph(10)
    g.add_edge(0, 1, 10)
    g.add_edge(1, 9, 50)
    g.add_edge(1, 2, 10)
    g.add_edge(2, 3, detour_cost)
    g.add_edge(3, 9, 10)
    return g


@pytest.fixture
def ten_node_direct():
    """Direct hop 1-9 (50) beats the detour 1-2-3-9 (60)."""
    return _ten_node(40)


@pytest.fixture
def ten_node_detour():
    """Detour 1-2-3-9 (30) beats the direct hop 1-9 (50)."""
    return _ten_node(10)


@pytest.fixture
def square_tie():
    #     [1]
    #   0─────1
    #   │     │
    #  [1]   [1]
    #   │     │
    #   2─────3
    #     [1]
    g = ArenaGraph(4)
    g.add_edge(0, 1, 1)
    g.add_edge(0, 2, 1)
    g.add_edge(1, 3, 1)
    g.add_edge(2, 3, 1)
    return g


@pytest.fixture
def isolated():
    """A single node with no edges."""
    return ArenaGraph(1)


@pytest.fixture
def two_islands():
    #    [1]      [1]
    #  0─────1  2─────3
    g = ArenaGraph(4)
    g.add_edge(0, 1, 1)
    g.add_edge(2, 3, 1)
    return g


@pytest.fixture
def directed_line():
    #    [2]     [3]
    #  0────►1────►2
    g = ArenaGraph(3)
    g.add_edge(0, 1, 2, directed=True)
    g.add_edge(1, 2, 3, directed=True)
    return g
