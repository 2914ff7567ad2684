from __future__ import annotations

import random

import networkx as nx
import pytest

from spgraph.graph.arena import ArenaGraph
from spgraph.lib.nx import NxEdge, NxGraph, to_networkx
from spgraph.model.path import path_cost


class TestNxGraph:
    def test_undirected_graph_both_directions(self):
        G = nx.Graph()
        G.add_edge("A", "B", weight=2)
        graph = NxGraph(G)
        [(nbr, edge)] = graph.neighbors("B")
        assert nbr == "A"
        assert edge.ref == ("B", "A")
        assert edge.cost(None) == 2

    def test_directed_graph_one_way(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", weight=2)
        graph = NxGraph(G)
        assert [nbr for nbr, _ in graph.neighbors("A")] == ["B"]
        assert graph.neighbors("B") == []

    def test_unknown_node(self):
        graph = NxGraph(nx.Graph())
        assert graph.neighbors("missing") == []
        assert "missing" not in graph
        assert len(graph) == 0

    def test_missing_weight_uses_default(self):
        G = nx.Graph()
        G.add_edge("A", "B")
        assert NxGraph(G).neighbors("A")[0][1].cost(None) == 1
        assert NxGraph(G, default=5).neighbors("A")[0][1].cost(None) == 5

    def test_custom_weight_attribute(self):
        G = nx.Graph()
        G.add_edge("A", "B", latency=9, weight=1)
        assert NxGraph(G, weight="latency").neighbors("A")[0][1].cost(None) == 9

    def test_multigraph_cheapest_parallel_edge(self):
        G = nx.MultiDiGraph()
        G.add_edge("A", "B", key="slow", weight=5)
        G.add_edge("A", "B", key="fast", weight=3)
        result = NxGraph(G).shortest_path(None, "A")
        pred_node, edge = result.prev("B")
        assert pred_node == "A"
        assert edge.ref == ("A", "B", "fast")

    def test_context_mapping_overrides_attribute(self):
        G = nx.Graph()
        G.add_edge("A", "B", weight=1)
        G.add_edge("B", "C", weight=1)
        G.add_edge("A", "C", weight=5)
        graph = NxGraph(G)

        assert graph.shortest_path(None, "A").nodes("A", "C") == ["C", "B", "A"]

        blocked = {("A", "B"): 100, ("B", "A"): 100}
        assert graph.shortest_path(blocked, "A").nodes("A", "C") == ["C", "A"]

    def test_context_override_is_per_direction(self):
        G = nx.Graph()
        G.add_edge("A", "B", weight=1)
        [(_, forward)] = NxGraph(G).neighbors("A")
        [(_, backward)] = NxGraph(G).neighbors("B")

        one_way = {("A", "B"): 7}
        assert forward.cost(one_way) == 7
        assert backward.cost(one_way) == 1

    def test_weight_function_receives_context(self):
        G = nx.Graph()
        G.add_edge("home", "work", base=20, rush=15)
        G.add_edge("home", "park", base=10, rush=0)
        G.add_edge("park", "work", base=15, rush=0)

        def minutes(u, v, attrs, context):
            return attrs["base"] + (attrs["rush"] if context["rush_hour"] else 0)

        graph = NxGraph(G, weight=minutes)
        calm = graph.shortest_path({"rush_hour": False}, "home")
        busy = graph.shortest_path({"rush_hour": True}, "home")
        assert calm.nodes("home", "work") == ["work", "home"]
        assert busy.nodes("home", "work") == ["work", "park", "home"]
        assert path_cost(busy.sequence("home", "work"), {"rush_hour": True}) == 25

    def test_edge_equality_ignores_attrs(self):
        assert NxEdge(("A", "B"), {"weight": 1}) == NxEdge(("A", "B"), {"weight": 2})
        assert hash(NxEdge(("A", "B"), {})) == hash(NxEdge(("A", "B"), {"x": 1}))
        assert NxEdge(("A", "B", 0), {}).u == "A"
        assert NxEdge(("A", "B", 0), {}).v == "B"


class TestToNetworkx:
    def test_export(self):
        g = ArenaGraph(3)
        g.add_node("extra")
        g.add_edge(0, 1, 4)
        g.add_edge(1, 2, 6, directed=True)
        G = to_networkx(g)

        assert isinstance(G, nx.MultiDiGraph)
        assert G.nodes[3]["label"] == "extra"
        assert G[0][1][0]["weight"] == 4
        assert G[1][0][0]["weight"] == 4
        assert G[1][2][1]["weight"] == 6
        assert not G.has_edge(2, 1)

    def test_export_applies_context(self):
        g = ArenaGraph(2)
        g.add_edge(0, 1, 4)
        G = to_networkx(g, weight_attr="cost", context={0: 1})
        assert G[0][1][0]["cost"] == 1

    @pytest.mark.parametrize("seed", range(10))
    def test_wrapped_export_matches_arena(self, seed):
        rng = random.Random(seed)
        g = ArenaGraph(10)
        for _ in range(25):
            g.add_edge(rng.randrange(10), rng.randrange(10), rng.randint(1, 9))

        arena = g.shortest_path(None, 0)
        wrapped = NxGraph(to_networkx(g)).shortest_path(None, 0)

        assert arena.reachable() == wrapped.reachable()
        for node in arena.reachable():
            assert path_cost(arena.sequence(0, node), None) == path_cost(
                wrapped.sequence(0, node), None
            )
