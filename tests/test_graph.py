"""
Graph builder tests
"""

from decimal import Decimal

import pytest

from metro_planner.routes.service import build_network_graph, get_network_graph
from metro_planner.stations.service import INTERCHANGE_LINE_KEY, NetworkModel


class TestBuildNetworkGraph:
    """Hop and interchange edges derived from the network model"""

    def test_every_station_is_a_node(self, sample_network, sample_graph):
        assert set(sample_graph.nodes) == set(sample_network.stations)

    def test_forward_edge_uses_own_hop_values(self, sample_graph):
        edge = sample_graph.find_edge("B2", "B3")

        assert edge.weight_seconds == 150
        assert edge.distance_km == Decimal("2.5")
        assert edge.line_key == "blue"

    def test_backward_edge_uses_previous_station_hop_values(self, sample_graph):
        edge = sample_graph.find_edge("B3", "B2")

        assert edge.weight_seconds == 150
        assert edge.distance_km == Decimal("2.5")
        assert edge.line_key == "blue"

    def test_line_edges_come_in_matching_pairs(self, sample_graph):
        for station_id, edges in sample_graph.edges.items():
            for edge in edges:
                reverse = sample_graph.find_edge(edge.to_station_id, station_id)
                assert reverse is not None
                assert reverse.weight_seconds == edge.weight_seconds
                assert reverse.distance_km == edge.distance_km
                assert reverse.line_key == edge.line_key

    def test_terminals_have_single_line_edge(self, sample_graph):
        assert [e.to_station_id for e in sample_graph.get_neighbors("R1")] == ["R2"]
        assert [e.to_station_id for e in sample_graph.get_neighbors("B4")] == ["B3"]

    def test_interchange_edges(self, sample_graph):
        edge = sample_graph.find_edge("R2", "B2")

        assert edge.line_key == INTERCHANGE_LINE_KEY
        assert edge.weight_seconds == 300
        assert edge.distance_km == Decimal("0")

    def test_interchange_time_is_configurable(self, sample_network):
        graph = build_network_graph(sample_network, interchange_time_seconds=120)

        assert graph.find_edge("B3", "G2").weight_seconds == 120

    def test_negative_interchange_time_rejected(self, sample_network):
        with pytest.raises(ValueError):
            build_network_graph(sample_network, interchange_time_seconds=-1)

    def test_edge_count(self, sample_graph):
        # 2 * (2 + 3 + 2 + 1) hop edges, 2 * 2 interchange edges
        assert sample_graph.edge_count == 20

    def test_three_way_interchange_links_every_pair(self):
        definition = {
            key: {
                "name": key,
                "color": "#000",
                "stations": [
                    {"id": f"{key}1", "name": "Hub", "interchange_id": "HUB",
                     "time_to_next": 60, "distance_to_next": 1},
                    {"id": f"{key}2", "name": f"{key} end"},
                ],
            }
            for key in ("a", "b", "c")
        }
        graph = build_network_graph(NetworkModel.from_definition(definition), 300)

        for source in ("a1", "b1", "c1"):
            targets = {
                e.to_station_id for e in graph.get_neighbors(source)
                if e.line_key == INTERCHANGE_LINE_KEY
            }
            assert targets == {"a1", "b1", "c1"} - {source}

    def test_bundled_graph_is_cached(self):
        assert get_network_graph() is get_network_graph()
        assert get_network_graph().find_edge("P23", "G17").line_key == INTERCHANGE_LINE_KEY
