"""
Shortest-path, itinerary and journey planning tests
"""

from datetime import datetime
from decimal import Decimal
from itertools import combinations

import pytest

from metro_planner.exceptions import (
    InvalidFareInputException, NoRouteFoundException, UnknownStationException
)
from metro_planner.routes.itinerary import ItineraryBuilder
from metro_planner.routes.schemas import TicketType, UNREACHABLE
from metro_planner.routes.service import (
    RouteCalculator, RouteService, build_network_graph, next_departure_time
)
from metro_planner.stations.service import INTERCHANGE_LINE_KEY, NetworkModel

# Tuesday, peak hour
WEEKDAY_MORNING = datetime(2026, 10, 20, 10, 0)


class TestRouteCalculator:
    """Dijkstra search over the synthetic graph"""

    @pytest.fixture
    def calculator(self, sample_graph):
        return RouteCalculator(sample_graph)

    def test_same_line_time_is_sum_of_hops(self, calculator, sample_network):
        for line in sample_network.lines.values():
            result = calculator.solve(line.first_station.id)
            elapsed = 0
            for station in line.stations:
                assert result.distances[station.id] == elapsed
                elapsed += station.time_to_next

    def test_start_has_zero_cost_and_no_predecessor(self, calculator):
        result = calculator.solve("B1")

        assert result.distances["B1"] == 0
        assert "B1" not in result.predecessors

    def test_unreachable_stations_keep_sentinel(self, calculator):
        result = calculator.solve("R1")

        assert result.distances["Z1"] == UNREACHABLE
        assert result.distances["Z2"] == UNREACHABLE
        assert not result.is_reachable("Z1")
        assert result.is_reachable("G3")

    def test_interchange_cost_is_transfer_time(self, calculator):
        result = calculator.solve("R2")

        assert result.distances["B2"] == 300
        assert result.predecessors["B2"].via_line == INTERCHANGE_LINE_KEY
        assert result.predecessors["B2"].distance_km == Decimal("0")

    def test_cross_line_cost(self, calculator):
        result = calculator.solve("R1")

        # 120 + 300 + 150 + 300 + 140
        assert result.distances["G3"] == 1010

    def test_predecessor_records_line_and_distance(self, calculator):
        result = calculator.solve("R1")
        predecessor = result.predecessors["B3"]

        assert predecessor.from_station_id == "B2"
        assert predecessor.via_line == "blue"
        assert predecessor.distance_km == Decimal("2.5")

    def test_early_exit_still_finalizes_target(self, calculator):
        full = calculator.solve("R1")
        targeted = calculator.solve("R1", "B3")

        assert targeted.distances["B3"] == full.distances["B3"]

    def test_unknown_start_or_target(self, calculator):
        with pytest.raises(UnknownStationException):
            calculator.solve("NOPE")
        with pytest.raises(UnknownStationException):
            calculator.solve("R1", "NOPE")

    def test_graph_is_not_mutated(self, calculator, sample_graph):
        before = {k: list(v) for k, v in sample_graph.edges.items()}
        calculator.solve("R1")
        calculator.solve("G3")

        assert sample_graph.edges == before

    def test_ties_keep_first_relaxation(self):
        # Square: S -> A -> T and S -> B -> T cost the same
        definition = {
            "north": {"name": "North", "color": "#000", "stations": [
                {"id": "N1", "name": "S", "interchange_id": "S", "time_to_next": 60, "distance_to_next": 1},
                {"id": "N2", "name": "A", "time_to_next": 60, "distance_to_next": 1},
                {"id": "N3", "name": "T", "interchange_id": "T"},
            ]},
            "south": {"name": "South", "color": "#111", "stations": [
                {"id": "S1", "name": "S", "interchange_id": "S", "time_to_next": 60, "distance_to_next": 1},
                {"id": "S2", "name": "B", "time_to_next": 60, "distance_to_next": 1},
                {"id": "S3", "name": "T", "interchange_id": "T"},
            ]},
        }
        graph = build_network_graph(NetworkModel.from_definition(definition), 0)
        result = RouteCalculator(graph).solve("N1")

        assert result.distances["N3"] == 120
        assert result.predecessors["N3"].from_station_id == "N2"


class TestItineraryBuilder:
    """Path reconstruction and part segmentation"""

    @pytest.fixture
    def builder(self, sample_network):
        return ItineraryBuilder(sample_network)

    @pytest.fixture
    def calculator(self, sample_graph):
        return RouteCalculator(sample_graph)

    def test_reconstruct_path(self, builder, calculator):
        result = calculator.solve("R1", "G3")

        assert builder.reconstruct_path(result, "R1", "G3") == ["R1", "R2", "B2", "B3", "G2", "G3"]

    def test_reconstruct_unreachable(self, builder, calculator):
        result = calculator.solve("R1")

        with pytest.raises(NoRouteFoundException):
            builder.reconstruct_path(result, "R1", "Z2")

    def test_mismatched_start_rejected(self, builder, calculator):
        result = calculator.solve("R1")

        with pytest.raises(ValueError):
            builder.reconstruct_path(result, "B1", "G3")

    def test_distance_excludes_interchange_hops(self, builder, calculator):
        result = calculator.solve("R1", "G3")
        path = builder.reconstruct_path(result, "R1", "G3")

        assert builder.total_distance(result, path) == Decimal("5.8")

    def test_interchange_hop_never_counts_distance(self, builder, calculator):
        result = calculator.solve("R1", "G3")
        path = builder.reconstruct_path(result, "R1", "G3")
        walk = result.predecessors["B2"]
        result.predecessors["B2"] = walk.model_copy(update={"distance_km": Decimal("0.4")})

        assert builder.total_distance(result, path) == Decimal("5.8")

    def test_three_lines_make_three_parts(self, builder, calculator):
        itinerary = builder.build(calculator.solve("R1", "G3"), "R1", "G3")
        parts = itinerary.parts

        assert len(parts) == 3
        assert [[s.id for s in p.stations] for p in parts] == [
            ["R1", "R2"], ["B2", "B3"], ["G2", "G3"]
        ]
        assert [p.line_key for p in parts] == ["red", "blue", "green"]
        assert [p.direction for p in parts] == ["forward", "forward", "forward"]
        assert [p.start_platform for p in parts] == [1, 3, 2]
        assert [p.direction_label for p in parts] == ["Charlie", "Golf", "India"]
        assert [p.time_seconds for p in parts] == [120, 150, 140]
        assert itinerary.total_time_seconds == 1010

    def test_reverse_journey_parts(self, builder, calculator):
        parts = builder.build(calculator.solve("G3", "R1"), "G3", "R1").parts

        assert [[s.id for s in p.stations] for p in parts] == [
            ["G3", "G2"], ["B3", "B2"], ["R2", "R1"]
        ]
        assert [p.direction for p in parts] == ["backward", "backward", "backward"]
        assert [p.start_platform for p in parts] == [1, 1, 2]
        assert [p.direction_label for p in parts] == ["Hotel", "Echo", "Alpha"]

    def test_single_line_journey(self, builder, calculator):
        parts = builder.build(calculator.solve("B4", "B1"), "B4", "B1").parts

        assert len(parts) == 1
        assert [s.id for s in parts[0].stations] == ["B4", "B3", "B2", "B1"]
        assert parts[0].direction == "backward"
        assert parts[0].direction_label == "Echo"

    def test_start_on_other_platform_boards_next_line(self, builder, calculator):
        itinerary = builder.build(calculator.solve("R2", "G3"), "R2", "G3")

        assert itinerary.path[0] == "R2"
        assert [[s.id for s in p.stations] for p in itinerary.parts] == [
            ["B2", "B3"], ["G2", "G3"]
        ]
        assert itinerary.total_time_seconds == 890

    def test_end_on_other_platform_joins_last_part(self, builder, calculator):
        parts = builder.build(calculator.solve("B1", "R2"), "B1", "R2").parts

        assert len(parts) == 1
        assert [s.id for s in parts[0].stations] == ["B1", "B2", "R2"]
        assert parts[0].line_key == "blue"

    def test_station_display_data(self, builder, calculator):
        parts = builder.build(calculator.solve("R1", "R3"), "R1", "R3").parts
        station = parts[0].stations[0]

        assert station.name == "Alpha"
        assert station.color == "#E74C3C"
        assert station.line_name == "Red Line"
        assert station.lat == 12.9


class TestNextDepartureTime:

    def test_rounds_up_to_next_boundary(self):
        assert next_departure_time(datetime(2026, 10, 20, 10, 3, 10)) == datetime(2026, 10, 20, 10, 5)

    def test_exact_boundary_stays(self):
        assert next_departure_time(datetime(2026, 10, 20, 10, 5)) == datetime(2026, 10, 20, 10, 5)

    def test_seconds_past_boundary_move_to_next(self):
        assert next_departure_time(datetime(2026, 10, 20, 10, 5, 1)) == datetime(2026, 10, 20, 10, 10)

    def test_rolls_over_the_hour(self):
        assert next_departure_time(datetime(2026, 10, 20, 23, 58)) == datetime(2026, 10, 21, 0, 0)


class TestRouteService:
    """End-to-end journey planning on the synthetic network"""

    def test_plan_journey(self, route_service):
        journey = route_service.plan_journey("R1", "G3", now=WEEKDAY_MORNING)

        assert journey.journey_id == "R1-G3"
        assert journey.total_time_seconds == 1010
        assert journey.total_distance_km == Decimal("5.8")
        assert len(journey.parts) == 3
        assert journey.departure_time == WEEKDAY_MORNING
        assert journey.arrival_time == datetime(2026, 10, 20, 10, 17)
        assert journey.fare.base_fare == Decimal("30")
        assert journey.fare.ticket_type == TicketType.TOKEN
        assert journey.fare.applied_discount == Decimal("0")
        assert journey.interchange_count == 2
        assert journey.total_minutes == 17

    def test_instructions(self, route_service):
        journey = route_service.plan_journey("R1", "G3", now=WEEKDAY_MORNING)

        assert journey.instructions == [
            "Board the Red Line at Alpha, platform 1, towards Charlie",
            "Ride 1 stop to Bravo",
            "Change to the Blue Line at Bravo, platform 3, towards Golf",
            "Ride 1 stop to Foxtrot",
            "Change to the Green Line at Foxtrot, platform 2, towards India",
            "Ride 1 stop to India",
            "Arrive at India at 10:17",
        ]

    def test_fare_uses_ticket_type_at_departure(self, route_service):
        journey = route_service.plan_journey("R1", "G3", ticket_type="card", now=WEEKDAY_MORNING)

        assert journey.fare.ticket_type == TicketType.CARD
        assert journey.fare.final_fare == Decimal("29")
        assert journey.fare.travel_time == WEEKDAY_MORNING

    def test_round_trip_symmetry(self, route_service, sample_network):
        connected = [s for s in sample_network.stations if not s.startswith("Z")]
        for a, b in combinations(connected, 2):
            if sample_network.same_physical_station(a, b):
                continue
            there = route_service.plan_journey(a, b, now=WEEKDAY_MORNING)
            back = route_service.plan_journey(b, a, now=WEEKDAY_MORNING)
            assert there.total_time_seconds == back.total_time_seconds
            assert there.total_distance_km == back.total_distance_km

    def test_same_physical_station_is_zero_length(self, route_service):
        journey = route_service.plan_journey("R2", "B2", now=WEEKDAY_MORNING)

        assert journey.parts == []
        assert journey.total_time_seconds == 0
        assert journey.total_distance_km == Decimal("0")
        assert journey.arrival_time == journey.departure_time
        assert journey.instructions == ["You are already at Bravo"]

    def test_same_station_id_is_zero_length(self, route_service):
        journey = route_service.plan_journey("G1", "G1", now=WEEKDAY_MORNING)

        assert journey.parts == []
        assert journey.total_time_seconds == 0

    def test_disconnected_stations(self, route_service):
        with pytest.raises(NoRouteFoundException) as exc_info:
            route_service.plan_journey("R1", "Z1")

        assert exc_info.value.code == "NO_ROUTE_FOUND"

    def test_unknown_station(self, route_service):
        with pytest.raises(UnknownStationException):
            route_service.plan_journey("R1", "NOPE")

    def test_invalid_ticket_type(self, route_service):
        with pytest.raises(InvalidFareInputException):
            route_service.plan_journey("R1", "G3", ticket_type="PAPER")

    def test_single_line_journey_time(self, route_service):
        journey = route_service.plan_journey("B1", "B4", now=WEEKDAY_MORNING)

        assert journey.total_time_seconds == 450
        assert journey.interchange_count == 0
        assert journey.total_minutes == 8


class TestBundledNetworkJourneys:
    """Journeys on the shipped Namma Metro network"""

    @pytest.fixture
    def service(self):
        return RouteService()

    def test_three_line_journey(self, service):
        journey = service.plan_journey("P16", "Y12", now=WEEKDAY_MORNING)
        parts = journey.parts

        assert [p.line_key for p in parts] == ["purple", "green", "yellow"]
        assert [p.stations[0].id for p in parts] == ["P16", "G17", "Y01"]
        assert [p.stations[-1].id for p in parts] == ["P23", "G24", "Y12"]
        assert [p.direction for p in parts] == ["forward", "forward", "forward"]
        assert [p.start_platform for p in parts] == [1, 3, 3]
        assert [p.direction_label for p in parts] == [
            "Challaghatta", "Silk Institute", "Bommasandra"
        ]

    def test_reverse_three_line_journey(self, service):
        parts = service.plan_journey("Y12", "P16", now=WEEKDAY_MORNING).parts

        assert [p.line_key for p in parts] == ["yellow", "green", "purple"]
        assert [p.direction for p in parts] == ["backward", "backward", "backward"]
        assert [p.start_platform for p in parts] == [1, 2, 1]
        assert [p.direction_label for p in parts] == [
            "Rashtreeya Vidyalaya Road", "Madavara", "Whitefield (Kadugodi)"
        ]

    def test_whole_network_is_connected_and_symmetric(self, service):
        network = service.network
        ids = sorted(network.stations)
        origin = ids[0]
        for other in ids[1:]:
            if network.same_physical_station(origin, other):
                continue
            there = service.plan_journey(origin, other, now=WEEKDAY_MORNING)
            back = service.plan_journey(other, origin, now=WEEKDAY_MORNING)
            assert there.total_time_seconds == back.total_time_seconds
            assert there.total_distance_km == back.total_distance_km
