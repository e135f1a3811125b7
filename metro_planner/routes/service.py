import heapq
import itertools
import logging
import math
from datetime import datetime, timedelta
from decimal import Decimal
from functools import lru_cache
from typing import Dict, List, Optional, Union

from metro_planner.config import settings
from metro_planner.exceptions import NoRouteFoundException, UnknownStationException
from metro_planner.routes.fare_service import FareCalculationService
from metro_planner.routes.itinerary import ItineraryBuilder
from metro_planner.routes.schemas import (
    Itinerary, Journey, NetworkEdge, Predecessor, SearchResult, TicketType, UNREACHABLE
)
from metro_planner.stations.schemas import Station
from metro_planner.stations.service import (
    INTERCHANGE_LINE_KEY, NetworkModel, get_network_model
)

logger = logging.getLogger(__name__)


class NetworkGraph:
    """Graph representation of the metro network for route planning"""

    def __init__(self):
        self.nodes: Dict[str, Station] = {}
        self.edges: Dict[str, List[NetworkEdge]] = {}

    def add_node(self, station: Station):
        """Add a station platform to the graph"""
        self.nodes[station.id] = station
        if station.id not in self.edges:
            self.edges[station.id] = []

    def add_edge(self, edge: NetworkEdge):
        """Add a directed connection between platforms"""
        if edge.from_station_id not in self.edges:
            self.edges[edge.from_station_id] = []
        self.edges[edge.from_station_id].append(edge)

    def has_node(self, station_id: str) -> bool:
        return station_id in self.nodes

    def get_neighbors(self, station_id: str) -> List[NetworkEdge]:
        """Get all direct connections from a station"""
        return self.edges.get(station_id, [])

    def find_edge(self, from_station_id: str, to_station_id: str) -> Optional[NetworkEdge]:
        for edge in self.get_neighbors(from_station_id):
            if edge.to_station_id == to_station_id:
                return edge
        return None

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self.edges.values())


def build_network_graph(
    network: NetworkModel,
    interchange_time_seconds: Optional[int] = None
) -> NetworkGraph:
    """Derive the adjacency structure: hop edges both ways plus interchange walks"""
    if interchange_time_seconds is None:
        interchange_time_seconds = settings.interchange_time_seconds
    if interchange_time_seconds < 0:
        raise ValueError("Interchange time cannot be negative")

    graph = NetworkGraph()
    interchanges = network.interchange_groups()

    for line in network.lines.values():
        stations = line.stations
        for i, station in enumerate(stations):
            graph.add_node(station)

            # Backward hop uses the previous station's stored values
            if i > 0:
                previous = stations[i - 1]
                graph.add_edge(NetworkEdge(
                    from_station_id=station.id,
                    to_station_id=previous.id,
                    weight_seconds=previous.time_to_next,
                    distance_km=previous.distance_to_next,
                    line_key=line.key
                ))

            if i < len(stations) - 1:
                following = stations[i + 1]
                graph.add_edge(NetworkEdge(
                    from_station_id=station.id,
                    to_station_id=following.id,
                    weight_seconds=station.time_to_next,
                    distance_km=station.distance_to_next,
                    line_key=line.key
                ))

            if station.interchange_id:
                for other in interchanges[station.interchange_id]:
                    if other.line_key == station.line_key:
                        continue
                    graph.add_edge(NetworkEdge(
                        from_station_id=station.id,
                        to_station_id=other.id,
                        weight_seconds=interchange_time_seconds,
                        distance_km=Decimal("0"),
                        line_key=INTERCHANGE_LINE_KEY
                    ))

    logger.info(
        "Built network graph: %d nodes, %d edges", len(graph.nodes), graph.edge_count
    )
    return graph


@lru_cache(maxsize=1)
def get_network_graph() -> NetworkGraph:
    """Graph of the bundled network, built once per process"""
    return build_network_graph(get_network_model())


def next_departure_time(
    now: Optional[datetime] = None,
    interval_minutes: Optional[int] = None
) -> datetime:
    """Round up to the next departure boundary; a time already on a boundary stays"""
    if now is None:
        now = datetime.now()
    if interval_minutes is None:
        interval_minutes = settings.DEPARTURE_INTERVAL_MINUTES

    floored = now.replace(
        minute=now.minute - now.minute % interval_minutes, second=0, microsecond=0
    )
    if floored == now:
        return now
    return floored + timedelta(minutes=interval_minutes)


class RouteCalculator:
    """Shortest travel time search using Dijkstra's algorithm"""

    def __init__(self, graph: NetworkGraph):
        self.graph = graph

    def solve(self, start_id: str, target_id: Optional[str] = None) -> SearchResult:
        """
        Minimum seconds and predecessor links from start_id to every station.

        With a target the search stops as soon as the target is settled. The
        graph is only read, so one calculator can serve concurrent queries.
        """
        if not self.graph.has_node(start_id):
            raise UnknownStationException(start_id)
        if target_id is not None and not self.graph.has_node(target_id):
            raise UnknownStationException(target_id)

        distances: Dict[str, float] = {station_id: UNREACHABLE for station_id in self.graph.nodes}
        predecessors: Dict[str, Predecessor] = {}
        distances[start_id] = 0

        # Counter keeps pops in discovery order among equal costs
        sequence = itertools.count()
        pq = [(0, next(sequence), start_id)]
        settled = set()

        while pq:
            current_cost, _, current_station = heapq.heappop(pq)

            if current_station in settled:
                continue
            settled.add(current_station)

            if current_station == target_id:
                break

            for edge in self.graph.get_neighbors(current_station):
                new_cost = current_cost + edge.weight_seconds

                # First relaxation wins on ties
                if new_cost < distances[edge.to_station_id]:
                    distances[edge.to_station_id] = new_cost
                    predecessors[edge.to_station_id] = Predecessor(
                        from_station_id=current_station,
                        via_line=edge.line_key,
                        distance_km=edge.distance_km
                    )
                    heapq.heappush(pq, (new_cost, next(sequence), edge.to_station_id))

        logger.debug(
            "Dijkstra from %s settled %d of %d stations", start_id, len(settled), len(distances)
        )
        return SearchResult(
            start_station_id=start_id,
            distances=distances,
            predecessors=predecessors
        )


class RouteService:
    """High-level journey planning service"""

    def __init__(
        self,
        network: Optional[NetworkModel] = None,
        graph: Optional[NetworkGraph] = None,
        fare_service: Optional[FareCalculationService] = None
    ):
        if network is None:
            network = get_network_model()
            graph = graph or get_network_graph()
        self.network = network
        self.graph = graph or build_network_graph(network)
        self.calculator = RouteCalculator(self.graph)
        self.itinerary_builder = ItineraryBuilder(network)
        self.fare_service = fare_service or FareCalculationService()

    def plan_journey(
        self,
        from_station_id: str,
        to_station_id: str,
        ticket_type: Optional[Union[TicketType, str]] = None,
        now: Optional[datetime] = None
    ) -> Journey:
        """Fastest journey between two platforms with its fare and departure time"""
        try:
            start = self.network.get_station(from_station_id)
            end = self.network.get_station(to_station_id)
        except UnknownStationException as e:
            logger.warning("Journey request for unknown station %s", e.station_id)
            raise
        ticket = self.fare_service.parse_ticket_type(ticket_type)

        if self.network.same_physical_station(start.id, end.id):
            logger.info("Journey %s -> %s stays within one station", start.id, end.id)
            itinerary = Itinerary(
                path=[start.id], parts=[], total_time_seconds=0, total_distance_km=Decimal("0")
            )
        else:
            itinerary = self.find_itinerary(start.id, end.id)

        departure_time = next_departure_time(now)
        arrival_time = departure_time + timedelta(
            minutes=math.ceil(itinerary.total_time_seconds / 60)
        )
        fare = self.fare_service.calculate_fare(
            itinerary.total_distance_km, departure_time, ticket
        )

        instructions = self.itinerary_builder.generate_instructions(itinerary.parts, arrival_time)
        if not itinerary.parts:
            instructions = [f"You are already at {start.name}"]

        logger.info(
            "Planned journey %s -> %s: %ds, %s km, %d parts, fare %s",
            start.id, end.id, itinerary.total_time_seconds,
            itinerary.total_distance_km, len(itinerary.parts), fare.final_fare
        )

        return Journey(
            journey_id=f"{start.id}-{end.id}",
            start_station_id=start.id,
            end_station_id=end.id,
            parts=itinerary.parts,
            total_time_seconds=itinerary.total_time_seconds,
            total_distance_km=itinerary.total_distance_km,
            fare=fare,
            departure_time=departure_time,
            arrival_time=arrival_time,
            instructions=instructions
        )

    def find_itinerary(self, from_station_id: str, to_station_id: str) -> Itinerary:
        result = self.calculator.solve(from_station_id, to_station_id)
        if not result.is_reachable(to_station_id):
            logger.warning("No route found between %s and %s", from_station_id, to_station_id)
            raise NoRouteFoundException(from_station_id, to_station_id)
        return self.itinerary_builder.build(result, from_station_id, to_station_id)
