import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from metro_planner.exceptions import NoRouteFoundException
from metro_planner.routes.schemas import (
    Itinerary, JourneyPart, JourneyStation, SearchResult
)
from metro_planner.stations.schemas import Station
from metro_planner.stations.service import INTERCHANGE_LINE_KEY, NetworkModel

logger = logging.getLogger(__name__)

JOURNEY_STATION_FIELDS = {
    "id", "name", "line_key", "line_name", "color", "index", "interchange_id", "lat", "lon"
}


class _OpenPart:
    """Mutable accumulator for a part while the path is being scanned"""

    def __init__(self, line_key: str, direction: str, start_platform: int, direction_label: str):
        self.line_key = line_key
        self.direction = direction
        self.start_platform = start_platform
        self.direction_label = direction_label
        self.stations: List[Station] = []
        self.closed = False


class ItineraryBuilder:
    """Turns solver predecessor links into an ordered, segmented itinerary"""

    def __init__(self, network: NetworkModel):
        self.network = network

    def build(self, result: SearchResult, start_id: str, end_id: str) -> Itinerary:
        path = self.reconstruct_path(result, start_id, end_id)
        parts = self.segment_path(result, path)
        return Itinerary(
            path=path,
            parts=parts,
            total_time_seconds=int(result.distances[end_id]),
            total_distance_km=self.total_distance(result, path)
        )

    def reconstruct_path(self, result: SearchResult, start_id: str, end_id: str) -> List[str]:
        """Walk predecessor links back from the end station to the start"""
        if result.start_station_id != start_id:
            raise ValueError(
                f"Search result starts at {result.start_station_id}, not {start_id}"
            )
        if not result.is_reachable(end_id):
            raise NoRouteFoundException(start_id, end_id)

        path = [end_id]
        current = end_id
        while current != start_id:
            predecessor = result.predecessors.get(current)
            if predecessor is None:
                raise NoRouteFoundException(start_id, end_id)
            current = predecessor.from_station_id
            path.append(current)

        path.reverse()
        return path

    @staticmethod
    def total_distance(result: SearchResult, path: List[str]) -> Decimal:
        """Ridden distance; walking transfers never count even if given a length"""
        total = Decimal("0")
        for station_id in path[1:]:
            predecessor = result.predecessors[station_id]
            if predecessor.via_line != INTERCHANGE_LINE_KEY:
                total += predecessor.distance_km
        return total

    def segment_path(self, result: SearchResult, path: List[str]) -> List[JourneyPart]:
        """
        Split the path into same-line, same-direction parts.

        An interchange hop closes the current part, with the interchange
        platform as its last station, and the next station opens a new part.
        Interchange hops with no open part (walking off the start platform, or
        a second transfer in a row) add nothing. The final station always
        joins the last part.
        """
        parts: List[_OpenPart] = []
        current: Optional[_OpenPart] = None

        for i, station_id in enumerate(path):
            station = self.network.get_station(station_id)

            if i == len(path) - 1:
                if current is None:
                    current = self._open_part(station, None, station.line_key)
                    parts.append(current)
                current.stations.append(station)
                break

            next_id = path[i + 1]
            via_line = result.predecessors[next_id].via_line

            if via_line == INTERCHANGE_LINE_KEY:
                if current is not None and not current.closed:
                    current.stations.append(station)
                    current.closed = True
                continue

            if current is None or current.closed or current.line_key != via_line:
                current = self._open_part(station, self.network.get_station(next_id), via_line)
                parts.append(current)
            current.stations.append(station)

        return [self._finish_part(part, result) for part in parts]

    def _open_part(self, station: Station, next_station: Optional[Station], line_key: str) -> _OpenPart:
        direction = "forward"
        if next_station is not None and next_station.index < station.index:
            direction = "backward"

        return _OpenPart(
            line_key=line_key,
            direction=direction,
            start_platform=station.platform_for(direction),
            direction_label=self.network.terminal_name(line_key, direction)
        )

    def _finish_part(self, part: _OpenPart, result: SearchResult) -> JourneyPart:
        line = self.network.lines[part.line_key]
        first, last = part.stations[0], part.stations[-1]
        return JourneyPart(
            line_key=line.key,
            line_name=line.name,
            color=line.color,
            direction=part.direction,
            start_platform=part.start_platform,
            direction_label=part.direction_label,
            time_seconds=int(result.distances[last.id] - result.distances[first.id]),
            stations=[
                JourneyStation(**station.model_dump(include=JOURNEY_STATION_FIELDS))
                for station in part.stations
            ]
        )

    def count_stops(self, part: JourneyPart) -> int:
        """Stations ridden past, ignoring platform changes at the same location"""
        stops = 0
        for previous, station in zip(part.stations, part.stations[1:]):
            if not self.network.same_physical_station(previous.id, station.id):
                stops += 1
        return stops

    def generate_instructions(self, parts: List[JourneyPart], arrival_time: datetime) -> List[str]:
        """Turn-by-turn text for the route view"""
        instructions = []
        for i, part in enumerate(parts):
            boarding = part.stations[0]
            verb = "Board" if i == 0 else "Change to"
            instructions.append(
                f"{verb} the {part.line_name} at {boarding.name}, "
                f"platform {part.start_platform}, towards {part.direction_label}"
            )
            stops = self.count_stops(part)
            if stops:
                unit = "stop" if stops == 1 else "stops"
                instructions.append(f"Ride {stops} {unit} to {part.stations[-1].name}")

        if parts:
            destination = parts[-1].stations[-1].name
            instructions.append(f"Arrive at {destination} at {arrival_time.strftime('%H:%M')}")
        return instructions
