import logging
from decimal import Decimal
from functools import lru_cache
from typing import Dict, List, Optional

from metro_planner.exceptions import UnknownStationException
from metro_planner.stations.network_data import METRO_DATA
from metro_planner.stations.schemas import (
    Line, LineDetail, LineSummary, PhysicalStation, Station, StationDetail
)

logger = logging.getLogger(__name__)

# Reserved line tag for walking transfers between platforms; never a real line key
INTERCHANGE_LINE_KEY = "interchange"


class NetworkModel:
    """Read-only description of the lines, their ordered stations and interchanges"""

    def __init__(self, lines: List[Line]):
        self.lines: Dict[str, Line] = {}
        self.stations: Dict[str, Station] = {}
        self._physical: Dict[str, PhysicalStation] = {}
        self._physical_by_station: Dict[str, str] = {}

        for line in lines:
            if line.key == INTERCHANGE_LINE_KEY:
                raise ValueError(f"Line key '{INTERCHANGE_LINE_KEY}' is reserved for interchanges")
            if line.key in self.lines:
                raise ValueError(f"Duplicate line key: {line.key}")
            if not line.stations:
                raise ValueError(f"Line {line.key} has no stations")
            self.lines[line.key] = line

            for station in line.stations:
                if station.id in self.stations:
                    raise ValueError(f"Duplicate station id: {station.id}")
                if station.time_to_next < 0 or station.distance_to_next < 0:
                    raise ValueError(f"Negative hop values on station {station.id}")
                self.stations[station.id] = station

        self._build_physical_stations()

    @classmethod
    def from_definition(cls, definition: dict) -> "NetworkModel":
        """Build the model from a mapping of line key -> {name, color, stations}"""
        lines = []
        for line_key, line_data in definition.items():
            stations = [
                Station(
                    id=raw["id"],
                    name=raw["name"],
                    line_key=line_key,
                    line_name=line_data["name"],
                    color=line_data["color"],
                    index=index,
                    interchange_id=raw.get("interchange_id"),
                    platforms=raw.get("platforms"),
                    time_to_next=raw.get("time_to_next", 0),
                    distance_to_next=Decimal(str(raw.get("distance_to_next", 0))),
                    lat=raw.get("lat"),
                    lon=raw.get("lon"),
                )
                for index, raw in enumerate(line_data["stations"])
            ]
            lines.append(Line(
                key=line_key,
                name=line_data["name"],
                color=line_data["color"],
                stations=stations
            ))
        return cls(lines)

    def _build_physical_stations(self):
        grouped: Dict[str, List[Station]] = {}
        for line in self.lines.values():
            for station in line.stations:
                grouped.setdefault(self.physical_key(station), []).append(station)

        for key, platforms in grouped.items():
            first = platforms[0]
            line_keys = []
            colors = []
            for platform in platforms:
                if platform.line_key not in line_keys:
                    line_keys.append(platform.line_key)
                    colors.append(platform.color)
            self._physical[key] = PhysicalStation(
                key=key,
                name=first.name,
                station_ids=[platform.id for platform in platforms],
                line_keys=line_keys,
                colors=colors,
                lat=first.lat,
                lon=first.lon
            )
            for platform in platforms:
                self._physical_by_station[platform.id] = key

    @staticmethod
    def physical_key(station: Station) -> str:
        return station.interchange_id or station.name

    def has_station(self, station_id: str) -> bool:
        return station_id in self.stations

    def get_station(self, station_id: str) -> Station:
        station = self.stations.get(station_id)
        if station is None:
            raise UnknownStationException(station_id)
        return station

    def get_line(self, line_key: str) -> Optional[Line]:
        return self.lines.get(line_key)

    def terminal_name(self, line_key: str, direction: str) -> str:
        """Name of the last station reached when riding the line in a direction"""
        line = self.lines[line_key]
        if direction == "forward":
            return line.last_station.name
        return line.first_station.name

    def get_physical_station(self, station_id: str) -> PhysicalStation:
        self.get_station(station_id)
        return self._physical[self._physical_by_station[station_id]]

    def physical_stations(self) -> List[PhysicalStation]:
        return sorted(self._physical.values(), key=lambda p: p.name.lower())

    def platforms_of(self, station_id: str) -> List[Station]:
        physical = self.get_physical_station(station_id)
        return [self.stations[platform_id] for platform_id in physical.station_ids]

    def same_physical_station(self, station_a_id: str, station_b_id: str) -> bool:
        return (
            self._physical_by_station[self.get_station(station_a_id).id]
            == self._physical_by_station[self.get_station(station_b_id).id]
        )

    def interchange_groups(self) -> Dict[str, List[Station]]:
        """Interchange id -> every platform sharing it, in line order"""
        groups: Dict[str, List[Station]] = {}
        for line in self.lines.values():
            for station in line.stations:
                if station.interchange_id:
                    groups.setdefault(station.interchange_id, []).append(station)
        return groups


@lru_cache(maxsize=1)
def get_network_model() -> NetworkModel:
    """Load the bundled network once per process"""
    network = NetworkModel.from_definition(METRO_DATA)
    logger.info(
        "Loaded metro network: %d lines, %d stations",
        len(network.lines), len(network.stations)
    )
    return network


class StationService:
    @staticmethod
    def search_stations(
        network: NetworkModel,
        query: Optional[str] = None,
        line_key: Optional[str] = None
    ) -> List[PhysicalStation]:
        """Canonical stations for selection, filtered by name substring and line"""
        stations = network.physical_stations()

        if query:
            lowered = query.strip().lower()
            stations = [s for s in stations if lowered in s.name.lower()]

        if line_key:
            stations = [s for s in stations if line_key in s.line_keys]

        return stations

    @staticmethod
    def get_station_detail(network: NetworkModel, station_id: str) -> StationDetail:
        station = network.get_station(station_id)
        physical = network.get_physical_station(station_id)
        return StationDetail(
            station=station,
            physical_station=physical,
            other_platforms=[
                platform for platform in network.platforms_of(station_id)
                if platform.id != station.id
            ]
        )

    @staticmethod
    def get_interchange_stations(network: NetworkModel) -> List[PhysicalStation]:
        return [s for s in network.physical_stations() if s.is_interchange]

    @staticmethod
    def summarize_line(line: Line) -> LineSummary:
        return LineSummary(
            key=line.key,
            name=line.name,
            color=line.color,
            station_count=len(line.stations),
            first_station_name=line.first_station.name,
            last_station_name=line.last_station.name
        )

    @staticmethod
    def get_lines(network: NetworkModel) -> List[LineSummary]:
        return [StationService.summarize_line(line) for line in network.lines.values()]

    @staticmethod
    def get_line_detail(network: NetworkModel, line_key: str) -> Optional[LineDetail]:
        line = network.get_line(line_key)
        if not line:
            return None
        summary = StationService.summarize_line(line)
        return LineDetail(**summary.model_dump(), stations=line.stations)
