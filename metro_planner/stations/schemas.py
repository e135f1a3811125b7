from pydantic import BaseModel, ConfigDict, computed_field
from typing import Dict, List, Literal, Optional
from decimal import Decimal

Direction = Literal["forward", "backward"]

class Station(BaseModel):
    """A line-level platform; a physical interchange has one Station per line"""
    id: str
    name: str
    line_key: str
    line_name: str
    color: str
    index: int
    interchange_id: Optional[str] = None
    platforms: Optional[Dict[Direction, int]] = None
    time_to_next: int = 0
    distance_to_next: Decimal = Decimal("0")
    lat: Optional[float] = None
    lon: Optional[float] = None

    def platform_for(self, direction: str) -> int:
        if not self.platforms:
            return 1
        return self.platforms.get(direction, 1)

    model_config = ConfigDict(frozen=True)

class Line(BaseModel):
    key: str
    name: str
    color: str
    stations: List[Station]

    @property
    def first_station(self) -> Station:
        return self.stations[0]

    @property
    def last_station(self) -> Station:
        return self.stations[-1]

    model_config = ConfigDict(frozen=True)

class PhysicalStation(BaseModel):
    """One physical location aggregating its platform-level station ids"""
    key: str
    name: str
    station_ids: List[str]
    line_keys: List[str]
    colors: List[str]
    lat: Optional[float] = None
    lon: Optional[float] = None

    @computed_field
    @property
    def primary_station_id(self) -> str:
        return self.station_ids[0]

    @computed_field
    @property
    def is_interchange(self) -> bool:
        return len(self.line_keys) > 1

    model_config = ConfigDict(frozen=True)

class LineSummary(BaseModel):
    key: str
    name: str
    color: str
    station_count: int
    first_station_name: str
    last_station_name: str

class LineDetail(LineSummary):
    stations: List[Station]

class StationDetail(BaseModel):
    station: Station
    physical_station: PhysicalStation
    other_platforms: List[Station] = []

class StationSearchResult(BaseModel):
    stations: List[PhysicalStation]
    total: int
