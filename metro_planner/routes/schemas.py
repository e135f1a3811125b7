import math
from pydantic import BaseModel, ConfigDict, computed_field
from typing import Dict, List, Optional, Literal
from datetime import datetime
from decimal import Decimal
from enum import Enum

# Solver distance for stations not reachable from the start
UNREACHABLE = math.inf

class TicketType(str, Enum):
    TOKEN = "TOKEN"
    CARD = "CARD"
    QR = "QR"
    NCMC = "NCMC"

class NetworkEdge(BaseModel):
    """Directed graph edge; line_key is the interchange marker for platform transfers"""
    from_station_id: str
    to_station_id: str
    weight_seconds: int
    distance_km: Decimal
    line_key: str

    model_config = ConfigDict(frozen=True)

class Predecessor(BaseModel):
    """How the solver reached a station on its best known path"""
    from_station_id: str
    via_line: str
    distance_km: Decimal

class SearchResult(BaseModel):
    """Solver output: minimum seconds and predecessor link per station id"""
    start_station_id: str
    distances: Dict[str, float]
    predecessors: Dict[str, Predecessor]

    def is_reachable(self, station_id: str) -> bool:
        return self.distances.get(station_id, UNREACHABLE) != UNREACHABLE

class FareBreakdown(BaseModel):
    """Fare derived from distance, ticket type and time of travel"""
    distance_km: Decimal
    base_fare: Decimal
    final_fare: Decimal
    applied_discount: Decimal
    discount_rate: Decimal
    ticket_type: TicketType
    travel_time: datetime
    is_off_peak: bool
    is_holiday: bool
    currency: str = "INR"

    model_config = ConfigDict(frozen=True)

class FareSlab(BaseModel):
    max_distance_km: Optional[Decimal] = None  # None for the open-ended last slab
    fare: Decimal

class JourneyStation(BaseModel):
    """Per-station display data for the route view"""
    id: str
    name: str
    line_key: str
    line_name: str
    color: str
    index: int
    interchange_id: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None

class JourneyPart(BaseModel):
    """Maximal run of the path on one line in one direction"""
    line_key: str
    line_name: str
    color: str
    direction: Literal["forward", "backward"]
    start_platform: int
    direction_label: str  # Terminal station in the direction of travel
    time_seconds: int
    stations: List[JourneyStation]

class Itinerary(BaseModel):
    """Reconstructed path segmented into parts, before fare and timing are attached"""
    path: List[str]
    parts: List[JourneyPart]
    total_time_seconds: int
    total_distance_km: Decimal

class Journey(BaseModel):
    journey_id: str
    start_station_id: str
    end_station_id: str
    parts: List[JourneyPart]
    total_time_seconds: int
    total_distance_km: Decimal
    fare: FareBreakdown
    departure_time: datetime
    arrival_time: datetime
    instructions: List[str]

    @computed_field
    @property
    def total_minutes(self) -> int:
        return -(-self.total_time_seconds // 60)

    @computed_field
    @property
    def interchange_count(self) -> int:
        return max(len(self.parts) - 1, 0)

class RouteRequest(BaseModel):
    """Request schema for journey planning"""
    from_station_id: str
    to_station_id: str
    ticket_type: Optional[str] = None

class RouteResponse(BaseModel):
    """Response schema for journey planning"""
    journey: Journey
    calculation_time_ms: int

class FareCalculationRequest(BaseModel):
    """Request schema for a fare preview"""
    distance_km: float
    travel_time: Optional[datetime] = None
    ticket_type: Optional[str] = None

class FareOption(BaseModel):
    ticket_type: TicketType
    fare: FareBreakdown

class FareOptionsResponse(BaseModel):
    distance_km: Decimal
    travel_time: datetime
    options: List[FareOption]
    cheapest_ticket_type: TicketType

class RouteValidationError(BaseModel):
    """Route validation error details"""
    error_code: str
    error_message: str
    field: Optional[str] = None

