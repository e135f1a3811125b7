"""
Network Model Module

Static description of the metro network: lines, their ordered stations,
per-hop travel time and distance, and the interchanges linking platforms of
different lines at the same physical station.

Key Components:
- network_data.py: Bundled Namma Metro line definitions
- service.py: NetworkModel loader and station lookup helpers
- router.py: FastAPI endpoints for station and line listings
- schemas.py: Pydantic models for stations, lines and physical stations
"""

from .service import (
    NetworkModel, StationService, get_network_model, INTERCHANGE_LINE_KEY
)
from .schemas import (
    Station, Line, PhysicalStation, LineSummary, LineDetail,
    StationDetail, StationSearchResult
)

__all__ = [
    "NetworkModel",
    "StationService",
    "get_network_model",
    "INTERCHANGE_LINE_KEY",
    "Station",
    "Line",
    "PhysicalStation",
    "LineSummary",
    "LineDetail",
    "StationDetail",
    "StationSearchResult"
]
