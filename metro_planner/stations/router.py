from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional
from metro_planner.exceptions import UnknownStationException
from metro_planner.stations.schemas import (
    LineDetail, LineSummary, StationDetail, StationSearchResult
)
from metro_planner.stations.service import NetworkModel, StationService, get_network_model

router = APIRouter()

@router.get("/", response_model=StationSearchResult)
def get_stations(
    query: Optional[str] = Query(None, description="Search by station name"),
    line_key: Optional[str] = Query(None, description="Filter by line key"),
    network: NetworkModel = Depends(get_network_model)
):
    """List physical stations, one entry per location, for station selection"""
    stations = StationService.search_stations(network, query=query, line_key=line_key)
    return StationSearchResult(stations=stations, total=len(stations))

@router.get("/interchanges", response_model=StationSearchResult)
def get_interchange_stations(network: NetworkModel = Depends(get_network_model)):
    """Stations served by more than one line"""
    stations = StationService.get_interchange_stations(network)
    return StationSearchResult(stations=stations, total=len(stations))

@router.get("/lines", response_model=List[LineSummary])
def get_lines(network: NetworkModel = Depends(get_network_model)):
    """All lines with their terminal stations"""
    return StationService.get_lines(network)

@router.get("/lines/{line_key}", response_model=LineDetail)
def get_line(line_key: str, network: NetworkModel = Depends(get_network_model)):
    """A line with its stations in forward order"""
    line = StationService.get_line_detail(network, line_key)
    if not line:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Line {line_key} not found"
        )
    return line

@router.get("/{station_id}", response_model=StationDetail)
def get_station(station_id: str, network: NetworkModel = Depends(get_network_model)):
    """Platform-level station detail including the other platforms at the same location"""
    try:
        return StationService.get_station_detail(network, station_id)
    except UnknownStationException as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )
