from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional
from datetime import datetime
import time

from metro_planner.exceptions import InvalidFareInputException
from metro_planner.routes.schemas import (
    FareBreakdown, FareCalculationRequest, FareOptionsResponse, FareSlab,
    RouteRequest, RouteResponse, RouteValidationError
)
from metro_planner.routes.service import RouteService
from metro_planner.routes.fare_service import FareCalculationService
from metro_planner.routes.validation import RouteValidator

router = APIRouter()

def get_route_service() -> RouteService:
    """Route service over the process-wide network and graph"""
    return RouteService()

def get_fare_service() -> FareCalculationService:
    return FareCalculationService()

def _validation_failed(message: str, errors: List[RouteValidationError]) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={
            "message": message,
            "errors": [
                {
                    "code": error.error_code,
                    "message": error.error_message,
                    "field": error.field
                }
                for error in errors
            ]
        }
    )

@router.post("/plan", response_model=RouteResponse)
def plan_route(
    request: RouteRequest,
    route_service: RouteService = Depends(get_route_service)
):
    """Plan the fastest journey between two stations"""

    start_time = time.time()

    validator = RouteValidator(route_service.network)
    validation_errors = validator.validate_route_request(request)
    if validation_errors:
        raise _validation_failed("Route request validation failed", validation_errors)

    # Engine errors are mapped to status codes by the app-level handler
    journey = route_service.plan_journey(
        request.from_station_id,
        request.to_station_id,
        ticket_type=request.ticket_type
    )

    calculation_time = int((time.time() - start_time) * 1000)  # Convert to milliseconds

    return RouteResponse(
        journey=journey,
        calculation_time_ms=calculation_time
    )

@router.post("/fare-calculate", response_model=FareBreakdown)
def calculate_fare(
    request: FareCalculationRequest,
    route_service: RouteService = Depends(get_route_service),
    fare_service: FareCalculationService = Depends(get_fare_service)
):
    """Fare preview for an explicit distance, travel time and ticket type"""

    validator = RouteValidator(route_service.network)
    validation_errors = validator.validate_fare_request(request)
    if validation_errors:
        raise _validation_failed("Fare request validation failed", validation_errors)

    try:
        return fare_service.calculate_fare(
            request.distance_km,
            travel_time=request.travel_time,
            ticket_type=request.ticket_type
        )
    except InvalidFareInputException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

@router.get("/fare-options", response_model=FareOptionsResponse)
def get_fare_options(
    distance_km: float = Query(..., ge=0, description="Travel distance in kilometers"),
    travel_time: Optional[datetime] = Query(None, description="Time of travel, defaults to now"),
    fare_service: FareCalculationService = Depends(get_fare_service)
):
    """Compare the fare of every ticket type for the same trip"""
    try:
        return fare_service.compare_ticket_types(distance_km, travel_time)
    except InvalidFareInputException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

@router.get("/fare-slabs", response_model=List[FareSlab])
def get_fare_slabs(fare_service: FareCalculationService = Depends(get_fare_service)):
    """Distance slabs used for the base fare"""
    return fare_service.get_fare_slabs()
