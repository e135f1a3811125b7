from typing import List
from metro_planner.exceptions import InvalidFareInputException
from metro_planner.routes.fare_service import FareCalculationService
from metro_planner.routes.schemas import (
    FareCalculationRequest, RouteRequest, RouteValidationError
)
from metro_planner.stations.service import NetworkModel

class RouteValidator:
    """Service for validating journey planning and fare requests"""

    def __init__(self, network: NetworkModel):
        self.network = network

    def validate_route_request(self, request: RouteRequest) -> List[RouteValidationError]:
        """Validate a journey planning request"""
        errors = []

        if not self.network.has_station(request.from_station_id):
            errors.append(RouteValidationError(
                error_code="INVALID_FROM_STATION",
                error_message=f"Origin station with ID {request.from_station_id} not found",
                field="from_station_id"
            ))

        if not self.network.has_station(request.to_station_id):
            errors.append(RouteValidationError(
                error_code="INVALID_TO_STATION",
                error_message=f"Destination station with ID {request.to_station_id} not found",
                field="to_station_id"
            ))

        errors.extend(self._validate_ticket_type(request.ticket_type))
        return errors

    def validate_fare_request(self, request: FareCalculationRequest) -> List[RouteValidationError]:
        """Validate a fare preview request"""
        errors = []

        if request.distance_km < 0:
            errors.append(RouteValidationError(
                error_code="NEGATIVE_DISTANCE",
                error_message="Distance cannot be negative",
                field="distance_km"
            ))

        errors.extend(self._validate_ticket_type(request.ticket_type))
        return errors

    def _validate_ticket_type(self, ticket_type) -> List[RouteValidationError]:
        try:
            FareCalculationService.parse_ticket_type(ticket_type)
        except InvalidFareInputException as e:
            return [RouteValidationError(
                error_code="INVALID_TICKET_TYPE",
                error_message=e.message,
                field="ticket_type"
            )]
        return []
