"""Errors raised by the routing and fare engine"""


class MetroPlannerException(Exception):
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class UnknownStationException(MetroPlannerException):
    def __init__(self, station_id: str):
        self.station_id = station_id
        super().__init__(f"Station with ID {station_id} not found", code="UNKNOWN_STATION")


class NoRouteFoundException(MetroPlannerException):
    def __init__(self, from_station_id: str, to_station_id: str):
        self.from_station_id = from_station_id
        self.to_station_id = to_station_id
        super().__init__(
            f"No route found between {from_station_id} and {to_station_id}",
            code="NO_ROUTE_FOUND"
        )


class InvalidFareInputException(MetroPlannerException):
    def __init__(self, message: str = "Invalid fare input"):
        super().__init__(message, code="INVALID_FARE_INPUT")
