"""
Journey Planning Module

This module provides the journey routing and fare engine for the metro network.
It includes:

- Graph construction from line and station definitions, with interchange walks
- Fastest-path calculation using Dijkstra's algorithm
- Itinerary reconstruction into same-line parts with platform and direction
- Distance-slab fares with smart-ticket, off-peak and holiday discounts
- Request validation for the HTTP endpoints

Key Components:
- service.py: Graph builder, shortest-path solver and journey planning service
- itinerary.py: Path reconstruction, part segmentation and turn-by-turn text
- fare_service.py: Fare calculation rules
- validation.py: Request validation
- router.py: FastAPI endpoints for journey planning and fare previews
- schemas.py: Pydantic models for graph, journey and fare structures
"""

from .router import router
from .service import (
    RouteService, RouteCalculator, NetworkGraph, build_network_graph,
    get_network_graph, next_departure_time
)
from .itinerary import ItineraryBuilder
from .fare_service import FareCalculationService, FARE_SLABS
from .validation import RouteValidator
from .schemas import (
    TicketType, NetworkEdge, Predecessor, SearchResult, UNREACHABLE,
    FareBreakdown, FareSlab, FareOption, FareOptionsResponse,
    JourneyStation, JourneyPart, Itinerary, Journey,
    RouteRequest, RouteResponse, FareCalculationRequest, RouteValidationError
)

__all__ = [
    "router",
    "RouteService",
    "RouteCalculator",
    "NetworkGraph",
    "build_network_graph",
    "get_network_graph",
    "next_departure_time",
    "ItineraryBuilder",
    "FareCalculationService",
    "FARE_SLABS",
    "RouteValidator",
    "TicketType",
    "NetworkEdge",
    "Predecessor",
    "SearchResult",
    "UNREACHABLE",
    "FareBreakdown",
    "FareSlab",
    "FareOption",
    "FareOptionsResponse",
    "JourneyStation",
    "JourneyPart",
    "Itinerary",
    "Journey",
    "RouteRequest",
    "RouteResponse",
    "FareCalculationRequest",
    "RouteValidationError"
]
