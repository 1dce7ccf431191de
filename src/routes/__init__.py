"""
Route Planning Module

This module provides route planning for the Delhi Metro.
It includes:

- Shortest-distance route calculation using Dijkstra's algorithm
- Line annotation of a route, with the stations where the traveller changes line
- Distance-band fare calculation
- Route request validation with station name suggestions

Key Components:
- service.py: RouteCalculator, ItineraryAnnotator and RouteService
- fare_service.py: Fare tariff
- validation.py: Request validation
- router.py: FastAPI endpoints for route planning APIs
- schemas.py: Pydantic models for request/response structures
"""

from .router import router
from .service import RouteService, RouteCalculator, ItineraryAnnotator
from .fare_service import FareCalculationService, calculate_fare
from .validation import RouteValidator
from .schemas import (
    RouteRequest, RoutePlan, SegmentAnnotation,
    FareCalculationResponse, RouteValidationError
)

__all__ = [
    "router",
    "RouteService",
    "RouteCalculator",
    "ItineraryAnnotator",
    "FareCalculationService",
    "calculate_fare",
    "RouteValidator",
    "RouteRequest",
    "RoutePlan",
    "SegmentAnnotation",
    "FareCalculationResponse",
    "RouteValidationError"
]
