from fastapi import APIRouter, Depends, HTTPException, status, Query

from src.exceptions import Unreachable
from src.network.dependencies import get_network
from src.network.graph import NetworkGraph
from src.routes.schemas import RouteRequest, RoutePlan, FareCalculationResponse
from src.routes.service import RouteService
from src.routes.fare_service import FareCalculationService
from src.routes.validation import RouteValidator

router = APIRouter()

@router.post("/plan", response_model=RoutePlan)
def plan_route(
    request: RouteRequest,
    graph: NetworkGraph = Depends(get_network)
):
    """Plan the shortest route between two stations"""

    # Validate request
    validator = RouteValidator(graph)
    validation_errors = validator.validate_route_request(request)

    if validation_errors:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "message": "Route request validation failed",
                "errors": [
                    {
                        "code": error.error_code,
                        "message": error.error_message,
                        "field": error.field,
                        "suggestions": error.suggestions
                    }
                    for error in validation_errors
                ]
            }
        )

    try:
        return RouteService(graph).plan(request.from_station, request.to_station)
    except Unreachable as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )

@router.get("/fare", response_model=FareCalculationResponse)
def calculate_fare(
    distance_km: int = Query(..., ge=0, description="Trip distance in whole kilometres")
):
    """Calculate the fare for a trip distance"""
    return FareCalculationService().fare_breakdown(distance_km)
