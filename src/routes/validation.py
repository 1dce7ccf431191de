from typing import List

from src.network.graph import NetworkGraph
from src.routes.schemas import RouteRequest, RouteValidationError
from src.stations.service import StationService

MAX_SUGGESTIONS = 3

class RouteValidator:
    """Service for validating route planning requests"""

    def __init__(self, graph: NetworkGraph):
        self.graph = graph
        self.station_service = StationService(graph)

    def validate_route_request(self, request: RouteRequest) -> List[RouteValidationError]:
        """Validate a route planning request"""
        errors = []

        for field, name, code, role in (
            ("from_station", request.from_station, "INVALID_FROM_STATION", "Origin"),
            ("to_station", request.to_station, "INVALID_TO_STATION", "Destination"),
        ):
            if not name.strip():
                errors.append(RouteValidationError(
                    error_code="EMPTY_STATION_NAME",
                    error_message=f"{role} station name is required",
                    field=field
                ))
            elif not self.graph.has_station(name):
                errors.append(RouteValidationError(
                    error_code=code,
                    error_message=f"{role} station '{name}' not found",
                    field=field,
                    suggestions=self.suggest_stations(name)
                ))

        return errors

    def suggest_stations(self, name: str) -> List[str]:
        """Known station names containing the given text, ignoring case"""
        matches = self.station_service.search_stations_by_name(name.strip(), limit=MAX_SUGGESTIONS)
        return [station.station_name for station in matches]
