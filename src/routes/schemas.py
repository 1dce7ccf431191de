from pydantic import BaseModel, Field
from typing import List, Optional
from decimal import Decimal

class RouteRequest(BaseModel):
    """Request schema for route planning"""
    from_station: str
    to_station: str

class SegmentAnnotation(BaseModel):
    """How the traveller leaves a station: stay on a line or change to one"""
    station_name: str
    traverse_on: Optional[str] = None
    change_to: Optional[str] = None

    @property
    def line(self) -> Optional[str]:
        return self.change_to if self.change_to is not None else self.traverse_on

    @property
    def is_change(self) -> bool:
        return self.change_to is not None

class RoutePlan(BaseModel):
    """Shortest route between two stations with its fare"""
    source: str
    destination: str
    path: List[str]
    distance_km: int
    fare: Decimal
    annotations: List[SegmentAnnotation]
    transfers: int = 0
    lines_used: List[str] = []  # Names of lines ridden, in order

class FareCalculationResponse(BaseModel):
    """Fare for a distance together with the tariff band it falls in"""
    distance_km: int
    fare: Decimal
    band_lower_km: Optional[int] = None  # Exclusive, None for the first band
    band_upper_km: Optional[int] = None  # Inclusive, None for the last band
    currency: str = "INR"

class RouteValidationError(BaseModel):
    """Route validation error details"""
    error_code: str
    error_message: str
    field: Optional[str] = None
    suggestions: List[str] = Field(default_factory=list)
