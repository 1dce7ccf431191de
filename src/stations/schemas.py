from pydantic import BaseModel
from typing import List

class StationDetail(BaseModel):
    name: str
    lat: float
    long: float
    lines: List[str] = []
    is_interchange: bool = False

class NearbyStation(StationDetail):
    distance_km: float

class StationNeighbour(BaseModel):
    name: str
    distance_km: int
    lines: List[str] = []

class LineInfo(BaseModel):
    name: str
    station_count: int

class StationSearchResult(BaseModel):
    stations: List[StationDetail]
    total: int
    page: int
    per_page: int
