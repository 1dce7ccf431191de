from pydantic import BaseModel, Field
from typing import List

class NetworkNode(BaseModel):
    """Network graph node representation"""
    station_id: int
    station_name: str
    lat: float
    long: float
    lines: List[str] = []

class NetworkEdge(BaseModel):
    """One direction of an adjacency between two stations"""
    from_station_id: int
    to_station_id: int
    distance_km: int
    lines: List[str] = []

class DatasetStation(BaseModel):
    """Station record as it appears in a network dataset file"""
    name: str = Field(..., min_length=1)
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)
    lines: List[str] = Field(..., min_length=1)

class DatasetEdge(BaseModel):
    """Adjacency record as it appears in a network dataset file"""
    from_station: str = Field(..., alias="from")
    to_station: str = Field(..., alias="to")
    lines: List[str] = []

class NetworkDataset(BaseModel):
    """Complete network dataset: stations in registration order, then edges"""
    name: str = "Metro Network"
    stations: List[DatasetStation] = []
    edges: List[DatasetEdge] = []
