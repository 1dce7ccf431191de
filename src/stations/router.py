from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional

from src.exceptions import UnknownStation
from src.network.dependencies import get_network
from src.network.graph import NetworkGraph
from src.stations.schemas import (
    StationDetail, StationSearchResult, NearbyStation, StationNeighbour, LineInfo
)
from src.stations.service import StationService

router = APIRouter()

@router.get("/", response_model=StationSearchResult)
def get_stations(
    skip: int = Query(0, ge=0, description="Number of stations to skip"),
    limit: int = Query(50, ge=1, le=250, description="Number of stations to return"),
    query: Optional[str] = Query(None, description="Search by station name"),
    line: Optional[str] = Query(None, description="Filter by line name"),
    graph: NetworkGraph = Depends(get_network)
):
    """Get stations with optional search and filters"""
    stations, total = StationService(graph).get_stations(
        skip=skip, limit=limit, query=query, line=line
    )

    page = (skip // limit) + 1

    return StationSearchResult(
        stations=[StationService.to_detail(station) for station in stations],
        total=total,
        page=page,
        per_page=limit
    )

@router.get("/search", response_model=List[StationDetail])
def search_stations(
    q: str = Query(..., min_length=1, description="Search query"),
    limit: int = Query(10, ge=1, le=50, description="Maximum number of results"),
    graph: NetworkGraph = Depends(get_network)
):
    """Search stations by name for autocomplete"""
    stations = StationService(graph).search_stations_by_name(q, limit=limit)
    return [StationService.to_detail(station) for station in stations]

@router.get("/nearby", response_model=List[NearbyStation])
def get_nearby_stations(
    lat: float = Query(..., ge=-90, le=90, description="Latitude"),
    lng: float = Query(..., ge=-180, le=180, description="Longitude"),
    radius_km: float = Query(1.0, ge=0.1, le=50, description="Search radius in kilometers"),
    limit: int = Query(10, ge=1, le=50, description="Maximum number of results"),
    graph: NetworkGraph = Depends(get_network)
):
    """Get stations within radius of given coordinates"""
    nearby = StationService(graph).get_nearby_stations(lat, lng, radius_km=radius_km, limit=limit)
    return [StationService.to_nearby(station, distance) for station, distance in nearby]

@router.get("/interchanges", response_model=List[StationDetail])
def get_interchange_stations(graph: NetworkGraph = Depends(get_network)):
    """Get all interchange stations"""
    stations = StationService(graph).get_interchange_stations()
    return [StationService.to_detail(station) for station in stations]

@router.get("/lines", response_model=List[LineInfo])
def get_lines(graph: NetworkGraph = Depends(get_network)):
    """Get every line in the network"""
    return StationService(graph).get_lines()

@router.get("/{name}", response_model=StationDetail)
def get_station(name: str, graph: NetworkGraph = Depends(get_network)):
    """Get detailed station information"""
    try:
        station = StationService(graph).get_station(name)
    except UnknownStation:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Station '{name}' not found"
        )

    return StationService.to_detail(station)

@router.get("/{name}/neighbours", response_model=List[StationNeighbour])
def get_station_neighbours(name: str, graph: NetworkGraph = Depends(get_network)):
    """Get direct connections from a station"""
    try:
        return StationService(graph).get_station_neighbours(name)
    except UnknownStation:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Station '{name}' not found"
        )
