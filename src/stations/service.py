from typing import List, Optional, Tuple

from src.network.geo import distance_km
from src.network.graph import NetworkGraph
from src.network.schemas import NetworkNode
from src.stations.schemas import LineInfo, NearbyStation, StationDetail, StationNeighbour

class StationService:
    def __init__(self, graph: NetworkGraph):
        self.graph = graph

    def get_station(self, name: str) -> NetworkNode:
        """Get station by name; raises UnknownStation"""
        return self.graph.get_station(name)

    def get_stations(
        self,
        skip: int = 0,
        limit: int = 50,
        query: Optional[str] = None,
        line: Optional[str] = None
    ) -> Tuple[List[NetworkNode], int]:
        """Get stations with optional name and line filters"""
        stations = [self.graph.get_station(name) for name in self.graph.station_names()]

        # Apply filters
        if query:
            needle = query.lower()
            stations = [s for s in stations if needle in s.station_name.lower()]

        if line:
            stations = [s for s in stations if line in s.lines]

        total = len(stations)

        return stations[skip:skip + limit], total

    def search_stations_by_name(self, name: str, limit: int = 10) -> List[NetworkNode]:
        """Search stations by name for autocomplete"""
        stations, _ = self.get_stations(limit=limit, query=name)
        return stations

    def get_nearby_stations(
        self,
        lat: float,
        lng: float,
        radius_km: float = 1.0,
        limit: int = 10
    ) -> List[Tuple[NetworkNode, float]]:
        """Get stations within radius of given coordinates, nearest first"""
        nearby = []
        for name in self.graph.station_names():
            station = self.graph.get_station(name)
            distance = distance_km(lat, lng, station.lat, station.long)
            if distance <= radius_km:
                nearby.append((station, distance))

        nearby.sort(key=lambda item: item[1])
        return nearby[:limit]

    def get_interchange_stations(self) -> List[NetworkNode]:
        """Get all interchange stations"""
        return [
            self.graph.get_station(name)
            for name in self.graph.station_names()
            if self.graph.is_interchange(name)
        ]

    def get_station_neighbours(self, name: str) -> List[StationNeighbour]:
        """Direct connections from a station; raises UnknownStation"""
        self.graph.get_station(name)
        return [
            StationNeighbour(name=neighbour, distance_km=weight, lines=lines)
            for neighbour, weight, lines in self.graph.neighbours(name)
        ]

    def get_lines(self) -> List[LineInfo]:
        """Every line with the number of stations it serves"""
        counts = {line: 0 for line in self.graph.lines()}
        for name in self.graph.station_names():
            for line in self.graph.lines_of(name):
                counts[line] += 1
        return [LineInfo(name=line, station_count=count) for line, count in counts.items()]

    @staticmethod
    def to_detail(station: NetworkNode) -> StationDetail:
        return StationDetail(
            name=station.station_name,
            lat=station.lat,
            long=station.long,
            lines=list(station.lines),
            is_interchange=len(station.lines) > 1
        )

    @staticmethod
    def to_nearby(station: NetworkNode, distance: float) -> NearbyStation:
        return NearbyStation(
            **StationService.to_detail(station).model_dump(),
            distance_km=round(distance, 3)
        )
