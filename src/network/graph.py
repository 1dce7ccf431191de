from typing import Dict, Iterable, List, Optional, Tuple
import logging

from src.exceptions import UnknownStation
from src.network.schemas import NetworkNode, NetworkEdge

logger = logging.getLogger(__name__)


class NetworkGraph:
    """Undirected weighted multigraph of metro stations.

    Stations are keyed by name. Each name is interned to an integer
    station id in registration order, and the adjacency lists are held
    by id so the planner's inner loop never hashes strings. Every
    undirected adjacency is stored as two ``NetworkEdge`` halves with
    identical weight and lines.
    """

    def __init__(self):
        self.nodes: Dict[int, NetworkNode] = {}
        self.edges: Dict[int, List[NetworkEdge]] = {}
        self.station_ids: Dict[str, int] = {}
        self._edge_count = 0

    def add_station(
        self,
        name: str,
        latitude: float,
        longitude: float,
        lines: Iterable[str] = ()
    ) -> NetworkNode:
        """Register a station, or augment one already known by this name.

        Re-registering a name replaces its coordinates and extends its
        line-set. Weights of edges added earlier are not recomputed.
        """
        station_id = self.station_ids.get(name)

        if station_id is None:
            station_id = len(self.station_ids)
            self.station_ids[name] = station_id
            self.nodes[station_id] = NetworkNode(
                station_id=station_id,
                station_name=name,
                lat=latitude,
                long=longitude,
                lines=[]
            )
            self.edges[station_id] = []
        else:
            logger.debug(f"Station '{name}' registered again, merging lines")

        node = self.nodes[station_id]
        node.lat = latitude
        node.long = longitude
        for line in lines:
            if line not in node.lines:
                node.lines.append(line)

        return node

    def add_edge(self, station_a: str, station_b: str, weight: int, lines: Iterable[str] = ()):
        """Add an undirected adjacency; both directions are recorded"""
        if weight < 0:
            raise ValueError(f"Edge weight must be non-negative, got {weight}")

        from_id = self._require_id(station_a)
        to_id = self._require_id(station_b)
        edge_lines = list(dict.fromkeys(lines))

        self.edges[from_id].append(NetworkEdge(
            from_station_id=from_id,
            to_station_id=to_id,
            distance_km=weight,
            lines=edge_lines
        ))
        self.edges[to_id].append(NetworkEdge(
            from_station_id=to_id,
            to_station_id=from_id,
            distance_km=weight,
            lines=list(edge_lines)
        ))
        self._edge_count += 1

    def has_station(self, name: str) -> bool:
        return name in self.station_ids

    def get_station(self, name: str) -> NetworkNode:
        """Get a station node by name"""
        return self.nodes[self._require_id(name)]

    def get_station_id(self, name: str) -> Optional[int]:
        return self.station_ids.get(name)

    def station_name(self, station_id: int) -> str:
        return self.nodes[station_id].station_name

    def station_names(self) -> List[str]:
        """All station names in registration order"""
        return list(self.station_ids)

    def lines_of(self, name: str) -> List[str]:
        """Lines serving a station, in the order they were first registered"""
        return list(self.get_station(name).lines)

    def common_lines(self, station_a: str, station_b: str) -> List[str]:
        """Lines serving both stations, ordered as at the first station"""
        lines_a = self.lines_of(station_a)
        lines_b = set(self.lines_of(station_b))
        return [line for line in lines_a if line in lines_b]

    def is_interchange(self, name: str) -> bool:
        """Check if a station serves multiple lines (interchange)"""
        return len(self.get_station(name).lines) > 1

    def lines(self) -> List[str]:
        """Every line tag referenced by stations or edges, first-seen order"""
        seen: Dict[str, None] = {}
        for node in self.nodes.values():
            for line in node.lines:
                seen.setdefault(line, None)
        for station_edges in self.edges.values():
            for edge in station_edges:
                for line in edge.lines:
                    seen.setdefault(line, None)
        return list(seen)

    def get_neighbors(self, station_id: int) -> List[NetworkEdge]:
        """Get all direct connections from a station id"""
        return self.edges.get(station_id, [])

    def neighbours(self, name: str) -> List[Tuple[str, int, List[str]]]:
        """Adjacent stations as (name, weight, edge lines); empty if unknown"""
        station_id = self.station_ids.get(name)
        if station_id is None:
            return []

        return [
            (self.nodes[edge.to_station_id].station_name, edge.distance_km, list(edge.lines))
            for edge in self.edges[station_id]
        ]

    def edge_weight(self, station_a: str, station_b: str) -> Optional[int]:
        """Smallest weight among the parallel edges joining two stations"""
        weights = [weight for name, weight, _ in self.neighbours(station_a) if name == station_b]
        return min(weights) if weights else None

    @property
    def station_count(self) -> int:
        return len(self.station_ids)

    @property
    def edge_count(self) -> int:
        """Number of undirected adjacencies, parallel edges included"""
        return self._edge_count

    def _require_id(self, name: str) -> int:
        station_id = self.station_ids.get(name)
        if station_id is None:
            raise UnknownStation(name)
        return station_id
