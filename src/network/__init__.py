"""
Network Module

In-memory model of the metro network and the code that fills it:

- geo.py: haversine distance between coordinates
- graph.py: NetworkGraph, the station/edge multigraph queried by the planner
- loader.py: JSON dataset reader and graph builder
- dependencies.py: process-wide cached network for the API
- schemas.py: Pydantic models for graph records and dataset files
"""

from .geo import distance_km, truncated_distance_km
from .graph import NetworkGraph
from .loader import build_network, load_network, read_dataset
from .schemas import NetworkNode, NetworkEdge, NetworkDataset

__all__ = [
    "distance_km",
    "truncated_distance_km",
    "NetworkGraph",
    "build_network",
    "load_network",
    "read_dataset",
    "NetworkNode",
    "NetworkEdge",
    "NetworkDataset"
]
