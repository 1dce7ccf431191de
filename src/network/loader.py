"""
Dataset loader for the metro network.

Reads a JSON dataset and feeds it through the ``NetworkGraph`` construction
interface. Every station is registered before any distance is measured, so
edge weights always use the final coordinates of stations that appear more
than once (interchanges are listed once per line they belong to).
"""
import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from src.exceptions import DatasetError
from src.network.geo import truncated_distance_km
from src.network.graph import NetworkGraph
from src.network.schemas import NetworkDataset

logger = logging.getLogger(__name__)


def read_dataset(path: Union[str, Path]) -> NetworkDataset:
    """Read and validate a dataset file"""
    dataset_path = Path(path)
    try:
        with open(dataset_path, encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError:
        raise DatasetError(f"Dataset file not found: {dataset_path}")
    except json.JSONDecodeError as e:
        raise DatasetError(f"Dataset file {dataset_path} is not valid JSON", [str(e)])

    try:
        return NetworkDataset.model_validate(raw)
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        ]
        raise DatasetError(f"Dataset file {dataset_path} is malformed", problems)


def build_network(dataset: NetworkDataset, strict: bool = False) -> NetworkGraph:
    """Build a network graph from a validated dataset.

    Edges naming a station the dataset never registers are rejected. In
    strict mode they are reported together as one ``DatasetError``;
    otherwise each is logged and skipped. Every call builds a new graph.
    """
    graph = NetworkGraph()

    for station in dataset.stations:
        graph.add_station(station.name, station.lat, station.lon, station.lines)

    rejected: List[str] = []
    for edge in dataset.edges:
        missing = [
            name for name in (edge.from_station, edge.to_station)
            if not graph.has_station(name)
        ]
        if missing:
            problem = (
                f"edge {edge.from_station} -> {edge.to_station} references "
                f"unknown station(s): {', '.join(missing)}"
            )
            rejected.append(problem)
            if not strict:
                logger.warning(f"Skipping {problem}")
            continue

        a = graph.get_station(edge.from_station)
        b = graph.get_station(edge.to_station)
        weight = truncated_distance_km(a.lat, a.long, b.lat, b.long)
        graph.add_edge(edge.from_station, edge.to_station, weight, edge.lines)

    if strict and rejected:
        raise DatasetError(f"Dataset '{dataset.name}' has invalid edges", rejected)

    logger.info(
        f"Loaded '{dataset.name}': {graph.station_count} stations, "
        f"{graph.edge_count} edges ({len(rejected)} rejected)"
    )
    return graph


def load_network(path: Union[str, Path], strict: bool = False) -> NetworkGraph:
    """Read a dataset file and build its network graph"""
    return build_network(read_dataset(path), strict=strict)
