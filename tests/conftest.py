"""Test fixtures for the Delhi Metro route planner."""

import pytest
from fastapi.testclient import TestClient

from src.config import DEFAULT_DATASET_PATH
from src.network.graph import NetworkGraph
from src.network.loader import load_network


def _build_small_network() -> NetworkGraph:
    """Five stations: a Red/Blue interchange at B, a slow Yellow shortcut, and an isolated E.

        A --2-- B --3-- C
        |       |
        |       1
        |       D
        +--10-- C  (Yellow)
    """
    graph = NetworkGraph()
    graph.add_station("A", 28.60, 77.20, ["Red Line"])
    graph.add_station("B", 28.61, 77.21, ["Red Line", "Blue Line"])
    graph.add_station("C", 28.62, 77.22, ["Blue Line"])
    graph.add_station("D", 28.63, 77.20, ["Red Line"])
    graph.add_station("E", 28.70, 77.30, ["Green Line"])
    graph.add_station("A", 28.60, 77.20, ["Yellow Line"])
    graph.add_station("C", 28.62, 77.22, ["Yellow Line"])

    graph.add_edge("A", "B", 2, ["Red Line"])
    graph.add_edge("B", "C", 3, ["Blue Line"])
    graph.add_edge("B", "D", 1, ["Red Line"])
    graph.add_edge("A", "C", 10, ["Yellow Line"])
    return graph


@pytest.fixture
def small_network() -> NetworkGraph:
    """A hand-built network with known shortest paths."""
    return _build_small_network()


@pytest.fixture(scope="session")
def metro_network() -> NetworkGraph:
    """The bundled Delhi Metro network, loaded once per test session."""
    return load_network(DEFAULT_DATASET_PATH)


@pytest.fixture
def client(metro_network: NetworkGraph) -> TestClient:
    """Create a TestClient with the network dependency bound to the bundled dataset."""
    from src.main import app
    from src.network.dependencies import get_network

    app.dependency_overrides[get_network] = lambda: metro_network
    test_client = TestClient(app)
    yield test_client

    # Restore
    app.dependency_overrides.clear()
