"""Tests for reading datasets and building the network graph."""

import json
import logging
import pathlib

import pytest

from src.config import DEFAULT_DATASET_PATH
from src.exceptions import DatasetError
from src.network.graph import NetworkGraph
from src.network.loader import build_network, load_network, read_dataset
from src.network.schemas import NetworkDataset


def _write_dataset(tmp_path: pathlib.Path, data: dict) -> pathlib.Path:
    path = tmp_path / "network.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_bundled_dataset_shape(metro_network: NetworkGraph) -> None:
    """Interchanges listed once per line collapse into single stations."""
    assert metro_network.station_count == 192
    assert metro_network.edge_count == 204
    assert set(metro_network.lines()) == {
        "Yellow Line", "Red Line", "Violet Line", "Pink Line",
        "Magenta Line", "Airport Express Line", "Blue Line",
    }


def test_bundled_interchange_keeps_last_coordinates(metro_network: NetworkGraph) -> None:
    kashmere_gate = metro_network.get_station("Kashmere Gate")
    assert metro_network.lines_of("Kashmere Gate") == ["Yellow Line", "Red Line", "Violet Line"]
    assert (kashmere_gate.lat, kashmere_gate.long) == (28.6672231, 77.2307327)


def test_bundled_dataset_rejects_edges_to_unregistered_stations(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="src.network.loader"):
        graph = load_network(DEFAULT_DATASET_PATH)

    rejected = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert len(rejected) == 8
    assert any("Safdarjung" in record.getMessage() for record in rejected)
    assert not graph.has_station("Safdarjung")
    assert not graph.has_station("Sarai Kale Khan Metro Station")


def test_strict_mode_raises_on_bundled_dataset() -> None:
    with pytest.raises(DatasetError) as exc_info:
        load_network(DEFAULT_DATASET_PATH, strict=True)

    assert len(exc_info.value.problems) == 8
    assert "Hazarat Nizamuddin Metro Station" in str(exc_info.value)


def test_weights_use_final_coordinates(tmp_path: pathlib.Path) -> None:
    """A station registered twice is measured at its last position."""
    path = _write_dataset(tmp_path, {
        "name": "Equator",
        "stations": [
            {"name": "P", "lat": 0.0, "lon": 0.0, "lines": ["Red Line"]},
            {"name": "Q", "lat": 0.0, "lon": 0.1, "lines": ["Red Line"]},
            {"name": "P", "lat": 0.0, "lon": 0.05, "lines": ["Blue Line"]},
        ],
        "edges": [
            {"from": "P", "to": "Q", "lines": ["Red Line"]},
        ],
    })

    graph = load_network(path)

    assert graph.neighbours("P") == [("Q", 5, ["Red Line"])]
    assert graph.neighbours("Q") == [("P", 5, ["Red Line"])]
    assert graph.lines_of("P") == ["Red Line", "Blue Line"]


def test_second_load_replaces_the_first() -> None:
    """Each build starts from an empty graph; nothing carries over between loads."""
    first = build_network(NetworkDataset.model_validate({
        "stations": [
            {"name": "R", "lat": 1.0, "lon": 1.0, "lines": ["Red Line"]},
            {"name": "S", "lat": 1.0, "lon": 1.01, "lines": ["Red Line"]},
        ],
        "edges": [{"from": "R", "to": "S", "lines": ["Red Line"]}],
    }))
    second = build_network(NetworkDataset.model_validate({
        "stations": [
            {"name": "R", "lat": 1.0, "lon": 1.0, "lines": ["Blue Line"]},
            {"name": "T", "lat": 1.0, "lon": 1.02, "lines": ["Blue Line"]},
        ],
        "edges": [{"from": "R", "to": "T", "lines": ["Blue Line"]}],
    }))

    assert second is not first
    assert second.station_names() == ["R", "T"]
    assert second.lines_of("R") == ["Blue Line"]
    assert second.edge_count == 1
    assert [name for name, _, _ in second.neighbours("R")] == ["T"]
    assert first.station_names() == ["R", "S"]
    assert first.lines_of("R") == ["Red Line"]


def test_missing_file_raises(tmp_path: pathlib.Path) -> None:
    with pytest.raises(DatasetError, match="not found"):
        read_dataset(tmp_path / "missing.json")


def test_invalid_json_raises(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(DatasetError, match="not valid JSON"):
        read_dataset(path)


def test_malformed_records_raise(tmp_path: pathlib.Path) -> None:
    path = _write_dataset(tmp_path, {
        "stations": [{"name": "P", "lon": 0.0, "lines": ["Red Line"]}],
    })
    with pytest.raises(DatasetError) as exc_info:
        read_dataset(path)
    assert any("stations.0.lat" in problem for problem in exc_info.value.problems)


def test_out_of_range_latitude_raises(tmp_path: pathlib.Path) -> None:
    path = _write_dataset(tmp_path, {
        "stations": [{"name": "P", "lat": 128.0, "lon": 0.0, "lines": ["Red Line"]}],
    })
    with pytest.raises(DatasetError):
        read_dataset(path)


def test_station_without_lines_raises(tmp_path: pathlib.Path) -> None:
    path = _write_dataset(tmp_path, {
        "stations": [{"name": "P", "lat": 0.0, "lon": 0.0, "lines": []}],
    })
    with pytest.raises(DatasetError) as exc_info:
        read_dataset(path)
    assert any("stations.0.lines" in problem for problem in exc_info.value.problems)
