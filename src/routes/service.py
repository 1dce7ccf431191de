from typing import List, Dict, Optional, Tuple
import heapq
import logging
import math

from src.exceptions import Unreachable
from src.network.graph import NetworkGraph
from src.routes.fare_service import FareCalculationService
from src.routes.schemas import RoutePlan, SegmentAnnotation

logger = logging.getLogger(__name__)


class RouteCalculator:
    """Shortest-distance route search using Dijkstra's algorithm"""

    def __init__(self, graph: NetworkGraph):
        self.graph = graph

    def shortest_path(self, source: str, destination: str) -> Tuple[List[str], float]:
        """Minimum-distance path between two stations and its total distance.

        Returns ``([], math.inf)`` when either station is unknown or the
        destination cannot be reached.
        """
        start_id = self.graph.get_station_id(source)
        end_id = self.graph.get_station_id(destination)
        if start_id is None or end_id is None:
            return [], math.inf

        # Priority queue: (distance, station_id); ties resolve by station_id
        pq = [(0, start_id)]
        distances: Dict[int, int] = {start_id: 0}
        previous: Dict[int, int] = {}

        while pq:
            current_distance, current_station = heapq.heappop(pq)

            # Stale entry, a shorter distance was recorded after it was queued
            if current_distance > distances[current_station]:
                continue

            if current_station == end_id:
                break

            for edge in self.graph.get_neighbors(current_station):
                next_station = edge.to_station_id
                new_distance = current_distance + edge.distance_km

                if new_distance < distances.get(next_station, math.inf):
                    distances[next_station] = new_distance
                    previous[next_station] = current_station
                    heapq.heappush(pq, (new_distance, next_station))

        if end_id not in distances:
            return [], math.inf

        return self._reconstruct_path(previous, start_id, end_id), distances[end_id]

    def _reconstruct_path(self, previous: Dict[int, int], start_id: int, end_id: int) -> List[str]:
        path_ids = [end_id]
        while path_ids[-1] != start_id:
            path_ids.append(previous[path_ids[-1]])
        path_ids.reverse()
        return [self.graph.station_name(station_id) for station_id in path_ids]


class ItineraryAnnotator:
    """Labels each station of a path with the line the traveller rides next"""

    def __init__(self, graph: NetworkGraph):
        self.graph = graph

    def annotate(self, path: List[str]) -> List[SegmentAnnotation]:
        """One annotation per station; the last one names the terminal's line.

        A hop rides a line common to both of its stations, staying on the
        line already being ridden while it is shared. When a line has to be
        picked, the one shared by the most consecutive hops ahead wins, so
        no change is reported that a longer ride would have avoided. A
        change is reported at the station where the current line stops
        being shared, or where the two stations share no line at all.
        """
        hops = [self.graph.common_lines(a, b) for a, b in zip(path, path[1:])]
        annotations = []
        current_line: Optional[str] = None

        for i, (station, next_station) in enumerate(zip(path, path[1:])):
            common = hops[i]

            if current_line in common:
                annotations.append(SegmentAnnotation(station_name=station, traverse_on=current_line))
                continue

            if common:
                line = self._longest_run(common, hops, i)
                changed = current_line is not None
            else:
                # Nothing shared, board a line of the next station
                line = self._longest_run(self.graph.lines_of(next_station), hops, i + 1)
                changed = line is not None

            if changed:
                annotations.append(SegmentAnnotation(station_name=station, change_to=line))
            else:
                annotations.append(SegmentAnnotation(station_name=station, traverse_on=line))
            current_line = line

        if path:
            terminal = path[-1]
            terminal_lines = self.graph.lines_of(terminal)
            annotations.append(SegmentAnnotation(
                station_name=terminal,
                traverse_on=terminal_lines[0] if terminal_lines else None
            ))

        return annotations

    @staticmethod
    def _longest_run(candidates: List[str], hops: List[List[str]], start: int) -> Optional[str]:
        """Candidate shared by the most consecutive hops from ``start``; earlier candidates win ties"""
        best_line, best_run = None, -1
        for line in candidates:
            run = 0
            for common in hops[start:]:
                if line not in common:
                    break
                run += 1
            if run > best_run:
                best_line, best_run = line, run
        return best_line


class RouteService:
    """High-level route planning service"""

    def __init__(self, graph: NetworkGraph):
        self.graph = graph
        self.calculator = RouteCalculator(graph)
        self.annotator = ItineraryAnnotator(graph)
        self.fare_service = FareCalculationService()

    def plan(self, source: str, destination: str) -> RoutePlan:
        """Plan the shortest route between two stations"""
        path, total_distance = self.calculator.shortest_path(source, destination)

        if not path:
            logger.warning(f"No route from '{source}' to '{destination}'")
            raise Unreachable(source, destination)

        distance_km = int(total_distance)
        annotations = self.annotator.annotate(path)

        plan = RoutePlan(
            source=source,
            destination=destination,
            path=path,
            distance_km=distance_km,
            fare=self.fare_service.calculate_fare(distance_km),
            annotations=annotations,
            transfers=sum(1 for annotation in annotations[:-1] if annotation.is_change),
            lines_used=self._lines_used(annotations)
        )

        logger.info(
            f"Planned {source} -> {destination}: {len(path)} stations, "
            f"{plan.distance_km} km, {plan.transfers} transfer(s), fare {plan.fare}"
        )
        return plan

    def _lines_used(self, annotations: List[SegmentAnnotation]) -> List[str]:
        """Distinct lines ridden between stations, in travel order"""
        lines_used: List[str] = []
        for annotation in annotations[:-1]:
            if annotation.line and annotation.line not in lines_used:
                lines_used.append(annotation.line)
        return lines_used
