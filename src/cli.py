"""
Console front-end for the route planner.

Prompts for a source and a destination station, then prints the shortest
route with its line changes, total distance and fare.
"""
import argparse
import logging
import sys
from typing import List, Optional

from src.config import settings
from src.exceptions import DatasetError, Unreachable
from src.network.graph import NetworkGraph
from src.network.loader import load_network
from src.routes.schemas import RouteRequest, RoutePlan
from src.routes.service import RouteService
from src.routes.validation import RouteValidator

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_ROUTE = 1
EXIT_BAD_INPUT = 2


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="delhi-metro",
        description="Find the shortest Delhi Metro route and its fare."
    )
    parser.add_argument(
        "--dataset",
        default=str(settings.DATASET_PATH),
        help="Path to the network dataset JSON file"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=settings.STRICT_DATASET,
        help="Fail if the dataset has edges to unknown stations"
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        help="Logging level (default: %(default)s)"
    )
    return parser.parse_args(argv)


def format_itinerary(plan: RoutePlan) -> str:
    """Render a route plan the way it is printed on the console"""
    stops = []
    for annotation in plan.annotations:
        if annotation.is_change:
            stops.append(f"{annotation.station_name} [Change to {annotation.change_to}]")
        elif annotation.traverse_on is None:
            stops.append(annotation.station_name)
        else:
            stops.append(f"{annotation.station_name} ({annotation.traverse_on})")

    return "\n".join([
        f"Shortest path from {plan.source} to {plan.destination}:",
        " -> ".join(stops),
        f"Total distance: {plan.distance_km} km",
        f"Fare: Rs. {plan.fare}",
    ])


def run_query(graph: NetworkGraph, source: str, destination: str) -> int:
    """Plan one route and print it; returns the process exit code"""
    errors = RouteValidator(graph).validate_route_request(
        RouteRequest(from_station=source, to_station=destination)
    )
    if errors:
        for error in errors:
            message = error.error_message
            if error.suggestions:
                message += f" (did you mean: {', '.join(error.suggestions)}?)"
            print(f"Error: {message}", file=sys.stderr)
        return EXIT_NO_ROUTE

    try:
        plan = RouteService(graph).plan(source, destination)
    except Unreachable as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_NO_ROUTE

    print(format_itinerary(plan))
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )

    try:
        graph = load_network(args.dataset, strict=args.strict)
    except DatasetError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    try:
        source = input("Enter the source station: ").strip()
        destination = input("Enter the destination station: ").strip()
    except EOFError:
        print("\nError: expected a source and a destination station", file=sys.stderr)
        return EXIT_BAD_INPUT

    # Keep the prompts and the itinerary on separate lines
    print()
    return run_query(graph, source, destination)


if __name__ == "__main__":
    sys.exit(main())
