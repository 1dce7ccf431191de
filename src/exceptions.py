from typing import List, Optional


class MetroNetworkError(Exception):
    """Base class for errors raised by the metro network core"""


class UnknownStation(MetroNetworkError):
    """A station name is not registered in the network"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown station: '{name}'")


class Unreachable(MetroNetworkError):
    """No path connects the two stations"""

    def __init__(self, source: str, destination: str):
        self.source = source
        self.destination = destination
        super().__init__(f"No route from '{source}' to '{destination}'")


class DatasetError(MetroNetworkError):
    """The network dataset could not be loaded"""

    def __init__(self, message: str, problems: Optional[List[str]] = None):
        self.problems = problems or []
        if self.problems:
            message = f"{message}: " + "; ".join(self.problems)
        super().__init__(message)
