from functools import lru_cache

from src.config import settings
from src.network.graph import NetworkGraph
from src.network.loader import load_network

@lru_cache(maxsize=1)
def get_network() -> NetworkGraph:
    """Load the configured network once per process and share it read-only"""
    return load_network(settings.DATASET_PATH, strict=settings.STRICT_DATASET)
