import math

EARTH_RADIUS_KM = 6371.0

def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two coordinates using the haversine formula"""
    if not all(math.isfinite(value) for value in (lat1, lon1, lat2, lon2)):
        return math.nan

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )
    # Rounding can push a just past 1 for antipodal points
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c

def truncated_distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> int:
    """Haversine distance truncated toward zero, as used for edge weights"""
    return int(distance_km(lat1, lon1, lat2, lon2))
