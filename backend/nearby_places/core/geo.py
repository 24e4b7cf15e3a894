import math
from nearby_places.models.places_model import Coordinate

EARTH_RADIUS_M = 6371000

def distance(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance in meters between two coordinates (haversine)."""
    phi1, phi2 = math.radians(a.latitude), math.radians(b.latitude)
    dphi = math.radians(b.latitude - a.latitude)
    dlam = math.radians(b.longitude - a.longitude)
    h = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlam / 2) ** 2
    return 2 * EARTH_RADIUS_M * math.asin(min(1.0, math.sqrt(h)))
