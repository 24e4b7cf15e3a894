from typing import Callable, Dict, List, Optional

from nearby_places.core.geo import distance
from nearby_places.models.places_model import Coordinate, PlaceInfo

class ProximityCache:
    """
    In-memory cache of enriched places, keyed by the coordinate they were fetched for.
    Nothing expires; an entry is replaced only by a new store under the same coordinate.
    """

    def __init__(self, distance_fn: Callable[[Coordinate, Coordinate], float] = distance):
        self.distance_fn = distance_fn
        self._entries: Dict[Coordinate, List[PlaceInfo]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    async def lookup(self, query: Coordinate, threshold: Optional[float] = None) -> Optional[List[PlaceInfo]]:
        """
        Returns the places stored under the cached coordinate nearest to `query`,
        provided it lies within `threshold` meters. Without a threshold nothing matches.
        """
        if threshold is None or not self._entries:
            return None

        nearest_key = None
        nearest_distance = float("inf")
        for cached_location in self._entries:
            d = self.distance_fn(query, cached_location)
            if d < nearest_distance:
                nearest_key = cached_location
                nearest_distance = d

        if nearest_key is not None and nearest_distance <= threshold:
            return list(self._entries[nearest_key])
        return None

    async def store(self, key: Coordinate, places: List[PlaceInfo]) -> None:
        """Inserts or overwrites the entry for exactly `key`."""
        self._entries[key] = list(places)
