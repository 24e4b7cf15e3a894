import asyncio
import logging
from typing import List, Optional

from pydantic import ValidationError

from nearby_places.core.config import settings
from nearby_places.core.exceptions import DetailFetchError, NearbySearchError, PlacesParseError
from nearby_places.core.logger import logs
from nearby_places.core.places_client import PlacesApiClient
from nearby_places.models.places_model import (
    NO_FILTER,
    CategoryFilter,
    CategoryList,
    Coordinate,
    PlaceInfo,
    RawPlace,
)
from nearby_places.repos.places_repo import ProximityCache
from nearby_places.services.Place_parser import parse_place

def default_category_filter() -> CategoryFilter:
    """The configured filter; a null NEARBY_PLACES_FILTER disables filtering."""
    if settings.NEARBY_PLACES_FILTER is None:
        return NO_FILTER
    return CategoryList(categories=settings.NEARBY_PLACES_FILTER)

class PlacesService:
    def __init__(self, client: PlacesApiClient, cache: ProximityCache):
        self.client = client
        self.cache = cache

    async def get_nearby_places_info(
        self,
        location: Coordinate,
        number_nearby_places: Optional[int] = None,
        nearby_distance_threshold: Optional[float] = None,
        category_filter: Optional[CategoryFilter] = None,
    ) -> List[PlaceInfo]:
        """
        Enriched places around `location`.

        A cached result is reused when it was fetched within `nearby_distance_threshold`
        meters of `location`; without a threshold the backend is always queried.
        (0, 0) means no location is known yet and yields an empty list.
        """
        if number_nearby_places is None:
            number_nearby_places = settings.NEARBY_PLACES_LIMIT
        if category_filter is None:
            category_filter = default_category_filter()

        if location.is_origin():
            return []

        cached = await self.cache.lookup(location, nearby_distance_threshold)
        if cached is not None:
            logs.log(logging.INFO, f"✓ Places cache HIT for {location.latitude}, {location.longitude} ({len(cached)} places)")
            return cached

        logs.log(logging.INFO, f"✗ Places cache MISS for {location.latitude}, {location.longitude}. Fetching from places API...")

        try:
            places = await self.get_nearby_places(location, number_nearby_places, category_filter)
        except Exception as e:
            logs.log(logging.ERROR, f"Nearby search failed: {str(e)}")
            raise NearbySearchError(e) from e

        try:
            places_info = await self.get_places_info(places)
        except Exception as e:
            logs.log(logging.ERROR, f"Place detail fetch failed: {str(e)}")
            raise DetailFetchError(e) from e

        await self.cache.store(location, places_info)
        logs.log(logging.INFO, f"Cached {len(places_info)} places for {location.latitude}, {location.longitude}", extra={"cached_locations": len(self.cache)})
        return places_info

    async def get_nearby_places(
        self,
        location: Coordinate,
        number_nearby_places: Optional[int] = None,
        category_filter: Optional[CategoryFilter] = None,
    ) -> List[RawPlace]:
        """Backend search around `location`, narrowed by category in backend order."""
        limit = number_nearby_places if number_nearby_places is not None else settings.NEARBY_PLACES_LIMIT
        if category_filter is None:
            category_filter = default_category_filter()

        resp = await self.client.fetch_nearby(location, settings.NEARBY_PLACES_RANGE, limit)
        places = self._decode_nearby_places(resp)

        if isinstance(category_filter, CategoryList):
            places = [p for p in places if category_filter.matches(p.category_name)]

        logs.log(logging.INFO, f"Nearby search returned {len(places)} places after filtering")
        return places

    async def get_places_info(self, places: List[RawPlace]) -> List[PlaceInfo]:
        """
        Fetches and parses details for every venue, concurrently.
        Non-venues are skipped. The first failure fails the whole batch;
        the remaining fetches are left to finish on their own.
        """
        venues = [p for p in places if p.is_venue()]
        results = await asyncio.gather(*(self._fetch_place_info(p) for p in venues))
        return list(results)

    async def _fetch_place_info(self, place: RawPlace) -> PlaceInfo:
        resp = await self.client.fetch_place_detail(place.place_id)
        return parse_place(resp.text, place.category_name)

    def _decode_nearby_places(self, resp) -> List[RawPlace]:
        try:
            body = resp.json()
        except ValueError as e:
            raise PlacesParseError(f"Nearby places response is not valid JSON: {e}") from e

        raw_places = body.get("nearbyPlaces") if isinstance(body, dict) else None
        if not isinstance(raw_places, list):
            raise PlacesParseError("Nearby places response has no 'nearbyPlaces' list")

        try:
            return [RawPlace.model_validate(p) for p in raw_places]
        except ValidationError as e:
            raise PlacesParseError(f"Nearby places response has invalid entries: {e.error_count()} error(s)") from e
