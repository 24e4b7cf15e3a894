import asyncio
import json

import httpx
import pytest

from nearby_places.repos.places_repo import ProximityCache
from nearby_places.services.Places_service import PlacesService


class FakePlacesClient:
    """Stands in for PlacesApiClient; records every call it receives."""

    def __init__(self, nearby_places=None, details=None, delays=None):
        self.nearby_places = nearby_places or []
        # place_id -> detail body (dict or str) or an Exception to raise
        self.details = details or {}
        self.delays = delays or {}
        self.nearby_calls = []
        self.detail_calls = []
        self.completed_details = []
        self.nearby_error = None

    async def fetch_nearby(self, location, radius_m, limit):
        self.nearby_calls.append((location, radius_m, limit))
        if self.nearby_error is not None:
            raise self.nearby_error
        return httpx.Response(200, json={"nearbyPlaces": self.nearby_places})

    async def fetch_place_detail(self, place_id):
        self.detail_calls.append(place_id)
        await asyncio.sleep(self.delays.get(place_id, 0))
        detail = self.details[place_id]
        if isinstance(detail, Exception):
            raise detail
        self.completed_details.append(place_id)
        body = detail if isinstance(detail, str) else json.dumps(detail)
        return httpx.Response(200, text=body)


@pytest.fixture
def detail_body():
    def build(place_id, name="Blue Bottle", **place_fields):
        place = {
            "id": place_id,
            "name": name,
            "countryCode": "US",
            "address": {
                "address1": "1 Ferry Building",
                "locality": "San Francisco",
                "region": "CA",
                "postalCode": "94111",
                "country": "United States",
            },
            "contactInfo": {"phoneNumber": {"phoneNumber": "+1 510-653-3394"}},
            "geometry": {"centroid": {"lat": 37.7955, "lng": -122.3937}},
            "openingHours": {
                "timeZone": "America/Los_Angeles",
                "dayHours": [
                    {
                        "day": "MONDAY",
                        "hours": [{"start": {"hour": 7, "minute": 0}, "end": {"hour": 19, "minute": 30}}],
                    }
                ],
            },
        }
        place.update(place_fields)
        return {"place": place}
    return build


@pytest.fixture
def raw_place():
    def build(place_id, category="Coffee Shop", place_type="VENUE"):
        return {"placeId": place_id, "categoryName": category, "placeTypeEnum": place_type}
    return build


@pytest.fixture
def fake_client():
    return FakePlacesClient()


@pytest.fixture
def cache():
    return ProximityCache()


@pytest.fixture
def service(fake_client, cache):
    return PlacesService(fake_client, cache)
