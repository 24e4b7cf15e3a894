import httpx
import logging
from nearby_places.core.config import settings
from nearby_places.core.exceptions import PlacesTransportError
from nearby_places.core.logger import logs
from nearby_places.models.places_model import Coordinate

NEARBY_PLACES_PATH = "/get_nearby_places"
PLACE_DETAIL_PATH = "/get_place"

class PlacesApiClient:
    """
    Thin async transport for the remote places backend.
    Both calls return the raw httpx response; decoding is left to the caller.
    """

    def __init__(self, http_client: httpx.AsyncClient, base_url: str = None, timeout: float = None):
        self.http_client = http_client
        self.base_url = (base_url or settings.PLACES_API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.PLACES_API_TIMEOUT

    async def fetch_nearby(self, location: Coordinate, radius_m: int, limit: int) -> httpx.Response:
        params = {
            "lat": str(location.latitude),
            "lng": str(location.longitude),
            "gps_accuracy_m": str(radius_m),
            "places_limit": str(limit),
        }
        return await self._get(NEARBY_PLACES_PATH, params)

    async def fetch_place_detail(self, place_id: str) -> httpx.Response:
        return await self._get(PLACE_DETAIL_PATH, {"place_id": place_id})

    async def _get(self, path: str, params: dict) -> httpx.Response:
        url = f"{self.base_url}{path}"
        try:
            resp = await self.http_client.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            return resp
        except httpx.HTTPStatusError as e:
            logs.log(logging.ERROR, f"Places API {path} returned {e.response.status_code}", extra=params)
            raise PlacesTransportError(
                f"{path} returned HTTP {e.response.status_code}",
                details={"path": path, "status_code": e.response.status_code}
            ) from e
        except httpx.HTTPError as e:
            logs.log(logging.ERROR, f"Places API {path} request failed: {str(e)}", extra=params)
            raise PlacesTransportError(
                f"{path} request failed: {e}",
                details={"path": path}
            ) from e
