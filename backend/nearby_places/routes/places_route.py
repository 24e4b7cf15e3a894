import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from nearby_places.core.config import settings
from nearby_places.core.exceptions import PlacesStageError
from nearby_places.core.logger import logs
from nearby_places.models.places_model import (
    NO_FILTER,
    CategoryList,
    Coordinate,
    PlacesRequest,
    PlacesResponse,
)
from nearby_places.services.Places_service import PlacesService

router = APIRouter()

# --- Dependency Injection ---
def get_places_service(request: Request) -> PlacesService:
    """The service is built once at startup so its cache outlives single requests."""
    return request.app.state.places_service

def _category_filter(request: PlacesRequest):
    if request.unfiltered:
        return NO_FILTER
    if request.categories is not None:
        return CategoryList(categories=request.categories)
    return None

@router.post("/places", response_model=PlacesResponse)
async def get_places_endpoint(
    request: PlacesRequest,
    service: PlacesService = Depends(get_places_service)
):
    threshold = request.distance_threshold
    if threshold is None:
        threshold = settings.NEARBY_DISTANCE_THRESHOLD

    try:
        places = await service.get_nearby_places_info(
            Coordinate(latitude=request.lat, longitude=request.lon),
            number_nearby_places=request.limit,
            nearby_distance_threshold=threshold,
            category_filter=_category_filter(request),
        )
    except PlacesStageError as e:
        logs.log(logging.ERROR, f"Error in get_places_endpoint: {e.message}", extra=e.details)
        raise HTTPException(status_code=502, detail=e.message)

    return PlacesResponse(places=places, count=len(places))
