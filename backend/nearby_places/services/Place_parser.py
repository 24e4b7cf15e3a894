import json
from typing import Any, Union

from pydantic import ValidationError

from nearby_places.core.exceptions import PlacesParseError
from nearby_places.models.places_model import (
    Address,
    Coordinate,
    DayHours,
    OpeningHours,
    PlaceInfo,
    Time,
    TimeInterval,
)

def parse_place(raw_payload: Union[str, bytes], category: str) -> PlaceInfo:
    """
    Builds a PlaceInfo from a serialized place-detail body.

    The body must hold a `place` object with `id`, `name`, an `address` object and
    `geometry.centroid`. Phone number, opening hours and individual address parts
    are optional and fall back to empty values.
    """
    try:
        data = json.loads(raw_payload)
    except (TypeError, ValueError) as e:
        raise PlacesParseError(f"Place detail is not valid JSON: {e}") from e

    place = data.get("place") if isinstance(data, dict) else None
    if not isinstance(place, dict):
        raise PlacesParseError("Place detail has no 'place' object")

    place_id = _require(place, "id")
    name = _require(place, "name")
    address = _require(place, "address")
    if not isinstance(address, dict):
        raise PlacesParseError("Place detail 'address' is not an object", details={"place_id": place_id})

    try:
        return PlaceInfo(
            place_id=str(place_id),
            category=category,
            name=name,
            phone_number=_parse_phone_number(place.get("contactInfo")),
            address=Address(
                street_address=address.get("address1") or "",
                locality=address.get("locality") or "",
                region=address.get("region") or "",
                postal_code=address.get("postalCode") or "",
                country=address.get("country") or "",
                country_code=place.get("countryCode") or "",
            ),
            opening_hours=_parse_opening_hours(place.get("openingHours")),
            centroid=_parse_centroid(place.get("geometry"), place_id),
        )
    except ValidationError as e:
        raise PlacesParseError(
            f"Place detail has invalid field values: {e.error_count()} error(s)",
            details={"place_id": place_id}
        ) from e
    except (AttributeError, TypeError) as e:
        # opening-hours entries of the wrong shape
        raise PlacesParseError(f"Place detail is malformed: {e}", details={"place_id": place_id}) from e

def _require(place: dict, field: str) -> Any:
    value = place.get(field)
    if value is None:
        raise PlacesParseError(f"Place detail is missing '{field}'", details={"field": field})
    return value

def _parse_centroid(geometry: Any, place_id: str) -> Coordinate:
    centroid = geometry.get("centroid") if isinstance(geometry, dict) else None
    if not isinstance(centroid, dict) or centroid.get("lat") is None or centroid.get("lng") is None:
        raise PlacesParseError("Place detail is missing 'geometry.centroid'", details={"place_id": place_id})
    return Coordinate(latitude=centroid["lat"], longitude=centroid["lng"])

def _parse_phone_number(contact_info: Any) -> str:
    # contactInfo.phoneNumber is itself an object wrapping the number
    if not isinstance(contact_info, dict):
        return ""
    phone = contact_info.get("phoneNumber")
    if not isinstance(phone, dict):
        return ""
    return phone.get("phoneNumber") or ""

def _parse_time(value: Any) -> Time:
    if not isinstance(value, dict):
        return Time()
    return Time(hour=value.get("hour") or 0, minute=value.get("minute") or 0)

def _parse_opening_hours(opening_hours: Any) -> OpeningHours:
    if not isinstance(opening_hours, dict):
        return OpeningHours()

    day_hours = []
    for day_hour in opening_hours.get("dayHours") or []:
        hours = [
            TimeInterval(start_hour=_parse_time(h.get("start")), end_hour=_parse_time(h.get("end")))
            for h in day_hour.get("hours") or []
        ]
        day_hours.append(DayHours(day=day_hour.get("day") or "", hours=hours))

    return OpeningHours(day_hours=day_hours, time_zone=opening_hours.get("timeZone") or "")
