import logging
import math

from chargehub.exceptions.custom import FormValidationError
from chargehub.mappers.location_fallback import (
    DEFAULT_COORDINATE,
    build_address_query,
    get_location_fallback,
)
from chargehub.schemas.forms import AddressForm
from chargehub.schemas.maps import Coordinate, MapRegion
from chargehub.services.geocoding import GeocodingService

logger = logging.getLogger(__name__)

RESOLVED_DELTA = 0.005
DEFAULT_DELTA = 0.05


def default_region() -> MapRegion:
    return MapRegion(
        latitude=DEFAULT_COORDINATE.latitude,
        longitude=DEFAULT_COORDINATE.longitude,
        latitude_delta=DEFAULT_DELTA,
        longitude_delta=DEFAULT_DELTA,
        source="default",
    )


def is_valid_region(region: MapRegion | None) -> bool:
    if region is None:
        return False
    return all(
        math.isfinite(v)
        for v in (
            region.latitude,
            region.longitude,
            region.latitude_delta,
            region.longitude_delta,
        )
    )


def _region_around(point: Coordinate, source: str) -> MapRegion:
    return MapRegion(
        latitude=point.latitude,
        longitude=point.longitude,
        latitude_delta=RESOLVED_DELTA,
        longitude_delta=RESOLVED_DELTA,
        source=source,
    )


class LocationPickerService:
    """Chooses the initial map region for an address and handles tap selection."""

    def __init__(self, geocoder: GeocodingService):
        self._geocoder = geocoder

    async def resolve_region(self, address: AddressForm) -> MapRegion:
        try:
            region = await self._resolve(address)
        except Exception:
            logger.exception("Could not resolve map region, using default point")
            return default_region()

        if not is_valid_region(region):
            logger.warning("Resolved region is not usable: %s", region)
            return default_region()
        return region

    async def _resolve(self, address: AddressForm) -> MapRegion:
        if address.latitude is not None and address.longitude is not None:
            return _region_around(
                Coordinate(latitude=address.latitude, longitude=address.longitude),
                "coordinates",
            )

        full = build_address_query(address.street, address.city, address.country)
        if full:
            point = await self._geocoder.geocode(full)
            if point:
                return _region_around(point, "full_address")

        city_only = build_address_query(address.city, address.country)
        if city_only:
            point = await self._geocoder.geocode(city_only)
            if point:
                return _region_around(point, "city")

        point = get_location_fallback(address.country, address.city)
        logger.info(
            "Using fallback location for %s/%s: (%.4f, %.4f)",
            address.country, address.city, point.latitude, point.longitude,
        )
        return _region_around(point, "fallback")

    @staticmethod
    def select_point(
        latitude: float, longitude: float, enable_tap_to_select: bool = True
    ) -> Coordinate | None:
        if not enable_tap_to_select:
            return None
        if not (
            math.isfinite(latitude)
            and math.isfinite(longitude)
            and -90 <= latitude <= 90
            and -180 <= longitude <= 180
        ):
            raise FormValidationError("invalid_coordinates", field="latitude")
        return Coordinate(latitude=latitude, longitude=longitude)
