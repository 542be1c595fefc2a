import logging

import httpx
from pydantic import ValidationError

from chargehub.schemas.geocoding import GeocodeResponse
from chargehub.schemas.maps import Coordinate

logger = logging.getLogger(__name__)

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"


class GeocodingService:
    def __init__(self, client: httpx.AsyncClient, api_key: str):
        self._client = client
        self._api_key = api_key

    @property
    def enabled(self) -> bool:
        return bool(self._api_key)

    async def geocode(self, address: str) -> Coordinate | None:
        """Forward-geocode *address*. Best-effort: returns None on any failure."""
        if not self.enabled:
            logger.debug("Geocoding disabled, skipping %r", address)
            return None

        try:
            resp = await self._client.get(
                GEOCODE_URL, params={"address": address, "key": self._api_key}
            )
        except httpx.HTTPError as exc:
            logger.warning("Geocode request failed for %r: %s", address, exc)
            return None

        if resp.status_code >= 400:
            logger.warning("Geocoding returned %d for %r", resp.status_code, address)
            return None

        try:
            data = GeocodeResponse.model_validate(resp.json())
        except (TypeError, ValueError, ValidationError):
            logger.warning("Unexpected geocoding response for %r", address)
            return None

        if data.status != "OK" or not data.results:
            logger.info(
                "No geocode result for %r: %s %s",
                address, data.status, data.error_message or "",
            )
            return None

        location = data.results[0].geometry.location
        logger.info("Geocoded %r -> (%.4f, %.4f)", address, location.lat, location.lng)
        return Coordinate(latitude=location.lat, longitude=location.lng)
