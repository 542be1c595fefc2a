from chargehub.schemas.maps import Coordinate

DEFAULT_COORDINATE = Coordinate(latitude=35.6892, longitude=51.3890)

# country -> city -> (lat, lon); "default" is the country centre
FALLBACK_COORDINATES: dict[str, dict[str, tuple[float, float]]] = {
    "iran": {
        "default": (35.6892, 51.3890),
        "tehran": (35.6892, 51.3890),
        "isfahan": (32.6546, 51.6680),
        "shiraz": (29.5918, 52.5837),
        "mashhad": (36.2974, 59.6067),
        "tabriz": (38.0962, 46.2738),
    },
    "usa": {
        "default": (39.8283, -98.5795),
        "new york": (40.7128, -74.0060),
        "los angeles": (34.0522, -118.2437),
        "chicago": (41.8781, -87.6298),
    },
    "uk": {
        "default": (55.3781, -3.4360),
        "london": (51.5074, -0.1278),
    },
}


def _key(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip().lower() or None


def get_location_fallback(country: str | None, city: str | None) -> Coordinate:
    cities = FALLBACK_COORDINATES.get(_key(country) or "")
    if cities is None:
        return DEFAULT_COORDINATE.model_copy()

    city_key = _key(city)
    lat, lon = cities.get(city_key, cities["default"]) if city_key else cities["default"]
    return Coordinate(latitude=lat, longitude=lon)


def build_address_query(*parts: str | None) -> str | None:
    """Join address parts for geocoding; None unless every part is present."""
    cleaned = [p.strip() for p in parts if p and p.strip()]
    if len(cleaned) != len(parts):
        return None
    return ", ".join(cleaned)
