from pydantic import BaseModel


class Coordinate(BaseModel):
    latitude: float
    longitude: float


class MapRegion(BaseModel):
    latitude: float
    longitude: float
    latitude_delta: float
    longitude_delta: float
    source: str  # "coordinates" | "full_address" | "city" | "fallback" | "default"


class MapMarker(BaseModel):
    latitude: float
    longitude: float
    title: str | None = None
    description: str | None = None
    selected: bool = False
