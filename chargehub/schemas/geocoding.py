from pydantic import BaseModel


class GeocodeLatLng(BaseModel):
    lat: float
    lng: float


class GeocodeGeometry(BaseModel):
    location: GeocodeLatLng


class GeocodeResult(BaseModel):
    formatted_address: str | None = None
    geometry: GeocodeGeometry


class GeocodeResponse(BaseModel):
    status: str
    results: list[GeocodeResult] = []
    error_message: str | None = None
