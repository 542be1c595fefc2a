from chargehub.schemas.maps import MapMarker
from chargehub.schemas.marketplace import Car, ChargingLocation


def format_price(price: float | str | None) -> str:
    if price is None or price == "":
        return "N/A"
    try:
        return f"€{float(price):.2f}"
    except (TypeError, ValueError):
        return "N/A"


def is_selectable(location: ChargingLocation) -> bool:
    return location.is_available is True


def to_marker(location: ChargingLocation, selected_id: int | str | None = None) -> MapMarker | None:
    if location.latitude is None or location.longitude is None:
        return None
    return MapMarker(
        latitude=location.latitude,
        longitude=location.longitude,
        title=location.name or location.street or "Charging Station",
        description=", ".join(p for p in (location.street, location.city) if p) or None,
        selected=selected_id is not None and location.charging_location_id == selected_id,
    )


def build_markers(
    locations: list[ChargingLocation], selected_id: int | str | None = None
) -> list[MapMarker]:
    markers = []
    for location in locations:
        marker = to_marker(location, selected_id)
        if marker is not None:
            markers.append(marker)
    return markers


def location_card(location: ChargingLocation) -> dict:
    return {
        "charging_location_id": location.charging_location_id,
        "title": location.name or location.street or "Charging Station",
        "address": ", ".join(p for p in (location.street, location.city, location.country) if p),
        "status": "Available" if is_selectable(location) else "Occupied",
        "charging_type": "Fast Charging" if location.fast_charging else "Standard Charging",
        "power_output": location.power_output,
        "price": format_price(location.price_per_hour),
        "selectable": is_selectable(location),
    }


def booking_summary(car: Car, location: ChargingLocation) -> dict:
    return {
        "car": {
            "car_id": car.car_id,
            "model": car.model,
            "color": car.color,
            "license_plate": car.license_plate,
        },
        "location": location_card(location),
        "price_per_hour": format_price(location.price_per_hour),
    }
