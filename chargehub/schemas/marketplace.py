from enum import StrEnum

from pydantic import BaseModel


class UserRole(StrEnum):
    car_owner = "car_owner"
    home_owner = "home_owner"
    both = "both"


_ROLE_ALIASES = {
    "car_owner": UserRole.car_owner,
    "electric car owner": UserRole.car_owner,
    "electric_car_owner": UserRole.car_owner,
    "home_owner": UserRole.home_owner,
    "charger provider": UserRole.home_owner,
    "charger_provider": UserRole.home_owner,
    "charging station owner": UserRole.home_owner,
    "location_owner": UserRole.home_owner,
    "both": UserRole.both,
}


def parse_role(tag: str | None) -> UserRole | None:
    """Map a backend user-type tag onto a role.

    Unknown non-empty tags fall through to the host role, the same way the
    app shell treats anything that is not a car owner.
    """
    if tag is None or not str(tag).strip():
        return None
    return _ROLE_ALIASES.get(str(tag).strip().lower(), UserRole.home_owner)


class User(BaseModel):
    model_config = {"extra": "allow"}

    user_id: int | str | None = None
    name: str | None = None
    email: str | None = None
    phone_number: int | str | None = None
    user_type: str | None = None
    is_validated_email: bool | None = None

    @property
    def role(self) -> UserRole | None:
        return parse_role(self.user_type)


class Car(BaseModel):
    model_config = {"extra": "allow"}

    car_id: int | str | None = None
    user_id: int | str | None = None
    model: str | None = None
    color: str | None = None
    year: int | str | None = None
    license_plate: str | None = None


class ChargingLocation(BaseModel):
    model_config = {"extra": "allow"}

    charging_location_id: int | str | None = None
    user_id: int | str | None = None
    name: str | None = None
    country: str | None = None
    city: str | None = None
    postcode: int | str | None = None
    street: str | None = None
    alley: str | None = None
    phone_number: int | str | None = None
    power_output: float | None = None
    price_per_hour: float | None = None
    description: str | None = None
    fast_charging: bool = False
    is_available: bool | None = None
    latitude: float | None = None
    longitude: float | None = None


class Booking(BaseModel):
    model_config = {"extra": "allow"}

    booking_id: int | str | None = None
    car_id: int | str | None = None
    charging_location_id: int | str | None = None
    start_time: str | None = None
    end_time: str | None = None
    review_rate: int | None = None
    review_message: str | None = None


class ActivitySummary(BaseModel):
    total_price: float = 0.0
    number_booking: int = 0
    number_locations: int = 0
