import logging
from datetime import datetime, timezone
from typing import Any

import httpx

from chargehub.exceptions.custom import MarketplaceError, NetworkError
from chargehub.schemas.forms import CarForm, RegisterForm, SearchCriteria
from chargehub.schemas.marketplace import Booking, Car, ChargingLocation, User, UserRole

logger = logging.getLogger(__name__)

LOGIN_PATH = "/user/login"
REGISTER_PATH = "/register"
VALIDATE_USER_PATH = "/validate-user"
RESEND_VERIFICATION_PATH = "/resend-verification"
FORGOT_PASSWORD_PATH = "/user-forgot-password"
UPDATE_USER_PATH = "/update-user"
ADD_CAR_PATH = "/add-car"
FIND_CAR_PATH = "/find-car"
UPDATE_CAR_PATH = "/update-car"
FIND_CHARGING_LOCATION_PATH = "/find-charging-location"
FIND_OWNER_LOCATIONS_PATH = "/find-charger-location"
ADD_CHARGING_LOCATION_PATH = "/add-charging-location"
UPDATE_CHARGING_LOCATION_PATH = "/update-charging-location"
ADD_BOOKING_PATH = "/add-booking"
FIND_BOOKING_PATH = "/find-booking"
UPDATE_BOOKING_PATH = "/update-booking"
GET_ACTIVITY_PATH = "/get-activity"

# The backend stores the display tag; a dual-role account registers without one
REGISTER_USER_TYPES: dict[UserRole, str | None] = {
    UserRole.car_owner: "Electric car owner",
    UserRole.home_owner: "Charging station owner",
    UserRole.both: None,
}

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


def _server_message(resp: httpx.Response) -> str | None:
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"] or None
    return None


def _as_list(data: Any) -> list[dict]:
    if isinstance(data, list):
        return [item for item in data if isinstance(item, dict)]
    return []


class MarketplaceService:
    """Thin JSON client for the charger marketplace backend.

    Every method is one request. Non-2xx answers raise MarketplaceError and
    transport failures raise NetworkError; nothing is retried.
    """

    def __init__(self, client: httpx.AsyncClient, api_url: str, api_token: str):
        self._client = client
        self._api_url = api_url.rstrip("/")
        self._headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {api_token}",
            "X-API-Token": api_token,
        }

    async def _request(
        self,
        method: str,
        path: str,
        payload: dict | None = None,
        fallback_key: str = "request_failed",
        extra_headers: dict[str, str] | None = None,
    ) -> Any:
        url = f"{self._api_url}{path}"
        headers = {**self._headers, **(extra_headers or {})}

        try:
            resp = await self._client.request(method, url, json=payload, headers=headers)
        except httpx.TransportError as exc:
            logger.error("%s %s failed: %s", method, path, exc)
            raise NetworkError("marketplace API", str(exc)) from exc

        if resp.status_code >= 400:
            logger.warning("%s %s returned %d: %s", method, path, resp.status_code, resp.text[:200])
            raise MarketplaceError(
                resp.text,
                status_code=resp.status_code,
                server_message=_server_message(resp),
                fallback_key=fallback_key,
            )

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            logger.warning("%s %s returned a non-JSON body", method, path)
            return None

    # Account

    async def login(self, username: str, password: str) -> User:
        data = await self._request(
            "POST", LOGIN_PATH, {"username": username, "password": password}
        )
        logger.info("User %s logged in", username)
        return User(**(data or {}))

    async def register(self, form: RegisterForm) -> User:
        payload = {
            "name": form.name.strip(),
            "email": form.email.strip(),
            "password": form.password,
            "phone_number": form.phone_number.strip(),
            "user_type": REGISTER_USER_TYPES[form.user_type],
        }
        data = await self._request("POST", REGISTER_PATH, payload)
        logger.info("Registered user %s", payload["email"])
        return User(**(data or {}))

    async def validate_user(self, user_id: int | str, code: str) -> User:
        data = await self._request(
            "POST",
            VALIDATE_USER_PATH,
            {"user_id": user_id, "email_verification_code": code},
            fallback_key="verification_failed",
        )
        return User(**(data or {}))

    async def resend_verification(self, user_id: int | str, email: str) -> None:
        await self._request(
            "POST", RESEND_VERIFICATION_PATH, {"user_id": user_id, "email": email}
        )
        logger.info("Resent verification code to user %s", user_id)

    async def forgot_password(self, email: str) -> User:
        data = await self._request("POST", FORGOT_PASSWORD_PATH, {"email": email})
        return User(**(data or {}))

    async def update_password(self, user_id: int | str, password: str) -> None:
        await self._request("PUT", f"{UPDATE_USER_PATH}/{user_id}", {"password": password})
        logger.info("Updated password for user %s", user_id)

    # Cars

    async def add_car(self, user_id: int | str, form: CarForm, year: int) -> Car | None:
        payload = {
            "user_id": user_id,
            "model": form.model.strip(),
            "color": form.color.strip(),
            "year": year,
            "license_plate": form.license_plate.strip(),
        }
        data = await self._request("POST", ADD_CAR_PATH, payload)
        logger.info("Added car for user %s", user_id)
        return Car(**data) if isinstance(data, dict) else None

    async def find_cars(self, user_id: int | str) -> list[Car]:
        data = await self._request("POST", FIND_CAR_PATH, {"car_owner_user_id": user_id})
        cars = [Car(**item) for item in _as_list(data)]
        logger.info("Found %d cars for user %s", len(cars), user_id)
        return cars

    async def update_car(self, car_id: int | str, form: CarForm, year: int) -> None:
        payload = {
            "car_id": car_id,
            "model": form.model.strip(),
            "color": form.color.strip(),
            "year": year,
            "license_plate": form.license_plate.strip(),
        }
        await self._request("POST", UPDATE_CAR_PATH, payload)
        logger.info("Updated car %s", car_id)

    # Charging locations

    async def find_charging_locations(self, criteria: SearchCriteria) -> list[ChargingLocation]:
        data = await self._request(
            "POST", FIND_CHARGING_LOCATION_PATH, criteria.model_dump()
        )
        locations = [ChargingLocation(**item) for item in _as_list(data)]
        logger.info(
            "Search in %s returned %d charging locations", criteria.city, len(locations)
        )
        return locations

    async def find_owner_locations(self, user_id: int | str) -> list[ChargingLocation]:
        data = await self._request("POST", FIND_OWNER_LOCATIONS_PATH, {"user_id": user_id})
        return [ChargingLocation(**item) for item in _as_list(data)]

    async def add_charging_location(self, payload: dict) -> ChargingLocation | None:
        data = await self._request("POST", ADD_CHARGING_LOCATION_PATH, payload)
        logger.info("Added charging location for user %s", payload.get("user_id"))
        return ChargingLocation(**data) if isinstance(data, dict) else None

    async def update_charging_location(
        self, location_id: int | str, payload: dict
    ) -> ChargingLocation | None:
        data = await self._request(
            "POST", f"{UPDATE_CHARGING_LOCATION_PATH}/{location_id}", payload
        )
        logger.info("Updated charging location %s", location_id)
        return ChargingLocation(**data) if isinstance(data, dict) else None

    # Bookings

    async def add_booking(
        self, car_id: int | str, charging_location_id: int | str
    ) -> Booking | None:
        data = await self._request(
            "POST",
            ADD_BOOKING_PATH,
            {"car_id": car_id, "charging_location_id": charging_location_id},
            fallback_key="no_create_booking",
        )
        logger.info("Booked location %s for car %s", charging_location_id, car_id)
        return Booking(**data) if isinstance(data, dict) else None

    async def _find_bookings(self, query: dict) -> list[Booking]:
        data = await self._request("POST", FIND_BOOKING_PATH, query)
        return [Booking(**item) for item in _as_list(data)]

    async def find_bookings_for_owner(self, user_id: int | str) -> list[Booking]:
        return await self._find_bookings({"car_owner_user_id": user_id})

    async def find_bookings_for_host(self, user_id: int | str) -> list[Booking]:
        return await self._find_bookings({"charger_location_owner_user_id": user_id})

    async def find_bookings_for_car(self, car_id: int | str) -> list[Booking]:
        return await self._find_bookings({"car_id": car_id})

    async def end_booking(
        self,
        booking_id: int | str,
        review_rate: int,
        review_message: str,
        end_time: datetime | None = None,
    ) -> None:
        end_time = end_time or datetime.now(timezone.utc)
        payload = {
            "end_time": end_time.isoformat(),
            "review_rate": review_rate,
            "review_message": review_message,
        }
        await self._request("POST", f"{UPDATE_BOOKING_PATH}/{booking_id}", payload)
        logger.info("Ended booking %s", booking_id)

    # Activity

    async def get_activity(self, payload: dict) -> dict:
        data = await self._request(
            "POST", GET_ACTIVITY_PATH, payload, extra_headers=NO_CACHE_HEADERS
        )
        return data if isinstance(data, dict) else {}
