import logging

from chargehub.exceptions.custom import FormValidationError
from chargehub.mappers.form_validation import validate_review, validate_search_criteria
from chargehub.mappers.location_view import is_selectable
from chargehub.schemas.forms import EndBookingForm, SearchCriteria
from chargehub.schemas.marketplace import Booking, Car, ChargingLocation
from chargehub.services.marketplace import MarketplaceService
from chargehub.submissions import SubmissionTracker

logger = logging.getLogger(__name__)


def booking_key(car_id: int | str, charging_location_id: int | str) -> str:
    return f"booking:{car_id}:{charging_location_id}"


class BookingFlowService:
    """Criteria -> results -> car -> confirmation.

    Every step is a single request; the caller carries the chosen car and
    location from one step to the next.
    """

    def __init__(self, marketplace: MarketplaceService, tracker: SubmissionTracker):
        self._marketplace = marketplace
        self._tracker = tracker

    async def search(
        self, criteria: SearchCriteria, car_first: bool = False
    ) -> list[ChargingLocation]:
        validate_search_criteria(criteria, require_post_code=car_first)
        return await self._marketplace.find_charging_locations(criteria)

    @staticmethod
    def check_selectable(location: ChargingLocation) -> None:
        if not is_selectable(location):
            raise FormValidationError("location_unavailable", field="charging_location_id")

    async def list_cars(self, user_id: int | str) -> list[Car]:
        return await self._marketplace.find_cars(user_id)

    @staticmethod
    def choose_car(cars: list[Car], car_id: int | str | None) -> Car:
        if car_id is None:
            raise FormValidationError("select_car", field="car_id")
        for car in cars:
            if car.car_id == car_id or str(car.car_id) == str(car_id):
                return car
        raise FormValidationError("select_car", field="car_id")

    async def confirm(
        self, car: Car | None, location: ChargingLocation | None
    ) -> Booking | None:
        if car is None or location is None or car.car_id is None or location.charging_location_id is None:
            raise FormValidationError("missing_booking_info")

        with self._tracker.hold(booking_key(car.car_id, location.charging_location_id)):
            return await self._marketplace.add_booking(
                car.car_id, location.charging_location_id
            )

    async def end_booking(self, booking_id: int | str, form: EndBookingForm) -> None:
        validate_review(form)
        await self._marketplace.end_booking(
            booking_id, form.review_rate, form.review_message.strip()
        )
