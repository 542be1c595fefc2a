import logging

from fastapi import APIRouter

from chargehub.dependencies import BookingFlowDep, LanguageDep, MarketplaceDep, require_screen
from chargehub.i18n.messages import alert_for
from chargehub.mappers.location_view import booking_summary, build_markers, location_card
from chargehub.schemas.forms import (
    ConfirmBookingRequest,
    EndBookingForm,
    SearchRequest,
    SelectCarRequest,
    SelectLocationRequest,
)
from chargehub.schemas.responses import ScreenResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post(
    "/search",
    response_model=ScreenResponse,
    dependencies=[require_screen("FindChargerLocations")],
)
async def search(
    request: SearchRequest, flow: BookingFlowDep, lang: LanguageDep
) -> ScreenResponse:
    locations = await flow.search(request.criteria, car_first=request.car is not None)
    if not locations:
        return ScreenResponse(
            screen="FindChargerLocations",
            alert=alert_for("no_results_title", "no_results", lang),
        )

    return ScreenResponse(
        screen="FindChargerLocations",
        next_screen="ChargerLocationList",
        params={
            "user_id": request.user_id,
            "car": request.car,
            "search_criteria": request.criteria,
            "charging_locations": locations,
        },
        data={
            "cards": [location_card(loc) for loc in locations],
            "markers": build_markers(locations),
        },
    )


@router.post(
    "/select-location",
    response_model=ScreenResponse,
    dependencies=[require_screen("ChargerLocationList")],
)
async def select_location(request: SelectLocationRequest, flow: BookingFlowDep) -> ScreenResponse:
    flow.check_selectable(request.location)

    if request.car is not None:
        return ScreenResponse(
            screen="ChargerLocationList",
            next_screen="BookingConfirmation",
            params={"user_id": request.user_id, "car": request.car, "location": request.location},
            data={"summary": booking_summary(request.car, request.location)},
        )

    cars = await flow.list_cars(request.user_id)
    return ScreenResponse(
        screen="ChargerLocationList",
        next_screen="CarSelection",
        params={"user_id": request.user_id, "location": request.location, "cars": cars},
    )


@router.post(
    "/select-car",
    response_model=ScreenResponse,
    dependencies=[require_screen("CarSelection")],
)
async def select_car(request: SelectCarRequest, flow: BookingFlowDep) -> ScreenResponse:
    car = flow.choose_car(request.cars, request.car_id)
    return ScreenResponse(
        screen="CarSelection",
        next_screen="BookingConfirmation",
        params={"user_id": request.user_id, "car": car, "location": request.location},
        data={"summary": booking_summary(car, request.location)},
    )


@router.post(
    "/confirm",
    response_model=ScreenResponse,
    dependencies=[require_screen("BookingConfirmation")],
)
async def confirm(
    request: ConfirmBookingRequest, flow: BookingFlowDep, lang: LanguageDep
) -> ScreenResponse:
    booking = await flow.confirm(request.car, request.location)
    return ScreenResponse(
        screen="BookingConfirmation",
        next_screen="MyBookings",
        params={"user_id": request.user_id, "refresh_bookings": True},
        data={"booking": booking},
        alert=alert_for("success", "booking_confirmed", lang),
    )


@router.get("", response_model=ScreenResponse, dependencies=[require_screen("MyBookings")])
async def my_bookings(user_id: int, marketplace: MarketplaceDep) -> ScreenResponse:
    bookings = await marketplace.find_bookings_for_owner(user_id)
    return ScreenResponse(screen="MyBookings", data={"bookings": bookings})


@router.post(
    "/{booking_id}/end",
    response_model=ScreenResponse,
    dependencies=[require_screen("EndBooking")],
)
async def end_booking(
    booking_id: int, form: EndBookingForm, flow: BookingFlowDep, lang: LanguageDep
) -> ScreenResponse:
    await flow.end_booking(booking_id, form)
    return ScreenResponse(
        screen="EndBooking",
        next_screen="MyBookings",
        params={"refresh_bookings": True},
        alert=alert_for("success", "booking_ended", lang),
    )
