from fastapi import APIRouter

from chargehub.dependencies import LanguageDep, MarketplaceDep, require_screen
from chargehub.exceptions.custom import FormValidationError
from chargehub.i18n.messages import alert_for
from chargehub.mappers.form_validation import validate_car_form
from chargehub.schemas.forms import CarForm
from chargehub.schemas.responses import ScreenResponse

router = APIRouter(prefix="/cars", tags=["cars"])


@router.get("", response_model=ScreenResponse, dependencies=[require_screen("MyCars")])
async def my_cars(user_id: int, marketplace: MarketplaceDep) -> ScreenResponse:
    cars = await marketplace.find_cars(user_id)
    return ScreenResponse(screen="MyCars", data={"cars": cars})


@router.post("", response_model=ScreenResponse, dependencies=[require_screen("AddCar")])
async def add_car(
    form: CarForm, marketplace: MarketplaceDep, lang: LanguageDep
) -> ScreenResponse:
    if form.user_id is None:
        raise FormValidationError("car_fields_required", field="user_id")
    year = validate_car_form(form)
    car = await marketplace.add_car(form.user_id, form, year)
    return ScreenResponse(
        screen="AddCar",
        next_screen="MyCars",
        params={"refresh_cars": True},
        data={"car": car},
        alert=alert_for("success", "car_added", lang),
    )


@router.put("/{car_id}", response_model=ScreenResponse, dependencies=[require_screen("EditCar")])
async def edit_car(
    car_id: int, form: CarForm, marketplace: MarketplaceDep, lang: LanguageDep
) -> ScreenResponse:
    year = validate_car_form(form)
    await marketplace.update_car(car_id, form, year)
    return ScreenResponse(
        screen="EditCar",
        next_screen="MyCars",
        params={"refresh_cars": True},
        alert=alert_for("success", "car_updated", lang),
    )


@router.get(
    "/{car_id}/bookings",
    response_model=ScreenResponse,
    dependencies=[require_screen("CarBookings")],
)
async def car_bookings(car_id: int, marketplace: MarketplaceDep) -> ScreenResponse:
    bookings = await marketplace.find_bookings_for_car(car_id)
    return ScreenResponse(screen="CarBookings", data={"bookings": bookings})
