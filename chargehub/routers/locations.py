import logging

from fastapi import APIRouter

from chargehub.dependencies import (
    LanguageDep,
    LocationPickerDep,
    MarketplaceDep,
    require_screen,
)
from chargehub.exceptions.custom import FormValidationError
from chargehub.i18n.messages import alert_for
from chargehub.mappers.form_validation import validate_station_form, with_suggested_price
from chargehub.mappers.location_view import build_markers
from chargehub.schemas.forms import (
    AddressForm,
    ChargingLocationForm,
    FinalizeLocationRequest,
    SelectPointRequest,
)
from chargehub.schemas.responses import ScreenResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/locations", tags=["locations"])


@router.get(
    "", response_model=ScreenResponse, dependencies=[require_screen("MyChargerLocations")]
)
async def my_locations(user_id: int, marketplace: MarketplaceDep) -> ScreenResponse:
    locations = await marketplace.find_owner_locations(user_id)
    return ScreenResponse(
        screen="MyChargerLocations",
        data={"locations": locations, "markers": build_markers(locations)},
    )


@router.get(
    "/bookings",
    response_model=ScreenResponse,
    dependencies=[require_screen("MyLocationBookings")],
)
async def location_bookings(user_id: int, marketplace: MarketplaceDep) -> ScreenResponse:
    bookings = await marketplace.find_bookings_for_host(user_id)
    return ScreenResponse(screen="MyLocationBookings", data={"bookings": bookings})


@router.post(
    "/region",
    response_model=ScreenResponse,
    dependencies=[require_screen("FinalizeLocationOnMap")],
)
async def resolve_region(address: AddressForm, picker: LocationPickerDep) -> ScreenResponse:
    region = await picker.resolve_region(address)
    return ScreenResponse(screen="FinalizeLocationOnMap", data={"region": region})


@router.post(
    "/form",
    response_model=ScreenResponse,
    dependencies=[require_screen("ChargerLocationForm")],
)
async def submit_form(
    form: ChargingLocationForm, picker: LocationPickerDep
) -> ScreenResponse:
    """First half of adding or editing a station: check the form, then move to the map."""
    form = with_suggested_price(form)
    validate_station_form(form)
    region = await picker.resolve_region(
        AddressForm(
            street=form.street,
            city=form.city,
            country=form.country,
            latitude=form.latitude,
            longitude=form.longitude,
        )
    )
    screen = "EditChargerLocation" if form.charging_location_id is not None else "ChargerLocationForm"
    return ScreenResponse(
        screen=screen,
        next_screen="FinalizeLocationOnMap",
        params={"form": form, "region": region},
    )


@router.post(
    "/select-point",
    response_model=ScreenResponse,
    dependencies=[require_screen("FinalizeLocationOnMap")],
)
async def select_point(request: SelectPointRequest, picker: LocationPickerDep) -> ScreenResponse:
    point = picker.select_point(
        request.latitude, request.longitude, request.enable_tap_to_select
    )
    return ScreenResponse(screen="FinalizeLocationOnMap", data={"selected": point})


@router.post(
    "", response_model=ScreenResponse, dependencies=[require_screen("FinalizeLocationOnMap")]
)
async def finalize_location(
    request: FinalizeLocationRequest,
    marketplace: MarketplaceDep,
    picker: LocationPickerDep,
    lang: LanguageDep,
) -> ScreenResponse:
    payload = validate_station_form(with_suggested_price(request.form))
    latitude, longitude = request.latitude, request.longitude
    if latitude is None or longitude is None:
        # editing keeps the station's current point unless a new one was tapped
        latitude, longitude = request.form.latitude, request.form.longitude
    if latitude is None or longitude is None:
        raise FormValidationError("select_location_on_map", field="latitude")
    point = picker.select_point(latitude, longitude)
    payload.update(latitude=point.latitude, longitude=point.longitude)

    location_id = request.form.charging_location_id
    if location_id is not None:
        location = await marketplace.update_charging_location(location_id, payload)
        message_key = "station_updated"
    else:
        location = await marketplace.add_charging_location(payload)
        message_key = "station_added"

    return ScreenResponse(
        screen="FinalizeLocationOnMap",
        next_screen="MyChargerLocations",
        params={"user_id": request.form.user_id, "refresh_locations": True},
        data={"location": location},
        alert=alert_for("success", message_key, lang),
    )
