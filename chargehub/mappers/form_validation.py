"""Pre-submission checks for every form the app sends to the backend.

Each function raises FormValidationError before any request is issued and,
where the form carries free-text numbers, returns the normalized values.
"""
import re
from datetime import date

from chargehub.exceptions.custom import FormValidationError
from chargehub.mappers.farsi import parse_farsi_float, parse_farsi_int, to_english_digits
from chargehub.schemas.forms import (
    CarForm,
    ChargingLocationForm,
    EndBookingForm,
    NewPasswordForm,
    RegisterForm,
    SearchCriteria,
)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_RE = re.compile(r"^\+?[1-9]\d{0,15}$")
VERIFICATION_CODE_LENGTH = 5
MIN_REGISTER_PASSWORD = 6
MIN_RESET_PASSWORD = 8

IRAN_SUGGESTED_PRICE = "50000"  # Rials
DEFAULT_SUGGESTED_PRICE = "5"  # Euros


def _blank(value: str | None) -> bool:
    return value is None or not str(value).strip()


def validate_registration(form: RegisterForm) -> None:
    for field in ("name", "email", "password", "phone_number"):
        if _blank(getattr(form, field)):
            raise FormValidationError("fill_required_fields", field=field)
    if form.password != form.confirm_password:
        raise FormValidationError("passwords_mismatch", field="confirm_password")
    if len(form.password) < MIN_REGISTER_PASSWORD:
        raise FormValidationError(
            "password_too_short", field="password", min_length=MIN_REGISTER_PASSWORD
        )
    if not EMAIL_RE.match(form.email.strip()):
        raise FormValidationError("invalid_email", field="email")


def validate_verification_code(code: str) -> str:
    normalized = to_english_digits(code.strip())
    if len(normalized) != VERIFICATION_CODE_LENGTH or not normalized.isascii() or not normalized.isdigit():
        raise FormValidationError("verification_code_incomplete", field="email_verification_code")
    return normalized


def validate_email(email: str) -> str:
    if _blank(email):
        raise FormValidationError("email_required", field="email")
    return email.strip()


def validate_new_password(form: NewPasswordForm) -> None:
    if len(form.password) < MIN_RESET_PASSWORD:
        raise FormValidationError(
            "password_too_short", field="password", min_length=MIN_RESET_PASSWORD
        )
    if form.password != form.confirm_password:
        raise FormValidationError("passwords_mismatch", field="confirm_password")


def validate_car_form(form: CarForm) -> int:
    """Returns the parsed model year."""
    for field in ("model", "color", "year", "license_plate"):
        if _blank(getattr(form, field)):
            raise FormValidationError("car_fields_required", field=field)
    try:
        year = parse_farsi_int(form.year)
    except ValueError:
        raise FormValidationError("invalid_year", field="year") from None
    if not 1900 <= year <= date.today().year + 1:
        raise FormValidationError("invalid_year", field="year")
    return year


def suggested_price(country: str | None) -> str:
    if country and country.strip().lower() == "iran":
        return IRAN_SUGGESTED_PRICE
    return DEFAULT_SUGGESTED_PRICE


def with_suggested_price(form: ChargingLocationForm) -> ChargingLocationForm:
    """Fill a blank price from the country's usual rate."""
    if _blank(form.price_per_hour) and not _blank(form.country):
        return form.model_copy(update={"price_per_hour": suggested_price(form.country)})
    return form


_STATION_REQUIRED = (
    ("name", "station_name_required"),
    ("city", "city_required"),
    ("postcode", "postcode_required"),
    ("street", "street_required"),
    ("phone_number", "phone_required"),
    ("power_output", "power_required"),
    ("price_per_hour", "price_required"),
)


def validate_station_form(form: ChargingLocationForm) -> dict:
    """Validate a station form and return the payload the backend expects."""
    for field, key in _STATION_REQUIRED:
        if _blank(getattr(form, field)):
            raise FormValidationError(key, field=field)

    phone = to_english_digits(re.sub(r"\s", "", form.phone_number))
    if not PHONE_RE.match(phone):
        raise FormValidationError("valid_phone", field="phone_number")

    try:
        power = parse_farsi_float(form.power_output)
    except ValueError:
        raise FormValidationError("valid_power", field="power_output") from None
    try:
        price = parse_farsi_float(form.price_per_hour)
    except ValueError:
        raise FormValidationError("valid_price", field="price_per_hour") from None

    payload = form.model_dump(exclude={"charging_location_id"})
    payload.update(
        phone_number=phone,
        postcode=to_english_digits(form.postcode.strip()),
        power_output=power,
        price_per_hour=price,
    )
    return payload


def validate_search_criteria(criteria: SearchCriteria, require_post_code: bool = False) -> None:
    if require_post_code:
        for field in ("post_code", "street", "city"):
            if _blank(getattr(criteria, field)):
                raise FormValidationError("search_fields_required", field=field)
        return
    for field in ("city", "street"):
        if _blank(getattr(criteria, field)):
            raise FormValidationError("search_city_street_required", field=field)


def validate_review(form: EndBookingForm) -> None:
    if _blank(form.review_message):
        raise FormValidationError("review_required", field="review_message")
    if not 1 <= form.review_rate <= 5:
        raise FormValidationError("invalid_rating", field="review_rate")
