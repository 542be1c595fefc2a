from pydantic import BaseModel

from chargehub.schemas.marketplace import Car, ChargingLocation, UserRole


class RegisterForm(BaseModel):
    name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""
    phone_number: str = ""
    user_type: UserRole = UserRole.car_owner


class LoginForm(BaseModel):
    username: str = ""
    password: str = ""


class VerifyEmailForm(BaseModel):
    user_id: int | str
    email_verification_code: str = ""
    is_password_reset: bool = False


class ResendVerificationForm(BaseModel):
    user_id: int | str
    email: str = ""


class ForgotPasswordForm(BaseModel):
    email: str = ""


class NewPasswordForm(BaseModel):
    user_id: int | str
    password: str = ""
    confirm_password: str = ""


class CarForm(BaseModel):
    user_id: int | str | None = None
    model: str = ""
    color: str = ""
    year: str = ""
    license_plate: str = ""


class AddressForm(BaseModel):
    street: str | None = None
    city: str | None = None
    country: str | None = None
    latitude: float | None = None
    longitude: float | None = None


class ChargingLocationForm(BaseModel):
    charging_location_id: int | str | None = None
    user_id: int | str | None = None
    name: str = ""
    country: str = ""
    city: str = ""
    postcode: str = ""
    street: str = ""
    alley: str = ""
    phone_number: str = ""
    power_output: str = ""
    price_per_hour: str = ""
    description: str = ""
    fast_charging: bool = False
    latitude: float | None = None
    longitude: float | None = None


class SearchCriteria(BaseModel):
    post_code: str = ""
    alley: str = ""
    street: str = ""
    home_phone_number: str = ""
    city: str = ""
    fast_charging: bool = False


class SearchRequest(BaseModel):
    user_id: int | str
    criteria: SearchCriteria
    car: Car | None = None


class SelectLocationRequest(BaseModel):
    user_id: int | str
    location: ChargingLocation
    car: Car | None = None


class SelectCarRequest(BaseModel):
    user_id: int | str
    location: ChargingLocation
    cars: list[Car] = []
    car_id: int | str | None = None


class ConfirmBookingRequest(BaseModel):
    user_id: int | str
    car: Car | None = None
    location: ChargingLocation | None = None


class EndBookingForm(BaseModel):
    review_rate: int = 5
    review_message: str = ""


class FinalizeLocationRequest(BaseModel):
    form: ChargingLocationForm
    latitude: float | None = None
    longitude: float | None = None


class SelectPointRequest(BaseModel):
    latitude: float
    longitude: float
    enable_tap_to_select: bool = True


class LanguageRequest(BaseModel):
    language: str
