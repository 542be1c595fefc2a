from chargehub.exceptions.custom import ScreenNotAllowedError
from chargehub.schemas.marketplace import UserRole

ANONYMOUS_SCREENS = (
    "Home",
    "Register",
    "Login",
    "ForgotPassword",
    "EmailVerification",
    "NewPassword",
)

CAR_OWNER_SCREENS = (
    "CarOwner",
    "FindChargerLocations",
    "ChargerLocationList",
    "CarSelection",
    "BookingConfirmation",
    "MyBookings",
    "EndBooking",
    "MyCars",
    "AddCar",
    "EditCar",
    "CarBookings",
    "Settings",
)

HOME_OWNER_SCREENS = (
    "HomeOwner",
    "MyChargerLocations",
    "ChargerLocationForm",
    "FinalizeLocationOnMap",
    "EditChargerLocation",
    "MyLocationBookings",
    "Settings",
)

HOME_SCREENS = {
    None: "Home",
    UserRole.car_owner: "CarOwner",
    UserRole.home_owner: "HomeOwner",
    UserRole.both: "CombinedDashboard",
}


def screens_for(role: UserRole | None) -> list[str]:
    if role is None:
        return list(ANONYMOUS_SCREENS)
    if role == UserRole.car_owner:
        return list(CAR_OWNER_SCREENS)
    if role == UserRole.home_owner:
        return list(HOME_OWNER_SCREENS)

    screens = ["CombinedDashboard"]
    for screen in CAR_OWNER_SCREENS + HOME_OWNER_SCREENS:
        if screen not in screens:
            screens.append(screen)
    return screens


def home_screen_for(role: UserRole | None) -> str:
    return HOME_SCREENS[role]


def ensure_screen_allowed(screen: str, role: UserRole | None) -> None:
    if screen not in screens_for(role):
        raise ScreenNotAllowedError(screen, role.value if role else None)
