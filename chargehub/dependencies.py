from typing import Annotated

from fastapi import Depends, Header, Request

from chargehub.i18n.language_store import LanguageStore
from chargehub.navigation import ensure_screen_allowed
from chargehub.schemas.marketplace import UserRole, parse_role
from chargehub.services.activity import ActivityService
from chargehub.services.booking_flow import BookingFlowService
from chargehub.services.location_picker import LocationPickerService
from chargehub.services.marketplace import MarketplaceService


def get_marketplace_service(request: Request) -> MarketplaceService:
    return request.app.state.marketplace_service


def get_booking_flow_service(request: Request) -> BookingFlowService:
    return request.app.state.booking_flow_service


def get_location_picker_service(request: Request) -> LocationPickerService:
    return request.app.state.location_picker_service


def get_activity_service(request: Request) -> ActivityService:
    return request.app.state.activity_service


def get_language_store(request: Request) -> LanguageStore:
    return request.app.state.language_store


def get_language(request: Request) -> str:
    return request.app.state.language_store.language


def get_role(x_user_role: Annotated[str | None, Header()] = None) -> UserRole | None:
    return parse_role(x_user_role)


MarketplaceDep = Annotated[MarketplaceService, Depends(get_marketplace_service)]
BookingFlowDep = Annotated[BookingFlowService, Depends(get_booking_flow_service)]
LocationPickerDep = Annotated[LocationPickerService, Depends(get_location_picker_service)]
ActivityDep = Annotated[ActivityService, Depends(get_activity_service)]
LanguageStoreDep = Annotated[LanguageStore, Depends(get_language_store)]
LanguageDep = Annotated[str, Depends(get_language)]
RoleDep = Annotated[UserRole | None, Depends(get_role)]


def require_screen(screen: str):
    """Route dependency refusing callers whose role cannot see *screen*."""

    def _check(role: RoleDep) -> UserRole | None:
        ensure_screen_allowed(screen, role)
        return role

    return Depends(_check)
