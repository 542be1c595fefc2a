import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from chargehub.config import Settings
from chargehub.exceptions.custom import (
    FormValidationError,
    MarketplaceError,
    NetworkError,
    ScreenNotAllowedError,
    SubmissionInProgressError,
)
from chargehub.exceptions.handlers import (
    form_validation_error_handler,
    marketplace_error_handler,
    network_error_handler,
    request_validation_error_handler,
    screen_not_allowed_handler,
    submission_in_progress_handler,
)
from chargehub.i18n.language_store import LanguageStore
from chargehub.routers.activity import router as activity_router
from chargehub.routers.auth import router as auth_router
from chargehub.routers.bookings import router as bookings_router
from chargehub.routers.cars import router as cars_router
from chargehub.routers.locations import router as locations_router
from chargehub.routers.navigation import router as navigation_router
from chargehub.routers.settings import router as settings_router
from chargehub.services.activity import ActivityService
from chargehub.services.booking_flow import BookingFlowService
from chargehub.services.geocoding import GeocodingService
from chargehub.services.location_picker import LocationPickerService
from chargehub.services.marketplace import MarketplaceService
from chargehub.submissions import SubmissionTracker


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    app.state.language_store = LanguageStore(
        settings.language_store_path, default=settings.default_language
    )

    async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
        marketplace = MarketplaceService(client, settings.api_url, settings.api_token)
        geocoder = GeocodingService(client, settings.google_maps_api_key)

        app.state.marketplace_service = marketplace
        app.state.location_picker_service = LocationPickerService(geocoder)
        app.state.booking_flow_service = BookingFlowService(marketplace, SubmissionTracker())
        app.state.activity_service = ActivityService(marketplace)

        yield


app = FastAPI(title="ChargeHub", lifespan=lifespan)

app.add_exception_handler(MarketplaceError, marketplace_error_handler)
app.add_exception_handler(NetworkError, network_error_handler)
app.add_exception_handler(FormValidationError, form_validation_error_handler)
app.add_exception_handler(SubmissionInProgressError, submission_in_progress_handler)
app.add_exception_handler(ScreenNotAllowedError, screen_not_allowed_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)

app.include_router(auth_router)
app.include_router(cars_router)
app.include_router(locations_router)
app.include_router(bookings_router)
app.include_router(activity_router)
app.include_router(settings_router)
app.include_router(navigation_router)
