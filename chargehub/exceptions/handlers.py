import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from chargehub.i18n.messages import DEFAULT_LANGUAGE, translate

from .custom import (
    FormValidationError,
    MarketplaceError,
    NetworkError,
    ScreenNotAllowedError,
    SubmissionInProgressError,
)

logger = logging.getLogger(__name__)


def _language(request: Request) -> str:
    store = getattr(request.app.state, "language_store", None)
    return store.language if store is not None else DEFAULT_LANGUAGE


def _alert(status_code: int, title: str, message: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "alert": {"title": title, "message": message},
            "next_screen": None,
            **extra,
        },
    )


async def marketplace_error_handler(request: Request, exc: MarketplaceError) -> JSONResponse:
    logger.error("Marketplace API error: %s (status=%s)", exc.message[:200], exc.status_code)
    lang = _language(request)
    if exc.status_code == 401 and exc.fallback_key == "verification_failed":
        return _alert(401, translate("invalid_code_title", lang), translate("invalid_code", lang))

    title_key = "booking_failed" if exc.fallback_key == "no_create_booking" else "error"
    status_code = 401 if exc.status_code == 401 else 502
    return _alert(
        status_code,
        translate(title_key, lang),
        exc.server_message or translate(exc.fallback_key, lang),
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    loc = errors[0].get("loc", ()) if errors else ()
    field = str(loc[-1]) if len(loc) > 1 else None
    logger.info("Malformed request to %s: %d error(s), field=%s", request.url.path, len(errors), field)
    lang = _language(request)
    return _alert(
        422,
        translate("validation_error", lang),
        translate("invalid_request", lang),
        field=field,
    )


async def network_error_handler(request: Request, exc: NetworkError) -> JSONResponse:
    logger.error("Network error talking to %s: %s", exc.service, exc.detail)
    lang = _language(request)
    return _alert(503, translate("network_error", lang), translate("check_connection", lang))


async def form_validation_error_handler(
    request: Request, exc: FormValidationError
) -> JSONResponse:
    logger.info("Form rejected: %s (field=%s)", exc.message_key, exc.field)
    lang = _language(request)
    return _alert(
        422,
        translate("validation_error", lang),
        translate(exc.message_key, lang, **exc.params),
        field=exc.field,
    )


async def submission_in_progress_handler(
    request: Request, exc: SubmissionInProgressError
) -> JSONResponse:
    logger.warning("Duplicate submission refused: %s", exc.key)
    lang = _language(request)
    return _alert(409, translate("error", lang), translate("submission_in_progress", lang))


async def screen_not_allowed_handler(
    request: Request, exc: ScreenNotAllowedError
) -> JSONResponse:
    logger.warning("Screen %s refused for role %s", exc.screen, exc.role)
    lang = _language(request)
    return _alert(403, translate("not_allowed", lang), translate("screen_not_allowed", lang))
