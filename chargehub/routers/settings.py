from fastapi import APIRouter

from chargehub.dependencies import LanguageStoreDep
from chargehub.exceptions.custom import FormValidationError
from chargehub.schemas.forms import LanguageRequest
from chargehub.schemas.responses import LanguageResponse

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/language", response_model=LanguageResponse)
async def get_language(store: LanguageStoreDep) -> LanguageResponse:
    return LanguageResponse(language=store.language, is_rtl=store.is_rtl)


@router.put("/language", response_model=LanguageResponse)
async def change_language(request: LanguageRequest, store: LanguageStoreDep) -> LanguageResponse:
    try:
        store.change_language(request.language)
    except ValueError:
        raise FormValidationError("unsupported_language", field="language") from None
    return LanguageResponse(language=store.language, is_rtl=store.is_rtl)
