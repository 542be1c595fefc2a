from fastapi import APIRouter

from chargehub.dependencies import ActivityDep, LanguageDep, RoleDep
from chargehub.exceptions.custom import ScreenNotAllowedError
from chargehub.i18n.messages import translate
from chargehub.mappers.activity import build_activity_tiles
from chargehub.navigation import home_screen_for
from chargehub.schemas.marketplace import UserRole
from chargehub.schemas.responses import ScreenResponse

router = APIRouter(tags=["activity"])


@router.get("/activity", response_model=ScreenResponse)
async def activity_summary(
    user_id: int,
    service: ActivityDep,
    role: RoleDep,
    lang: LanguageDep,
    view: UserRole | None = None,
) -> ScreenResponse:
    """Dashboard tile: spend or earnings, booking count and station count."""
    if role is None:
        raise ScreenNotAllowedError("ActivitySummary", None)
    if view is None or view == UserRole.both:
        view = UserRole.home_owner if role == UserRole.home_owner else UserRole.car_owner
    if role != UserRole.both and view != role:
        raise ScreenNotAllowedError("ActivitySummary", role.value)

    summary = await service.get_summary(user_id, view)
    return ScreenResponse(
        screen=home_screen_for(role),
        data={
            "title": translate("activity_overview", lang),
            "view": view,
            "summary": summary,
            "tiles": build_activity_tiles(summary, view, lang),
        },
    )
