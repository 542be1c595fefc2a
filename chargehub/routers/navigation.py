from fastapi import APIRouter

from chargehub.dependencies import RoleDep
from chargehub.navigation import home_screen_for, screens_for
from chargehub.schemas.responses import NavigationResponse

router = APIRouter(tags=["navigation"])


@router.get("/navigation", response_model=NavigationResponse)
async def navigation(role: RoleDep) -> NavigationResponse:
    return NavigationResponse(
        role=role.value if role else None,
        home_screen=home_screen_for(role),
        screens=screens_for(role),
    )
