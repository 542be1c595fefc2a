import logging

from chargehub.mappers.activity import normalize_activity
from chargehub.schemas.marketplace import ActivitySummary, UserRole
from chargehub.services.marketplace import MarketplaceService

logger = logging.getLogger(__name__)


def activity_payload(user_id: int | str, view: UserRole) -> dict:
    if view == UserRole.home_owner:
        return {"charger_location_owner_user_id": user_id}
    return {"car_owner_user_id": user_id}


class ActivityService:
    def __init__(self, marketplace: MarketplaceService):
        self._marketplace = marketplace

    async def get_summary(self, user_id: int | str, view: UserRole) -> ActivitySummary:
        data = await self._marketplace.get_activity(activity_payload(user_id, view))
        summary = normalize_activity(data)
        logger.info(
            "Activity for user %s (%s): %d bookings, %d locations",
            user_id, view.value, summary.number_booking, summary.number_locations,
        )
        return summary
