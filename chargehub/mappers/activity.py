from typing import Any

from chargehub.i18n.messages import translate
from chargehub.schemas.marketplace import ActivitySummary, UserRole
from chargehub.schemas.responses import ActivityTile

_BOOKING_KEYS = ("Number_booking", "number_booking", "numberBooking", "number_bookings")
_LOCATION_KEYS = ("Number_locations", "number_locations", "numberLocations")


def _first_count(data: dict[str, Any], keys: tuple[str, ...]) -> int:
    for key in keys:
        value = data.get(key)
        if value:
            try:
                return int(value)
            except (TypeError, ValueError):
                continue
    return 0


def normalize_activity(data: dict[str, Any]) -> ActivitySummary:
    """Map the backend's inconsistently-named counters onto one shape."""
    try:
        total = abs(float(data.get("total_price") or 0))
    except (TypeError, ValueError):
        total = 0.0

    return ActivitySummary(
        total_price=total,
        number_booking=_first_count(data, _BOOKING_KEYS),
        number_locations=_first_count(data, _LOCATION_KEYS),
    )


def build_activity_tiles(
    summary: ActivitySummary, view: UserRole, lang: str = "en"
) -> list[ActivityTile]:
    is_host = view == UserRole.home_owner
    tiles = [
        ActivityTile(
            key="total_price",
            label=translate("total_earnings" if is_host else "total_spent", lang),
            value=f"€{summary.total_price:.2f}",
        ),
        ActivityTile(
            key="number_booking",
            label=translate("total_bookings" if is_host else "charging_sessions", lang),
            value=str(summary.number_booking),
        ),
    ]
    if is_host:
        tiles.append(
            ActivityTile(
                key="number_locations",
                label=translate("your_stations", lang),
                value=str(summary.number_locations),
            )
        )
    return tiles
