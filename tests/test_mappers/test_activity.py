from chargehub.mappers.activity import build_activity_tiles, normalize_activity
from chargehub.schemas.marketplace import ActivitySummary, UserRole


def test_normalize_takes_absolute_price():
    summary = normalize_activity({"total_price": -42.5, "number_booking": 3})

    assert summary.total_price == 42.5
    assert summary.number_booking == 3
    assert summary.number_locations == 0


def test_normalize_accepts_alternate_keys():
    summary = normalize_activity({"Number_booking": 5, "numberLocations": 2})

    assert summary.number_booking == 5
    assert summary.number_locations == 2


def test_normalize_prefers_first_non_empty_key():
    summary = normalize_activity({"Number_booking": 0, "number_bookings": 9})

    assert summary.number_booking == 9


def test_normalize_empty_response():
    assert normalize_activity({}) == ActivitySummary()


def test_normalize_bad_price():
    assert normalize_activity({"total_price": "n/a"}).total_price == 0.0


def test_car_owner_tiles():
    tiles = build_activity_tiles(
        ActivitySummary(total_price=12.0, number_booking=4), UserRole.car_owner
    )

    assert [t.key for t in tiles] == ["total_price", "number_booking"]
    assert tiles[0].value == "€12.00"
    assert tiles[1].label == "Charging Sessions"


def test_host_tiles_in_farsi():
    tiles = build_activity_tiles(
        ActivitySummary(total_price=100.0, number_booking=7, number_locations=2),
        UserRole.home_owner,
        lang="fa",
    )

    assert [t.key for t in tiles] == ["total_price", "number_booking", "number_locations"]
    assert tiles[0].label == "کل درآمد"
    assert tiles[2].value == "2"
