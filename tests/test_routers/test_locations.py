import json

import respx
from httpx import Response

from chargehub.services.geocoding import GEOCODE_URL

API_URL = "http://api.test"
HOME_OWNER = {"X-User-Role": "home_owner"}
CAR_OWNER = {"X-User-Role": "car_owner"}

STATION_FORM = {
    "user_id": 7,
    "name": "Home charger",
    "country": "Iran",
    "city": "Tehran",
    "postcode": "۱۴۱۵۶",
    "street": "Valiasr St",
    "phone_number": "+98 21 8888 0000",
    "power_output": "22",
    "price_per_hour": "",
    "fast_charging": True,
}


def _geocode_ok(lat: float, lng: float) -> Response:
    return Response(
        200,
        json={"status": "OK", "results": [{"geometry": {"location": {"lat": lat, "lng": lng}}}]},
    )


@respx.mock
async def test_my_locations_with_markers(client):
    route = respx.post(f"{API_URL}/find-charger-location").mock(
        return_value=Response(
            200,
            json=[
                {"charging_location_id": 11, "name": "A", "latitude": 35.7, "longitude": 51.4},
                {"charging_location_id": 12, "name": "B"},
            ],
        )
    )

    resp = await client.get("/locations", params={"user_id": 7}, headers=HOME_OWNER)

    data = resp.json()["data"]
    assert len(data["locations"]) == 2
    assert len(data["markers"]) == 1
    assert json.loads(route.calls.last.request.content) == {"user_id": 7}


async def test_car_owner_cannot_manage_locations(client):
    resp = await client.get("/locations", params={"user_id": 7}, headers=CAR_OWNER)

    assert resp.status_code == 403


@respx.mock
async def test_location_bookings(client):
    route = respx.post(f"{API_URL}/find-booking").mock(return_value=Response(200, json=[]))

    resp = await client.get("/locations/bookings", params={"user_id": 7}, headers=HOME_OWNER)

    assert resp.json()["data"] == {"bookings": []}
    assert json.loads(route.calls.last.request.content) == {"charger_location_owner_user_id": 7}


@respx.mock
async def test_region_from_geocoded_address(client):
    respx.get(GEOCODE_URL).mock(return_value=_geocode_ok(35.75, 51.41))

    resp = await client.post(
        "/locations/region",
        json={"street": "Valiasr St", "city": "Tehran", "country": "Iran"},
        headers=HOME_OWNER,
    )

    region = resp.json()["data"]["region"]
    assert region["source"] == "full_address"
    assert region["latitude"] == 35.75


async def test_region_without_address_uses_fallback(client):
    resp = await client.post("/locations/region", json={"country": "UK"}, headers=HOME_OWNER)

    region = resp.json()["data"]["region"]
    assert region["source"] == "fallback"
    assert (region["latitude"], region["longitude"]) == (55.3781, -3.4360)


@respx.mock
async def test_form_fills_suggested_price_and_moves_to_map(client):
    respx.get(GEOCODE_URL).mock(return_value=_geocode_ok(35.75, 51.41))

    resp = await client.post("/locations/form", json=STATION_FORM, headers=HOME_OWNER)

    assert resp.status_code == 200
    body = resp.json()
    assert body["screen"] == "ChargerLocationForm"
    assert body["next_screen"] == "FinalizeLocationOnMap"
    assert body["params"]["form"]["price_per_hour"] == "50000"
    assert body["params"]["region"]["source"] == "full_address"


async def test_form_missing_city(client):
    resp = await client.post(
        "/locations/form", json={**STATION_FORM, "city": ""}, headers=HOME_OWNER
    )

    assert resp.status_code == 422
    assert resp.json()["alert"]["message"] == "City is required"


async def test_select_point(client):
    resp = await client.post(
        "/locations/select-point",
        json={"latitude": 35.7, "longitude": 51.4},
        headers=HOME_OWNER,
    )

    assert resp.json()["data"]["selected"] == {"latitude": 35.7, "longitude": 51.4}


async def test_select_point_ignored_when_disabled(client):
    resp = await client.post(
        "/locations/select-point",
        json={"latitude": 35.7, "longitude": 51.4, "enable_tap_to_select": False},
        headers=HOME_OWNER,
    )

    assert resp.json()["data"]["selected"] is None


async def test_finalize_requires_a_selected_point(client):
    resp = await client.post(
        "/locations", json={"form": STATION_FORM}, headers=HOME_OWNER
    )

    assert resp.status_code == 422
    assert resp.json()["alert"]["message"] == "Please tap the map to select the exact location"


@respx.mock
async def test_finalize_adds_station(client):
    route = respx.post(f"{API_URL}/add-charging-location").mock(
        return_value=Response(200, json={"charging_location_id": 30})
    )

    resp = await client.post(
        "/locations",
        json={"form": STATION_FORM, "latitude": 35.76, "longitude": 51.42},
        headers=HOME_OWNER,
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["next_screen"] == "MyChargerLocations"
    assert body["alert"]["message"] == "Charging station added successfully"

    payload = json.loads(route.calls.last.request.content)
    assert payload["latitude"] == 35.76
    assert payload["longitude"] == 51.42
    assert payload["postcode"] == "14156"
    assert payload["phone_number"] == "+982188880000"
    assert payload["price_per_hour"] == 50000.0
    assert payload["power_output"] == 22.0


@respx.mock
async def test_finalize_updates_existing_station(client):
    respx.post(f"{API_URL}/update-charging-location/30").mock(
        return_value=Response(200, json={"charging_location_id": 30})
    )

    resp = await client.post(
        "/locations",
        json={
            "form": {**STATION_FORM, "charging_location_id": 30, "price_per_hour": "6"},
            "latitude": 35.76,
            "longitude": 51.42,
        },
        headers=HOME_OWNER,
    )

    assert resp.json()["alert"]["message"] == "Charging station updated successfully"


@respx.mock
async def test_finalize_backend_failure_keeps_screen(client):
    respx.post(f"{API_URL}/add-charging-location").mock(
        return_value=Response(500, json={"message": "Database unavailable"})
    )

    resp = await client.post(
        "/locations",
        json={"form": STATION_FORM, "latitude": 35.76, "longitude": 51.42},
        headers=HOME_OWNER,
    )

    assert resp.status_code == 502
    assert resp.json()["next_screen"] is None
    assert resp.json()["alert"]["message"] == "Database unavailable"


@respx.mock
async def test_finalize_edit_keeps_existing_point(client):
    route = respx.post(f"{API_URL}/update-charging-location/30").mock(
        return_value=Response(200, json={"charging_location_id": 30})
    )

    resp = await client.post(
        "/locations",
        json={
            "form": {
                **STATION_FORM,
                "charging_location_id": 30,
                "latitude": 35.7,
                "longitude": 51.4,
            },
        },
        headers=HOME_OWNER,
    )

    assert resp.status_code == 200
    payload = json.loads(route.calls.last.request.content)
    assert (payload["latitude"], payload["longitude"]) == (35.7, 51.4)


async def test_edit_form_centres_map_on_station(client):
    resp = await client.post(
        "/locations/form",
        json={**STATION_FORM, "charging_location_id": 30, "latitude": 35.7, "longitude": 51.4},
        headers=HOME_OWNER,
    )

    body = resp.json()
    assert body["screen"] == "EditChargerLocation"
    assert body["params"]["region"]["source"] == "coordinates"


async def test_malformed_point_gets_an_alert(client):
    resp = await client.post(
        "/locations/select-point",
        json={"latitude": "north", "longitude": 51.4},
        headers=HOME_OWNER,
    )

    assert resp.status_code == 422
    assert resp.json() == {
        "alert": {"title": "Validation Error", "message": "Some fields are missing or invalid"},
        "next_screen": None,
        "field": "latitude",
    }
