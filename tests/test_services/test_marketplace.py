import json
from datetime import datetime, timezone

import httpx
import pytest
import respx
from httpx import Response

from chargehub.exceptions.custom import MarketplaceError, NetworkError
from chargehub.schemas.forms import CarForm, RegisterForm, SearchCriteria
from chargehub.services.marketplace import MarketplaceService

API_URL = "http://api.test"


def _service(client: httpx.AsyncClient) -> MarketplaceService:
    return MarketplaceService(client, API_URL + "/", "secret-token")


@respx.mock
@pytest.mark.asyncio
async def test_login_sends_auth_headers():
    route = respx.post(f"{API_URL}/user/login").mock(
        return_value=Response(
            200,
            json={"user_id": 4, "name": "Sara", "user_type": "Electric Car Owner"},
        )
    )

    async with httpx.AsyncClient() as client:
        user = await _service(client).login("sara", "secret1")

    request = route.calls.last.request
    assert request.headers["Authorization"] == "Bearer secret-token"
    assert request.headers["X-API-Token"] == "secret-token"
    assert request.headers["Accept"] == "application/json"
    assert json.loads(request.content) == {"username": "sara", "password": "secret1"}
    assert user.user_id == 4
    assert user.role == "car_owner"


@respx.mock
@pytest.mark.asyncio
async def test_register_payload():
    route = respx.post(f"{API_URL}/register").mock(
        return_value=Response(201, json={"user_id": 9, "email": "sara@example.com"})
    )
    form = RegisterForm(
        name=" Sara ",
        email="sara@example.com ",
        password="secret1",
        confirm_password="secret1",
        phone_number="+989121234567",
        user_type="home_owner",
    )

    async with httpx.AsyncClient() as client:
        user = await _service(client).register(form)

    body = json.loads(route.calls.last.request.content)
    assert body == {
        "name": "Sara",
        "email": "sara@example.com",
        "password": "secret1",
        "phone_number": "+989121234567",
        "user_type": "Charging station owner",
    }
    assert user.user_id == 9


@respx.mock
@pytest.mark.asyncio
async def test_error_carries_server_message():
    respx.post(f"{API_URL}/user/login").mock(
        return_value=Response(400, json={"message": "Invalid username or password"})
    )

    async with httpx.AsyncClient() as client:
        with pytest.raises(MarketplaceError) as exc_info:
            await _service(client).login("sara", "wrong")

    assert exc_info.value.status_code == 400
    assert exc_info.value.server_message == "Invalid username or password"
    assert exc_info.value.fallback_key == "request_failed"


@respx.mock
@pytest.mark.asyncio
async def test_error_without_json_body():
    respx.post(f"{API_URL}/add-booking").mock(return_value=Response(500, text="boom"))

    async with httpx.AsyncClient() as client:
        with pytest.raises(MarketplaceError) as exc_info:
            await _service(client).add_booking(3, 11)

    assert exc_info.value.server_message is None
    assert exc_info.value.fallback_key == "no_create_booking"


@respx.mock
@pytest.mark.asyncio
async def test_validate_user_uses_verification_fallback():
    respx.post(f"{API_URL}/validate-user").mock(return_value=Response(401, text=""))

    async with httpx.AsyncClient() as client:
        with pytest.raises(MarketplaceError) as exc_info:
            await _service(client).validate_user(4, "12345")

    assert exc_info.value.status_code == 401
    assert exc_info.value.fallback_key == "verification_failed"


@respx.mock
@pytest.mark.asyncio
async def test_transport_failure_raises_network_error():
    respx.post(f"{API_URL}/find-car").mock(side_effect=httpx.ConnectError("refused"))

    async with httpx.AsyncClient() as client:
        with pytest.raises(NetworkError):
            await _service(client).find_cars(4)


@respx.mock
@pytest.mark.asyncio
async def test_find_cars_filters_non_objects():
    route = respx.post(f"{API_URL}/find-car").mock(
        return_value=Response(200, json=[{"car_id": 1, "model": "Leaf"}, "junk"])
    )

    async with httpx.AsyncClient() as client:
        cars = await _service(client).find_cars(4)

    assert json.loads(route.calls.last.request.content) == {"car_owner_user_id": 4}
    assert [c.model for c in cars] == ["Leaf"]


@respx.mock
@pytest.mark.asyncio
async def test_find_cars_non_list_body():
    respx.post(f"{API_URL}/find-car").mock(
        return_value=Response(200, json={"message": "no cars"})
    )

    async with httpx.AsyncClient() as client:
        assert await _service(client).find_cars(4) == []


@respx.mock
@pytest.mark.asyncio
async def test_add_car_payload():
    route = respx.post(f"{API_URL}/add-car").mock(return_value=Response(200, json={"car_id": 5}))
    form = CarForm(model=" Leaf ", color="Blue", year="۲۰۲۰", license_plate="12ب345")

    async with httpx.AsyncClient() as client:
        car = await _service(client).add_car(4, form, 2020)

    assert json.loads(route.calls.last.request.content) == {
        "user_id": 4,
        "model": "Leaf",
        "color": "Blue",
        "year": 2020,
        "license_plate": "12ب345",
    }
    assert car.car_id == 5


@respx.mock
@pytest.mark.asyncio
async def test_update_password_uses_put():
    route = respx.put(f"{API_URL}/update-user/4").mock(return_value=Response(204))

    async with httpx.AsyncClient() as client:
        await _service(client).update_password(4, "newpassword")

    assert json.loads(route.calls.last.request.content) == {"password": "newpassword"}


@respx.mock
@pytest.mark.asyncio
async def test_find_charging_locations_sends_criteria():
    route = respx.post(f"{API_URL}/find-charging-location").mock(
        return_value=Response(
            200,
            json=[{"charging_location_id": 11, "name": "Valiasr", "is_available": True}],
        )
    )
    criteria = SearchCriteria(city="Tehran", street="Valiasr", fast_charging=True)

    async with httpx.AsyncClient() as client:
        locations = await _service(client).find_charging_locations(criteria)

    body = json.loads(route.calls.last.request.content)
    assert body["city"] == "Tehran"
    assert body["fast_charging"] is True
    assert locations[0].charging_location_id == 11


@respx.mock
@pytest.mark.asyncio
async def test_update_charging_location_path():
    respx.post(f"{API_URL}/update-charging-location/11").mock(
        return_value=Response(200, json={"charging_location_id": 11})
    )

    async with httpx.AsyncClient() as client:
        location = await _service(client).update_charging_location(11, {"name": "x"})

    assert location.charging_location_id == 11


@respx.mock
@pytest.mark.asyncio
async def test_find_bookings_queries():
    route = respx.post(f"{API_URL}/find-booking").mock(return_value=Response(200, json=[]))

    async with httpx.AsyncClient() as client:
        service = _service(client)
        await service.find_bookings_for_owner(4)
        await service.find_bookings_for_host(7)
        await service.find_bookings_for_car(3)

    bodies = [json.loads(call.request.content) for call in route.calls]
    assert bodies == [
        {"car_owner_user_id": 4},
        {"charger_location_owner_user_id": 7},
        {"car_id": 3},
    ]


@respx.mock
@pytest.mark.asyncio
async def test_end_booking_payload():
    route = respx.post(f"{API_URL}/update-booking/21").mock(return_value=Response(200, json={}))
    end_time = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)

    async with httpx.AsyncClient() as client:
        await _service(client).end_booking(21, 4, "Quick charge", end_time=end_time)

    assert json.loads(route.calls.last.request.content) == {
        "end_time": "2024-05-01T12:30:00+00:00",
        "review_rate": 4,
        "review_message": "Quick charge",
    }


@respx.mock
@pytest.mark.asyncio
async def test_get_activity_disables_caching():
    route = respx.post(f"{API_URL}/get-activity").mock(
        return_value=Response(200, json={"total_price": 10})
    )

    async with httpx.AsyncClient() as client:
        data = await _service(client).get_activity({"car_owner_user_id": 4})

    headers = route.calls.last.request.headers
    assert headers["Cache-Control"] == "no-cache, no-store, must-revalidate"
    assert headers["Pragma"] == "no-cache"
    assert data == {"total_price": 10}
