from datetime import date

import pytest

from app.api import deps
from app.core.config import settings
from main import app
from tests.conftest import build_payload

VEHICLES_URL = f"{settings.API_PREFIX}/vehicles"

def post_vehicle(client, **overrides):
    response = client.post(VEHICLES_URL, json=build_payload(**overrides))
    assert response.status_code == 201
    return response.json()

class BrokenStore:
    """Store stand-in whose every call fails."""

    def __getattr__(self, name):
        def fail(*args, **kwargs):
            raise RuntimeError("storage exploded")
        return fail

# Fixtures
@pytest.fixture
def broken_client(client):
    app.dependency_overrides[deps.get_vehicle_store] = lambda: BrokenStore()
    yield client

# Tests
def test_create_vehicle_returns_camel_case_record(client, vehicle_payload):
    response = client.post(VEHICLES_URL, json=vehicle_payload)

    assert response.status_code == 201
    assert response.json() == {**vehicle_payload, "slNo": 1}

def test_create_vehicle_ignores_sl_no_in_body(client, vehicle_payload):
    post_vehicle(client)

    response = client.post(VEHICLES_URL, json={**vehicle_payload, "slNo": 1})

    assert response.json()["slNo"] == 2

def test_create_vehicle_validation_error_shape(client):
    response = client.post(VEHICLES_URL, json={"regNo": "X", "vehicleType": "Truck"})

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Validation failed"
    fields = {error["field"] for error in body["errors"]}
    assert {"make", "vehicleType", "seatCapacity"} <= fields
    assert all(set(error) == {"field", "message"} for error in body["errors"])

def test_create_vehicle_rejects_non_object_body(client):
    response = client.post(VEHICLES_URL, json=[1, 2, 3])

    assert response.status_code == 400
    assert response.json()["message"] == "Validation failed"

def test_read_vehicle(client):
    created = post_vehicle(client)

    response = client.get(f"{VEHICLES_URL}/{created['slNo']}")

    assert response.status_code == 200
    assert response.json() == created

def test_read_vehicle_not_found(client):
    response = client.get(f"{VEHICLES_URL}/404")

    assert response.status_code == 404
    assert response.json() == {"message": "Vehicle not found"}

def test_read_vehicle_non_integer_sl_no(client):
    response = client.get(f"{VEHICLES_URL}/abc")

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "slNo"

def test_list_vehicles_newest_first(client):
    for n in range(3):
        post_vehicle(client, regNo=f"REG-{n}")

    response = client.get(VEHICLES_URL)

    assert response.status_code == 200
    assert [v["slNo"] for v in response.json()] == [3, 2, 1]

def test_list_vehicles_combined_filters(client):
    post_vehicle(client, regNo="A", vehicleType="Bus", status="Active", acStatus=0)
    post_vehicle(client, regNo="B", vehicleType="Bus", status="Inactive", acStatus=0)
    post_vehicle(client, regNo="C", vehicleType="TT", status="Active", acStatus=0)
    post_vehicle(client, regNo="D", vehicleType="Bus", status="Active", acStatus=1)

    response = client.get(VEHICLES_URL, params={"vehicleType": "Bus", "status": "Active", "acStatus": "0"})

    assert [v["regNo"] for v in response.json()] == ["A"]

def test_list_vehicles_seat_capacity_gte(client):
    for seats in (8, 10, 45):
        post_vehicle(client, seatCapacity=seats)

    response = client.get(VEHICLES_URL, params={"seatCapacity": "10", "seatCapacityType": "gte"})

    assert sorted(v["seatCapacity"] for v in response.json()) == [10, 45]

def test_list_vehicles_age_range(client):
    year = date.today().year
    post_vehicle(client, regNo="FOUR", mfgYear=year - 4)
    post_vehicle(client, regNo="SIX", mfgYear=year - 6)

    response = client.get(VEHICLES_URL, params={"minAge": "3", "maxAge": "5"})

    assert [v["regNo"] for v in response.json()] == ["FOUR"]

def test_list_vehicles_search_ignores_other_filters(client):
    post_vehicle(client, regNo="A", make="TATA", vehicleType="Bus")
    post_vehicle(client, regNo="B", make="Force", vehicleType="TT")

    response = client.get(VEHICLES_URL, params={"search": "tata", "vehicleType": "TT"})

    assert [v["regNo"] for v in response.json()] == ["A"]

def test_list_vehicles_empty_params_are_ignored(client):
    post_vehicle(client)

    response = client.get(VEHICLES_URL, params={"vehicleType": "", "acStatus": "", "search": ""})

    assert len(response.json()) == 1

def test_list_vehicles_bad_numeric_param(client):
    response = client.get(VEHICLES_URL, params={"minAge": "old"})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "minAge"

def test_update_vehicle_partial(client):
    created = post_vehicle(client)

    response = client.put(f"{VEHICLES_URL}/{created['slNo']}", json={"seatCapacity": 99})

    assert response.status_code == 200
    assert response.json() == {**created, "seatCapacity": 99}

def test_update_vehicle_empty_body_is_identity(client):
    created = post_vehicle(client)

    response = client.put(f"{VEHICLES_URL}/{created['slNo']}", json={})

    assert response.json() == created

def test_update_vehicle_cannot_change_sl_no(client):
    created = post_vehicle(client)

    response = client.put(f"{VEHICLES_URL}/{created['slNo']}", json={"slNo": 50, "make": "Eicher"})

    assert response.json()["slNo"] == created["slNo"]
    assert response.json()["make"] == "Eicher"

def test_update_vehicle_not_found(client):
    response = client.put(f"{VEHICLES_URL}/12", json={"seatCapacity": 99})

    assert response.status_code == 404
    assert response.json() == {"message": "Vehicle not found"}

def test_update_vehicle_validation_error(client):
    created = post_vehicle(client)

    response = client.put(f"{VEHICLES_URL}/{created['slNo']}", json={"status": "Scrapped"})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "status"

def test_delete_vehicle(client):
    created = post_vehicle(client)

    response = client.delete(f"{VEHICLES_URL}/{created['slNo']}")

    assert response.status_code == 200
    assert response.json() == {"message": "Vehicle deleted successfully"}
    assert client.get(f"{VEHICLES_URL}/{created['slNo']}").status_code == 404

def test_delete_vehicle_not_found(client):
    response = client.delete(f"{VEHICLES_URL}/3")

    assert response.status_code == 404

@pytest.mark.parametrize("method,path,message", [
    ("get", "", "Failed to fetch vehicles"),
    ("get", "/1", "Failed to fetch vehicle"),
    ("delete", "/1", "Failed to delete vehicle"),
])
def test_internal_errors_are_masked(broken_client, method, path, message):
    response = getattr(broken_client, method)(f"{VEHICLES_URL}{path}")

    assert response.status_code == 500
    assert response.json() == {"message": message}

def test_internal_error_on_create_is_masked(broken_client, vehicle_payload):
    response = broken_client.post(VEHICLES_URL, json=vehicle_payload)

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to create vehicle"}

def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert isinstance(response.json()["vehicles"], int)

def test_malformed_json_body_reports_body_field(client):
    response = client.post(
        VEHICLES_URL,
        content=b'{"regNo": ',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["errors"] == [{"field": "body", "message": "JSON decode error"}]

def test_create_vehicle_rejects_string_seat_capacity(client, vehicle_payload):
    response = client.post(VEHICLES_URL, json={**vehicle_payload, "seatCapacity": "45"})

    assert response.status_code == 400
    assert [e["field"] for e in response.json()["errors"]] == ["seatCapacity"]
