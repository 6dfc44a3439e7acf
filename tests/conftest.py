import pytest
from fastapi.testclient import TestClient

from app.api import deps
from app.crud.crud_vehicle import CRUDVehicle
from app.schemas.vehicle import VehicleCreate
from main import app

CURRENT_YEAR = 2025

def build_payload(**overrides) -> dict:
    payload = {
        "regNo": "KA-01-AA-0001",
        "make": "Tata",
        "model": "Starbus",
        "mfgYear": 2021,
        "regDate": "2021-04-01",
        "entityName": "Southern Fleet",
        "runningSite": "Depot 3",
        "engineNo": "ENG100001",
        "chassisNo": "CHS100001",
        "seatCapacity": 40,
        "vehicleType": "Bus",
        "acStatus": 1,
        "status": "Active",
    }
    payload.update(overrides)
    return payload

# Fixtures
@pytest.fixture
def vehicle_payload():
    return build_payload()

@pytest.fixture
def store():
    return CRUDVehicle()

@pytest.fixture
def fleet(store):
    """A store holding a small mixed fleet, ages relative to CURRENT_YEAR."""
    rows = [
        build_payload(regNo="BUS-1", make="Tata", model="Ultra", mfgYear=2021, seatCapacity=45,
                      vehicleType="Bus", acStatus=1, status="Active", entityName="City Transport"),
        build_payload(regNo="WIN-1", make="Force", model="Urbania", mfgYear=2019, seatCapacity=12,
                      vehicleType="Winger", acStatus=1, status="Active", entityName="Metro Tours"),
        build_payload(regNo="TT-1", make="Force Motors", model="Traveller", mfgYear=2018, seatCapacity=17,
                      vehicleType="TT", acStatus=0, status="Active", entityName="Express Tours"),
        build_payload(regNo="BUS-2", make="Ashok Leyland", model="Viking", mfgYear=2016, seatCapacity=32,
                      vehicleType="Bus", acStatus=0, status="Inactive", entityName="Tata Group Transit"),
        build_payload(regNo="BUS-3", make="Eicher", model="Skyline", mfgYear=2022, seatCapacity=10,
                      vehicleType="Bus", acStatus=1, status="Active", entityName="Regional Connect"),
    ]
    for row in rows:
        store.create(obj_in=VehicleCreate.model_validate(row))
    return store

@pytest.fixture
def client(store):
    app.dependency_overrides[deps.get_vehicle_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
