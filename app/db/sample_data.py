"""
Demo vehicles loaded into a fresh store at startup.
"""
import logging

from app.crud.crud_vehicle import CRUDVehicle
from app.schemas.vehicle import VehicleCreate

logger = logging.getLogger(__name__)

SAMPLE_VEHICLES = [
    {
        "regNo": "MP-09-AB-1234",
        "make": "Tata",
        "model": "Ultra 1518",
        "mfgYear": 2019,
        "regDate": "2019-03-15",
        "entityName": "City Transport",
        "runningSite": "Route 42A",
        "engineNo": "ENG001234",
        "chassisNo": "CHS001234",
        "seatCapacity": 45,
        "vehicleType": "Bus",
        "acStatus": 1,
        "status": "Active",
    },
    {
        "regNo": "DL-01-XY-5678",
        "make": "Ashok Leyland",
        "model": "STILE",
        "mfgYear": 2020,
        "regDate": "2020-06-20",
        "entityName": "Metro Transport",
        "runningSite": "Route 15B",
        "engineNo": "ENG005678",
        "chassisNo": "CHS005678",
        "seatCapacity": 12,
        "vehicleType": "Winger",
        "acStatus": 1,
        "status": "Active",
    },
    {
        "regNo": "HR-26-CD-9012",
        "make": "Force Motors",
        "model": "Traveller",
        "mfgYear": 2018,
        "regDate": "2018-11-10",
        "entityName": "Express Tours",
        "runningSite": "Highway Route",
        "engineNo": "ENG009012",
        "chassisNo": "CHS009012",
        "seatCapacity": 17,
        "vehicleType": "TT",
        "acStatus": 0,
        "status": "Active",
    },
    {
        "regNo": "UP-14-EF-3456",
        "make": "Tata",
        "model": "LP 909",
        "mfgYear": 2017,
        "regDate": "2017-08-05",
        "entityName": "Local Transit",
        "runningSite": "City Loop",
        "engineNo": "ENG003456",
        "chassisNo": "CHS003456",
        "seatCapacity": 32,
        "vehicleType": "Bus",
        "acStatus": 0,
        "status": "Inactive",
    },
    {
        "regNo": "GJ-05-GH-7890",
        "make": "Mahindra",
        "model": "Bolero Maxi Truck",
        "mfgYear": 2021,
        "regDate": "2021-01-15",
        "entityName": "Regional Connect",
        "runningSite": "Inter-city Route",
        "engineNo": "ENG007890",
        "chassisNo": "CHS007890",
        "seatCapacity": 9,
        "vehicleType": "Winger",
        "acStatus": 1,
        "status": "Active",
    },
]

def seed_vehicles(store: CRUDVehicle) -> int:
    """Insert the sample vehicles into ``store`` and return how many were added."""
    for data in SAMPLE_VEHICLES:
        store.create(obj_in=VehicleCreate.model_validate(data))
    logger.info("Seeded %d sample vehicles", len(SAMPLE_VEHICLES))
    return len(SAMPLE_VEHICLES)
