from fastapi import Request

from app.crud.crud_vehicle import CRUDVehicle

def get_vehicle_store(request: Request) -> CRUDVehicle:
    """
    Dependency that provides the application's vehicle store.
    """
    return request.app.state.vehicle_store
