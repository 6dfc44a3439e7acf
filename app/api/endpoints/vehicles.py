from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query, status

from app import schemas
from app.api import deps
from app.api.decorators import handle_exceptions
from app.crud.crud_vehicle import CRUDVehicle

router = APIRouter(prefix="/vehicles", tags=["vehicles"])

VEHICLE_NOT_FOUND = "Vehicle not found"

@router.get("", response_model=List[schemas.Vehicle])
@handle_exceptions("Failed to fetch vehicles")
def read_vehicles(
    store: CRUDVehicle = Depends(deps.get_vehicle_store),
    vehicle_type: Optional[str] = Query(None, alias="vehicleType"),
    ac_status: Optional[str] = Query(None, alias="acStatus"),
    seat_capacity: Optional[str] = Query(None, alias="seatCapacity"),
    seat_capacity_type: Optional[str] = Query(None, alias="seatCapacityType"),
    min_age: Optional[str] = Query(None, alias="minAge"),
    max_age: Optional[str] = Query(None, alias="maxAge"),
    vehicle_status: Optional[str] = Query(None, alias="status"),
    search: Optional[str] = Query(None),
):
    """
    Retrieve vehicles, most recently created first, optionally filtered.

    Empty query parameters are ignored.
    """
    filters = schemas.validate_filters({
        "vehicleType": vehicle_type,
        "acStatus": ac_status,
        "seatCapacity": seat_capacity,
        "seatCapacityType": seat_capacity_type,
        "minAge": min_age,
        "maxAge": max_age,
        "status": vehicle_status,
        "search": search,
    })
    return store.get_multi(filters)

@router.get("/{slNo}", response_model=schemas.Vehicle)
@handle_exceptions("Failed to fetch vehicle")
def read_vehicle(
    sl_no: int = Path(..., alias="slNo"),
    store: CRUDVehicle = Depends(deps.get_vehicle_store),
):
    """
    Get vehicle by serial number.
    """
    vehicle = store.get(sl_no)
    if vehicle is None:
        raise HTTPException(status_code=404, detail=VEHICLE_NOT_FOUND)
    return vehicle

@router.post("", response_model=schemas.Vehicle, status_code=status.HTTP_201_CREATED)
@handle_exceptions("Failed to create vehicle")
def create_vehicle(
    *,
    store: CRUDVehicle = Depends(deps.get_vehicle_store),
    payload: Dict[str, Any] = Body(...),
):
    """
    Create new vehicle.
    """
    vehicle_in = schemas.validate_insert(payload)
    return store.create(obj_in=vehicle_in)

@router.put("/{slNo}", response_model=schemas.Vehicle)
@handle_exceptions("Failed to update vehicle")
def update_vehicle(
    *,
    store: CRUDVehicle = Depends(deps.get_vehicle_store),
    sl_no: int = Path(..., alias="slNo"),
    payload: Dict[str, Any] = Body(...),
):
    """
    Update a vehicle with the fields present in the body.
    """
    vehicle_in = schemas.validate_update(payload)
    vehicle = store.update(sl_no, obj_in=vehicle_in)
    if vehicle is None:
        raise HTTPException(status_code=404, detail=VEHICLE_NOT_FOUND)
    return vehicle

@router.delete("/{slNo}", response_model=schemas.Message)
@handle_exceptions("Failed to delete vehicle")
def delete_vehicle(
    *,
    store: CRUDVehicle = Depends(deps.get_vehicle_store),
    sl_no: int = Path(..., alias="slNo"),
):
    """
    Delete a vehicle.
    """
    if not store.remove(sl_no):
        raise HTTPException(status_code=404, detail=VEHICLE_NOT_FOUND)
    return {"message": "Vehicle deleted successfully"}
