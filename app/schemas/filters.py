from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_camel
from typing import Any, Mapping, Optional
from enum import Enum

from app.core.exceptions import VehicleValidationError
from app.schemas.errors import field_errors_from_pydantic

class SeatCapacityType(str, Enum):
    exact = "exact"
    gte = "gte"
    lte = "lte"

class VehicleFilters(BaseModel):
    vehicle_type: Optional[str] = None
    ac_status: Optional[int] = None
    seat_capacity: Optional[int] = None
    seat_capacity_type: Optional[SeatCapacityType] = None
    min_age: Optional[int] = None
    max_age: Optional[int] = None
    status: Optional[str] = None
    search: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True

def validate_filters(raw: Mapping[str, Any]) -> VehicleFilters:
    """
    Build a filter set from raw query values.

    Absent and empty values are dropped before validation so they place no
    constraint on the result.
    """
    present = {key: value for key, value in raw.items() if value is not None and value != ""}
    try:
        return VehicleFilters.model_validate(present)
    except ValidationError as exc:
        raise VehicleValidationError(field_errors_from_pydantic(exc.errors())) from exc
