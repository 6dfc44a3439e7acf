from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel
from datetime import date
from typing import Any, Optional
from enum import Enum, IntEnum

from app.core.exceptions import VehicleValidationError
from app.schemas.errors import field_errors_from_pydantic

class VehicleType(str, Enum):
    bus = "Bus"
    winger = "Winger"
    tt = "TT"

class VehicleStatus(str, Enum):
    active = "Active"
    inactive = "Inactive"

class AcStatus(IntEnum):
    non_ac = 0
    ac = 1

def require_int(v):
    # Plain ints only: bools, floats and numeric strings are rejected
    if v is not None and (isinstance(v, bool) or not isinstance(v, int)):
        raise ValueError("Input should be a valid integer")
    return v

class VehicleBase(BaseModel):
    reg_no: str = Field(..., min_length=1, description="Registration number")
    make: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    mfg_year: int = Field(..., strict=True, description="Calendar year of manufacture")
    reg_date: date = Field(..., description="Registration date (ISO 8601)")
    entity_name: str = Field(..., min_length=1)
    running_site: Optional[str] = None
    engine_no: str = Field(..., min_length=1)
    chassis_no: str = Field(..., min_length=1)
    seat_capacity: int = Field(..., ge=1, strict=True)
    vehicle_type: VehicleType
    ac_status: AcStatus = AcStatus.non_ac
    status: VehicleStatus = VehicleStatus.active

    @field_validator('ac_status', mode='before')
    def validate_ac_status(cls, v):
        return require_int(v)

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class VehicleCreate(VehicleBase):
    @field_validator('running_site')
    def blank_running_site_is_none(cls, v):
        return v or None

# Fields that may be explicitly set to null in a partial update
NULLABLE_FIELDS = {"running_site"}

class VehicleUpdate(BaseModel):
    """
    Partial vehicle payload.

    Every field is optional. Only the fields the caller actually sent end up
    in ``model_fields_set``, which is what the store merges; an explicit null
    is only accepted for nullable fields.
    """
    reg_no: Optional[str] = Field(None, min_length=1)
    make: Optional[str] = Field(None, min_length=1)
    model: Optional[str] = Field(None, min_length=1)
    mfg_year: Optional[int] = Field(None, strict=True)
    reg_date: Optional[date] = None
    entity_name: Optional[str] = Field(None, min_length=1)
    running_site: Optional[str] = None
    engine_no: Optional[str] = Field(None, min_length=1)
    chassis_no: Optional[str] = Field(None, min_length=1)
    seat_capacity: Optional[int] = Field(None, ge=1, strict=True)
    vehicle_type: Optional[VehicleType] = None
    ac_status: Optional[AcStatus] = None
    status: Optional[VehicleStatus] = None

    @field_validator('*', mode='before')
    def reject_null(cls, v, info):
        if v is None and info.field_name not in NULLABLE_FIELDS:
            raise ValueError(f"{to_camel(info.field_name)} may not be null")
        return v

    @field_validator('ac_status', mode='before')
    def validate_ac_status(cls, v):
        return require_int(v)

    def changes(self) -> dict:
        """Return only the fields that were present in the payload."""
        return self.model_dump(exclude_unset=True)

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class Vehicle(VehicleBase):
    sl_no: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True
        from_attributes = True

def _validate(schema, payload: Any):
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise VehicleValidationError(field_errors_from_pydantic(exc.errors())) from exc

def validate_insert(payload: Any) -> VehicleCreate:
    """Validate a full InsertVehicle payload, raising VehicleValidationError on failure."""
    return _validate(VehicleCreate, payload)

def validate_update(payload: Any) -> VehicleUpdate:
    """Validate a partial InsertVehicle payload, raising VehicleValidationError on failure."""
    return _validate(VehicleUpdate, payload)
