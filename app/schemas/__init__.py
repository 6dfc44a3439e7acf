from .errors import FieldError, Message, ValidationErrorResponse
from .vehicle import (
    Vehicle, VehicleCreate, VehicleUpdate, VehicleType, VehicleStatus, AcStatus,
    validate_insert, validate_update,
)
from .filters import VehicleFilters, SeatCapacityType, validate_filters

__all__ = [
    'FieldError', 'Message', 'ValidationErrorResponse',
    'Vehicle', 'VehicleCreate', 'VehicleUpdate', 'VehicleType', 'VehicleStatus', 'AcStatus',
    'validate_insert', 'validate_update',
    'VehicleFilters', 'SeatCapacityType', 'validate_filters',
]
