from .base import CRUDBase
from .crud_vehicle import CRUDVehicle

__all__ = [
    'CRUDBase',
    'CRUDVehicle',
]
