import logging
from typing import List, Optional

from app.crud.base import CRUDBase
from app.schemas.filters import VehicleFilters
from app.schemas.vehicle import Vehicle, VehicleCreate, VehicleUpdate
from app.services.vehicle_filter import filter_vehicles

logger = logging.getLogger(__name__)

class CRUDVehicle(CRUDBase[Vehicle, VehicleCreate, VehicleUpdate]):
    def __init__(self):
        super().__init__(Vehicle, key_field="sl_no")

    def get_multi(
        self,
        filters: Optional[VehicleFilters] = None,
        *,
        current_year: Optional[int] = None,
    ) -> List[Vehicle]:
        """
        Return the vehicles matching ``filters``, most recently created first.

        Without filters every vehicle is returned.
        """
        vehicles = super().get_multi()
        if filters is None:
            return vehicles
        matched = filter_vehicles(vehicles, filters, current_year=current_year)
        logger.debug("Vehicle query %s matched %d of %d", filters.model_dump(exclude_none=True), len(matched), len(vehicles))
        return matched
