"""
Filter predicate for vehicle listings.

Every function here is pure: the current year is injectable so ages can be
computed deterministically.
"""
from datetime import date
from typing import Iterable, List, Optional

from app.schemas.filters import SeatCapacityType, VehicleFilters
from app.schemas.vehicle import Vehicle

# Fields compared against the free-text search term
SEARCH_FIELDS = ("reg_no", "make", "model", "entity_name")

def _current_year(current_year: Optional[int]) -> int:
    return current_year if current_year is not None else date.today().year

def vehicle_age(vehicle: Vehicle, current_year: Optional[int] = None) -> int:
    """Age in whole years, derived from the manufacturing year."""
    return _current_year(current_year) - vehicle.mfg_year

def matches_seat_capacity(
    seat_capacity: int,
    target: int,
    comparison: Optional[SeatCapacityType] = None,
) -> bool:
    if comparison == SeatCapacityType.gte:
        return seat_capacity >= target
    if comparison == SeatCapacityType.lte:
        return seat_capacity <= target
    return seat_capacity == target

def matches_search(vehicle: Vehicle, term: str) -> bool:
    needle = term.lower()
    return any(needle in getattr(vehicle, field).lower() for field in SEARCH_FIELDS)

def matches_filters(
    vehicle: Vehicle,
    filters: Optional[VehicleFilters] = None,
    current_year: Optional[int] = None,
) -> bool:
    """
    Decide whether ``vehicle`` belongs in a listing narrowed by ``filters``.

    A search term, when given, is the only criterion evaluated. Otherwise all
    supplied criteria must hold. Empty strings count as absent.
    """
    if filters is None:
        return True

    if filters.search:
        return matches_search(vehicle, filters.search)

    if filters.vehicle_type and vehicle.vehicle_type.value != filters.vehicle_type:
        return False

    if filters.ac_status is not None and int(vehicle.ac_status) != filters.ac_status:
        return False

    if filters.seat_capacity is not None and not matches_seat_capacity(
        vehicle.seat_capacity, filters.seat_capacity, filters.seat_capacity_type
    ):
        return False

    if filters.min_age is not None or filters.max_age is not None:
        age = vehicle_age(vehicle, current_year)
        if filters.min_age is not None and age < filters.min_age:
            return False
        if filters.max_age is not None and age > filters.max_age:
            return False

    if filters.status and vehicle.status.value != filters.status:
        return False

    return True

def filter_vehicles(
    vehicles: Iterable[Vehicle],
    filters: Optional[VehicleFilters] = None,
    current_year: Optional[int] = None,
) -> List[Vehicle]:
    """Return the matching vehicles, most recently created first."""
    year = _current_year(current_year)
    matched = [v for v in vehicles if matches_filters(v, filters, year)]
    return sorted(matched, key=lambda v: v.sl_no, reverse=True)
