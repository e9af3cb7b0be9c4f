from __future__ import annotations

from auto_loan.domain.vehicle import Vehicle
from auto_loan.ports.vehicle_catalog import VehicleCatalog


class InMemoryVehicleCatalog(VehicleCatalog):
    """
    Canonical contract implementation for tests.

    - Stores vehicles in insertion order
    - Matches make case-insensitively
    - list_makes keeps the first spelling seen for each make
    """

    def __init__(self, vehicles: list[Vehicle]) -> None:
        self._vehicles = list(vehicles)

    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        for vehicle in self._vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        return None

    def list_makes(self) -> list[str]:
        makes: dict[str, str] = {}
        for vehicle in self._vehicles:
            makes.setdefault(vehicle.make.lower(), vehicle.make)
        return [makes[key] for key in sorted(makes)]

    def list_models(self, make: str, year: int | None = None) -> list[Vehicle]:
        return [vehicle for vehicle in self._vehicles if self._matches(vehicle, make, year)]

    def _matches(self, vehicle: Vehicle, make: str, year: int | None) -> bool:
        if vehicle.make.lower() != make.lower():
            return False
        if year is not None and vehicle.year != year:
            return False
        return True
