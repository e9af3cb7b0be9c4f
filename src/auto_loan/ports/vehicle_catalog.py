from __future__ import annotations

from abc import ABC, abstractmethod

from auto_loan.domain.vehicle import Vehicle


class VehicleCatalog(ABC):
    """
    Port for vehicle lookups.

    The loan calculation only needs vehicles to label summaries, so the contract
    is read-only and small. Adapters may be backed by memory, a file, or a
    remote catalog; none of that leaks into the calculation.

    Contract:
        - Make and model matching is case-insensitive
        - Unknown ids return None rather than raising
    """

    @abstractmethod
    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        """Return the vehicle with the given id, or None if unknown."""
        ...

    @abstractmethod
    def list_makes(self) -> list[str]:
        """Distinct makes, sorted alphabetically."""
        ...

    @abstractmethod
    def list_models(self, make: str, year: int | None = None) -> list[Vehicle]:
        """
        Vehicles of a make, optionally restricted to a model year.

        Args:
            make: Make name (case-insensitive)
            year: Model year filter; None means any year

        Returns:
            Matching vehicles in catalog order
        """
        ...
