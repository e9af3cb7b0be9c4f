"""
Dependency injection for FastAPI routes.

Use cases are built per request. The vehicle catalog is read-only once
loaded, so it is the only object cached with lru_cache.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import Depends

from auto_loan.adapters.in_memory_vehicle_catalog import InMemoryVehicleCatalog
from auto_loan.adapters.json_file_vehicle_catalog import JsonFileVehicleCatalog
from auto_loan.infra.config import vehicle_catalog_path
from auto_loan.ports.vehicle_catalog import VehicleCatalog
from auto_loan.use_cases.calculate_loan_summary import CalculateLoanSummary

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_vehicle_catalog() -> VehicleCatalog:
    """
    Provides the process-wide vehicle catalog.

    Reads VEHICLE_CATALOG_PATH on first call. Without it, an empty in-memory
    catalog is used, so any vehicle_id lookup reports not found.

    Returns:
        VehicleCatalog: Catalog adapter shared by all requests
    """
    path = vehicle_catalog_path()
    if path is None:
        logger.info("VEHICLE_CATALOG_PATH not set, using empty vehicle catalog")
        return InMemoryVehicleCatalog([])

    return JsonFileVehicleCatalog(path)


def get_calculate_loan_summary_use_case(
    catalog: VehicleCatalog = Depends(get_vehicle_catalog),
) -> CalculateLoanSummary:
    """
    Factory function that returns a configured CalculateLoanSummary use case.

    Args:
        catalog: Vehicle catalog (injected by FastAPI via Depends(get_vehicle_catalog))

    Returns:
        CalculateLoanSummary: Fresh use case instance for this request
    """
    return CalculateLoanSummary(vehicle_catalog=catalog)
