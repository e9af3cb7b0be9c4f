from __future__ import annotations

import json
import logging
from pathlib import Path

from auto_loan.adapters.in_memory_vehicle_catalog import InMemoryVehicleCatalog
from auto_loan.domain.errors import InternalError
from auto_loan.domain.vehicle import Vehicle

logger = logging.getLogger(__name__)


class JsonFileVehicleCatalog(InMemoryVehicleCatalog):
    """
    Vehicle catalog loaded from a JSON file.

    Expected format is a list of objects:
        [{"id": "1", "make": "Toyota", "model": "Corolla", "year": 2021}, ...]

    The file is read once, at construction. Lookups then behave exactly like
    InMemoryVehicleCatalog.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        super().__init__(self._load())

    def _load(self) -> list[Vehicle]:
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise InternalError(
                "Vehicle catalog file could not be read", path=str(self._path)
            ) from exc

        if not isinstance(raw, list):
            raise InternalError("Vehicle catalog file must contain a list", path=str(self._path))

        try:
            vehicles = [
                Vehicle(
                    id=str(item["id"]),
                    make=str(item["make"]),
                    model=str(item["model"]),
                    year=int(item["year"]),
                )
                for item in raw
            ]
        except (KeyError, TypeError, ValueError) as exc:
            raise InternalError(
                "Vehicle catalog entry is malformed", path=str(self._path)
            ) from exc

        logger.info(
            "Vehicle catalog loaded",
            extra={"path": str(self._path), "vehicle_count": len(vehicles)},
        )
        return vehicles
