from __future__ import annotations

from auto_loan.domain.vehicle import Vehicle
from auto_loan.entrypoints.http.dtos.vehicle import (
    MakesResponseDTO,
    ModelsResponseDTO,
    VehicleDTO,
)


class VehicleMapper:
    """Maps catalog vehicles to REST DTOs."""

    @staticmethod
    def to_dto(vehicle: Vehicle) -> VehicleDTO:
        return VehicleDTO(
            id=vehicle.id,
            make=vehicle.make,
            model=vehicle.model,
            year=vehicle.year,
            label=vehicle.label,
        )

    @staticmethod
    def to_makes_response(makes: list[str]) -> MakesResponseDTO:
        return MakesResponseDTO(makes=makes)

    @staticmethod
    def to_models_response(vehicles: list[Vehicle]) -> ModelsResponseDTO:
        return ModelsResponseDTO(vehicles=[VehicleMapper.to_dto(v) for v in vehicles])
