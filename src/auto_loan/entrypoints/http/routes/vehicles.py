from fastapi import APIRouter, Depends, Query

from auto_loan.entrypoints.http.dependencies import get_vehicle_catalog
from auto_loan.entrypoints.http.dtos.vehicle import MakesResponseDTO, ModelsResponseDTO
from auto_loan.entrypoints.http.mappers.vehicle_mapper import VehicleMapper
from auto_loan.ports.vehicle_catalog import VehicleCatalog


router = APIRouter(tags=["Vehicles"])


@router.get(
    "/vehicles/makes",
    response_model=MakesResponseDTO,
    summary="List vehicle makes",
    description="Distinct makes in the configured catalog, sorted alphabetically.",
)
def list_makes(catalog: VehicleCatalog = Depends(get_vehicle_catalog)) -> MakesResponseDTO:
    return VehicleMapper.to_makes_response(catalog.list_makes())


@router.get(
    "/vehicles/models",
    response_model=ModelsResponseDTO,
    summary="List vehicles for a make",
    description="""
    Vehicles of one make, for choosing a vehicle_id to label a loan summary.

    ## Filters
    - make: case-insensitive exact match (required)
    - year: exact model year (optional)
    """,
)
def list_models(
    make: str = Query(min_length=1, description="Vehicle make, e.g. 'Toyota'"),
    year: int | None = Query(default=None, ge=1900, description="Model year"),
    catalog: VehicleCatalog = Depends(get_vehicle_catalog),
) -> ModelsResponseDTO:
    return VehicleMapper.to_models_response(catalog.list_models(make, year))
