from pydantic import BaseModel, Field


class VehicleDTO(BaseModel):
    id: str
    make: str
    model: str
    year: int
    label: str = Field(description="Display label, e.g. '2021 Toyota Corolla'")


class MakesResponseDTO(BaseModel):
    makes: list[str]


class ModelsResponseDTO(BaseModel):
    vehicles: list[VehicleDTO]
