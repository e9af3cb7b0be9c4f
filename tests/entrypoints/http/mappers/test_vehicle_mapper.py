from __future__ import annotations

from auto_loan.domain.vehicle import Vehicle
from auto_loan.entrypoints.http.mappers.vehicle_mapper import VehicleMapper


def test_to_dto_includes_label() -> None:
    dto = VehicleMapper.to_dto(Vehicle(id="1", make="Honda", model="Civic", year=2019))

    assert dto.model_dump() == {
        "id": "1",
        "make": "Honda",
        "model": "Civic",
        "year": 2019,
        "label": "2019 Honda Civic",
    }


def test_to_models_response_keeps_order() -> None:
    vehicles = [
        Vehicle(id="2", make="Honda", model="Civic", year=2020),
        Vehicle(id="1", make="Honda", model="Accord", year=2019),
    ]

    response = VehicleMapper.to_models_response(vehicles)

    assert [v.id for v in response.vehicles] == ["2", "1"]


def test_to_makes_response() -> None:
    assert VehicleMapper.to_makes_response(["Honda"]).makes == ["Honda"]
