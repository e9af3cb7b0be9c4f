from __future__ import annotations

import pytest

from auto_loan.infra.config import log_level, vehicle_catalog_path


def test_log_level_defaults_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("AUTO_LOAN_LOG_LEVEL", raising=False)

    assert log_level() == "INFO"


def test_log_level_is_upper_cased(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AUTO_LOAN_LOG_LEVEL", "debug")

    assert log_level() == "DEBUG"


def test_vehicle_catalog_path_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("VEHICLE_CATALOG_PATH", raising=False)

    assert vehicle_catalog_path() is None


def test_vehicle_catalog_path_empty_is_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VEHICLE_CATALOG_PATH", "")

    assert vehicle_catalog_path() is None


def test_vehicle_catalog_path_set(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VEHICLE_CATALOG_PATH", "/data/vehicles.json")

    assert vehicle_catalog_path() == "/data/vehicles.json"
