from __future__ import annotations

import os

DEFAULT_LOG_LEVEL = "INFO"


def log_level() -> str:
    return os.getenv("AUTO_LOAN_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def vehicle_catalog_path() -> str | None:
    """Path to a JSON vehicle catalog, or None when no catalog is configured."""
    path = os.getenv("VEHICLE_CATALOG_PATH")

    if not path:
        return None

    return path
