from __future__ import annotations

import logging

from auto_loan.infra.config import log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging for the service.

    Safe to call more than once: basicConfig is a no-op when handlers exist,
    so only the level is updated on later calls.
    """
    resolved = level or log_level()

    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(resolved)
