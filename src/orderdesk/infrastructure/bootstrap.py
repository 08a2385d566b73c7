"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from orderdesk.domain.service.order_id_generator import DEFAULT_PREFIX
from orderdesk.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    id_prefix: str = DEFAULT_PREFIX
    currency: str = "$"
    total_currency: str = "R$"
    log_level: str = "WARNING"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read settings from ``ORDERDESK_*`` environment variables."""
    env = os.environ if environ is None else environ
    defaults = Settings()
    return Settings(
        id_prefix=env.get("ORDERDESK_ID_PREFIX", defaults.id_prefix),
        currency=env.get("ORDERDESK_CURRENCY", defaults.currency),
        total_currency=env.get("ORDERDESK_TOTAL_CURRENCY", defaults.total_currency),
        log_level=env.get("ORDERDESK_LOG_LEVEL", defaults.log_level).upper(),
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def order_repository() -> InMemoryOrderRepository:
    """A fresh collection; it lives as long as the session holding it."""
    return InMemoryOrderRepository()
