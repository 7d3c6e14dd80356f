# agro/domain/farm/entities.py
from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime

from .enums import BrazilianState
from .value_objects import FarmArea


@dataclass(frozen=True)
class Farm:
    """Fazenda de um produtor. Areas ja validadas pelo FarmArea."""

    id: uuid.UUID
    producer_id: uuid.UUID
    name: str
    city: str
    state: BrazilianState
    area: FarmArea
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Farm name cannot be empty")
        if not self.city.strip():
            raise ValueError("City cannot be empty")
