# agro/domain/producer/entities.py
from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime

from .value_objects import CNPJ, CPF, DocumentType


@dataclass(frozen=True)
class Producer:
    """Produtor rural: pessoa fisica (CPF) ou juridica (CNPJ)."""

    id: uuid.UUID
    name: str
    document: CPF | CNPJ
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        stripped = self.name.strip()
        if not stripped:
            raise ValueError("Producer name cannot be empty")
        object.__setattr__(self, "name", stripped)

    @property
    def document_type(self) -> DocumentType:
        return self.document.tipo
