# agro/domain/producer/repository.py
from __future__ import annotations

import uuid
from typing import Protocol

from .entities import Producer


class DuplicateDocumentError(Exception):
    """Ja existe produtor com o mesmo CPF/CNPJ."""


class ProducerRepository(Protocol):
    """salvar/atualizar levantam DuplicateDocumentError se o documento ja estiver em uso."""

    def salvar(self, producer: Producer) -> Producer: ...
    def atualizar(self, producer: Producer) -> Producer: ...
    def remover(self, producer_id: uuid.UUID) -> bool: ...
    def buscar_por_id(self, producer_id: uuid.UUID) -> Producer | None: ...
    def buscar_por_documento(self, digitos: str) -> Producer | None: ...
    def listar(self, limit: int, offset: int) -> list[Producer]: ...
