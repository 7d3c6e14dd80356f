# agro/domain/farm/repository.py
from __future__ import annotations

import uuid
from typing import Protocol

from .entities import Farm
from .enums import BrazilianState


class FarmRepository(Protocol):
    def salvar(self, farm: Farm) -> Farm: ...
    def atualizar(self, farm: Farm) -> Farm: ...
    def remover(self, farm_id: uuid.UUID) -> bool: ...
    def buscar_por_id(self, farm_id: uuid.UUID) -> Farm | None: ...
    def listar_todas(self, limit: int, offset: int) -> list[Farm]: ...
    def listar_por_produtor(self, producer_id: uuid.UUID) -> list[Farm]: ...
    def listar_por_estado(self, state: BrazilianState) -> list[Farm]: ...
