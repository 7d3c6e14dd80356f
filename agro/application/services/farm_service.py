# agro/application/services/farm_service.py
from __future__ import annotations

import dataclasses
import uuid

from agro.domain.farm.entities import Farm
from agro.domain.farm.enums import BrazilianState
from agro.domain.farm.repository import FarmRepository
from agro.domain.farm.value_objects import FarmArea, validate_farm_area
from agro.domain.producer.repository import ProducerRepository
from agro.infrastructure.log import log

from ..dtos.farm_dto import CreateFarmDTO, FarmAreaDTO, FarmAreaValidationDTO, FarmDTO, UpdateFarmDTO


class ProducerNotFoundError(Exception):
    """producer_id nao corresponde a nenhum produtor cadastrado."""


def to_farm_dto(farm: Farm) -> FarmDTO:
    return FarmDTO(
        id=str(farm.id),
        producer_id=str(farm.producer_id),
        name=farm.name,
        city=farm.city,
        state=farm.state,
        total_area=farm.area.total_area,
        arable_area=farm.area.arable_area,
        vegetation_area=farm.area.vegetation_area,
        unused_area=farm.area.unused_area,
        created_at=farm.created_at,
    )


def _escolher(novo: object, atual: object) -> object:
    return atual if novo is None else novo


class FarmService:
    def __init__(
        self,
        farm_repo: FarmRepository,
        producer_repo: ProducerRepository,
    ) -> None:
        self._farm_repo = farm_repo
        self._producer_repo = producer_repo

    def check_area(self, dto: FarmAreaDTO) -> FarmAreaValidationDTO:
        result = validate_farm_area(dto.total_area, dto.arable_area, dto.vegetation_area)
        return FarmAreaValidationDTO(is_valid=result.is_valid, error=result.error)

    def create(self, dto: CreateFarmDTO) -> FarmDTO:
        """Produtor precisa existir; FarmArea levanta InvalidFarmAreaError se as areas forem invalidas."""
        if self._producer_repo.buscar_por_id(dto.producer_id) is None:
            raise ProducerNotFoundError("Producer not found")

        try:
            area = FarmArea(dto.total_area, dto.arable_area, dto.vegetation_area)
        except ValueError as err:
            log(f"Areas invalidas para fazenda {dto.name!r}: {err}")
            raise

        farm = self._farm_repo.salvar(
            Farm(
                id=uuid.uuid4(),
                producer_id=dto.producer_id,
                name=dto.name,
                city=dto.city,
                state=dto.state,
                area=area,
            )
        )
        log(f"Fazenda criada: id={farm.id} produtor={farm.producer_id}")
        return to_farm_dto(farm)

    def update(self, farm_id: uuid.UUID, dto: UpdateFarmDTO) -> FarmDTO | None:
        """None quando a fazenda nao existe. As areas resultantes (informadas
        combinadas com as atuais) passam de novo por FarmArea."""
        farm = self._farm_repo.buscar_por_id(farm_id)
        if farm is None:
            return None

        if dto.producer_id is not None and self._producer_repo.buscar_por_id(dto.producer_id) is None:
            raise ProducerNotFoundError("Producer not found")

        try:
            area = FarmArea(
                total_area=_escolher(dto.total_area, farm.area.total_area),  # type: ignore[arg-type]
                arable_area=_escolher(dto.arable_area, farm.area.arable_area),  # type: ignore[arg-type]
                vegetation_area=_escolher(dto.vegetation_area, farm.area.vegetation_area),  # type: ignore[arg-type]
            )
        except ValueError as err:
            log(f"Areas invalidas na atualizacao da fazenda {farm.id}: {err}")
            raise

        atualizada = self._farm_repo.atualizar(
            dataclasses.replace(
                farm,
                producer_id=_escolher(dto.producer_id, farm.producer_id),
                name=_escolher(dto.name, farm.name),
                city=_escolher(dto.city, farm.city),
                state=_escolher(dto.state, farm.state),
                area=area,
            )
        )
        log(f"Fazenda atualizada: id={atualizada.id}")
        return to_farm_dto(atualizada)

    def delete(self, farm_id: uuid.UUID) -> bool:
        removida = self._farm_repo.remover(farm_id)
        if removida:
            log(f"Fazenda removida: id={farm_id}")
        return removida

    def get(self, farm_id: uuid.UUID) -> FarmDTO | None:
        farm = self._farm_repo.buscar_por_id(farm_id)
        return to_farm_dto(farm) if farm else None

    def list_all(self, limit: int = 50, offset: int = 0) -> list[FarmDTO]:
        """Ordenadas por nome."""
        return [to_farm_dto(f) for f in self._farm_repo.listar_todas(limit, offset)]

    def list_by_state(self, state: BrazilianState) -> list[FarmDTO]:
        return [to_farm_dto(f) for f in self._farm_repo.listar_por_estado(state)]

    def list_by_producer(self, producer_id: uuid.UUID) -> list[FarmDTO] | None:
        """None quando o produtor nao existe."""
        if self._producer_repo.buscar_por_id(producer_id) is None:
            return None
        return [to_farm_dto(f) for f in self._farm_repo.listar_por_produtor(producer_id)]
