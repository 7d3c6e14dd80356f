# agro/interfaces/api/routes/farm_routes.py
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from agro.application.dtos.farm_dto import (
    CreateFarmDTO,
    FarmAreaDTO,
    FarmAreaValidationDTO,
    FarmDTO,
    UpdateFarmDTO,
)
from agro.application.services.farm_service import FarmService, ProducerNotFoundError
from agro.domain.farm.enums import BrazilianState
from agro.domain.farm.value_objects import InvalidFarmAreaError
from agro.interfaces.api.dependencies import get_farm_service

router = APIRouter()


@router.post("/farms/validate-area", response_model=FarmAreaValidationDTO)
def validar_area(
    body: FarmAreaDTO,
    service: FarmService = Depends(get_farm_service),  # noqa: B008
) -> FarmAreaValidationDTO:
    return service.check_area(body)


@router.post("/farms", response_model=FarmDTO, status_code=201)
def criar_fazenda(
    body: CreateFarmDTO,
    service: FarmService = Depends(get_farm_service),  # noqa: B008
) -> FarmDTO:
    try:
        return service.create(body)
    except ProducerNotFoundError as err:
        raise HTTPException(status_code=404, detail=str(err)) from err
    except InvalidFarmAreaError as err:
        raise HTTPException(status_code=400, detail=str(err)) from err


@router.get("/farms", response_model=list[FarmDTO])
def listar_fazendas(
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    service: FarmService = Depends(get_farm_service),  # noqa: B008
) -> list[FarmDTO]:
    return service.list_all(limit, offset)


@router.get("/farms/state/{state}", response_model=list[FarmDTO])
def listar_fazendas_por_estado(
    state: BrazilianState,
    service: FarmService = Depends(get_farm_service),  # noqa: B008
) -> list[FarmDTO]:
    return service.list_by_state(state)


@router.get("/farms/{farm_id}", response_model=FarmDTO)
def get_fazenda(
    farm_id: UUID,
    service: FarmService = Depends(get_farm_service),  # noqa: B008
) -> FarmDTO:
    farm = service.get(farm_id)
    if farm is None:
        raise HTTPException(status_code=404, detail="Farm not found")
    return farm


@router.patch("/farms/{farm_id}", response_model=FarmDTO)
def atualizar_fazenda(
    farm_id: UUID,
    body: UpdateFarmDTO,
    service: FarmService = Depends(get_farm_service),  # noqa: B008
) -> FarmDTO:
    try:
        farm = service.update(farm_id, body)
    except ProducerNotFoundError as err:
        raise HTTPException(status_code=404, detail=str(err)) from err
    except InvalidFarmAreaError as err:
        raise HTTPException(status_code=400, detail=str(err)) from err
    if farm is None:
        raise HTTPException(status_code=404, detail="Farm not found")
    return farm


@router.delete("/farms/{farm_id}", status_code=204, response_class=Response)
def remover_fazenda(
    farm_id: UUID,
    service: FarmService = Depends(get_farm_service),  # noqa: B008
) -> Response:
    if not service.delete(farm_id):
        raise HTTPException(status_code=404, detail="Farm not found")
    return Response(status_code=204)
