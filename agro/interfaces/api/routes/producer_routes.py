# agro/interfaces/api/routes/producer_routes.py
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from agro.application.dtos.farm_dto import FarmDTO
from agro.application.dtos.producer_dto import CreateProducerDTO, ProducerDTO, UpdateProducerDTO
from agro.application.services.farm_service import FarmService
from agro.application.services.producer_service import DuplicateDocumentError, ProducerService
from agro.domain.producer.value_objects import InvalidDocumentError
from agro.interfaces.api.dependencies import get_farm_service, get_producer_service

router = APIRouter()


@router.post("/producers", response_model=ProducerDTO, status_code=201)
def criar_produtor(
    body: CreateProducerDTO,
    service: ProducerService = Depends(get_producer_service),  # noqa: B008
) -> ProducerDTO:
    try:
        return service.create(body)
    except InvalidDocumentError as err:
        raise HTTPException(status_code=400, detail=str(err)) from err
    except DuplicateDocumentError as err:
        raise HTTPException(status_code=409, detail=str(err)) from err


@router.get("/producers", response_model=list[ProducerDTO])
def listar_produtores(
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    service: ProducerService = Depends(get_producer_service),  # noqa: B008
) -> list[ProducerDTO]:
    return service.list_all(limit, offset)


@router.get("/producers/{producer_id}", response_model=ProducerDTO)
def get_produtor(
    producer_id: UUID,
    service: ProducerService = Depends(get_producer_service),  # noqa: B008
) -> ProducerDTO:
    producer = service.get(producer_id)
    if producer is None:
        raise HTTPException(status_code=404, detail="Producer not found")
    return producer


@router.patch("/producers/{producer_id}", response_model=ProducerDTO)
def atualizar_produtor(
    producer_id: UUID,
    body: UpdateProducerDTO,
    service: ProducerService = Depends(get_producer_service),  # noqa: B008
) -> ProducerDTO:
    try:
        producer = service.update(producer_id, body)
    except InvalidDocumentError as err:
        raise HTTPException(status_code=400, detail=str(err)) from err
    except DuplicateDocumentError as err:
        raise HTTPException(status_code=409, detail=str(err)) from err
    if producer is None:
        raise HTTPException(status_code=404, detail="Producer not found")
    return producer


@router.delete("/producers/{producer_id}", status_code=204, response_class=Response)
def remover_produtor(
    producer_id: UUID,
    service: ProducerService = Depends(get_producer_service),  # noqa: B008
) -> Response:
    if not service.delete(producer_id):
        raise HTTPException(status_code=404, detail="Producer not found")
    return Response(status_code=204)


@router.get("/producers/{producer_id}/farms", response_model=list[FarmDTO])
def listar_fazendas_do_produtor(
    producer_id: UUID,
    service: FarmService = Depends(get_farm_service),  # noqa: B008
) -> list[FarmDTO]:
    farms = service.list_by_producer(producer_id)
    if farms is None:
        raise HTTPException(status_code=404, detail="Producer not found")
    return farms
