# agro/application/services/producer_service.py
from __future__ import annotations

import dataclasses
import uuid

from agro.domain.producer.entities import Producer
from agro.domain.producer.repository import DuplicateDocumentError, ProducerRepository
from agro.domain.producer.value_objects import parse_document
from agro.infrastructure.log import log

from ..dtos.producer_dto import CreateProducerDTO, ProducerDTO, UpdateProducerDTO
from .document_service import DocumentService


def to_producer_dto(producer: Producer) -> ProducerDTO:
    return ProducerDTO(
        id=str(producer.id),
        name=producer.name,
        document=producer.document.valor,
        document_type=producer.document_type,
        created_at=producer.created_at,
    )


class ProducerService:
    def __init__(
        self,
        producer_repo: ProducerRepository,
        document_service: DocumentService | None = None,
    ) -> None:
        self._producer_repo = producer_repo
        self._document_service = document_service or DocumentService()

    def create(self, dto: CreateProducerDTO) -> ProducerDTO:
        """Valida o documento (InvalidDocumentError), checa duplicidade e persiste."""
        documento = self._document_service.parse(dto.document)

        if self._producer_repo.buscar_por_documento(documento.valor) is not None:
            log(f"Produtor duplicado: {documento.mascarado}")
            raise DuplicateDocumentError("Producer with this document already exists")

        producer = self._producer_repo.salvar(
            Producer(id=uuid.uuid4(), name=dto.name, document=documento)
        )
        log(f"Produtor criado: id={producer.id}")
        return to_producer_dto(producer)

    def update(self, producer_id: uuid.UUID, dto: UpdateProducerDTO) -> ProducerDTO | None:
        """None quando o produtor nao existe. Trocar para um documento de outro
        produtor levanta DuplicateDocumentError."""
        producer = self._producer_repo.buscar_por_id(producer_id)
        if producer is None:
            return None

        documento = producer.document
        if dto.document is not None:
            digitos = self._document_service.validate_and_strip(dto.document)
            if digitos != documento.valor:
                existente = self._producer_repo.buscar_por_documento(digitos)
                if existente is not None and existente.id != producer.id:
                    log(f"Documento em uso por outro produtor: id={existente.id}")
                    raise DuplicateDocumentError("Producer with this document already exists")
                documento = parse_document(digitos)

        atualizado = self._producer_repo.atualizar(
            dataclasses.replace(
                producer,
                name=dto.name if dto.name is not None else producer.name,
                document=documento,
            )
        )
        log(f"Produtor atualizado: id={atualizado.id}")
        return to_producer_dto(atualizado)

    def delete(self, producer_id: uuid.UUID) -> bool:
        """Remove o produtor junto com suas fazendas."""
        removido = self._producer_repo.remover(producer_id)
        if removido:
            log(f"Produtor removido: id={producer_id}")
        return removido

    def get(self, producer_id: uuid.UUID) -> ProducerDTO | None:
        producer = self._producer_repo.buscar_por_id(producer_id)
        return to_producer_dto(producer) if producer else None

    def list_all(self, limit: int = 50, offset: int = 0) -> list[ProducerDTO]:
        return [to_producer_dto(p) for p in self._producer_repo.listar(limit, offset)]
