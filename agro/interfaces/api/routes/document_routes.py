# agro/interfaces/api/routes/document_routes.py
from fastapi import APIRouter, Depends, Query

from agro.application.dtos.document_dto import (
    DocumentValidationDTO,
    DocumentValidationRequestDTO,
    GeneratedDocumentDTO,
)
from agro.application.services.document_service import DocumentService
from agro.domain.producer.generator import generate_cnpj, generate_cpf
from agro.domain.producer.value_objects import DocumentType
from agro.interfaces.api.dependencies import get_document_service

router = APIRouter()


@router.post("/documents/validate", response_model=DocumentValidationDTO)
def validar_documento(
    body: DocumentValidationRequestDTO,
    service: DocumentService = Depends(get_document_service),  # noqa: B008
) -> DocumentValidationDTO:
    # Documento invalido e resposta 200 com valid=false, nao erro HTTP
    return service.inspect(body.document)


@router.get("/documents/generate", response_model=GeneratedDocumentDTO)
def gerar_documento(
    type: DocumentType = Query(default=DocumentType.CPF),  # noqa: A002
    formatted: bool = Query(default=False),
) -> GeneratedDocumentDTO:
    gerar = generate_cpf if type is DocumentType.CPF else generate_cnpj
    return GeneratedDocumentDTO(type=type, document=gerar(formatted=formatted))
