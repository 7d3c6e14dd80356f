# agro/application/dtos/document_dto.py
from pydantic import BaseModel

from agro.domain.producer.value_objects import DocumentType


class DocumentValidationRequestDTO(BaseModel):
    document: str


class DocumentValidationDTO(BaseModel):
    document: str
    digits: str
    type: DocumentType | None
    valid: bool
    formatted: str


class GeneratedDocumentDTO(BaseModel):
    type: DocumentType
    document: str
