# agro/application/dtos/producer_dto.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from agro.domain.producer.value_objects import DocumentType


class CreateProducerDTO(BaseModel):
    """Entrada de cadastro. Checksum do documento e verificado no service.
    Espacos nas pontas sao removidos antes de checar o tamanho."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=3, max_length=255)
    document: str = Field(min_length=11, max_length=18)


class UpdateProducerDTO(BaseModel):
    """Campos ausentes (ou null) mantem o valor atual."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(default=None, min_length=3, max_length=255)
    document: str | None = Field(default=None, min_length=11, max_length=18)


class ProducerDTO(BaseModel):
    id: str
    name: str
    document: str  # apenas digitos
    document_type: DocumentType
    created_at: datetime | None
