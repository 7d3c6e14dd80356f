# agro/application/services/document_service.py
from __future__ import annotations

from agro.domain.producer.value_objects import (
    CNPJ,
    CPF,
    DocumentType,
    detect_document_type,
    format_cnpj,
    format_cpf,
    parse_document,
    strip_document_formatting,
    validate_document,
)
from agro.infrastructure.log import log

from ..dtos.document_dto import DocumentValidationDTO


class DocumentService:
    """Politica de dispatch CPF/CNPJ por quantidade de digitos (11 ou 14)."""

    def parse(self, document: str) -> CPF | CNPJ:
        digitos = strip_document_formatting(document)
        log(f"Validando documento: {len(digitos)} digitos")
        try:
            doc = parse_document(document)
        except ValueError as err:
            log(f"Documento rejeitado: {err}")
            raise
        log(f"Documento valido: {doc.mascarado}")
        return doc

    def validate_and_strip(self, document: str) -> str:
        """Retorna apenas os digitos ou levanta InvalidDocumentError."""
        return self.parse(document).valor

    def inspect(self, document: str) -> DocumentValidationDTO:
        """Resumo no estilo predicado: documento invalido vira valid=False, sem excecao."""
        tipo = detect_document_type(document)
        if tipo is DocumentType.CPF:
            formatted = format_cpf(document)
        elif tipo is DocumentType.CNPJ:
            formatted = format_cnpj(document)
        else:
            formatted = document
        return DocumentValidationDTO(
            document=document,
            digits=strip_document_formatting(document),
            type=tipo,
            valid=validate_document(document),
            formatted=formatted,
        )
