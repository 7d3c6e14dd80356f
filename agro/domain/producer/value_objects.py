# agro/domain/producer/value_objects.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_PESOS_CPF_1 = [10, 9, 8, 7, 6, 5, 4, 3, 2]
_PESOS_CPF_2 = [11, 10, 9, 8, 7, 6, 5, 4, 3, 2]
_PESOS_CNPJ_1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
_PESOS_CNPJ_2 = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]


class InvalidDocumentError(ValueError):
    """Documento (CPF/CNPJ) rejeitado por comprimento ou digitos verificadores."""


class DocumentType(str, Enum):
    CPF = "CPF"
    CNPJ = "CNPJ"


def _apenas_digitos(raw: str) -> str:
    # Somente 0-9 ASCII: "²".isdigit() e True mas int("²") falha.
    return "".join(c for c in raw if c.isascii() and c.isdigit())


def _soma_ponderada(digitos: str, pesos: list[int]) -> int:
    return sum(int(d) * p for d, p in zip(digitos, pesos))


def digito_cpf(prefixo: str) -> int:
    """Digito verificador de CPF para um prefixo de 9 ou 10 digitos."""
    pesos = _PESOS_CPF_1 if len(prefixo) == 9 else _PESOS_CPF_2
    resto = _soma_ponderada(prefixo, pesos) * 10 % 11
    return 0 if resto == 10 else resto


def digito_cnpj(prefixo: str) -> int:
    """Digito verificador de CNPJ para um prefixo de 12 ou 13 digitos."""
    pesos = _PESOS_CNPJ_1 if len(prefixo) == 12 else _PESOS_CNPJ_2
    resto = _soma_ponderada(prefixo, pesos) % 11
    return 0 if resto < 2 else 11 - resto


# ---------------------------------------------------------------------------
# CPF
# ---------------------------------------------------------------------------


def strip_cpf_formatting(document: str) -> str:
    """Remove tudo que nao for digito. Nao valida."""
    return _apenas_digitos(document)


def validate_cpf(document: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CPF. Nunca levanta excecao.

    Aceita entrada formatada (XXX.XXX.XXX-YY) ou so digitos. Sequencias com
    todos os digitos iguais (000.000.000-00, 111.111.111-11, ...) sao rejeitadas
    mesmo passando no checksum.
    """
    if not isinstance(document, str):
        return False
    digitos = _apenas_digitos(document)
    if len(digitos) != 11 or len(set(digitos)) == 1:
        return False

    d1 = digito_cpf(digitos[:9])
    d2 = digito_cpf(digitos[:9] + str(d1))
    return digitos[9:] == f"{d1}{d2}"


def format_cpf(document: str) -> str:
    """XXX.XXX.XXX-YY, ou a entrada original se nao tiver 11 digitos."""
    d = _apenas_digitos(document)
    if len(d) != 11:
        return document
    return f"{d[:3]}.{d[3:6]}.{d[6:9]}-{d[9:]}"


# ---------------------------------------------------------------------------
# CNPJ
# ---------------------------------------------------------------------------


def strip_cnpj_formatting(document: str) -> str:
    return _apenas_digitos(document)


def validate_cnpj(document: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CNPJ. Nunca levanta excecao."""
    if not isinstance(document, str):
        return False
    digitos = _apenas_digitos(document)
    if len(digitos) != 14 or len(set(digitos)) == 1:
        return False

    d1 = digito_cnpj(digitos[:12])
    d2 = digito_cnpj(digitos[:12] + str(d1))
    return digitos[12:] == f"{d1}{d2}"


def format_cnpj(document: str) -> str:
    """XX.XXX.XXX/XXXX-YY, ou a entrada original se nao tiver 14 digitos."""
    d = _apenas_digitos(document)
    if len(d) != 14:
        return document
    return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CPF:
    """Value Object imutavel para CPF. NUNCA expoe valor completo em repr/str (LGPD)."""

    _valor: str  # sempre 11 digitos

    def __init__(self, raw: str) -> None:
        if not validate_cpf(raw):
            raise InvalidDocumentError("Invalid CPF format")
        object.__setattr__(self, "_valor", strip_cpf_formatting(raw))

    @property
    def tipo(self) -> DocumentType:
        return DocumentType.CPF

    @property
    def valor(self) -> str:
        """11 digitos sem formatacao. Usar com cuidado, nunca logar."""
        return self._valor

    @property
    def formatado(self) -> str:
        return format_cpf(self._valor)

    @property
    def mascarado(self) -> str:
        """***.XXX.XXX-** (formato seguro para logs)."""
        d = self._valor
        return f"***.{d[3:6]}.{d[6:9]}-**"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CPF):
            return NotImplemented
        return self._valor == other._valor

    def __hash__(self) -> int:
        return hash(self._valor)

    def __repr__(self) -> str:
        return f"CPF({self.mascarado!r})"

    def __str__(self) -> str:
        return self.mascarado


@dataclass(frozen=True)
class CNPJ:
    """Value Object imutavel para CNPJ. Valida digitos verificadores no construtor."""

    _valor: str  # sempre 14 digitos sem formatacao

    def __init__(self, raw: str) -> None:
        if not validate_cnpj(raw):
            raise InvalidDocumentError("Invalid CNPJ format")
        object.__setattr__(self, "_valor", strip_cnpj_formatting(raw))

    @property
    def tipo(self) -> DocumentType:
        return DocumentType.CNPJ

    @property
    def valor(self) -> str:
        return self._valor

    @property
    def formatado(self) -> str:
        return format_cnpj(self._valor)

    @property
    def mascarado(self) -> str:
        # CNPJ e dado publico
        return self.formatado

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CNPJ):
            return NotImplemented
        return self._valor == other._valor

    def __hash__(self) -> int:
        return hash(self._valor)

    def __repr__(self) -> str:
        return f"CNPJ({self.formatado!r})"

    def __str__(self) -> str:
        return self.formatado


# ---------------------------------------------------------------------------
# Dispatch por comprimento: 11 -> CPF, 14 -> CNPJ
# ---------------------------------------------------------------------------


def detect_document_type(document: str) -> DocumentType | None:
    if not isinstance(document, str):
        return None
    tamanho = len(_apenas_digitos(document))
    if tamanho == 11:
        return DocumentType.CPF
    if tamanho == 14:
        return DocumentType.CNPJ
    return None


def validate_document(document: str) -> bool:
    tipo = detect_document_type(document)
    if tipo is DocumentType.CPF:
        return validate_cpf(document)
    if tipo is DocumentType.CNPJ:
        return validate_cnpj(document)
    return False


def parse_document(document: str) -> CPF | CNPJ:
    """Constroi o Value Object correto ou levanta InvalidDocumentError."""
    tipo = detect_document_type(document)
    if tipo is DocumentType.CPF:
        return CPF(document)
    if tipo is DocumentType.CNPJ:
        return CNPJ(document)
    raise InvalidDocumentError("Document must be a valid CPF or CNPJ")


def strip_document_formatting(document: str) -> str:
    """Digitos de um CPF ou CNPJ, sem validar."""
    return _apenas_digitos(document)
