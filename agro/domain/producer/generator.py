# agro/domain/producer/generator.py
#
# Random but valid CPF/CNPJ numbers for fixtures, seeds and API examples.
# Check digits come from the same functions the validators use, so every
# generated number passes validate_cpf / validate_cnpj.
from __future__ import annotations

import random

from .value_objects import digito_cnpj, digito_cpf, format_cnpj, format_cpf

_FILIAL_MATRIZ = "0001"


def _sortear(rng: random.Random, quantidade: int) -> str:
    while True:
        digitos = "".join(str(rng.randint(0, 9)) for _ in range(quantidade))
        if len(set(digitos)) > 1:
            return digitos


def generate_cpf(formatted: bool = False, rng: random.Random | None = None) -> str:
    """Generate a valid CPF. ``rng`` allows deterministic output in tests."""
    rng = rng or random.Random()
    prefixo = _sortear(rng, 9)
    d1 = digito_cpf(prefixo)
    d2 = digito_cpf(prefixo + str(d1))
    cpf = f"{prefixo}{d1}{d2}"
    return format_cpf(cpf) if formatted else cpf


def generate_cnpj(formatted: bool = False, rng: random.Random | None = None) -> str:
    """Generate a valid head-office CNPJ (branch 0001)."""
    rng = rng or random.Random()
    prefixo = _sortear(rng, 8) + _FILIAL_MATRIZ
    d1 = digito_cnpj(prefixo)
    d2 = digito_cnpj(prefixo + str(d1))
    cnpj = f"{prefixo}{d1}{d2}"
    return format_cnpj(cnpj) if formatted else cnpj
