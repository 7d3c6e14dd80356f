# agro/domain/farm/value_objects.py
from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal


class InvalidFarmAreaError(ValueError):
    """Areas da fazenda violam as regras de negocio (total > 0, soma <= total)."""


@dataclass(frozen=True)
class FarmAreaValidationResult:
    """Resultado de validate_farm_area. error so existe quando is_valid e False."""

    is_valid: bool
    error: str | None = None


def _hectares(valor: float) -> str:
    # Decimal(float) e exato: arredonda meio-para-cima sobre o valor binario
    # real, igual ao toFixed(2) usado pelos clientes web.
    if not math.isfinite(valor):
        return f"{valor:.2f}"
    return str(Decimal(valor).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def validate_farm_area(
    total_area: float,
    arable_area: float,
    vegetation_area: float,
) -> FarmAreaValidationResult:
    """Valida as areas (em hectares) de uma fazenda.

    Regras, avaliadas nesta ordem; a primeira violacao define o erro:
      - area total > 0
      - area agricultavel >= 0
      - area de vegetacao >= 0
      - agricultavel + vegetacao <= total

    Comparacao em float puro, sem tolerancia: soma == total e valida.
    """
    if total_area <= 0:
        return FarmAreaValidationResult(False, "Total area must be greater than 0")

    if arable_area < 0:
        return FarmAreaValidationResult(False, "Arable area cannot be negative")

    if vegetation_area < 0:
        return FarmAreaValidationResult(False, "Vegetation area cannot be negative")

    soma = arable_area + vegetation_area
    if soma > total_area:
        return FarmAreaValidationResult(
            False,
            f"Sum of arable and vegetation areas ({_hectares(soma)} ha) "
            f"exceeds total area ({_hectares(total_area)} ha)",
        )

    return FarmAreaValidationResult(True)


def assert_valid_farm_area(
    total_area: float,
    arable_area: float,
    vegetation_area: float,
) -> None:
    """Levanta InvalidFarmAreaError com a mensagem de validate_farm_area."""
    result = validate_farm_area(total_area, arable_area, vegetation_area)
    if not result.is_valid:
        raise InvalidFarmAreaError(result.error)


@dataclass(frozen=True)
class FarmArea:
    """Areas da fazenda em hectares. Invariante verificado no construtor."""

    total_area: float
    arable_area: float
    vegetation_area: float

    def __post_init__(self) -> None:
        assert_valid_farm_area(self.total_area, self.arable_area, self.vegetation_area)

    @property
    def unused_area(self) -> float:
        return self.total_area - self.arable_area - self.vegetation_area
