# agro/application/dtos/farm_dto.py
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from agro.domain.farm.enums import BrazilianState


class FarmAreaDTO(BaseModel):
    """Areas em hectares. NaN/inf rejeitados no schema (422)."""

    total_area: float = Field(allow_inf_nan=False)
    arable_area: float = Field(allow_inf_nan=False)
    vegetation_area: float = Field(allow_inf_nan=False)


class FarmAreaValidationDTO(BaseModel):
    is_valid: bool
    error: str | None = None


class CreateFarmDTO(FarmAreaDTO):
    model_config = ConfigDict(str_strip_whitespace=True)

    producer_id: UUID
    name: str = Field(min_length=3, max_length=255)
    city: str = Field(min_length=2, max_length=100)
    state: BrazilianState


class UpdateFarmDTO(BaseModel):
    """Atualizacao parcial. Areas informadas sao combinadas com as atuais e revalidadas."""

    model_config = ConfigDict(str_strip_whitespace=True)

    producer_id: UUID | None = None
    name: str | None = Field(default=None, min_length=3, max_length=255)
    city: str | None = Field(default=None, min_length=2, max_length=100)
    state: BrazilianState | None = None
    total_area: float | None = Field(default=None, allow_inf_nan=False)
    arable_area: float | None = Field(default=None, allow_inf_nan=False)
    vegetation_area: float | None = Field(default=None, allow_inf_nan=False)


class FarmDTO(BaseModel):
    id: str
    producer_id: str
    name: str
    city: str
    state: BrazilianState
    total_area: float
    arable_area: float
    vegetation_area: float
    unused_area: float
    created_at: datetime | None
