# agro/infrastructure/repositories/duckdb_farm_repo.py
from __future__ import annotations

import uuid

import duckdb

from agro.domain.farm.entities import Farm
from agro.domain.farm.enums import BrazilianState
from agro.domain.farm.value_objects import FarmArea

_COLUNAS = (
    "id, producer_id, name, city, state, total_area, arable_area, vegetation_area, created_at"
)


class DuckDBFarmRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def salvar(self, farm: Farm) -> Farm:
        self._conn.execute(
            """INSERT INTO farm
               (id, producer_id, name, city, state, total_area, arable_area, vegetation_area)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
            [
                str(farm.id),
                str(farm.producer_id),
                farm.name,
                farm.city,
                farm.state.value,
                farm.area.total_area,
                farm.area.arable_area,
                farm.area.vegetation_area,
            ],
        )
        salva = self.buscar_por_id(farm.id)
        assert salva is not None
        return salva

    def atualizar(self, farm: Farm) -> Farm:
        self._conn.execute(
            """UPDATE farm
               SET producer_id = ?, name = ?, city = ?, state = ?,
                   total_area = ?, arable_area = ?, vegetation_area = ?
               WHERE id = ?""",
            [
                str(farm.producer_id),
                farm.name,
                farm.city,
                farm.state.value,
                farm.area.total_area,
                farm.area.arable_area,
                farm.area.vegetation_area,
                str(farm.id),
            ],
        )
        salva = self.buscar_por_id(farm.id)
        assert salva is not None
        return salva

    def remover(self, farm_id: uuid.UUID) -> bool:
        removidas = self._conn.execute(
            "DELETE FROM farm WHERE id = ? RETURNING id", [str(farm_id)]
        ).fetchall()
        return bool(removidas)

    def buscar_por_id(self, farm_id: uuid.UUID) -> Farm | None:
        row = self._conn.execute(
            f"SELECT {_COLUNAS} FROM farm WHERE id = ?",  # noqa: S608
            [str(farm_id)],
        ).fetchone()
        return self._hidratar(row) if row else None

    def listar_por_produtor(self, producer_id: uuid.UUID) -> list[Farm]:
        rows = self._conn.execute(
            f"SELECT {_COLUNAS} FROM farm WHERE producer_id = ? ORDER BY created_at, name",  # noqa: S608
            [str(producer_id)],
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def listar_todas(self, limit: int, offset: int) -> list[Farm]:
        rows = self._conn.execute(
            f"SELECT {_COLUNAS} FROM farm ORDER BY name, created_at LIMIT ? OFFSET ?",  # noqa: S608
            [limit, offset],
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def listar_por_estado(self, state: BrazilianState) -> list[Farm]:
        rows = self._conn.execute(
            f"SELECT {_COLUNAS} FROM farm WHERE state = ? ORDER BY name, created_at",  # noqa: S608
            [state.value],
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def _hidratar(self, row: tuple) -> Farm:  # type: ignore[type-arg]
        """Colunas: id(0), producer_id(1), name(2), city(3), state(4),
        total_area(5), arable_area(6), vegetation_area(7), created_at(8)"""
        return Farm(
            id=uuid.UUID(row[0]),
            producer_id=uuid.UUID(row[1]),
            name=row[2],
            city=row[3],
            state=BrazilianState(row[4]),
            area=FarmArea(
                total_area=float(row[5]),
                arable_area=float(row[6]),
                vegetation_area=float(row[7]),
            ),
            created_at=row[8],
        )
