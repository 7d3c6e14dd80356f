# agro/infrastructure/repositories/duckdb_producer_repo.py
from __future__ import annotations

import uuid

import duckdb

from agro.domain.producer.entities import Producer
from agro.domain.producer.repository import DuplicateDocumentError
from agro.domain.producer.value_objects import parse_document

_COLUNAS = "id, name, document, created_at"


class DuckDBProducerRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def salvar(self, producer: Producer) -> Producer:
        """A constraint UNIQUE em document cobre a corrida entre a checagem do service e o INSERT."""
        try:
            self._conn.execute(
                "INSERT INTO producer (id, name, document, document_type) VALUES (?, ?, ?, ?)",
                [str(producer.id), producer.name, producer.document.valor, producer.document_type.value],
            )
        except duckdb.ConstraintException as err:
            raise DuplicateDocumentError("Producer with this document already exists") from err
        salvo = self.buscar_por_id(producer.id)
        assert salvo is not None
        return salvo

    def atualizar(self, producer: Producer) -> Producer:
        """document so e reescrito quando muda (coluna com indice UNIQUE)."""
        try:
            self._conn.execute(
                """UPDATE producer SET document = ?, document_type = ?
                   WHERE id = ? AND document <> ?""",
                [
                    producer.document.valor,
                    producer.document_type.value,
                    str(producer.id),
                    producer.document.valor,
                ],
            )
        except duckdb.ConstraintException as err:
            raise DuplicateDocumentError("Producer with this document already exists") from err
        self._conn.execute(
            "UPDATE producer SET name = ? WHERE id = ?",
            [producer.name, str(producer.id)],
        )
        salvo = self.buscar_por_id(producer.id)
        assert salvo is not None
        return salvo

    def remover(self, producer_id: uuid.UUID) -> bool:
        """Remove o produtor e suas fazendas. False se o produtor nao existia."""
        self._conn.begin()
        try:
            self._conn.execute("DELETE FROM farm WHERE producer_id = ?", [str(producer_id)])
            removidos = self._conn.execute(
                "DELETE FROM producer WHERE id = ? RETURNING id", [str(producer_id)]
            ).fetchall()
        except duckdb.Error:
            self._conn.rollback()
            raise
        self._conn.commit()
        return bool(removidos)

    def buscar_por_id(self, producer_id: uuid.UUID) -> Producer | None:
        row = self._conn.execute(
            f"SELECT {_COLUNAS} FROM producer WHERE id = ?",  # noqa: S608
            [str(producer_id)],
        ).fetchone()
        return self._hidratar(row) if row else None

    def buscar_por_documento(self, digitos: str) -> Producer | None:
        row = self._conn.execute(
            f"SELECT {_COLUNAS} FROM producer WHERE document = ?",  # noqa: S608
            [digitos],
        ).fetchone()
        return self._hidratar(row) if row else None

    def listar(self, limit: int, offset: int) -> list[Producer]:
        rows = self._conn.execute(
            f"SELECT {_COLUNAS} FROM producer ORDER BY created_at, name LIMIT ? OFFSET ?",  # noqa: S608
            [limit, offset],
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def _hidratar(self, row: tuple) -> Producer:  # type: ignore[type-arg]
        """Colunas: id(0), name(1), document(2), created_at(3).
        document ja foi validado na escrita; parse_document reconstroi CPF/CNPJ."""
        return Producer(
            id=uuid.UUID(row[0]),
            name=row[1],
            document=parse_document(row[2]),
            created_at=row[3],
        )
