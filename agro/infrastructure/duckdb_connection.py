# agro/infrastructure/duckdb_connection.py
from __future__ import annotations

import duckdb

from .config import get_settings

SCHEMA = """
CREATE TABLE IF NOT EXISTS producer (
    id VARCHAR PRIMARY KEY,
    name VARCHAR NOT NULL,
    document VARCHAR NOT NULL UNIQUE,
    document_type VARCHAR NOT NULL,
    created_at TIMESTAMP NOT NULL DEFAULT current_timestamp
);

-- producer_id e checado no FarmService; DuckDBProducerRepo.remover apaga as fazendas antes do produtor.
CREATE TABLE IF NOT EXISTS farm (
    id VARCHAR PRIMARY KEY,
    producer_id VARCHAR NOT NULL,
    name VARCHAR NOT NULL,
    city VARCHAR NOT NULL,
    state VARCHAR(2) NOT NULL,
    total_area DOUBLE NOT NULL,
    arable_area DOUBLE NOT NULL,
    vegetation_area DOUBLE NOT NULL,
    created_at TIMESTAMP NOT NULL DEFAULT current_timestamp
);
"""

_connection: duckdb.DuckDBPyConnection | None = None


def init_schema(conn: duckdb.DuckDBPyConnection) -> None:
    """Idempotente: CREATE TABLE IF NOT EXISTS."""
    conn.execute(SCHEMA)


def get_connection() -> duckdb.DuckDBPyConnection:
    global _connection  # noqa: PLW0603
    if _connection is None:
        _connection = duckdb.connect(get_settings().duckdb_path)
        init_schema(_connection)
    return _connection


def set_connection(conn: duckdb.DuckDBPyConnection) -> None:
    """Usado em testes para injetar DuckDB in-memory."""
    global _connection  # noqa: PLW0603
    _connection = conn
