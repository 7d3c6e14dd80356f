# tests/integration/conftest.py
from __future__ import annotations

from collections.abc import Generator

import duckdb
import pytest
from fastapi.testclient import TestClient

from agro.infrastructure.duckdb_connection import init_schema


@pytest.fixture()
def test_db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """DuckDB in-memory novo a cada teste, com schema aplicado."""
    conn = duckdb.connect(":memory:")
    init_schema(conn)
    yield conn
    conn.close()


@pytest.fixture()
def client(test_db: duckdb.DuckDBPyConnection) -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com DuckDB in-memory injetado."""
    from agro.infrastructure import duckdb_connection
    duckdb_connection.set_connection(test_db)

    from agro.interfaces.api.main import app
    with TestClient(app) as c:
        yield c

    duckdb_connection.set_connection(None)  # type: ignore[arg-type]


@pytest.fixture()
def produtor_cpf(client: TestClient) -> dict[str, object]:
    response = client.post("/api/producers", json={"name": "Joao da Silva", "document": "111.444.777-35"})
    assert response.status_code == 201
    return response.json()  # type: ignore[no-any-return]
