# agro/interfaces/api/dependencies.py
from agro.application.services.document_service import DocumentService
from agro.application.services.farm_service import FarmService
from agro.application.services.producer_service import ProducerService
from agro.infrastructure.duckdb_connection import get_connection
from agro.infrastructure.repositories.duckdb_farm_repo import DuckDBFarmRepo
from agro.infrastructure.repositories.duckdb_producer_repo import DuckDBProducerRepo


def get_document_service() -> DocumentService:
    return DocumentService()


def get_producer_service() -> ProducerService:
    return ProducerService(producer_repo=DuckDBProducerRepo(get_connection()))


def get_farm_service() -> FarmService:
    conn = get_connection()
    return FarmService(
        farm_repo=DuckDBFarmRepo(conn),
        producer_repo=DuckDBProducerRepo(conn),
    )
