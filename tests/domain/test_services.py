# tests/domain/test_services.py
#
# Application services against a fresh in-memory DuckDB per test.
from __future__ import annotations

import uuid
from collections.abc import Generator

import duckdb
import pytest
from pydantic import ValidationError

from agro.application.dtos.farm_dto import CreateFarmDTO, FarmAreaDTO, UpdateFarmDTO
from agro.application.dtos.producer_dto import CreateProducerDTO, UpdateProducerDTO
from agro.application.services.document_service import DocumentService
from agro.application.services.farm_service import FarmService, ProducerNotFoundError
from agro.application.services.producer_service import DuplicateDocumentError, ProducerService
from agro.domain.farm.enums import BrazilianState
from agro.domain.farm.value_objects import InvalidFarmAreaError
from agro.domain.producer.entities import Producer
from agro.domain.producer.value_objects import CPF, DocumentType, InvalidDocumentError
from agro.infrastructure.duckdb_connection import init_schema
from agro.infrastructure.repositories.duckdb_farm_repo import DuckDBFarmRepo
from agro.infrastructure.repositories.duckdb_producer_repo import DuckDBProducerRepo


@pytest.fixture()
def conn() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    c = duckdb.connect(":memory:")
    init_schema(c)
    yield c
    c.close()


@pytest.fixture()
def producer_service(conn: duckdb.DuckDBPyConnection) -> ProducerService:
    return ProducerService(producer_repo=DuckDBProducerRepo(conn))


@pytest.fixture()
def farm_service(conn: duckdb.DuckDBPyConnection) -> FarmService:
    return FarmService(farm_repo=DuckDBFarmRepo(conn), producer_repo=DuckDBProducerRepo(conn))


def _farm(producer_id: str, **kwargs: object) -> CreateFarmDTO:
    dados: dict[str, object] = {
        "producer_id": producer_id,
        "name": "Fazenda Boa Vista",
        "city": "Campinas",
        "state": "SP",
        "total_area": 100.5,
        "arable_area": 70,
        "vegetation_area": 25,
    }
    dados.update(kwargs)
    return CreateFarmDTO(**dados)  # type: ignore[arg-type]


# ---------- DocumentService ----------


def test_validate_and_strip_cpf():
    assert DocumentService().validate_and_strip("111.444.777-35") == "11144477735"


def test_validate_and_strip_cnpj():
    assert DocumentService().validate_and_strip("11.222.333/0001-81") == "11222333000181"


def test_validate_and_strip_comprimento_invalido():
    with pytest.raises(InvalidDocumentError, match="Document must be a valid CPF or CNPJ"):
        DocumentService().validate_and_strip("123.456.789")


def test_log_nunca_contem_cpf_completo(capsys: pytest.CaptureFixture[str]):
    DocumentService().validate_and_strip("111.444.777-35")
    saida = capsys.readouterr().out
    assert "11144477735" not in saida
    assert "111.444.777-35" not in saida


def test_inspect_documento_invalido_nao_levanta():
    dto = DocumentService().inspect("123.456.789-00")
    assert dto.valid is False
    assert dto.type is DocumentType.CPF
    assert dto.digits == "12345678900"


def test_inspect_formata_cnpj():
    dto = DocumentService().inspect("11222333000181")
    assert dto.valid is True
    assert dto.formatted == "11.222.333/0001-81"


def test_inspect_comprimento_desconhecido_devolve_entrada():
    dto = DocumentService().inspect("12-34")
    assert dto.type is None
    assert dto.formatted == "12-34"


# ---------- ProducerService ----------


def test_criar_produtor_persiste_digitos(producer_service: ProducerService):
    dto = producer_service.create(CreateProducerDTO(name="  Joao da Silva ", document="111.444.777-35"))
    assert dto.document == "11144477735"
    assert dto.document_type is DocumentType.CPF
    assert dto.name == "Joao da Silva"
    assert producer_service.get(uuid.UUID(dto.id)) == dto


def test_criar_produtor_documento_invalido(producer_service: ProducerService):
    with pytest.raises(InvalidDocumentError, match="Invalid CNPJ format"):
        producer_service.create(CreateProducerDTO(name="Agro XYZ", document="11.222.333/0001-99"))


def test_criar_produtor_duplicado_mesmo_com_outra_formatacao(producer_service: ProducerService):
    producer_service.create(CreateProducerDTO(name="Agro XYZ", document="11.222.333/0001-81"))
    with pytest.raises(DuplicateDocumentError):
        producer_service.create(CreateProducerDTO(name="Outra", document="11222333000181"))


def test_listar_produtores(producer_service: ProducerService):
    producer_service.create(CreateProducerDTO(name="Joao", document="11144477735"))
    producer_service.create(CreateProducerDTO(name="Agro XYZ", document="11222333000181"))
    assert len(producer_service.list_all()) == 2
    assert len(producer_service.list_all(limit=1)) == 1


def test_get_produtor_inexistente(producer_service: ProducerService):
    assert producer_service.get(uuid.uuid4()) is None


# ---------- FarmService ----------


def test_check_area():
    service = FarmService(farm_repo=None, producer_repo=None)  # type: ignore[arg-type]
    result = service.check_area(FarmAreaDTO(total_area=100, arable_area=80, vegetation_area=30))
    assert result.is_valid is False
    assert result.error == (
        "Sum of arable and vegetation areas (110.00 ha) exceeds total area (100.00 ha)"
    )


def test_criar_fazenda(producer_service: ProducerService, farm_service: FarmService):
    produtor = producer_service.create(CreateProducerDTO(name="Joao", document="11144477735"))
    fazenda = farm_service.create(_farm(produtor.id))
    assert fazenda.state is BrazilianState.SP
    assert fazenda.unused_area == pytest.approx(5.5)
    assert farm_service.get(uuid.UUID(fazenda.id)) == fazenda
    assert farm_service.list_by_producer(uuid.UUID(produtor.id)) == [fazenda]


def test_criar_fazenda_produtor_inexistente(farm_service: FarmService):
    with pytest.raises(ProducerNotFoundError):
        farm_service.create(_farm(str(uuid.uuid4())))


def test_criar_fazenda_area_invalida_nao_persiste(
    producer_service: ProducerService, farm_service: FarmService
):
    produtor = producer_service.create(CreateProducerDTO(name="Joao", document="11144477735"))
    with pytest.raises(InvalidFarmAreaError, match="exceeds total area"):
        farm_service.create(_farm(produtor.id, arable_area=80, vegetation_area=30, total_area=100))
    assert farm_service.list_by_producer(uuid.UUID(produtor.id)) == []


def test_list_by_producer_inexistente(farm_service: FarmService):
    assert farm_service.list_by_producer(uuid.uuid4()) is None


def test_nome_so_com_espacos_rejeitado_no_dto():
    with pytest.raises(ValidationError):
        CreateProducerDTO(name="     ", document="11144477735")
    with pytest.raises(ValidationError):
        UpdateProducerDTO(name="   ")
    with pytest.raises(ValidationError):
        _farm(str(uuid.uuid4()), city="   ")


# ---------- corrida na checagem de duplicidade ----------


class _RepoSemChecagem(DuckDBProducerRepo):
    """Simula duas requisicoes concorrentes: a busca nunca enxerga o outro INSERT."""

    def buscar_por_documento(self, digitos: str) -> Producer | None:
        return None


def test_unique_do_banco_vira_documento_duplicado(conn: duckdb.DuckDBPyConnection):
    service = ProducerService(producer_repo=_RepoSemChecagem(conn))
    service.create(CreateProducerDTO(name="Joao", document="111.444.777-35"))
    with pytest.raises(DuplicateDocumentError, match="already exists"):
        service.create(CreateProducerDTO(name="Outro", document="11144477735"))
    assert len(service.list_all()) == 1


def test_repo_salvar_documento_repetido(conn: duckdb.DuckDBPyConnection):
    repo = DuckDBProducerRepo(conn)
    repo.salvar(Producer(id=uuid.uuid4(), name="Joao", document=CPF("11144477735")))
    with pytest.raises(DuplicateDocumentError):
        repo.salvar(Producer(id=uuid.uuid4(), name="Maria", document=CPF("111.444.777-35")))


# ---------- ProducerService.update / delete ----------


def test_atualizar_nome_mantem_documento(producer_service: ProducerService):
    criado = producer_service.create(CreateProducerDTO(name="Joao", document="11144477735"))
    dto = producer_service.update(uuid.UUID(criado.id), UpdateProducerDTO(name=" Joao Souza "))
    assert dto is not None
    assert dto.name == "Joao Souza"
    assert dto.document == "11144477735"
    assert dto.created_at == criado.created_at


def test_atualizar_documento_troca_tipo(producer_service: ProducerService):
    criado = producer_service.create(CreateProducerDTO(name="Joao", document="11144477735"))
    dto = producer_service.update(
        uuid.UUID(criado.id), UpdateProducerDTO(document="11.222.333/0001-81")
    )
    assert dto is not None
    assert dto.document == "11222333000181"
    assert dto.document_type is DocumentType.CNPJ
    assert producer_service.get(uuid.UUID(criado.id)) == dto


def test_atualizar_com_proprio_documento_reformatado(producer_service: ProducerService):
    criado = producer_service.create(CreateProducerDTO(name="Joao", document="11144477735"))
    dto = producer_service.update(uuid.UUID(criado.id), UpdateProducerDTO(document="111.444.777-35"))
    assert dto is not None
    assert dto.document == "11144477735"


def test_atualizar_para_documento_de_outro_produtor(producer_service: ProducerService):
    producer_service.create(CreateProducerDTO(name="Agro XYZ", document="11222333000181"))
    criado = producer_service.create(CreateProducerDTO(name="Joao", document="11144477735"))
    with pytest.raises(DuplicateDocumentError):
        producer_service.update(uuid.UUID(criado.id), UpdateProducerDTO(document="11.222.333/0001-81"))


def test_atualizar_documento_invalido(producer_service: ProducerService):
    criado = producer_service.create(CreateProducerDTO(name="Joao", document="11144477735"))
    with pytest.raises(InvalidDocumentError, match="Invalid CPF format"):
        producer_service.update(uuid.UUID(criado.id), UpdateProducerDTO(document="111.444.777-36"))


def test_atualizar_documento_passa_por_validate_and_strip(conn: duckdb.DuckDBPyConnection):
    chamadas: list[str] = []

    class _DocumentService(DocumentService):
        def validate_and_strip(self, document: str) -> str:
            chamadas.append(document)
            return super().validate_and_strip(document)

    service = ProducerService(DuckDBProducerRepo(conn), document_service=_DocumentService())
    criado = service.create(CreateProducerDTO(name="Joao", document="11144477735"))
    service.update(uuid.UUID(criado.id), UpdateProducerDTO(document="529.982.247-25"))
    assert chamadas == ["529.982.247-25"]


def test_atualizar_produtor_inexistente(producer_service: ProducerService):
    assert producer_service.update(uuid.uuid4(), UpdateProducerDTO(name="Joao")) is None


def test_remover_produtor_remove_fazendas(
    producer_service: ProducerService, farm_service: FarmService
):
    produtor = producer_service.create(CreateProducerDTO(name="Joao", document="11144477735"))
    fazenda = farm_service.create(_farm(produtor.id))
    assert producer_service.delete(uuid.UUID(produtor.id)) is True
    assert producer_service.get(uuid.UUID(produtor.id)) is None
    assert farm_service.get(uuid.UUID(fazenda.id)) is None
    assert producer_service.delete(uuid.UUID(produtor.id)) is False


def test_documento_liberado_apos_remocao(producer_service: ProducerService):
    criado = producer_service.create(CreateProducerDTO(name="Joao", document="11144477735"))
    producer_service.delete(uuid.UUID(criado.id))
    novo = producer_service.create(CreateProducerDTO(name="Joao", document="111.444.777-35"))
    assert novo.id != criado.id


# ---------- FarmService.update / delete / listagens ----------


def test_atualizar_fazenda_combina_areas(
    producer_service: ProducerService, farm_service: FarmService
):
    produtor = producer_service.create(CreateProducerDTO(name="Joao", document="11144477735"))
    fazenda = farm_service.create(_farm(produtor.id))
    dto = farm_service.update(
        uuid.UUID(fazenda.id), UpdateFarmDTO(total_area=200, arable_area=150, state="MG")
    )
    assert dto is not None
    assert dto.total_area == 200
    assert dto.arable_area == 150
    assert dto.vegetation_area == 25
    assert dto.state is BrazilianState.MG
    assert dto.name == fazenda.name


def test_atualizar_fazenda_area_invalida_nao_altera(
    producer_service: ProducerService, farm_service: FarmService
):
    produtor = producer_service.create(CreateProducerDTO(name="Joao", document="11144477735"))
    fazenda = farm_service.create(_farm(produtor.id))
    with pytest.raises(InvalidFarmAreaError, match="exceeds total area"):
        farm_service.update(uuid.UUID(fazenda.id), UpdateFarmDTO(arable_area=80))
    assert farm_service.get(uuid.UUID(fazenda.id)) == fazenda


def test_atualizar_fazenda_para_produtor_inexistente(
    producer_service: ProducerService, farm_service: FarmService
):
    produtor = producer_service.create(CreateProducerDTO(name="Joao", document="11144477735"))
    fazenda = farm_service.create(_farm(produtor.id))
    with pytest.raises(ProducerNotFoundError):
        farm_service.update(uuid.UUID(fazenda.id), UpdateFarmDTO(producer_id=uuid.uuid4()))


def test_transferir_fazenda_de_produtor(
    producer_service: ProducerService, farm_service: FarmService
):
    joao = producer_service.create(CreateProducerDTO(name="Joao", document="11144477735"))
    agro = producer_service.create(CreateProducerDTO(name="Agro XYZ", document="11222333000181"))
    fazenda = farm_service.create(_farm(joao.id))
    farm_service.update(uuid.UUID(fazenda.id), UpdateFarmDTO(producer_id=uuid.UUID(agro.id)))
    assert farm_service.list_by_producer(uuid.UUID(joao.id)) == []
    assert [f.id for f in farm_service.list_by_producer(uuid.UUID(agro.id)) or []] == [fazenda.id]


def test_atualizar_fazenda_inexistente(farm_service: FarmService):
    assert farm_service.update(uuid.uuid4(), UpdateFarmDTO(name="Fazenda Nova")) is None


def test_remover_fazenda(producer_service: ProducerService, farm_service: FarmService):
    produtor = producer_service.create(CreateProducerDTO(name="Joao", document="11144477735"))
    fazenda = farm_service.create(_farm(produtor.id))
    assert farm_service.delete(uuid.UUID(fazenda.id)) is True
    assert farm_service.get(uuid.UUID(fazenda.id)) is None
    assert farm_service.delete(uuid.UUID(fazenda.id)) is False
    assert producer_service.get(uuid.UUID(produtor.id)) is not None


def test_listar_fazendas_por_nome_e_por_estado(
    producer_service: ProducerService, farm_service: FarmService
):
    produtor = producer_service.create(CreateProducerDTO(name="Joao", document="11144477735"))
    farm_service.create(_farm(produtor.id, name="Fazenda Santa Rita", state="MG"))
    farm_service.create(_farm(produtor.id, name="Fazenda Alvorada"))
    farm_service.create(_farm(produtor.id, name="Fazenda Boa Vista"))

    assert [f.name for f in farm_service.list_all()] == [
        "Fazenda Alvorada",
        "Fazenda Boa Vista",
        "Fazenda Santa Rita",
    ]
    assert [f.name for f in farm_service.list_all(limit=1, offset=1)] == ["Fazenda Boa Vista"]
    assert [f.name for f in farm_service.list_by_state(BrazilianState.SP)] == [
        "Fazenda Alvorada",
        "Fazenda Boa Vista",
    ]
    assert farm_service.list_by_state(BrazilianState.AC) == []
