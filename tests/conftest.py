# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas Model.

Este módulo define fixtures reutilizáveis que fornecem:
- arquivos de configuração YAML mínimos e determinísticos
- um adapter fake, construído a partir de `(mapper, uri, **options)`
- uma tabela de kinds já populada com implementações fake
- um mapper fake que registra as chamadas recebidas

O objetivo destas fixtures é permitir testes do core (registry,
configuration, mapping e loader) sem depender de backends reais.

Decisões arquiteturais:
    - Adapters fake não abrem conexões nem fazem I/O
    - O mapper fake usa duck typing (`adapters` + `load()`), sem herança
    - Cada teste recebe instâncias novas (nenhum estado global)

Limites explícitos:
    - Não substituir testes de integração com backends reais
    - Não conter lógica condicional complexa
"""

import pytest


# =====================================================
# Config file fixtures
# =====================================================

@pytest.fixture
def adapters_defaults_yaml() -> str:
    """
    Fixture que fornece um YAML de defaults com dois adapters SQL.

    Representa o conteúdo típico de um `adapters.defaults.yaml`: um
    adapter local (sqlite3) e o adapter default da aplicação (postgresql).

    Returns:
        str: Conteúdo YAML da configuração base.
    """
    return """\
adapters:
  sqlite3:
    kind: sql
    uri: sqlite3://localhost/database
  postgresql:
    kind: sql
    uri: postgres://localhost/database
    default: true
"""


@pytest.fixture
def adapters_local_yaml() -> str:
    """
    Fixture que fornece um YAML local que troca o default e a URI do sqlite3.

    Returns:
        str: Conteúdo YAML de override local.
    """
    return """\
adapters:
  sqlite3:
    uri: sqlite3://localhost/test
    default: true
  postgresql:
    default: false
"""


# =====================================================
# Adapter / mapper fakes
# =====================================================

class FakeAdapter:
    """Adapter fake: apenas guarda os argumentos recebidos da fábrica."""

    def __init__(self, mapper, uri, **options):
        self.mapper = mapper
        self.uri = uri
        self.options = options


class FakeKeyValueAdapter(FakeAdapter):
    """Segundo kind fake, para testes de despacho."""


class RecordingMapper:
    """
    Mapper fake que registra atribuições de `adapters` e chamadas a `load()`.

    Segue o contrato consumido pela `Configuration`:
        - construído a partir de uma definição (executada imediatamente)
        - atributo `adapters` atribuível
        - método `load()`
    """

    def __init__(self, definition):
        self.definition = definition
        self.assigned = []
        self.load_calls = 0
        self._adapters = None
        definition(self)

    @property
    def adapters(self):
        return self._adapters

    @adapters.setter
    def adapters(self, value):
        self.assigned.append(value)
        self._adapters = value

    def load(self):
        self.load_calls += 1


@pytest.fixture
def fake_adapter_cls():
    return FakeAdapter


@pytest.fixture
def kinds():
    """
    Fixture que fornece uma `AdapterKindRegistry` com os kinds `sql` e `kv`.

    O import é lazy para que falhas de import do core apareçam nos testes
    com mensagens claras, e não na coleta.

    Returns:
        AdapterKindRegistry: Tabela com implementações fake.
    """
    from atlas_model.core.adapters.kinds import AdapterKindRegistry

    return AdapterKindRegistry([("sql", FakeAdapter), ("kv", FakeKeyValueAdapter)])


@pytest.fixture
def recording_mapper_cls():
    return RecordingMapper


@pytest.fixture
def config(kinds):
    """Configuration com kinds fake e mapper fake injetados."""
    from atlas_model.core.configuration import Configuration

    return Configuration(kinds=kinds, mapper_factory=RecordingMapper)
