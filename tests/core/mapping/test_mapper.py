# tests/core/mapping/test_mapper.py
"""
Testes do Mapper mínimo (coleções → adapters).

Os testes asseguram que:
- a definição é executada imediatamente na construção
- coleções sem adapter explícito resolvem para o default
- referências a adapters inexistentes ou default ausente falham no load
- o mapper padrão funciona ponta a ponta com a Configuration
"""

import pytest

from atlas_model.core.adapters.adapter_set import AdapterSet
from atlas_model.core.config.errors import (
    AdapterNotFoundError,
    CollectionNotFoundError,
    DuplicateCollectionError,
    MapperNotReadyError,
    NoDefaultAdapterError,
)
from atlas_model.core.configuration import Configuration
from atlas_model.core.mapping.mapper import Mapper


def _definition(m):
    m.collection("users", entity=dict)
    m.collection("audit", adapter="sqlite3")


def test_definition_runs_on_construction():
    mapper = Mapper(_definition)
    assert mapper.collection_names() == ["users", "audit"]
    assert mapper.collections["users"].entity is dict
    assert mapper.loaded is False


def test_duplicate_collection_is_rejected():
    def definition(m):
        m.collection("users")
        m.collection("users")

    with pytest.raises(DuplicateCollectionError):
        Mapper(definition)


def test_load_requires_adapters():
    with pytest.raises(MapperNotReadyError):
        Mapper(_definition).load()


def test_load_binds_default_and_named_adapters():
    mapper = Mapper(_definition)
    mapper.adapters = AdapterSet({"sqlite3": "lite", "postgresql": "pg"}, default_name="postgresql")
    mapper.load()

    assert mapper.loaded is True
    assert mapper.resolve("users") == "pg"
    assert mapper.resolve("audit") == "lite"


def test_load_fails_on_unknown_adapter_reference():
    mapper = Mapper(_definition)
    mapper.adapters = AdapterSet({"postgresql": "pg"}, default_name="postgresql")
    with pytest.raises(AdapterNotFoundError):
        mapper.load()
    assert mapper.loaded is False


def test_load_fails_without_default():
    mapper = Mapper(lambda m: m.collection("users"))
    mapper.adapters = AdapterSet({"sqlite3": "lite"})
    with pytest.raises(NoDefaultAdapterError):
        mapper.load()


def test_resolve_before_load_raises():
    with pytest.raises(MapperNotReadyError):
        Mapper(_definition).resolve("users")


def test_configuration_with_default_mapper(kinds, fake_adapter_cls):
    config = Configuration(kinds=kinds)
    config.adapter(name="sqlite3", kind="sql", uri="sqlite3://localhost/database")
    config.adapter(name="postgresql", kind="sql", uri="postgres://localhost/database", default=True)
    mapper = config.mapping(_definition)

    config.load()

    assert isinstance(mapper, Mapper)
    assert mapper.resolve("users") is config.adapters.default
    assert mapper.resolve("audit").uri == "sqlite3://localhost/database"
    assert isinstance(mapper.resolve("audit"), fake_adapter_cls)


def test_resolve_unknown_collection_raises_typed_error():
    mapper = Mapper(_definition)
    mapper.adapters = AdapterSet({"sqlite3": "lite", "postgresql": "pg"}, default_name="postgresql")
    mapper.load()

    with pytest.raises(CollectionNotFoundError) as exc_info:
        mapper.resolve("orders")

    assert isinstance(exc_info.value, LookupError)
    assert exc_info.value.to_payload().type == "MAPPING_UNKNOWN_COLLECTION"
    assert exc_info.value.details == {"collection": "orders", "declared": ["audit", "users"]}
