# tests/errors/test_error_payloads.py
"""
Testes dos payloads canônicos de erro da camada de configuração.

Cada `ConfigError` deve produzir um `AtlasErrorPayload` com código
estável, mensagem curta e detalhes estruturados serializáveis.
"""

import json

import pytest

from atlas_model.core.config.errors import (
    AdapterNotFoundError,
    ConfigError,
    InvalidMappingError,
    MissingKeywordError,
    NoDefaultAdapterError,
    UnknownAdapterKindError,
)


@pytest.mark.parametrize(
    "exc,expected_type",
    [
        (MissingKeywordError("name"), "ADAPTER_MISSING_KEYWORD"),
        (UnknownAdapterKindError("sql", registered=["kv"]), "ADAPTER_UNKNOWN_KIND"),
        (AdapterNotFoundError("pg"), "ADAPTER_NOT_FOUND"),
        (NoDefaultAdapterError(), "ADAPTER_NO_DEFAULT"),
        (InvalidMappingError(), "MAPPING_INVALID"),
        (ConfigError("generic"), "CONFIG_ERROR"),
    ],
)
def test_payload_type_is_stable(exc, expected_type):
    payload = exc.to_payload()
    assert payload.type == expected_type
    assert payload.message == str(exc)
    json.dumps(payload.to_dict())


def test_missing_keyword_payload_details():
    payload = MissingKeywordError("kind").to_payload().to_dict()
    assert payload["message"] == "missing keyword: kind"
    assert payload["details"] == {"keyword": "kind"}
    assert payload["hint"]


def test_unknown_kind_payload_lists_registered_kinds():
    payload = UnknownAdapterKindError("doc", registered=["sql", "kv"], adapter_name="mongo").to_payload()
    assert payload.details == {"kind": "doc", "registered": ["kv", "sql"], "adapter": "mongo"}
