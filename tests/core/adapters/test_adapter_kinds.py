from __future__ import annotations

import pytest

from atlas_model.core.adapters.kinds import AdapterKindRegistry
from atlas_model.core.adapters.spec import AdapterSpec
from atlas_model.core.config.errors import UnknownAdapterKindError


def test_kinds_are_listed_sorted(kinds):
    assert kinds.list_kinds() == ["kv", "sql"]
    assert "sql" in kinds
    assert "document" not in kinds


def test_unknown_kind_raises_explicit_error(kinds):
    with pytest.raises(UnknownAdapterKindError) as exc_info:
        kinds.get("document")
    assert exc_info.value.kind == "document"
    assert isinstance(exc_info.value, LookupError)
    assert exc_info.value.to_payload().type == "ADAPTER_UNKNOWN_KIND"


def test_duplicate_kind_is_rejected(kinds, fake_adapter_cls):
    with pytest.raises(ValueError):
        kinds.register("sql", fake_adapter_cls)


@pytest.mark.parametrize("kind", ["", "   ", None])
def test_kind_must_be_non_empty_string(kind, fake_adapter_cls):
    with pytest.raises(ValueError):
        AdapterKindRegistry().register(kind, fake_adapter_cls)


def test_factory_must_be_callable():
    with pytest.raises(TypeError):
        AdapterKindRegistry().register("sql", "not-callable")


def test_build_calls_factory_with_mapper_uri_and_options():
    calls = []

    def factory(mapper, uri, **options):
        calls.append((mapper, uri, options))
        return "live"

    reg = AdapterKindRegistry([("sql", factory)])
    spec = AdapterSpec(name="pg", kind="sql", uri="postgres://localhost/db", options={"ssl": True})

    assert reg.build(spec, "mapper") == "live"
    assert calls == [("mapper", "postgres://localhost/db", {"ssl": True})]
