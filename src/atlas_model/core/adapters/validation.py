# src/atlas_model/core/adapters/validation.py
"""
Validação estrutural das opções de `Configuration.adapter(...)`.

Este módulo separa a validação em duas etapas explícitas:

1. `apply_adapter_defaults` preenche `uri` (None) e `default` (False)
   quando ausentes. Isso acontece *antes* da checagem de obrigatórios,
   de modo que apenas `name` e `kind` podem ser reportados como ausentes.
2. `validate_adapter_options` produz um resultado estruturado contendo
   *todas* as violações encontradas (não apenas a primeira), como
   payloads canônicos (`AtlasErrorPayload`).

`raise_for_issues` converte o resultado em exceção tipada, priorizando
keywords ausentes (na ordem `name`, `kind`) sobre tipos inválidos.

Decisões arquiteturais:
    - Chaves não reconhecidas não são erro: seguem como `options` da fábrica
    - A validação nunca muta o dicionário recebido

Limites explícitos:
    - Não verifica se o `kind` possui implementação (isso ocorre no build)
    - Não verifica unicidade de nomes (re-registro sobrescreve)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..config.errors import InvalidAdapterOptionError, MissingKeywordError
from ..errors import (
    ADAPTER_MISSING_KEYWORD,
    AtlasErrorPayload,
    adapter_invalid_option,
    adapter_missing_keyword,
)
from .spec import AdapterSpec

REQUIRED_KEYWORDS = ("name", "kind")
RECOGNIZED_KEYWORDS = ("name", "kind", "uri", "default")


@dataclass(frozen=True)
class AdapterOptionsValidation:
    """Resultado estruturado da validação de opções de um adapter."""

    valid: bool
    issues: List[AtlasErrorPayload] = field(default_factory=list)

    @property
    def missing_keywords(self) -> List[str]:
        return [i.details["keyword"] for i in self.issues if i.type == ADAPTER_MISSING_KEYWORD]


def apply_adapter_defaults(options: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(options)
    out.setdefault("uri", None)
    # default=None is treated as absent
    if out.get("default") is None:
        out["default"] = False
    return out


def validate_adapter_options(options: Dict[str, Any]) -> AdapterOptionsValidation:
    issues: List[AtlasErrorPayload] = []

    for keyword in REQUIRED_KEYWORDS:
        if keyword not in options:
            issues.append(adapter_missing_keyword(keyword=keyword))
            continue
        value = options[keyword]
        if not isinstance(value, str) or not value.strip():
            issues.append(
                adapter_invalid_option(
                    option=keyword,
                    expected="non-empty string",
                    actual=type(value).__name__,
                )
            )

    uri = options.get("uri")
    if uri is not None and not isinstance(uri, str):
        issues.append(
            adapter_invalid_option(option="uri", expected="string or None", actual=type(uri).__name__)
        )

    default = options.get("default", False)
    if not isinstance(default, bool):
        issues.append(
            adapter_invalid_option(option="default", expected="bool", actual=type(default).__name__)
        )

    return AdapterOptionsValidation(valid=not issues, issues=issues)


def raise_for_issues(result: AdapterOptionsValidation) -> None:
    if result.valid:
        return
    missing = result.missing_keywords
    if missing:
        raise MissingKeywordError(missing[0])
    first = result.issues[0]
    raise InvalidAdapterOptionError(
        first.details["option"],
        expected=first.details["expected"],
        actual=first.details["actual"],
    )


def spec_from_options(options: Dict[str, Any]) -> AdapterSpec:
    """Constrói o `AdapterSpec` a partir de opções já validadas."""
    extra = {k: v for k, v in options.items() if k not in RECOGNIZED_KEYWORDS}
    return AdapterSpec(
        name=options["name"],
        kind=options["kind"],
        uri=options.get("uri"),
        default=options.get("default", False),
        options=extra,
    )
