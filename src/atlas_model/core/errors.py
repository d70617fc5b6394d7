"""
Atlas Model: Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do Atlas Model.
Erros de configuração são considerados artefatos do contrato operacional
do sistema, devendo ser:

- explícitos
- serializáveis
- rastreáveis
- acionáveis

Nenhuma decisão implícita é permitida.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AtlasErrorPayload:
    """
    Payload canônico de erro do Atlas Model.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Registro de adapters
ADAPTER_MISSING_KEYWORD = "ADAPTER_MISSING_KEYWORD"
ADAPTER_INVALID_OPTION = "ADAPTER_INVALID_OPTION"
ADAPTER_UNKNOWN_KIND = "ADAPTER_UNKNOWN_KIND"
ADAPTER_NOT_FOUND = "ADAPTER_NOT_FOUND"
ADAPTER_NO_DEFAULT = "ADAPTER_NO_DEFAULT"

# Mapping
MAPPING_INVALID = "MAPPING_INVALID"
MAPPING_NOT_READY = "MAPPING_NOT_READY"
MAPPING_DUPLICATE_COLLECTION = "MAPPING_DUPLICATE_COLLECTION"
MAPPING_UNKNOWN_COLLECTION = "MAPPING_UNKNOWN_COLLECTION"

# Arquivos de configuração
CONFIG_ERROR = "CONFIG_ERROR"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def adapter_missing_keyword(
    *,
    keyword: str,
    hint: str = "Declare o campo obrigatório na chamada de adapter(...): name e kind são exigidos.",
) -> AtlasErrorPayload:
    return AtlasErrorPayload(
        type=ADAPTER_MISSING_KEYWORD,
        message=f"missing keyword: {keyword}",
        details={"keyword": keyword},
        hint=hint,
    )


def adapter_invalid_option(
    *,
    option: str,
    expected: str,
    actual: str,
    hint: str = "Corrija o tipo do valor informado em adapter(...).",
) -> AtlasErrorPayload:
    return AtlasErrorPayload(
        type=ADAPTER_INVALID_OPTION,
        message=f"invalid adapter option '{option}': expected {expected}, got {actual}",
        details={"option": option, "expected": expected, "actual": actual},
        hint=hint,
    )
