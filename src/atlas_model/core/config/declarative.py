# src/atlas_model/core/config/declarative.py
"""
Aplicação de configuração declarativa (arquivos) a uma `Configuration`.

Este módulo conecta o loader de arquivos à API de registro: cada
entrada da seção `adapters` vira exatamente uma chamada a
`Configuration.adapter(name=..., **opções)`, passando pela mesma
validação de um registro feito em código.

Formato esperado da seção:

    adapters:
      <nome>:
        kind: <kind>
        uri: <uri>          # opcional
        default: true       # opcional
        <extra>: <valor>    # opcional, repassado à fábrica

Decisões arquiteturais:
    - O mapping nunca é declarado em arquivo (é sempre código)
    - A ausência da seção `adapters` não é erro
    - Entradas são registradas na ordem do arquivo
    - Todas as entradas são validadas antes do primeiro registro: uma
      entrada inválida não deixa registros parciais

Limites explícitos:
    - Não chama `load()`; o host decide quando materializar
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

from ..adapters.validation import (
    apply_adapter_defaults,
    raise_for_issues,
    validate_adapter_options,
)
from .errors import InvalidAdapterSectionError
from .loader import load_config

if TYPE_CHECKING:
    from ..configuration import Configuration


def apply_config(configuration: "Configuration", config: Dict[str, Any]) -> "Configuration":
    """
    Registra na `configuration` todos os adapters declarados em `config`.

    Args:
        configuration (Configuration): Configuração de destino.
        config (Dict[str, Any]): Configuração resolvida (ex.: `load_config`).

    Returns:
        Configuration: A própria configuração, para encadeamento.

    Raises:
        InvalidAdapterSectionError: Se a seção ou uma entrada não for um mapa.
        MissingKeywordError: Se uma entrada não declarar `kind`.
    """
    section = config.get("adapters")
    if section is None:
        return configuration

    if not isinstance(section, dict):
        raise InvalidAdapterSectionError(
            f"Seção 'adapters' deve ser dict, recebido: {type(section).__name__}"
        )

    entries = []
    for name, entry in section.items():
        if entry is None:
            entry = {}
        if not isinstance(entry, dict):
            raise InvalidAdapterSectionError(
                f"Adapter '{name}' deve ser dict, recebido: {type(entry).__name__}",
                details={"adapter": name},
            )
        options = dict(entry)
        options["name"] = name
        raise_for_issues(validate_adapter_options(apply_adapter_defaults(options)))
        entries.append(options)

    # registro só começa depois que todas as entradas passaram na validação
    for options in entries:
        configuration.adapter(**options)

    return configuration


def configure_from_files(
    configuration: "Configuration",
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> "Configuration":
    return apply_config(
        configuration,
        load_config(defaults_path=defaults_path, local_path=local_path),
    )
