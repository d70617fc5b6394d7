# src/atlas_model/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Atlas Model.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o registro de adapters, a definição do mapping, o ciclo de carga
(`load`) e a leitura de arquivos de configuração.

As exceções aqui definidas representam **violações arquiteturais
explícitas**, e não erros genéricos de execução.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao usuário

Responsabilidades do módulo:
    - Expressar falhas de registro e de carga de adapters
    - Expressar falhas estruturais de arquivos de configuração
    - Converter qualquer falha em `AtlasErrorPayload` serializável

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Toda exceção possui um código estável (`code`)

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra eventos (quem captura decide)
    - Não encapsula erros de adapters concretos ou do mapper

Este módulo existe para garantir clareza,
consistência e previsibilidade no tratamento de erros de configuração.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from ..errors import (
    ADAPTER_INVALID_OPTION,
    ADAPTER_MISSING_KEYWORD,
    ADAPTER_NO_DEFAULT,
    ADAPTER_NOT_FOUND,
    ADAPTER_UNKNOWN_KIND,
    CONFIG_ERROR,
    MAPPING_DUPLICATE_COLLECTION,
    MAPPING_INVALID,
    MAPPING_NOT_READY,
    MAPPING_UNKNOWN_COLLECTION,
    AtlasErrorPayload,
)


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do Atlas Model.

    Todas as exceções levantadas durante registro, validação estrutural,
    mapping e carga devem herdar desta classe.

    Esta hierarquia permite:
        - captura genérica de erros de configuração
        - conversão determinística para `AtlasErrorPayload`

    Limites explícitos:
        - Não representa erro de backend (conexão, query)
        - Não representa erro interno do mapper
    """

    code: str = CONFIG_ERROR

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.hint = hint

    def to_payload(self) -> AtlasErrorPayload:
        return AtlasErrorPayload(
            type=self.code,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
        )


# ---------------------------------------------------------------------------
# Registro de adapters
# ---------------------------------------------------------------------------

class MissingKeywordError(ConfigError, TypeError):
    """
    Exceção levantada quando `adapter(...)` é chamado sem `name` ou `kind`.

    Decisões arquiteturais:
        - Herda de `TypeError`, como a ausência de um keyword obrigatório
          numa chamada Python comum
        - A mensagem nomeia exatamente o campo ausente

    Limites explícitos:
        - Nunca é levantada para `uri` ou `default` (possuem defaults)
    """

    code = ADAPTER_MISSING_KEYWORD

    def __init__(self, keyword: str) -> None:
        super().__init__(
            f"missing keyword: {keyword}",
            details={"keyword": keyword},
            hint="name e kind são obrigatórios em adapter(...).",
        )
        self.keyword = keyword


class InvalidAdapterOptionError(ConfigError, ValueError):
    """Valor de opção de adapter presente, mas com tipo inválido."""

    code = ADAPTER_INVALID_OPTION

    def __init__(self, option: str, *, expected: str, actual: str) -> None:
        super().__init__(
            f"invalid adapter option '{option}': expected {expected}, got {actual}",
            details={"option": option, "expected": expected, "actual": actual},
        )
        self.option = option


class UnknownAdapterKindError(ConfigError, LookupError):
    """
    Exceção levantada quando um `kind` não possui implementação registrada.

    Decisões arquiteturais:
        - O despacho por `kind` é uma tabela explícita (`AdapterKindRegistry`)
        - A falha interrompe o build inteiro: nenhum adapter parcial é
          considerado pronto

    Invariantes:
        - `kind` contém exatamente o identificador não resolvido
    """

    code = ADAPTER_UNKNOWN_KIND

    def __init__(
        self,
        kind: str,
        *,
        registered: Iterable[str] = (),
        adapter_name: Optional[str] = None,
    ) -> None:
        registered = sorted(registered)
        super().__init__(
            f"unknown adapter kind: {kind}",
            details={"kind": kind, "registered": registered, "adapter": adapter_name},
            hint="Registre uma implementação para o kind antes de chamar load().",
        )
        self.kind = kind
        self.adapter_name = adapter_name


class AdapterNotFoundError(ConfigError, LookupError):
    """Nenhum adapter registrado com o nome solicitado."""

    code = ADAPTER_NOT_FOUND

    def __init__(self, name: str, *, registered: Iterable[str] = ()) -> None:
        registered = sorted(registered)
        super().__init__(
            f"adapter not found: {name}",
            details={"name": name, "registered": registered},
        )
        self.name = name


class NoDefaultAdapterError(ConfigError, LookupError):
    """Nenhum adapter foi registrado com `default=True`."""

    code = ADAPTER_NO_DEFAULT

    def __init__(self, message: str = "no default adapter registered") -> None:
        super().__init__(
            message,
            hint="Registre um adapter com default=True ou referencie o adapter pelo nome.",
        )


# ---------------------------------------------------------------------------
# Mapping
# ---------------------------------------------------------------------------

class InvalidMappingError(ConfigError):
    """
    Exceção levantada quando `mapping(...)` é chamado sem definição.

    Invariantes:
        - O mapper previamente configurado permanece inalterado
    """

    code = MAPPING_INVALID

    def __init__(self, message: str = "mapping requires a definition") -> None:
        super().__init__(message)


class MapperNotReadyError(ConfigError):
    """O mapper foi carregado antes de receber seus adapters."""

    code = MAPPING_NOT_READY

    def __init__(self, message: str = "mapper has no adapters assigned") -> None:
        super().__init__(message)


class DuplicateCollectionError(ConfigError, ValueError):
    """Duas coleções declaradas com o mesmo nome no mesmo mapping."""

    code = MAPPING_DUPLICATE_COLLECTION

    def __init__(self, name: str) -> None:
        super().__init__(f"duplicate collection: {name}", details={"collection": name})
        self.name = name


class CollectionNotFoundError(ConfigError, LookupError):
    """Nenhuma coleção declarada no mapping com o nome solicitado."""

    code = MAPPING_UNKNOWN_COLLECTION

    def __init__(self, name: str, *, declared: Iterable[str] = ()) -> None:
        super().__init__(
            f"collection not found: {name}",
            details={"collection": name, "declared": sorted(declared)},
        )
        self.name = name


# ---------------------------------------------------------------------------
# Arquivos de configuração
# ---------------------------------------------------------------------------

class ConfigFileNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração base (defaults)
    não é encontrado no caminho especificado.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório
        - O arquivo local é opcional e nunca gera este erro

    Limites explícitos:
        - Não tenta inferir ou criar defaults automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    não é um dicionário (`dict`).

    Limites explícitos:
        - Não tenta normalizar ou encapsular estruturas inválidas
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"adapters": {"main": {"kind": "sql"}}}
        - override: {"adapters": "main"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidAdapterSectionError(ConfigError):
    """A seção `adapters` do arquivo não é um mapa `nome -> opções`."""
