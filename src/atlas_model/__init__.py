# src/atlas_model/__init__.py
"""
Atlas Model: camada de configuração e registro de adapters para mapeamento de dados.

Este pacote raiz define o namespace público do Atlas Model: a forma como
uma aplicação declara backends de persistência nomeados ("adapters"),
escolhe um deles como default, anexa uma definição de mapping e
materializa ambos em estado pronto para uso.

Arquitetura em alto nível:
    - core.configuration → ponto de entrada (adapter, mapping, load, reset)
    - core.adapters      → especificações, registry, tabela de kinds
    - core.mapping       → mapper mínimo (coleções → adapters)
    - core.config        → arquivos de configuração, merge, hashing e erros

Limites explícitos:
    - Não implementa backends concretos
    - Não executa queries
    - Não mantém configuração global
"""

from .core.adapters.adapter_set import AdapterSet
from .core.adapters.kinds import AdapterKindRegistry
from .core.adapters.spec import AdapterSpec
from .core.config.declarative import apply_config, configure_from_files
from .core.config.errors import (
    AdapterNotFoundError,
    CollectionNotFoundError,
    ConfigError,
    InvalidMappingError,
    MissingKeywordError,
    NoDefaultAdapterError,
    UnknownAdapterKindError,
)
from .core.configuration import Configuration
from .core.mapping.mapper import Mapper

__all__ = [
    "AdapterKindRegistry",
    "AdapterNotFoundError",
    "AdapterSet",
    "AdapterSpec",
    "CollectionNotFoundError",
    "ConfigError",
    "Configuration",
    "InvalidMappingError",
    "Mapper",
    "MissingKeywordError",
    "NoDefaultAdapterError",
    "UnknownAdapterKindError",
    "apply_config",
    "configure_from_files",
]
