# src/atlas_model/core/configuration.py
"""
Configuração do Atlas Model: adapters, mapping e ciclo de carga.

Este módulo define a `Configuration`, ponto de entrada único através do
qual o host declara adapters de persistência, define o mapping e
materializa ambos em estado pronto para uso.

Fluxo típico:

    config = Configuration(kinds=kinds)
    config.adapter(name="sqlite3", kind="sql", uri="sqlite3://localhost/database")
    config.adapter(name="postgresql", kind="sql",
                   uri="postgres://localhost/database", default=True)

    @config.mapping
    def mapping(m):
        m.collection("users", entity=User)

    config.load()
    config.adapters.default   # adapter vivo "postgresql"

Responsabilidades do módulo:
    - Validar e encaminhar registros de adapters ao `AdapterRegistry`
    - Manter a definição de mapping (mapper)
    - Conduzir a carga em duas etapas: build dos adapters e finalização
      do mapper
    - Registrar eventos estruturados do ciclo de vida

Decisões arquiteturais:
    - Não existe configuração global: o host constrói a instância e a
      injeta onde for necessária (uma por processo, por convenção)
    - O registry é criado uma única vez e apenas limpo em `reset()`
    - `load()` pode ser chamado novamente e repete build + bind a partir
      do estado atual
    - Erros de adapters e do mapper propagam sem tradução

Invariantes:
    - Após `reset()`, o estado observável é idêntico ao de uma
      configuração recém-construída (sem adapters, sem mapper)
    - `mapping()` sem definição nunca altera o mapper atual

Limites explícitos:
    - Não protege contra `load()` sem mapper definido
    - Não aplica locking; o host serializa as chamadas de bootstrap
    - Não implementa backends concretos
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from .adapters.adapter_set import AdapterSet
from .adapters.kinds import AdapterKindRegistry
from .adapters.registry import AdapterRegistry
from .adapters.validation import (
    apply_adapter_defaults,
    raise_for_issues,
    spec_from_options,
    validate_adapter_options,
)
from .config.errors import InvalidMappingError
from .config.hashing import compute_config_hash
from .mapping.mapper import Mapper


class Configuration:
    """
    Configuração de adapters e mapping de um processo.

    Atributos:
        - kinds: tabela `kind -> fábrica` usada no build dos adapters
        - adapter_registry: registry exclusivo desta configuração
        - mapper: mapper definido via `mapping()`, ou None
        - events: log estruturado do ciclo de vida (reiniciado em `reset()`)

    Args:
        kinds (Optional[AdapterKindRegistry]): Tabela de kinds; uma tabela
            vazia é criada quando omitida.
        mapper_factory (Callable): Construtor do mapper a partir de uma
            definição. Permite substituir o `Mapper` padrão.
    """

    def __init__(
        self,
        *,
        kinds: Optional[AdapterKindRegistry] = None,
        mapper_factory: Callable[[Callable[..., Any]], Any] = Mapper,
    ) -> None:
        self.kinds = kinds if kinds is not None else AdapterKindRegistry()
        self.adapter_registry: Optional[AdapterRegistry] = None
        self.mapper: Optional[Any] = None
        self.events: List[Dict[str, Any]] = []
        self._mapper_factory = mapper_factory
        self.reset()

    # -----------------------------
    # Lifecycle
    # -----------------------------
    def reset(self) -> None:
        if self.adapter_registry is None:
            self.adapter_registry = AdapterRegistry(kinds=self.kinds)
        self.adapter_registry.reset()
        self.mapper = None
        self.events.clear()
        self._log(level="INFO", event="configuration.reset", message="configuration reset")

    unload = reset

    def load(self) -> None:
        """
        Materializa a configuração: constrói os adapters e carrega o mapper.

        Etapas:
            1. `adapter_registry.build(mapper)` instancia cada adapter
            2. `mapper.adapters = adapters` e `mapper.load()`

        Raises:
            UnknownAdapterKindError: Se algum `kind` não possuir fábrica;
                neste caso o mapper não recebe adapters nem é carregado.
        """
        adapters = self.adapter_registry.build(self.mapper)
        self.mapper.adapters = adapters
        self.mapper.load()
        self._log(
            level="INFO",
            event="load.completed",
            message="configuration loaded",
            adapters=adapters.names(),
            default=adapters.default_name,
            config_hash=self.config_hash(),
        )

    def configure(self, block: Callable[["Configuration"], Any]) -> "Configuration":
        block(self)
        return self

    # -----------------------------
    # Registration API
    # -----------------------------
    def adapter(self, **options: Any) -> None:
        """
        Registra um adapter.

        Chaves reconhecidas:
            - name (obrigatório): nome único do adapter
            - kind (obrigatório): implementação concreta (ver `kinds`)
            - uri: string de conexão (default None)
            - default: se o adapter é o default (default False)

        Chaves adicionais são repassadas à fábrica do adapter.

        Raises:
            MissingKeywordError: Se `name` ou `kind` estiver ausente.
            InvalidAdapterOptionError: Se algum valor tiver tipo inválido.
        """
        options = apply_adapter_defaults(options)
        raise_for_issues(validate_adapter_options(options))
        spec = spec_from_options(options)
        self.adapter_registry.register(spec)
        self._log(
            level="INFO",
            event="adapter.registered",
            message=f"adapter registered: {spec.name}",
            adapter=spec.name,
            kind=spec.kind,
            default=spec.default,
        )

    def mapping(self, definition: Optional[Callable[..., Any]] = None) -> Any:
        if definition is None:
            raise InvalidMappingError()
        self.mapper = self._mapper_factory(definition)
        self._log(level="INFO", event="mapping.defined", message="mapping defined")
        return self.mapper

    @property
    def adapters(self) -> AdapterSet:
        return self.adapter_registry.adapters

    def config_hash(self) -> str:
        return compute_config_hash(self.adapter_registry.snapshot())

    # -----------------------------
    # Logging
    # -----------------------------
    def _log(self, *, level: str, event: str, message: str, **extra: Any) -> None:
        record = {
            "level": level,
            "event": event,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        record.update(extra)
        self.events.append(record)
