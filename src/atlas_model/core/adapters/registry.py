# src/atlas_model/core/adapters/registry.py
"""
Registro de especificações de adapters.

Este módulo define o `AdapterRegistry`, responsável por manter os
adapters *declarados* (ainda não conectados), garantir a existência de
no máximo um default e, sob demanda, construir os adapters vivos
ligados a um mapper.

Responsabilidades do módulo:
    - Manter o mapa `nome -> AdapterSpec`
    - Manter o ponteiro para o adapter default
    - Construir adapters vivos via `AdapterKindRegistry`

Decisões arquiteturais:
    - Re-registro de um nome sobrescreve a especificação anterior
    - `default=True` move o ponteiro de default incondicionalmente
      (o último default registrado vence, sem erro)
    - O build é atômico: todos os adapters são construídos antes de
      qualquer resultado ser considerado pronto
    - Em falha de build, adapters parciais são fechados via `close()`
    - Re-registrar o default atual sem `default=True` limpa o ponteiro
      (desvio explícito da regra "o ponteiro só se move com default=True")
    - O build não altera as especificações registradas

Invariantes:
    - `default_name` é None ou uma chave presente nas especificações
    - No máximo um adapter é reportado como default
    - Após `reset()` o registry é indistinguível de um registry novo

Limites explícitos:
    - Não valida opções (ver `validation.py`)
    - Não carrega o mapper
    - Não aplica locking; chamadas devem ser serializadas pelo host

Estados observáveis:
    - vazio (após `reset()`)
    - populado (zero ou mais especificações; build opcional)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional

from .adapter_set import AdapterSet
from .kinds import AdapterKindRegistry
from .spec import AdapterSpec


@dataclass
class AdapterRegistry:
    """
    Registro canônico de especificações de adapters.

    Decisões arquiteturais:
        - As especificações são indexadas exclusivamente por `name`
        - A tabela de kinds é injetada, não global
        - O último build bem-sucedido fica disponível em `adapters`
          até a próxima mutação (`register` ou `reset`)

    Invariantes:
        - `_default_name` sempre resolve para uma chave de `_specs`
        - `_built`, quando presente, reflete exatamente `_specs`

    Limites explícitos:
        - Não abre conexões por conta própria
        - Não decide o que fazer na ausência de default
    """

    kinds: AdapterKindRegistry = field(default_factory=AdapterKindRegistry)
    _specs: Dict[str, AdapterSpec] = field(default_factory=dict, init=False, repr=False)
    _default_name: Optional[str] = field(default=None, init=False, repr=False)
    _built: Optional[AdapterSet] = field(default=None, init=False, repr=False)

    def reset(self) -> None:
        self._specs.clear()
        self._default_name = None
        self._built = None

    def register(self, spec: AdapterSpec) -> None:
        if not isinstance(spec, AdapterSpec):
            raise TypeError("spec must be an AdapterSpec")

        self._specs[spec.name] = spec
        if spec.default:
            self._default_name = spec.name
        elif self._default_name == spec.name:
            # departs from move-only-on-default: the stored spec no longer
            # declares default, so the pointer is cleared
            self._default_name = None
        self._built = None

    @property
    def default_name(self) -> Optional[str]:
        return self._default_name

    def get(self, name: str) -> AdapterSpec:
        return self._specs[name]

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    def build(self, mapper: Any) -> AdapterSet:
        """
        Constrói os adapters vivos de todas as especificações.

        Para cada especificação, despacha o `kind` para a fábrica
        registrada e a invoca com `(mapper, uri, **options)`. Os adapters
        são acumulados em um mapa temporário; só após o último ser
        construído o resultado é publicado.

        Se uma fábrica falhar, os adapters já construídos neste build
        são fechados (`close()`, quando existir) antes de a exceção
        propagar.

        Args:
            mapper (Any): Mapper ao qual os adapters são ligados.

        Returns:
            AdapterSet: Adapters vivos indexados por nome, com o mesmo default.

        Raises:
            UnknownAdapterKindError: Se algum `kind` não possuir fábrica.
        """
        live: Dict[str, Any] = {}
        try:
            for name, spec in self._specs.items():
                live[name] = self.kinds.build(spec, mapper)
        except Exception:
            _close_all(live.values())
            raise

        self._built = AdapterSet(live, default_name=self._default_name)
        return self._built

    @property
    def adapters(self) -> AdapterSet:
        if self._built is not None:
            return self._built
        return AdapterSet(self._specs, default_name=self._default_name)

    def snapshot(self) -> Dict[str, Any]:
        """Estado declarado em forma serializável (base do hash de configuração)."""
        adapters: Dict[str, Any] = {}
        for name, spec in self._specs.items():
            data = spec.to_dict()
            data["options"] = {k: _plain(v) for k, v in data["options"].items()}
            adapters[name] = data
        return {"default": self._default_name, "adapters": adapters}


def _plain(value: Any) -> Any:
    # opaque option values (pools, callables) are identified by repr
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return repr(value)


def _close_all(adapters: Iterable[Any]) -> None:
    # adapters without close() own no resources
    for adapter in adapters:
        close = getattr(adapter, "close", None)
        if callable(close):
            close()
