# src/atlas_model/core/adapters/kinds.py
"""
AdapterKindRegistry v1: tabela explícita `kind -> fábrica de adapter`.

No Atlas Model, o `kind` declarado em `adapter(...)` não é resolvido por
convenção de nomes ou import dinâmico: cada implementação concreta é
registrada explicitamente no startup do processo.

Uma fábrica é qualquer callable com a assinatura:

    factory(mapper, uri, **options) -> adapter

(uma classe cujo `__init__` aceite esses argumentos também serve).

Limites explícitos:
    - Não contém implementações concretas de backends
    - Não abre conexões (isso acontece dentro da fábrica)
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from ..config.errors import UnknownAdapterKindError
from .spec import AdapterSpec

AdapterFactory = Callable[..., Any]


class AdapterKindRegistry:
    """Registry determinístico de fábricas de adapters.

    Extensibilidade é explícita: novos kinds são registrados via `register()`.
    Não há discovery automático.
    """

    def __init__(self, factories: Optional[Iterable[Tuple[str, AdapterFactory]]] = None):
        self._factories: Dict[str, AdapterFactory] = {}
        if factories:
            for kind, factory in factories:
                self.register(kind, factory)

    def register(self, kind: str, factory: AdapterFactory) -> None:
        if not isinstance(kind, str) or not kind.strip():
            raise ValueError("kind must be a non-empty string")
        if not callable(factory):
            raise TypeError("factory must be callable")
        if kind in self._factories:
            raise ValueError(f"adapter kind already registered: {kind}")
        self._factories[kind] = factory

    def list_kinds(self) -> List[str]:
        return sorted(self._factories.keys())

    def __contains__(self, kind: object) -> bool:
        return kind in self._factories

    def get(self, kind: str, *, adapter_name: Optional[str] = None) -> AdapterFactory:
        if kind not in self._factories:
            raise UnknownAdapterKindError(
                kind,
                registered=self._factories.keys(),
                adapter_name=adapter_name,
            )
        return self._factories[kind]

    def build(self, spec: AdapterSpec, mapper: Any) -> Any:
        """Instancia o adapter descrito por `spec`, ligado a `mapper`."""
        factory = self.get(spec.kind, adapter_name=spec.name)
        return factory(mapper, spec.uri, **spec.options)
