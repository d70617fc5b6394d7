# src/atlas_model/core/mapping/mapper.py
"""
Mapper mínimo: coleções da aplicação → adapters.

O mapper é construído a partir de uma definição (callable) que é
executada imediatamente, recebendo o próprio mapper como builder:

    def definition(m):
        m.collection("users", entity=User)
        m.collection("audit", adapter="sqlite3")

    mapper = Mapper(definition)

Ciclo de vida:
    1. construção (coleções declaradas)
    2. `mapper.adapters = <AdapterSet>` (feito por `Configuration.load()`)
    3. `mapper.load()` resolve cada coleção para um adapter vivo

Limites explícitos:
    - Não implementa atributos, tipos ou coerção de entidades
    - Não executa queries
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from ..config.errors import CollectionNotFoundError, DuplicateCollectionError, MapperNotReadyError
from ..adapters.adapter_set import AdapterSet


@dataclass(frozen=True)
class CollectionSpec:
    """Coleção declarada; `adapter=None` significa o adapter default."""

    name: str
    entity: Any = None
    adapter: Optional[str] = None


class Mapper:
    """Definição de mapping e ligação de coleções a adapters."""

    def __init__(self, definition: Callable[["Mapper"], Any]) -> None:
        self.collections: Dict[str, CollectionSpec] = {}
        self.adapters: Optional[AdapterSet] = None
        self.loaded = False
        self._bindings: Dict[str, Any] = {}
        definition(self)

    def collection(self, name: str, *, entity: Any = None, adapter: Optional[str] = None) -> CollectionSpec:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("collection name must be a non-empty string")
        if name in self.collections:
            raise DuplicateCollectionError(name)
        spec = CollectionSpec(name=name, entity=entity, adapter=adapter)
        self.collections[name] = spec
        return spec

    def load(self) -> None:
        """
        Resolve cada coleção declarada para um adapter vivo.

        Coleções com `adapter` explícito usam `adapters.fetch(nome)`;
        as demais usam `adapters.default`. A resolução é atômica: as
        ligações só são publicadas se todas as coleções resolverem.

        Raises:
            MapperNotReadyError: Se `adapters` não foi atribuído.
            AdapterNotFoundError: Se uma coleção referencia adapter inexistente.
            NoDefaultAdapterError: Se uma coleção depende do default e não há default.
        """
        if self.adapters is None:
            raise MapperNotReadyError()

        bindings: Dict[str, Any] = {}
        for name, spec in self.collections.items():
            if spec.adapter is not None:
                bindings[name] = self.adapters.fetch(spec.adapter)
            else:
                bindings[name] = self.adapters.default

        self._bindings = bindings
        self.loaded = True

    def resolve(self, collection: str) -> Any:
        if not self.loaded:
            raise MapperNotReadyError("mapper is not loaded")
        if collection not in self._bindings:
            raise CollectionNotFoundError(collection, declared=self._bindings.keys())
        return self._bindings[collection]

    def collection_names(self) -> List[str]:
        return list(self.collections.keys())
