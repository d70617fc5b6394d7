# src/atlas_model/core/adapters/adapter_set.py
"""
Visão somente-leitura dos adapters nomeados e do adapter default.

O `AdapterSet` é o objeto entregue ao mapper em `Configuration.load()`
e exposto ao host via `Configuration.adapters`. Antes do build, seus
valores são `AdapterSpec`; depois do build, são os adapters vivos.

Invariantes:
    - `default_name`, quando definido, é sempre uma chave do conjunto
    - O conjunto nunca é mutado após construído
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional

from ..config.errors import AdapterNotFoundError, NoDefaultAdapterError


class AdapterSet(Mapping):
    """Mapa imutável `nome -> adapter` com resolução de default."""

    def __init__(self, adapters: Dict[str, Any], default_name: Optional[str] = None) -> None:
        if default_name is not None and default_name not in adapters:
            raise ValueError(f"default adapter '{default_name}' is not part of the set")
        self._adapters: Dict[str, Any] = dict(adapters)
        self._default_name = default_name

    @property
    def default_name(self) -> Optional[str]:
        return self._default_name

    @property
    def default(self) -> Any:
        if self._default_name is None:
            raise NoDefaultAdapterError()
        return self._adapters[self._default_name]

    def fetch(self, name: str) -> Any:
        if name not in self._adapters:
            raise AdapterNotFoundError(name, registered=self._adapters.keys())
        return self._adapters[name]

    def names(self) -> List[str]:
        return list(self._adapters.keys())

    def __getitem__(self, name: str) -> Any:
        return self._adapters[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._adapters)

    def __len__(self) -> int:
        return len(self._adapters)

    def __repr__(self) -> str:
        return f"AdapterSet({self.names()!r}, default={self._default_name!r})"
