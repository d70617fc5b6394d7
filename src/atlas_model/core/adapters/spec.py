# src/atlas_model/core/adapters/spec.py
"""
Especificação declarativa de um adapter.

Um `AdapterSpec` é o registro produzido por `Configuration.adapter(...)`
antes de qualquer conexão existir: ele descreve *qual* implementação
instanciar (`kind`), *onde* conectar (`uri`) e se o adapter é o
default da aplicação.

Invariantes:
    - `name` e `kind` estão sempre presentes (validados no registro)
    - `uri` ausente é representado por `None`
    - `default` ausente é representado por `False`
    - `options` participa da igualdade, mas não do hash
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class AdapterSpec:
    """
    Registro imutável de um adapter declarado.

    Campos:
        - name: identificador único do adapter no registry
        - kind: identificador da implementação concreta (ex.: "sql")
        - uri: string de conexão, ou None quando não há endpoint externo
        - default: indica se o adapter é o default da aplicação
        - options: opções adicionais repassadas à fábrica do adapter
    """

    name: str
    kind: str
    uri: Optional[str] = None
    default: bool = False
    options: Dict[str, Any] = field(default_factory=dict, hash=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "kind": self.kind,
            "uri": self.uri,
            "default": self.default,
            "options": dict(self.options),
        }
