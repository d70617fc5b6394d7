# src/atlas_model/core/adapters/__init__.py
"""
Adapters: especificações declaradas, tabela de kinds e registry.

## Componentes

- **spec**: `AdapterSpec`, registro imutável de um adapter declarado
- **validation**: defaults e validação estruturada das opções de registro
- **kinds**: `AdapterKindRegistry`, tabela explícita `kind -> fábrica`
- **registry**: `AdapterRegistry`, unicidade por nome, default único e build
- **adapter_set**: `AdapterSet`, visão somente-leitura com `default` e `fetch`
"""

from .adapter_set import AdapterSet
from .kinds import AdapterFactory, AdapterKindRegistry
from .registry import AdapterRegistry
from .spec import AdapterSpec

__all__ = ["AdapterFactory", "AdapterKindRegistry", "AdapterRegistry", "AdapterSet", "AdapterSpec"]
