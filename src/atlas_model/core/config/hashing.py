# src/atlas_model/core/config/hashing.py
"""
Hashing canônico de configuração do Atlas Model.

O hash gerado representa a **identidade estrutural** do conjunto de
adapters registrados (nomes, kinds, URIs, default) e é registrado no
evento `load.completed` da `Configuration`, permitindo comparar duas
inicializações do mesmo processo.

Princípios fundamentais:
    - Hashing determinístico e reprodutível
    - Independente da ordem original das chaves
    - Baseado em serialização JSON canônica (SHA-256)

Limites explícitos:
    - Não carrega nem resolve configuração
    - Não inclui adapters vivos, apenas suas especificações
"""


import json
import hashlib
from typing import Dict, Any


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash SHA-256 determinístico de uma configuração.

    Política de hashing (v1):
        - Serialização JSON canônica
        - Ordenação estável de chaves
        - Separadores compactos
        - Codificação UTF-8

    Args:
        config (Dict[str, Any]): Configuração (ex.: `AdapterRegistry.snapshot()`).

    Returns:
        str: Hash SHA-256 hexadecimal com 64 caracteres.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário ou não for
            serializável em JSON.
    """

    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
