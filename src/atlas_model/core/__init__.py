# src/atlas_model/core/__init__.py
"""
Core do Atlas Model.

Este pacote contém a implementação canônica do registro de adapters e do
ciclo de vida da configuração.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada (mapper e adapters são injetáveis)
    - livre de estado global

Componentes principais:
    - configuration → `Configuration` (registro, mapping, load/reset)
    - adapters      → `AdapterSpec`, `AdapterRegistry`, `AdapterKindRegistry`, `AdapterSet`
    - mapping       → `Mapper`
    - config        → loader de arquivos, deep-merge, hashing e exceções
"""
