# src/atlas_model/core/config/__init__.py

"""
Camada de configuração em arquivo do Atlas Model.

Este pacote contém as estruturas responsáveis por carregar, mesclar e
identificar configurações declarativas de adapters, além da hierarquia
de exceções compartilhada por todo o core.

Responsabilidades do pacote:
    - Carregamento de arquivos (defaults + overrides locais)
    - Resolução via deep-merge determinístico
    - Hash canônico para rastreabilidade
    - Aplicação da seção `adapters` a uma `Configuration`

Limites explícitos:
    - Não define mapping
    - Não executa `load()`
"""
