"""
Core do Pipegen.

Este pacote reúne a implementação canônica da tradução de configurações
de pipeline em expressões textuais, independente da CLI.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada
    - livre de efeitos colaterais durante a tradução

Subpacotes:
    - config       → leitura de arquivos, deep-merge e hashing
    - pipeline     → tipos, variantes de transformação, registry e contexto
    - expression   → árvore de expressão e renderização
    - translator   → orquestração da tradução
    - traceability → Manifest de tradução

Limites explícitos:
    - Não executa pipelines
    - Não depende da CLI nem de frameworks externos de orquestração
"""
