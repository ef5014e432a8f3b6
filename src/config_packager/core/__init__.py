"""
Core do Config Packager.

O core reúne o motor de atribuição (grafo de dependentes, registry de
pacotes, atribuição explícita/por padrão/por dependência) e o motor de
materialização de arquivos (manifests, arquivos de configuração e writers).

O core é projetado para ser:
    - determinístico
    - testável de forma isolada
    - livre de estado global (registry e contexto explícitos por geração)

Limites explícitos:
    - Não depende de UI ou CLI
    - Não acessa o armazenamento da plataforma diretamente; a coleção é
      fornecida por uma fonte injetável
"""
