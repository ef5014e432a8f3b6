# src/config_packager/core/collection/graph.py
"""
Construtor do grafo de dependentes da coleção de configuração.

Cada item declara, em `data.dependencies.config`, os itens dos quais
depende (arestas diretas). Este módulo calcula as arestas reversas
(`dependents`): para cada item `A` que declara dependência de `B`,
`A.name` é anexado a `B.dependents`.

Decisões arquiteturais:
    - A ordem dos dependentes segue a ordem de encontro das declarações
    - Dependências para itens ausentes da coleção são ignoradas
    - Um mesmo dependente nunca aparece duas vezes
    - O cálculo parte de listas vazias; a função é determinística

Invariantes:
    - Nenhum item de entrada é mutado; entradas são reconstruídas via `replace`
    - O conjunto de chaves retornado é idêntico ao de entrada

Limites explícitos:
    - Não calcula fecho transitivo (apenas uma aresta por declaração)
    - Não atribui itens a pacotes
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, List, Mapping

from config_packager.core.types import ConfigurationItem


def build_dependents(collection: Mapping[str, ConfigurationItem]) -> Dict[str, ConfigurationItem]:
    dependents: Dict[str, List[str]] = {name: [] for name in collection}

    for item in collection.values():
        for dependency in item.declared_dependencies("config"):
            if dependency not in dependents:
                continue
            if item.name not in dependents[dependency]:
                dependents[dependency].append(item.name)

    return {
        name: replace(item, dependents=dependents[name])
        for name, item in collection.items()
    }
