# src/config_packager/core/assignment/engine.py
"""
Motor de atribuição de itens de configuração a pacotes.

Cada item transita por uma máquina de estados simples:

    Unassigned → Assigned(pacote)

O estado `Assigned` é terminal até um `reset()` explícito do registry.

Operações (na ordem típica de um pipeline):
    1. `assign_config_package`   → atribuição explícita por nome
    2. `assign_config_by_pattern` → atribuição por padrão no short name
    3. `assign_config_dependents` → propagação de um salto via `dependents`

Decisões arquiteturais:
    - Itens já atribuídos são ignorados silenciosamente (idempotência)
    - Atribuir a um pacote não inicializado é erro de programação
      (`UnknownPackageError`), nunca criação implícita
    - O casamento por padrão percorre padrões e coleção em ordem decrescente
      de chave, para que pacotes "filhos" (ex.: `event_registration`)
      reivindiquem itens antes dos "pais" (ex.: `event`). A heurística é
      preservada literalmente; não é uma regra formal de maior casamento
    - A propagação de dependentes é de um salto por chamada; o fecho
      completo é obtido repetindo até não haver mudanças

Invariantes:
    - Um item aparece no `config` de no máximo um pacote
    - `Package.config` nunca contém duplicatas
    - `ConfigurationItem.package` é consistente com `Package.config`

Limites explícitos:
    - Não cria pacotes (exceto via métodos de atribuição, que chamam o registry)
    - Não renderiza arquivos
"""

from __future__ import annotations

import re
from typing import Iterable, List, Mapping, Optional

from config_packager.core.registry import PackageRegistry


PATTERN_DELIMITERS = r"[_\-.]"


def matches_pattern(pattern: str, short_name: str) -> bool:
    """
    Indica se `pattern` ocorre em `short_name` delimitado por `_`, `-` ou `.`.

    O short name é envolvido virtualmente por `.` no início e no fim, de modo
    que o padrão possa casar nas bordas.
    """
    regex = PATTERN_DELIMITERS + pattern + PATTERN_DELIMITERS
    return re.search(regex, "." + short_name + ".") is not None


class AssignmentEngine:
    """Operações de atribuição sobre um `PackageRegistry` explícito."""

    def __init__(self, registry: PackageRegistry):
        self.registry = registry

    def assign_config_package(self, package_name: str, item_names: Iterable[str]) -> int:
        """
        Atribui itens não atribuídos a `package_name`.

        Para cada item ainda livre e ausente do `config` do pacote: anexa o
        nome ao `config`, marca o item como atribuído e une suas dependências
        de módulo (`data.dependencies.module`) às do pacote.

        Returns:
            int: Quantidade de itens efetivamente atribuídos.

        Raises:
            UnknownPackageError: Se o pacote não foi inicializado.
        """
        package = self.registry.get_package(package_name)
        collection = self.registry.get_config_collection()

        assigned = 0
        for item_name in item_names:
            item = collection.get(item_name)
            if item is None or item.is_assigned or item_name in package.config:
                continue

            package.config.append(item_name)
            self.registry.mark_assigned(item_name, package_name)
            package.add_dependencies(item.declared_dependencies("module"))
            assigned += 1

        return assigned

    def assign_config_by_pattern(self, patterns: Mapping[str, str]) -> int:
        """
        Atribui itens cujo short name casa com um padrão ao pacote associado.

        Padrões cujo pacote não existe são ignorados.

        Args:
            patterns (Mapping[str, str]): `{padrão: machine name do pacote}`.

        Returns:
            int: Quantidade de itens atribuídos.
        """
        # ordem decrescente de chave: event_registration reivindica antes de event
        item_names = sorted(self.registry.get_config_collection(), reverse=True)

        assigned = 0
        for pattern in sorted(patterns, reverse=True):
            package_name = patterns[pattern]
            if not self.registry.has_package(package_name):
                continue
            for item_name in item_names:
                item = self.registry.get_item(item_name)
                if item is None or item.is_assigned:
                    continue
                if matches_pattern(pattern, item.short_name):
                    assigned += self.assign_config_package(package_name, [item_name])
        return assigned

    def assign_config_dependents(self, item_names: Optional[Iterable[str]] = None) -> int:
        """
        Propaga a atribuição para os dependentes diretos (um salto).

        Para cada item atribuído em `item_names` (padrão: todos), cada
        dependente ainda livre é atribuído ao mesmo pacote do item raiz.

        Returns:
            int: Quantidade de itens atribuídos nesta passada.
        """
        # retrato da coleção: itens atribuídos nesta passada não propagam nela
        snapshot = dict(self.registry.get_config_collection())
        names = list(item_names or [])
        if not names:
            names = list(snapshot)

        assigned = 0
        for item_name in names:
            item = snapshot.get(item_name)
            if item is None or not item.is_assigned:
                continue
            for dependent_name in item.dependents:
                dependent = self.registry.get_item(dependent_name)
                if dependent is not None and not dependent.is_assigned:
                    assigned += self.assign_config_package(item.package, [dependent_name])
        return assigned

    def assign_config_dependents_until_stable(self, item_names: Optional[Iterable[str]] = None) -> int:
        """
        Repete `assign_config_dependents` até uma passada não atribuir nada.

        Returns:
            int: Número de passadas executadas (incluindo a passada sem mudanças).
        """
        names: Optional[List[str]] = list(item_names or []) or None
        passes = 1
        while self.assign_config_dependents(names):
            passes += 1
            if names is not None:
                # dependentes recém-atribuídos também propagam no próximo salto
                names = self._with_dependents(names)
        return passes

    def _with_dependents(self, names: List[str]) -> List[str]:
        expanded = list(names)
        for name in names:
            item = self.registry.get_item(name)
            if item is None:
                continue
            for dependent in item.dependents:
                if dependent not in expanded:
                    expanded.append(dependent)
        return expanded
