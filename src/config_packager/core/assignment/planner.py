# src/config_packager/core/assignment/planner.py
"""
Planejador da ordem de aplicação dos métodos de atribuição.

Como a atribuição é terminal (o primeiro pacote a reivindicar um item o
mantém), a ordem dos métodos determina o resultado. Este módulo produz uma
ordem determinística para os métodos habilitados a partir das dependências
declaradas (`depends_on`) entre métodos registrados.

Decisões arquiteturais:
    - `depends_on` é uma restrição de ordem, não de presença: uma dependência
      para um método registrado mas desabilitado é descartada
    - Uma dependência para um método que não está registrado é erro
      (`UnknownDependencyError`), habilitado ou não
    - Habilitar um id não registrado é erro (`UnknownAssignmentMethodError`)
    - Empates são resolvidos por ordem lexicográfica de `method.id`
      (Kahn determinístico)

Invariantes:
    - Nenhum método é aplicado antes de suas dependências habilitadas
    - Cada método habilitado aparece exatamente uma vez
    - A mesma entrada produz sempre a mesma ordem

Limites explícitos:
    - Não aplica métodos
    - Não registra eventos
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Set

from config_packager.core.exceptions import PackagerException, UnknownAssignmentMethodError

from .method import AssignmentMethod


@dataclass(eq=False)
class UnknownDependencyError(PackagerException):
    """Um método declarou `depends_on` para um método não registrado."""


@dataclass(eq=False)
class CycleDetectedError(PackagerException):
    """
    As dependências entre métodos habilitados formam um ciclo.

    Nenhuma ordem parcial é produzida nesta condição; `details["pending"]`
    lista os métodos que não puderam ser ordenados.
    """


def _index(methods: Iterable[AssignmentMethod]) -> Dict[str, AssignmentMethod]:
    by_id: Dict[str, AssignmentMethod] = {}
    for m in methods:
        mid = getattr(m, "id", None)
        if not isinstance(mid, str) or not mid.strip():
            raise ValueError("method.id must be a non-empty string")
        if mid in by_id:
            raise ValueError(f"Duplicate assignment method id: {mid}")
        by_id[mid] = m
    return by_id


def plan_methods(
    methods: Iterable[AssignmentMethod],
    enabled: Optional[Iterable[str]] = None,
) -> List[AssignmentMethod]:
    """
    Produz a ordem de aplicação dos métodos habilitados.

    Args:
        methods (Iterable[AssignmentMethod]): Todos os métodos registrados.
        enabled (Optional[Iterable[str]]): Ids a aplicar; quando ausente,
            todos os métodos registrados.

    Returns:
        List[AssignmentMethod]: Métodos habilitados em ordem de aplicação.

    Raises:
        ValueError: Se algum método possuir `id` inválido ou duplicado.
        UnknownAssignmentMethodError: Se um id habilitado não estiver registrado.
        UnknownDependencyError: Se um método depender de um método não registrado.
        CycleDetectedError: Se houver ciclo entre os métodos habilitados.
    """
    by_id = _index(methods)

    for mid, m in by_id.items():
        for dep in getattr(m, "depends_on", None) or []:
            if dep not in by_id:
                raise UnknownDependencyError(
                    message=f"Método de atribuição '{mid}' depende de método não registrado '{dep}'",
                    details={"method": mid, "dependency": dep, "registered": list(by_id)},
                )

    selected = list(dict.fromkeys(by_id if enabled is None else enabled))
    for mid in selected:
        if mid not in by_id:
            raise UnknownAssignmentMethodError(
                message=f"Método de atribuição desconhecido: {mid}",
                details={"method": mid, "available": list(by_id)},
            )

    # dependências de métodos desabilitados não restringem a ordem
    active = set(selected)
    deps: Dict[str, List[str]] = {
        mid: [d for d in dict.fromkeys(by_id[mid].depends_on or []) if d in active]
        for mid in selected
    }

    incoming_count: Dict[str, int] = {mid: len(d) for mid, d in deps.items()}
    outgoing: Dict[str, Set[str]] = {mid: set() for mid in selected}
    for mid, dlist in deps.items():
        for dep in dlist:
            outgoing[dep].add(mid)

    ready: List[str] = sorted(mid for mid, c in incoming_count.items() if c == 0)
    order_ids: List[str] = []

    while ready:
        mid = ready.pop(0)
        order_ids.append(mid)
        for child in sorted(outgoing[mid]):
            incoming_count[child] -= 1
            if incoming_count[child] == 0:
                ready.append(child)
                ready.sort()

    if len(order_ids) != len(selected):
        pending = sorted(active - set(order_ids))
        raise CycleDetectedError(
            message="Ciclo entre métodos de atribuição habilitados: " + ", ".join(pending),
            details={"pending": pending},
            hint="Remova um dos métodos do ciclo de assignment.enabled ou ajuste depends_on.",
        )

    return [by_id[mid] for mid in order_ids]
