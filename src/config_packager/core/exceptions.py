"""
Config Packager — Canonical Exceptions (v1)

Este módulo define exceções tipadas internas do Config Packager.

Objetivo:
- Permitir que registry, motor de atribuição e writers levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para GenerationResult
- Evitar ValueError/RuntimeError genéricos em guardrails críticos

Regras:
- Violações de invariantes (ex.: pacote não inicializado) propagam ao chamador.
- Falhas de I/O por arquivo são capturadas na fronteira do pacote pelos writers.
- Exceções devem carregar apenas dados estruturados (serializáveis).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(eq=False)
class PackagerException(Exception):
    """Base class para exceções internas do Config Packager.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Registry / Atribuição
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class UnknownPackageError(PackagerException):
    """Atribuição referenciou um pacote que nunca foi inicializado."""


@dataclass(eq=False)
class UnknownAssignmentMethodError(PackagerException):
    """Método de atribuição não registrado."""


@dataclass(eq=False)
class InvalidConfigItemError(PackagerException):
    """Export de configuração ilegível ou com raiz que não é mapa."""


# ---------------------------------------------------------------------------
# Saída (por arquivo; convertidas em GenerationResult pelos writers)
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class ArchiveWriteError(PackagerException):
    """Um arquivo não pôde ser adicionado ao arquivo compactado."""


@dataclass(eq=False)
class DirectoryCreateError(PackagerException):
    """Diretório de destino não pôde ser criado."""


@dataclass(eq=False)
class FileWriteError(PackagerException):
    """Conteúdo não pôde ser gravado no arquivo de destino."""
