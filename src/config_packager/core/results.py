"""
Config Packager — Canonical Generation Results (v1)

Este módulo define o catálogo de mensagens de resultado de geração e as
fábricas de `GenerationResult` usadas pelos writers.

Resultados são artefatos de domínio e fazem parte do contrato operacional
do sistema, devendo ser:

- explícitos
- serializáveis
- acionáveis pelo chamador (log ou exibição)

Nenhuma falha de escrita atravessa a fronteira do writer: ela vira um
resultado com `success=False`.
"""

from __future__ import annotations

from typing import Optional

from .types import GenerationResult, Package, PackageType


# ---------------------------------------------------------------------------
# Catálogo canônico de templates (v1)
# ---------------------------------------------------------------------------

ARCHIVE_SUCCESS = "{type} {package} gravado no arquivo compactado."
ARCHIVE_FAILURE = "{type} {package} não gravado no arquivo compactado. Erro: {error}."
WRITE_SUCCESS = "{type} {package} gravado em {directory}."
WRITE_FAILURE = "{type} {package} não gravado em {directory}. Erro: {error}."


def package_type_label(package: Package) -> str:
    return "Pacote" if package.type == PackageType.MODULE else "Perfil"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def archive_success(*, package: Package) -> GenerationResult:
    return GenerationResult(
        success=True,
        message=ARCHIVE_SUCCESS,
        variables={
            "type": package_type_label(package),
            "package": package.name,
        },
    )


def archive_failure(*, package: Package, error: Exception) -> GenerationResult:
    return GenerationResult(
        success=False,
        message=ARCHIVE_FAILURE,
        variables={
            "type": package_type_label(package),
            "package": package.name,
            "error": str(error) or error.__class__.__name__,
        },
    )


def write_success(*, package: Package, directory: str) -> GenerationResult:
    return GenerationResult(
        success=True,
        message=WRITE_SUCCESS,
        variables={
            "type": package_type_label(package),
            "package": package.name,
            "directory": directory,
        },
    )


def write_failure(
    *,
    package: Package,
    directory: str,
    error: Exception,
    hint: Optional[str] = None,
) -> GenerationResult:
    variables = {
        "type": package_type_label(package),
        "package": package.name,
        "directory": directory,
        "error": str(error) or error.__class__.__name__,
    }
    if hint:
        variables["hint"] = hint
    return GenerationResult(success=False, message=WRITE_FAILURE, variables=variables)
